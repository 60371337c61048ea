"""
The errors raised when module paths, versions, or their escaped forms are
malformed. Every error names what was being checked, quotes the offending input
verbatim, and carries a `Reason` from a small, fixed vocabulary. Callers should
dispatch on `reason` instead of parsing messages.
"""

from enum import Enum
from typing import NamedTuple


__all__ = ("Reason", "Subject", "Problem", "ModulePathError")


class Subject(Enum):
    """What was being checked."""

    IMPORT_PATH = "import path"
    MODULE_PATH = "module path"
    FILE_PATH = "file path"
    VERSION = "version"
    ESCAPED_MODULE_PATH = "escaped module path"
    ESCAPED_VERSION = "escaped version"


class Reason(Enum):
    """Why the check failed."""

    EMPTY_STRING = "empty string"
    INVALID_UTF8 = "invalid UTF-8"
    DOUBLE_DOT = "double dot"
    DOUBLE_SLASH = "double slash"
    TRAILING_SLASH = "trailing slash"
    LEADING_SLASH = "leading slash"
    EMPTY_ELEMENT = "empty path element"
    DOTS_ONLY_ELEMENT = "invalid path element"
    LEADING_DOT = "leading dot in path element"
    TRAILING_DOT = "trailing dot in path element"
    INVALID_CHAR = "invalid char"
    RESERVED_NAME = "disallowed as path element component on Windows"
    MISSING_DOT = "missing dot in first path element"
    LEADING_DASH = "leading dash in first path element"
    INVALID_FIRST_CHAR = "invalid char in first path element"
    INVALID_VERSION_SUFFIX = "invalid version"
    INVALID_SEMVER = "malformed semantic version"
    MISMATCHED_MAJOR = "mismatched module path and version"
    DISALLOWED_VERSION = "disallowed version string"
    INVALID_ESCAPE = "invalid escaped form"
    INTERNAL_INCONSISTENCY = "internal error: inconsistency in escaping"


class Problem(NamedTuple):
    """A violated rule, not yet attributed to a subject and input."""

    reason: Reason
    element: None | str = None
    char: None | str = None

    def to_error(self, subject: Subject, text: str) -> 'ModulePathError':
        return ModulePathError(
            subject, text, self.reason, element=self.element, char=self.char)


class ModulePathError(ValueError):
    """A module path, version, or escaped form violates the rules."""

    def __init__(
        self,
        subject: Subject,
        text: str,
        reason: Reason,
        *,
        element: None | str = None,
        char: None | str = None,
        version: None | str = None,
        want: None | str = None,
    ) -> None:
        self.subject = subject
        self.text = text
        self.reason = reason
        self.element = element
        self.char = char
        self.version = version
        self.want = want
        super().__init__(self.message())

    def explain(self) -> str:
        """Describe the violated rule without mentioning the checked input."""
        match self.reason:
            case Reason.DOTS_ONLY_ELEMENT:
                return f'invalid path element "{self.element}"'
            case Reason.INVALID_CHAR:
                return f'invalid char {self.char!r}'
            case Reason.INVALID_FIRST_CHAR:
                return f'invalid char {self.char!r} in first path element'
            case Reason.RESERVED_NAME:
                return f'"{self.element}" {self.reason.value}'
            case Reason.INVALID_ESCAPE:
                cause = self.__cause__
                if isinstance(cause, ModulePathError):
                    return cause.explain()
                return self.reason.value
            case _:
                return self.reason.value

    def message(self) -> str:
        match self.reason:
            case Reason.INVALID_SEMVER:
                return f'malformed semantic version "{self.text}"'
            case Reason.DISALLOWED_VERSION:
                return f'disallowed version string "{self.text}"'
            case Reason.MISMATCHED_MAJOR:
                return (
                    f'mismatched module path "{self.text}" and version '
                    f'"{self.version}" (want {self.want})'
                )
            case Reason.INTERNAL_INCONSISTENCY:
                return f'{self.reason.value} "{self.text}"'
            case Reason.INVALID_ESCAPE:
                prefix = f'invalid {self.subject.value} "{self.text}"'
                cause = self.__cause__
                if isinstance(cause, ModulePathError):
                    return f'{prefix}: {cause.explain()}'
                return prefix
            case _:
                return f'malformed {self.subject.value} "{self.text}": {self.explain()}'

    def __str__(self) -> str:
        return self.message()
