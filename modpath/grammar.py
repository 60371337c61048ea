"""
Support for checking import paths, module paths, and file paths.

All three kinds of paths consist of one or more nonempty elements separated by
slashes. They differ in the characters allowed in each element:

  * Import and module paths are limited to ASCII letters, ASCII digits, and the
    punctuation `+ - . _ ~`. Module paths further restrict their first element,
    by convention a domain name, to lowercase ASCII letters, ASCII digits, dots,
    and dashes. It must contain a dot and must not start with a dash. Finally,
    a module path's major-version suffix must be well-formed.
  * File paths additionally allow the space, the ASCII punctuation
    `! # $ % & ( ) , = @ [ ] ^ { }`, and all Unicode letters. Their elements
    may start with a dot.

No element may consist of dots only or end with a dot, and the part of an
element before its first dot must not be one of the device names reserved on
Windows, regardless of case. Paths are checked with the same loop, which takes
the `ElementKind` selecting the allowed characters as argument.
"""

from enum import Enum
import logging

from . import semver
from .error import ModulePathError, Problem, Reason, Subject
from .suffix import match_path_major, split_path_version, want_major


__all__ = (
    "ElementKind",
    "RESERVED_NAMES",
    "check_element",
    "check_import_path",
    "check_module_path",
    "check_file_path",
    "check",
)

logger = logging.getLogger("modpath.grammar")


RESERVED_NAMES = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{n}" for n in range(1, 10)]
    + [f"LPT{n}" for n in range(1, 10)]
)

_ALNUM = frozenset(
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
)
_PATH_CHARS = _ALNUM | frozenset("+-._~")
# All ASCII punctuation except the shell specials " ' * < > ? ` | and the
# separators / : \
_FILE_CHARS = _ALNUM | frozenset("!#$%&()+,-.=@[]^_{} ~")
_FIRST_CHARS = frozenset("0123456789abcdefghijklmnopqrstuvwxyz-.")


class ElementKind(Enum):
    """The kind of path element, which determines the allowed characters."""

    IMPORT_PATH = "import"
    FILE_PATH = "file"

    def accepts(self, char: str) -> bool:
        """Determine whether the character may appear in this kind of element."""
        if self is ElementKind.IMPORT_PATH:
            return char in _PATH_CHARS
        if char.isascii():
            return char in _FILE_CHARS
        return char.isalpha()


# --------------------------------------------------------------------------------------


def _is_utf8(text: str) -> bool:
    try:
        text.encode('utf8')
    except UnicodeEncodeError:
        return False
    return True


def check_element(element: str, kind: ElementKind) -> None | Problem:
    """Check the path element, returning the first violated rule if any."""
    if element == '':
        return Problem(Reason.EMPTY_ELEMENT)
    if element.count('.') == len(element):
        return Problem(Reason.DOTS_ONLY_ELEMENT, element=element)
    if element[0] == '.' and kind is not ElementKind.FILE_PATH:
        return Problem(Reason.LEADING_DOT)
    if element[-1] == '.':
        return Problem(Reason.TRAILING_DOT)
    for char in element:
        if not kind.accepts(char):
            return Problem(Reason.INVALID_CHAR, char=char)

    short = element.partition('.')[0]
    # The reserved names are ASCII, and no other character folds to their letters.
    if short.isascii() and short.upper() in RESERVED_NAMES:
        return Problem(Reason.RESERVED_NAME, element=short)
    return None


def _check_path(path: str, kind: ElementKind) -> None | Problem:
    if not _is_utf8(path):
        return Problem(Reason.INVALID_UTF8)
    if path == '':
        return Problem(Reason.EMPTY_STRING)
    if '..' in path:
        return Problem(Reason.DOUBLE_DOT)
    if '//' in path:
        return Problem(Reason.DOUBLE_SLASH)
    if path[-1] == '/':
        return Problem(Reason.TRAILING_SLASH)
    for element in path.split('/'):
        if (problem := check_element(element, kind)) is not None:
            return problem
    return None


def _check_module_path(path: str) -> None | Problem:
    if (problem := _check_path(path, ElementKind.IMPORT_PATH)) is not None:
        return problem

    first = path.partition('/')[0]
    if first == '':
        return Problem(Reason.LEADING_SLASH)
    if '.' not in first:
        return Problem(Reason.MISSING_DOT)
    if path[0] == '-':
        return Problem(Reason.LEADING_DASH)
    for char in first:
        if char not in _FIRST_CHARS:
            return Problem(Reason.INVALID_FIRST_CHAR, char=char)
    if not split_path_version(path)[2]:
        return Problem(Reason.INVALID_VERSION_SUFFIX)
    return None


def _reject(problem: Problem, subject: Subject, text: str) -> ModulePathError:
    error = problem.to_error(subject, text)
    logger.debug('%s', error)
    return error


# --------------------------------------------------------------------------------------


def check_import_path(path: str) -> None:
    """
    Check that the import path is valid. It must consist of one or more valid
    path elements separated by slashes and must neither begin nor end with a
    slash.
    """
    if (problem := _check_path(path, ElementKind.IMPORT_PATH)) is not None:
        raise _reject(problem, Subject.IMPORT_PATH, path)


def check_module_path(path: str) -> None:
    """
    Check that the module path is valid. A valid module path is a valid import
    path whose first element is a lowercase domain name with at least one dot
    and whose major-version suffix, if any, is well-formed.
    """
    if (problem := _check_module_path(path)) is not None:
        raise _reject(problem, Subject.MODULE_PATH, path)


def check_file_path(path: str) -> None:
    """
    Check that the slash-separated file path is valid. The rules are the same
    as for import paths, except that elements may start with a dot and draw on
    a larger set of characters.
    """
    if (problem := _check_path(path, ElementKind.FILE_PATH)) is not None:
        raise _reject(problem, Subject.FILE_PATH, path)


def check(path: str, version: str) -> None:
    """
    Check that the module path and version are valid and correspond to each
    other. For example, `example.com/pkg/v2` only corresponds to versions with
    major version 2, whereas `example.com/pkg` corresponds to versions with
    major version 0 or 1.
    """
    check_module_path(path)
    if not semver.is_valid(version):
        error = ModulePathError(Subject.VERSION, version, Reason.INVALID_SEMVER)
        logger.debug('%s', error)
        raise error

    path_major = split_path_version(path)[1]
    if not match_path_major(version, path_major):
        error = ModulePathError(
            Subject.MODULE_PATH,
            path,
            Reason.MISMATCHED_MAJOR,
            version=version,
            want=want_major(path_major),
        )
        logger.debug('%s', error)
        raise error
