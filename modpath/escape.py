"""
Support for the case-insensitive escaped form of module paths and versions.

Module paths show up in file system paths of download caches and in the URLs
of module proxies. Neither file systems nor web servers can be relied upon to
keep `example.com/QUOTE` and `example.com/quote` apart. The escaped form hence
replaces every uppercase letter with an exclamation mark followed by the
lowercase letter:

    github.com/Azure/azure-sdk-for-go -> github.com/!azure/azure-sdk-for-go
    github.com/GoogleCloudPlatform/cloudsql-proxy
        -> github.com/!google!cloud!platform/cloudsql-proxy

Paths without uppercase letters are left unchanged. Since valid paths are ASCII
and never contain exclamation marks, escaping is injective and needs no rule
for escaping a literal `!`.
"""

import logging

from .error import ModulePathError, Reason, Subject
from .grammar import check_element, check_module_path, ElementKind


__all__ = ("escape_path", "escape_version", "unescape_path", "unescape_version")

logger = logging.getLogger("modpath.escape")


def escape_path(path: str) -> str:
    """Return the escaped form of the module path, which must be valid."""
    check_module_path(path)
    return _escape(path, Subject.MODULE_PATH)


def escape_version(version: str) -> str:
    """
    Return the escaped form of the version. Versions need not be semantic
    versions, but they must be valid file names and must not contain
    exclamation marks.
    """
    if check_element(version, ElementKind.FILE_PATH) is not None or '!' in version:
        error = ModulePathError(Subject.VERSION, version, Reason.DISALLOWED_VERSION)
        logger.debug('%s', error)
        raise error
    return _escape(version, Subject.VERSION)


def unescape_path(escaped: str) -> str:
    """Return the module path for the escaped path, which must describe a valid path."""
    if (path := _unescape(escaped)) is None:
        raise _invalid(Subject.ESCAPED_MODULE_PATH, escaped)
    try:
        check_module_path(path)
    except ModulePathError as x:
        raise _invalid(Subject.ESCAPED_MODULE_PATH, escaped) from x
    return path


def unescape_version(escaped: str) -> str:
    """Return the version for the escaped version, which must be a valid file name."""
    if (version := _unescape(escaped)) is None:
        raise _invalid(Subject.ESCAPED_VERSION, escaped)
    if (problem := check_element(version, ElementKind.FILE_PATH)) is not None:
        raise _invalid(Subject.ESCAPED_VERSION, escaped) from problem.to_error(
            Subject.VERSION, version)
    return version


# --------------------------------------------------------------------------------------


def _escape(text: str, subject: Subject) -> str:
    has_upper = False
    for char in text:
        if char == '!' or not char.isascii():
            # The checks above rule this out, yet the loop below depends on it.
            logger.warning('escaping "%s" despite "!" or non-ASCII character', text)
            raise ModulePathError(subject, text, Reason.INTERNAL_INCONSISTENCY)
        if 'A' <= char <= 'Z':
            has_upper = True

    if not has_upper:
        return text
    return ''.join(f'!{c.lower()}' if 'A' <= c <= 'Z' else c for c in text)


def _unescape(escaped: str) -> None | str:
    chars: list[str] = []
    bang = False
    for char in escaped:
        if not char.isascii():
            return None
        if bang:
            bang = False
            if not 'a' <= char <= 'z':
                return None
            chars.append(char.upper())
            continue
        if char == '!':
            bang = True
            continue
        if 'A' <= char <= 'Z':
            return None
        chars.append(char)
    if bang:
        return None
    return ''.join(chars)


def _invalid(subject: Subject, escaped: str) -> ModulePathError:
    error = ModulePathError(subject, escaped, Reason.INVALID_ESCAPE)
    logger.debug('invalid %s "%s"', subject.value, escaped)
    return error
