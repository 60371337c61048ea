"""
Validation, escaping, and ordering of module identifiers, i.e., pairs of module
path and semantic version such as `golang.org/x/text@v0.3.0`.
"""

from .error import ModulePathError, Reason, Subject
from .escape import escape_path, escape_version, unescape_path, unescape_version
from .grammar import (
    check,
    check_file_path,
    check_import_path,
    check_module_path,
    ElementKind,
)
from .identifier import canonical_version, compare, Identifier, sort, sort_key
from .suffix import match_path_major, split_path_version


__version__ = "0.1.0"

__all__ = (
    "ModulePathError",
    "Reason",
    "Subject",
    "escape_path",
    "escape_version",
    "unescape_path",
    "unescape_version",
    "check",
    "check_file_path",
    "check_import_path",
    "check_module_path",
    "ElementKind",
    "canonical_version",
    "compare",
    "Identifier",
    "sort",
    "sort_key",
    "match_path_major",
    "split_path_version",
)
