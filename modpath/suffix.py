"""
Support for the major-version suffix of module paths.

Starting with major version 2, a module path must end in `/vN`, e.g.,
`example.com/pkg/v2`, and only versions with major version N match that path.
Paths without suffix match major versions 0 and 1. Paths served by `gopkg.in`
follow an older convention and always carry the major version as `.vN`,
including for N of 0 and 1, as in `gopkg.in/yaml.v2`. They may additionally end
in `-unstable`.
"""

from . import semver


__all__ = (
    "LEGACY_PREFIX",
    "split_path_version",
    "split_gopkg_in",
    "match_path_major",
    "want_major",
)

LEGACY_PREFIX = "gopkg.in/"
UNSTABLE = "-unstable"
PSEUDO_V0 = "v0.0.0-"
INCOMPATIBLE = "+incompatible"


def _is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def split_path_version(path: str) -> tuple[str, str, bool]:
    """
    Split the path into its prefix and major-version suffix, so that
    `prefix + suffix == path` holds. The suffix is either empty or `/vN` for N
    of 2 or larger. This function returns `False` as last element when the
    final path element looks like a major version but violates the rules, as
    for `example.com/pkg/v1` or `example.com/pkg/v1.2`. For `gopkg.in` paths,
    it delegates to `split_gopkg_in()`.
    """
    if path.startswith(LEGACY_PREFIX):
        return split_gopkg_in(path)

    i = len(path)
    dot = False
    while i > 0 and (_is_digit(path[i - 1]) or path[i - 1] == '.'):
        if path[i - 1] == '.':
            dot = True
        i -= 1
    if i <= 1 or i == len(path) or path[i - 1] != 'v' or path[i - 2] != '/':
        return path, '', True

    prefix, path_major = path[: i - 2], path[i - 2 :]
    if dot or len(path_major) <= 2 or path_major[2] == '0' or path_major == '/v1':
        return path, '', False
    return prefix, path_major, True


def split_gopkg_in(path: str) -> tuple[str, str, bool]:
    """
    Split a `gopkg.in` path into its prefix and `.vN` suffix. Unlike with
    other paths, the suffix is mandatory and may be `.v0` or `.v1`. A trailing
    `-unstable` becomes part of the suffix.
    """
    if not path.startswith(LEGACY_PREFIX):
        return path, '', False

    i = len(path)
    if path.endswith(UNSTABLE):
        i -= len(UNSTABLE)
    while i > 0 and _is_digit(path[i - 1]):
        i -= 1
    if i <= 1 or path[i - 1] != 'v' or path[i - 2] != '.':
        return path, '', False

    prefix, path_major = path[: i - 2], path[i - 2 :]
    if len(path_major) <= 2 or path_major[2] == '0' and path_major != '.v0':
        return path, '', False
    return prefix, path_major, True


def match_path_major(version: str, path_major: str) -> bool:
    """Determine whether the semantic version matches the path's major version suffix."""
    if path_major.startswith('.v') and path_major.endswith(UNSTABLE):
        path_major = path_major.removesuffix(UNSTABLE)
    if version.startswith(PSEUDO_V0) and path_major == '.v1':
        # Early pseudo-versions for gopkg.in/...v1 paths were generated as v0.0.0-.
        return True

    m = semver.major(version)
    if path_major == '':
        return m == 'v0' or m == 'v1' or semver.build(version) == INCOMPATIBLE
    return path_major[0] in '/.' and m == path_major[1:]


def want_major(path_major: str) -> str:
    """Describe the major versions matching the suffix, e.g., for error messages."""
    if path_major == '':
        return 'v0 or v1'
    if path_major[0] in '/.':
        return path_major[1:]
    return path_major
