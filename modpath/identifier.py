"""Module identifiers, i.e., path and version pairs, and their ordering."""

from collections.abc import MutableSequence
from typing import NamedTuple

from . import semver
from .grammar import check


__all__ = ("Identifier", "canonical_version", "sort_key", "compare", "sort")

INCOMPATIBLE = "+incompatible"


class Identifier(NamedTuple):
    """
    A module path and version. The path is stored in its unescaped form. By
    convention, the version is a canonical semantic version, but nothing
    enforces that before `check()`.
    """

    path: str
    version: str

    def check(self) -> None:
        """Check that path and version are valid and correspond to each other."""
        check(self.path, self.version)

    def __str__(self) -> str:
        return f'{self.path}@{self.version}'


def canonical_version(version: str) -> str:
    """
    Return the canonical form of the version. Unlike `semver.canonical()`, this
    function preserves the build metadata `+incompatible`, which marks
    versions with major version 2 or higher for modules without a suffix.
    """
    cv = semver.canonical(version)
    if semver.build(version) == INCOMPATIBLE:
        cv += INCOMPATIBLE
    return cv


# --------------------------------------------------------------------------------------


def sort_key(identifier: Identifier) -> tuple[object, ...]:
    """
    Compute the sort key for the identifier. Identifiers are ordered by path
    first. Versions may carry a suffix introduced by a slash, as in
    `v0.1.0/go.mod`. They are ordered by semantic-version precedence of the part
    before the slash, then by the suffix. Versions that are equal by those two
    criteria but spelled differently, say `v1` and `v1.0.0`, are ordered by
    their text, so that sorting is deterministic.
    """
    path, version = identifier
    base, slash, suffix = version.partition('/')
    try:
        precedence: tuple[object, ...] = (1, semver.Data.from_string(base).to_key())
    except ValueError:
        precedence = (0,)
    return path, precedence, slash + suffix, version


def compare(a: Identifier, b: Identifier) -> int:
    """Compare two identifiers, returning -1, 0, or 1."""
    ka, kb = sort_key(a), sort_key(b)
    return (ka > kb) - (ka < kb)  # type: ignore[operator]


def sort(identifiers: MutableSequence[Identifier]) -> None:
    """Sort the identifiers in place."""
    identifiers[:] = sorted(identifiers, key=sort_key)
