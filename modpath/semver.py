"""
Support for the `v`-prefixed semantic versions that identify module releases.

Module versions follow [Semantic Versioning 2.0.0](https://semver.org) with two
twists: they always start with a lowercase `v`, and they may be abbreviated to
`vMAJOR` or `vMAJOR.MINOR`, which stand for `vMAJOR.0.0` and `vMAJOR.MINOR.0`,
respectively. An abbreviated version cannot have a prerelease or build suffix.

This module represents each version with two tuples, `Data` and `Key`. `Data`
holds the segments as written, whereas `Key` implements the total order of
semantic-version precedence.
Functions that accept strings treat malformed versions as data, not errors:
`canonical()` returns the empty string for them and `compare()` orders them
before all valid versions. Only `Data.from_string()` raises.
"""

import re
from typing import NamedTuple


__all__ = (
    "Data",
    "Key",
    "is_valid",
    "canonical",
    "major",
    "major_minor",
    "prerelease",
    "build",
    "compare",
    "max",
)

_NUMBER = r"0|[1-9][0-9]*"
_PRERELEASE_IDENT = r"0|[1-9][0-9]*|[0-9]*[A-Za-z-][0-9A-Za-z-]*"
_BUILD_IDENT = r"[0-9A-Za-z-]+"

SYNTAX = re.compile(
    rf"""
        v
        (?P<major> {_NUMBER} )
        (?:
            [.] (?P<minor> {_NUMBER} )
            (?:
                [.] (?P<patch> {_NUMBER} )
                (?: - (?P<prerelease> (?:{_PRERELEASE_IDENT}) (?:[.](?:{_PRERELEASE_IDENT}))* ) )?
                (?: [+] (?P<build> {_BUILD_IDENT} (?:[.]{_BUILD_IDENT})* ) )?
            )?
        )?
    """,
    re.VERBOSE,
)


class Key(NamedTuple):
    """
    A version key for implementing semantic-version precedence. A release
    without prerelease identifiers has `is_release` 1 and therefore sorts after
    all of its prereleases. Numeric identifiers become `(0, value, '')` and
    alphanumeric ones `(1, 0, text)`, so that the former sort before the latter.
    """

    major: int
    minor: int
    patch: int
    is_release: int
    prerelease: tuple[tuple[int, int, str], ...]


class Data(NamedTuple):
    """
    The segments of a semantic version. `prerelease` and `build` preserve the
    dot-separated identifiers as written. `short` is the suffix that completes
    an abbreviated version, i.e., `.0.0`, `.0`, or the empty string.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...]
    build: tuple[str, ...]
    short: str

    @classmethod
    def from_string(cls, version: str) -> 'Data':
        """Parse the given version."""
        if (segments := SYNTAX.fullmatch(version)) is None:
            raise ValueError(f'not a semantic version "{version}"')

        minor, patch = segments.group('minor'), segments.group('patch')
        if minor is None:
            short = '.0.0'
        elif patch is None:
            short = '.0'
        else:
            short = ''

        def split(text: None | str) -> tuple[str, ...]:
            return () if text is None else tuple(text.split('.'))

        return cls(
            int(segments.group('major')),
            int(minor or 0),
            int(patch or 0),
            split(segments.group('prerelease')),
            split(segments.group('build')),
            short,
        )

    def prerelease_text(self) -> str:
        return '-' + '.'.join(self.prerelease) if self.prerelease else ''

    def build_text(self) -> str:
        return '+' + '.'.join(self.build) if self.build else ''

    def to_key(self) -> Key:
        """Compute the key for this version."""
        return Key(
            self.major,
            self.minor,
            self.patch,
            0 if self.prerelease else 1,
            tuple(
                (0, int(i), '') if i.isdigit() else (1, 0, i)
                for i in self.prerelease
            ),
        )

    def canonical(self) -> str:
        """Format the version with all three numbers and without build."""
        return f'v{self.major}.{self.minor}.{self.patch}{self.prerelease_text()}'

    def __str__(self) -> str:
        if self.short == '.0.0':
            return f'v{self.major}'
        if self.short == '.0':
            return f'v{self.major}.{self.minor}'
        return f'{self.canonical()}{self.build_text()}'


# --------------------------------------------------------------------------------------


def _parse(version: str) -> None | Data:
    try:
        return Data.from_string(version)
    except ValueError:
        return None


def is_valid(version: str) -> bool:
    """Determine whether the version is a valid semantic version."""
    return SYNTAX.fullmatch(version) is not None


def canonical(version: str) -> str:
    """
    Return the canonical form of the version, which spells out all three
    numbers and drops build metadata. For example, `v1.2+meta` is invalid, but
    `v1.2` becomes `v1.2.0` and `v1.2.3-pre+meta` becomes `v1.2.3-pre`. A
    malformed version has the empty string as canonical form.
    """
    data = _parse(version)
    return '' if data is None else data.canonical()


def major(version: str) -> str:
    """Return the major version prefix, e.g., `v2`, or the empty string."""
    data = _parse(version)
    return '' if data is None else f'v{data.major}'


def major_minor(version: str) -> str:
    """Return the major and minor version prefix, e.g., `v2.1`, or the empty string."""
    data = _parse(version)
    return '' if data is None else f'v{data.major}.{data.minor}'


def prerelease(version: str) -> str:
    """Return the prerelease suffix including its leading `-` or the empty string."""
    data = _parse(version)
    return '' if data is None else data.prerelease_text()


def build(version: str) -> str:
    """Return the build suffix including its leading `+` or the empty string."""
    data = _parse(version)
    return '' if data is None else data.build_text()


def compare(v: str, w: str) -> int:
    """
    Compare two versions by semantic-version precedence, returning -1, 0, or 1.
    Build metadata does not contribute to precedence. Malformed versions are
    equal to each other and less than all valid versions.
    """
    dv, dw = _parse(v), _parse(w)
    if dv is None and dw is None:
        return 0
    if dv is None:
        return -1
    if dw is None:
        return 1

    kv, kw = dv.to_key(), dw.to_key()
    return (kv > kw) - (kv < kw)


def max(v: str, w: str) -> str:
    """
    Return the larger of the two versions in canonical form. On a tie, return
    `w`. If both versions are malformed, the result is the empty string.
    """
    v, w = canonical(v), canonical(w)
    return v if compare(v, w) > 0 else w
