from .console import Console
from modpath import semver
from modpath.semver import Data


def test_validate_version(console: Console) -> None:
    for version in (
        'v0',
        'v1',
        'v1.2',
        'v1.2.3',
        'v1.2.3-pre',
        'v1.2.3-0a',
        'v1.2.3-pre.1+meta',
        'v1.2.3+meta-data.007',
        'v2.0.0+incompatible',
        'v0.0.0-20161208181325-20d25e280405',
    ):
        console.assert_op(semver.is_valid, version)

    for version in (
        '',
        'v',
        '1.2.3',
        'V1.2.3',
        'v01',
        'v1.02',
        'v1.2.03',
        'v1.2.3.4',
        'v1.2.3-',
        'v1.2.3-01',
        'v1.2.3-a..b',
        'v1.2.3+',
        'v1.2.3+a+b',
        'v1.2-pre',
        'v1+meta',
        'v1.2.3 ',
        'v1.2.٣',
    ):
        console.assert_op(semver.is_valid, version, expected=False)


def test_parse_version(console: Console) -> None:
    for input, output_text, output_data in (
        ('v1', 'v1', (1, 0, 0, (), (), '.0.0')),
        ('v1.2', 'v1.2', (1, 2, 0, (), (), '.0')),
        ('v1.2.3', 'v1.2.3', (1, 2, 3, (), (), '')),
        ('v1.2.3-pre.1+b.7', 'v1.2.3-pre.1+b.7', (1, 2, 3, ('pre', '1'), ('b', '7'), '')),
    ):
        actual = Data.from_string(input)
        console.assert_eq(str(actual), output_text)
        console.assert_eq(tuple(actual), output_data)

    console.assert_raises(ValueError, Data.from_string, 'v1.2-pre')


def test_version_segments(console: Console) -> None:
    for fn, version, expected in (
        (semver.canonical, 'v1', 'v1.0.0'),
        (semver.canonical, 'v1.2', 'v1.2.0'),
        (semver.canonical, 'v1.2.3', 'v1.2.3'),
        (semver.canonical, 'v1.2.3+meta', 'v1.2.3'),
        (semver.canonical, 'v1.2.3-pre+meta', 'v1.2.3-pre'),
        (semver.canonical, 'bad', ''),
        (semver.major, 'v2.1.0', 'v2'),
        (semver.major, 'v0', 'v0'),
        (semver.major, 'bad', ''),
        (semver.major_minor, 'v2.1.0', 'v2.1'),
        (semver.major_minor, 'v2', 'v2.0'),
        (semver.prerelease, 'v1.2.3-pre+meta', '-pre'),
        (semver.prerelease, 'v1.2.3', ''),
        (semver.build, 'v1.2.3-pre+meta', '+meta'),
        (semver.build, 'v2.0.0+incompatible', '+incompatible'),
        (semver.build, 'v2+incompatible', ''),
    ):
        console.assert_eq(fn(version), expected)


def test_compare_versions(console: Console) -> None:
    ascending = (
        'bad',
        'v0.0.0',
        'v0.9.0',
        'v0.10.0',
        'v1.0.0-alpha',
        'v1.0.0-alpha.1',
        'v1.0.0-alpha.beta',
        'v1.0.0-beta',
        'v1.0.0-beta.2',
        'v1.0.0-beta.11',
        'v1.0.0-rc.1',
        'v1.0.0',
        'v1.0.1',
        'v1.1.0',
        'v2.0.0',
        'v10.0.0',
    )
    for index, v in enumerate(ascending):
        console.assert_eq(semver.compare(v, v), 0)
        for w in ascending[index + 1:]:
            console.assert_eq(semver.compare(v, w), -1)
            console.assert_eq(semver.compare(w, v), 1)

    for v, w in (
        ('v1', 'v1.0.0'),
        ('v1.2', 'v1.2.0'),
        ('v1.0.0+a', 'v1.0.0+b'),
        ('bad', 'worse'),
    ):
        console.assert_eq(semver.compare(v, w), 0)


def test_max_version(console: Console) -> None:
    for v, w, expected in (
        ('v1.2.3', 'v1.10.0', 'v1.10.0'),
        ('v1.10.0', 'v1.2.3', 'v1.10.0'),
        ('v1', 'bad', 'v1.0.0'),
        ('bad', 'v1', 'v1.0.0'),
        ('v1.0.0+a', 'v1.0.0+b', 'v1.0.0'),
        ('bad', 'worse', ''),
    ):
        console.assert_eq(semver.max(v, w), expected)
