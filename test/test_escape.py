from .console import Console
from modpath import (
    escape_path,
    escape_version,
    ModulePathError,
    Reason,
    Subject,
    unescape_path,
    unescape_version,
)


PATHS = (
    ('rsc.io/quote', 'rsc.io/quote'),
    ('github.com/Azure/azure-sdk-for-go', 'github.com/!azure/azure-sdk-for-go'),
    ('github.com/GoogleCloudPlatform/cloudsql-proxy',
        'github.com/!google!cloud!platform/cloudsql-proxy'),
    ('github.com/Sirupsen/logrus', 'github.com/!sirupsen/logrus'),
    ('github.com/sirupsen/logrus', 'github.com/sirupsen/logrus'),
    ('example.com/ABC/v2', 'example.com/!a!b!c/v2'),
    ('gopkg.in/Yaml.v2', 'gopkg.in/!yaml.v2'),
)

VERSIONS = (
    ('v1.2.3', 'v1.2.3'),
    ('v1.2.3-RC1', 'v1.2.3-!r!c1'),
    ('v0.0.0-20190101000000-AbCdEf012345', 'v0.0.0-20190101000000-!ab!cd!ef012345'),
    ('master', 'master'),
    ('Branch_X', '!branch_!x'),
)


def test_escape(console: Console) -> None:
    for path, escaped in PATHS:
        console.assert_eq(escape_path(path), escaped)
    for version, escaped in VERSIONS:
        console.assert_eq(escape_version(version), escaped)


def test_unescape(console: Console) -> None:
    for path, escaped in PATHS:
        console.assert_eq(unescape_path(escaped), path)
        # Escaped forms are valid module paths only if they lack uppercase letters.
        console.assert_eq(escape_path(unescape_path(escaped)), escaped)
    for version, escaped in VERSIONS:
        console.assert_eq(unescape_version(escaped), version)
        console.assert_eq(escape_version(unescape_version(escaped)), escaped)


def test_escaping_is_injective(console: Console) -> None:
    paths = [
        'example.com/abc',
        'example.com/Abc',
        'example.com/aBc',
        'example.com/ABC',
        'example.com/abC',
    ]
    escaped = [escape_path(p) for p in paths]
    console.assert_eq(len(set(escaped)), len(paths))
    for e in escaped:
        console.assert_eq(e, e.lower())


def test_escape_rejects(console: Console) -> None:
    x = console.assert_raises(ModulePathError, escape_path, 'Github.com/x')
    console.assert_eq(getattr(x, 'reason', None), Reason.INVALID_FIRST_CHAR)

    for version in ('', 'v1.0.0!x', 'v1/x', '.', 'v1.0.0.', 'a*b', 'CON'):
        x = console.assert_raises(ModulePathError, escape_version, version)
        console.assert_eq(getattr(x, 'reason', None), Reason.DISALLOWED_VERSION)
        console.assert_eq(getattr(x, 'subject', None), Subject.VERSION)

    x = console.assert_raises(ModulePathError, escape_version, 'v1.0.0!x')
    console.assert_eq(str(x), 'disallowed version string "v1.0.0!x"')

    # Unicode letters make valid file names, but the escaped form is ASCII only.
    x = console.assert_raises(ModulePathError, escape_version, 'vé')
    console.assert_eq(getattr(x, 'reason', None), Reason.INTERNAL_INCONSISTENCY)


def test_unescape_rejects(console: Console) -> None:
    for escaped in (
        'github.com/Azure/x',
        'github.com/!',
        'github.com/!1',
        'github.com/!!a',
        'github.com/!Azure',
        'github.com/é',
    ):
        x = console.assert_raises(ModulePathError, unescape_path, escaped)
        console.assert_eq(getattr(x, 'reason', None), Reason.INVALID_ESCAPE)
        console.assert_eq(getattr(x, 'subject', None), Subject.ESCAPED_MODULE_PATH)
        console.assert_eq(getattr(x, '__cause__', None), None)

    x = console.assert_raises(ModulePathError, unescape_path, '!github.com/x')
    cause = getattr(x, '__cause__', None)
    console.assert_op(isinstance, cause, ModulePathError)
    console.assert_eq(getattr(cause, 'reason', None), Reason.INVALID_FIRST_CHAR)
    console.assert_eq(
        str(x),
        'invalid escaped module path "!github.com/x": '
        "invalid char 'G' in first path element")

    console.assert_eq(unescape_path('github.com'), 'github.com')
    x =console.assert_raises(ModulePathError, unescape_path, 'example.com/x/v1')
    console.assert_eq(getattr(getattr(x, '__cause__', None), 'reason', None),
        Reason.INVALID_VERSION_SUFFIX)

    for escaped in ('v1.0.0-RC', 'v1.0.0-!', 'v1.0.0-!1'):
        x = console.assert_raises(ModulePathError, unescape_version, escaped)
        console.assert_eq(getattr(x, 'subject', None), Subject.ESCAPED_VERSION)
        console.assert_eq(getattr(x, '__cause__', None), None)

    x = console.assert_raises(ModulePathError, unescape_version, 'v1.0.0/x')
    console.assert_eq(getattr(getattr(x, '__cause__', None), 'reason', None),
        Reason.INVALID_CHAR)
    console.assert_eq(str(x), 'invalid escaped version "v1.0.0/x": invalid char \'/\'')
