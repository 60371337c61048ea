#!.venv/bin/python

# mypy: disallow_any_expr = false

from dataclasses import dataclass
import doctest
from importlib import import_module
import logging
from pathlib import Path
import subprocess
import sys

from test.console import Console


TEST_MODULES = (
    'test.test_semver',
    'test.test_suffix',
    'test.test_grammar',
    'test.test_escape',
    'test.test_identifier',
)

# ======================================================================================


@dataclass
class Options:
    test_runner: str
    console: Console
    module_name: str = ''
    verbose: bool = False

    def make_verbose(self) -> None:
        self.verbose = True
        self.console.verbose = True

    def test_command(self) -> list[str]:
        command = [sys.executable, self.test_runner]
        if self.verbose:
            command.append('-v')
        return command


def run_tests(options: Options) -> int:
    console = options.console
    console.info("Getting started with modpath's test suite...")
    console.detail(f'Running "{sys.executable}"')
    console.detail(f' - Python {sys.version}')

    try:
        import modpath
    except ImportError:
        console.error('Unable to import modpath')
        sys.exit(1)

    console.detail(f'Testing modpath {modpath.__version__}')

    # ----------------------------------------------------------------------------------

    console.info('Running unit tests...')

    for module in TEST_MODULES:
        console.detail(f'╭──── {module}')
        subprocess.run([*options.test_command(), 'run-test-module', module], check=True)
        console.detail('╰─╼')

    # ----------------------------------------------------------------------------------

    console.info('Running documentation tests...')

    doc_failures, doc_tests = doctest.testfile(
        'README.md', optionflags=doctest.REPORT_NDIFF)

    if doc_failures != 0:
        console.error(f'{doc_failures}/{doc_tests} documentation tests failed!')
        sys.exit(1)

    console.detail(f'All {doc_tests} documentation tests passed')

    # ----------------------------------------------------------------------------------

    console.success('W00t! All tests passed!')
    return 0

# ======================================================================================

def run_module_test(options: Options) -> int:
    console = options.console
    if options.verbose:
        logging.basicConfig(
            format='%(name)s %(levelname)s: %(message)s', level=logging.DEBUG)
    module = import_module(options.module_name)

    errors = 0
    for key in dir(module):
        if not key.startswith('test_'):
            continue
        value = getattr(module, key)
        if not callable(value):
            continue

        console.detail(f'├─ {value.__name__}')
        with console.new_prefix('│   '):
            try:
                value(options.console)
            except Exception as x:
                console.exception(x)
                errors += 1

    return bool(errors + console.failed_assertions)

# --------------------------------------------------------------------------------------

if __name__ == '__main__':
    options = Options(sys.argv[0], Console(sys.stdout))
    console = options.console

    try:
        fn = run_tests
        for arg in sys.argv[1:]:
            if arg == '-v':
                options.make_verbose()
            elif arg == 'run-test-module':
                fn = run_module_test
            elif fn == run_module_test and options.module_name == '':
                options.module_name = arg
            else:
                raise SystemExit(f'unrecognized command line argument "{arg}"')

        if fn == run_module_test and options.module_name == '':
            raise SystemExit('can\'t "run-test-module" without module name')

        sys.exit(fn(options))

    except SystemExit as x:
        code = x.code
        if isinstance(code, str):
            console.error(code)
            code = 1
        sys.exit(code)

    except subprocess.CalledProcessError as x:
        cmd = list(x.cmd)
        venv_python = Path('.') / '.venv/bin/python'
        if venv_python.exists() and venv_python.samefile(cmd[0]):
            cmd[0] = 'python'
        console.error(
            f'command "{" ".join(cmd)}" failed with exit status {x.returncode}')
        sys.exit(1)

    except Exception as x:
        console.exception(x)
        sys.exit(1)
