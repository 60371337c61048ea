# Lets pytest run the test modules, which take a console as their only argument.

from collections.abc import Iterator
import sys

import pytest

from .console import Console


@pytest.fixture
def console() -> Iterator[Console]:
    console = Console(sys.stdout)
    yield console
    assert console.failed_assertions == 0, (
        f'{console.failed_assertions} console assertion(s) failed')
