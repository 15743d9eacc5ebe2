import io
import logging
from collections.abc import Callable, Iterator, Sequence

import pytest
import structlog

from commander.runner import Runner

RunnerFactory = Callable[..., Runner]


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    root_level = logging.getLogger().level
    yield
    structlog.reset_defaults()
    logging.getLogger().setLevel(root_level)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def make_runner(output: io.StringIO) -> RunnerFactory:
    """Build a runner writing to ``output``, optionally with program info set."""

    def _make(args: Sequence[str], *, configured: bool = True) -> Runner:
        runner = Runner(input=io.StringIO(), output=output, args=args)
        if configured:
            runner.program('name', 'x')
            runner.program('version', '1.0')
            runner.program('description', 'd')
        return runner

    return _make
