"""Command objects and the builder used to define them."""

import argparse
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict

from commander.errors import ConfigurationError
from commander.logging import get_logger
from commander.models import Example, OptionSpec

logger = get_logger(__name__)

Handler = Callable[[list[str]], Any]


class Command(BaseModel):
    """A named unit of CLI functionality.

    Commands are immutable once built. The runner only reads ``name`` and
    calls ``run``; the remaining fields describe the command for help output.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    handler: Handler
    syntax: str = ''
    description: str = ''
    examples: tuple[Example, ...] = ()
    options: tuple[OptionSpec, ...] = ()

    def run(self, args: Sequence[str]) -> None:
        """Invoke the handler with the remaining arguments."""
        logger.debug('running_command', command=self.name, args=list(args))
        self.handler(list(args))

    def build_parser(self) -> argparse.ArgumentParser:
        """Create an argument parser from the declared options."""
        parser = argparse.ArgumentParser(
            prog=self.name,
            usage=self.syntax or None,
            description=self.description or None,
            add_help=False,
        )
        for option in self.options:
            parser.add_argument(*option.flags, **option.settings)
        return parser

    def parse_options(self, args: Sequence[str]) -> tuple[argparse.Namespace, list[str]]:
        """Parse declared options out of ``args``.

        Returns:
            The parsed namespace and the tokens no declared option consumed.
        """
        return self.build_parser().parse_known_args(list(args))


class CommandBuilder:
    """Mutable definition of a command, finalized with ``build()``.

    Example:
        builder = CommandBuilder('greet')
        builder.syntax = 'prog greet NAME'
        builder.description = 'Say hello.'
        builder.example('Greet alice', 'prog greet alice')

        @builder.when_called
        def _greet(args):
            print(f'hello {args[0]}')

        command = builder.build()
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.syntax = ''
        self.description = ''
        self.examples: list[Example] = []
        self.options: list[OptionSpec] = []
        self.handler: Handler | None = None

    def example(self, title: str, invocation: str) -> None:
        """Add a titled usage example."""
        self.examples.append(Example(title=title, invocation=invocation))

    def option(self, *flags: str, **settings: Any) -> None:
        """Declare an option using ``argparse.add_argument`` arguments."""
        if not flags:
            msg = f'option for command {self.name!r} needs at least one flag'
            raise ConfigurationError(msg)
        self.options.append(OptionSpec(flags=flags, settings=settings))

    def when_called(self, handler: Handler) -> Handler:
        """Set the handler; returns it so this can be used as a decorator."""
        self.handler = handler
        return handler

    def build(self) -> Command:
        """Finalize into an immutable Command."""
        if self.handler is None:
            msg = f'command {self.name!r} has no handler (use when_called())'
            raise ConfigurationError(msg)
        return Command(
            name=self.name,
            handler=self.handler,
            syntax=self.syntax,
            description=self.description,
            examples=tuple(self.examples),
            options=tuple(self.options),
        )
