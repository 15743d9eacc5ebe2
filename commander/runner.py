"""The command runner: owns the registry and dispatches to commands."""

import sys
from collections.abc import Callable, Sequence
from enum import Enum
from functools import cached_property
from pathlib import Path
from types import MappingProxyType
from typing import Any, TextIO

from pydantic import ValidationError

from commander import parsing
from commander.command import Command, CommandBuilder
from commander.config import load_program_metadata
from commander.errors import ConfigurationError, InvalidCommandError
from commander.logging import get_logger
from commander.models import GlobalOptions, ProgramMetadata
from commander.registry import CommandRegistry

logger = get_logger(__name__)

INVALID_COMMAND_MESSAGE = 'Invalid command. Use --help for more information'


class RunnerState(Enum):
    CONSTRUCTED = 'constructed'
    READY = 'ready-to-run'
    DISPATCHED = 'dispatched'


class Runner:
    """Manages execution of a command-oriented program.

    ``input``, ``output`` and ``args`` default to the process streams and
    ``sys.argv[1:]``; pass them explicitly to drive a runner from tests.

    Example:
        runner = Runner()
        runner.program('name', 'deploy')
        runner.program('version', '1.0.0')
        runner.program('description', 'Deploy services.')

        def configure(c):
            c.syntax = 'deploy push SERVICE'
            c.when_called(push_service)

        runner.command('push', configure)
        runner.run()
    """

    def __init__(
        self,
        input: TextIO | None = None,  # noqa: A002 - mirrors the stream it replaces
        output: TextIO | None = None,
        args: Sequence[str] | None = None,
    ) -> None:
        self._input = input if input is not None else sys.stdin
        self._output = output if output is not None else sys.stdout
        self._args = tuple(args if args is not None else sys.argv[1:])
        self._registry = CommandRegistry()
        self._program = ProgramMetadata()
        self._options = parsing.parse_global_options(self._args)
        self.state = RunnerState.CONSTRUCTED
        self._create_default_commands()

    @property
    def args(self) -> tuple[str, ...]:
        return self._args

    @property
    def options(self) -> GlobalOptions:
        return self._options

    @property
    def commands(self) -> MappingProxyType[str, Command]:
        """Read-only view of the registered commands by name."""
        return MappingProxyType({command.name: command for command in self._registry})

    def program(self, key: str, value: Any = None) -> Any:
        """Assign or read program information.

        Keys: ``name``, ``version`` and ``description`` (required before
        ``run``) and ``help_formatter``. With a value the key is set,
        otherwise its current value is returned.
        """
        if key not in ProgramMetadata.model_fields:
            msg = f'Unknown program key: {key}'
            raise ConfigurationError(msg)
        if value is None:
            return getattr(self._program, key)
        try:
            setattr(self._program, key, value)
        except ValidationError as exc:
            msg = f'Invalid value for program {key}: {value!r}'
            raise ConfigurationError(msg) from exc
        return None

    def load_program(self, path: Path) -> None:
        """Set program information from a YAML file; unset keys are left alone."""
        metadata = load_program_metadata(path)
        for key, value in metadata.model_dump(exclude_none=True).items():
            self.program(key, value)

    def command(self, name: str, configure: Callable[[CommandBuilder], Any]) -> Command:
        """Define a command with ``configure`` and register it.

        ``configure`` receives a CommandBuilder to fill in; the finished
        Command is registered and returned.
        """
        builder = CommandBuilder(name)
        configure(builder)
        command = builder.build()
        self.add_command(command)
        return command

    def add_command(self, command: Command) -> None:
        self._registry.register(command)

    def get_command(self, name: str | None) -> Command:
        """Return the named command or raise InvalidCommandError."""
        return self._registry.lookup(name)

    def command_name_from_args(self) -> str | None:
        return parsing.command_name_from_args(self._args)

    def active_command(self) -> Command:
        """The command named in the arguments passed to this runner."""
        return self.get_command(self.command_name_from_args())

    @cached_property
    def args_without_command(self) -> tuple[str, ...]:
        return tuple(parsing.args_without_command(self._args))

    def run(self) -> None:
        """Validate program information and dispatch to a command.

        Raises:
            ConfigurationError: if name, version or description is unset.
        """
        self._program.ensure_complete()
        self.state = RunnerState.READY

        if self._options.help:
            command = self.get_command('help')
        else:
            try:
                command = self.active_command()
            except InvalidCommandError as exc:
                logger.debug('invalid_command', command=exc.name)
                self._output.write(f'{INVALID_COMMAND_MESSAGE}\n')
                self.state = RunnerState.DISPATCHED
                return

        logger.debug('dispatching_command', command=command.name)
        self.state = RunnerState.DISPATCHED
        command.run(list(self.args_without_command))

    def _create_default_commands(self) -> None:
        def show_help(args: list[str]) -> None:
            self._output.write('help was called\n')
            self._output.write(f'{args!r}\n')

        def configure(c: CommandBuilder) -> None:
            c.syntax = 'command help'
            c.description = 'Displays global or sub-command help information.'
            c.example('Display global help', 'command help')
            c.example("Display help for 'sub-command'", 'command help sub-command')
            c.when_called(show_help)

        self.command('help', configure)
