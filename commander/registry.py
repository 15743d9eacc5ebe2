"""Insertion-ordered registry of commands keyed by name."""

from collections.abc import Iterator

from commander.command import Command
from commander.errors import InvalidCommandError
from commander.logging import get_logger

logger = get_logger(__name__)


class CommandRegistry:
    """Mapping from command name to Command.

    Registering a name twice replaces the earlier command.
    """

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, command: Command) -> None:
        """Insert or replace the entry for ``command.name``."""
        if command.name in self._commands:
            logger.debug('command_replaced', command=command.name)
        else:
            logger.debug('command_registered', command=command.name)
        self._commands[command.name] = command

    def lookup(self, name: str | None) -> Command:
        """Return the command registered under ``name``.

        Raises:
            InvalidCommandError: if ``name`` is empty or not registered.
        """
        if not name or name not in self._commands:
            raise InvalidCommandError(name)
        return self._commands[name]

    def names(self) -> list[str]:
        return list(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
