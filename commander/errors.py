"""Exceptions raised by the commander runner."""


class CommanderError(RuntimeError):
    """Base class for commander errors."""


class ConfigurationError(CommanderError):
    """Raised when the host program is set up incorrectly."""


class InvalidCommandError(CommanderError):
    """Raised when a command name cannot be resolved to a registered command."""

    def __init__(self, name: str | None) -> None:
        self.name = name
        super().__init__(f"Invalid command '{name}'")
