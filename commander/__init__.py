"""Command resolution and dispatch for subcommand-style CLI programs."""

from commander.command import Command, CommandBuilder
from commander.errors import CommanderError, ConfigurationError, InvalidCommandError
from commander.registry import CommandRegistry
from commander.runner import Runner, RunnerState

__version__ = '0.0.0.dev0'

__all__ = [
    'Command',
    'CommandBuilder',
    'CommandRegistry',
    'CommanderError',
    'ConfigurationError',
    'InvalidCommandError',
    'Runner',
    'RunnerState',
    '__version__',
]
