"""Global option parsing and command name resolution."""

import argparse
import re
from collections.abc import Sequence

from commander.logging import get_logger
from commander.models import GlobalOptions

logger = get_logger(__name__)

COMMAND_NAME_PATTERN = re.compile(r'[a-z_0-9]+', re.IGNORECASE)
HELP_FLAGS = ('-h', '--help')


class GlobalOptionError(Exception):
    """Raised by the global parser instead of exiting the process."""


class _GlobalArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise GlobalOptionError(message)


def create_global_parser() -> argparse.ArgumentParser:
    """Create the parser for framework-level flags.

    Unknown flags are left in the extras returned by ``parse_known_args`` so
    that subcommands can parse them later.
    """
    parser = _GlobalArgumentParser(
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument(
        '-h',
        '--help',
        action='store_true',
        help='Display help information',
    )
    return parser


def _scan_help_flags(args: Sequence[str]) -> bool:
    """Look for an exact help flag ahead of any ``--`` terminator."""
    for arg in args:
        if arg == '--':
            return False
        if arg in HELP_FLAGS:
            return True
    return False


def parse_global_options(args: Sequence[str]) -> GlobalOptions:
    """Extract framework-level flags from ``args``.

    Parsing is tolerant: when argparse rejects a token, recognized flags are
    still picked up by scanning the remaining tokens. ``args`` itself is
    never modified.
    """
    parser = create_global_parser()
    try:
        namespace, unknown = parser.parse_known_args(list(args))
    except (GlobalOptionError, argparse.ArgumentError) as exc:
        options = GlobalOptions(help=_scan_help_flags(args))
        logger.debug('global_option_error_ignored', error=str(exc), help=options.help)
        return options

    options = GlobalOptions(help=namespace.help)
    logger.debug(
        'global_options_parsed',
        help=options.help,
        _verbose_unknown=unknown,
    )
    return options


def command_name_from_args(args: Sequence[str]) -> str | None:
    """Return the first bare-word token in ``args``, or None if there is none."""
    return next((arg for arg in args if COMMAND_NAME_PATTERN.fullmatch(arg)), None)


def args_without_command(args: Sequence[str]) -> list[str]:
    """Return ``args`` without its first element."""
    return list(args[1:])
