import logging

import structlog
import yaml
from rich.console import Console
from rich.syntax import Syntax
from structlog.typing import EventDict

console = Console(stderr=True)

# Type alias for our logger
Logger = structlog.stdlib.BoundLogger

VERBOSE_PREFIX = '_verbose_'

# Context keys shown for each event when not in verbose mode
ESSENTIAL_CONTEXT = {
    'global_options_parsed': ['help'],
    'global_option_error_ignored': ['error', 'help'],
    'command_registered': ['command'],
    'command_replaced': ['command'],
    'dispatching_command': ['command'],
    'running_command': ['command'],
    'invalid_command': ['command'],
    'loading_program_metadata': ['path'],
}


def format_context_yaml(event_dict: EventDict, indent: int = 2) -> str:
    """Format the context dictionary as YAML.

    Args:
        event_dict: The context dictionary to format.
        indent: The number of spaces to use for indentation.

    Returns:
        The formatted YAML string.
    """
    if not event_dict:
        return ''
    context_yaml = yaml.safe_dump(
        event_dict,
        sort_keys=True,
        default_flow_style=False,
    )
    pad = ' ' * indent
    return '\n'.join(f'{pad}{line}' for line in context_yaml.splitlines())


def filter_context_for_non_verbose(event_msg: str, event_dict: EventDict) -> EventDict:
    """Keep only the essential context keys for ``event_msg``."""
    keys_to_keep = ESSENTIAL_CONTEXT.get(event_msg, [])
    return {k: v for k, v in event_dict.items() if k in keys_to_keep}


def strip_verbose_prefix(event_dict: EventDict) -> EventDict:
    """Drop the ``_verbose_`` marker from context keys."""
    return {k.removeprefix(VERBOSE_PREFIX): v for k, v in event_dict.items()}


def cli_renderer(
    _logger: Logger,
    method_name: str,
    event_dict: EventDict,
) -> str:
    """Render log messages for CLI output using rich formatting.

    Args:
        logger: The logger instance.
        method_name: The logging method name (e.g., 'info', 'error').
        event_dict: The event dictionary containing log data.

    Returns:
        str: An empty string, as structlog expects a string return but output is printed.
    """
    level = method_name.upper()
    event_msg = event_dict.pop('event', '')
    for key in ('timestamp', 'level', 'log_level'):
        event_dict.pop(key, None)

    verbose_mode = logging.getLogger().level <= logging.DEBUG
    if verbose_mode:
        event_dict = strip_verbose_prefix(event_dict)
    else:
        event_dict = filter_context_for_non_verbose(event_msg, event_dict)

    context_yaml = format_context_yaml(event_dict)

    level_styles = {
        'INFO': 'blue',
        'WARNING': 'yellow',
        'ERROR': 'red',
        'DEBUG': 'magenta',
        'CRITICAL': 'white on red',
    }
    style = level_styles.get(level, 'bold cyan')
    console.print(f'[bold {style}][{level}][/bold {style}] [{style}]{event_msg}[/{style}]')

    if context_yaml:
        syntax = Syntax(
            context_yaml,
            'yaml',
            theme='github-dark',
            background_color='default',
            line_numbers=False,
        )
        console.print(syntax)
    return ''  # structlog expects a string return, but we already printed


def configure_logging(*, verbose: bool = False) -> None:
    """Configure structlog for commander programs.

    Args:
        verbose: Enable verbose/debug output
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt='ISO', utc=False),
            structlog.stdlib.add_log_level,
            cli_renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    if verbose:
        logging.basicConfig(level=logging.DEBUG, handlers=[])
    else:
        logging.basicConfig(level=logging.INFO, handlers=[])


def get_logger(name: str) -> Logger:
    """Get a structured logger instance.

    Events always go through the stdlib logger of the same name, so nothing
    is printed until the host program configures logging.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
