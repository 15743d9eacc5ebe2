"""Small bundled program showing how a host application uses Runner."""

import sys
from collections.abc import Sequence
from typing import TextIO

from commander import __version__
from commander.command import CommandBuilder
from commander.logging import configure_logging
from commander.runner import Runner


def build_runner(
    args: Sequence[str] | None = None,
    output: TextIO | None = None,
) -> Runner:
    """Create the demo runner with its commands registered."""
    runner = Runner(output=output, args=args)
    runner.program('name', 'commander-demo')
    runner.program('version', __version__)
    runner.program('description', 'Example program built on commander.')
    out = output if output is not None else sys.stdout

    def greet(args: list[str]) -> None:
        options, names = runner.get_command('greet').parse_options(args)
        greeting = f'Hello {" ".join(names) or "world"}'
        if options.shout:
            greeting = greeting.upper()
        out.write(f'{greeting}\n')

    def configure_greet(c: CommandBuilder) -> None:
        c.syntax = 'commander-demo greet [--shout] [NAME ...]'
        c.description = 'Greet one or more people.'
        c.example('Greet alice', 'commander-demo greet alice')
        c.example('Greet loudly', 'commander-demo greet --shout bob')
        c.option('--shout', action='store_true', help='Upper-case the greeting')
        c.when_called(greet)

    def configure_echo(c: CommandBuilder) -> None:
        c.syntax = 'commander-demo echo [ARG ...]'
        c.description = 'Print the remaining arguments.'
        c.example('Echo two words', 'commander-demo echo a b')

        @c.when_called
        def _echo(args: list[str]) -> None:
            out.write(f'{" ".join(args)}\n')

    runner.command('greet', configure_greet)
    runner.command('echo', configure_echo)
    return runner


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the commander-demo CLI."""
    configure_logging(verbose=False)
    build_runner(args=argv).run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
