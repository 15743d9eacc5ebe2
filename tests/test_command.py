"""Tests for Command and CommandBuilder."""

import pytest
from pydantic import ValidationError
from pytest_mock import MockerFixture

from commander.command import Command, CommandBuilder
from commander.errors import ConfigurationError
from commander.models import Example


class TestCommand:
    """Tests for Command."""

    def test_run_passes_args_to_handler(self, mocker: MockerFixture) -> None:
        """Test that run hands the arguments to the handler as a list."""
        handler = mocker.Mock()
        command = Command(name='greet', handler=handler)

        command.run(('alice', '--loud'))

        handler.assert_called_once_with(['alice', '--loud'])

    def test_command_is_immutable(self) -> None:
        """Test that a built command cannot be changed."""
        command = Command(name='greet', handler=lambda args: None)

        with pytest.raises(ValidationError):
            command.name = 'other'  # type: ignore[misc]

    def test_handler_must_be_callable(self) -> None:
        """Test that a non-callable handler is rejected."""
        with pytest.raises(ValidationError):
            Command(name='greet', handler='not callable')  # type: ignore[arg-type]

    def test_handler_errors_propagate(self) -> None:
        """Test that handler failures are not swallowed."""

        def handler(args: list[str]) -> None:
            msg = 'boom'
            raise ValueError(msg)

        command = Command(name='fail', handler=handler)

        with pytest.raises(ValueError, match='boom'):
            command.run([])


class TestParseOptions:
    """Tests for Command.parse_options."""

    def test_parse_declared_options(self) -> None:
        """Test that declared options are parsed and the rest returned."""
        builder = CommandBuilder('deploy')
        builder.option('--force', action='store_true')
        builder.option('-e', '--env', default='dev')
        builder.when_called(lambda args: None)
        command = builder.build()

        options, rest = command.parse_options(['api', '--force', '--env', 'prod', '--other'])

        assert options.force is True
        assert options.env == 'prod'
        assert rest == ['api', '--other']

    def test_parser_uses_metadata(self) -> None:
        """Test that the parser carries the command's name and syntax."""
        builder = CommandBuilder('deploy')
        builder.syntax = 'prog deploy SERVICE'
        builder.description = 'Deploy a service.'
        builder.when_called(lambda args: None)

        parser = builder.build().build_parser()

        assert parser.prog == 'deploy'
        assert 'prog deploy SERVICE' in parser.format_usage()
        assert parser.description == 'Deploy a service.'


class TestCommandBuilder:
    """Tests for CommandBuilder."""

    def test_build_collects_metadata(self) -> None:
        """Test that build copies all fields into the command."""
        builder = CommandBuilder('greet')
        builder.syntax = 'prog greet NAME'
        builder.description = 'Say hello.'
        builder.example('Greet alice', 'prog greet alice')
        builder.example('Greet bob', 'prog greet bob')
        builder.option('--loud', action='store_true')

        @builder.when_called
        def handler(args: list[str]) -> None:
            pass

        command = builder.build()

        assert command.name == 'greet'
        assert command.syntax == 'prog greet NAME'
        assert command.description == 'Say hello.'
        assert command.examples == (
            Example(title='Greet alice', invocation='prog greet alice'),
            Example(title='Greet bob', invocation='prog greet bob'),
        )
        assert command.options[0].flags == ('--loud',)
        assert command.handler is handler

    def test_when_called_returns_handler(self) -> None:
        """Test that when_called works as a decorator."""
        builder = CommandBuilder('greet')

        def handler(args: list[str]) -> None:
            pass

        assert builder.when_called(handler) is handler

    def test_build_without_handler_fails(self) -> None:
        """Test that a command needs a handler."""
        with pytest.raises(ConfigurationError, match='has no handler'):
            CommandBuilder('greet').build()

    def test_option_without_flags_fails(self) -> None:
        """Test that an option needs at least one flag."""
        with pytest.raises(ConfigurationError, match='at least one flag'):
            CommandBuilder('greet').option()

    def test_builder_changes_do_not_leak_into_command(self) -> None:
        """Test that the built command does not follow later builder edits."""
        builder = CommandBuilder('greet')
        builder.when_called(lambda args: None)
        command = builder.build()

        builder.example('Late', 'prog greet late')
        builder.description = 'changed'

        assert command.examples == ()
        assert command.description == ''
