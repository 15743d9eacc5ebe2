"""Pydantic models for commander."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from commander.errors import ConfigurationError

REQUIRED_PROGRAM_KEYS = ('name', 'version', 'description')


class ProgramMetadata(BaseModel):
    """Describes the host program (name, version, description)."""

    model_config = ConfigDict(extra='forbid', validate_assignment=True, arbitrary_types_allowed=True)

    name: str | None = None
    version: str | None = None
    description: str | None = None
    help_formatter: Any = None

    @field_validator(*REQUIRED_PROGRAM_KEYS, mode='before')
    @classmethod
    def coerce_numbers(cls, v: Any) -> Any:
        """Store numeric values such as a 1.0 version as strings."""
        if isinstance(v, int | float) and not isinstance(v, bool):
            return str(v)
        return v

    def ensure_complete(self) -> None:
        """Raise ConfigurationError for the first required key left unset."""
        for key in REQUIRED_PROGRAM_KEYS:
            if getattr(self, key) is None:
                msg = f'Program {key} required (use program() method)'
                raise ConfigurationError(msg)


class GlobalOptions(BaseModel):
    """Framework-level flags extracted from the argument vector."""

    model_config = ConfigDict(frozen=True)

    help: bool = False


class Example(BaseModel):
    """A titled usage example for a command."""

    model_config = ConfigDict(frozen=True)

    title: str
    invocation: str


class OptionSpec(BaseModel):
    """A per-command option declaration, forwarded to argparse."""

    model_config = ConfigDict(frozen=True)

    flags: tuple[str, ...]
    settings: dict[str, Any] = Field(default_factory=dict)
