"""Load program metadata from YAML."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from commander.errors import ConfigurationError
from commander.logging import get_logger
from commander.models import ProgramMetadata

logger = get_logger(__name__)


def _load_yaml_mapping(path: Path) -> dict[str, Any]:
    if not path.exists():
        msg = f'program metadata file not found: {path}'
        raise ConfigurationError(msg)

    logger.debug('loading_program_metadata', path=str(path))
    try:
        with path.open() as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        msg = f'failed to parse YAML: {exc}'
        raise ConfigurationError(msg) from exc

    if not isinstance(data, dict):
        msg = f'program metadata root must be a mapping in {path}'
        raise ConfigurationError(msg)

    return data


def load_program_metadata(path: Path) -> ProgramMetadata:
    """Read name, version and description from a YAML file.

    Example file::

        name: deploy
        version: 1.2.0
        description: Deploy services.
    """
    data = _load_yaml_mapping(path)
    try:
        return ProgramMetadata.model_validate(data)
    except ValidationError as exc:
        msg = f'invalid program metadata in {path}: {exc}'
        raise ConfigurationError(msg) from exc
