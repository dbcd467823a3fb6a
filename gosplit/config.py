import json
import os
from pathlib import Path

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from gosplit.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['gosplit.yaml', 'gosplit.yml']


class SplitterConfig(BaseSettings):
    """Settings for a splitting run.

    Values come from a config file (see ``get_config``); anything the file
    leaves unset falls back to ``GOSPLIT_*`` environment variables.
    """

    model_config = SettingsConfigDict(env_prefix='GOSPLIT_', extra='forbid')

    extension: str = Field(
        '.go', description='Extension of the source file and of generated files.'
    )

    types_suffix: str = Field(
        'types',
        description='Suffix of the file that receives the type declarations.',
    )

    max_numbered_suffix: int = Field(
        999,
        ge=1,
        description='Highest counter tried when appending a number to a suffix.',
    )

    keywords_file: str | None = Field(
        None, description='Optional replacement for the bundled keyword list.'
    )

    alternatives_file: str | None = Field(
        None, description='Optional replacement for the bundled alternative list.'
    )

    gofmt: bool = Field(
        True, description='Whether to pipe generated files through gofmt.'
    )

    gofmt_command: str = Field('gofmt', description='The gofmt executable to run.')

    validate_output: bool = Field(
        True, description='Whether to re-parse generated files before writing.'
    )


def load_yaml(path: str | Path) -> dict:
    return yaml.load(Path(path).read_text(), Loader=yaml.FullLoader)


def load_json(path: str | Path) -> dict:
    return json.loads(Path(path).read_text())


def _load_file(path: str | Path) -> dict:
    if str(path).endswith('.json'):
        return load_json(path)
    return load_yaml(path) or {}


def _validate(data: dict, config_path: str | None) -> SplitterConfig:
    if not isinstance(data, dict):
        raise ConfigurationError(
            'Configuration must be a mapping', config_path=config_path
        )
    try:
        return SplitterConfig(**data)
    except ValidationError as e:
        field = '.'.join(str(part) for part in e.errors()[0]['loc']) or None
        raise ConfigurationError(
            'Invalid configuration', config_path=config_path, field=field
        ) from e


def get_config(path: str | None = None) -> SplitterConfig:
    """Load configuration from a file or return the default config."""
    if path:
        try:
            data = _load_file(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f'Could not load configuration: {e}', config_path=str(path)
            ) from e
        return _validate(data, str(path))

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        path = Path(cwd) / filename
        if path.exists():
            return get_config(str(path))

    path = Path(cwd) / 'pyproject.toml'

    if path.exists():
        import tomllib

        try:
            pyproject = tomllib.loads(path.read_text())
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(
                f'Could not load configuration: {e}', config_path=str(path)
            ) from e
        tools = pyproject.get('tool', {})

        if 'gosplit' in tools:
            return _validate(tools['gosplit'], str(path))

    return SplitterConfig()
