"""Linter settings resolution.

Settings are resolved from, in order of precedence: explicit overrides
(for example, command-line options), an optional YAML configuration
file, `SASS_NAMING_*` environment variables, and builtin defaults.
"""

from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import SettingsConfigDict
from yaml import safe_load
from yaml.error import MarkedYAMLError, YAMLError

from sass_naming.errors import ConfigError, ErrorContext
from sass_naming.extensions import Severity  # noqa: TC001
from sass_naming.models import SettingsModel

#: Configuration file looked up in the working directory.
DEFAULT_CONFIG = '.sass-naming.yml'

#: Environment variables prefix.
ENV_PREFIX = 'SASS_NAMING_'


class LinterSettings(SettingsModel):
    """Resolved linter configuration."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        frozen=True,
        extra='ignore',
    )

    max_descendants: int = Field(
        default=1,
        ge=0,
        title='Maximum descendant depth',
        description=(
            'Number of descendant levels allowed in a single name. '
            'Deeper names produce a `nesting` finding.'
        ),
    )

    strict_nesting: bool = Field(
        default=False,
        title='Strict nesting',
        description='Report deep descendant nesting as a failure instead of a warning.',
    )

    severity: dict[str, Severity] = Field(
        default_factory=dict,
        title='Rule severities',
        description=(
            'Severity overrides keyed by qualified rule identifier, '
            'for example `{"nesting": "error", "company.noAbbr": "off"}`.'
        ),
    )

    check_variables: bool = Field(
        default=True,
        title='Check variables',
        description='Validate `$variable` declarations found in stylesheets.',
    )

    check_mixins: bool = Field(
        default=True,
        title='Check mixins',
        description='Validate `@mixin` definitions found in stylesheets.',
    )

    extensions: tuple[str, ...] = Field(
        default=('.scss', '.css'),
        title='Stylesheet extensions',
        description='File suffixes scanned when a directory is given.',
    )

    exclude: tuple[str, ...] = Field(
        default=(),
        title='Excluded paths',
        description='Glob patterns of files skipped during directory scans.',
    )

    max_failures: int | None = Field(
        default=None,
        ge=1,
        title='Maximum failures',
        description='Stop validating once this many failures were found.',
    )

    strict_plugins: bool = Field(
        default=False,
        title='Strict plugins',
        description='Raise on rules plugin loading issues instead of warning.',
    )


def read_config(path: Path) -> dict[str, Any]:
    """Read option values from a YAML configuration file.

    Args:
        path: Path to the configuration file.

    Returns:
        Mapping of option names to raw values.

    Raises:
        ConfigError: If the file can not be read or decoded, is not valid YAML,
            is not a mapping, or contains unknown options.
    """
    error_context = ErrorContext(filename=path.as_posix())

    try:
        with path.open('rt', encoding='utf-8') as content:
            data = safe_load(content)

    except MarkedYAMLError as base:
        raise ConfigError.from_yaml_error(base) from base

    except YAMLError as base:
        raise ConfigError(
            f'Invalid YAML: {getattr(base, 'reason', base)}',
            context=ErrorContext({**error_context, 'error': base}),
        ) from base

    except UnicodeDecodeError as base:
        raise ConfigError(
            'Can not decode configuration as UTF-8',
            context=ErrorContext({**error_context, 'error': base}),
        ) from base

    except OSError as base:
        raise ConfigError(
            f'Can not read configuration: {base.strerror or base}',
            context=error_context,
        ) from base

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError('Configuration must be a mapping', context=error_context)

    if unknown := sorted(set(data) - set(LinterSettings.model_fields)):
        raise ConfigError(
            f'Unknown option {unknown[0]!r}',
            context=ErrorContext({**error_context, 'element': {unknown[0]: data[unknown[0]]}}),
        )

    return data


def load_settings(path: Path | None = None, **overrides: Any) -> LinterSettings:  # noqa: ANN401
    """Resolve linter settings.

    Args:
        path: Optional YAML configuration file. Defaults to
            `.sass-naming.yml` in the working directory when it exists.
        **overrides: Explicit option values. `None` values are ignored
            so that unset command-line options do not mask the file.

    Returns:
        Resolved immutable settings.

    Raises:
        ConfigError: If the configuration file or any value is invalid.
    """
    if path is None and (default := Path(DEFAULT_CONFIG)).is_file():
        path = default

    data = read_config(path) if path is not None else {}

    values = {
        **data,
        **{key: value for key, value in overrides.items() if value is not None},
    }

    try:
        return LinterSettings(**values)

    except ValidationError as base:
        raise ConfigError.from_pydantic_error(
            base,
            data=values,
            filename=path.as_posix() if path is not None else None,
        ) from base
