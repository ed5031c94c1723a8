"""Tests for settings resolution."""

from typing import TYPE_CHECKING

import pytest

from sass_naming.errors import ConfigError
from sass_naming.settings import DEFAULT_CONFIG, LinterSettings, load_settings, read_config

if TYPE_CHECKING:
    from pathlib import Path


def write_config(tmp_path: 'Path', content: str, name: str = 'config.yml') -> 'Path':
    """Write a configuration file."""
    path = tmp_path / name
    path.write_text(content, encoding='utf-8')

    return path


def test_defaults() -> None:
    """Verify builtin defaults."""
    settings = LinterSettings()

    assert settings.max_descendants == 1
    assert settings.strict_nesting is False
    assert settings.severity == {}
    assert settings.check_variables is True
    assert settings.check_mixins is True
    assert settings.extensions == ('.scss', '.css')
    assert settings.exclude == ()
    assert settings.max_failures is None
    assert settings.strict_plugins is False


def test_settings_are_frozen() -> None:
    """Verify resolved settings can not be modified."""
    settings = LinterSettings()

    with pytest.raises(ValueError, match=r'frozen'):
        settings.max_descendants = 2  # type: ignore[misc]


def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify settings are read from prefixed environment variables."""
    monkeypatch.setenv('SASS_NAMING_MAX_DESCENDANTS', '2')
    monkeypatch.setenv('SASS_NAMING_STRICT_NESTING', 'true')

    settings = load_settings()

    assert settings.max_descendants == 2
    assert settings.strict_nesting is True


def test_config_file(tmp_path: 'Path') -> None:
    """Verify settings are read from a YAML file."""
    path = write_config(tmp_path, (
        'max_descendants: 2\n'
        'severity:\n'
        '  nesting: error\n'
        "  company.noAbbreviations: 'off'\n"
        'exclude:\n'
        '  - "*/vendor/*"\n'
    ))

    settings = load_settings(path)

    assert settings.max_descendants == 2
    assert settings.severity == {'nesting': 'error', 'company.noAbbreviations': 'off'}
    assert settings.exclude == ('*/vendor/*',)


def test_precedence(monkeypatch: pytest.MonkeyPatch, tmp_path: 'Path') -> None:
    """Verify overrides beat the file, and the file beats the environment."""
    monkeypatch.setenv('SASS_NAMING_MAX_DESCENDANTS', '5')
    monkeypatch.setenv('SASS_NAMING_MAX_FAILURES', '7')
    path = write_config(tmp_path, 'max_descendants: 3\nstrict_nesting: true\n')

    assert load_settings(path).max_descendants == 3
    assert load_settings(path).max_failures == 7
    assert load_settings(path, max_descendants=1).max_descendants == 1
    assert load_settings(path, max_descendants=None, strict_nesting=None).strict_nesting is True


def test_default_config_file(monkeypatch: pytest.MonkeyPatch, tmp_path: 'Path') -> None:
    """Verify the configuration file in the working directory is picked up."""
    write_config(tmp_path, 'check_mixins: false\n', name=DEFAULT_CONFIG)
    monkeypatch.chdir(tmp_path)

    assert load_settings().check_mixins is False


def test_empty_config_file(tmp_path: 'Path') -> None:
    """Verify an empty file resolves to defaults."""
    path = write_config(tmp_path, '# nothing configured\n')

    assert read_config(path) == {}
    assert load_settings(path) == LinterSettings()


@pytest.mark.parametrize(('content', 'message'), (
    pytest.param('max_descendants: [1\n', r'^Invalid YAML', id='invalid yaml'),
    pytest.param(
        'max_descendants: \x07\n', r'^Invalid YAML: special characters are not allowed',
        id='control character',
    ),
    pytest.param('- max_descendants\n', r'^Configuration must be a mapping', id='not a mapping'),
    pytest.param('max_depth: 2\n', r"^Unknown option 'max_depth'", id='unknown option'),
    pytest.param('max_descendants: -1\n', r"^Invalid option 'max_descendants'", id='out of range'),
    pytest.param('max_failures: 0\n', r"^Invalid option 'max_failures'", id='zero failures'),
    pytest.param('severity:\n  nesting: fatal\n', r"^Invalid option 'severity'", id='unknown severity'),
))
def test_invalid_config(tmp_path: 'Path', content: str, message: str) -> None:
    """Verify invalid configuration raises `ConfigError` with its location."""
    path = write_config(tmp_path, content)

    with pytest.raises(ConfigError, match=message) as error:
        load_settings(path)

    assert f'in "{path.as_posix()}"' in str(error.value)


def test_invalid_config_snippet(tmp_path: 'Path') -> None:
    """Verify the offending option is shown in the error."""
    path = write_config(tmp_path, 'max_descendants: -1\n')

    with pytest.raises(ConfigError) as error:
        load_settings(path)

    assert 'max_descendants: -1' in str(error.value)


def test_invalid_override() -> None:
    """Verify invalid explicit values raise `ConfigError`."""
    with pytest.raises(ConfigError, match=r"^Invalid option 'max_failures'") as error:
        load_settings(max_failures=0)

    assert 'in "<unicode string>"' in str(error.value)


def test_missing_config_file(tmp_path: 'Path') -> None:
    """Verify an unreadable configuration file raises `ConfigError`."""
    with pytest.raises(ConfigError, match=r'^Can not read configuration'):
        load_settings(tmp_path / 'missing.yml')


def test_undecodable_config_file(tmp_path: 'Path') -> None:
    """Verify a configuration file that is not UTF-8 raises `ConfigError`."""
    path = tmp_path / 'config.yml'
    path.write_bytes(b'\xff\xfemax_descendants: 2\n')

    with pytest.raises(ConfigError, match=r'^Can not decode configuration as UTF-8') as error:
        load_settings(path)

    assert f'in "{path.as_posix()}"' in str(error.value)
