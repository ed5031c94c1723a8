"""Pytest plugin for linting stylesheet names.

This module integrates the naming linter with pytest by:
- registering custom command-line options;
- configuring a shared matcher and scanner;
- collecting stylesheets as lint test items.

Collection is opt-in: stylesheets are only collected when pytest runs
with `--sass-naming`.
"""

from typing import TYPE_CHECKING

from .stylesheet import StylesheetFile

if TYPE_CHECKING:
    from pathlib import Path

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.config.argparsing import Parser
    from _pytest.nodes import Node


def pytest_addoption(parser: 'Parser') -> None:
    """Register pytest command-line options for the naming linter.

    Args:
        parser: Pytest argument parser.
    """
    group = parser.getgroup('sass-naming')
    group.addoption(
        '--sass-naming',
        action='store_true',
        dest='sass_naming',
        default=False,
        help='Collect stylesheets and check their names against the SASS naming guide.',
    )
    group.addoption(
        '--sass-naming-config',
        action='store',
        dest='sass_naming_config',
        default=None,
        help='YAML settings file for the naming linter.',
    )


def pytest_configure(config: 'Config') -> None:
    """Configure the naming linter integration.

    When enabled, this hook attaches a shared `NameMatcher` and
    `StylesheetScanner` to the pytest configuration object as
    `config.sass_naming_matcher` and `config.sass_naming_scanner`.

    Args:
        config: Pytest configuration object.
    """
    if not config.getoption('sass_naming', default=False):
        return

    from pathlib import Path  # noqa: PLC0415

    from sass_naming.core import NameMatcher, StylesheetScanner  # noqa: PLC0415
    from sass_naming.settings import load_settings  # noqa: PLC0415

    config_path = config.getoption('sass_naming_config', default=None)
    settings = load_settings(Path(config_path) if config_path else None)

    config.sass_naming_matcher = NameMatcher(settings)  # type: ignore[attr-defined]
    config.sass_naming_scanner = StylesheetScanner(settings)  # type: ignore[attr-defined]


def pytest_collect_file(parent: 'Node', file_path: 'Path') -> StylesheetFile | None:
    """Collect stylesheet files.

    Files whose suffix is one of the configured stylesheet extensions
    are collected using `StylesheetFile` when the linter is enabled.

    Args:
        parent: Parent pytest collection node.
        file_path: Path to the file being considered.

    Returns:
        A `StylesheetFile` collector if the file is a stylesheet, otherwise ``None``.
    """
    scanner = getattr(parent.config, 'sass_naming_scanner', None)
    if scanner is None:
        return None

    if file_path.suffix in scanner.settings.extensions and not scanner.is_excluded(file_path):
        return StylesheetFile.from_parent(
            parent,
            path=file_path,
        )

    return None
