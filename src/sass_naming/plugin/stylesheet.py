"""Pytest integration for stylesheet files.

Each collected stylesheet produces a single `NamingItem` that scans the
file and fails with the rendered report when any name breaks the
naming grammar.
"""

from typing import TYPE_CHECKING

import pytest

from .case import NamingItem

if TYPE_CHECKING:
    from collections.abc import Iterable


class StylesheetFile(pytest.File):
    """Pytest file collector for stylesheets."""

    __test__ = False

    def collect(self) -> 'Iterable[NamingItem]':
        """Collect the naming check of the stylesheet.

        Returns:
            Iterable with a single `NamingItem`.
        """
        yield NamingItem.from_parent(
            self,
            name='sass-naming',
            matcher=self.config.sass_naming_matcher,  # type: ignore[attr-defined]
            scanner=self.config.sass_naming_scanner,  # type: ignore[attr-defined]
        )
