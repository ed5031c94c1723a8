"""Pytest item checking the names of a single stylesheet."""

from typing import TYPE_CHECKING
from warnings import warn

import pytest

from sass_naming.core import Reporter
from sass_naming.errors import StyleWarning

if TYPE_CHECKING:
    from typing import Any

if TYPE_CHECKING:
    from _pytest._code.code import ExceptionInfo, TerminalRepr

    from sass_naming.core import NameMatcher, StylesheetScanner


class NamingItem(pytest.Item):
    """Pytest item validating every name of a stylesheet.

    The item fails when any name breaks the grammar or the file can not
    be read. Style warnings are surfaced through pytest's warnings summary.
    """

    __test__ = False

    def __init__(self, *,
                 matcher: 'NameMatcher',
                 scanner: 'StylesheetScanner',
                 **kwargs: 'Any') -> None:
        """Initialize a stylesheet naming check.

        Args:
            matcher: Shared name matcher.
            scanner: Shared stylesheet scanner.
            **kwargs: Keyword pytest.Item arguments.
        """
        super().__init__(**kwargs)

        self.matcher = matcher
        self.scanner = scanner

    def runtest(self) -> None:
        """Scan the stylesheet and validate its names.

        Raises:
            AssertionError: If any name fails or the file is unreadable.
        """
        report = Reporter(self.matcher).run_files([self.path], self.scanner)

        for finding in report.warnings:
            warn(finding.render(), category=StyleWarning, stacklevel=2)

        if not report.passed:
            raise AssertionError(report.render_text())

    def repr_failure(self, excinfo: 'ExceptionInfo[BaseException]') -> 'str | TerminalRepr':
        """Represent a failed check as the rendered report."""
        if isinstance(excinfo.value, AssertionError):
            return str(excinfo.value)

        return super().repr_failure(excinfo)

    def reportinfo(self) -> tuple['Any', int | None, str]:
        """Location reported for the item."""
        return self.path, None, f'sass-naming: {self.path.name}'
