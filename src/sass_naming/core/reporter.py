"""Batch validation and report aggregation.

The reporter validates a sequence of name tokens and aggregates the
verdicts into a report. It performs pure aggregation: a failing name
never aborts the batch, and unreadable files are recorded and skipped.
"""

from itertools import chain
from typing import TYPE_CHECKING

from sass_naming.errors import ScanError
from sass_naming.schema import FileError, Finding, NameEntry, Report

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from .matcher import NameMatcher
    from .scanner import StylesheetScanner


class Reporter:
    """Aggregate verdicts for batches of name tokens."""

    def __init__(self, matcher: 'NameMatcher') -> None:
        """Initialize a reporter.

        Args:
            matcher: Matcher used to validate each name.
        """
        self.matcher = matcher

    def run(self, entries: 'Iterable[NameEntry | str]') -> Report:
        """Validate name tokens and aggregate the results.

        Consumption of `entries` stops once `max_failures` failures were
        found, so lazily produced inputs are not read further.

        Args:
            entries: Name tokens, or raw strings whose kind is inferred
                from their sigil.

        Returns:
            Report with failures and warnings in input order.
        """
        limit = self.matcher.settings.max_failures

        total = 0
        failures: list[Finding] = []
        warnings: list[Finding] = []

        for item in entries:
            entry = item if isinstance(item, NameEntry) else NameEntry.from_string(item)
            verdict = self.matcher.validate(entry)
            total += 1

            warnings.extend(
                Finding.from_entry(entry, note.rule, note.reason)
                for note in verdict.warnings
            )

            if verdict.passed:
                continue

            failures.append(Finding.from_entry(entry, verdict.rule, verdict.reason or ''))
            if limit is not None and len(failures) >= limit:
                break

        return Report(total=total, failures=failures, warnings=warnings)

    def run_files(self, paths: 'Iterable[Path]', scanner: 'StylesheetScanner', *,
                  names: 'Iterable[NameEntry | str]' = ()) -> Report:
        """Scan stylesheets and validate every extracted name.

        A file that can not be read is recorded as a scan error and the
        remaining files are still scanned.

        Args:
            paths: Stylesheet files and directories.
            scanner: Scanner used to extract names.
            names: Additional pre-extracted names, validated first.

        Returns:
            Report for all names, with scan errors attached.
        """
        errors: list[FileError] = []

        def scanned() -> 'Iterator[NameEntry]':
            for path in scanner.expand(paths):
                try:
                    found = scanner.scan_file(path)

                except ScanError as error:
                    errors.append(FileError(
                        filename=path.as_posix(),
                        reason=error.message,
                    ))
                    continue

                yield from found

        report = self.run(chain(names, scanned()))

        return report.model_copy(update={'errors': errors})
