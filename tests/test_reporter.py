"""Tests for batch validation and report rendering."""

import os
from typing import TYPE_CHECKING

import pytest

from sass_naming.core import NameMatcher, Reporter, StylesheetScanner
from sass_naming.schema import FileError, Finding, Location, NameEntry, Report
from sass_naming.settings import LinterSettings

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

if TYPE_CHECKING:
    from pytest_mock import MockType


def test_batch_with_single_failure(matcher: NameMatcher) -> None:
    """Verify a batch reports every failing name and counts all names."""
    report = Reporter(matcher).run([
        'dropdown',
        'dropdown--dropUp',
        'dropdown-item',
        'dropdown.is-active',
        'u-textTruncate',
        'btn_primary',
    ])

    assert report.total == 6
    assert len(report.failures) == 1
    assert report.failures[0].name == 'btn_primary'
    assert report.failures[0].rule == 'component'
    assert 'not camelCase / unexpected separator' in report.failures[0].reason
    assert not report.passed
    assert report.exit_code == 1


def test_empty_batch(matcher: NameMatcher) -> None:
    """Verify an empty batch produces an empty passing report."""
    report = Reporter(matcher).run([])

    assert report == Report(total=0, failures=[])
    assert report.passed
    assert report.exit_code == 0
    assert report.render_text() == '0 names checked, 0 failures'


def test_failures_keep_input_order(matcher: NameMatcher) -> None:
    """Verify failures are reported in input order."""
    report = Reporter(matcher).run(['U-foo', 'dropdown', 'MyComponent', 'is-active', '$color'])

    assert [item.name for item in report.failures] == ['U-foo', 'MyComponent', 'color']
    assert [item.rule for item in report.failures] == ['namespace', 'component', 'variable']


def test_warnings_are_reported(matcher: NameMatcher) -> None:
    """Verify warnings do not fail the report."""
    report = Reporter(matcher).run(['dropdown-menu-item'])

    assert report.passed
    assert report.warnings == [
        Finding(
            name='dropdown-menu-item',
            rule='nesting',
            reason='descendant nesting is 2 levels deep, at most 1 allowed',
        ),
    ]
    assert report.render_text().splitlines() == [
        'dropdown-menu-item — warning: descendant nesting is 2 levels deep, at most 1 allowed',
        '1 names checked, 0 failures, 1 warnings',
    ]


def test_max_failures_stops_consumption(patch_entrypoints: 'Callable[..., MockType]') -> None:
    """Verify lazily produced names are not read past the failure limit."""
    patch_entrypoints()
    consumed: list[str] = []

    def names() -> 'Iterator[str]':
        for raw in ('dropdown', 'Foo', 'bar', 'Baz', 'Qux', 'quux'):
            consumed.append(raw)
            yield raw

    matcher = NameMatcher(LinterSettings(max_failures=2))
    report = Reporter(matcher).run(names())

    assert report.total == 4
    assert [item.name for item in report.failures] == ['Foo', 'Baz']
    assert consumed == ['dropdown', 'Foo', 'bar', 'Baz']


def test_render_text_with_locations() -> None:
    """Verify the text report format."""
    report = Report(
        total=3,
        failures=[
            Finding(
                name='btn_primary',
                location=Location(filename='button.scss', line=3),
                rule='component',
                reason="component name 'btn_primary' not camelCase / unexpected separator",
            ),
            Finding(name='U-foo', rule='namespace', reason="namespace 'U' must be lowercase 'u'"),
        ],
        errors=[FileError(filename='missing.scss', reason='Can not read stylesheet')],
    )

    assert report.render_text() == os.linesep.join((
        "button.scss:3: btn_primary — component name 'btn_primary' not camelCase / unexpected separator",
        "U-foo — namespace 'U' must be lowercase 'u'",
        'missing.scss: error: Can not read stylesheet',
        '3 names checked, 2 failures, 1 unreadable files',
    ))


def test_merge_reports() -> None:
    """Verify merged reports add totals and keep order."""
    first = Report(total=2, failures=[Finding(name='a', reason='x')])
    second = Report(total=1, failures=[Finding(name='b', reason='y')])

    merged = first.merge(second)

    assert merged.total == 3
    assert [item.name for item in merged.failures] == ['a', 'b']


def test_run_files(matcher: NameMatcher, scanner: StylesheetScanner, tmp_path: 'Path') -> None:
    """Verify stylesheets are scanned and names validated with locations."""
    stylesheet = tmp_path / 'button.scss'
    stylesheet.write_text('.button {\n  &--primary {}\n}\n\n.btn_primary {}\n', encoding='utf-8')

    report = Reporter(matcher).run_files([stylesheet], scanner)

    assert report.total == 3
    assert report.failures == [
        Finding(
            name='btn_primary',
            location=Location(filename=stylesheet.as_posix(), line=5),
            rule='component',
            reason="component name 'btn_primary' not camelCase / unexpected separator",
        ),
    ]
    assert report.errors == []


def test_run_files_with_names(matcher: NameMatcher, scanner: StylesheetScanner) -> None:
    """Verify pre-extracted names are validated before any file."""
    names = StylesheetScanner.scan_names(['.dropdown', '$Color-text'])

    report = Reporter(matcher).run_files([], scanner, names=names)

    assert report.total == 2
    assert [item.name for item in report.failures] == ['Color-text']


@pytest.mark.parametrize('names', (
    pytest.param((), id='only unreadable'),
    pytest.param((NameEntry(name='dropdown'),), id='passing names'),
))
def test_run_files_missing(matcher: NameMatcher, scanner: StylesheetScanner,
                           tmp_path: 'Path', names: tuple[NameEntry, ...]) -> None:
    """Verify unreadable files are recorded without aborting the batch."""
    missing = tmp_path / 'missing.scss'
    other = tmp_path / 'other.scss'
    other.write_text('.other {}\n', encoding='utf-8')

    report = Reporter(matcher).run_files([missing, other], scanner, names=names)

    assert report.total == len(names) + 1
    assert report.failures == []
    assert report.errors == [
        FileError(filename=missing.as_posix(), reason='Can not read stylesheet: No such file or directory'),
    ]
    assert not report.passed
    assert report.exit_code == 2


def test_report_schema() -> None:
    """Verify the report JSON schema lists the report fields."""
    schema = Report.model_json_schema()

    assert set(schema['properties']) == {'total', 'failures', 'warnings', 'errors'}
