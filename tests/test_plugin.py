"""Tests for the pytest integration."""

import pytest

from sass_naming.plugin.case import NamingItem
from sass_naming.plugin.stylesheet import StylesheetFile

VALID_CONTENT = '''
.dropdown {
  &--dropUp {}
  &-item {}
  &.is-active {}
}
'''

INVALID_CONTENT = '''
.dropdown {}
.btn_primary {}
'''


def test_stylesheets_are_not_collected_by_default(pytester: pytest.Pytester) -> None:
    """Verify collection is opt-in."""
    pytester.makefile('.scss', dropdown=INVALID_CONTENT)

    result = pytester.runpytest()

    assert result.ret == pytest.ExitCode.NO_TESTS_COLLECTED


def test_valid_stylesheet(pytester: pytest.Pytester) -> None:
    """Verify a stylesheet following the guide passes."""
    pytester.makefile('.scss', dropdown=VALID_CONTENT)

    result = pytester.runpytest('--sass-naming', '-v')

    result.assert_outcomes(passed=1)
    result.stdout.fnmatch_lines(['*dropdown.scss::sass-naming PASSED*'])


def test_invalid_stylesheet(pytester: pytest.Pytester) -> None:
    """Verify a stylesheet breaking the guide fails with the report."""
    pytester.makefile('.scss', dropdown=INVALID_CONTENT)

    result = pytester.runpytest('--sass-naming')

    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines([
        "*dropdown.scss:2: btn_primary — component name 'btn_primary' not camelCase / unexpected separator",
        '*2 names checked, 1 failures*',
    ])


def test_style_warnings(pytester: pytest.Pytester) -> None:
    """Verify style warnings are reported without failing."""
    pytester.makefile('.scss', menu='.dropdown-menu-item {}\n')

    result = pytester.runpytest('--sass-naming')

    result.assert_outcomes(passed=1, warnings=1)
    result.stdout.fnmatch_lines(['*StyleWarning*descendant nesting is 2 levels deep*'])


def test_config_option(pytester: pytest.Pytester) -> None:
    """Verify settings are read from the given configuration file."""
    pytester.makefile('.scss', menu='.dropdown-menu-item {}\n')
    pytester.makefile('.yml', naming='strict_nesting: true\n')

    result = pytester.runpytest('--sass-naming', '--sass-naming-config', 'naming.yml')

    result.assert_outcomes(failed=1)


def test_excluded_stylesheets(pytester: pytest.Pytester) -> None:
    """Verify excluded stylesheets are not collected."""
    pytester.mkdir('vendor')
    pytester.makefile('.scss', **{'vendor/bootstrap': INVALID_CONTENT})
    pytester.makefile('.scss', main=VALID_CONTENT)
    pytester.makefile('.yml', **{'.sass-naming': 'exclude:\n  - "*/vendor/*"\n'})

    result = pytester.runpytest('--sass-naming')

    result.assert_outcomes(passed=1)


def test_plugin_classes_are_not_tests() -> None:
    """Verify the plugin nodes are not collected as test classes."""
    assert StylesheetFile.__test__ is False
    assert NamingItem.__test__ is False
