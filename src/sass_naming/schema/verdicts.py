"""Validation results and aggregated reports."""

from os import linesep
from typing import TYPE_CHECKING

from pydantic import Field

from sass_naming.models import SchemaModel

from .tokens import Location

if TYPE_CHECKING:
    from typing import Self

    from .tokens import NameEntry

REASON_SEPARATOR = ' — '


class RuleNote(SchemaModel):
    """Warning-level finding of a single rule."""

    rule: str = Field(title='Rule identifier')
    reason: str = Field(title='Reason')


class Verdict(SchemaModel):
    """Result of validating a parsed name against the grammar.

    A passing verdict may still carry style warnings. A failing verdict
    always names the violated rule and a human-readable reason.
    """

    passed: bool = Field(
        title='Passed',
        description='Whether the name satisfies every error-level rule.',
    )

    rule: str | None = Field(
        default=None,
        title='Violated rule',
        description='Qualified identifier of the first violated rule.',
    )

    reason: str | None = Field(
        default=None,
        title='Failure reason',
    )

    warnings: tuple[RuleNote, ...] = Field(
        default=(),
        title='Style warnings',
        description='Non-fatal findings collected from warning-level rules.',
    )

    @classmethod
    def success(cls, warnings: tuple[RuleNote, ...] = ()) -> 'Self':
        """Build a passing verdict."""
        return cls(passed=True, warnings=warnings)

    @classmethod
    def failure(cls, rule: str, reason: str,
                warnings: tuple[RuleNote, ...] = ()) -> 'Self':
        """Build a failing verdict."""
        return cls(passed=False, rule=rule, reason=reason, warnings=warnings)


class Finding(SchemaModel):
    """Single reported finding for a name token."""

    name: str = Field(title='Name')

    location: Location | None = Field(
        default=None,
        title='Source location',
    )

    rule: str | None = Field(
        default=None,
        title='Rule identifier',
    )

    reason: str = Field(title='Reason')

    @classmethod
    def from_entry(cls, entry: 'NameEntry', rule: str | None, reason: str) -> 'Self':
        """Build a finding for a name token."""
        return cls(
            name=entry.name,
            location=entry.location,
            rule=rule,
            reason=reason,
        )

    def render(self, prefix: str = '') -> str:
        """Render as `<file>:<line>: <name> — <reason>`."""
        line = f'{self.name}{REASON_SEPARATOR}{prefix}{self.reason}'
        if self.location is None:
            return line

        return f'{self.location}: {line}'


class FileError(SchemaModel):
    """Stylesheet that could not be scanned."""

    filename: str = Field(title='Filename')
    reason: str = Field(title='Reason')

    def render(self) -> str:
        """Render as `<file>: error: <reason>`."""
        return f'{self.filename}: error: {self.reason}'


class Report(SchemaModel):
    """Aggregated validation results for a batch of names."""

    total: int = Field(
        default=0,
        ge=0,
        title='Total names',
        description='Number of names validated.',
    )

    failures: list[Finding] = Field(
        default_factory=list,
        title='Failures',
        description='Failing names in input order.',
    )

    warnings: list[Finding] = Field(
        default_factory=list,
        title='Warnings',
        description='Style warnings for names that otherwise passed.',
    )

    errors: list[FileError] = Field(
        default_factory=list,
        title='Scan errors',
        description='Files that could not be read.',
    )

    @property
    def passed(self) -> bool:
        """Whether every name passed and every file was read."""
        return not self.failures and not self.errors

    @property
    def exit_code(self) -> int:
        """Process exit code for the report.

        Returns:
            1 if any name failed, 2 if only scan errors occurred,
            and 0 otherwise.
        """
        if self.failures:
            return 1

        if self.errors:
            return 2

        return 0

    def merge(self, other: 'Report') -> 'Report':
        """Combine two reports, keeping input order."""
        return Report(
            total=self.total + other.total,
            failures=[*self.failures, *other.failures],
            warnings=[*self.warnings, *other.warnings],
            errors=[*self.errors, *other.errors],
        )

    def render_text(self) -> str:
        """Render a human-readable report.

        Failures come first, one per line, followed by warnings,
        scan errors, and a summary line.
        """
        lines = [
            *(item.render() for item in self.failures),
            *(item.render('warning: ') for item in self.warnings),
            *(item.render() for item in self.errors),
        ]

        summary = f'{self.total} names checked, {len(self.failures)} failures'
        if self.warnings:
            summary += f', {len(self.warnings)} warnings'
        if self.errors:
            summary += f', {len(self.errors)} unreadable files'
        lines.append(summary)

        return linesep.join(lines)
