"""Grammar matcher.

The matcher tokenizes name tokens and evaluates the registered rules in
a fixed order. Validation is a pure function of the name, its selector
context, and the settings: the same input always yields the same verdict.
"""

from typing import TYPE_CHECKING
from warnings import warn

from sass_naming.builtins.rules import BUILTIN_RULES
from sass_naming.errors import ErrorContext, MalformedName, RuleViolation, StyleWarning
from sass_naming.schema import MatchContext, NameEntry, RuleNote, Verdict
from sass_naming.settings import LinterSettings

from .loader import RulesLoaderMixin
from .tokenizer import tokenize

if TYPE_CHECKING:
    from sass_naming.extensions import Rule, Severity
    from sass_naming.schema import ParsedName

#: Rule identifier reported for names that can not be tokenized.
SYNTAX_RULE = 'syntax'

#: Builtin rule controlled by the `strict_nesting` setting.
NESTING_RULE = 'nesting'


class NameMatcher(RulesLoaderMixin):
    """Validate name tokens against the naming grammar.

    Builtin rules are registered first, in their documented order,
    followed by rules from installed plugins. The first error-level rule
    that fails decides the verdict; warning-level findings collected
    before it are kept on the verdict.
    """

    def __init__(self, settings: LinterSettings | None = None, *,
                 auto_load: bool = True) -> None:
        """Initialize the matcher.

        Args:
            settings: Resolved settings. Defaults are used when omitted.
            auto_load: Whether to load rules plugins from entry points.

        Raises:
            PluginError: If a plugin can not be loaded in strict mode.
        """
        self.settings = settings or LinterSettings()
        self.strict_mode = self.settings.strict_plugins

        self.clear_rules()
        for rule in BUILTIN_RULES:
            self.add_rule(rule)

        if auto_load:
            self.load_plugins()

    def severity(self, qualname: str, rule: 'Rule') -> 'Severity':
        """Resolve the effective severity of a registered rule.

        Args:
            qualname: Qualified rule identifier.
            rule: Rule definition.

        Returns:
            Severity from the settings overrides, the strict nesting switch,
            or the rule default, in that order.
        """
        if qualname in self.settings.severity:
            return self.settings.severity[qualname]

        if qualname == NESTING_RULE and self.settings.strict_nesting:
            return 'error'

        return rule.severity

    def make_context(self, entry: NameEntry) -> MatchContext:
        """Build the rule context for a name token."""
        return MatchContext(
            standalone=entry.standalone,
            max_descendants=self.settings.max_descendants,
        )

    def match(self, name: 'ParsedName', context: MatchContext | None = None) -> Verdict:
        """Evaluate the registered rules against a parsed name.

        Args:
            name: Parsed name.
            context: Selector context. Defaults to an unknown context.

        Returns:
            Verdict of the first failing error-level rule, or a passing
            verdict carrying every warning-level finding.
        """
        if context is None:
            context = MatchContext(max_descendants=self.settings.max_descendants)

        warnings: list[RuleNote] = []

        for qualname, rule in self.rules.items():
            severity = self.severity(qualname, rule)
            if severity == 'off':
                continue

            reason = rule(name, context)
            if reason is None:
                continue

            if severity == 'error':
                return Verdict.failure(qualname, reason, tuple(warnings))

            warnings.append(RuleNote(rule=qualname, reason=reason))

        return Verdict.success(tuple(warnings))

    def validate(self, entry: NameEntry | str) -> Verdict:
        """Validate a name token without raising.

        Malformed names and rule violations are both reported as a
        failing verdict.

        Args:
            entry: Name token, or a raw string whose kind is inferred
                from its sigil.

        Returns:
            Verdict for the name.
        """
        entry = self._ensure_entry(entry)

        try:
            parsed = tokenize(entry.name, entry.kind)

        except MalformedName as error:
            return Verdict.failure(SYNTAX_RULE, error.message)

        return self.match(parsed, self.make_context(entry))

    def check(self, entry: NameEntry | str) -> 'ParsedName':
        """Validate a name token, raising on the first problem.

        Warning-level findings are emitted as `StyleWarning`.

        Args:
            entry: Name token, or a raw string whose kind is inferred
                from its sigil.

        Returns:
            The parsed name.

        Raises:
            MalformedName: If the name can not be tokenized.
            RuleViolation: If the name breaks an error-level rule.
        """
        entry = self._ensure_entry(entry)
        error_context = self._error_context(entry)

        try:
            parsed = tokenize(entry.name, entry.kind)

        except MalformedName as base:
            raise MalformedName(entry.name, base.message, context=error_context) from base

        verdict = self.match(parsed, self.make_context(entry))
        if not verdict.passed:
            raise RuleViolation(
                entry.name,
                verdict.rule or SYNTAX_RULE,
                verdict.reason or 'rule violation',
                context=error_context,
            )

        for note in verdict.warnings:
            warn(f'{entry.name}: {note.reason}', category=StyleWarning, stacklevel=2)

        return parsed

    @staticmethod
    def _ensure_entry(entry: NameEntry | str) -> NameEntry:
        """Normalize raw strings into name tokens."""
        if isinstance(entry, NameEntry):
            return entry

        return NameEntry.from_string(entry)

    @staticmethod
    def _error_context(entry: NameEntry) -> ErrorContext:
        """Build error context for a name token."""
        error_context = ErrorContext(name=entry.name)
        if entry.location is not None:
            error_context.update(
                filename=entry.location.filename,
                line_num=entry.location.line,
            )

        return error_context
