"""Declarative naming rule definitions.

A rule is a small, independently testable check applied to a parsed
name. Rules are tagged by the name kinds they apply to and by severity,
and the matcher evaluates them in a fixed order so that a failing name
is always reported with a single, specific reason.
"""

from collections.abc import Callable
from typing import Literal

from pydantic import Field

from sass_naming.models import SchemaModel
from sass_naming.names import NameKind, RuleCode  # noqa: TC001
from sass_naming.schema import MatchContext, ParsedName

#: The checker receives a parsed name and its selector context and
#: returns a human-readable reason when the name breaks the rule,
#: or None when the rule is satisfied.
type RuleChecker = Callable[[ParsedName, MatchContext], str | None]

#: Severity of a rule. Error rules fail a name, warning rules only
#: annotate the verdict, and disabled rules are skipped.
type Severity = Literal['error', 'warning', 'off']


class Rule(SchemaModel):
    """Declarative naming rule.

    Rules are declarative descriptions only. They are registered by the
    matcher, which decides evaluation order and qualifies plugin rules
    with their plugin namespace.
    """

    code: RuleCode = Field(
        title='Rule identifier',
        description=(
            'Short identifier of the rule. Reported with every failure '
            'produced by the rule and used to override its severity.'
        ),
    )

    title: str | None = Field(
        default=None,
        title='Title',
        description='Short human-readable summary of the rule.',
    )

    kinds: tuple[NameKind, ...] = Field(
        default=('class', 'variable', 'mixin'),
        title='Name kinds',
        description='Kinds of names the rule applies to.',
    )

    severity: Severity = Field(
        default='error',
        title='Default severity',
    )

    checker: RuleChecker = Field(
        title='Checker function',
        description=(
            'Callable implementing the rule. Receives the parsed name and '
            'the match context. Must return a reason string when the name '
            'breaks the rule, or None otherwise.'
        ),
    )

    def applies(self, name: ParsedName) -> bool:
        """Whether the rule applies to the kind of the parsed name."""
        return name.kind in self.kinds

    def __call__(self, name: ParsedName, context: MatchContext) -> str | None:
        """Run the rule checker.

        Args:
            name: Parsed name to check.
            context: Selector and settings context.

        Returns:
            Reason of the violation, or None if the rule is satisfied.
        """
        if not self.applies(name):
            return None

        return self.checker(name, context)
