"""Declarative rules plugin definition.

This module defines the top-level declarative container used to describe
naming rules provided by a third-party package.

Plugins are discovered through the `sass_naming_rules` entry point group.
The plugin model itself contains no execution logic; it is consumed by
the rules loader to register every contributed rule after the builtins.
"""

from pydantic import Field

from sass_naming.models import SchemaModel
from sass_naming.names import PluginName  # noqa: TC001

from .rules import Rule, RuleChecker, Severity

__all__ = (
    'Plugin',
    'Rule',
    'RuleChecker',
    'Severity',
)


class Plugin(SchemaModel):
    """Declarative container for naming rule extensions."""

    name: PluginName = Field(
        title='Plugin namespace',
        description=(
            'Logical namespace of the plugin. '
            'Used to qualify rule identifiers and detect conflicts.'
        ),
    )

    version: int = Field(
        default=1,
        title='Rules contract version',
        description=(
            'Version of the rules contract the plugin targets. '
            'This is not a semantic version of the plugin implementation.'
        ),
    )

    rules: list[Rule] = Field(
        default_factory=list,
        title='Rules',
        description=(
            'Rule definitions provided by the plugin, '
            'evaluated in the listed order after the builtin rules.'
        ),
    )
