"""Rules discovery and plugin loading infrastructure.

This module defines a mixin responsible for discovering, loading, and
registering naming rules exposed via Python entry points.

Plugins are loaded defensively: individual failures do not interrupt
the loading process unless strict mode is enabled.
"""

from typing import TYPE_CHECKING
from warnings import warn

from pydantic import ValidationError

from sass_naming.errors import PluginError, PluginWarning
from sass_naming.extensions import Plugin

if TYPE_CHECKING:
    from importlib.metadata import EntryPoint

if TYPE_CHECKING:
    from sass_naming.extensions import Rule

#: Entry point group scanned for rules plugins.
PLUGINS_GROUP = 'sass_naming_rules'


class RulesLoaderMixin:
    """Mixin defining rule registration and plugin loading behavior.

    Rules are kept in registration order, keyed by their qualified
    identifier. Builtin rules use their plain code; plugin rules are
    prefixed with the plugin namespace.

    Attributes:
        strict_mode: If True, any plugin loading issue raises an error.
            If False, issues are emitted as warnings and loading continues.
    """

    strict_mode: bool = False

    rules: dict[str, 'Rule']

    def add_rule(self, rule: 'Rule',
                 entrypoint: 'EntryPoint | None' = None,
                 namespace: str | None = None) -> None:
        """Register a rule definition.

        Args:
            rule: Declarative rule definition.
            entrypoint: Entry point from which the rule was loaded,
                if applicable. Used for diagnostics and warnings.
            namespace: Optional plugin namespace to prefix the rule code.

        Raises:
            PluginError: If the rule shadows an existing one on strict mode.
        """
        module, qualname = self.resolve_rule_names(rule, entrypoint, namespace)

        if qualname in self.rules:
            if error := self.emit_plugin_issue(
                f'Rule {qualname!r} from {module!r} is shadowing an existing',
                entrypoint,
            ):
                raise error
            return

        self.rules[qualname] = rule

    @staticmethod
    def resolve_rule_names(rule: 'Rule',
                           entrypoint: 'EntryPoint | None' = None,
                           namespace: str | None = None) -> tuple[str, str]:
        """Resolve display names for a rule definition.

        Args:
            rule: Declarative rule definition.
            entrypoint: Entry point from which the rule was loaded, if applicable.
            namespace: Optional plugin namespace to prefix the rule code.

        Returns:
            Tuple with a module name and a qualified rule identifier.
        """
        return (
            f'{entrypoint.value if entrypoint else rule.checker.__module__}',
            f'{namespace}.{rule.code}' if namespace else rule.code,
        )

    def emit_plugin_issue(self, message: str,
                          entrypoint: 'EntryPoint | None' = None) -> Exception | None:
        """Emit a plugin warning or return the exception.

        Args:
            message: Warning message to emit.
            entrypoint: Entry point from which the rule was loaded, if applicable.

        Returns:
            PluginError on strict mode, otherwise `None`
                with producing a PluginWarning.
        """
        if self.strict_mode:
            return PluginError(message, entrypoint=entrypoint)

        warn(message, category=PluginWarning, stacklevel=2)

        return None

    def _load_plugin(self, entrypoint: 'EntryPoint') -> None:
        """Load and register a single plugin entry point.

        Args:
            entrypoint: Entry point describing the plugin to load.

        Raises:
            PluginError: If any loading issues occur on strict mode.
        """
        try:
            plugin = entrypoint.load()

        except ValidationError as base:
            if error := self.emit_plugin_issue(
                f'Failed to validate entrypoint {entrypoint.name!r}',
                entrypoint,
            ):
                raise error from base
            return

        except Exception as base:
            if error := self.emit_plugin_issue(
                f'Failed to load entrypoint {entrypoint.name!r}',
                entrypoint,
            ):
                raise error from base
            return

        if not isinstance(plugin, Plugin):
            if error := self.emit_plugin_issue(
                f'Loaded from entrypoint {entrypoint.name!r} object is not a plugin',
                entrypoint,
            ):
                raise error
            return

        for rule in plugin.rules:
            self.add_rule(rule, entrypoint, namespace=plugin.name)

    def clear_rules(self) -> None:
        """Clear all registered rules."""
        self.rules = {}

    def load_plugins(self) -> None:
        """Load plugins via entry points and register their rules.

        Raises:
            PluginError: If any loading issues occur on strict mode.
        """
        from importlib.metadata import entry_points  # noqa: PLC0415

        for entrypoint in entry_points().select(group=PLUGINS_GROUP):
            self._load_plugin(entrypoint)
