"""Builtin naming rules.

The rules are listed in evaluation order in `BUILTIN_RULES`. Each rule
covers one part of the grammar so that a failing name is reported with
the most specific reason available.
"""

from typing import TYPE_CHECKING

from sass_naming.extensions import Rule
from sass_naming.names import (
    DESCENDANT_SEPARATOR,
    JS_HOOK_NAMESPACE,
    STATE_PREFIX,
    UTILITY_NAMESPACE,
    is_camel_case,
)

if TYPE_CHECKING:
    from sass_naming.schema import MatchContext, ParsedName

_SEPARATORS = ('_', DESCENDANT_SEPARATOR)


def not_camel_case(part: str, value: str) -> str | None:
    """Describe why a segment is not camelCase.

    Args:
        part: Grammar part of the segment (`component`, `modifier`, ...).
        value: Segment as written.

    Returns:
        The reason, or None if the segment is camelCase.
    """
    if is_camel_case(value):
        return None

    if any(separator in value for separator in _SEPARATORS):
        return f'{part} name {value!r} not camelCase / unexpected separator'

    return f'{part} name {value!r} not camelCase'


def check_namespace(name: 'ParsedName', context: 'MatchContext') -> str | None:  # noqa: ARG001
    """Namespaces are lowercase; utility bodies are camelCase."""
    if name.namespace is None:
        return None

    namespace = name.namespace.lower()
    if name.namespace != namespace:
        return f'namespace {name.namespace!r} must be lowercase {namespace!r}'

    body = name.component or ''
    if namespace == UTILITY_NAMESPACE:
        if not body:
            return 'utility name is empty'
        return not_camel_case('utility', body)

    if namespace == JS_HOOK_NAMESPACE and not body:
        return 'JS-hook name is empty'

    return None


def check_component(name: 'ParsedName', context: 'MatchContext') -> str | None:  # noqa: ARG001
    """Component names are camelCase."""
    if name.namespace is not None or name.component is None:
        return None

    return not_camel_case('component', name.component)


def check_modifier(name: 'ParsedName', context: 'MatchContext') -> str | None:  # noqa: ARG001
    """Modifier names are camelCase."""
    if name.modifier is None:
        return None

    return not_camel_case('modifier', name.modifier)


def check_descendant(name: 'ParsedName', context: 'MatchContext') -> str | None:  # noqa: ARG001
    """Descendant names are camelCase."""
    for descendant in name.descendants:
        if reason := not_camel_case('descendant', descendant):
            return reason

    return None


def check_nesting(name: 'ParsedName', context: 'MatchContext') -> str | None:
    """Descendants are nested no deeper than the configured depth."""
    depth = len(name.descendants)
    if depth <= context.max_descendants:
        return None

    return (
        f'descendant nesting is {depth} levels deep, '
        f'at most {context.max_descendants} allowed'
    )


def check_state(name: 'ParsedName', context: 'MatchContext') -> str | None:
    """States use the `is-` prefix, are camelCase, and adjoin a component."""
    if name.state is None:
        return None

    prefix, separator, body = name.state.partition(DESCENDANT_SEPARATOR)
    if not separator or prefix.lower() != STATE_PREFIX:
        return f'state name {name.state!r} missing `is-` prefix'

    if prefix != STATE_PREFIX:
        return f'state prefix {prefix!r} must be lowercase `is-`'

    if reason := not_camel_case('state', body):
        return reason

    if name.component is None and context.standalone:
        return f'state class {name.state!r} used as a standalone selector'

    return None


def check_variable(name: 'ParsedName', context: 'MatchContext') -> str | None:  # noqa: ARG001
    """Variables and mixins end with `-<propertyName>-<variableName>`."""
    if name.property_name is None or name.variable_name is None:
        return f'{name.kind} name {name.raw!r} missing `-<propertyName>-<variableName>` suffix'

    for part, value in (
        ('property', name.property_name),
        ('variable', name.variable_name),
    ):
        if reason := not_camel_case(part, value):
            return reason

    if name.variable_modifier is not None:
        return not_camel_case('variable modifier', name.variable_modifier)

    return None


namespace = Rule(
    code='namespace',
    title='Utility and JS-hook namespaces',
    kinds=('class',),
    checker=check_namespace,
)

component = Rule(
    code='component',
    title='Component names are camelCase',
    checker=check_component,
)

modifier = Rule(
    code='modifier',
    title='Modifier names are camelCase',
    checker=check_modifier,
)

descendant = Rule(
    code='descendant',
    title='Descendant names are camelCase',
    checker=check_descendant,
)

nesting = Rule(
    code='nesting',
    title='Descendant nesting depth',
    severity='warning',
    checker=check_nesting,
)

state = Rule(
    code='state',
    title='State classes',
    kinds=('class',),
    checker=check_state,
)

variable = Rule(
    code='variable',
    title='Variable and mixin suffix',
    kinds=('variable', 'mixin'),
    checker=check_variable,
)

#: Builtin rules in evaluation order.
BUILTIN_RULES = (
    namespace,
    component,
    modifier,
    descendant,
    nesting,
    state,
    variable,
)
