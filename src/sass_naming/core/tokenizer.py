"""Name tokenizer.

This module splits raw class, variable, and mixin names into their
grammar parts. The tokenizer only checks structure: segment casing and
prefix spelling are left to the rule checkers, so that every problem a
rule can describe is reported by that rule instead of as a syntax error.
"""

from re import ASCII
from re import compile as regexp
from typing import TYPE_CHECKING

from sass_naming.errors import MalformedName
from sass_naming.names import (
    ADJOINING_SEPARATOR,
    CLASS_CHARS_PATTERN,
    DESCENDANT_SEPARATOR,
    MODIFIER_SEPARATOR,
    NAMESPACES,
    STATE_PREFIX,
    VARIABLE_CHARS_PATTERN,
    VARIABLE_KINDS,
)
from sass_naming.schema import ParsedName

if TYPE_CHECKING:
    from re import Pattern

    from sass_naming.names import NameKind

#: Splits a variable name into segments, keeping the separators.
_VARIABLE_SEGMENTS = regexp(r'(--|-)', flags=ASCII)


def tokenize(raw: str, kind: 'NameKind' = 'class') -> ParsedName:
    """Split a raw name into its grammar parts.

    Args:
        raw: Name without its sigil (`.`, `$`, or `@mixin`).
        kind: Grammar to tokenize against.

    Returns:
        The parsed name. `ParsedName.join()` reproduces `raw`.

    Raises:
        MalformedName: If the name can not be split into grammar parts.
    """
    if not raw:
        raise MalformedName(raw, 'empty name')

    if kind in VARIABLE_KINDS:
        return tokenize_variable(raw, kind)

    return tokenize_class(raw)


def _check_characters(raw: str, pattern: 'Pattern[str]') -> None:
    """Reject names with characters outside of the grammar alphabet."""
    if pattern.match(raw) is None:
        unexpected = next(char for char in raw if pattern.match(char) is None)
        raise MalformedName(raw, f'unexpected character {unexpected!r}')


def tokenize_class(raw: str) -> ParsedName:
    """Split a class name, optionally with an adjoining state class.

    Args:
        raw: Class name such as `dropdown--dropUp` or `dropdown.is-active`.

    Returns:
        The parsed class name.

    Raises:
        MalformedName: If the name can not be split into grammar parts.
    """
    _check_characters(raw, CLASS_CHARS_PATTERN)

    base, *adjoining = raw.split(ADJOINING_SEPARATOR)
    if not base or any(not item for item in adjoining):
        raise MalformedName(raw, 'empty class in compound name')
    if len(adjoining) > 1:
        raise MalformedName(raw, 'more than one adjoining state class')

    state = adjoining[0] if adjoining else None

    prefix, separator, body = base.partition(DESCENDANT_SEPARATOR)
    if separator and prefix.lower() in NAMESPACES:
        if state is not None:
            raise MalformedName(raw, f'namespaced name {base!r} can not carry a state class')
        return ParsedName(raw=raw, namespace=prefix, component=body)

    if separator and prefix.lower() == STATE_PREFIX:
        if state is not None:
            raise MalformedName(raw, 'more than one state class')
        return ParsedName(raw=raw, state=base)

    if base.count(MODIFIER_SEPARATOR) > 1:
        raise MalformedName(raw, 'more than one modifier segment')

    head, separator, modifier = base.partition(MODIFIER_SEPARATOR)
    if separator and not modifier:
        raise MalformedName(raw, 'empty modifier segment')

    component, *descendants = head.split(DESCENDANT_SEPARATOR)
    if not component or any(not item for item in descendants):
        raise MalformedName(raw, 'empty name segment')

    if separator and descendants:
        raise MalformedName(raw, 'modifier can not be combined with a descendant')

    return ParsedName(
        raw=raw,
        component=component,
        modifier=modifier if separator else None,
        descendants=tuple(descendants),
        state=state,
    )


def tokenize_variable(raw: str, kind: 'NameKind' = 'variable') -> ParsedName:
    """Split a variable or mixin name.

    The trailing `--<modifier>` is taken as the variable modifier and the
    last two single-hyphen segments as `<propertyName>-<variableName>`.
    Anything before them is the `<componentName>[--modifier][-descendant]`
    prefix. Names without the property suffix still tokenize, with the
    property and variable parts left empty.

    Args:
        raw: Variable name without `$`, or mixin name without `@mixin`.
        kind: Either `variable` or `mixin`.

    Returns:
        The parsed variable or mixin name.

    Raises:
        MalformedName: If the name can not be split into grammar parts.
    """
    _check_characters(raw, VARIABLE_CHARS_PATTERN)

    parts = _VARIABLE_SEGMENTS.split(raw)
    segments, separators = parts[::2], parts[1::2]
    if any(not item for item in segments):
        raise MalformedName(raw, 'empty name segment')

    variable_modifier = None
    if separators and separators[-1] == MODIFIER_SEPARATOR:
        variable_modifier = segments.pop()
        separators.pop()

    property_name = variable_name = None
    if len(segments) >= 2 and separators[-1] == DESCENDANT_SEPARATOR and (  # noqa: PLR2004
        len(segments) == 2 or separators[-2] == DESCENDANT_SEPARATOR  # noqa: PLR2004
    ):
        variable_name = segments.pop()
        property_name = segments.pop()
        separators = separators[:-2] if segments else []

    component = modifier = None
    descendants: list[str] = []
    if segments:
        component, *rest = segments
        for position, (separator, segment) in enumerate(zip(separators, rest, strict=True)):
            if separator == MODIFIER_SEPARATOR:
                if position > 0:
                    raise MalformedName(raw, 'modifier must directly follow the component name')
                modifier = segment
            else:
                descendants.append(segment)

    return ParsedName(
        raw=raw,
        kind=kind,
        component=component,
        modifier=modifier,
        descendants=tuple(descendants),
        property_name=property_name,
        variable_name=variable_name,
        variable_modifier=variable_modifier,
    )
