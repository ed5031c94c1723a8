"""Naming grammar primitive patterns and validation rules.

This module defines the segment patterns of the SASS naming grammar and
strongly-typed aliases used by the tokenizer, the rule checkers, and the
configuration models.

Class names follow::

    [<namespace>-]<componentName>[--modifierName|-descendantName]

Variable and mixin names follow::

    [<componentName>[--modifier][-descendant]-]<propertyName>-<variableName>[--modifier]
"""

from re import ASCII
from re import compile as regexp
from typing import Annotated, Literal

from pydantic import Field

#: Base pattern for a single camelCase segment.
#: Segments start with a lowercase letter and may contain letters or digits.
_SEGMENT_PATTERN = r'[a-z][a-zA-Z0-9]*'

#: Compiled pattern for camelCase segments.
CAMEL_CASE_PATTERN = regexp(
    rf'^{_SEGMENT_PATTERN}$',
    flags=ASCII,
)

#: Characters allowed in class names, including the adjoining-class dot.
#: Underscores are tokenized so they can be reported as a separator problem.
CLASS_CHARS_PATTERN = regexp(
    r'^[A-Za-z0-9_.-]+$',
    flags=ASCII,
)

#: Characters allowed in variable and mixin names.
VARIABLE_CHARS_PATTERN = regexp(
    r'^[A-Za-z0-9_-]+$',
    flags=ASCII,
)

#: Separators of the grammar.
MODIFIER_SEPARATOR = '--'
DESCENDANT_SEPARATOR = '-'
ADJOINING_SEPARATOR = '.'

#: Namespaces for flat, single-segment class names.
UTILITY_NAMESPACE = 'u'
JS_HOOK_NAMESPACE = 'js'
NAMESPACES = (UTILITY_NAMESPACE, JS_HOOK_NAMESPACE)

#: Prefix of adjoining state classes.
STATE_PREFIX = 'is'

#: Kinds of names recognized by the linter.
type NameKind = Literal['class', 'variable', 'mixin']

#: Kinds following the variable grammar.
VARIABLE_KINDS: tuple[NameKind, ...] = ('variable', 'mixin')


def is_camel_case(value: str | None) -> bool:
    """Check whether a segment is camelCase.

    Args:
        value: Segment to check.

    Returns:
        True if the segment starts with a lowercase ASCII letter and
        contains only ASCII letters and digits.
    """
    return bool(value) and CAMEL_CASE_PATTERN.match(value) is not None


RuleCode = Annotated[
    str, Field(
        pattern=r'^[a-zA-Z][\w]*$',
        title='Rule identifier',
        description=(
            'Short identifier of a naming rule. '
            'Rule identifiers must start with a letter and may contain '
            'letters, digits, or underscores.'
        ),
        examples=[
            'namespace',
            'descendant',
            'noAbbreviations',
        ],
    ),
]

PluginName = Annotated[
    str, Field(
        pattern=r'^[a-zA-Z][\w]*$',
        title='Plugin namespace',
        description=(
            'Namespace of a rules plugin. Used to qualify plugin rules '
            'in reports, for example `company.noAbbreviations`.'
        ),
        examples=[
            'company',
        ],
    ),
]
