"""Structural decomposition of a name token."""

from pydantic import Field

from sass_naming.models import SchemaModel
from sass_naming.names import (
    ADJOINING_SEPARATOR,
    DESCENDANT_SEPARATOR,
    MODIFIER_SEPARATOR,
    STATE_PREFIX,
    VARIABLE_KINDS,
    NameKind,
)


class ParsedName(SchemaModel):
    """Name token split into its grammar parts.

    Segments are stored exactly as written, so that rule checkers can
    report case and separator problems and `join` can rebuild the raw
    name. Validation of the segments is left to the rules.

    For namespaced class names (`u-`, `js-`) the flat body is stored in
    `component` and no other structure is present. A bare state class
    (`is-active`) has only `state` set.
    """

    raw: str = Field(
        title='Raw name',
        description='Name token as it was tokenized.',
    )

    kind: NameKind = Field(
        default='class',
        title='Name kind',
    )

    namespace: str | None = Field(
        default=None,
        title='Namespace',
        description='Namespace prefix without the hyphen, as written.',
    )

    component: str | None = Field(
        default=None,
        title='Component name',
        description='Base component name, or the body of a namespaced name.',
    )

    modifier: str | None = Field(
        default=None,
        title='Modifier name',
    )

    descendants: tuple[str, ...] = Field(
        default=(),
        title='Descendant names',
        description='Descendant segments from outermost to innermost.',
    )

    state: str | None = Field(
        default=None,
        title='State class',
        description='Adjoining state class including its prefix, as written.',
    )

    property_name: str | None = Field(
        default=None,
        title='Property name',
        description='Property segment of a variable or mixin name.',
    )

    variable_name: str | None = Field(
        default=None,
        title='Variable name',
        description='Variable segment of a variable or mixin name.',
    )

    variable_modifier: str | None = Field(
        default=None,
        title='Variable modifier',
        description='Trailing modifier of a variable or mixin name.',
    )

    @property
    def state_name(self) -> str | None:
        """State body without the `is-` prefix, if the prefix is present."""
        if self.state is None:
            return None

        prefix, separator, body = self.state.partition(DESCENDANT_SEPARATOR)
        if separator and prefix.lower() == STATE_PREFIX:
            return body

        return None

    @property
    def is_variable(self) -> bool:
        """Whether the name follows the variable grammar."""
        return self.kind in VARIABLE_KINDS

    def join(self) -> str:
        """Re-join the segments with the grammar delimiters.

        Returns:
            The name rebuilt from its parts. For every tokenizable input
            this equals `raw`.
        """
        if self.namespace is not None:
            return f'{self.namespace}{DESCENDANT_SEPARATOR}{self.component or ''}'

        head = self.component or ''
        if self.modifier is not None:
            head += f'{MODIFIER_SEPARATOR}{self.modifier}'
        for descendant in self.descendants:
            head += f'{DESCENDANT_SEPARATOR}{descendant}'

        if self.is_variable:
            if self.property_name is not None and self.variable_name is not None:
                suffix = f'{self.property_name}{DESCENDANT_SEPARATOR}{self.variable_name}'
                head = f'{head}{DESCENDANT_SEPARATOR}{suffix}' if head else suffix
            if self.variable_modifier is not None:
                head += f'{MODIFIER_SEPARATOR}{self.variable_modifier}'
            return head

        if self.state is not None:
            if not head:
                return self.state
            head += f'{ADJOINING_SEPARATOR}{self.state}'

        return head

    def __str__(self) -> str:
        """String representation."""
        return self.join()
