"""Name tokens extracted from stylesheet sources.

A name token is a single class, variable, or mixin name together with
the source location and selector context it was found in. Tokens are
created at scan time, validated once, and then discarded.
"""

from pydantic import Field

from sass_naming.models import SchemaModel
from sass_naming.names import NameKind  # noqa: TC001

VARIABLE_SIGIL = '$'
MIXIN_KEYWORD = '@mixin'
CLASS_SIGIL = '.'


class Location(SchemaModel):
    """Position of a name token in a source file."""

    filename: str | None = Field(
        default=None,
        title='Filename',
        description='Path of the stylesheet the name was found in.',
    )

    line: int | None = Field(
        default=None,
        ge=1,
        title='Line number',
        description='1-based line number of the name in the stylesheet.',
    )

    def __str__(self) -> str:
        """Render as `<file>:<line>`."""
        filename = self.filename or '<unicode string>'
        if self.line is None:
            return filename

        return f'{filename}:{self.line}'


class NameEntry(SchemaModel):
    """Immutable name token submitted for validation."""

    name: str = Field(
        title='Name',
        description=(
            'Raw class, variable, or mixin name without its sigil. '
            'Compound class names carry their adjoining state class, '
            'for example `dropdown.is-active`.'
        ),
    )

    kind: NameKind = Field(
        default='class',
        title='Name kind',
        description='Grammar the name is validated against.',
    )

    location: Location | None = Field(
        default=None,
        title='Source location',
        description='Where the name was found, if it came from a file.',
    )

    standalone: bool | None = Field(
        default=None,
        title='Standalone selector',
        description=(
            'Whether the class is the sole class of its compound selector. '
            'Used to reject state classes used without a component. '
            'Unknown when not provided by the caller.'
        ),
    )

    @classmethod
    def from_string(cls, raw: str, location: Location | None = None) -> 'NameEntry':
        """Create a name token from a raw string, inferring its kind.

        A leading `$` marks a variable, a leading `@mixin` a mixin, and
        a leading `.` (or nothing) a class name.

        Args:
            raw: Name as written by the user or found in source.
            location: Optional source location.

        Returns:
            A name token with the sigil stripped.
        """
        value = raw.strip()

        if value.startswith(VARIABLE_SIGIL):
            return cls(name=value[1:], kind='variable', location=location)

        if value.startswith(MIXIN_KEYWORD):
            return cls(name=value[len(MIXIN_KEYWORD):].strip(), kind='mixin', location=location)

        if value.startswith(CLASS_SIGIL):
            value = value[1:]

        return cls(name=value, kind='class', location=location)
