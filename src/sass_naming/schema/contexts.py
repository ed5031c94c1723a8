"""Selector and settings context passed to rule checkers."""

from pydantic import Field

from sass_naming.models import SchemaModel


class MatchContext(SchemaModel):
    """Information a rule needs beyond the name string itself."""

    standalone: bool | None = Field(
        default=None,
        title='Standalone selector',
        description=(
            'Whether the name is the sole class of its compound selector. '
            'None when the caller has no selector context.'
        ),
    )

    max_descendants: int = Field(
        default=1,
        ge=0,
        title='Maximum descendant depth',
    )
