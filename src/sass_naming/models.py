"""Base Pydantic models for linter data.

This module defines the foundational model classes used by all linter
structures. It enforces immutability and strict schema validation so that
parsed names, verdicts, and reports stay deterministic once produced.
"""

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchemaModel(BaseModel):
    """Base immutable model for all linter data.

    Design principles enforced by this model:
        - Immutability: tokens, parsed names, and verdicts cannot be
          modified after creation, so validation stays a pure function
          of its input.
        - Strict schema validation: unknown or extra fields are rejected
          to avoid silent errors caused by typos in plugin definitions.

    All linter models must inherit from this class.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra='forbid',
    )


class SettingsModel(BaseSettings):
    """Base immutable model for linter settings.

    Design principles enforced by this model:
        - Immutability: resolved settings cannot be modified after creation.
        - Tolerant schema handling: unknown environment variables are
          ignored so the surrounding environment cannot break the linter.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        extra='ignore',
    )
