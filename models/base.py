"""Base classes for Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Pydantic base schema with common configuration.

    Canonical records are immutable once built and serialize with the
    camelCase field names the result envelope uses (``dataDistribuicao``,
    ``valorCausa``...).
    """

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RawSchema(BaseModel):
    """Base for provider payload models: every key optional, unknown keys ignored.

    Courts are inconsistent about scalar types (a CPF may arrive as a number),
    so numbers are accepted wherever text is expected.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)
