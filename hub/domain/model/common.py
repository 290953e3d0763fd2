"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability. Field names are
    snake_case in Python and camelCase on the wire (cookies, JSON).
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        alias_generator=to_camel,
        populate_by_name=True,
    )
