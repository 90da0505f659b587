"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value compared by its fields, not identity."""

    model_config = ConfigDict(frozen=True)
