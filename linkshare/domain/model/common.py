"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable snapshots of persisted rows.
    """

    model_config = ConfigDict(frozen=True)
