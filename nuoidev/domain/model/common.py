"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are frozen; updates go through ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)
