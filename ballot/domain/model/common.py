"""Shared base for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable, validated view of a stored row.

    Services never mutate an entity; they build the next version with
    ``model_copy(update=...)`` and hand it to a repository.
    """

    model_config = ConfigDict(frozen=True)
