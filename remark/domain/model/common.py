"""Shared base for domain entities and read models."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain model.

    Changes are made by building a new instance with ``evolve``, which runs
    field validation again, unlike ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)

    def evolve(self, **changes: Any) -> Self:
        """Return a validated copy with the given fields replaced."""
        return self.model_validate({**self.model_dump(), **changes})
