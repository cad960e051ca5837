"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity validated on construction."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def evolve(self, **changes: Any) -> Self:
        """Return a copy with ``changes`` applied.

        Unlike ``model_copy(update=...)`` the result is validated, so field
        constraints hold for updated entities too.
        """
        return self.model_validate({**dict(self), **changes})
