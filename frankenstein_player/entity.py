"""Base class for identifiable domain entities."""

from __future__ import annotations

from functools import total_ordering

from .dates import Datetime


@total_ordering
class Entity:
    """Something with a numeric id and a creation date."""

    def __init__(self, id: int = 0) -> None:
        self.id = id
        self.created_at = Datetime()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.id == other.id

    def __lt__(self, other: Entity) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"