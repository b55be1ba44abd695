"""Users of the media library."""

from __future__ import annotations

from .entity import Entity

UserId = int | str


class User(Entity):
    """A library user, tied to an operating-system account by ``uid``."""

    def __init__(
        self,
        username: str = "",
        home_path: str = "",
        input_path: str = "",
        uid: UserId = 0,
        id: int = 0,
    ) -> None:
        super().__init__(id)
        self.username = username
        self.home_path = home_path
        self.input_path = input_path
        self.uid = uid
        self.is_current_user = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.uid == other.uid

    def __hash__(self) -> int:
        return hash(self.uid)

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username!r}, uid={self.uid!r})"