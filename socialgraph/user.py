"""Users of the social network."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class User:
    """A member of the network, identified by its position in the network."""

    id: int = 0
    name: str = ""
    year: int = 1934
    zip_code: int = 89591
    friends: set[int] = field(default_factory=set)

    def add_friend(self, friend_id: int) -> None:
        """Record ``friend_id`` as a friend; adding an existing friend does nothing."""
        self.friends.add(friend_id)

    def delete_friend(self, friend_id: int) -> None:
        """Forget ``friend_id`` as a friend; removing a stranger does nothing."""
        self.friends.discard(friend_id)