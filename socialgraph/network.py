"""A friendship network with graph queries and a plain-text storage format."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterator
from itertools import islice
from os import PathLike
from pathlib import Path
from typing import Union

from .user import User

PathType = Union[str, "PathLike[str]"]

_INT = re.compile(r"\s*([+-]?\d+)")
_FIELDS_PER_USER = 5


class UnknownUserError(LookupError):
    """Raised when a name or id does not refer to a user of the network."""


def _leading_int(text: str) -> int:
    """Read the integer at the start of ``text``; 0 when there is none."""
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _ints(text: str) -> Iterator[int]:
    """Yield consecutive integers from ``text`` until something else is met."""
    pos = 0
    while (match := _INT.match(text, pos)) is not None:
        yield int(match.group(1))
        pos = match.end()


def _strip_tab(text: str) -> str:
    return text[1:] if text.startswith("\t") else text


class Network:
    """Users indexed by id, where every user's id equals its position."""

    def __init__(self) -> None:
        self._users: list[User] = []

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def get_user(self, user_id: int) -> User | None:
        """Return the user with ``user_id``, or None when there is none."""
        if 0 <= user_id < len(self._users):
            return self._users[user_id]
        return None

    def add_user(self, user: User) -> None:
        """Append ``user`` if its id is the next free one; otherwise ignore it."""
        if user.id == len(self._users):
            self._users.append(user)

    def get_id(self, name: str) -> int:
        """Return the id of the first user called ``name``."""
        for user in self._users:
            if user.name == name:
                return user.id
        raise UnknownUserError(f"no user named {name!r}")

    def add_connection(self, name1: str, name2: str) -> None:
        """Make the two named users friends of each other."""
        id1, id2 = self.get_id(name1), self.get_id(name2)
        self._users[id1].add_friend(id2)
        self._users[id2].add_friend(id1)

    def delete_connection(self, name1: str, name2: str) -> None:
        """Remove the friendship between the two named users, if any."""
        id1, id2 = self.get_id(name1), self.get_id(name2)
        self._users[id1].delete_friend(id2)
        self._users[id2].delete_friend(id1)

    def read_users(self, path: PathType) -> None:
        """Replace the network with the one stored at ``path``.

        An unreadable or malformed file leaves whatever users were read
        before the problem, without any friendships.
        """
        self._users.clear()
        try:
            text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
        except OSError:
            return

        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        records = iter(lines)

        header = next(records, None)
        if header is None:
            return
        count = _leading_int(header)
        if count < 0:
            return

        pending: list[list[int]] = []
        for index in range(count):
            chunk = list(islice(records, _FIELDS_PER_USER))
            if len(chunk) < _FIELDS_PER_USER:
                return
            id_line, name_line, year_line, zip_line, friends_line = chunk
            if _leading_int(id_line) != index:
                return
            self.add_user(
                User(
                    index,
                    _strip_tab(name_line),
                    _leading_int(_strip_tab(year_line)),
                    _leading_int(_strip_tab(zip_line)),
                )
            )
            pending.append(list(_ints(_strip_tab(friends_line))))

        for user_id, friend_ids in enumerate(pending):
            for friend_id in friend_ids:
                if user_id < friend_id < count:
                    self._users[user_id].add_friend(friend_id)
                    self._users[friend_id].add_friend(user_id)

    def write_users(self, path: PathType) -> None:
        """Store the network at ``path`` in the format ``read_users`` reads."""
        parts = [f"{len(self._users)}\n"]
        for index, user in enumerate(self._users):
            friends = " ".join(str(friend) for friend in sorted(user.friends))
            parts.append(
                f"{index}\n\t{user.name}\n\t{user.year}\n\t{user.zip_code}\n\t{friends}\n"
            )
        Path(path).write_text("".join(parts), encoding="utf-8", errors="surrogateescape")

    def _require(self, user_id: int) -> None:
        if not 0 <= user_id < len(self._users):
            raise UnknownUserError(f"no user with id {user_id}")

    def _neighbours(self, user_id: int) -> list[int]:
        return sorted(self._users[user_id].friends)

    def shortest_path(self, source: int, target: int) -> list[int]:
        """Return the ids on a shortest path from ``source`` to ``target``.

        The list is empty when the two users are not connected.
        """
        self._require(source)
        self._require(target)
        if source == target:
            return [source]

        previous: dict[int, int] = {source: source}
        queue = deque([source])
        while queue and target not in previous:
            current = queue.popleft()
            for neighbour in self._neighbours(current):
                if neighbour not in previous:
                    previous[neighbour] = current
                    queue.append(neighbour)

        if target not in previous:
            return []
        path = [target]
        while path[-1] != source:
            path.append(previous[path[-1]])
        path.reverse()
        return path

    def distance_user(self, source: int, distance: int) -> tuple[int, list[int]] | None:
        """Find a user exactly ``distance`` steps from ``source``.

        Returns that user's id with a shortest path to it, or None when no
        user lies at that distance.
        """
        self._require(source)
        depth = {source: 0}
        queue = deque([source])
        while queue:
            current = queue.popleft()
            if depth[current] == distance:
                return current, self.shortest_path(source, current)
            for neighbour in self._neighbours(current):
                if neighbour not in depth:
                    depth[neighbour] = depth[current] + 1
                    queue.append(neighbour)
        return None

    def suggest_friends(self, who: int) -> tuple[list[int], int]:
        """Suggest the non-friends sharing the most friends with ``who``.

        Returns the suggested ids and the number of shared friends; the list
        is empty when nobody shares a friend.
        """
        self._require(who)
        mine = self._users[who].friends
        score = 0
        suggestions: list[int] = []
        for user in self._users:
            if user.id == who or user.id in mine:
                continue
            mutual = len(mine & user.friends)
            if mutual > score:
                score = mutual
                suggestions = [user.id]
            elif mutual == score and mutual > 0:
                suggestions.append(user.id)
        return suggestions, score

    def groups(self) -> list[list[int]]:
        """Split the users into connected groups, in order of their lowest id."""
        visited: set[int] = set()
        components: list[list[int]] = []
        for user in self._users:
            if user.id in visited:
                continue
            component: list[int] = []
            stack = [user.id]
            while stack:
                current = stack.pop()
                if current in visited:
                    continue
                visited.add(current)
                component.append(current)
                stack.extend(n for n in self._neighbours(current) if n not in visited)
            components.append(component)
        return components