"""Room entity class for Detective Quest."""

from enum import Enum
from typing import Optional


class Direction(Enum):
    """The two doors every room may have."""
    LEFT = "left"
    RIGHT = "right"


class Room:
    """A node of the manor map.

    Each room has a name, at most one clue and up to two child rooms
    (left and right). The clue cannot be changed once the room exists.
    """

    def __init__(self, name: str, clue: Optional[str] = None,
                 left: Optional["Room"] = None, right: Optional["Room"] = None):
        self.name = name
        self._clue = clue
        self.left = left
        self.right = right

    @property
    def clue(self) -> Optional[str]:
        return self._clue

    def has_clue(self) -> bool:
        return self._clue is not None

    def child(self, direction: Direction) -> Optional["Room"]:
        """Return the room behind the given door, or None if there is no door."""
        if direction is Direction.LEFT:
            return self.left
        if direction is Direction.RIGHT:
            return self.right
        raise ValueError(f"Unknown direction: {direction}")

    def is_dead_end(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        return f"Room({self.name!r}, clue={self._clue!r})"


def traverse(current: Room, direction: Direction) -> Optional[Room]:
    """Follow a door from ``current``.

    Returns the child room, or None when that path does not exist. The caller
    keeps its cursor in the None case.
    """
    if current is None:
        return None
    return current.child(direction)
