"""Fixed manor layout and case data for Detective Quest."""

from typing import Iterator, List, Optional, Tuple

from entities.room import Room


# Clue texts, shared by the map literal and the suspect associations
FOOTPRINT = "Wet footprint near the sofa"
KNIFE = "Knife with a broken handle"
DIARY_PAGE = "Torn page from a diary"
WINE_STAIN = "Wine stain on the tablecloth"
INITIAL_NOTE = "Note with an initial: 'M'"

# Who each clue points at. Marcos carries three clues, the others one each.
CLUE_ASSOCIATIONS: List[Tuple[str, str]] = [
    (FOOTPRINT, "Marcos"),
    (KNIFE, "Ricardo"),
    (DIARY_PAGE, "Mariana"),
    (WINE_STAIN, "Marcos"),
    (INITIAL_NOTE, "Marcos"),
]

START_ROOM = "Entrance Hall"


def build_fixed_map() -> Room:
    """Build the manor and return the Entrance Hall.

    Layout::

        Entrance Hall
        |-- Living Room (footprint)
        |   |-- Library (diary page)
        |   `-- Dining Room (wine stain)
        `-- Kitchen (knife)
            |-- Hallway
            `-- Bedroom (note)
    """
    library = Room("Library", DIARY_PAGE)
    dining_room = Room("Dining Room", WINE_STAIN)
    hallway = Room("Hallway")
    bedroom = Room("Bedroom", INITIAL_NOTE)

    living_room = Room("Living Room", FOOTPRINT, left=library, right=dining_room)
    kitchen = Room("Kitchen", KNIFE, left=hallway, right=bedroom)

    return Room(START_ROOM, left=living_room, right=kitchen)


def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Walk the map in pre-order (room, left subtree, right subtree)."""
    stack = [root] if root is not None else []
    while stack:
        room = stack.pop()
        yield room
        # Right first so the left subtree comes out first
        if room.right is not None:
            stack.append(room.right)
        if room.left is not None:
            stack.append(room.left)


def find_room(root: Optional[Room], name: str) -> Optional[Room]:
    """Find a room by exact name."""
    for room in iter_rooms(root):
        if room.name == name:
            return room
    return None
