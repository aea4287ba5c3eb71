"""Entity classes for Detective Quest."""

from entities.room import Room, Direction, traverse
from entities.manor_map import build_fixed_map, CLUE_ASSOCIATIONS

__all__ = ['Room', 'Direction', 'traverse', 'build_fixed_map', 'CLUE_ASSOCIATIONS']
