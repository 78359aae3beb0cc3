"""Compass directions on the room grid."""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Position(Protocol):
    """Anything with integer grid coordinates."""

    x: int
    y: int


class Direction(Enum):
    """Compass direction of a door between two adjacent rooms."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


ALL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)

# Distance between two adjacent rooms, in grid cells
ROOM_OFFSET = 1

# Grid y grows downwards (screen space), so north is -y
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -ROOM_OFFSET),
    Direction.SOUTH: (0, ROOM_OFFSET),
    Direction.EAST: (ROOM_OFFSET, 0),
    Direction.WEST: (-ROOM_OFFSET, 0),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


def opposite_direction(direction: Direction) -> Direction:
    """Return the direction pointing the other way."""
    return _OPPOSITES[direction]


def direction_offset(direction: Direction) -> tuple[int, int]:
    """Return the (dx, dy) grid step for a direction."""
    return _OFFSETS[direction]


def direction_between(source: Position, target: Position) -> Direction | None:
    """Return the direction from source to an adjacent target.

    Returns:
        The direction, or None if the positions are not unit neighbours.
    """
    delta = (target.x - source.x, target.y - source.y)
    for direction, offset in _OFFSETS.items():
        if offset == delta:
            return direction
    return None


def manhattan_distance(a: Position, b: Position) -> int:
    """L1 distance between two grid positions."""
    return abs(a.x - b.x) + abs(a.y - b.y)


def are_neighbor_positions(a: Position, b: Position) -> bool:
    """Check whether two positions are exactly one axis-aligned step apart."""
    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    return (dx == ROOM_OFFSET and dy == 0) or (dx == 0 and dy == ROOM_OFFSET)


def same_position(a: Position, b: Position) -> bool:
    """Check whether two positions share the same grid cell."""
    return a.x == b.x and a.y == b.y
