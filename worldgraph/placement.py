"""Placement of the final (goal) rooms around the start room."""

from __future__ import annotations

import math

from worldgraph.errors import GenerationError
from worldgraph.graph import WorldNode

MIN_DEPTH = 4


def compute_final_room_distance(depth: int) -> int:
    """Manhattan distance between the start room and every final room.

    A path to a final room crosses depth - 1 doors and each door flips the
    parity of x + y, so the distance must have the parity of depth - 1.
    """
    distance = max(1, depth // 3)
    if depth % 2 == 0 and distance % 2 == 0:
        distance += 1
    elif depth % 2 == 1 and distance % 2 == 1:
        distance += 1
    return distance


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def get_n_circle_points(
    cx: int, cy: int, count: int, distance: int
) -> list[tuple[int, int]]:
    """Spread `count` points evenly by angle on an L1 circle.

    Every point is exactly `distance` Manhattan units away from (cx, cy): the
    L1 budget is split between the x and y axis in proportion to the cosine
    and sine of the point's angle.

    Args:
        cx: Centre x.
        cy: Centre y.
        count: Number of points.
        distance: L1 radius.

    Returns:
        List of (x, y) points, starting at angle 0 (towards +x).
    """
    if count <= 0 or distance < 0:
        return []
    if distance == 0:
        return [(cx, cy)]

    points: list[tuple[int, int]] = []
    for k in range(count):
        theta = 2 * math.pi * k / count
        c = math.cos(theta)
        s = math.sin(theta)
        total = abs(c) + abs(s) or 1

        ax = _round_half_up(distance * abs(c) / total)
        ay = distance - ax

        dx = (1 if c >= 0 else -1) * ax
        dy = (1 if s >= 0 else -1) * ay
        points.append((cx + dx, cy + dy))
    return points


def create_world_final_nodes(
    start_node: WorldNode, depth: int, count: int
) -> list[WorldNode]:
    """Create the final rooms for a graph of the given depth.

    The rooms have no connections yet; the path search wires them.

    Raises:
        GenerationError: If depth is lower than MIN_DEPTH.
    """
    if depth < MIN_DEPTH:
        raise GenerationError(f"depth must be >= {MIN_DEPTH}, got {depth}")
    distance = compute_final_room_distance(depth)
    points = get_n_circle_points(start_node.x, start_node.y, count, distance)
    return [WorldNode(x=x, y=y, depth=depth) for x, y in points]
