"""Backtracking search that wires the rooms of a world graph.

The search walks outwards from the start room one depth at a time, trying the
four compass directions in random order. A room is only attached to its parent
once it is known to lead to a final room (post-order commit), so the finished
graph never contains a dead end. Three things keep the search tractable:

- rooms proven to be dead ends are memoized by (position, depth) and never
  explored again,
- candidates too far from every final room for the remaining depth budget are
  pruned right away,
- a candidate landing on an already built room of the same depth reuses it,
  which turns converging branches into a DAG instead of duplicating rooms.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from worldgraph.direction import (
    ALL_DIRECTIONS,
    Direction,
    Position,
    direction_between,
    direction_offset,
    manhattan_distance,
    opposite_direction,
    same_position,
)
from worldgraph.errors import GenerationError
from worldgraph.graph import (
    WorldNode,
    bfs_world_graph_backward,
    get_position_key,
    get_world_node_key,
)
from worldgraph.rng import Random

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters collected while searching, for diagnostics."""

    explored: int = 0
    pruned: int = 0
    merged: int = 0
    goal_connections: int = 0


@dataclass
class WorldGraphContext:
    """Shared state of one generation call, threaded through the recursion.

    Attributes:
        max_depth: Depth of the final rooms.
        start_node: Root room.
        final_nodes: Goal rooms, at max_depth.
        rng: Random source used to order directions.
        position_rooms: Committed rooms by position key, used for merging.
        invalid_rooms: Node keys proven to be dead ends.
        stats: Search counters.
    """

    max_depth: int
    start_node: WorldNode
    final_nodes: list[WorldNode]
    rng: Random
    position_rooms: dict[str, WorldNode] = field(default_factory=dict)
    invalid_rooms: set[str] = field(default_factory=set)
    stats: SearchStats = field(default_factory=SearchStats)

    def __post_init__(self) -> None:
        if not self.final_nodes:
            raise GenerationError("At least one final node must be provided")
        seen: set[str] = set()
        for final in self.final_nodes:
            if same_position(self.start_node, final):
                raise GenerationError(
                    "Start and final rooms must have different positions"
                )
            if final.depth != self.max_depth:
                raise GenerationError(
                    f"Final room {get_world_node_key(final)} must have "
                    f"max depth {self.max_depth}"
                )
            key = get_position_key(final)
            if key in seen:
                raise GenerationError(f"Two final rooms share position {key}")
            seen.add(key)

    def register(self, node: WorldNode) -> None:
        """Record a committed room so other branches can merge into it."""
        self.position_rooms[get_position_key(node)] = node


def count_reachable_finals(ctx: WorldGraphContext, candidate: WorldNode) -> int:
    """Count the final rooms a candidate can still reach.

    A final room is reachable when its Manhattan distance from the candidate
    fits in the remaining depth budget, whatever doors it already has. A
    candidate standing on a final room's cell reaches nothing: that cell
    belongs to the final room's depth.
    """
    reachable = 0
    for final in ctx.final_nodes:
        if same_position(candidate, final):
            return 0
        depth_budget = final.depth - candidate.depth
        if depth_budget <= 0:
            raise GenerationError(
                f"Candidate {get_world_node_key(candidate)} is not above "
                f"final room {get_world_node_key(final)}"
            )
        if manhattan_distance(candidate, final) <= depth_budget:
            reachable += 1
    return reachable


def prev_room_exists_at(source: WorldNode, position: Position) -> bool:
    """Check whether an ancestor of source occupies the given position."""
    ancestors = bfs_world_graph_backward(source)
    next(ancestors)  # source itself
    return any(same_position(ancestor, position) for ancestor in ancestors)


def _find_final_neighbor(
    ctx: WorldGraphContext, node: WorldNode
) -> tuple[WorldNode, Direction] | None:
    for final in ctx.final_nodes:
        direction = direction_between(node, final)
        if direction is None:
            continue
        if opposite_direction(direction) not in final.connected_nodes:
            return final, direction
    return None


def _connect(source: WorldNode, direction: Direction, target: WorldNode) -> None:
    """Wire a door from source to target, on both sides."""
    source.connected_nodes[direction] = target
    target.connected_nodes[opposite_direction(direction)] = source


def find_world_room_paths(ctx: WorldGraphContext, source: WorldNode) -> bool:
    """Wire every path from source towards a final room.

    Args:
        ctx: Generation context.
        source: Room to expand. Its entrances must already be wired.

    Returns:
        True if source leads to at least one final room. Exits are only
        attached to source for directions that do.

    Raises:
        GenerationError: If an already wired door would be overwritten.
    """
    has_any_path_to_final = False

    for direction in ctx.rng.shuffle(list(ALL_DIRECTIONS)):
        dx, dy = direction_offset(direction)
        next_room = WorldNode(
            x=source.x + dx, y=source.y + dy, depth=source.depth + 1
        )
        direction_to_source = opposite_direction(direction)
        # Entrance first, so the ancestor check can walk back from next_room
        next_room.connected_nodes[direction_to_source] = source
        ctx.stats.explored += 1

        room_key = get_world_node_key(next_room)
        if room_key in ctx.invalid_rooms:
            continue

        if not count_reachable_finals(ctx, next_room):
            logger.debug("Pruned %s: no final room in reach", room_key)
            ctx.stats.pruned += 1
            ctx.invalid_rooms.add(room_key)
            continue

        next_has_path_to_final = False
        existing_room = ctx.position_rooms.get(get_position_key(next_room))
        if existing_room is not None:
            if existing_room.depth == next_room.depth:
                # Reuse the room built by another branch; its own paths are known
                entrance = existing_room.connected_nodes.get(direction_to_source)
                if entrance is not None and entrance is not source:
                    raise GenerationError(
                        f"Room {room_key} already has another entrance "
                        f"from {direction_to_source.value}"
                    )
                _connect(source, direction, existing_room)
                logger.debug(
                    "Merged %s into existing room %s",
                    get_world_node_key(source),
                    room_key,
                )
                ctx.stats.merged += 1
                has_any_path_to_final = True
                continue
        elif prev_room_exists_at(source, next_room):
            pass
        elif next_room.depth == ctx.max_depth - 1:
            final_neighbor = _find_final_neighbor(ctx, next_room)
            if final_neighbor is not None:
                final, final_direction = final_neighbor
                _connect(next_room, final_direction, final)
                logger.debug(
                    "Connected %s to final room %s",
                    room_key,
                    get_world_node_key(final),
                )
                ctx.stats.goal_connections += 1
                next_has_path_to_final = True
        else:
            next_has_path_to_final = find_world_room_paths(ctx, next_room)

        if next_has_path_to_final:
            if direction in source.connected_nodes:
                raise GenerationError(
                    f"Room {get_world_node_key(source)} is already connected "
                    f"to the {direction.value}"
                )
            source.connected_nodes[direction] = next_room
            ctx.register(next_room)
            has_any_path_to_final = True
        else:
            ctx.invalid_rooms.add(room_key)

    if not has_any_path_to_final:
        ctx.invalid_rooms.add(get_world_node_key(source))
    return has_any_path_to_final
