"""World graph validation.

This module validates generated graphs against their structural invariants,
distinguishing between errors (blocking) and warnings (informational).
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from worldgraph.direction import opposite_direction
from worldgraph.graph import (
    WorldGraph,
    WorldNode,
    get_position_key,
    get_world_node_key,
)


@dataclass
class ValidationResult:
    """Result of world graph validation.

    Attributes:
        is_valid: True if the graph passes all required checks (no errors).
        errors: List of blocking issues that make the graph invalid.
        warnings: List of informational issues that don't block validation.
    """

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def validate_world_graph(graph: WorldGraph) -> ValidationResult:
    """Validate a world graph against all constraints.

    Checks:
    - Start room (depth 1, no entrances)
    - Edges (depth step of exactly 1, mirrored on both endpoints)
    - Position uniqueness (one room object per grid cell)
    - Final rooms (max depth, at least one entrance)
    - Dead ends (every room below max depth has an exit)
    - Paths (lengths and endpoints of debug_paths)

    Args:
        graph: The graph to validate.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []

    _check_start(graph, errors)
    _check_edges(graph, errors)
    _check_positions(graph, errors)
    _check_finals(graph, errors)
    _check_dead_ends(graph, errors)
    _check_paths(graph, errors, warnings)

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def _check_start(graph: WorldGraph, errors: list[str]) -> None:
    start = graph.start_node
    if start.depth != 1:
        errors.append(f"Start room has depth {start.depth}, expected 1")
    entrances = [n for n in start.connected_nodes.values() if n.depth < start.depth]
    if entrances:
        errors.append(f"Start room has {len(entrances)} entrances")


def _check_edges(graph: WorldGraph, errors: list[str]) -> None:
    """Check depth steps and edge symmetry for every room."""
    for node in _all_nodes(graph):
        key = get_world_node_key(node)
        for direction, neighbor in node.connected_nodes.items():
            neighbor_key = get_world_node_key(neighbor)
            if abs(neighbor.depth - node.depth) != 1:
                errors.append(
                    f"Edge {key} -> {neighbor_key} does not step depth by 1"
                )
            back = neighbor.connected_nodes.get(opposite_direction(direction))
            if back is not node:
                errors.append(
                    f"Edge {key} -> {neighbor_key} ({direction.value}) "
                    f"is not mirrored"
                )


def _check_positions(graph: WorldGraph, errors: list[str]) -> None:
    """Check that no two room objects share a grid cell."""
    seen: dict[str, str] = {}
    for node in _all_nodes(graph):
        position_key = get_position_key(node)
        node_key = get_world_node_key(node)
        if position_key in seen:
            errors.append(
                f"Rooms {seen[position_key]} and {node_key} share "
                f"position {position_key}"
            )
        else:
            seen[position_key] = node_key


def _check_finals(graph: WorldGraph, errors: list[str]) -> None:
    if not graph.final_nodes:
        errors.append("No final rooms")
    for final in graph.final_nodes:
        key = get_world_node_key(final)
        if final.depth != graph.depth:
            errors.append(f"Final room {key} is not at depth {graph.depth}")
        entrances = [n for n in final.connected_nodes.values() if n.depth < final.depth]
        if not entrances:
            errors.append(f"Final room {key} has no entrance")


def _check_dead_ends(graph: WorldGraph, errors: list[str]) -> None:
    for node in _all_nodes(graph):
        if node.depth >= graph.depth:
            continue
        exits = [n for n in node.connected_nodes.values() if n.depth > node.depth]
        if not exits:
            errors.append(
                f"Room {get_world_node_key(node)} is a dead end (cannot reach "
                f"a final room)"
            )


def _check_paths(graph: WorldGraph, errors: list[str], warnings: list[str]) -> None:
    """Check debug paths and warn about thin routes."""
    paths = graph.debug_paths

    # No paths = error
    if len(paths) == 0:
        errors.append("No paths from start to a final room")
        return

    # Single path = warning
    if len(paths) == 1:
        warnings.append("Only a single path exists (no parallel branches)")

    final_keys = [get_world_node_key(f) for f in graph.final_nodes]
    paths_per_final = dict.fromkeys(final_keys, 0)
    start_key = get_world_node_key(graph.start_node)
    for i, path in enumerate(paths, 1):
        if len(path) != graph.depth:
            errors.append(
                f"Path {i} has {len(path)} rooms, expected {graph.depth}"
            )
            continue
        if get_world_node_key(path[0]) != start_key:
            errors.append(f"Path {i} does not start at {start_key}")
        end_key = get_world_node_key(path[-1])
        if end_key not in paths_per_final:
            errors.append(f"Path {i} ends at {end_key}, not a final room")
        else:
            paths_per_final[end_key] += 1

    for final_key, count in paths_per_final.items():
        if count == 1:
            warnings.append(f"Final room {final_key} is reachable by a single path")


def _all_nodes(graph: WorldGraph) -> list[WorldNode]:
    """Every room connected to the start or to a final room, in any direction.

    Walks doors regardless of depth, so malformed edges are reported instead of
    aborting the traversal.
    """
    nodes: list[WorldNode] = []
    seen: set[int] = set()
    queue: deque[WorldNode] = deque([graph.start_node, *graph.final_nodes])
    while queue:
        node = queue.popleft()
        if id(node) in seen:
            continue
        seen.add(id(node))
        nodes.append(node)
        queue.extend(node.connected_nodes.values())
    return nodes
