"""World graph data structures and traversal.

A world graph is a DAG of rooms laid out on an integer grid. Every edge is a
door between two adjacent rooms whose depths differ by exactly one, so depth
is a topological rank: the start room has depth 1 and every final room has
the graph's max depth.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from worldgraph.direction import Direction, Position
from worldgraph.errors import GraphStructureError

Neighbors = Callable[["WorldNode"], list["WorldNode"]]


@dataclass(eq=False)
class WorldNode:
    """A room in the world graph.

    Connections are undirected doors to adjacent rooms, stored on both
    endpoints under opposite directions. A neighbour at depth + 1 is an exit,
    one at depth - 1 is an entrance.

    Nodes compare by identity: converging paths share the same object.
    """

    x: int
    y: int
    depth: int
    connected_nodes: dict[Direction, WorldNode] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"WorldNode({get_world_node_key(self)})"


@dataclass
class WorldGraph:
    """The complete generated world graph.

    Attributes:
        start_node: Root room, depth 1.
        final_nodes: Goal rooms, all at depth == `depth`.
        depth: Configured max depth (number of rooms on every path).
        seed: Seed of the random source used for generation.
        debug_paths: Every root-to-leaf path, for diagnostics and tests.
    """

    start_node: WorldNode
    final_nodes: list[WorldNode]
    depth: int
    seed: str = ""
    debug_paths: list[list[WorldNode]] = field(default_factory=list)

    def nodes(self) -> list[WorldNode]:
        """Return every room reachable from the start, in BFS order."""
        return list(bfs_world_graph(self.start_node))

    def total_nodes(self) -> int:
        """Return the number of rooms in the graph."""
        return len(self.nodes())

    def get_node(self, x: int, y: int) -> WorldNode | None:
        """Get the room at a grid position, or None if there is none."""
        for node in bfs_world_graph(self.start_node):
            if node.x == x and node.y == y:
                return node
        return None


@dataclass
class NodeDirections:
    """Door directions of a room, split by where they lead."""

    next: list[Direction]
    prev: list[Direction]


# =============================================================================
# Keys
# =============================================================================


def get_position_key(position: Position) -> str:
    """Key identifying a grid cell, regardless of depth."""
    return f"{position.x},{position.y}"


def get_world_node_key(node: WorldNode) -> str:
    """Key identifying a room instance: grid cell and depth."""
    return f"{{{node.x},{node.y}}}-{node.depth}"


# =============================================================================
# Queries
# =============================================================================


def get_next_depth_world_nodes(node: WorldNode) -> list[WorldNode]:
    """Get the rooms one depth further from the start (exits).

    Raises:
        GraphStructureError: If an exit skips a depth.
    """
    result: list[WorldNode] = []
    for exit_node in node.connected_nodes.values():
        if exit_node.depth > node.depth:
            if exit_node.depth != node.depth + 1:
                raise GraphStructureError(
                    f"Exit {get_world_node_key(exit_node)} of "
                    f"{get_world_node_key(node)} skips a depth"
                )
            result.append(exit_node)
    return result


def get_prev_depth_world_nodes(node: WorldNode) -> list[WorldNode]:
    """Get the rooms one depth closer to the start (entrances).

    Raises:
        GraphStructureError: If an entrance skips a depth.
    """
    result: list[WorldNode] = []
    for entrance_node in node.connected_nodes.values():
        if entrance_node.depth < node.depth:
            if entrance_node.depth != node.depth - 1:
                raise GraphStructureError(
                    f"Entrance {get_world_node_key(entrance_node)} of "
                    f"{get_world_node_key(node)} skips a depth"
                )
            result.append(entrance_node)
    return result


def get_world_node_directions(node: WorldNode) -> NodeDirections:
    """Split a room's door directions into exits and entrances.

    Used by room builders to decide which walls get a door.

    Raises:
        GraphStructureError: If a neighbour has the same depth.
    """
    next_dirs: list[Direction] = []
    prev_dirs: list[Direction] = []
    for direction, neighbor in node.connected_nodes.items():
        if neighbor.depth > node.depth:
            next_dirs.append(direction)
        elif neighbor.depth < node.depth:
            prev_dirs.append(direction)
        else:
            raise GraphStructureError(
                f"Unexpected depth equality: {get_world_node_key(neighbor)} "
                f"next to {get_world_node_key(node)}"
            )
    return NodeDirections(next=next_dirs, prev=prev_dirs)


# =============================================================================
# Traversal
# =============================================================================


def bfs_world_graph(start: WorldNode) -> Iterator[WorldNode]:
    """Yield every room reachable through exits, breadth first, once each."""
    yield from _bfs(start, get_next_depth_world_nodes)


def bfs_world_graph_backward(start: WorldNode) -> Iterator[WorldNode]:
    """Yield every room reachable through entrances, breadth first, once each."""
    yield from _bfs(start, get_prev_depth_world_nodes)


def dfs_world_graph(start: WorldNode) -> Iterator[WorldNode]:
    """Yield every room reachable through exits, depth first, once each."""
    yield from _dfs(start, get_next_depth_world_nodes, set())


def dfs_world_graph_backward(start: WorldNode) -> Iterator[WorldNode]:
    """Yield every room reachable through entrances, depth first, once each."""
    yield from _dfs(start, get_prev_depth_world_nodes, set())


def _bfs(start: WorldNode, neighbors: Neighbors) -> Iterator[WorldNode]:
    visited: set[str] = set()
    queue: deque[WorldNode] = deque([start])
    while queue:
        node = queue.popleft()
        key = get_world_node_key(node)
        if key in visited:
            continue
        visited.add(key)
        yield node
        queue.extend(neighbors(node))


def _dfs(
    start: WorldNode, neighbors: Neighbors, visited: set[str]
) -> Iterator[WorldNode]:
    key = get_world_node_key(start)
    if key in visited:
        return
    visited.add(key)
    yield start
    for child in neighbors(start):
        yield from _dfs(child, neighbors, visited)


def collect_all_paths(graph: WorldGraph) -> list[list[WorldNode]]:
    """Enumerate every path from the start room to a leaf room.

    The number of paths grows combinatorially with depth; this is meant for
    validation and tests, not for room building.

    Raises:
        GraphStructureError: If a path is longer than the graph depth, or a
            leaf is reached before it.
    """
    results: list[list[WorldNode]] = []

    def dfs(node: WorldNode, path: list[WorldNode]) -> None:
        if len(path) > graph.depth:
            raise GraphStructureError(
                f"Path through {get_world_node_key(node)} is longer than "
                f"depth {graph.depth}"
            )
        next_nodes = get_next_depth_world_nodes(node)
        if not next_nodes:
            if len(path) != graph.depth:
                raise GraphStructureError(
                    f"Path ends at {get_world_node_key(node)} after "
                    f"{len(path)} rooms, expected {graph.depth}"
                )
            results.append(path)
            return
        for next_node in next_nodes:
            dfs(next_node, path + [next_node])

    dfs(graph.start_node, [graph.start_node])
    return results
