"""Path statistics for world graphs.

This module summarizes how many routes a generated graph offers and how they
spread over the final rooms, and where branches converge.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from worldgraph.graph import (
    bfs_world_graph,
    get_prev_depth_world_nodes,
    get_world_node_key,
)

if TYPE_CHECKING:
    from worldgraph.graph import WorldGraph


@dataclass
class GraphStats:
    """Statistics about a world graph.

    Attributes:
        total_nodes: Number of rooms reachable from the start.
        total_paths: Number of start-to-final paths.
        paths_per_final: Path count per final room key.
        merge_nodes: Keys of rooms with more than one entrance.
        nodes_per_depth: Room count per depth.
    """

    total_nodes: int
    total_paths: int
    paths_per_final: dict[str, int]
    merge_nodes: list[str]
    nodes_per_depth: dict[int, int]

    @classmethod
    def from_graph(cls, graph: WorldGraph) -> GraphStats:
        """Compute statistics from a graph.

        Args:
            graph: The graph to analyze

        Returns:
            GraphStats with computed statistics
        """
        nodes = list(bfs_world_graph(graph.start_node))

        paths_per_final = {get_world_node_key(f): 0 for f in graph.final_nodes}
        for path in graph.debug_paths:
            end_key = get_world_node_key(path[-1])
            if end_key in paths_per_final:
                paths_per_final[end_key] += 1

        merge_nodes = [
            get_world_node_key(node)
            for node in nodes
            if len(get_prev_depth_world_nodes(node)) > 1
        ]
        nodes_per_depth = dict(sorted(Counter(n.depth for n in nodes).items()))

        return cls(
            total_nodes=len(nodes),
            total_paths=len(graph.debug_paths),
            paths_per_final=paths_per_final,
            merge_nodes=merge_nodes,
            nodes_per_depth=nodes_per_depth,
        )


def report_stats(graph: WorldGraph) -> str:
    """Generate a human-readable statistics report.

    Args:
        graph: The graph to analyze

    Returns:
        Multi-line string report
    """
    stats = GraphStats.from_graph(graph)
    lines: list[str] = []

    lines.append("=" * 50)
    lines.append("World Graph Report")
    lines.append("=" * 50)
    lines.append("")

    lines.append(f"Seed: {graph.seed}")
    lines.append(f"Depth: {graph.depth}")
    lines.append(f"Total rooms: {stats.total_nodes}")
    lines.append(f"Total paths: {stats.total_paths}")
    lines.append(f"Merge rooms: {len(stats.merge_nodes)}")
    lines.append("")

    lines.append("Rooms per depth:")
    for depth, count in stats.nodes_per_depth.items():
        lines.append(f"  {depth}: {count}")
    lines.append("")

    lines.append("Paths per final room:")
    for final_key, count in stats.paths_per_final.items():
        lines.append(f"  {final_key}: {count}")
    lines.append("")

    return "\n".join(lines)
