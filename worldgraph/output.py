"""Output module for world graph export to JSON and spoiler logs.

This module provides functions to export a generated graph to:
- JSON format for consumption by room builders and debug tools
- Human-readable spoiler log for level designers
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from worldgraph.graph import (
    WorldGraph,
    WorldNode,
    bfs_world_graph,
    get_world_node_directions,
    get_world_node_key,
)

FORMAT_VERSION = "1.0"


def _node_to_dict(node: WorldNode) -> dict[str, Any]:
    directions = get_world_node_directions(node)
    return {
        "x": node.x,
        "y": node.y,
        "depth": node.depth,
        "next": [d.value for d in directions.next],
        "prev": [d.value for d in directions.prev],
    }


def graph_to_dict(graph: WorldGraph) -> dict[str, Any]:
    """Convert a world graph to a JSON-serializable dictionary.

    Args:
        graph: The graph to convert

    Returns:
        Dictionary with the following structure:
        {
            "version": "1.0",
            "seed": str,
            "depth": int,
            "start": str,  # node key
            "finals": [str, ...],  # node keys
            "nodes": {node_key: {"x", "y", "depth", "next", "prev"}},
            "paths": [[node_key, ...], ...]
        }
    """
    nodes = {
        get_world_node_key(node): _node_to_dict(node)
        for node in bfs_world_graph(graph.start_node)
    }
    return {
        "version": FORMAT_VERSION,
        "seed": graph.seed,
        "depth": graph.depth,
        "start": get_world_node_key(graph.start_node),
        "finals": [get_world_node_key(f) for f in graph.final_nodes],
        "nodes": nodes,
        "paths": [[get_world_node_key(n) for n in path] for path in graph.debug_paths],
    }


def export_json(graph: WorldGraph, output_path: Path) -> None:
    """Export a world graph to a JSON file.

    Args:
        graph: The graph to export
        output_path: Path to write the JSON file
    """
    data = graph_to_dict(graph)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def export_spoiler_log(graph: WorldGraph, output_path: Path) -> None:
    """Export a human-readable spoiler log.

    Args:
        graph: The graph to export
        output_path: Path to write the spoiler log
    """
    lines: list[str] = []

    # Header
    lines.append("=" * 60)
    lines.append(f"WORLD GRAPH SPOILER (seed: {graph.seed})")
    lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append("=" * 60)
    nodes = list(bfs_world_graph(graph.start_node))
    lines.append(f"Depth: {graph.depth}")
    lines.append(f"Total rooms: {len(nodes)}")
    lines.append(f"Total paths: {len(graph.debug_paths)}")
    lines.append(
        "Final rooms: " + ", ".join(get_world_node_key(f) for f in graph.final_nodes)
    )
    lines.append("")

    # Group rooms by depth, sorted by position within a depth
    nodes_by_depth: dict[int, list[WorldNode]] = {}
    for node in nodes:
        nodes_by_depth.setdefault(node.depth, []).append(node)

    lines.append("=" * 60)
    lines.append("ROOMS")
    lines.append("=" * 60)
    for depth in sorted(nodes_by_depth):
        lines.append("")
        lines.append(f"Depth {depth}:")
        for node in sorted(nodes_by_depth[depth], key=lambda n: (n.y, n.x)):
            directions = get_world_node_directions(node)
            exits = ", ".join(d.value for d in directions.next) or "-"
            entrances = ", ".join(d.value for d in directions.prev) or "-"
            lines.append(
                f"  [{get_world_node_key(node)}] exits: {exits} | "
                f"entrances: {entrances}"
            )

    lines.append("")
    lines.append("=" * 60)
    lines.append("PATH SUMMARY")
    lines.append("=" * 60)

    for i, path in enumerate(graph.debug_paths, 1):
        path_str = " → ".join(get_world_node_key(n) for n in path)
        lines.append(f"Path {i}: {path_str}")

    with open(output_path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))
