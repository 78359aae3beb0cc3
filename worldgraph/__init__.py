"""worldgraph - procedural dungeon room graph generator."""

__version__ = "0.1.0"

from worldgraph.config import Config, GraphConfig, OutputConfig, load_config
from worldgraph.direction import ALL_DIRECTIONS, Direction, opposite_direction
from worldgraph.errors import GenerationError, GraphStructureError
from worldgraph.generator import (
    GenerationResult,
    WorldGraphOptions,
    generate_with_retry,
    generate_world_graph,
    validate_options,
)
from worldgraph.graph import (
    NodeDirections,
    WorldGraph,
    WorldNode,
    bfs_world_graph,
    bfs_world_graph_backward,
    collect_all_paths,
    dfs_world_graph,
    dfs_world_graph_backward,
    get_next_depth_world_nodes,
    get_position_key,
    get_prev_depth_world_nodes,
    get_world_node_directions,
    get_world_node_key,
)
from worldgraph.output import export_json, export_spoiler_log, graph_to_dict
from worldgraph.rng import Random
from worldgraph.stats import GraphStats, report_stats
from worldgraph.validator import ValidationResult, validate_world_graph

__all__ = [
    # Config
    "Config",
    "GraphConfig",
    "OutputConfig",
    "load_config",
    # Directions
    "ALL_DIRECTIONS",
    "Direction",
    "opposite_direction",
    # Graph
    "NodeDirections",
    "WorldGraph",
    "WorldNode",
    "bfs_world_graph",
    "bfs_world_graph_backward",
    "collect_all_paths",
    "dfs_world_graph",
    "dfs_world_graph_backward",
    "get_next_depth_world_nodes",
    "get_position_key",
    "get_prev_depth_world_nodes",
    "get_world_node_directions",
    "get_world_node_key",
    # Random
    "Random",
    # Generator
    "GenerationError",
    "GenerationResult",
    "GraphStructureError",
    "WorldGraphOptions",
    "generate_with_retry",
    "generate_world_graph",
    "validate_options",
    # Stats
    "GraphStats",
    "report_stats",
    # Validator
    "ValidationResult",
    "validate_world_graph",
    # Output
    "export_json",
    "export_spoiler_log",
    "graph_to_dict",
]
