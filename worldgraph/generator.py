"""World graph generation entry points.

Generates a dungeon level topology:
- Start: a single room at (0, 0), depth 1
- Final rooms: placed on an L1 circle around the start, at max depth
- In between: every room path found by the backtracking search, merged into a DAG
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from worldgraph.errors import GenerationError
from worldgraph.graph import (
    WorldGraph,
    WorldNode,
    collect_all_paths,
    get_prev_depth_world_nodes,
    get_world_node_key,
)
from worldgraph.placement import MIN_DEPTH, create_world_final_nodes
from worldgraph.rng import Random
from worldgraph.search import WorldGraphContext, find_world_room_paths
from worldgraph.validator import ValidationResult, validate_world_graph

logger = logging.getLogger(__name__)


@dataclass
class WorldGraphOptions:
    """Shape of the graph to generate.

    Attributes:
        depth: Number of rooms on every path from start to a final room.
        final_nodes_count: Number of final rooms.
    """

    depth: int
    final_nodes_count: int


@dataclass
class GenerationResult:
    """Result of world graph generation.

    Attributes:
        graph: The generated graph.
        seed: The actual seed used for generation.
        validation: Validation result (with any warnings).
        attempts: Number of generation attempts made.
    """

    graph: WorldGraph
    seed: str
    validation: ValidationResult
    attempts: int


def validate_options(options: WorldGraphOptions) -> list[str]:
    """Validate generation options.

    Returns:
        List of error messages (empty if valid).
    """
    errors: list[str] = []
    if options.depth < MIN_DEPTH:
        errors.append(f"depth must be >= {MIN_DEPTH}, got {options.depth}")
    if options.final_nodes_count < 1:
        errors.append(
            f"final_nodes_count must be >= 1, got {options.final_nodes_count}"
        )
    return errors


def generate_world_graph(options: WorldGraphOptions, rng: Random) -> WorldGraph:
    """Generate a world graph.

    Args:
        options: Graph depth and number of final rooms.
        rng: Random source; the same seed always yields the same graph.

    Returns:
        The generated graph, with debug_paths filled.

    Raises:
        GenerationError: If options are invalid or no valid graph exists
            for them.
    """
    errors = validate_options(options)
    if errors:
        raise GenerationError(f"Invalid options: {'; '.join(errors)}")

    start_node = WorldNode(x=0, y=0, depth=1)
    final_nodes = create_world_final_nodes(
        start_node, options.depth, options.final_nodes_count
    )
    ctx = WorldGraphContext(
        max_depth=options.depth,
        start_node=start_node,
        final_nodes=final_nodes,
        rng=rng,
    )
    ctx.register(start_node)
    for final_node in final_nodes:
        ctx.register(final_node)

    if not find_world_room_paths(ctx, start_node):
        raise GenerationError("No valid path found")
    for final_node in final_nodes:
        if not get_prev_depth_world_nodes(final_node):
            raise GenerationError(
                f"Final node {get_world_node_key(final_node)} has no valid paths"
            )

    graph = WorldGraph(
        start_node=start_node,
        final_nodes=final_nodes,
        depth=options.depth,
        seed=rng.seed,
    )
    graph.debug_paths = collect_all_paths(graph)
    logger.debug(
        "Generated graph seed=%s: %d paths, explored=%d pruned=%d merged=%d "
        "goal_connections=%d dead_ends=%d",
        rng.seed,
        len(graph.debug_paths),
        ctx.stats.explored,
        ctx.stats.pruned,
        ctx.stats.merged,
        ctx.stats.goal_connections,
        len(ctx.invalid_rooms),
    )
    return graph


def generate_with_retry(
    options: WorldGraphOptions,
    seed: str | int = 0,
    max_attempts: int = 100,
) -> GenerationResult:
    """Generate a world graph with automatic retry on failure.

    If seed is 0 (or "0"), tries random seeds until success (generation +
    validation).
    Any other seed is used as is (fails if generation or validation fails).

    Args:
        options: Graph options.
        seed: Seed to use, or 0 for auto-reroll.
        max_attempts: Maximum retry attempts (only for seed=0).

    Returns:
        GenerationResult with graph, seed, validation, and attempt count.

    Raises:
        GenerationError: If options are invalid, or generation fails after
            max_attempts.
    """
    errors = validate_options(options)
    if errors:
        raise GenerationError(f"Invalid options: {'; '.join(errors)}")

    if str(seed) != "0":
        # Fixed seed - single attempt
        graph = generate_world_graph(options, Random(seed))
        validation = validate_world_graph(graph)
        if not validation.is_valid:
            raise GenerationError(f"Validation failed: {'; '.join(validation.errors)}")
        return GenerationResult(
            graph=graph, seed=graph.seed, validation=validation, attempts=1
        )

    # Auto-reroll mode
    base_rng = random.Random()

    for attempt in range(max_attempts):
        attempt_seed = base_rng.randint(1, 999999999)
        try:
            graph = generate_world_graph(options, Random(attempt_seed))
            validation = validate_world_graph(graph)
            if not validation.is_valid:
                raise GenerationError(
                    f"Validation failed: {'; '.join(validation.errors)}"
                )
            return GenerationResult(
                graph=graph,
                seed=graph.seed,
                validation=validation,
                attempts=attempt + 1,
            )
        except GenerationError as e:
            logger.warning(
                "Attempt %d: seed %d failed - %s", attempt + 1, attempt_seed, e
            )
            continue

    raise GenerationError(
        f"Failed to generate world graph after {max_attempts} attempts"
    )
