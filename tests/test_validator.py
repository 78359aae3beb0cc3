"""Tests for world graph validator."""

from worldgraph.direction import Direction, opposite_direction
from worldgraph.generator import WorldGraphOptions, generate_world_graph
from worldgraph.graph import WorldGraph, WorldNode, collect_all_paths
from worldgraph.rng import Random
from worldgraph.validator import ValidationResult, validate_world_graph


def link(source: WorldNode, direction: Direction, target: WorldNode) -> None:
    """Helper to wire a door on both rooms."""
    source.connected_nodes[direction] = target
    target.connected_nodes[opposite_direction(direction)] = source


def make_valid_graph() -> WorldGraph:
    """Create a valid depth 4 graph with two converging branches."""
    start = WorldNode(0, 0, 1)
    east = WorldNode(1, 0, 2)
    south = WorldNode(0, 1, 2)
    merge = WorldNode(1, 1, 3)
    final = WorldNode(2, 1, 4)
    link(start, Direction.EAST, east)
    link(start, Direction.SOUTH, south)
    link(east, Direction.SOUTH, merge)
    link(south, Direction.EAST, merge)
    link(merge, Direction.EAST, final)
    graph = WorldGraph(start_node=start, final_nodes=[final], depth=4)
    graph.debug_paths = collect_all_paths(graph)
    return graph


def test_validation_result_dataclass():
    """ValidationResult holds errors and warnings."""
    result = ValidationResult(is_valid=True)
    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []


def test_valid_graph_passes():
    """A well-formed graph has no errors and no warnings."""
    result = validate_world_graph(make_valid_graph())
    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []


def test_generated_graph_passes():
    """Graphs produced by the generator are valid."""
    graph = generate_world_graph(
        WorldGraphOptions(depth=7, final_nodes_count=3), Random("validator")
    )
    result = validate_world_graph(graph)
    assert result.is_valid, result.errors


def test_unmirrored_edge():
    """A door recorded on one side only is reported."""
    graph = make_valid_graph()
    merge = graph.final_nodes[0].connected_nodes[Direction.WEST]
    del merge.connected_nodes[Direction.NORTH]

    result = validate_world_graph(graph)
    assert not result.is_valid
    assert any("is not mirrored" in e for e in result.errors)


def test_depth_skip():
    """A door that skips a depth is reported."""
    graph = make_valid_graph()
    graph.final_nodes[0].depth = 5

    result = validate_world_graph(graph)
    assert not result.is_valid
    assert any("does not step depth by 1" in e for e in result.errors)
    assert any("is not at depth 4" in e for e in result.errors)


def test_shared_position():
    """Two room objects on one cell are reported."""
    graph = make_valid_graph()
    east = graph.start_node.connected_nodes[Direction.EAST]
    duplicate = WorldNode(1, 1, 3)
    link(east, Direction.EAST, duplicate)
    link(duplicate, Direction.EAST, WorldNode(2, 1, 4))

    result = validate_world_graph(graph)
    assert not result.is_valid
    assert any("share position 1,1" in e for e in result.errors)


def test_final_without_entrance():
    """An unreachable final room is reported."""
    graph = make_valid_graph()
    graph.final_nodes.append(WorldNode(5, 5, 4))

    result = validate_world_graph(graph)
    assert not result.is_valid
    assert any("{5,5}-4 has no entrance" in e for e in result.errors)


def test_dead_end():
    """A room below max depth without exits is reported."""
    graph = make_valid_graph()
    link(graph.start_node, Direction.NORTH, WorldNode(0, -1, 2))

    result = validate_world_graph(graph)
    assert not result.is_valid
    assert any("{0,-1}-2 is a dead end" in e for e in result.errors)


def test_start_with_entrance():
    """The start room must not have entrances."""
    graph = make_valid_graph()
    graph.start_node.depth = 2

    result = validate_world_graph(graph)
    assert not result.is_valid
    assert any("Start room has depth 2" in e for e in result.errors)


def test_no_paths():
    """A graph without recorded paths is invalid."""
    graph = make_valid_graph()
    graph.debug_paths = []

    result = validate_world_graph(graph)
    assert not result.is_valid
    assert "No paths from start to a final room" in result.errors


def test_short_path():
    """A recorded path shorter than the depth is invalid."""
    graph = make_valid_graph()
    graph.debug_paths = [[graph.start_node, graph.final_nodes[0]]]

    result = validate_world_graph(graph)
    assert not result.is_valid
    assert any("has 2 rooms, expected 4" in e for e in result.errors)


def test_single_path_warnings():
    """A single path is valid but produces warnings."""
    graph = make_valid_graph()
    graph.debug_paths = graph.debug_paths[:1]

    result = validate_world_graph(graph)
    assert result.is_valid
    assert "Only a single path exists (no parallel branches)" in result.warnings
    assert any("reachable by a single path" in w for w in result.warnings)
