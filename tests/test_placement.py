"""Tests for final room placement."""

import pytest

from worldgraph.direction import manhattan_distance
from worldgraph.errors import GenerationError
from worldgraph.graph import WorldNode, get_position_key
from worldgraph.placement import (
    compute_final_room_distance,
    create_world_final_nodes,
    get_n_circle_points,
)


class TestFinalRoomDistance:
    """Tests for the start-to-final Manhattan radius."""

    @pytest.mark.parametrize(
        "depth,expected",
        [(4, 1), (5, 2), (6, 3), (7, 2), (8, 3), (9, 4), (10, 3), (12, 5)],
    )
    def test_known_values(self, depth, expected):
        """Radius is depth // 3, bumped by one on parity mismatch."""
        assert compute_final_room_distance(depth) == expected

    @pytest.mark.parametrize("depth", range(4, 30))
    def test_parity_matches_door_count(self, depth):
        """Radius has the parity of the number of doors on a path."""
        assert compute_final_room_distance(depth) % 2 == (depth - 1) % 2


class TestCirclePoints:
    """Tests for L1 circle point distribution."""

    def test_single_point_on_x_axis(self):
        """The first point sits at angle 0, towards +x."""
        assert get_n_circle_points(0, 0, 1, 1) == [(1, 0)]
        assert get_n_circle_points(5, 5, 1, 3) == [(8, 5)]

    def test_four_points(self):
        """Four points land on the four axes."""
        assert get_n_circle_points(0, 0, 4, 2) == [(2, 0), (0, 2), (-2, 0), (0, -2)]

    def test_three_points(self):
        """Three points split the radius between both axes."""
        assert get_n_circle_points(0, 0, 3, 2) == [(2, 0), (-1, 1), (-1, -1)]

    def test_degenerate_inputs(self):
        """No count gives no points, zero radius gives the centre."""
        assert get_n_circle_points(0, 0, 0, 3) == []
        assert get_n_circle_points(0, 0, 3, -1) == []
        assert get_n_circle_points(2, 3, 3, 0) == [(2, 3)]

    @pytest.mark.parametrize("count", range(1, 9))
    @pytest.mark.parametrize("distance", range(1, 7))
    def test_points_on_l1_circle(self, count, distance):
        """Every point is exactly `distance` away from the centre."""
        for x, y in get_n_circle_points(1, -1, count, distance):
            assert abs(x - 1) + abs(y + 1) == distance


class TestCreateFinalNodes:
    """Tests for final room creation."""

    def test_final_nodes_depth_and_distance(self):
        """Final rooms are at max depth, on the radius, without doors."""
        start = WorldNode(0, 0, 1)
        finals = create_world_final_nodes(start, 7, 3)
        assert len(finals) == 3
        for final in finals:
            assert final.depth == 7
            assert final.connected_nodes == {}
            assert manhattan_distance(start, final) == compute_final_room_distance(7)
        assert len({get_position_key(f) for f in finals}) == 3

    def test_depth_too_small(self):
        """Depth below 4 is rejected."""
        with pytest.raises(GenerationError, match="depth must be >= 4"):
            create_world_final_nodes(WorldNode(0, 0, 1), 3, 1)
