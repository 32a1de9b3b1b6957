"""Unit tests for wall geometry, winding and closure."""

from __future__ import annotations

import dataclasses
import math

import pytest

from roomchain.domain.entities import Room, Wall
from roomchain.domain.services import (
    compute_wall_geometries,
    normalized_wall_order,
    signed_area,
    verify_chain_closure,
    wall_endpoint,
)


class TestWallEndpoint:
    """Tests for wall_endpoint."""

    def test_endpoint_follows_angle(self) -> None:
        end = wall_endpoint(Wall(1, 100.0, 200.0, 90.0, 1000.0))
        assert end.x == pytest.approx(100.0)
        assert end.y == pytest.approx(1200.0)

    def test_diagonal(self) -> None:
        end = wall_endpoint(Wall(1, 0.0, 0.0, 45.0, math.sqrt(2) * 500.0))
        assert end.as_tuple() == pytest.approx((500.0, 500.0))


class TestWinding:
    """Tests for signed area and winding-dependent normals."""

    def test_factory_rectangle_is_clockwise(self, rectangular_room: Room) -> None:
        assert signed_area(rectangular_room.walls) == pytest.approx(-3048.0 * 3048.0)

    def test_ccw_square_area_positive(self, ccw_square_walls: list[Wall]) -> None:
        assert signed_area(ccw_square_walls) == pytest.approx(9_000_000.0)

    def test_clockwise_normals_point_inward(self, rectangular_room: Room) -> None:
        """Left wall of a clockwise room faces +X, back wall faces -Y."""
        geometries = compute_wall_geometries(rectangular_room.walls)
        left, back = geometries[0], geometries[1]
        assert left.normal.x == pytest.approx(1.0)
        assert left.normal.y == pytest.approx(0.0, abs=1e-12)
        assert back.normal.y == pytest.approx(-1.0)

    def test_ccw_normals_point_inward(self, ccw_square_walls: list[Wall]) -> None:
        geometries = compute_wall_geometries(ccw_square_walls)
        assert geometries[0].normal.y == pytest.approx(1.0)
        assert geometries[1].normal.x == pytest.approx(-1.0)

    def test_reversed_loop_keeps_normals_inward(self, ccw_square_walls: list[Wall]) -> None:
        """Walking the same square clockwise flips the side the normal is taken on."""
        side = 3000.0
        cw = [
            Wall(1, 0.0, 0.0, 90.0, side),
            Wall(2, 0.0, side, 0.0, side),
            Wall(3, side, side, 270.0, side),
            Wall(4, side, 0.0, 180.0, side),
        ]
        midpoint_offset = 1.0
        for g in compute_wall_geometries(cw) + compute_wall_geometries(ccw_square_walls):
            mid = g.start.moved(g.tangent, g.length / 2).moved(g.normal, midpoint_offset)
            assert 0.0 < mid.x < side
            assert 0.0 < mid.y < side

    def test_normals_are_unit_length(self, ccw_square_walls: list[Wall]) -> None:
        for g in compute_wall_geometries(ccw_square_walls):
            assert g.normal.length == pytest.approx(1.0)
            assert g.tangent.dot(g.normal) == pytest.approx(0.0, abs=1e-12)


class TestComputeWallGeometries:
    """Tests for compute_wall_geometries."""

    def test_fewer_than_three_walls_gives_nothing(self) -> None:
        walls = [Wall(1, 0.0, 0.0, 0.0, 1000.0), Wall(2, 1000.0, 0.0, 180.0, 1000.0)]
        assert compute_wall_geometries(walls) == []
        assert compute_wall_geometries([]) == []

    def test_carries_wall_fields(self, rectangular_room: Room) -> None:
        g = compute_wall_geometries(rectangular_room.walls)[2]
        wall = rectangular_room.walls[2]
        assert g.wall_number == wall.wall_number
        assert g.id_tag == wall.id_tag
        assert g.thickness == wall.thickness
        assert g.length == pytest.approx(wall.length)

    def test_geometry_is_recomputed_from_walls(self, ccw_square_walls: list[Wall]) -> None:
        before = compute_wall_geometries(ccw_square_walls)
        moved = [dataclasses.replace(w, pos_x=w.pos_x + 10.0) for w in ccw_square_walls]
        after = compute_wall_geometries(moved)
        assert after[0].start.x == pytest.approx(before[0].start.x + 10.0)


class TestFollowAngleHeights:
    """Tests for corner heights of follow-angle walls."""

    def test_flat_walls_keep_own_height(self, rectangular_room: Room) -> None:
        for g in compute_wall_geometries(rectangular_room.walls):
            assert g.start_height == g.height == g.end_height

    def test_follow_angle_rises_to_taller_neighbour(self, rectangular_room: Room) -> None:
        walls = list(rectangular_room.walls)
        walls[0] = dataclasses.replace(walls[0], follow_angle=True)
        walls[1] = dataclasses.replace(walls[1], height=3000.0)

        geometries = compute_wall_geometries(walls)
        sloped, tall = geometries[0], geometries[1]

        assert sloped.start_height == pytest.approx(2438.4)
        assert sloped.end_height == pytest.approx(3000.0)
        assert tall.start_height == tall.end_height == pytest.approx(3000.0)

    def test_follow_angle_ignores_shorter_neighbour(self, rectangular_room: Room) -> None:
        walls = list(rectangular_room.walls)
        walls[0] = dataclasses.replace(walls[0], follow_angle=True)
        walls[1] = dataclasses.replace(walls[1], height=2000.0)

        sloped = compute_wall_geometries(walls)[0]
        assert sloped.end_height == pytest.approx(2438.4)


class TestChainClosure:
    """Tests for verify_chain_closure."""

    def test_closed_room(self, rectangular_room: Room) -> None:
        closure = verify_chain_closure(rectangular_room.walls)
        assert closure.closed
        assert closure.gap < 0.01

    def test_open_chain_reports_gap(self, ccw_square_walls: list[Wall]) -> None:
        walls = list(ccw_square_walls)
        walls[-1] = dataclasses.replace(walls[-1], length=2900.0)
        closure = verify_chain_closure(walls)
        assert not closure.closed
        assert closure.gap == pytest.approx(100.0)

    def test_empty_chain_is_open(self) -> None:
        closure = verify_chain_closure([])
        assert not closure.closed
        assert closure.gap == math.inf


class TestNormalizedOrder:
    """Tests for normalized_wall_order."""

    def test_starts_at_leftmost_then_lowest(self, rectangular_room: Room) -> None:
        """Walls 1 and 2 both start at x=0; wall 1 has the smaller y."""
        walls = rectangular_room.walls
        rotated = walls[2:] + walls[:2]
        assert normalized_wall_order(rotated) == [1, 2, 3, 4]

    def test_numbers_are_not_renumbered(self, ccw_square_walls: list[Wall]) -> None:
        walls = [dataclasses.replace(w, wall_number=w.wall_number * 10) for w in ccw_square_walls]
        assert normalized_wall_order(walls) == [10, 20, 30, 40]

    def test_empty(self) -> None:
        assert normalized_wall_order([]) == []


class TestLoopReversal:
    """Reversing the start-point order flips winding and every normal."""

    def test_reversed_order_flips_sign_and_normals(self, ccw_square_walls: list[Wall]) -> None:
        reversed_walls = ccw_square_walls[::-1]
        assert signed_area(reversed_walls) == pytest.approx(-signed_area(ccw_square_walls))

        forward = {g.wall_number: g.normal for g in compute_wall_geometries(ccw_square_walls)}
        backward = {g.wall_number: g.normal for g in compute_wall_geometries(reversed_walls)}
        for number, normal in forward.items():
            assert backward[number].x == pytest.approx(-normal.x, abs=1e-12)
            assert backward[number].y == pytest.approx(-normal.y, abs=1e-12)
            assert backward[number].length == pytest.approx(1.0, abs=1e-6)
