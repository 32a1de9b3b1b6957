"""Unit tests for product placement on walls."""

from __future__ import annotations

import pytest

from roomchain.domain.entities import Product, Room, Wall, WallJoint
from roomchain.domain.services import (
    compute_product_world_offset,
    find_next_available_x,
    parse_wall_reference,
    place_product_on_wall,
    products_on_wall,
    usable_wall_length,
)


def _product(wall: str = "1_1", x: float = 0.0, width: float = 600.0, **kwargs) -> Product:
    return Product(width=width, depth=500.0, height=800.0, x=x, wall=wall, **kwargs)


class TestParseWallReference:
    """Tests for parse_wall_reference."""

    @pytest.mark.parametrize(
        "ref,expected",
        [
            ("1_1", 1),
            ("12_3", 12),
            ("4", 4),
            ("7abc_1", 7),
            (" 3_2", 3),
        ],
    )
    def test_leading_integer(self, ref: str, expected: int) -> None:
        assert parse_wall_reference(ref) == expected

    @pytest.mark.parametrize("ref", ["0", "", "x_1", "_1"])
    def test_unresolvable(self, ref: str) -> None:
        assert parse_wall_reference(ref) is None


class TestComputeProductWorldOffset:
    """Tests for compute_product_world_offset."""

    def test_position_on_first_wall(
        self, ccw_square_walls: list[Wall], ccw_square_joints: list[WallJoint]
    ) -> None:
        """Origin is trim_start + x + width along, thickness/2 + depth in."""
        product = _product(x=200.0, elev=900.0)
        placement = compute_product_world_offset(product, ccw_square_walls, ccw_square_joints)

        assert placement is not None
        assert placement.position.as_tuple() == pytest.approx((850.0, 550.0, 900.0))
        assert placement.wall_angle_deg == pytest.approx(180.0)

    def test_position_on_rotated_wall(
        self, ccw_square_walls: list[Wall], ccw_square_joints: list[WallJoint]
    ) -> None:
        placement = compute_product_world_offset(
            _product(wall="2_1", x=200.0), ccw_square_walls, ccw_square_joints
        )
        assert placement is not None
        assert placement.position.x == pytest.approx(2450.0)
        assert placement.position.y == pytest.approx(850.0)
        assert placement.wall_angle_deg == pytest.approx(270.0)

    def test_wall_angle_wraps(self, ccw_square_walls: list[Wall], ccw_square_joints: list[WallJoint]) -> None:
        placement = compute_product_world_offset(
            _product(wall="3_1"), ccw_square_walls, ccw_square_joints
        )
        assert placement is not None
        assert placement.wall_angle_deg == pytest.approx(0.0)

    def test_product_back_touches_inner_face(self, rectangular_room: Room) -> None:
        """The product's back edge lands on the wall's inner face in a clockwise room."""
        product = _product(x=0.0)
        placement = compute_product_world_offset(
            product, rectangular_room.walls, rectangular_room.joints
        )
        assert placement is not None
        # Wall 1 of the factory room runs up the Y axis with its inside toward +X.
        assert placement.position.x - product.depth == pytest.approx(101.6 / 2)

    def test_unplaced_product(self, ccw_square_room: Room) -> None:
        assert (
            compute_product_world_offset(
                _product(wall="0"), ccw_square_room.walls, ccw_square_room.joints
            )
            is None
        )

    def test_missing_wall(self, ccw_square_room: Room) -> None:
        assert (
            compute_product_world_offset(
                _product(wall="9_1"), ccw_square_room.walls, ccw_square_room.joints
            )
            is None
        )

    def test_open_room_places_nothing(self) -> None:
        walls = [Wall(1, 0.0, 0.0, 0.0, 1000.0), Wall(2, 1000.0, 0.0, 90.0, 1000.0)]
        assert compute_product_world_offset(_product(), walls, []) is None


class TestUsableWallLength:
    """Tests for usable_wall_length."""

    def test_subtracts_both_trims(self, ccw_square_room: Room) -> None:
        assert usable_wall_length(1, ccw_square_room.walls, ccw_square_room.joints) == pytest.approx(
            2900.0
        )

    def test_unknown_wall(self, ccw_square_room: Room) -> None:
        assert usable_wall_length(42, ccw_square_room.walls, ccw_square_room.joints) == 0.0


class TestFindNextAvailableX:
    """Tests for find_next_available_x."""

    def test_empty_wall_packs_against_end(self) -> None:
        assert find_next_available_x([], 1, 600.0, 2900.0) == pytest.approx(2300.0)

    def test_too_wide_for_empty_wall(self) -> None:
        assert find_next_available_x([], 1, 3000.0, 2900.0) is None

    def test_after_last_product(self) -> None:
        products = [_product(x=0.0, width=600.0)]
        assert find_next_available_x(products, 1, 600.0, 2900.0) == pytest.approx(2300.0)

    def test_gap_between_products_scanned_from_end(self) -> None:
        products = [
            _product(x=0.0, width=500.0),
            _product(x=1200.0, width=500.0),
            _product(x=2400.0, width=500.0),
        ]
        assert find_next_available_x(products, 1, 600.0, 2900.0) == pytest.approx(1800.0)

    def test_before_first_product(self) -> None:
        products = [_product(x=700.0, width=2200.0)]
        assert find_next_available_x(products, 1, 600.0, 2900.0) == pytest.approx(100.0)

    def test_no_space(self) -> None:
        products = [_product(x=0.0, width=2900.0)]
        assert find_next_available_x(products, 1, 100.0, 2900.0) is None

    def test_other_walls_ignored(self) -> None:
        products = [_product(wall="2_1", x=2300.0, width=600.0)]
        assert find_next_available_x(products, 1, 600.0, 2900.0) == pytest.approx(2300.0)

    def test_non_positive_width(self) -> None:
        assert find_next_available_x([], 1, 0.0, 2900.0) is None


class TestPlaceProductOnWall:
    """Tests for place_product_on_wall and products_on_wall."""

    def test_copy_is_placed_on_first_section(self) -> None:
        source = _product(wall="0", x=5.0, elev=300.0, rot=45.0, name="Base")
        placed = place_product_on_wall(source, 3, 1200.0)

        assert placed.wall == "3_1"
        assert placed.x == 1200.0
        assert placed.elev == 0.0
        assert placed.rot == 0.0
        assert placed.name == "Base"
        assert placed.unique_id.startswith("placed-")
        assert source.wall == "0"

    def test_unique_ids_differ(self) -> None:
        source = _product(wall="0")
        assert place_product_on_wall(source, 1, 0.0).unique_id != place_product_on_wall(
            source, 1, 0.0
        ).unique_id

    def test_products_on_wall(self) -> None:
        products = [_product(wall="1_1"), _product(wall="1_2"), _product(wall="2_1"), _product(wall="0")]
        assert len(products_on_wall(products, 1)) == 2
