"""Pytest configuration and shared fixtures for room chain tests."""

from __future__ import annotations

import pytest

from roomchain.domain.entities import Room, Wall, WallJoint
from roomchain.domain.services import create_rectangular_room, rebuild_joints


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests that drive the CLI end to end")


# =============================================================================
# Shared room fixtures
# =============================================================================

SQUARE_SIDE = 3000.0
SQUARE_THICKNESS = 100.0


@pytest.fixture
def rectangular_room() -> Room:
    """3048 x 3048 room from the factory (clockwise, butt joints)."""
    return create_rectangular_room(3048.0, 3048.0)


@pytest.fixture
def ccw_square_walls() -> list[Wall]:
    """Counter-clockwise 3000 x 3000 square with 100mm walls.

    Wall 1 runs along the X axis from the origin, so its inward normal is +Y.
    """
    side = SQUARE_SIDE
    return [
        Wall(1, 0.0, 0.0, 0.0, side, thickness=SQUARE_THICKNESS),
        Wall(2, side, 0.0, 90.0, side, thickness=SQUARE_THICKNESS),
        Wall(3, side, side, 180.0, side, thickness=SQUARE_THICKNESS),
        Wall(4, 0.0, side, 270.0, side, thickness=SQUARE_THICKNESS),
    ]


@pytest.fixture
def ccw_square_joints(ccw_square_walls: list[Wall]) -> list[WallJoint]:
    """Mitered joint cycle for the CCW square."""
    return rebuild_joints(ccw_square_walls)


@pytest.fixture
def ccw_square_room(ccw_square_walls: list[Wall], ccw_square_joints: list[WallJoint]) -> Room:
    return Room(name="Square", walls=ccw_square_walls, joints=ccw_square_joints)
