"""Factory functions for building rooms programmatically.

Rooms follow the wall convention of the room files: left, back, right,
front, with the origin at the front-left corner and X along the front
wall.
"""

from __future__ import annotations

import dataclasses
import math
from enum import Enum

from ..entities import Fixture, Room, Wall, WallJoint
from ..value_objects import FixtureKind
from .wall_editor import rebuild_joints

__all__ = [
    "DEFAULT_HEIGHT",
    "DEFAULT_THICKNESS",
    "RoomPreset",
    "create_angled_room",
    "create_opening",
    "create_preset_room",
    "create_rectangular_room",
]

DEFAULT_HEIGHT = 2438.4  # 96"
DEFAULT_THICKNESS = 101.6  # 4"

OPENING_WIDTH = 914.4  # 36"
OPENING_HEIGHT = 2032.0  # 80"


class RoomPreset(str, Enum):
    """Named starting rooms."""

    REACH_IN = "reach_in"
    WALK_IN = "walk_in"
    WALK_IN_DEEP = "walk_in_deep"
    ANGLED = "angled"


def _wall(number: int, x: float, y: float, angle: float, length: float,
          height: float, thickness: float) -> Wall:
    return Wall(
        wall_number=number,
        pos_x=x,
        pos_y=y,
        angle=angle,
        length=length,
        height=height,
        thickness=thickness,
        id_tag=number,
    )


def _butt_joints(walls: list[Wall]) -> list[WallJoint]:
    return [dataclasses.replace(j, miter_back=False) for j in rebuild_joints(walls)]


def create_opening(wall: int, x: float, width: float = OPENING_WIDTH,
                   height: float = OPENING_HEIGHT) -> Fixture:
    """A doorless opening standing on the floor."""
    return Fixture(
        kind=FixtureKind.OPENING,
        wall=wall,
        x=x,
        width=width,
        height=height,
        name="Opening",
    )


def create_rectangular_room(
    width: float,
    depth: float,
    height: float = DEFAULT_HEIGHT,
    thickness: float = DEFAULT_THICKNESS,
    name: str | None = None,
) -> Room:
    """Four-wall room with butt joints.

    Args:
        width: Length of the back and front walls (X) in mm.
        depth: Length of the left and right walls (Y) in mm.
        height: Wall height in mm.
        thickness: Wall thickness in mm.
        name: Room name; defaults to ``"<width>x<depth> Room"``.
    """
    walls = [
        _wall(1, 0.0, 0.0, 90.0, depth, height, thickness),
        _wall(2, 0.0, depth, 0.0, width, height, thickness),
        _wall(3, width, depth, 270.0, depth, height, thickness),
        _wall(4, width, 0.0, 180.0, width, height, thickness),
    ]
    return Room(
        name=name or f"{round(width)}x{round(depth)} Room",
        walls=walls,
        joints=_butt_joints(walls),
    )


def _closet(name: str, width: float, depth: float, height: float, thickness: float) -> Room:
    room = create_rectangular_room(width, depth, height, thickness, name=name)
    opening = create_opening(4, (width - OPENING_WIDTH) / 2)
    return Room(name=room.name, walls=room.walls, joints=room.joints, fixtures=[opening])


def create_angled_room(
    height: float = DEFAULT_HEIGHT, thickness: float = DEFAULT_THICKNESS
) -> Room:
    """Five-wall room with the back-right corner cut at 45 degrees.

    All joints are mitered and an opening is centred on the front wall.
    """
    w = 3048.0
    d = 2438.4
    cut = 1219.2
    diagonal = math.hypot(cut, cut)

    walls = [
        _wall(1, 0.0, 0.0, 90.0, d, height, thickness),
        _wall(2, 0.0, d, 0.0, w - cut, height, thickness),
        _wall(3, w - cut, d, 315.0, diagonal, height, thickness),
        _wall(4, w, d - cut, 270.0, d - cut, height, thickness),
        _wall(5, w, 0.0, 180.0, w, height, thickness),
    ]
    return Room(
        name="Angled",
        walls=walls,
        joints=rebuild_joints(walls),
        fixtures=[create_opening(5, (w - OPENING_WIDTH) / 2)],
    )


def create_preset_room(
    preset: RoomPreset,
    height: float = DEFAULT_HEIGHT,
    thickness: float = DEFAULT_THICKNESS,
) -> Room:
    """Build one of the named starting rooms."""
    preset = RoomPreset(preset)
    if preset is RoomPreset.REACH_IN:
        return _closet("Reach-In", 2438.4, 762.0, height, thickness)
    if preset is RoomPreset.WALK_IN:
        return _closet("Walk-In", 3657.6, 3657.6, height, thickness)
    if preset is RoomPreset.WALK_IN_DEEP:
        return _closet("Walk-In Deep", 2438.4, 3657.6, height, thickness)
    return create_angled_room(height, thickness)
