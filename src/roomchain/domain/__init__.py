"""Domain layer - wall-chain geometry kernel."""

from .entities import Fixture, Product, Room, Wall, WallJoint
from .value_objects import (
    Axis,
    ChainClosure,
    ChainVerification,
    FixtureKind,
    MiterExtension,
    Point2D,
    Point3D,
    ProductPlacement,
    Quaternion,
    RoomPolygons,
    RotationSpec,
    Vector2D,
    WallGeometry,
    WallTrim,
)

__all__ = [
    "Axis",
    "ChainClosure",
    "ChainVerification",
    "Fixture",
    "FixtureKind",
    "MiterExtension",
    "Point2D",
    "Point3D",
    "Product",
    "ProductPlacement",
    "Quaternion",
    "Room",
    "RoomPolygons",
    "RotationSpec",
    "Vector2D",
    "Wall",
    "WallGeometry",
    "WallJoint",
    "WallTrim",
]
