"""Value objects for the wall-chain kernel.

All types here are immutable. Positions are in room space (X = width,
Y = depth, Z = height) in millimetres unless stated otherwise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Vector2D:
    """Direction or offset in the room plan."""

    x: float
    y: float

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2D) -> float:
        """Z component of the 3D cross product (signed parallelogram area)."""
        return self.x * other.y - self.y * other.x

    def left_perpendicular(self) -> Vector2D:
        return Vector2D(-self.y, self.x)

    def right_perpendicular(self) -> Vector2D:
        return Vector2D(self.y, -self.x)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    @classmethod
    def from_angle(cls, degrees: float) -> Vector2D:
        """Unit vector at the given angle from the positive X axis."""
        radians = math.radians(degrees)
        return cls(math.cos(radians), math.sin(radians))


@dataclass(frozen=True)
class Point2D:
    """2D point in room plan coordinates.

    Negative coordinates are valid; rooms are not required to sit in the
    positive quadrant.
    """

    x: float
    y: float

    def moved(self, direction: Vector2D, distance: float) -> Point2D:
        """Return this point shifted by ``distance`` along ``direction``."""
        return Point2D(self.x + distance * direction.x, self.y + distance * direction.y)

    def vector_to(self, other: Point2D) -> Vector2D:
        return Vector2D(other.x - self.x, other.y - self.y)

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Point3D:
    """3D point; which space it lives in depends on the producer."""

    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


class Axis(str, Enum):
    """Rotation axis label used by part rotation specs."""

    X = "X"
    Y = "Y"
    Z = "Z"

    @property
    def unit_vector(self) -> tuple[float, float, float]:
        return {
            Axis.X: (1.0, 0.0, 0.0),
            Axis.Y: (0.0, 1.0, 0.0),
            Axis.Z: (0.0, 0.0, 1.0),
        }[self]


@dataclass(frozen=True)
class RotationSpec:
    """Three (angle, axis) pairs applied extrinsically in order 1, 2, 3.

    Each angle rotates about a fixed room axis, not about the part's
    already-rotated frame. Angles are in degrees.
    """

    a1: float = 0.0
    a2: float = 0.0
    a3: float = 0.0
    r1: Axis = Axis.X
    r2: Axis = Axis.Y
    r3: Axis = Axis.Z

    def __post_init__(self) -> None:
        # Accept plain "X"/"Y"/"Z" strings as produced by file parsers.
        for name in ("r1", "r2", "r3"):
            value = getattr(self, name)
            if not isinstance(value, Axis):
                object.__setattr__(self, name, Axis(value))


@dataclass(frozen=True)
class Quaternion:
    """Unit quaternion ``w + xi + yj + zk`` describing an orientation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(
        cls, axis: tuple[float, float, float], degrees: float
    ) -> Quaternion:
        """Rotation of ``degrees`` about a unit ``axis``."""
        half = math.radians(degrees) / 2
        s = math.sin(half)
        return cls(math.cos(half), axis[0] * s, axis[1] * s, axis[2] * s)

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Hamilton product; ``a * b`` applies ``b`` first, then ``a``."""
        return Quaternion(
            w=self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            x=self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            y=self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            z=self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
        )

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def rotate(self, vector: tuple[float, float, float]) -> tuple[float, float, float]:
        """Rotate a 3D vector by this quaternion."""
        p = Quaternion(0.0, *vector)
        r = self * p * self.conjugate()
        return (r.x, r.y, r.z)

    def is_close(self, other: Quaternion, tol: float = 1e-9) -> bool:
        """True if both describe the same orientation (q and -q are equal)."""
        dot = self.w * other.w + self.x * other.x + self.y * other.y + self.z * other.z
        return abs(abs(dot) - 1.0) <= tol

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.w, self.x, self.y, self.z)


@dataclass(frozen=True)
class WallGeometry:
    """Oriented geometry derived from a stored wall.

    ``normal`` is unit length and points into the room. ``start_height`` and
    ``end_height`` are the effective top heights at each corner, which only
    differ from ``height`` when a follow-angle slope applies.
    """

    wall_number: int
    id_tag: int | None
    start: Point2D
    end: Point2D
    tangent: Vector2D
    normal: Vector2D
    height: float
    start_height: float
    end_height: float
    thickness: float

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


@dataclass(frozen=True)
class WallTrim:
    """Distance each end of a wall is shortened along its tangent."""

    trim_start: float = 0.0
    trim_end: float = 0.0


@dataclass(frozen=True)
class MiterExtension:
    """How far the true mitered corner protrudes past the trimmed box.

    ``start_ext``/``end_ext`` are on the outer face, the ``inner_*`` pair on
    the inner (room-side) face. All values are >= 0.
    """

    start_ext: float = 0.0
    end_ext: float = 0.0
    inner_start_ext: float = 0.0
    inner_end_ext: float = 0.0


@dataclass(frozen=True)
class RoomPolygons:
    """Inner and outer perimeter of the wall loop.

    Index ``i`` of each list is the corner at wall ``i``'s start.
    """

    inner: list[Point2D] = field(default_factory=list)
    outer: list[Point2D] = field(default_factory=list)


@dataclass(frozen=True)
class ChainClosure:
    """Gap between the last wall's end and the first wall's start."""

    closed: bool
    gap: float


@dataclass(frozen=True)
class ProductPlacement:
    """World placement of a product attached to a wall.

    ``wall_angle_deg`` is applied on top of the product's own ``rot``.
    """

    position: Point3D
    wall_angle_deg: float


@dataclass(frozen=True)
class VerificationCheck:
    """A single line of a chain verification report."""

    status: str  # One of: "pass", "fail", "info"
    message: str

    def __post_init__(self) -> None:
        valid_statuses = {"pass", "fail", "info"}
        if self.status not in valid_statuses:
            raise ValueError(
                f"status must be one of {valid_statuses}, got '{self.status}'"
            )

    def __str__(self) -> str:
        return f"[{self.status.upper()}] {self.message}"


@dataclass(frozen=True)
class ChainVerification:
    """Result of running every diagnostic over a wall chain."""

    checks: tuple[VerificationCheck, ...]

    @property
    def passed(self) -> bool:
        return bool(self.checks) and all(c.status != "fail" for c in self.checks)

    @property
    def failures(self) -> list[VerificationCheck]:
        return [c for c in self.checks if c.status == "fail"]

    @property
    def details(self) -> list[str]:
        return [str(c) for c in self.checks]


class FixtureKind(str, Enum):
    """Wall fixtures a room can carry."""

    OPENING = "opening"
    DOOR = "door"
    DOUBLE_DOOR = "double_door"
    WINDOW = "window"
