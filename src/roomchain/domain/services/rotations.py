"""Part rotation specs as quaternions.

A rotation spec names three (angle, axis) pairs. They are applied
extrinsically: A1 about the fixed R1 axis, then A2 about the fixed R2
axis, then A3 about the fixed R3 axis. For fixed axes the later rotation
multiplies on the left, so the composed orientation is

    q = q3(A3) * q2(A2) * q1(A1)

The axis named in each slot does not change the multiplication order.
"""

from __future__ import annotations

import math

import numpy as np

from ..value_objects import Axis, Quaternion, RotationSpec

__all__ = [
    "axis_quaternion",
    "quaternion_to_matrix",
    "quaternion_to_rotation_spec",
    "rotation_spec_to_quaternion",
]


def axis_quaternion(axis: Axis, degrees: float) -> Quaternion:
    """Rotation of ``degrees`` about a room axis."""
    return Quaternion.from_axis_angle(Axis(axis).unit_vector, degrees)


def rotation_spec_to_quaternion(spec: RotationSpec) -> Quaternion:
    """Compose a rotation spec into a single room-space orientation."""
    q1 = axis_quaternion(spec.r1, spec.a1)
    q2 = axis_quaternion(spec.r2, spec.a2)
    q3 = axis_quaternion(spec.r3, spec.a3)
    return q3 * q2 * q1


def quaternion_to_matrix(q: Quaternion) -> np.ndarray:
    """3x3 rotation matrix for a unit quaternion."""
    w, x, y, z = q.as_tuple()
    return np.array(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y - z * w), 2 * (x * z + y * w)],
            [2 * (x * y + z * w), 1 - 2 * (x * x + z * z), 2 * (y * z - x * w)],
            [2 * (x * z - y * w), 2 * (y * z + x * w), 1 - 2 * (x * x + y * y)],
        ]
    )


def _twist_angle(q: Quaternion, axis: Axis) -> float:
    ax, ay, az = Axis(axis).unit_vector
    projection = q.x * ax + q.y * ay + q.z * az
    return math.degrees(2 * math.atan2(projection, q.w))


def quaternion_to_rotation_spec(
    q: Quaternion, r1: Axis, r2: Axis, r3: Axis
) -> RotationSpec:
    """Recover approximate angles for a given axis order.

    Peels one axis at a time by projecting onto it. Exact for single-axis
    rotations and for specs whose axes commute; only meant for checking
    stored rotations, never for producing them.
    """
    if q.x == 0 and q.y == 0 and q.z == 0:
        return RotationSpec(0.0, 0.0, 0.0, r1, r2, r3)

    a1 = _twist_angle(q, r1)
    remainder = q * axis_quaternion(r1, a1).conjugate()

    a2 = _twist_angle(remainder, r2)
    remainder = remainder * axis_quaternion(r2, a2).conjugate()

    a3 = _twist_angle(remainder, r3)
    return RotationSpec(a1, a2, a3, r1, r2, r3)
