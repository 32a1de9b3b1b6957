"""Change of basis between room space and view space.

Room space:  X = width (right), Y = depth (into room), Z = height (up).
View space:  X = right, Y = up, Z = toward the viewer.

The mapping ``(x, y, z) -> (x, z, -y)`` is the matrix::

    | 1  0  0 |   room X -> view X
    | 0  0  1 |   room Z -> view Y
    | 0 -1  0 |   room Y -> view -Z

det = +1, so it is a proper rotation and its inverse is its transpose.
"""

from __future__ import annotations

import numpy as np

from ..value_objects import Point3D, Quaternion

__all__ = [
    "ROOM_TO_VIEW",
    "VIEW_TO_ROOM",
    "room_plan_to_view",
    "room_to_view",
    "room_quat_to_view",
    "view_to_room",
    "view_quat_to_room",
]

ROOM_TO_VIEW = np.array(
    [
        [1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0],
        [0.0, -1.0, 0.0],
    ]
)
ROOM_TO_VIEW.setflags(write=False)

VIEW_TO_ROOM = ROOM_TO_VIEW.T
VIEW_TO_ROOM.setflags(write=False)


def _apply(matrix: np.ndarray, x: float, y: float, z: float) -> Point3D:
    vx, vy, vz = matrix @ np.array([x, y, z], dtype=float)
    return Point3D(float(vx), float(vy), float(vz))


def room_to_view(x: float, y: float, z: float) -> Point3D:
    """Convert a room-space position to view space."""
    return _apply(ROOM_TO_VIEW, x, y, z)


def view_to_room(x: float, y: float, z: float) -> Point3D:
    """Convert a view-space position back to room space."""
    return _apply(VIEW_TO_ROOM, x, y, z)


def room_quat_to_view(q: Quaternion) -> Quaternion:
    """Express a room-space orientation in view space.

    The imaginary units follow the basis vectors: i -> i, j -> -k, k -> j,
    so ``w + xi + yj + zk`` becomes ``w + xi + zj - yk``.
    """
    return Quaternion(q.w, q.x, q.z, -q.y)


def view_quat_to_room(q: Quaternion) -> Quaternion:
    """Inverse of :func:`room_quat_to_view`."""
    return Quaternion(q.w, q.x, -q.z, q.y)


def room_plan_to_view(x: float, y: float) -> tuple[float, float]:
    """Map a room plan (XY) point onto the view-space XZ ground plane."""
    return (x, -y)
