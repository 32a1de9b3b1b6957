"""Joint trims, room perimeter polygons and miter extensions.

At every joint both walls are shortened by half of the other wall's
thickness. Butt and miter joints trim by the same amount: walls are
rendered as boxes, so the angled cut only decides which face wins at the
corner when the outline is drawn, not how long the box is.

The true corner of each face is found by intersecting the offset face
lines of neighbouring walls. Inner and outer faces are resolved separately
because neighbouring walls may have different thicknesses.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..entities import CORNER_END, CORNER_START, Wall, WallJoint
from ..value_objects import (
    MiterExtension,
    Point2D,
    RoomPolygons,
    Vector2D,
    WallGeometry,
    WallTrim,
)
from .wall_geometry import compute_wall_geometries

logger = logging.getLogger(__name__)

__all__ = [
    "PARALLEL_EPSILON",
    "compute_room_polygons",
    "compute_wall_miter_extensions",
    "compute_wall_trims",
    "line_intersection",
]

PARALLEL_EPSILON = 1e-6


def compute_wall_trims(
    walls: Sequence[Wall], joints: Sequence[WallJoint]
) -> dict[int, WallTrim]:
    """Trim per wall number, summed over every joint the wall takes part in.

    Each joint shortens ``wall1`` by half of ``wall2``'s thickness and
    ``wall2`` by half of ``wall1``'s thickness, at whichever end the joint's
    corner flags name. Joints referring to a wall that is not in ``walls``
    are ignored.
    """
    by_number = {w.wall_number: w for w in walls}
    starts = {w.wall_number: 0.0 for w in walls}
    ends = {w.wall_number: 0.0 for w in walls}

    for joint in joints:
        w1 = by_number.get(joint.wall1)
        w2 = by_number.get(joint.wall2)
        if w1 is None or w2 is None:
            logger.debug(
                f"Ignoring joint {joint.wall1}-{joint.wall2}: wall not in room"
            )
            continue

        if joint.wall1_corner == CORNER_END:
            ends[w1.wall_number] += w2.thickness / 2
        else:
            starts[w1.wall_number] += w2.thickness / 2

        if joint.wall2_corner == CORNER_START:
            starts[w2.wall_number] += w1.thickness / 2
        else:
            ends[w2.wall_number] += w1.thickness / 2

    return {
        number: WallTrim(trim_start=starts[number], trim_end=ends[number])
        for number in starts
    }


def line_intersection(
    p1: Point2D, d1: Vector2D, p2: Point2D, d2: Vector2D
) -> Point2D | None:
    """Intersect the lines ``p1 + t*d1`` and ``p2 + s*d2``.

    Returns None when the lines are parallel (|d1 x d2| < PARALLEL_EPSILON).
    """
    cross = d1.cross(d2)
    if abs(cross) < PARALLEL_EPSILON:
        return None
    t = p1.vector_to(p2).cross(d2) / cross
    return p1.moved(d1, t)


def compute_room_polygons(walls: Sequence[Wall]) -> RoomPolygons:
    """Inner and outer perimeter polygons of the room.

    The inner face of a wall is its centerline moved half a thickness along
    the inward normal; the outer face is moved the same distance the other
    way. Corner ``i`` is where wall ``i - 1``'s face line meets wall ``i``'s.
    Parallel neighbours (a straight run) fall back to wall ``i``'s offset
    start point.
    """
    geometries = compute_wall_geometries(walls)
    if len(geometries) < 3:
        return RoomPolygons()

    inner: list[Point2D] = []
    outer: list[Point2D] = []

    for i, curr in enumerate(geometries):
        prev = geometries[i - 1]
        for side, corners in ((1.0, inner), (-1.0, outer)):
            prev_face = prev.start.moved(prev.normal, side * prev.thickness / 2)
            curr_face = curr.start.moved(curr.normal, side * curr.thickness / 2)
            corner = line_intersection(prev_face, prev.tangent, curr_face, curr.tangent)
            if corner is None:
                logger.debug(
                    f"Walls {prev.wall_number} and {curr.wall_number} are parallel; "
                    "using offset start as corner"
                )
                corner = curr_face
            corners.append(corner)

    return RoomPolygons(inner=inner, outer=outer)


def _face_extension(
    g: WallGeometry, box_point: Point2D, side: float, corner: Point2D, at_start: bool
) -> float:
    """Clamped tangential distance from a trimmed box face corner to the polygon corner.

    ``side`` is -1 for the outer face and +1 for the inner face.
    """
    face_point = box_point.moved(g.normal, side * g.thickness / 2)
    offset = corner.vector_to(face_point) if at_start else face_point.vector_to(corner)
    return max(0.0, offset.dot(g.tangent))


def compute_wall_miter_extensions(
    walls: Sequence[Wall], joints: Sequence[WallJoint]
) -> dict[int, MiterExtension]:
    """How far each face must extend past the trimmed box to reach its corner.

    For each end of each wall the trimmed box corner (start or end shifted
    by the trim, then offset half a thickness) is compared with the true
    polygon corner. The signed distance along the wall tangent, clamped at
    zero, is the extension. At a given corner one face usually extends while
    the other recedes, so inner and outer faces are measured independently.
    """
    geometries = compute_wall_geometries(walls)
    polygons = compute_room_polygons(walls)
    trims = compute_wall_trims(walls, joints)
    result: dict[int, MiterExtension] = {}
    n = len(geometries)

    for i, g in enumerate(geometries):
        trim = trims.get(g.wall_number, WallTrim())
        box_start = g.start.moved(g.tangent, trim.trim_start)
        box_end = g.start.moved(g.tangent, g.length - trim.trim_end)
        start_corner_idx, end_corner_idx = i, (i + 1) % n

        result[g.wall_number] = MiterExtension(
            start_ext=_face_extension(g, box_start, -1.0, polygons.outer[start_corner_idx], True),
            end_ext=_face_extension(g, box_end, -1.0, polygons.outer[end_corner_idx], False),
            inner_start_ext=_face_extension(g, box_start, 1.0, polygons.inner[start_corner_idx], True),
            inner_end_ext=_face_extension(g, box_end, 1.0, polygons.inner[end_corner_idx], False),
        )

    return result
