"""Oriented wall geometry derived from stored wall parameters.

Geometry is never cached on the walls. Every call recomputes it from
``pos_x``/``pos_y``/``angle``/``length`` so the result always matches the
current wall list.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ..entities import Wall
from ..value_objects import ChainClosure, Point2D, Vector2D, WallGeometry

logger = logging.getLogger(__name__)

__all__ = [
    "CLOSURE_TOLERANCE",
    "compute_wall_geometries",
    "normalized_wall_order",
    "signed_area",
    "verify_chain_closure",
    "wall_endpoint",
]

CLOSURE_TOLERANCE = 0.01  # mm


def wall_endpoint(wall: Wall) -> Point2D:
    """End of a wall's centerline: start + length * (cos a, sin a)."""
    return wall.start.moved(Vector2D.from_angle(wall.angle), wall.length)


def signed_area(walls: Sequence[Wall]) -> float:
    """Signed area of the polygon through the wall start points.

    Positive means counter-clockwise winding, negative clockwise.
    """
    n = len(walls)
    total = 0.0
    for i, wall in enumerate(walls):
        nxt = walls[(i + 1) % n]
        total += wall.pos_x * nxt.pos_y - nxt.pos_x * wall.pos_y
    return total / 2


def _corner_heights(wall: Wall, prev_wall: Wall, next_wall: Wall) -> tuple[float, float]:
    """Effective top heights at a wall's start and end corners.

    A follow-angle wall rises to meet a taller neighbour at the shared
    corner. A wall next to a shorter follow-angle neighbour keeps its own
    height there, so both tops meet at the taller value.
    """
    start_height = wall.height
    end_height = wall.height
    if wall.follow_angle and prev_wall.height > wall.height:
        start_height = prev_wall.height
    if wall.follow_angle and next_wall.height > wall.height:
        end_height = next_wall.height
    return start_height, end_height


def compute_wall_geometries(walls: Sequence[Wall]) -> list[WallGeometry]:
    """Compute endpoints, tangent and inward normal for every wall.

    The inside of the room is decided once for the whole loop from the sign
    of :func:`signed_area`. Clockwise loops have the interior to the right of
    each directed wall, counter-clockwise loops to the left.

    Returns an empty list when there are fewer than three walls, since no
    closed room can be formed.
    """
    if len(walls) < 3:
        logger.debug(f"Skipping geometry for {len(walls)} wall(s): not a closed room")
        return []

    clockwise = signed_area(walls) < 0
    n = len(walls)
    geometries: list[WallGeometry] = []

    for i, wall in enumerate(walls):
        tangent = Vector2D.from_angle(wall.angle)
        normal = tangent.right_perpendicular() if clockwise else tangent.left_perpendicular()
        start_height, end_height = _corner_heights(
            wall, walls[(i - 1) % n], walls[(i + 1) % n]
        )
        geometries.append(
            WallGeometry(
                wall_number=wall.wall_number,
                id_tag=wall.id_tag,
                start=wall.start,
                end=wall_endpoint(wall),
                tangent=tangent,
                normal=normal,
                height=wall.height,
                start_height=start_height,
                end_height=end_height,
                thickness=wall.thickness,
            )
        )

    return geometries


def verify_chain_closure(walls: Sequence[Wall]) -> ChainClosure:
    """Measure the gap between the last wall's end and the first wall's start."""
    if not walls:
        return ChainClosure(closed=False, gap=math.inf)

    gap = wall_endpoint(walls[-1]).distance_to(walls[0].start)
    return ChainClosure(closed=gap < CLOSURE_TOLERANCE, gap=gap)


def normalized_wall_order(walls: Sequence[Wall]) -> list[int]:
    """Wall numbers in loop order, starting from the leftmost start point.

    Leftmost is the minimum X, ties broken by minimum Y. Only the reported
    order changes; wall numbers are returned exactly as stored.
    """
    if not walls:
        return []

    first = min(range(len(walls)), key=lambda i: (walls[i].pos_x, walls[i].pos_y))
    return [walls[(first + i) % len(walls)].wall_number for i in range(len(walls))]
