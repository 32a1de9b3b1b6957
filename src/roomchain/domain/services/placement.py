"""Product placement on walls.

Products store a wall reference (``"<wall_number>_<section>"``) and an
offset ``x`` measured from the inside corner of that wall. This module turns
that into a room-space position and finds free space on a wall for new
products.
"""

from __future__ import annotations

import dataclasses
import logging
import re
import uuid
from typing import Sequence

from ..entities import UNPLACED_WALL_REF, Product, Wall, WallJoint
from ..value_objects import Point3D, ProductPlacement, WallTrim
from .joints import compute_wall_trims
from .wall_geometry import compute_wall_geometries

logger = logging.getLogger(__name__)

__all__ = [
    "compute_product_world_offset",
    "find_next_available_x",
    "parse_wall_reference",
    "place_product_on_wall",
    "products_on_wall",
    "usable_wall_length",
]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_wall_reference(wall_ref: str) -> int | None:
    """Wall number from a ``"<wall_number>_<section>"`` reference.

    Returns None for ``"0"``, an empty reference or one whose leading part
    is not an integer.
    """
    if not wall_ref or wall_ref == UNPLACED_WALL_REF:
        return None
    match = _LEADING_INT.match(wall_ref.split("_", 1)[0])
    return int(match.group(1)) if match else None


def compute_product_world_offset(
    product: Product,
    walls: Sequence[Wall],
    joints: Sequence[WallJoint],
) -> ProductPlacement | None:
    """Room-space position and wall angle for a product on a wall.

    Along the wall the product origin sits at ``trim_start + x + width``:
    the renderer turns products 180 degrees to face into the room, which
    reverses the width direction. Along the inward normal it sits at
    ``thickness / 2 + depth`` so the product back lands on the wall's inner
    face. The height is the product's ``elev``.

    Returns None when the product is unplaced or its wall cannot be
    resolved; callers should simply not draw it.
    """
    wall_number = parse_wall_reference(product.wall)
    if wall_number is None:
        return None

    wall = next((w for w in walls if w.wall_number == wall_number), None)
    if wall is None:
        logger.debug(f"Product {product.unique_id!r} references missing wall {wall_number}")
        return None

    geometry = next(
        (g for g in compute_wall_geometries(walls) if g.wall_number == wall_number),
        None,
    )
    if geometry is None:
        return None

    trim = compute_wall_trims(walls, joints).get(wall_number, WallTrim())
    along = trim.trim_start + product.x + product.width
    inward = geometry.thickness / 2 + product.depth
    point = geometry.start.moved(geometry.tangent, along).moved(geometry.normal, inward)

    return ProductPlacement(
        position=Point3D(point.x, point.y, product.elev),
        wall_angle_deg=(wall.angle + 180) % 360,
    )


def usable_wall_length(
    wall_number: int, walls: Sequence[Wall], joints: Sequence[WallJoint]
) -> float:
    """Wall length left between the two inside corners (0 for unknown walls)."""
    wall = next((w for w in walls if w.wall_number == wall_number), None)
    if wall is None:
        return 0.0
    trim = compute_wall_trims(walls, joints).get(wall_number, WallTrim())
    return wall.length - trim.trim_start - trim.trim_end


def products_on_wall(products: Sequence[Product], wall_number: int) -> list[Product]:
    return [p for p in products if parse_wall_reference(p.wall) == wall_number]


def find_next_available_x(
    products: Sequence[Product],
    wall_number: int,
    product_width: float,
    usable_length: float,
) -> float | None:
    """Find an x position where a product of ``product_width`` fits.

    Products are packed against the wall end first, so that looking at the
    wall from inside a counter-clockwise room they fill left to right. The
    search order is: flush with the wall end, then gaps between existing
    products scanning back from the end, then the gap before the first
    product. Returns None when nothing fits.
    """
    if product_width <= 0:
        return None

    intervals = sorted(
        (p.x, p.x + p.width) for p in products_on_wall(products, wall_number)
    )

    if not intervals:
        return usable_length - product_width if product_width <= usable_length else None

    if usable_length - intervals[-1][1] >= product_width:
        return usable_length - product_width

    for i in range(len(intervals) - 1, 0, -1):
        gap_start = intervals[i - 1][1]
        gap_end = intervals[i][0]
        if gap_end - gap_start >= product_width:
            return gap_end - product_width

    if intervals[0][0] >= product_width:
        return intervals[0][0] - product_width

    return None


def place_product_on_wall(source: Product, wall_number: int, x: float) -> Product:
    """Copy of ``source`` standing on section 1 of a wall at offset ``x``."""
    return dataclasses.replace(
        source,
        unique_id=f"placed-{uuid.uuid4().hex[:8]}",
        wall=f"{wall_number}_1",
        x=x,
        elev=0.0,
        rot=0.0,
        attributes=dict(source.attributes),
    )
