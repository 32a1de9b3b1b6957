"""Interactive wall edits that keep the wall loop connected.

Every function here is pure: it returns new lists and never touches its
inputs. An edit that cannot be applied (unknown wall or joint, a wall that
would end up shorter than ``MIN_WALL_LENGTH``) returns the input list
object itself, so callers can detect a rejected edit with ``result is
walls``.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import NamedTuple, Sequence

from ..entities import CORNER_END, CORNER_START, Product, Wall, WallJoint
from ..value_objects import Point2D, Vector2D
from .placement import parse_wall_reference
from .wall_geometry import wall_endpoint

logger = logging.getLogger(__name__)

__all__ = [
    "MIN_WALL_LENGTH",
    "SNAP_MAX_ERROR",
    "SNAP_THRESHOLD_DEG",
    "SplitResult",
    "move_joint",
    "rebuild_joints",
    "remap_wall_number",
    "snap_angle",
    "split_wall_at_center",
    "toggle_follow_angle",
    "toggle_joint_miter",
    "update_wall_height",
    "update_wall_length",
]

MIN_WALL_LENGTH = 50.0  # mm
SNAP_THRESHOLD_DEG = 5.0
SNAP_MAX_ERROR = 1.0  # mm


class SplitResult(NamedTuple):
    walls: list[Wall]
    joints: list[WallJoint]
    products: list[Product]


def snap_angle(angle: float, threshold: float = SNAP_THRESHOLD_DEG) -> float:
    """Round to the nearest multiple of 90 degrees when within ``threshold``."""
    nearest = round(angle / 90) * 90
    return float(nearest) if abs(angle - nearest) <= threshold else angle


def _index_of(walls: Sequence[Wall], wall_number: int) -> int:
    return next((i for i, w in enumerate(walls) if w.wall_number == wall_number), -1)


def _heading(start: Point2D, target: Point2D) -> tuple[float, float]:
    """Angle in degrees and distance from ``start`` to ``target``."""
    delta = start.vector_to(target)
    return math.degrees(math.atan2(delta.y, delta.x)), delta.length


def _snap_if_close(start: Point2D, angle: float, length: float, target: Point2D) -> float:
    """Snapped angle if the snapped wall still ends within SNAP_MAX_ERROR of target."""
    snapped = snap_angle(angle)
    if snapped == angle:
        return angle
    snapped_end = start.moved(Vector2D.from_angle(snapped), length)
    return snapped if snapped_end.distance_to(target) < SNAP_MAX_ERROR else angle


def rebuild_joints(
    walls: Sequence[Wall], old_joints: Sequence[WallJoint] | None = None
) -> list[WallJoint]:
    """Regenerate the joint cycle for ``walls``.

    Joint ``i`` joins the end of wall ``i`` to the start of wall ``i + 1``
    (wrapping around). ``miter_back`` is copied from the old joint between
    the same pair of wall numbers; new pairs default to mitered.
    """
    previous = {(j.wall1, j.wall2): j.miter_back for j in old_joints or ()}
    joints: list[WallJoint] = []
    for i, wall in enumerate(walls):
        nxt = walls[(i + 1) % len(walls)]
        joints.append(
            WallJoint(
                wall1=wall.wall_number,
                wall2=nxt.wall_number,
                wall1_corner=CORNER_END,
                wall2_corner=CORNER_START,
                is_interior=False,
                miter_back=previous.get((wall.wall_number, nxt.wall_number), True),
            )
        )
    return joints


def toggle_joint_miter(joints: Sequence[WallJoint], joint_index: int) -> list[WallJoint]:
    """Flip a joint between mitered and butt."""
    if not 0 <= joint_index < len(joints):
        logger.debug(f"Toggle miter rejected: no joint at index {joint_index}")
        return joints  # type: ignore[return-value]
    return [
        dataclasses.replace(j, miter_back=not j.miter_back) if i == joint_index else j
        for i, j in enumerate(joints)
    ]


def toggle_follow_angle(walls: Sequence[Wall], wall_number: int) -> list[Wall]:
    """Flip a wall's follow-angle flag."""
    if _index_of(walls, wall_number) < 0:
        logger.debug(f"Toggle follow-angle rejected: wall {wall_number} not found")
        return walls  # type: ignore[return-value]
    return [
        dataclasses.replace(w, follow_angle=not w.follow_angle)
        if w.wall_number == wall_number
        else w
        for w in walls
    ]


def update_wall_height(walls: Sequence[Wall], wall_number: int, new_height: float) -> list[Wall]:
    """Set a wall's height. Neighbouring walls are not affected."""
    if new_height <= 0:
        logger.debug(f"Height edit rejected: height {new_height} must be positive")
        return walls  # type: ignore[return-value]
    if _index_of(walls, wall_number) < 0:
        logger.debug(f"Height edit rejected: wall {wall_number} not found")
        return walls  # type: ignore[return-value]
    return [
        dataclasses.replace(w, height=new_height) if w.wall_number == wall_number else w
        for w in walls
    ]


def update_wall_length(walls: Sequence[Wall], wall_number: int, new_length: float) -> list[Wall]:
    """Resize a wall and reconnect its successor.

    The edited wall keeps its start and angle. The next wall moves its start
    to the new endpoint and takes whatever angle and length it needs to
    still reach the start of the wall after it. That angle snaps to a
    multiple of 90 degrees only if the snapped wall ends within
    SNAP_MAX_ERROR of its target. No other wall changes.
    """
    idx = _index_of(walls, wall_number)
    if idx < 0 or new_length < MIN_WALL_LENGTH:
        logger.debug(f"Length edit rejected: wall {wall_number}, length {new_length}")
        return walls  # type: ignore[return-value]

    wall = walls[idx]
    new_end = wall.start.moved(Vector2D.from_angle(wall.angle), new_length)

    next_idx = (idx + 1) % len(walls)
    target = walls[(idx + 2) % len(walls)].start

    next_angle, next_length = _heading(new_end, target)
    if next_length < MIN_WALL_LENGTH:
        logger.debug(
            f"Length edit rejected: wall {walls[next_idx].wall_number} would shrink to {next_length:.2f}"
        )
        return walls  # type: ignore[return-value]
    next_angle = _snap_if_close(new_end, next_angle, next_length, target)

    result = list(walls)
    result[idx] = dataclasses.replace(wall, length=new_length)
    result[next_idx] = dataclasses.replace(
        walls[next_idx],
        pos_x=new_end.x,
        pos_y=new_end.y,
        angle=next_angle,
        length=next_length,
    )
    return result


def move_joint(
    walls: Sequence[Wall],
    joints: Sequence[WallJoint],
    joint_index: int,
    new_x: float,
    new_y: float,
) -> list[Wall]:
    """Drag the corner shared by the two walls of ``joints[joint_index]``.

    The wall ending at the joint keeps its start and turns toward the new
    point, with its angle snapped. Because of the snap the corner may not
    land exactly on ``(new_x, new_y)``; the wall starting at the joint is
    rebuilt from the corner that was actually reached to its fixed far end
    (the start of the next joint's wall, or its own current end).
    """
    if not 0 <= joint_index < len(joints):
        logger.debug(f"Corner move rejected: no joint at index {joint_index}")
        return walls  # type: ignore[return-value]

    joint = joints[joint_index]
    w1_idx = _index_of(walls, joint.wall1)
    w2_idx = _index_of(walls, joint.wall2)
    if w1_idx < 0 or w2_idx < 0:
        logger.debug(f"Corner move rejected: joint {joint_index} references a missing wall")
        return walls  # type: ignore[return-value]

    w1 = walls[w1_idx]
    w2 = walls[w2_idx]

    angle1, length1 = _heading(w1.start, Point2D(new_x, new_y))
    angle1 = snap_angle(angle1)
    corner = w1.start.moved(Vector2D.from_angle(angle1), length1)

    next_joint = joints[(joint_index + 1) % len(joints)]
    next_idx = _index_of(walls, next_joint.wall2)
    far_end = walls[next_idx].start if next_idx >= 0 else wall_endpoint(w2)

    angle2, length2 = _heading(corner, far_end)
    angle2 = _snap_if_close(corner, angle2, length2, far_end)

    if length1 < MIN_WALL_LENGTH or length2 < MIN_WALL_LENGTH:
        logger.debug(
            f"Corner move rejected: walls would be {length1:.2f} and {length2:.2f} long"
        )
        return walls  # type: ignore[return-value]

    result = list(walls)
    result[w1_idx] = dataclasses.replace(w1, angle=angle1, length=length1)
    result[w2_idx] = dataclasses.replace(
        w2, pos_x=corner.x, pos_y=corner.y, angle=angle2, length=length2
    )
    return result


def remap_wall_number(
    old_number: int,
    walls: Sequence[Wall],
    split_index: int,
) -> int | None:
    """New number of an unsplit wall after the wall at ``split_index`` splits.

    Walls before the split keep their position, walls after it move one
    place down the loop. Returns None for unknown walls.
    """
    old_idx = _index_of(walls, old_number)
    if old_idx < 0:
        return None
    return old_idx + 1 if old_idx < split_index else old_idx + 2


def _remap_product(
    product: Product,
    walls: Sequence[Wall],
    split_index: int,
    half_length: float,
) -> Product:
    old_number = parse_wall_reference(product.wall)
    if old_number is None:
        return product
    section = product.wall.partition("_")[2] or "1"

    if old_number == walls[split_index].wall_number:
        if product.x < half_length:
            return dataclasses.replace(product, wall=f"{split_index + 1}_{section}")
        return dataclasses.replace(
            product, wall=f"{split_index + 2}_{section}", x=product.x - half_length
        )

    new_number = remap_wall_number(old_number, walls, split_index)
    if new_number is None:
        return product
    return dataclasses.replace(product, wall=f"{new_number}_{section}")


def _renumbered_joints(
    joints: Sequence[WallJoint], walls: Sequence[Wall], split_index: int
) -> list[WallJoint]:
    """Old joints expressed in the post-split numbering.

    A joint that ended on the split wall now ends on its first half; one
    that started from it now starts from its second half.
    """
    split_number = walls[split_index].wall_number
    renumbered: list[WallJoint] = []
    for joint in joints:
        wall1 = (
            split_index + 2
            if joint.wall1 == split_number
            else remap_wall_number(joint.wall1, walls, split_index)
        )
        wall2 = (
            split_index + 1
            if joint.wall2 == split_number
            else remap_wall_number(joint.wall2, walls, split_index)
        )
        if wall1 is None or wall2 is None:
            continue
        renumbered.append(dataclasses.replace(joint, wall1=wall1, wall2=wall2))
    return renumbered


def split_wall_at_center(
    walls: Sequence[Wall],
    joints: Sequence[WallJoint],
    products: Sequence[Product],
    wall_number: int,
) -> SplitResult:
    """Split a wall into two half-length walls at its midpoint.

    All walls are renumbered 1..n in loop order, and every product's wall
    reference is rewritten to the new numbering. Products on the split wall
    stay on the first half when ``x`` is below half the length, otherwise
    they move to the second half with ``x`` reduced by half the length.
    Joints are rebuilt for the new loop, keeping the miter flags of the
    corners that already existed.
    """
    idx = _index_of(walls, wall_number)
    if idx < 0:
        logger.debug(f"Split rejected: wall {wall_number} not found")
        return SplitResult(walls, joints, products)  # type: ignore[arg-type]

    wall = walls[idx]
    half = wall.length / 2
    if half < MIN_WALL_LENGTH:
        logger.debug(f"Split rejected: halves of wall {wall_number} would be {half:.2f} long")
        return SplitResult(walls, joints, products)  # type: ignore[arg-type]

    mid = wall.start.moved(Vector2D.from_angle(wall.angle), half)
    first_half = dataclasses.replace(wall, length=half)
    second_half = dataclasses.replace(wall, pos_x=mid.x, pos_y=mid.y, length=half)

    ordered = [*walls[:idx], first_half, second_half, *walls[idx + 1:]]
    new_walls = [
        dataclasses.replace(w, wall_number=i + 1, id_tag=i + 1)
        for i, w in enumerate(ordered)
    ]

    new_products = [_remap_product(p, walls, idx, half) for p in products]
    new_joints = rebuild_joints(new_walls, _renumbered_joints(joints, walls, idx))

    logger.debug(f"Split wall {wall_number} into walls {idx + 1} and {idx + 2}")
    return SplitResult(new_walls, new_joints, new_products)
