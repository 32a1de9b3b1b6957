"""Diagnostic checks over a wall chain."""

from __future__ import annotations

import logging
from typing import Sequence

from ..entities import CORNER_END, CORNER_START, Wall, WallJoint
from ..value_objects import ChainVerification, VerificationCheck
from .wall_geometry import (
    CLOSURE_TOLERANCE,
    compute_wall_geometries,
    normalized_wall_order,
    signed_area,
    verify_chain_closure,
)

logger = logging.getLogger(__name__)

__all__ = ["NORMAL_TOLERANCE", "verify_walls"]

NORMAL_TOLERANCE = 0.001


def _joint_cycle_check(walls: Sequence[Wall], joints: Sequence[WallJoint]) -> VerificationCheck:
    if len(joints) != len(walls):
        return VerificationCheck(
            "fail", f"Joint count {len(joints)} does not match wall count {len(walls)}"
        )
    for i, joint in enumerate(joints):
        expected = (walls[i].wall_number, walls[(i + 1) % len(walls)].wall_number)
        if (
            (joint.wall1, joint.wall2) != expected
            or joint.wall1_corner != CORNER_END
            or joint.wall2_corner != CORNER_START
        ):
            return VerificationCheck(
                "fail",
                f"Joint {i} connects {joint.wall1}->{joint.wall2}, expected "
                f"end of {expected[0]} to start of {expected[1]}",
            )
    return VerificationCheck("pass", f"All {len(joints)} joints form the wall cycle")


def verify_walls(
    walls: Sequence[Wall], joints: Sequence[WallJoint] | None = None
) -> ChainVerification:
    """Check closure, winding, normals and wall-number uniqueness.

    When ``joints`` are given they are also checked against the positional
    convention that joint ``i`` joins wall ``i``'s end to wall ``i + 1``'s
    start.
    """
    if not walls:
        return ChainVerification((VerificationCheck("fail", "No walls to verify"),))

    checks: list[VerificationCheck] = []

    closure = verify_chain_closure(walls)
    if closure.closed:
        checks.append(VerificationCheck("pass", f"Chain closure: gap={closure.gap:.6f}mm"))
    else:
        logger.warning(f"Wall chain is open: gap={closure.gap:.6f}mm")
        checks.append(
            VerificationCheck(
                "fail",
                f"Chain closure: gap={closure.gap:.6f}mm (>{CLOSURE_TOLERANCE}mm)",
            )
        )

    area = signed_area(walls)
    winding = "CW" if area < 0 else "CCW"
    checks.append(VerificationCheck("info", f"Signed area: {area:.2f} ({winding} winding)"))

    geometries = compute_wall_geometries(walls)
    if not geometries:
        checks.append(
            VerificationCheck("fail", f"Only {len(walls)} wall(s); a room needs at least 3")
        )
    bad_normals = [
        g for g in geometries if abs(g.normal.length - 1) > NORMAL_TOLERANCE
    ]
    for g in bad_normals:
        checks.append(
            VerificationCheck(
                "fail",
                f"Wall {g.wall_number} normal not unit length: {g.normal.length:.6f}",
            )
        )
    if geometries and not bad_normals:
        checks.append(
            VerificationCheck("pass", f"All {len(geometries)} wall normals are unit length")
        )

    order = ", ".join(str(n) for n in normalized_wall_order(walls))
    checks.append(VerificationCheck("info", f"Normalized order: [{order}]"))

    if len({w.wall_number for w in walls}) == len(walls):
        checks.append(VerificationCheck("pass", f"All {len(walls)} wall numbers are unique"))
    else:
        checks.append(VerificationCheck("fail", "Duplicate wall numbers found"))

    if joints is not None:
        checks.append(_joint_cycle_check(walls, joints))

    return ChainVerification(tuple(checks))
