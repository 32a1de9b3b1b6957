"""Text reports and JSON export for room geometry."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from roomchain.domain.entities import Room
from roomchain.domain.services import (
    compute_product_world_offset,
    compute_room_polygons,
    compute_wall_geometries,
    compute_wall_miter_extensions,
    compute_wall_trims,
    normalized_wall_order,
    signed_area,
    verify_chain_closure,
)
from roomchain.domain.units import format_dim
from roomchain.domain.value_objects import ChainVerification


class WallChainReportFormatter:
    """Formats a wall-by-wall summary of a room's chain."""

    def __init__(self, use_inches: bool = False) -> None:
        self._use_inches = use_inches

    def _dim(self, mm: float) -> str:
        return format_dim(mm, self._use_inches)

    def format(self, room: Room) -> str:
        walls = room.walls
        geometries = compute_wall_geometries(walls)
        trims = compute_wall_trims(walls, room.joints)
        area = signed_area(walls) if walls else 0.0
        closure = verify_chain_closure(walls)

        lines = [f"ROOM: {room.name}", "=" * 70, f"Walls: {len(walls)}"]
        for g in geometries:
            trim = trims.get(g.wall_number)
            lines.append(
                f"  Wall {g.wall_number}: "
                f"start=({g.start.x:.1f}, {g.start.y:.1f}) "
                f"end=({g.end.x:.1f}, {g.end.y:.1f}) "
                f"normal=({g.normal.x:.3f}, {g.normal.y:.3f})"
            )
            lines.append(
                f"    length={self._dim(g.length)} height={self._dim(g.height)} "
                f"thickness={self._dim(g.thickness)}"
                + (f" trim={self._dim(trim.trim_start)}/{self._dim(trim.trim_end)}" if trim else "")
            )
        lines.append("-" * 70)
        lines.append(f"Signed area: {area:.1f} ({'CW' if area < 0 else 'CCW'} winding)")
        lines.append(
            f"Chain closure: {'PASS' if closure.closed else 'FAIL'} (gap={closure.gap:.4f}mm)"
        )
        order = ", ".join(str(n) for n in normalized_wall_order(walls))
        lines.append(f"Normalized order: [{order}]")
        return "\n".join(lines)


class VerificationFormatter:
    """Formats chain verification results."""

    def format(self, verification: ChainVerification) -> str:
        lines = list(verification.details)
        lines.append("")
        lines.append("Verification passed." if verification.passed else "Verification failed.")
        return "\n".join(lines)


class PlacementFormatter:
    """Formats the world placement of every product in a room."""

    def format(self, room: Room) -> str:
        if not room.products:
            return "No products in room."

        lines = [
            "PRODUCT PLACEMENTS",
            "=" * 70,
            f"{'Product':<20} {'Wall':<8} {'X':>10} {'Y':>10} {'Z':>8} {'Angle':>8}",
            "-" * 70,
        ]
        for product in room.products:
            label = (product.name or product.unique_id or "?")[:20]
            placement = compute_product_world_offset(product, room.walls, room.joints)
            if placement is None:
                lines.append(f"{label:<20} {product.wall:<8} {'(not placed)':>10}")
                continue
            pos = placement.position
            lines.append(
                f"{label:<20} {product.wall:<8} {pos.x:>10.1f} {pos.y:>10.1f} "
                f"{pos.z:>8.1f} {placement.wall_angle_deg:>8.1f}"
            )
        return "\n".join(lines)


class GeometryJsonExporter:
    """Exports all derived geometry of a room as JSON.

    The output is read-only display data: wall geometry, trims, miter
    extensions, perimeter polygons and product placements.
    """

    def export_dict(self, room: Room) -> dict[str, Any]:
        polygons = compute_room_polygons(room.walls)
        placements = {
            (p.unique_id or str(i)): compute_product_world_offset(p, room.walls, room.joints)
            for i, p in enumerate(room.products)
        }
        return {
            "room": room.name,
            "walls": [asdict(g) for g in compute_wall_geometries(room.walls)],
            "trims": {
                str(n): asdict(t) for n, t in compute_wall_trims(room.walls, room.joints).items()
            },
            "miter_extensions": {
                str(n): asdict(m)
                for n, m in compute_wall_miter_extensions(room.walls, room.joints).items()
            },
            "polygons": {
                "inner": [p.as_tuple() for p in polygons.inner],
                "outer": [p.as_tuple() for p in polygons.outer],
            },
            "placements": {
                key: (asdict(value) if value is not None else None)
                for key, value in placements.items()
            },
            "closure": asdict(verify_chain_closure(room.walls)),
        }

    def export(self, room: Room) -> str:
        return json.dumps(self.export_dict(room), indent=2)
