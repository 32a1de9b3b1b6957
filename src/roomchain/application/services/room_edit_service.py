"""Room-level editing.

Wraps the wall editor functions so they operate on a whole Room and report
whether the edit was applied. Kernel edit functions signal a rejected edit
by handing back their input unchanged; this service turns that into an
explicit ``changed`` flag.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

from roomchain.domain.entities import Fixture, Product, Room
from roomchain.domain.services import (
    find_next_available_x,
    move_joint,
    place_product_on_wall,
    split_wall_at_center,
    toggle_follow_angle,
    toggle_joint_miter,
    update_wall_height,
    update_wall_length,
    usable_wall_length,
)
from roomchain.domain.services.wall_editor import remap_wall_number

logger = logging.getLogger(__name__)

__all__ = ["EditOutcome", "RoomEditService"]


@dataclass(frozen=True)
class EditOutcome:
    """Result of a room edit.

    Attributes:
        room: The edited room, or the original room when nothing changed.
        changed: False when the edit was rejected.
        message: Short description of what happened.
    """

    room: Room
    changed: bool
    message: str


class RoomEditService:
    """Applies interactive edits to a Room."""

    def _outcome(self, room: Room, updated: Room | None, message: str, rejected: str) -> EditOutcome:
        if updated is None:
            logger.debug(f"Edit rejected on room {room.name!r}: {rejected}")
            return EditOutcome(room=room, changed=False, message=rejected)
        logger.info(f"Room {room.name!r}: {message}")
        return EditOutcome(room=updated, changed=True, message=message)

    def resize_wall(self, room: Room, wall_number: int, new_length: float) -> EditOutcome:
        """Change a wall's length; its successor reconnects the loop."""
        walls = update_wall_length(room.walls, wall_number, new_length)
        updated = None if walls is room.walls else dataclasses.replace(room, walls=walls)
        return self._outcome(
            room,
            updated,
            f"wall {wall_number} resized to {new_length:.1f}mm",
            f"cannot resize wall {wall_number} to {new_length:.1f}mm",
        )

    def set_wall_height(self, room: Room, wall_number: int, new_height: float) -> EditOutcome:
        """Change a wall's height."""
        walls = update_wall_height(room.walls, wall_number, new_height)
        updated = None if walls is room.walls else dataclasses.replace(room, walls=walls)
        if room.wall_by_number(wall_number) is None:
            rejected = f"wall {wall_number} not found"
        else:
            rejected = f"height must be positive, got {new_height:.1f}mm"
        return self._outcome(
            room,
            updated,
            f"wall {wall_number} height set to {new_height:.1f}mm",
            rejected,
        )

    def move_corner(self, room: Room, joint_index: int, x: float, y: float) -> EditOutcome:
        """Drag the corner at ``room.joints[joint_index]`` toward (x, y)."""
        walls = move_joint(room.walls, room.joints, joint_index, x, y)
        updated = None if walls is room.walls else dataclasses.replace(room, walls=walls)
        return self._outcome(
            room,
            updated,
            f"corner {joint_index} moved toward ({x:.1f}, {y:.1f})",
            f"cannot move corner {joint_index} to ({x:.1f}, {y:.1f})",
        )

    def split_wall(self, room: Room, wall_number: int) -> EditOutcome:
        """Split a wall at its midpoint, renumbering walls, products and fixtures."""
        result = split_wall_at_center(room.walls, room.joints, room.products, wall_number)
        if result.walls is room.walls:
            return self._outcome(room, None, "", f"cannot split wall {wall_number}")

        split_index = next(i for i, w in enumerate(room.walls) if w.wall_number == wall_number)
        half = room.walls[split_index].length / 2
        fixtures = [
            self._remap_fixture(f, room, split_index, half) for f in room.fixtures
        ]
        updated = dataclasses.replace(
            room,
            walls=result.walls,
            joints=result.joints,
            products=result.products,
            fixtures=fixtures,
        )
        return self._outcome(
            room,
            updated,
            f"wall {wall_number} split into walls {split_index + 1} and {split_index + 2}",
            "",
        )

    @staticmethod
    def _remap_fixture(fixture: Fixture, room: Room, split_index: int, half: float) -> Fixture:
        if fixture.wall == room.walls[split_index].wall_number:
            if fixture.x < half:
                return dataclasses.replace(fixture, wall=split_index + 1)
            return dataclasses.replace(fixture, wall=split_index + 2, x=fixture.x - half)
        new_number = remap_wall_number(fixture.wall, room.walls, split_index)
        return fixture if new_number is None else dataclasses.replace(fixture, wall=new_number)

    def toggle_follow_angle(self, room: Room, wall_number: int) -> EditOutcome:
        walls = toggle_follow_angle(room.walls, wall_number)
        updated = None if walls is room.walls else dataclasses.replace(room, walls=walls)
        return self._outcome(
            room, updated, f"follow-angle toggled on wall {wall_number}", f"wall {wall_number} not found"
        )

    def toggle_joint_miter(self, room: Room, joint_index: int) -> EditOutcome:
        joints = toggle_joint_miter(room.joints, joint_index)
        updated = None if joints is room.joints else dataclasses.replace(room, joints=joints)
        return self._outcome(
            room, updated, f"joint {joint_index} miter toggled", f"no joint at index {joint_index}"
        )

    def add_product(self, room: Room, product: Product, wall_number: int) -> EditOutcome:
        """Place a copy of ``product`` in the first free gap on a wall.

        Gaps are searched from the wall end backwards (see
        ``find_next_available_x``).
        """
        if room.wall_by_number(wall_number) is None:
            return self._outcome(room, None, "", f"wall {wall_number} not found")
        if min(product.width, product.depth, product.height) <= 0:
            return self._outcome(
                room, None, "", "product width, depth and height must be positive"
            )

        usable = usable_wall_length(wall_number, room.walls, room.joints)
        x = find_next_available_x(room.products, wall_number, product.width, usable)
        if x is None:
            return self._outcome(
                room, None, "", f"no room for a {product.width:.1f}mm product on wall {wall_number}"
            )

        placed = place_product_on_wall(product, wall_number, x)
        updated = dataclasses.replace(room, products=[*room.products, placed])
        return self._outcome(
            room, updated, f"product placed on wall {wall_number} at x={x:.1f}mm", ""
        )
