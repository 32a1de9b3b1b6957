"""Domain services for the wall-chain kernel.

This package provides the pure geometry functions the rest of the system
is built on:
- Basis change and rotation composition
- Wall geometry, winding and closure
- Joint trims, perimeter polygons and miter extensions
- Product placement on walls
- Interactive wall edits
- Chain verification and room construction
"""

from .basis import (
    room_plan_to_view,
    room_quat_to_view,
    room_to_view,
    view_quat_to_room,
    view_to_room,
)
from .chain_verifier import verify_walls
from .joints import (
    compute_room_polygons,
    compute_wall_miter_extensions,
    compute_wall_trims,
    line_intersection,
)
from .placement import (
    compute_product_world_offset,
    find_next_available_x,
    parse_wall_reference,
    place_product_on_wall,
    products_on_wall,
    usable_wall_length,
)
from .room_factory import (
    RoomPreset,
    create_angled_room,
    create_preset_room,
    create_rectangular_room,
)
from .rotations import (
    quaternion_to_rotation_spec,
    rotation_spec_to_quaternion,
)
from .wall_editor import (
    MIN_WALL_LENGTH,
    SplitResult,
    move_joint,
    rebuild_joints,
    snap_angle,
    split_wall_at_center,
    toggle_follow_angle,
    toggle_joint_miter,
    update_wall_height,
    update_wall_length,
)
from .wall_geometry import (
    CLOSURE_TOLERANCE,
    compute_wall_geometries,
    normalized_wall_order,
    signed_area,
    verify_chain_closure,
    wall_endpoint,
)

__all__ = [
    # Basis and rotations
    "room_plan_to_view",
    "room_quat_to_view",
    "room_to_view",
    "view_quat_to_room",
    "view_to_room",
    "quaternion_to_rotation_spec",
    "rotation_spec_to_quaternion",
    # Wall geometry
    "CLOSURE_TOLERANCE",
    "compute_wall_geometries",
    "normalized_wall_order",
    "signed_area",
    "verify_chain_closure",
    "wall_endpoint",
    # Joints
    "compute_room_polygons",
    "compute_wall_miter_extensions",
    "compute_wall_trims",
    "line_intersection",
    # Placement
    "compute_product_world_offset",
    "find_next_available_x",
    "parse_wall_reference",
    "place_product_on_wall",
    "products_on_wall",
    "usable_wall_length",
    # Editing
    "MIN_WALL_LENGTH",
    "SplitResult",
    "move_joint",
    "rebuild_joints",
    "snap_angle",
    "split_wall_at_center",
    "toggle_follow_angle",
    "toggle_joint_miter",
    "update_wall_height",
    "update_wall_length",
    # Verification and construction
    "verify_walls",
    "RoomPreset",
    "create_angled_room",
    "create_preset_room",
    "create_rectangular_room",
]
