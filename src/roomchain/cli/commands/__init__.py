"""CLI command implementations for the roomchain application.

This package contains the room edit subcommands:
- resize, set-height, move-corner, split
- toggle-miter, toggle-follow
- add-product
"""

from roomchain.cli.commands.edit import (
    add_product_command,
    move_corner_command,
    resize_command,
    set_height_command,
    split_command,
    toggle_follow_command,
    toggle_miter_command,
)

__all__ = [
    "add_product_command",
    "move_corner_command",
    "resize_command",
    "set_height_command",
    "split_command",
    "toggle_follow_command",
    "toggle_miter_command",
]
