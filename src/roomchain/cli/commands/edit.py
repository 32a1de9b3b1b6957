"""Room edit commands.

Each command loads a room document, applies one edit through
RoomEditService and writes the result back (or to ``--output``). Rejected
edits leave the document untouched and exit with code 2.
"""

from pathlib import Path
from typing import Annotated

import typer

from roomchain.application import RoomEditService
from roomchain.cli.commands.common import finish_edit, load_room
from roomchain.domain.entities import Product

RoomFile = Annotated[Path, typer.Argument(help="Path to the JSON room document")]
OutputFile = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Write the edited room here instead of in place"),
]

_service = RoomEditService()


def resize_command(
    room_file: RoomFile,
    wall: Annotated[int, typer.Option("--wall", "-w", help="Wall number")],
    length: Annotated[float, typer.Option("--length", "-l", help="New length in mm")],
    output: OutputFile = None,
) -> None:
    """Change a wall's length; the next wall reconnects the loop."""
    room, config = load_room(room_file)
    finish_edit(_service.resize_wall(room, wall, length), config, room_file, output)


def set_height_command(
    room_file: RoomFile,
    wall: Annotated[int, typer.Option("--wall", "-w", help="Wall number")],
    height: Annotated[float, typer.Option("--height", help="New height in mm")],
    output: OutputFile = None,
) -> None:
    """Change a wall's height."""
    room, config = load_room(room_file)
    finish_edit(_service.set_wall_height(room, wall, height), config, room_file, output)


def move_corner_command(
    room_file: RoomFile,
    joint: Annotated[int, typer.Option("--joint", "-j", help="Joint index (0-based)")],
    x: Annotated[float, typer.Option("--x", help="Target X in mm")],
    y: Annotated[float, typer.Option("--y", help="Target Y in mm")],
    output: OutputFile = None,
) -> None:
    """Drag a corner to a new position."""
    room, config = load_room(room_file)
    finish_edit(_service.move_corner(room, joint, x, y), config, room_file, output)


def split_command(
    room_file: RoomFile,
    wall: Annotated[int, typer.Option("--wall", "-w", help="Wall number")],
    output: OutputFile = None,
) -> None:
    """Split a wall at its midpoint and renumber the room."""
    room, config = load_room(room_file)
    finish_edit(_service.split_wall(room, wall), config, room_file, output)


def toggle_miter_command(
    room_file: RoomFile,
    joint: Annotated[int, typer.Option("--joint", "-j", help="Joint index (0-based)")],
    output: OutputFile = None,
) -> None:
    """Switch a joint between mitered and butt."""
    room, config = load_room(room_file)
    finish_edit(_service.toggle_joint_miter(room, joint), config, room_file, output)


def toggle_follow_command(
    room_file: RoomFile,
    wall: Annotated[int, typer.Option("--wall", "-w", help="Wall number")],
    output: OutputFile = None,
) -> None:
    """Switch a wall's follow-angle top on or off."""
    room, config = load_room(room_file)
    finish_edit(_service.toggle_follow_angle(room, wall), config, room_file, output)


def add_product_command(
    room_file: RoomFile,
    wall: Annotated[int, typer.Option("--wall", "-w", help="Wall number")],
    width: Annotated[float, typer.Option("--width", help="Product width in mm")],
    depth: Annotated[float, typer.Option("--depth", help="Product depth in mm")],
    height: Annotated[float, typer.Option("--height", help="Product height in mm")],
    name: Annotated[str, typer.Option("--name", help="Product name")] = "",
    output: OutputFile = None,
) -> None:
    """Place a new product in the first free gap on a wall."""
    room, config = load_room(room_file)
    product = Product(width=width, depth=depth, height=height, name=name)
    finish_edit(_service.add_product(room, product, wall), config, room_file, output)
