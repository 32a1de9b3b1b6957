"""Typer CLI for room wall chains."""

import dataclasses
import logging
from pathlib import Path
from typing import Annotated

import typer

from roomchain.cli.commands import (
    add_product_command,
    move_corner_command,
    resize_command,
    set_height_command,
    split_command,
    toggle_follow_command,
    toggle_miter_command,
)
from roomchain.cli.commands.common import load_room, write_room
from roomchain.domain.services import (
    RoomPreset,
    create_preset_room,
    create_rectangular_room,
    verify_walls,
)
from roomchain.domain.services.room_factory import DEFAULT_HEIGHT, DEFAULT_THICKNESS
from roomchain.infrastructure import (
    GeometryJsonExporter,
    PlacementFormatter,
    VerificationFormatter,
    WallChainReportFormatter,
)

app = typer.Typer(
    name="roomchain",
    help="Build, inspect and edit closed chains of room walls.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Build, inspect and edit closed chains of room walls."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register edit commands
app.command(name="resize")(resize_command)
app.command(name="set-height")(set_height_command)
app.command(name="move-corner")(move_corner_command)
app.command(name="split")(split_command)
app.command(name="toggle-miter")(toggle_miter_command)
app.command(name="toggle-follow")(toggle_follow_command)
app.command(name="add-product")(add_product_command)


@app.command()
def create(
    output: Annotated[Path, typer.Argument(help="Where to write the room document")],
    width: Annotated[
        float | None, typer.Option("--width", help="Back wall length in mm")
    ] = None,
    depth: Annotated[
        float | None, typer.Option("--depth", help="Side wall length in mm")
    ] = None,
    height: Annotated[float, typer.Option("--height", help="Wall height in mm")] = DEFAULT_HEIGHT,
    thickness: Annotated[
        float, typer.Option("--thickness", "-t", help="Wall thickness in mm")
    ] = DEFAULT_THICKNESS,
    preset: Annotated[
        RoomPreset | None, typer.Option("--preset", "-p", help="Build a preset room instead")
    ] = None,
    name: Annotated[str | None, typer.Option("--name", help="Room name")] = None,
) -> None:
    """Create a room document from a rectangle or a preset.

    Example:
        roomchain create kitchen.json --width 3600 --depth 3000
        roomchain create closet.json --preset walk_in
    """
    if preset is not None:
        if width is not None or depth is not None:
            typer.echo("Error: --preset cannot be combined with --width/--depth", err=True)
            raise typer.Exit(code=1)
        room = create_preset_room(preset, height, thickness)
        if name is not None:
            room = dataclasses.replace(room, name=name)
    else:
        if width is None or depth is None:
            typer.echo("Error: --width and --depth are required without --preset", err=True)
            raise typer.Exit(code=1)
        if width <= 0 or depth <= 0 or height <= 0 or thickness < 0:
            typer.echo("Error: dimensions must be positive", err=True)
            raise typer.Exit(code=1)
        room = create_rectangular_room(width, depth, height, thickness, name=name)

    write_room(room, output)
    typer.echo(f"Created room '{room.name}' with {len(room.walls)} walls: {output}")


@app.command()
def report(
    room_file: Annotated[Path, typer.Argument(help="Path to the JSON room document")],
    inches: Annotated[
        bool, typer.Option("--inches", help="Show dimensions in inches")
    ] = False,
) -> None:
    """Show wall positions, trims, winding and closure for a room."""
    room, config = load_room(room_file)
    use_inches = inches or config.display.use_inches
    typer.echo(WallChainReportFormatter(use_inches=use_inches).format(room))


@app.command()
def verify(
    room_file: Annotated[Path, typer.Argument(help="Path to the JSON room document")],
) -> None:
    """Check that a room's walls form a valid closed loop.

    Exit codes:
        0 - All checks passed
        1 - The document could not be loaded or a check failed
    """
    room, _ = load_room(room_file)
    verification = verify_walls(room.walls, room.joints)
    typer.echo(VerificationFormatter().format(verification))
    if not verification.passed:
        raise typer.Exit(code=1)


@app.command()
def geometry(
    room_file: Annotated[Path, typer.Argument(help="Path to the JSON room document")],
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write JSON here instead of stdout")
    ] = None,
) -> None:
    """Export the derived geometry of a room as JSON."""
    room, _ = load_room(room_file)
    content = GeometryJsonExporter().export(room)
    if output is None:
        typer.echo(content)
        return
    try:
        output.write_text(content, encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Geometry written to {output}")


@app.command()
def placements(
    room_file: Annotated[Path, typer.Argument(help="Path to the JSON room document")],
) -> None:
    """List the world position and facing of every product."""
    room, _ = load_room(room_file)
    typer.echo(PlacementFormatter().format(room))


if __name__ == "__main__":
    app()
