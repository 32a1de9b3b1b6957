"""Helpers shared by CLI commands."""

from pathlib import Path

import typer

from roomchain.application import EditOutcome
from roomchain.application.config import (
    ConfigError,
    RoomConfiguration,
    config_to_room,
    load_config,
    room_to_config,
    save_config,
)
from roomchain.domain.entities import Room

# Exit code for an edit that was rejected because it would break the room.
EXIT_EDIT_REJECTED = 2


def display_config_error(error: ConfigError) -> None:
    """Print a room document error to stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            typer.echo(f"    Line {line}, Column {column}: {detail.get('message')}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(f"  {detail.get('path', 'unknown')}: {detail.get('message')}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def load_room(path: Path) -> tuple[Room, RoomConfiguration]:
    """Load a room document, exiting with code 1 on any document error."""
    try:
        config = load_config(path)
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)
    return config_to_room(config), config


def write_room(room: Room, path: Path, use_inches: bool = False) -> None:
    try:
        save_config(room_to_config(room, use_inches=use_inches), path)
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)


def finish_edit(
    outcome: EditOutcome,
    config: RoomConfiguration,
    room_file: Path,
    output: Path | None,
) -> None:
    """Write an applied edit, or report a rejected one and exit with code 2."""
    if not outcome.changed:
        typer.echo(f"Edit rejected: {outcome.message}", err=True)
        raise typer.Exit(code=EXIT_EDIT_REJECTED)

    target = output or room_file
    write_room(outcome.room, target, use_inches=config.display.use_inches)
    typer.echo(f"{outcome.message.capitalize()}. Saved to {target}")
