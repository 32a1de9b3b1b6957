"""Room document loading and saving.

Reads JSON room documents, validates them against the schema and turns
every failure (missing file, unreadable file, bad JSON, schema violation)
into a single ``ConfigError`` with a category and structured details.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from roomchain.application.config.schema import RoomConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a room document cannot be loaded or validated.

    Attributes:
        message: Human-readable summary
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation
        path: Document path, when loading from a file
        details: Per-error details (line/column for JSON errors, field path
            and message for validation errors)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as ``room.walls[2].length``.

    Examples:
        >>> _format_json_path(("room", "walls", 2, "length"))
        'room.walls[2].length'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int) and parts:
            parts[-1] = f"{parts[-1]}[{segment}]"
        elif isinstance(segment, int):
            parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Room document validation failed:"]
    for detail in details:
        value = detail.get("value")
        suffix = f" (got: {value!r})" if value is not None and not isinstance(value, dict) else ""
        lines.append(f"  - {detail['path']}: {detail['message']}{suffix}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> RoomConfiguration:
    try:
        return RoomConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> RoomConfiguration:
    """Load and validate a room document from a JSON file.

    Raises:
        ConfigError: If the file is missing or unreadable, is not valid
            JSON, or does not match the schema. ``error_type`` tells which.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Room document not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading room document: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading room document: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in room document: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    config = _validate(data, path)
    logger.debug(f"Loaded room document {path} (schema {config.schema_version})")
    return config


def load_config_from_dict(data: dict[str, Any]) -> RoomConfiguration:
    """Validate a room document that is already in memory.

    Raises:
        ConfigError: If the data does not match the schema.
    """
    return _validate(data)


def save_config(config: RoomConfiguration, path: Path) -> None:
    """Write a room document as indented JSON.

    Raises:
        ConfigError: If the file cannot be written.
    """
    try:
        path.write_text(config.model_dump_json(indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            message=f"Error writing room document: {path}: {e}",
            error_type="file_write_error",
            path=path,
        ) from e
    logger.debug(f"Saved room document {path}")
