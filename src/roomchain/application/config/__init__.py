"""Room document schema, loading and conversion.

Public API:
    - RoomConfiguration: Root document model
    - RoomConfig: Room description (walls, rectangle or preset)
    - WallConfig / JointConfig / ProductConfig / FixtureConfig
    - RectangleConfig: Four-wall rectangle shorthand
    - load_config / load_config_from_dict / save_config
    - ConfigError: Exception for document errors
    - config_to_room / room_to_config: Document <-> Room conversion

Example:
    >>> from pathlib import Path
    >>> from roomchain.application.config import load_config, config_to_room
    >>> room = config_to_room(load_config(Path("kitchen.json")))
"""

from roomchain.application.config.adapter import config_to_room, room_to_config
from roomchain.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    save_config,
)
from roomchain.application.config.schema import (
    CURRENT_VERSION,
    SUPPORTED_VERSIONS,
    DisplayConfig,
    FixtureConfig,
    JointConfig,
    ProductConfig,
    RectangleConfig,
    RoomConfig,
    RoomConfiguration,
    RotationConfig,
    WallConfig,
)

__all__ = [
    "CURRENT_VERSION",
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "DisplayConfig",
    "FixtureConfig",
    "JointConfig",
    "ProductConfig",
    "RectangleConfig",
    "RoomConfig",
    "RoomConfiguration",
    "RotationConfig",
    "WallConfig",
    "config_to_room",
    "load_config",
    "load_config_from_dict",
    "room_to_config",
    "save_config",
]
