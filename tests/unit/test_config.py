"""Unit tests for room document schema, loading and conversion."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from roomchain.application.config import (
    ConfigError,
    config_to_room,
    load_config,
    load_config_from_dict,
    room_to_config,
    save_config,
)
from roomchain.domain.entities import Product, Room
from roomchain.domain.services import RoomPreset, create_rectangular_room
from roomchain.domain.value_objects import Axis, FixtureKind


def _square_doc(**room: Any) -> dict[str, Any]:
    walls = [
        {"wall_number": 1, "x": 0, "y": 0, "angle": 0, "length": 3000, "thickness": 100},
        {"wall_number": 2, "x": 3000, "y": 0, "angle": 90, "length": 3000, "thickness": 100},
        {"wall_number": 3, "x": 3000, "y": 3000, "angle": 180, "length": 3000, "thickness": 100},
        {"wall_number": 4, "x": 0, "y": 3000, "angle": 270, "length": 3000, "thickness": 100},
    ]
    return {"schema_version": "1.1", "room": {"name": "Square", "walls": walls, **room}}


class TestSchemaValidation:
    """Tests for RoomConfiguration validation."""

    def test_minimal_rectangle(self) -> None:
        config = load_config_from_dict({"room": {"rectangle": {"width": 3000, "depth": 2000}}})
        assert config.schema_version == "1.1"
        assert config.room.rectangle is not None
        assert config.room.rectangle.height == pytest.approx(2438.4)

    def test_preset(self) -> None:
        config = load_config_from_dict({"room": {"preset": "angled"}})
        assert config.room.preset is RoomPreset.ANGLED

    def test_unsupported_version(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "9.0", "room": {"preset": "walk_in"}})
        assert exc_info.value.error_type == "validation"
        assert "Unsupported schema version" in str(exc_info.value)

    def test_requires_exactly_one_source(self) -> None:
        with pytest.raises(ConfigError, match="exactly one"):
            load_config_from_dict(
                {"room": {"preset": "walk_in", "rectangle": {"width": 1000, "depth": 1000}}}
            )
        with pytest.raises(ConfigError, match="exactly one"):
            load_config_from_dict({"room": {"name": "Empty"}})

    def test_joints_need_walls(self) -> None:
        with pytest.raises(ConfigError, match="joints"):
            load_config_from_dict({"room": {"preset": "walk_in", "joints": []}})

    def test_duplicate_wall_numbers(self) -> None:
        doc = _square_doc()
        doc["room"]["walls"][3]["wall_number"] = 2
        with pytest.raises(ConfigError, match="Duplicate wall numbers"):
            load_config_from_dict(doc)

    def test_error_details_have_paths(self) -> None:
        doc = _square_doc()
        doc["room"]["walls"][2]["length"] = -5
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(doc)
        paths = [d["path"] for d in exc_info.value.details]
        assert "room.walls[2].length" in paths

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ConfigError):
            load_config_from_dict({"room": {"preset": "walk_in", "colour": "red"}})

    def test_bad_joint_corner(self) -> None:
        doc = _square_doc(joints=[{"wall1": 1, "wall2": 2, "wall1_corner": 3}])
        with pytest.raises(ConfigError):
            load_config_from_dict(doc)

    def test_product_wall_reference_kept_verbatim(self) -> None:
        doc = _square_doc(products=[{"width": 600, "depth": 500, "height": 800, "wall": "9_1"}])
        config = load_config_from_dict(doc)
        assert config.room.products[0].wall == "9_1"


class TestLoadConfig:
    """Tests for load_config and save_config."""

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_json_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"room": {\n  "preset": }')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 2

    def test_load_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "room.json"
        path.write_text(json.dumps(_square_doc()))
        config = load_config(path)
        assert len(config.room.walls) == 4
        assert config.room.joints is None

    def test_save_then_load(self, tmp_path: Path) -> None:
        path = tmp_path / "saved.json"
        room = create_rectangular_room(3000.0, 2000.0)
        save_config(room_to_config(room, use_inches=True), path)

        config = load_config(path)
        assert config.display.use_inches is True
        assert config_to_room(config).walls == room.walls

    def test_save_to_missing_directory(self, tmp_path: Path) -> None:
        room = create_rectangular_room(3000.0, 2000.0)
        with pytest.raises(ConfigError) as exc_info:
            save_config(room_to_config(room), tmp_path / "nope" / "room.json")
        assert exc_info.value.error_type == "file_write_error"


class TestConfigToRoom:
    """Tests for config_to_room and room_to_config."""

    def test_explicit_walls_get_mitered_joints(self) -> None:
        room = config_to_room(load_config_from_dict(_square_doc()))
        assert [(j.wall1, j.wall2) for j in room.joints] == [(1, 2), (2, 3), (3, 4), (4, 1)]
        assert all(j.miter_back for j in room.joints)
        assert room.walls[1].thickness == 100.0

    def test_explicit_joints_used(self) -> None:
        joints = [
            {"wall1": 1, "wall2": 2, "miter_back": False},
            {"wall1": 2, "wall2": 3},
            {"wall1": 3, "wall2": 4},
            {"wall1": 4, "wall2": 1},
        ]
        room = config_to_room(load_config_from_dict(_square_doc(joints=joints)))
        assert [j.miter_back for j in room.joints] == [False, True, True, True]

    def test_rectangle(self) -> None:
        config = load_config_from_dict(
            {"room": {"name": "Den", "rectangle": {"width": 3600, "depth": 2400}}}
        )
        room = config_to_room(config)
        assert room.name == "Den"
        assert room.walls[1].length == 3600.0

    def test_preset_keeps_fixtures_and_adds_products(self) -> None:
        config = load_config_from_dict(
            {
                "room": {
                    "preset": "walk_in",
                    "products": [{"width": 600, "depth": 500, "height": 800, "wall": "1_1"}],
                    "fixtures": [
                        {"kind": "window", "wall": 2, "x": 500, "width": 900, "height": 1200, "elev": 900}
                    ],
                }
            }
        )
        room = config_to_room(config)
        assert room.name == "Walk-In"
        assert [f.kind for f in room.fixtures] == [FixtureKind.OPENING, FixtureKind.WINDOW]
        assert room.products[0].wall == "1_1"

    def test_product_rotation(self) -> None:
        doc = _square_doc(
            products=[
                {
                    "width": 600,
                    "depth": 500,
                    "height": 800,
                    "rotation": {"a1": 90, "r1": "Z", "r2": "X", "r3": "Y"},
                    "attributes": {"finish": "oak"},
                }
            ]
        )
        product = config_to_room(load_config_from_dict(doc)).products[0]
        assert product.rotation.a1 == 90.0
        assert product.rotation.r1 is Axis.Z
        assert product.attributes == {"finish": "oak"}

    def test_room_to_config_round_trip_keeps_products(self) -> None:
        base = create_rectangular_room(3000.0, 2000.0)
        product = Product(600.0, 500.0, 800.0, x=120.0, wall="2_1", unique_id="p1", name="Base")
        room = Room(name=base.name, walls=base.walls, joints=base.joints, products=[product])

        config = room_to_config(room)
        assert config.room.rectangle is None
        assert config.room.preset is None

        restored = config_to_room(config)
        assert restored.products == [product]
        assert restored.joints == room.joints
