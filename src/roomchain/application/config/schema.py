"""Room document schema.

Pydantic models describing a room as stored in a JSON document. A room is
given either as an explicit wall list, as a rectangle, or as a named
preset. All lengths are in millimetres and angles in degrees.
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from roomchain.domain.services.room_factory import DEFAULT_HEIGHT, DEFAULT_THICKNESS, RoomPreset
from roomchain.domain.value_objects import Axis, FixtureKind

# Version 1.0: walls, joints, products
# Version 1.1: fixtures, presets, per-product rotation specs
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})
CURRENT_VERSION = "1.1"


class WallConfig(BaseModel):
    """Configuration for a single wall.

    Attributes:
        wall_number: 1-based wall identity
        x: X coordinate of the wall start
        y: Y coordinate of the wall start
        angle: Direction in degrees from the positive X axis
        length: Centerline length
        height: Wall height
        thickness: Wall thickness
        follow_angle: Slope the top edge up to a taller neighbour
        id_tag: Identifier carried through from the source file
        invisible: Display flag carried through from the source file
    """

    model_config = ConfigDict(extra="forbid")

    wall_number: int = Field(..., ge=1, description="1-based wall number")
    x: float = Field(default=0.0, description="Start X")
    y: float = Field(default=0.0, description="Start Y")
    angle: float = Field(default=0.0, description="Direction in degrees")
    length: float = Field(..., gt=0, description="Centerline length")
    height: float = Field(default=DEFAULT_HEIGHT, gt=0, description="Wall height")
    thickness: float = Field(default=DEFAULT_THICKNESS, ge=0, description="Wall thickness")
    follow_angle: bool = False
    id_tag: int | None = None
    invisible: bool = False


class JointConfig(BaseModel):
    """Configuration for a joint between two wall corners."""

    model_config = ConfigDict(extra="forbid")

    wall1: int = Field(..., ge=1)
    wall2: int = Field(..., ge=1)
    wall1_corner: Literal[0, 1] = 1
    wall2_corner: Literal[0, 1] = 0
    miter_back: bool = True
    is_interior: bool = False


class RotationConfig(BaseModel):
    """Extrinsic three-axis rotation applied to a product."""

    model_config = ConfigDict(extra="forbid")

    a1: float = 0.0
    a2: float = 0.0
    a3: float = 0.0
    r1: Axis = Axis.X
    r2: Axis = Axis.Y
    r3: Axis = Axis.Z


class ProductConfig(BaseModel):
    """Configuration for a cabinet product.

    ``wall`` is kept verbatim: ``"0"`` for an unplaced product, otherwise
    ``"<wall_number>_<section>"``. References that cannot be resolved are
    not a validation error; the product is simply not placed.
    """

    model_config = ConfigDict(extra="forbid")

    unique_id: str = ""
    name: str = ""
    width: float = Field(..., gt=0)
    depth: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    x: float = 0.0
    elev: float = 0.0
    rot: float = 0.0
    wall: str = "0"
    rotation: RotationConfig = Field(default_factory=RotationConfig)
    attributes: dict[str, str] = Field(default_factory=dict)


class FixtureConfig(BaseModel):
    """Configuration for an opening, door or window on a wall."""

    model_config = ConfigDict(extra="forbid")

    kind: FixtureKind
    wall: int = Field(..., ge=1)
    x: float = Field(..., ge=0)
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    elev: float = Field(default=0.0, ge=0)
    depth: float = Field(default=50.8, gt=0)
    name: str = ""


class RectangleConfig(BaseModel):
    """Shorthand for a four-wall rectangular room."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, description="Back/front wall length")
    depth: float = Field(..., gt=0, description="Left/right wall length")
    height: float = Field(default=DEFAULT_HEIGHT, gt=0)
    thickness: float = Field(default=DEFAULT_THICKNESS, ge=0)


class RoomConfig(BaseModel):
    """Configuration for a room.

    Exactly one of ``walls``, ``rectangle`` or ``preset`` must describe the
    wall loop. When ``joints`` is omitted the joint cycle is rebuilt from the
    wall order with every corner mitered.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="Room", min_length=1)
    walls: list[WallConfig] = Field(default_factory=list)
    rectangle: RectangleConfig | None = None
    preset: RoomPreset | None = None
    joints: list[JointConfig] | None = None
    products: list[ProductConfig] = Field(default_factory=list)
    fixtures: list[FixtureConfig] = Field(default_factory=list)

    @field_validator("walls")
    @classmethod
    def validate_unique_wall_numbers(cls, v: list[WallConfig]) -> list[WallConfig]:
        """Wall numbers identify walls, so they must not repeat."""
        numbers = [w.wall_number for w in v]
        duplicates = sorted({n for n in numbers if numbers.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate wall numbers: {duplicates}")
        return v

    @model_validator(mode="after")
    def validate_single_source(self) -> "RoomConfig":
        """Require exactly one description of the wall loop."""
        sources = [bool(self.walls), self.rectangle is not None, self.preset is not None]
        if sum(sources) != 1:
            raise ValueError("Specify exactly one of 'walls', 'rectangle' or 'preset'")
        if self.joints is not None and not self.walls:
            raise ValueError("'joints' can only be given together with 'walls'")
        return self


class DisplayConfig(BaseModel):
    """Report display preferences."""

    model_config = ConfigDict(extra="forbid")

    use_inches: bool = False


class RoomConfiguration(BaseModel):
    """Root of a room document."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default=CURRENT_VERSION)
    room: RoomConfig
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Validate that the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
