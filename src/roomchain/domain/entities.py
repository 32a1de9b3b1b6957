"""Domain entities for wall-chain rooms.

Entities are frozen: the kernel never edits them in place. Editing
functions build replacements with ``dataclasses.replace`` and return new
lists, leaving every field they do not re-derive untouched so that file
writers can reproduce it verbatim.
"""

from dataclasses import dataclass, field

from .value_objects import FixtureKind, Point2D, RotationSpec

# Corner flags on a WallJoint.
CORNER_START = 0
CORNER_END = 1

UNPLACED_WALL_REF = "0"


@dataclass(frozen=True)
class Wall:
    """A straight wall segment stored by start point, angle and length.

    Attributes:
        wall_number: 1-based identity of the wall within its room.
        pos_x: X coordinate of the wall start in millimetres.
        pos_y: Y coordinate of the wall start in millimetres.
        angle: Direction in degrees from the positive X axis.
        length: Length of the centerline in millimetres.
        height: Wall height in millimetres.
        thickness: Wall thickness in millimetres.
        follow_angle: The top edge slopes to meet a taller neighbour
            instead of staying flat.
        id_tag: Identifier carried through from the source file.
        invisible: Display flag carried through from the source file.
    """

    wall_number: int
    pos_x: float
    pos_y: float
    angle: float
    length: float
    height: float = 2438.4
    thickness: float = 101.6
    follow_angle: bool = False
    id_tag: int | None = None
    invisible: bool = False

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Wall length must be positive")
        if self.thickness < 0:
            raise ValueError("Wall thickness must be non-negative")

    @property
    def start(self) -> Point2D:
        return Point2D(self.pos_x, self.pos_y)


@dataclass(frozen=True)
class WallJoint:
    """Connection between a corner of ``wall1`` and a corner of ``wall2``.

    Corners are 0 for a wall's start and 1 for its end. ``miter_back`` is
    True for a mitered joint and False for a butt joint.
    """

    wall1: int
    wall2: int
    wall1_corner: int = CORNER_END
    wall2_corner: int = CORNER_START
    miter_back: bool = True
    is_interior: bool = False

    def __post_init__(self) -> None:
        corners = {CORNER_START, CORNER_END}
        if self.wall1_corner not in corners or self.wall2_corner not in corners:
            raise ValueError("Joint corners must be 0 (start) or 1 (end)")


@dataclass(frozen=True)
class Product:
    """A cabinet product, optionally attached to a wall.

    ``wall`` is ``"0"`` when the product is not placed, otherwise
    ``"<wall_number>_<section>"``. ``x`` is measured along the wall from the
    inside corner (the trimmed wall start).
    """

    width: float
    depth: float
    height: float
    x: float = 0.0
    elev: float = 0.0
    rot: float = 0.0
    wall: str = UNPLACED_WALL_REF
    unique_id: str = ""
    name: str = ""
    rotation: RotationSpec = field(default_factory=RotationSpec)
    attributes: dict[str, str] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class Fixture:
    """An opening, door or window cut into a wall."""

    kind: FixtureKind
    wall: int
    x: float
    width: float
    height: float
    elev: float = 0.0
    depth: float = 50.8
    name: str = ""

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Fixture dimensions must be positive")


@dataclass(frozen=True)
class Room:
    """A closed loop of walls with the joints, products and fixtures on it.

    ``joints[i]`` connects ``walls[i]``'s end to the start of
    ``walls[(i + 1) % n]``.
    """

    name: str
    walls: list[Wall]
    joints: list[WallJoint] = field(default_factory=list)
    products: list[Product] = field(default_factory=list)
    fixtures: list[Fixture] = field(default_factory=list)

    def wall_by_number(self, wall_number: int) -> Wall | None:
        return next((w for w in self.walls if w.wall_number == wall_number), None)
