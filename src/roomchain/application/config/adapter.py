"""Conversion between room documents and domain entities."""

from roomchain.application.config.schema import (
    CURRENT_VERSION,
    DisplayConfig,
    FixtureConfig,
    JointConfig,
    ProductConfig,
    RoomConfig,
    RoomConfiguration,
    RotationConfig,
    WallConfig,
)
from roomchain.domain.entities import Fixture, Product, Room, Wall, WallJoint
from roomchain.domain.services.room_factory import create_preset_room, create_rectangular_room
from roomchain.domain.services.wall_editor import rebuild_joints
from roomchain.domain.value_objects import RotationSpec


def _to_product(product: ProductConfig) -> Product:
    rotation = product.rotation
    return Product(
        width=product.width,
        depth=product.depth,
        height=product.height,
        x=product.x,
        elev=product.elev,
        rot=product.rot,
        wall=product.wall,
        unique_id=product.unique_id,
        name=product.name,
        rotation=RotationSpec(
            rotation.a1, rotation.a2, rotation.a3, rotation.r1, rotation.r2, rotation.r3
        ),
        attributes=dict(product.attributes),
    )


def _to_fixture(fixture: FixtureConfig) -> Fixture:
    return Fixture(
        kind=fixture.kind,
        wall=fixture.wall,
        x=fixture.x,
        width=fixture.width,
        height=fixture.height,
        elev=fixture.elev,
        depth=fixture.depth,
        name=fixture.name,
    )


def config_to_room(config: RoomConfiguration) -> Room:
    """Build the Room entity described by a validated document.

    Rectangle and preset rooms come from the room factory; explicit wall
    lists are taken verbatim, with the joint cycle rebuilt when the document
    does not list joints. Products and fixtures from the document are added
    on top of whatever the preset provides.
    """
    room_config: RoomConfig = config.room
    products = [_to_product(p) for p in room_config.products]
    fixtures = [_to_fixture(f) for f in room_config.fixtures]

    if room_config.rectangle is not None:
        rect = room_config.rectangle
        base = create_rectangular_room(
            rect.width, rect.depth, rect.height, rect.thickness, name=room_config.name
        )
    elif room_config.preset is not None:
        base = create_preset_room(room_config.preset)
    else:
        walls = [
            Wall(
                wall_number=w.wall_number,
                pos_x=w.x,
                pos_y=w.y,
                angle=w.angle,
                length=w.length,
                height=w.height,
                thickness=w.thickness,
                follow_angle=w.follow_angle,
                id_tag=w.id_tag,
                invisible=w.invisible,
            )
            for w in room_config.walls
        ]
        if room_config.joints is None:
            joints = rebuild_joints(walls)
        else:
            joints = [WallJoint(**j.model_dump()) for j in room_config.joints]
        return Room(
            name=room_config.name,
            walls=walls,
            joints=joints,
            products=products,
            fixtures=fixtures,
        )

    return Room(
        name=base.name,
        walls=base.walls,
        joints=base.joints,
        products=[*base.products, *products],
        fixtures=[*base.fixtures, *fixtures],
    )


def room_to_config(room: Room, use_inches: bool = False) -> RoomConfiguration:
    """Describe a Room entity as an explicit-wall document."""
    walls = [
        WallConfig(
            wall_number=w.wall_number,
            x=w.pos_x,
            y=w.pos_y,
            angle=w.angle,
            length=w.length,
            height=w.height,
            thickness=w.thickness,
            follow_angle=w.follow_angle,
            id_tag=w.id_tag,
            invisible=w.invisible,
        )
        for w in room.walls
    ]
    joints = [
        JointConfig(
            wall1=j.wall1,
            wall2=j.wall2,
            wall1_corner=j.wall1_corner,
            wall2_corner=j.wall2_corner,
            miter_back=j.miter_back,
            is_interior=j.is_interior,
        )
        for j in room.joints
    ]
    products = [
        ProductConfig(
            unique_id=p.unique_id,
            name=p.name,
            width=p.width,
            depth=p.depth,
            height=p.height,
            x=p.x,
            elev=p.elev,
            rot=p.rot,
            wall=p.wall,
            rotation=RotationConfig(
                a1=p.rotation.a1,
                a2=p.rotation.a2,
                a3=p.rotation.a3,
                r1=p.rotation.r1,
                r2=p.rotation.r2,
                r3=p.rotation.r3,
            ),
            attributes=dict(p.attributes),
        )
        for p in room.products
    ]
    fixtures = [
        FixtureConfig(
            kind=f.kind,
            wall=f.wall,
            x=f.x,
            width=f.width,
            height=f.height,
            elev=f.elev,
            depth=f.depth,
            name=f.name,
        )
        for f in room.fixtures
    ]
    return RoomConfiguration(
        schema_version=CURRENT_VERSION,
        room=RoomConfig(
            name=room.name,
            walls=walls,
            joints=joints,
            products=products,
            fixtures=fixtures,
        ),
        display=DisplayConfig(use_inches=use_inches),
    )
