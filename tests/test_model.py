import pytest

from animscript import (
    AnimationObject,
    AtomicCommand,
    CircleShape,
    DefineCommand,
    Direction,
    EraseCommand,
    LineShape,
    LoopCommand,
    PlaceCommand,
    ShapeType,
    ShiftCommand,
    Vector2,
)


def test_vector_arithmetic():
    a = Vector2(1, 2)
    b = Vector2(3, -1)
    assert a + b == Vector2(4, 1)
    assert b - a == Vector2(2, -3)
    assert a * 2 == 2 * a == Vector2(2, 4)


def test_direction_units_are_screen_space():
    assert Direction("up").unit == Vector2(0, -1)
    assert Direction("down").unit == Vector2(0, 1)
    assert Direction.LEFT.unit == Vector2(-1, 0)
    assert Direction.RIGHT.unit == Vector2(1, 0)


def test_shape_types():
    assert LineShape(Vector2(), Vector2(1, 1)).type is ShapeType.LINE
    assert CircleShape(Vector2(), 2.0).type is ShapeType.CIRCLE


def test_object_copy_does_not_share_shape_list():
    obj = AnimationObject(shapes=[CircleShape(Vector2(), 1.0)], position=Vector2(3, 3))
    dup = obj.copy()
    dup.add_shape(LineShape(Vector2(), Vector2(1, 0)))
    dup.position = Vector2(0, 0)
    assert len(obj.shapes) == 1
    assert obj.position == Vector2(3, 3)


def test_only_loop_is_structural():
    atomic = [
        DefineCommand("a", AnimationObject()),
        PlaceCommand("a", Vector2()),
        ShiftCommand("a", Direction.UP),
        EraseCommand("a"),
    ]
    assert all(isinstance(c, AtomicCommand) for c in atomic)
    loop = LoopCommand(2, tuple(atomic))
    assert not isinstance(loop, AtomicCommand)
    assert not hasattr(loop, "execute")


def test_commands_are_immutable_values():
    cmd = PlaceCommand("a", Vector2(1, 1))
    with pytest.raises(AttributeError):
        cmd.name = "b"
