import logging
from dataclasses import replace

import pytest

from sprite_position import DEFAULT_CONFIG, Axis, AccessorConfig, Scene, is_not_a_position
from sprite_position.accessors import get_position, getposxy, set_position, setposxy
from tests.test_utils import BACKEND_CONFIGS, make_sprite_scene


@pytest.mark.parametrize("config", BACKEND_CONFIGS)
@pytest.mark.parametrize("axis", list(Axis))
def test_reads_are_stable(config: AccessorConfig, axis: Axis) -> None:
    _, sprite = make_sprite_scene(left=10, top=40, config=config)
    first = get_position(sprite, axis)
    assert get_position(sprite, axis) == first
    assert first == {Axis.HORIZONTAL: 10, Axis.VERTICAL: 40}[axis]


@pytest.mark.parametrize("config", BACKEND_CONFIGS)
@pytest.mark.parametrize("value", [0, 20, -7, 2.5])
def test_set_then_get(config: AccessorConfig, value: float) -> None:
    scene, sprite = make_sprite_scene(left=10, config=config)
    assert set_position(sprite, Axis.HORIZONTAL, value) == value
    assert get_position(sprite, Axis.HORIZONTAL) == value
    if value != 10:
        assert scene.read_property(sprite.id, "left") == f"{value}px"


def test_reads_come_from_cache_until_refresh() -> None:
    scene, sprite = make_sprite_scene(left=10)
    assert sprite.getx() == 10
    scene.write_property(sprite.id, "left", "55px")
    assert sprite.getx() == 10
    assert sprite.getx(force_refresh=True) == 55
    assert sprite.getx() == 55


def test_refresh_does_not_touch_previous() -> None:
    scene, sprite = make_sprite_scene(left=10)
    sprite.setx(20)
    scene.write_property(sprite.id, "left", "55px")
    sprite.getx(force_refresh=True)
    assert sprite.get_previous_x() == 10


def test_equal_write_is_a_no_op() -> None:
    scene, sprite = make_sprite_scene(left=10)
    sprite.setx(20)
    # An outside write the cache does not know about
    scene.write_property(sprite.id, "left", "99px")

    assert sprite.setx(20) == 20
    assert scene.read_property(sprite.id, "left") == "99px"
    assert sprite.get_previous_x() == 10


def test_repeated_write_keeps_previous() -> None:
    _, sprite = make_sprite_scene(top=40)
    sprite.sety(41)
    sprite.sety(41)
    assert sprite.get_previous_y() == 40


def test_unit_from_config() -> None:
    scene = Scene(replace(DEFAULT_CONFIG, unit="pt"))
    sprite = scene.add_sprite(left=3, top=4)
    assert scene.read_property(sprite.id, "left") == "3pt"
    assert sprite.getx() == 3
    sprite.setx(7)
    assert scene.read_property(sprite.id, "left") == "7pt"


def test_unparsable_property_reads_as_not_a_position(
    caplog: pytest.LogCaptureFixture,
) -> None:
    scene, sprite = make_sprite_scene(left="auto")
    with caplog.at_level(logging.WARNING):
        first = sprite.getx()
        second = sprite.getx()
    assert is_not_a_position(first)
    assert is_not_a_position(second)
    # Cached: parsed (and warned about) once
    assert len([r for r in caplog.records if "auto" in r.getMessage()]) == 1


def test_write_over_not_a_position() -> None:
    scene, sprite = make_sprite_scene(left="auto")
    assert sprite.setx(5) == 5
    assert scene.read_property(sprite.id, "left") == "5px"
    assert is_not_a_position(sprite.get_previous_x())


def test_helper_names_accept_axis_strings() -> None:
    _, sprite = make_sprite_scene(left=10, top=40)
    assert getposxy(sprite, "y") == 40
    assert setposxy(sprite, "x", 12) == 12
    assert sprite.getposxy(Axis.HORIZONTAL) == 12
    assert sprite.setposxy(Axis.VERTICAL, 1) == 1
    with pytest.raises(ValueError):
        getposxy(sprite, "z")  # type: ignore[arg-type]


def test_unknown_sprite_raises_key_error() -> None:
    scene, sprite = make_sprite_scene()
    scene.remove_sprite(sprite.id)
    with pytest.raises(KeyError):
        sprite.getx()
