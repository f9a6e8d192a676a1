from typing import Any

import pytest

from sprite_position import CombinedRequest
from sprite_position.composites import move, position, set_combined_position
from tests.test_utils import assert_sprite_positions, make_sprite_scene


@pytest.mark.parametrize(
    "args, kwargs, expected",
    [
        ((1, 2), {}, (1, 2)),
        ((5,), {}, (5, 40)),
        (({"y": 0},), {}, (10, 0)),
        (({"x": 0, "y": 0},), {}, (0, 0)),
        (("15",), {}, (15, 40)),
        ((), {"y": 3}, (10, 3)),
        (({"x": 2, "y": 3, "relative": True},), {}, (12, 43)),
        ((2, 3, True), {}, (12, 43)),
        ((CombinedRequest.of(x=1),), {"y": 1}, (1, 1)),
        ((), {}, (10, 40)),
    ],
)
def test_position(args: tuple[Any, ...], kwargs: dict[str, Any], expected: tuple[int, int]) -> None:
    scene, sprite = make_sprite_scene(left=10, top=40)
    assert position(sprite, *args, **kwargs) is sprite
    assert (sprite.getx(), sprite.gety()) == expected


@pytest.mark.parametrize(
    "args, kwargs, expected",
    [
        ((3, 0), {}, (13, 40)),
        (({"x": 2, "y": -1},), {}, (12, 39)),
        (({"x": -3},), {}, (7, 40)),
        ((4,), {"relative": False}, (4, 40)),
        (({"x": 4, "relative": False},), {}, (4, 40)),
        ((), {"y": -5}, (10, 35)),
        ((0, 0), {}, (10, 40)),
    ],
)
def test_move(args: tuple[Any, ...], kwargs: dict[str, Any], expected: tuple[int, int]) -> None:
    _, sprite = make_sprite_scene(left=10, top=40)
    assert move(sprite, *args, **kwargs) is sprite
    assert (sprite.getx(), sprite.gety()) == expected


def test_absolute_zero_is_written() -> None:
    scene, sprite = make_sprite_scene(left=10, top=40)
    position(sprite, 0, 0)
    assert_sprite_positions(scene, {sprite.id: (0, 0)})
    assert sprite.get_previous_x() == 10


def test_relative_zero_is_skipped_per_axis() -> None:
    scene, sprite = make_sprite_scene(left=10, top=40)
    position(sprite, {"x": 0, "y": 5}, relative=True)
    assert (sprite.getx(), sprite.gety()) == (10, 45)
    # x was never touched, so its previous falls back to current
    assert sprite.get_previous_x() == 10


def test_deferred_values_always_count_as_requested() -> None:
    _, sprite = make_sprite_scene(left=10, top=40)
    calls: list[str] = []

    def no_speed() -> int:
        calls.append("x")
        return 0

    move(sprite, no_speed)
    assert calls == ["x"]
    assert sprite.getx() == 10


def test_deferred_y_and_relative() -> None:
    _, sprite = make_sprite_scene(left=10, top=40)
    speeds = {"h": 2, "v": -4}
    position(sprite, lambda: speeds["h"], lambda: speeds["v"], lambda: True)
    assert (sprite.getx(), sprite.gety()) == (12, 36)


def test_caller_mapping_is_not_mutated() -> None:
    _, sprite = make_sprite_scene()
    request = {"x": 1}
    position(sprite, request, 2, True)
    move(sprite, request)
    assert request == {"x": 1}


def test_default_relative_is_required_keyword() -> None:
    _, sprite = make_sprite_scene(left=10)
    with pytest.raises(TypeError):
        set_combined_position(sprite, 1)  # type: ignore[call-arg]
    set_combined_position(sprite, 1, default_relative=True)
    assert sprite.getx() == 11
