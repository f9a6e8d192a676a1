"""Position accessors.

Read and write a sprite's placement through a per-sprite position cache.

Layers, lowest first:

* :func:`get_position` / :func:`set_position` (``getposxy`` / ``setposxy``):
  read-through and write-if-different access to one axis.
* :func:`resolve_position` (``posxy``): the unified protocol. Without a
  request it reads; otherwise it normalizes the request, resolves deferred
  fields, applies relative offsets and writes.
* :func:`get_previous_position`: the position before the last change.
* Axis facades (``x``, ``y``, ``getx``, ...) fixing the ``axis`` argument.

Examples:
    >>> scene = Scene()
    >>> ship = scene.add_sprite(left=10, top=40)
    >>> x(ship)
    10
    >>> x(ship, {"x": 5, "relative": True})
    15
    >>> y(ship, lambda: 12)
    12
"""

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from sprite_position.components.request import (
    as_relative_source,
    merge_defaults,
    normalize_request,
    resolve_relative,
    resolve_value,
)
from sprite_position.types import Axis, PositionValue
from sprite_position.utils.css import format_position, parse_position

if TYPE_CHECKING:
    from sprite_position.scene import Sprite

logger = logging.getLogger(__name__)


def get_position(
    sprite: "Sprite", axis: Axis, force_refresh: bool = False
) -> PositionValue:
    """Return the cached position of ``sprite`` along ``axis``.

    On a cache miss, or when ``force_refresh`` is set, the position is read
    from the property store, parsed, and stored as the new cache entry.

    Args:
        sprite (Sprite): Target sprite.
        axis (Axis): ``Axis.HORIZONTAL`` (``left``) or ``Axis.VERTICAL`` (``top``).
        force_refresh (bool): Bypass the cache and re-read the property store.

    Returns:
        PositionValue: The position; ``NOT_A_POSITION`` if the stored property
            cannot be parsed.
    """
    scene = sprite.scene
    entry = scene.cache.read_entry(sprite.id)
    pos = entry.current(axis)
    if pos is None or force_refresh:
        raw = scene.read_property(sprite.id, scene.config.property_name(axis))
        pos = parse_position(raw)
        scene.cache.write_entry(sprite.id, entry.with_current(axis, pos))
        logger.debug(
            "Cached %s=%r for sprite %s (refresh=%s)", axis, pos, sprite.id, force_refresh
        )
    return pos


def set_position(sprite: "Sprite", axis: Axis, value: PositionValue) -> PositionValue:
    """Move ``sprite`` to ``value`` along ``axis`` if it is not already there.

    On a change the old position becomes the previous position, the cache is
    updated and ``"<value>px"`` is written to the property store. Writing the
    current value touches nothing.

    Returns:
        PositionValue: ``value``, whether or not it was written.
    """
    scene = sprite.scene
    current = get_position(sprite, axis)
    if value != current:
        entry = scene.cache.read_entry(sprite.id)
        scene.cache.write_entry(
            sprite.id, entry.with_previous(axis, current).with_current(axis, value)
        )
        scene.write_property(
            sprite.id,
            scene.config.property_name(axis),
            format_position(value, scene.config.unit),
        )
        logger.debug("Sprite %s %s: %r -> %r", sprite.id, axis, current, value)
    return value


def resolve_position(
    sprite: "Sprite", axis: Axis, request: Any = None, relative: Any = None
) -> PositionValue:
    """Read or write the position of ``sprite`` along ``axis``.

    Args:
        sprite (Sprite): Target sprite.
        axis (Axis): Axis to read or write.
        request: ``None`` to read. Otherwise one of:

            * a number or numeric string: the target (or delta);
            * a zero-argument callable returning the target;
            * a mapping with the axis name (``"x"``/``"y"``) and optional
              ``"relative"`` keys, whose values may also be callables;
            * a :class:`PositionRequest` or :class:`CombinedRequest`.
        relative: Overrides any relative flag in ``request``. A bool or a
            zero-argument callable returning one. Ignored when reading.

    Returns:
        PositionValue: The current position when reading, else the written one.
    """
    current = get_position(sprite, axis)
    if request is None:
        return current

    req = normalize_request(request, axis)
    if relative is not None:
        req = replace(req, relative=as_relative_source(relative))
    req = merge_defaults(req, value=current, relative=False)

    value = resolve_value(req.value)
    if resolve_relative(req.relative):
        value += current

    return set_position(sprite, axis, value)


def get_previous_position(sprite: "Sprite", axis: Axis) -> PositionValue:
    """Return the position of ``sprite`` before its last change along ``axis``.

    If it never changed, the current position is recorded as the previous one
    and returned.
    """
    scene = sprite.scene
    prev = scene.cache.read_entry(sprite.id).previous(axis)
    if prev is None:
        prev = get_position(sprite, axis)
        entry = scene.cache.read_entry(sprite.id)
        scene.cache.write_entry(sprite.id, entry.with_previous(axis, prev))
    return prev


# Helper-level names


def getposxy(
    sprite: "Sprite", axis: Axis, force_refresh: bool = False
) -> PositionValue:
    return get_position(sprite, Axis(axis), force_refresh)


def setposxy(sprite: "Sprite", axis: Axis, value: PositionValue) -> PositionValue:
    return set_position(sprite, Axis(axis), value)


def posxy(
    sprite: "Sprite", axis: Axis, request: Any = None, relative: Any = None
) -> PositionValue:
    return resolve_position(sprite, Axis(axis), request, relative)


# Axis facades


def x(sprite: "Sprite", request: Any = None, relative: Any = None) -> PositionValue:
    """Read or write the horizontal position. See :func:`resolve_position`."""
    return resolve_position(sprite, Axis.HORIZONTAL, request, relative)


def y(sprite: "Sprite", request: Any = None, relative: Any = None) -> PositionValue:
    """Read or write the vertical position. See :func:`resolve_position`."""
    return resolve_position(sprite, Axis.VERTICAL, request, relative)


def getx(sprite: "Sprite", force_refresh: bool = False) -> PositionValue:
    return get_position(sprite, Axis.HORIZONTAL, force_refresh)


def gety(sprite: "Sprite", force_refresh: bool = False) -> PositionValue:
    return get_position(sprite, Axis.VERTICAL, force_refresh)


def setx(sprite: "Sprite", value: PositionValue) -> PositionValue:
    return set_position(sprite, Axis.HORIZONTAL, value)


def sety(sprite: "Sprite", value: PositionValue) -> PositionValue:
    return set_position(sprite, Axis.VERTICAL, value)


def get_previous_x(sprite: "Sprite") -> PositionValue:
    return get_previous_position(sprite, Axis.HORIZONTAL)


def get_previous_y(sprite: "Sprite") -> PositionValue:
    return get_previous_position(sprite, Axis.VERTICAL)

