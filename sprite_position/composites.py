"""Two-axis position updates.

:func:`position` and :func:`move` write both axes of a sprite in one call by
delegating each axis to :func:`sprite_position.accessors.resolve_position`.
They differ only in the default relative flag: ``position`` places
absolutely, ``move`` offsets from the current position.

Which axes get written:

* an axis whose value is truthy (including any deferred value) is written;
* an axis with a falsy but present value (``0``) is written only when the
  request is absolute.

So ``position(s, y=0)`` pins ``s`` to the top edge while ``move(s, 0)`` does
nothing: a zero relative delta is dropped rather than forwarded.

Examples::

    position(ship, {"x": 5, "y": 5, "relative": True})
    move(boat, 2, lambda: vspeed[boat.id])
    move(missile, {"x": -3})
"""

from dataclasses import replace
from typing import TYPE_CHECKING, Any

from sprite_position.accessors import resolve_position
from sprite_position.components.request import (
    as_relative_source,
    as_value_source,
    merge_defaults,
    normalize_combined,
)
from sprite_position.types import Axis

if TYPE_CHECKING:
    from sprite_position.scene import Sprite


def set_combined_position(
    sprite: "Sprite",
    request: Any = None,
    y: Any = None,
    relative: Any = None,
    *,
    default_relative: bool,
) -> "Sprite":
    """Write the axes requested for ``sprite``.

    Args:
        sprite (Sprite): Target sprite.
        request: A mapping / :class:`CombinedRequest` with optional ``x``,
            ``y`` and ``relative`` fields, or a bare ``x`` value (number,
            numeric string or zero-argument callable).
        y: Overrides the request's ``y`` when not ``None``.
        relative: Overrides the request's ``relative`` when not ``None``.
        default_relative (bool): Relative flag used when none is given.

    Returns:
        Sprite: ``sprite``, for chaining.
    """
    req = normalize_combined(request)
    overrides = {}
    if y is not None:
        overrides["y"] = as_value_source(y)
    if relative is not None:
        overrides["relative"] = as_relative_source(relative)
    if overrides:
        req = replace(req, **overrides)
    req = merge_defaults(req, relative=default_relative)

    for axis in Axis:
        value = req.value(axis)
        if value or (not req.relative and value is not None):
            resolve_position(sprite, axis, req)
    return sprite


def position(
    sprite: "Sprite", request: Any = None, y: Any = None, relative: Any = None
) -> "Sprite":
    """Place ``sprite`` absolutely unless ``relative`` says otherwise."""
    return set_combined_position(sprite, request, y, relative, default_relative=False)


def move(
    sprite: "Sprite", request: Any = None, y: Any = None, relative: Any = None
) -> "Sprite":
    """Offset ``sprite`` from its current position unless ``relative`` is False."""
    return set_combined_position(sprite, request, y, relative, default_relative=True)
