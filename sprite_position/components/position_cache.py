"""Position cache component.

One immutable :class:`PositionCache` per sprite holds the last known position
and the position before the last change, for both axes. ``None`` fields have
not been initialized yet.
"""

from dataclasses import dataclass, replace
from typing import Optional

from sprite_position.types import Axis, PositionValue


@dataclass(frozen=True)
class PositionCache:
    """Cached placement of a sprite.

    Attributes:
        x: Last known horizontal position.
        y: Last known vertical position.
        prev_x: Horizontal position before its last change.
        prev_y: Vertical position before its last change.
    """

    x: Optional[PositionValue] = None
    y: Optional[PositionValue] = None
    prev_x: Optional[PositionValue] = None
    prev_y: Optional[PositionValue] = None

    def current(self, axis: Axis) -> Optional[PositionValue]:
        return getattr(self, Axis(axis).value)

    def previous(self, axis: Axis) -> Optional[PositionValue]:
        return getattr(self, _previous_field(axis))

    def with_current(self, axis: Axis, value: PositionValue) -> "PositionCache":
        return replace(self, **{Axis(axis).value: value})

    def with_previous(self, axis: Axis, value: PositionValue) -> "PositionCache":
        return replace(self, **{_previous_field(axis): value})


def _previous_field(axis: Axis) -> str:
    return f"prev_{Axis(axis).value}"
