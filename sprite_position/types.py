"""Common type aliases and enumerations.

``Axis`` is the central key used by every accessor: its value doubles as the
field name in structured requests (``{"x": ...}``) and as the suffix of the
cache keys.
"""

from enum import StrEnum
from typing import Callable, Union

SpriteID = int

PositionValue = Union[int, float]
"""A pixel offset. ``float`` only appears for fractional or NaN positions."""

PropertyValue = Union[str, int, float]
"""Raw value held by the property store (usually ``"<n>px"``)."""

ValueFn = Callable[[], PositionValue]
RelativeFn = Callable[[], bool]


class Axis(StrEnum):
    """Placement axes. Values match the request field names."""

    HORIZONTAL = "x"
    VERTICAL = "y"


class CacheBackend(StrEnum):
    """Where position cache entries are persisted."""

    SIDE_TABLE = "side_table"
    KEYED = "keyed"
