"""Pixel length parsing and formatting.

The property store holds CSS-like lengths (``"12px"``, ``"-3px"``, ``"auto"``).
Reads keep the leading integer and drop everything after it; anything without
a leading integer becomes :data:`NOT_A_POSITION`.
"""

import logging
import math
import re
from typing import Final

from sprite_position.types import PositionValue, PropertyValue

logger = logging.getLogger(__name__)

NOT_A_POSITION: Final[float] = math.nan
"""Sentinel for unparsable values. Compares unequal to everything.

Caller supplied literals are parsed the same way, so ``x(sprite, "auto")``
stores this sentinel and writes ``"nanpx"`` to the property store; the next
write of any number always goes through.
"""

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def is_not_a_position(value: object) -> bool:
    return isinstance(value, float) and math.isnan(value)


def parse_position(raw: PropertyValue) -> PositionValue:
    """Parse the leading integer of a property value.

    ``"10px"`` -> ``10``, ``" -4.7em"`` -> ``-4``, ``7.9`` -> ``7``,
    ``"auto"`` -> ``NOT_A_POSITION``.
    """
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if math.isfinite(raw):
            return int(raw)
        return NOT_A_POSITION
    match = _LEADING_INT.match(str(raw))
    if match is None:
        logger.warning("Unparsable position value %r", raw)
        return NOT_A_POSITION
    return int(match.group(1))


def coerce_position(value: object) -> PositionValue:
    """Best-effort coercion of a caller supplied position.

    Numbers pass through unchanged (fractional offsets are kept), booleans
    become ``0``/``1`` and anything else is parsed like a property value.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    return parse_position(str(value))


def format_position(value: PositionValue, unit: str = "px") -> str:
    """Render a position for the property store, e.g. ``12`` -> ``"12px"``."""
    return f"{value}{unit}"
