"""Component dataclasses.

Re-exports the immutable records the accessors work with: the per-sprite
:class:`PositionCache` entry and the request types that describe a write
(:class:`PositionRequest`, :class:`CombinedRequest`, and the
:class:`LiteralValue` / :class:`Deferred` value union).
"""

from .position_cache import PositionCache
from .request import (
    CombinedRequest,
    Deferred,
    LiteralValue,
    PositionRequest,
    RelativeSource,
    ValueSource,
)

__all__ = [
    "CombinedRequest",
    "Deferred",
    "LiteralValue",
    "PositionCache",
    "PositionRequest",
    "RelativeSource",
    "ValueSource",
]
