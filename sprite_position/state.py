"""Immutable scene snapshot.

A :class:`SceneState` holds every store the accessors touch as persistent
maps keyed by ``SpriteID``. The mutable :class:`sprite_position.scene.Scene`
swaps in a new snapshot on each write, so any snapshot taken earlier remains
a consistent view of the scene at that moment.

Stores:

* ``style``: the property store (``left``/``top`` and any other visual
  properties) as raw values, e.g. ``"12px"``.
* ``data``: generic keyed data attached to sprites; the keyed cache adapter
  keeps namespaced position entries here.
* ``position_cache``: typed side table of :class:`PositionCache` entries.
"""

from dataclasses import dataclass
from typing import Any

from pyrsistent import pmap
from pyrsistent.typing import PMap

from sprite_position.components import PositionCache
from sprite_position.types import PropertyValue, SpriteID


@dataclass(frozen=True)
class SceneState:
    """Snapshot of all sprite stores.

    Attributes:
        style (PMap[SpriteID, PMap[str, PropertyValue]]): Visual properties per sprite.
        data (PMap[SpriteID, PMap[str, Any]]): Keyed attached data per sprite.
        position_cache (PMap[SpriteID, PositionCache]): Typed cache entries.
    """

    style: PMap[SpriteID, PMap[str, PropertyValue]] = pmap()
    data: PMap[SpriteID, PMap[str, Any]] = pmap()
    position_cache: PMap[SpriteID, PositionCache] = pmap()

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse view of the non-empty stores, for debugging."""
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if len(value) == 0:
                continue
            description = description.set(field, value)
        return description
