"""Position cache stores.

Accessors read and write whole :class:`PositionCache` entries through the
:class:`PositionCacheStore` protocol. Two implementations are provided:

* :class:`SideTableCache` keeps typed entries in ``SceneState.position_cache``.
* :class:`KeyedCacheAdapter` spreads an entry over namespaced keys of a
  generic per-sprite keyed data store (``"<ns>x"``, ``"<ns>y"``,
  ``"<ns>prevx"``, ``"<ns>prevy"``), for scenes where other code expects to
  find positions there.

A missing entry is never an error; it reads back as ``PositionCache()`` with
every field ``None``.
"""

from dataclasses import replace
from typing import TYPE_CHECKING, Any, Optional, Protocol

from sprite_position.components import PositionCache
from sprite_position.types import Axis, SpriteID

if TYPE_CHECKING:
    from sprite_position.scene import Scene


class PositionCacheStore(Protocol):
    def read_entry(self, sprite_id: SpriteID) -> PositionCache: ...

    def write_entry(self, sprite_id: SpriteID, entry: PositionCache) -> None: ...


class KeyedDataStore(Protocol):
    def read_data(self, sprite_id: SpriteID, key: str) -> Optional[Any]: ...

    def write_data(self, sprite_id: SpriteID, key: str, value: Any) -> None: ...


class SideTableCache:
    """Typed cache entries stored in the scene snapshot."""

    def __init__(self, scene: "Scene") -> None:
        self.scene = scene

    def read_entry(self, sprite_id: SpriteID) -> PositionCache:
        return self.scene.state.position_cache.get(sprite_id, PositionCache())

    def write_entry(self, sprite_id: SpriteID, entry: PositionCache) -> None:
        state = self.scene.state
        self.scene.commit(
            replace(state, position_cache=state.position_cache.set(sprite_id, entry))
        )


def cache_key(namespace: str, axis: Axis, previous: bool = False) -> str:
    """Build a namespaced key, e.g. ``cache_key("NS__", Axis.VERTICAL, True)``
    -> ``"NS__prevy"``."""
    return f"{namespace}{'prev' if previous else ''}{Axis(axis).value}"


class KeyedCacheAdapter:
    """Cache entries spread over namespaced keys of a keyed data store."""

    def __init__(self, store: KeyedDataStore, namespace: str) -> None:
        self.store = store
        self.namespace = namespace

    def read_entry(self, sprite_id: SpriteID) -> PositionCache:
        entry = PositionCache()
        for axis in Axis:
            current = self.store.read_data(sprite_id, cache_key(self.namespace, axis))
            if current is not None:
                entry = entry.with_current(axis, current)
            previous = self.store.read_data(
                sprite_id, cache_key(self.namespace, axis, previous=True)
            )
            if previous is not None:
                entry = entry.with_previous(axis, previous)
        return entry

    def write_entry(self, sprite_id: SpriteID, entry: PositionCache) -> None:
        for axis in Axis:
            current = entry.current(axis)
            if current is not None:
                self.store.write_data(
                    sprite_id, cache_key(self.namespace, axis), current
                )
            previous = entry.previous(axis)
            if previous is not None:
                self.store.write_data(
                    sprite_id, cache_key(self.namespace, axis, previous=True), previous
                )
