"""Scene, sprite handles and selections.

A :class:`Scene` owns the stores the accessors depend on:

* the property store (``read_property`` / ``write_property``), holding each
  sprite's visual properties such as ``left`` and ``top``;
* a generic keyed data store (``read_data`` / ``write_data``);
* the position cache (``scene.cache``), chosen by
  ``AccessorConfig.cache_backend``.

All stores live in an immutable :class:`SceneState`; every write commits a
new snapshot.

A :class:`Sprite` is a lightweight handle (scene + id) with method versions
of every accessor, so calls chain::

    scene = Scene()
    ship = scene.add_sprite(left=10, top=10)
    ship.move(5, -2).position(y=0)

A :class:`Selection` applies accessors to several sprites at once.
"""

import itertools
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterator, Optional, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from sprite_position import accessors, composites
from sprite_position.cache import KeyedCacheAdapter, PositionCacheStore, SideTableCache
from sprite_position.config import DEFAULT_CONFIG, AccessorConfig
from sprite_position.state import SceneState
from sprite_position.types import (
    Axis,
    CacheBackend,
    PositionValue,
    PropertyValue,
    SpriteID,
)
from sprite_position.utils.css import format_position


class Scene:
    """Mutable container around a :class:`SceneState` snapshot."""

    def __init__(self, config: AccessorConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.state = SceneState()
        self._sprite_ids = itertools.count()
        self.cache: PositionCacheStore = self._make_cache(config)

    def _make_cache(self, config: AccessorConfig) -> PositionCacheStore:
        backend = config.cache_backend
        if backend == CacheBackend.SIDE_TABLE:
            return SideTableCache(self)
        if backend == CacheBackend.KEYED:
            return KeyedCacheAdapter(self, config.namespace)
        raise ValueError(f"Unknown cache backend: {backend!r}")

    def commit(self, state: SceneState) -> None:
        self.state = state

    def _next_sprite_id(self) -> SpriteID:
        return next(sid for sid in self._sprite_ids if sid not in self.state.style)

    # Sprites

    def add_sprite(
        self,
        left: PropertyValue = 0,
        top: PropertyValue = 0,
        sprite_id: Optional[SpriteID] = None,
        **style: PropertyValue,
    ) -> "Sprite":
        """Register a sprite with an initial placement.

        Numeric ``left``/``top`` are stored as ``"<n>px"``; strings are stored
        verbatim (``"auto"`` is allowed and reads back as ``NOT_A_POSITION``).
        Without ``sprite_id`` the next id not yet used in this scene is taken.

        Raises:
            ValueError: If ``sprite_id`` already belongs to a sprite of the scene.
        """
        if sprite_id is None:
            sprite_id = self._next_sprite_id()
        elif sprite_id in self.state.style:
            raise ValueError(f"Sprite {sprite_id} is already in the scene")
        props = {
            self.config.property_name(Axis.HORIZONTAL): _as_length(left, self.config),
            self.config.property_name(Axis.VERTICAL): _as_length(top, self.config),
        }
        props.update(style)
        state = self.state
        # Keyed data or cache entries written under a free id belong to no sprite
        self.commit(
            replace(
                state,
                style=state.style.set(sprite_id, pmap(props)),
                data=state.data.discard(sprite_id),
                position_cache=state.position_cache.discard(sprite_id),
            )
        )
        return Sprite(self, sprite_id)

    def sprite(self, sprite_id: SpriteID) -> "Sprite":
        """Return the handle of an existing sprite.

        Raises:
            KeyError: If the sprite is not in the scene.
        """
        if sprite_id not in self.state.style:
            raise KeyError(f"Sprite {sprite_id} is not in the scene")
        return Sprite(self, sprite_id)

    def remove_sprite(self, sprite_id: SpriteID) -> None:
        """Drop the sprite together with its attached data and cache entry."""
        state = self.state
        self.commit(
            replace(
                state,
                style=state.style.discard(sprite_id),
                data=state.data.discard(sprite_id),
                position_cache=state.position_cache.discard(sprite_id),
            )
        )

    def select(self, *sprite_ids: SpriteID) -> "Selection":
        """Select the given sprites, or every sprite when called without ids."""
        ids = sprite_ids or tuple(self.state.style.keys())
        return Selection(tuple(self.sprite(sid) for sid in ids))

    # Property store

    def read_property(self, sprite_id: SpriteID, name: str) -> PropertyValue:
        """Return a raw visual property (``""`` when unset)."""
        return self._style_of(sprite_id).get(name, "")

    def write_property(self, sprite_id: SpriteID, name: str, value: PropertyValue) -> None:
        style = self._style_of(sprite_id)
        self.commit(
            replace(
                self.state, style=self.state.style.set(sprite_id, style.set(name, value))
            )
        )

    def _style_of(self, sprite_id: SpriteID) -> PMap[str, PropertyValue]:
        try:
            return self.state.style[sprite_id]
        except KeyError:
            raise KeyError(f"Sprite {sprite_id} is not in the scene") from None

    # Keyed data store

    def read_data(self, sprite_id: SpriteID, key: str) -> Optional[Any]:
        return self.state.data.get(sprite_id, pmap()).get(key)

    def write_data(self, sprite_id: SpriteID, key: str, value: Any) -> None:
        data = self.state.data.get(sprite_id, pmap())
        self.commit(
            replace(self.state, data=self.state.data.set(sprite_id, data.set(key, value)))
        )


def _as_length(value: PropertyValue, config: AccessorConfig) -> PropertyValue:
    if isinstance(value, str):
        return value
    return format_position(value, config.unit)


@dataclass(frozen=True)
class Sprite:
    """Handle to one sprite of a scene.

    Attributes:
        scene: Owning scene.
        id: Sprite id within the scene.
    """

    scene: Scene
    id: SpriteID

    def x(self, request: Any = None, relative: Any = None) -> PositionValue:
        return accessors.x(self, request, relative)

    def y(self, request: Any = None, relative: Any = None) -> PositionValue:
        return accessors.y(self, request, relative)

    def getx(self, force_refresh: bool = False) -> PositionValue:
        return accessors.getx(self, force_refresh)

    def gety(self, force_refresh: bool = False) -> PositionValue:
        return accessors.gety(self, force_refresh)

    def setx(self, value: PositionValue) -> PositionValue:
        return accessors.setx(self, value)

    def sety(self, value: PositionValue) -> PositionValue:
        return accessors.sety(self, value)

    def get_previous_x(self) -> PositionValue:
        return accessors.get_previous_x(self)

    def get_previous_y(self) -> PositionValue:
        return accessors.get_previous_y(self)

    def getposxy(self, axis: Axis, force_refresh: bool = False) -> PositionValue:
        return accessors.getposxy(self, axis, force_refresh)

    def setposxy(self, axis: Axis, value: PositionValue) -> PositionValue:
        return accessors.setposxy(self, axis, value)

    def posxy(
        self, axis: Axis, request: Any = None, relative: Any = None
    ) -> PositionValue:
        return accessors.posxy(self, axis, request, relative)

    def position(
        self, request: Any = None, y: Any = None, relative: Any = None
    ) -> "Sprite":
        return composites.position(self, request, y, relative)

    def move(
        self, request: Any = None, y: Any = None, relative: Any = None
    ) -> "Sprite":
        return composites.move(self, request, y, relative)


@dataclass(frozen=True)
class Selection:
    """Ordered group of sprites; composite writes are applied to each."""

    sprites: Tuple[Sprite, ...] = ()

    def __iter__(self) -> Iterator[Sprite]:
        return iter(self.sprites)

    def __len__(self) -> int:
        return len(self.sprites)

    def each(self, fn: Callable[[Sprite], Any]) -> "Selection":
        """Call ``fn(sprite)`` for every sprite, in selection order."""
        for sprite in self.sprites:
            fn(sprite)
        return self

    def position(
        self, request: Any = None, y: Any = None, relative: Any = None
    ) -> "Selection":
        return self.each(lambda sprite: sprite.position(request, y, relative))

    def move(
        self, request: Any = None, y: Any = None, relative: Any = None
    ) -> "Selection":
        return self.each(lambda sprite: sprite.move(request, y, relative))
