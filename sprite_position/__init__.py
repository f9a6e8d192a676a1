"""Cached sprite position accessors.

Read or write a sprite's horizontal/vertical placement with one overloaded
call (absolute or relative, literal or deferred value), backed by a per-sprite
cache so repeated reads skip the property store.

Quick start::

    from sprite_position import Scene

    scene = Scene()
    hero = scene.add_sprite(left=10, top=20)
    hero.x()                          # 10
    hero.x({"x": 5, "relative": True})  # 15
    hero.move(-5, 0).get_previous_x()   # 15
"""

from sprite_position.accessors import (
    get_position,
    get_previous_position,
    get_previous_x,
    get_previous_y,
    getposxy,
    getx,
    gety,
    posxy,
    resolve_position,
    set_position,
    setposxy,
    setx,
    sety,
    x,
    y,
)
from sprite_position.cache import KeyedCacheAdapter, SideTableCache, cache_key
from sprite_position.components import (
    CombinedRequest,
    Deferred,
    LiteralValue,
    PositionCache,
    PositionRequest,
)
from sprite_position.composites import move, position, set_combined_position
from sprite_position.config import DEFAULT_CONFIG, AccessorConfig
from sprite_position.scene import Scene, Selection, Sprite
from sprite_position.state import SceneState
from sprite_position.types import Axis, CacheBackend, SpriteID
from sprite_position.utils.css import NOT_A_POSITION, is_not_a_position

__all__ = [
    "AccessorConfig",
    "Axis",
    "CacheBackend",
    "CombinedRequest",
    "DEFAULT_CONFIG",
    "Deferred",
    "KeyedCacheAdapter",
    "LiteralValue",
    "NOT_A_POSITION",
    "PositionCache",
    "PositionRequest",
    "Scene",
    "SceneState",
    "Selection",
    "SideTableCache",
    "Sprite",
    "SpriteID",
    "cache_key",
    "get_position",
    "get_previous_position",
    "get_previous_x",
    "get_previous_y",
    "getposxy",
    "getx",
    "gety",
    "is_not_a_position",
    "move",
    "position",
    "posxy",
    "resolve_position",
    "set_combined_position",
    "set_position",
    "setposxy",
    "setx",
    "sety",
    "x",
    "y",
]
