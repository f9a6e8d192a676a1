"""Accessor configuration.

A single frozen :class:`AccessorConfig` is held by each scene. Derive
variants with :func:`dataclasses.replace`::

    keyed = replace(DEFAULT_CONFIG, cache_backend=CacheBackend.KEYED)
"""

from dataclasses import dataclass, field

from pyrsistent import pmap
from pyrsistent.typing import PMap

from sprite_position.types import Axis, CacheBackend


def _default_axis_properties() -> PMap[Axis, str]:
    return pmap({Axis.HORIZONTAL: "left", Axis.VERTICAL: "top"})


@dataclass(frozen=True)
class AccessorConfig:
    """Settings shared by the accessors of one scene.

    Attributes:
        namespace: Prefix of keyed cache entries (``"<namespace>x"`` etc.).
        unit: Suffix appended to positions written to the property store.
        axis_properties: Property store name for each axis.
        cache_backend: Typed side table (default) or namespaced keyed data.
    """

    namespace: str = "SPRITE_POSITION__"
    unit: str = "px"
    axis_properties: PMap[Axis, str] = field(default_factory=_default_axis_properties)
    cache_backend: CacheBackend = CacheBackend.SIDE_TABLE

    def property_name(self, axis: Axis) -> str:
        return self.axis_properties[Axis(axis)]


DEFAULT_CONFIG = AccessorConfig()
