"""Position update requests.

Accessors accept loosely shaped input (a number, a string, a zero-argument
callable, a mapping such as ``{"x": 5, "relative": True}``). This module turns
that input into explicit request dataclasses once, at the boundary:

* :class:`LiteralValue` / :class:`Deferred` form the tagged union for values.
  ``Deferred`` wraps a zero-argument callable evaluated only when the write is
  resolved.
* :class:`PositionRequest` describes a single-axis write.
* :class:`CombinedRequest` describes a two-axis write (``position`` / ``move``).

``None`` in any request field means "not supplied"; :func:`merge_defaults`
is the only place where defaults are filled in.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from sprite_position.types import Axis, PositionValue
from sprite_position.utils.css import coerce_position

T = TypeVar("T")
R = TypeVar("R", "PositionRequest", "CombinedRequest")


@dataclass(frozen=True)
class LiteralValue:
    """A position known up front."""

    value: PositionValue

    def __bool__(self) -> bool:
        return bool(self.value)


@dataclass(frozen=True)
class Deferred(Generic[T]):
    """A value computed on demand by calling ``fn()``.

    Always truthy: whether a write is intended cannot depend on a value that
    has not been computed yet.
    """

    fn: Callable[[], T]

    def __call__(self) -> T:
        return self.fn()


ValueSource = Union[LiteralValue, Deferred[Any]]
RelativeSource = Union[bool, Deferred[Any]]


def as_value_source(value: Any) -> Optional[ValueSource]:
    """Wrap raw caller input as a ``LiteralValue`` or ``Deferred`` (``None`` kept)."""
    if value is None or isinstance(value, (LiteralValue, Deferred)):
        return value
    if callable(value):
        return Deferred(value)
    return LiteralValue(coerce_position(value))


def as_relative_source(relative: Any) -> Optional[RelativeSource]:
    """Wrap a raw relative flag as ``bool`` or ``Deferred`` (``None`` kept)."""
    if relative is None or isinstance(relative, Deferred):
        return relative
    if callable(relative):
        return Deferred(relative)
    return bool(relative)


def resolve_value(source: ValueSource) -> PositionValue:
    if isinstance(source, Deferred):
        return coerce_position(source())
    return source.value


def resolve_relative(source: RelativeSource) -> bool:
    if isinstance(source, Deferred):
        return bool(source())
    return source


@dataclass(frozen=True)
class PositionRequest:
    """Single-axis write request.

    Attributes:
        value: Target (or delta, when relative) for the axis.
        relative: Add ``value`` to the current position instead of replacing it.
    """

    value: Optional[ValueSource] = None
    relative: Optional[RelativeSource] = None

    @classmethod
    def of(cls, value: Any = None, relative: Any = None) -> "PositionRequest":
        return cls(value=as_value_source(value), relative=as_relative_source(relative))


@dataclass(frozen=True)
class CombinedRequest:
    """Two-axis write request used by ``position`` and ``move``.

    Attributes:
        x: Horizontal target or delta; ``None`` leaves the axis alone.
        y: Vertical target or delta; ``None`` leaves the axis alone.
        relative: Shared relative flag for both axes.
    """

    x: Optional[ValueSource] = None
    y: Optional[ValueSource] = None
    relative: Optional[RelativeSource] = None

    @classmethod
    def of(
        cls, x: Any = None, y: Any = None, relative: Any = None
    ) -> "CombinedRequest":
        return cls(
            x=as_value_source(x),
            y=as_value_source(y),
            relative=as_relative_source(relative),
        )

    def value(self, axis: Axis) -> Optional[ValueSource]:
        return getattr(self, Axis(axis).value)

    def for_axis(self, axis: Axis) -> PositionRequest:
        return PositionRequest(value=self.value(axis), relative=self.relative)


def merge_defaults(request: R, **defaults: Any) -> R:
    """Fill unsupplied (``None``) fields of ``request`` from ``defaults``.

    Supplied fields always win. Raw defaults are wrapped like caller input.

    Raises:
        ValueError: If a default names a field the request does not have.
    """
    names = {f.name for f in fields(request)}
    unknown = set(defaults) - names
    if unknown:
        raise ValueError(
            f"Unknown fields for {type(request).__name__}: {sorted(unknown)}"
        )
    updates = {}
    for name, default in defaults.items():
        if getattr(request, name) is not None:
            continue
        if name == "relative":
            updates[name] = as_relative_source(default)
        else:
            updates[name] = as_value_source(default)
    return replace(request, **updates)


def normalize_request(request: Any, axis: Axis) -> PositionRequest:
    """Turn caller input for a single-axis accessor into a ``PositionRequest``.

    Mappings and combined requests contribute the field named after ``axis``
    plus ``relative``; anything else is the value itself.
    """
    if isinstance(request, PositionRequest):
        return request
    if isinstance(request, CombinedRequest):
        return request.for_axis(axis)
    if isinstance(request, Mapping):
        return PositionRequest.of(
            request.get(Axis(axis).value), request.get("relative")
        )
    return PositionRequest.of(request)


def normalize_combined(request: Any) -> CombinedRequest:
    """Turn caller input for ``position`` / ``move`` into a ``CombinedRequest``.

    A bare value (number, string, callable) is taken as the ``x`` field.
    """
    if isinstance(request, CombinedRequest):
        return request
    if isinstance(request, Mapping):
        return CombinedRequest.of(
            request.get("x"), request.get("y"), request.get("relative")
        )
    return CombinedRequest.of(x=request)
