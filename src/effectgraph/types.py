"""
Shared value types for effectgraph nodes.

Unset values from the host (null/undefined on the script side) are
represented as ``None`` at every input and output boundary.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional, Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, ValidationError

from effectgraph.exceptions import InvalidValueError

Number = Union[int, float]
Scalar = Optional[Number]

# Zero-argument callables wired by the graph engine
Producer = Callable[[], Any]
Continuation = Callable[[], Any]

RECT_FIELDS = ("x", "y", "width", "height")


def is_unset(value: Any) -> bool:
    return value is None


@runtime_checkable
class EffectHost(Protocol):
    """The host effect runtime handed to nodes at construction."""

    amaz: Any


class Rect(BaseModel):
    """Axis-aligned rectangle; any field may be unset."""

    model_config = ConfigDict(frozen=True)

    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None

    @property
    def is_complete(self) -> bool:
        return not any(getattr(self, name) is None for name in RECT_FIELDS)

    def overlaps(self, other: "Rect") -> bool:
        """
        Separating-axis test against another complete rectangle.

        Edges that only touch do not count as overlapping.
        """
        return rects_overlap(self, other)

    @classmethod
    def coerce(cls, value: Any) -> Optional["Rect"]:
        """
        Read a host value as a Rect.

        Accepts a Rect, a mapping, or any object exposing x/y/width/height
        attributes. Missing keys or attributes read as unset.

        Returns:
            The rectangle, or None if the value itself is unset.

        Raises:
            InvalidValueError: If a set field is not numeric.
        """
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            fields = {name: value.get(name) for name in RECT_FIELDS}
        else:
            fields = {name: getattr(value, name, None) for name in RECT_FIELDS}
        try:
            return cls(**fields)
        except ValidationError as e:
            raise InvalidValueError.from_exception(e, details={"value": repr(value)})


def rects_overlap(a: Rect, b: Rect) -> bool:
    return (
        a.x < b.x + b.width
        and b.x < a.x + a.width
        and a.y < b.y + b.height
        and b.y < a.y + a.height
    )
