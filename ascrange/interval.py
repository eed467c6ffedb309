from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ascrange.relations import RangeRelation

T = TypeVar("T")


@dataclass(frozen=True, kw_only=True)
class Interval(RangeRelation, Generic[T]):
    """Raw half-open pair ``[start, end)``. No ordering is enforced here."""

    start: T
    end: T

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"


def coerce_interval(value: Any) -> Interval[Any]:
    """Convert a raw interval-like value to an ``Interval``.

    Accepts:
    - Interval: Returned as-is
    - tuple/list of two bounds: ``(start, end)``
    - range: Must have a step of 1, uses ``start``/``stop``
    - Any object exposing ``start`` and ``end`` attributes

    Raises:
        TypeError: If the value has none of the supported shapes
    """
    if isinstance(value, Interval):
        return value
    if isinstance(value, range):
        if value.step != 1:
            raise TypeError(
                f"Cannot convert a range with step {value.step} to an interval.\n"
                f"Got: {value!r}\n"
                f"Hint: Only contiguous ranges are supported: range({value.start}, {value.stop})"
            )
        return Interval(start=value.start, end=value.stop)
    if isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    ):
        if len(value) != 2:
            raise TypeError(
                f"Interval sequence must hold exactly two bounds (start, end).\n"
                f"Got {len(value)} items: {value!r}"
            )
        start, end = value
        return Interval(start=start, end=end)
    if hasattr(value, "start") and hasattr(value, "end"):
        return Interval(start=value.start, end=value.end)
    raise TypeError(
        f"Interval must be an Interval, a (start, end) pair, a range, "
        f"or an object with start/end.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  AscendingRange.try_from((2, 9))\n"
        f"  AscendingRange.try_from(range(2, 9))\n"
        f"  AscendingRange.try_from(Interval(start=2, end=9))"
    )
