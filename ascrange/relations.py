"""Relational predicates over half-open ranges.

Both predicates accept anything exposing ``start`` and ``end``: raw
``Interval`` pairs, the validated range types, or duck-typed objects.

Note that ``intersects`` compares ``a.end <= b.start`` rather than the
usual ``b.start <= a.end``. It is therefore not commutative, and for two
overlapping ranges such as ``[0, 5)`` and ``[3, 8)`` it returns False.
Callers needing plain overlap should compare the bounds directly.
"""

from typing import Any, Protocol


class Bounded(Protocol):
    @property
    def start(self) -> Any: ...

    @property
    def end(self) -> Any: ...


def covers(a: Bounded, b: Bounded) -> bool:
    """True if every point of ``b`` also lies in ``a``."""
    return a.start <= b.start and a.end >= b.end


def intersects(a: Bounded, b: Bounded) -> bool:
    """True if ``a.start <= b.end`` and ``a.end <= b.start``."""
    return a.start <= b.end and a.end <= b.start


class RangeRelation:
    """Mixin adding ``covers``/``intersects`` methods to a bounded type."""

    def covers(self, other: Bounded) -> bool:
        """`self` covers `other`."""
        return covers(self, other)  # pyright: ignore[reportArgumentType]

    def intersects(self, other: Bounded) -> bool:
        """`self` intersects `other`."""
        return intersects(self, other)  # pyright: ignore[reportArgumentType]
