"""Validated half-open range types.

Three classes share one shape: a ``(start, end)`` pair that is checked on
construction and re-checked by every setter. They differ only in the
constraint policy they apply:

- ``AscendingRange``: ``start <= end``
- ``PositiveAscendingRange``: ``start <= end`` and ``start >= zero``
- ``NegativeAscendingRange``: ``start <= end`` and ``end <= zero``

A failed setter raises ``RangeError`` and leaves the range untouched.

Example:
    >>> r = PositiveAscendingRange(2, 10)
    >>> r.set_start(1)
    2
    >>> r.start
    1
    >>> r.set_start(0)
    Traceback (most recent call last):
    ...
    ascrange.errors.RangeError: Start greater than end or less than zero
    Got: value=0, start=1, end=10
"""

from typing import Any, ClassVar, Generic, TypeVar

from typing_extensions import Self

from ascrange.constraints import (
    Ascending,
    Constraint,
    NonNegativeStart,
    NonPositiveEnd,
)
from ascrange.errors import InvalidRange, RangeError
from ascrange.interval import Interval, coerce_interval
from ascrange.relations import RangeRelation

T = TypeVar("T")


class _ConstrainedRange(RangeRelation, Generic[T]):
    constraint: ClassVar[Constraint]

    def __init__(self, start: T, end: T, *, zero: Any = 0) -> None:
        reason = self.constraint.check(start, end, zero)
        if reason is not None:
            raise RangeError(reason, start=start, end=end)
        self._start: T = start
        self._end: T = end
        self._zero: Any = zero

    @classmethod
    def try_from(cls, value: Any, *, zero: Any = 0) -> Self:
        """Validate a raw interval and wrap it.

        Args:
            value: An Interval, a ``(start, end)`` pair, a step-1 ``range``,
                or any object with ``start``/``end`` attributes
            zero: The zero value of the bound type

        Raises:
            RangeError: If the bounds violate this type's constraint
            TypeError: If ``value`` is not interval-like
        """
        interval = coerce_interval(value)
        return cls(interval.start, interval.end, zero=zero)

    @property
    def start(self) -> T:
        return self._start

    @property
    def end(self) -> T:
        return self._end

    @property
    def zero(self) -> Any:
        return self._zero

    @property
    def interval(self) -> Interval[T]:
        """Frozen snapshot of the current bounds."""
        return Interval(start=self._start, end=self._end)

    @property
    def is_empty(self) -> bool:
        return not (self._start < self._end)

    def contains(self, value: Any) -> bool:
        """True if ``start <= value < end``."""
        return self._start <= value < self._end

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def set_start(self, value: T) -> T:
        """Replace ``start`` and return the previous value.

        Raises:
            RangeError: If the new start breaks the constraint. The range is
                left unchanged.
        """
        if not self.constraint.allows_start(value, self._end, self._zero):
            raise RangeError(
                InvalidRange.SET_START_INVALID,
                self.constraint.set_start_message,
                value=value,
                start=self._start,
                end=self._end,
            )
        previous, self._start = self._start, value
        return previous

    def set_end(self, value: T) -> T:
        """Replace ``end`` and return the previous value.

        Raises:
            RangeError: If the new end breaks the constraint. The range is
                left unchanged.
        """
        if not self.constraint.allows_end(value, self._start, self._zero):
            raise RangeError(
                InvalidRange.SET_END_INVALID,
                self.constraint.set_end_message,
                value=value,
                start=self._start,
                end=self._end,
            )
        previous, self._end = self._end, value
        return previous

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self._start, self._end, self._zero) == (
            other._start,  # pyright: ignore[reportAttributeAccessIssue]
            other._end,  # pyright: ignore[reportAttributeAccessIssue]
            other._zero,  # pyright: ignore[reportAttributeAccessIssue]
        )

    def __hash__(self) -> int:
        return hash((type(self), self._start, self._end, self._zero))

    def __copy__(self) -> Self:
        return type(self)(self._start, self._end, zero=self._zero)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(start={self._start!r}, end={self._end!r})"


class AscendingRange(_ConstrainedRange[T]):
    """An ascending range from `start` to `end` (exclusive)."""

    constraint = Ascending()


class PositiveAscendingRange(_ConstrainedRange[T]):
    """An ascending range from `start` to `end` (exclusive) where `start` is positive."""

    constraint = NonNegativeStart()


class NegativeAscendingRange(_ConstrainedRange[T]):
    """An ascending range from `start` to `end` (exclusive) where `end` is negative."""

    constraint = NonPositiveEnd()
