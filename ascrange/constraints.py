"""Constraint policies for the validated range types.

Each policy decides whether a bound pair is acceptable at construction,
and whether a replacement start or end is acceptable on mutation. The
mutation checks are stricter than construction for the
signed policies: a range may be built with ``start == zero`` (or
``end == zero``) but a setter will not move a bound onto zero.
"""

from abc import ABC, abstractmethod
from typing import Any

from typing_extensions import override

from ascrange.errors import InvalidRange


class Constraint(ABC):
    #: Messages used when a setter rejects a value.
    set_start_message: str = "Start greater than end"
    set_end_message: str = "End less than start"

    def check(self, start: Any, end: Any, zero: Any) -> InvalidRange | None:
        """Return the reason ``(start, end)`` is invalid, or None if it is valid."""
        if not start <= end:
            return InvalidRange.START_AFTER_END
        return self._check_sign(start, end, zero)

    @abstractmethod
    def _check_sign(self, start: Any, end: Any, zero: Any) -> InvalidRange | None:
        """Sign check for an already-ascending pair."""
        pass

    def allows_start(self, value: Any, end: Any, zero: Any) -> bool:
        return value <= end

    def allows_end(self, value: Any, start: Any, zero: Any) -> bool:
        return value >= start


class Ascending(Constraint):
    """``start <= end``, with no sign constraint."""

    @override
    def _check_sign(self, start: Any, end: Any, zero: Any) -> InvalidRange | None:
        return None


class NonNegativeStart(Constraint):
    """``start <= end`` and ``start >= zero``."""

    set_start_message = "Start greater than end or less than zero"

    @override
    def _check_sign(self, start: Any, end: Any, zero: Any) -> InvalidRange | None:
        if not start >= zero:
            return InvalidRange.START_LESS_THAN_ZERO
        return None

    @override
    def allows_start(self, value: Any, end: Any, zero: Any) -> bool:
        return value <= end and value > zero


class NonPositiveEnd(Constraint):
    """``start <= end`` and ``end <= zero``."""

    set_end_message = "End less than start or greater than zero"

    @override
    def _check_sign(self, start: Any, end: Any, zero: Any) -> InvalidRange | None:
        if not end <= zero:
            return InvalidRange.END_GREATER_THAN_ZERO
        return None

    @override
    def allows_end(self, value: Any, start: Any, zero: Any) -> bool:
        return value >= start and value < zero
