from enum import Enum
from typing import Any


class InvalidRange(Enum):
    """Closed set of reasons a range can be rejected."""

    START_AFTER_END = (
        "The start of the given range is greater than the end of the given range"
    )
    START_LESS_THAN_ZERO = "The start of the given range is less than zero"
    END_GREATER_THAN_ZERO = "The end of the given range is greater than zero"
    SET_START_INVALID = "Start violates the range constraint"
    SET_END_INVALID = "End violates the range constraint"

    @property
    def message(self) -> str:
        return self.value


class RangeError(ValueError):
    """Raised when constructing or mutating a range would break its invariant.

    Attributes:
        kind: The InvalidRange member describing the failure
    """

    def __init__(self, kind: InvalidRange, message: str | None = None, **bounds: Any):
        self.kind: InvalidRange = kind
        self.bounds: dict[str, Any] = bounds
        text = message if message is not None else kind.message
        if bounds:
            details = ", ".join(f"{name}={value!r}" for name, value in bounds.items())
            text = f"{text}\nGot: {details}"
        super().__init__(text)
