from .constraints import Ascending, Constraint, NonNegativeStart, NonPositiveEnd
from .errors import InvalidRange, RangeError
from .interval import Interval, coerce_interval
from .ranges import AscendingRange, NegativeAscendingRange, PositiveAscendingRange
from .relations import RangeRelation, covers, intersects

__all__ = [
    "Interval",
    "AscendingRange",
    "PositiveAscendingRange",
    "NegativeAscendingRange",
    "RangeRelation",
    "covers",
    "intersects",
    "InvalidRange",
    "RangeError",
    "Constraint",
    "Ascending",
    "NonNegativeStart",
    "NonPositiveEnd",
    "coerce_interval",
]
