from .core import intersection, merge
from .errors import (
    IntervalError,
    InvalidDuration,
    InvalidRange,
    NonOverlapping,
    Overlapping,
)
from .interval import Duration, Interval
from .util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR

__all__ = [
    "Interval",
    "Duration",
    "merge",
    "intersection",
    "IntervalError",
    "InvalidRange",
    "Overlapping",
    "NonOverlapping",
    "InvalidDuration",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
]
