"""Exceptions raised by interval operations.

Every error is a ``ValueError`` subclass: they signal inputs that violate an
operation's precondition and are never transient.
"""


class IntervalError(ValueError):
    """Base class for all interval algebra errors."""


class InvalidRange(IntervalError):
    """Raised when a start bound would come after an end bound."""


class Overlapping(IntervalError):
    """Raised when an operation needs disjoint intervals but got overlapping ones."""


class NonOverlapping(IntervalError):
    """Raised when an operation needs overlapping intervals but got disjoint ones."""


class InvalidDuration(IntervalError):
    """Raised when a stride would never move a walk forward."""


__all__ = [
    "IntervalError",
    "InvalidRange",
    "Overlapping",
    "NonOverlapping",
    "InvalidDuration",
]
