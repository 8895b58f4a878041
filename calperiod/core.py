from functools import reduce

from calperiod.interval import Interval


def merge(*intervals: Interval) -> Interval:
    """Return the smallest interval covering every given interval.

    Equivalent to ``first.merge(second, third, ...)``. A single interval is
    returned unchanged.

    Example:
        >>> merge(morning, lunch, afternoon)  # spans the whole day
    """

    if not intervals:
        raise ValueError(
            f"merge() requires at least one interval argument.\n"
            f"Example: merge(ivl_a, ivl_b, ivl_c)"
        )

    first, *rest = intervals
    if not rest:
        return first
    return first.merge(*rest)


def intersection(*intervals: Interval) -> Interval:
    """Return the time shared by every given interval (chained ``intersect``).

    Raises:
        NonOverlapping: If some pair along the chain does not overlap.
    """

    if not intervals:
        raise ValueError(
            f"intersection() requires at least one interval argument.\n"
            f"Example: intersection(ivl_a, ivl_b, ivl_c)"
        )

    def reducer(acc: Interval, nxt: Interval) -> Interval:
        return acc.intersect(nxt)

    return reduce(reducer, intervals)
