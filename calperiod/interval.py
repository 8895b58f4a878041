import logging
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import reduce
from typing import TypeAlias, overload

from dateutil.relativedelta import relativedelta

from calperiod.errors import InvalidDuration, InvalidRange, NonOverlapping, Overlapping

logger = logging.getLogger(__name__)

Duration: TypeAlias = timedelta | relativedelta


def _check_bound(value: object, edge: str) -> None:
    if not isinstance(value, datetime):
        raise TypeError(
            f"Interval {edge} bound must be a datetime.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: Parse or convert the value before building the interval:\n"
            f"  Interval(start=datetime(2015, 1, 1), end=datetime(2015, 1, 5))"
        )


def _check_operand(value: object) -> None:
    if not isinstance(value, datetime):
        raise TypeError(
            f"Interval relations accept a datetime or an Interval.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: Compare against datetime(2015, 1, 5) or another Interval."
        )


def _check_duration(value: object) -> None:
    if not isinstance(value, (timedelta, relativedelta)):
        raise TypeError(
            f"Duration must be a timedelta or relativedelta.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )


def _ensure_progress(point: datetime, stride: Duration, forward: bool) -> None:
    _check_duration(stride)
    if forward:
        stalled = point + stride <= point
    else:
        stalled = point - stride >= point
    if stalled:
        direction = "forward" if forward else "backward"
        raise InvalidDuration(
            f"Stride {stride!r} does not move {direction} from {point}.\n"
            f"Hint: Use a positive duration, e.g. timedelta(days=1)"
        )


def _elapsed(start: datetime, end: datetime) -> timedelta:
    # Aware bounds sharing a zone subtract as wall-clock times.
    if start.utcoffset() is not None and end.utcoffset() is not None:
        return end.astimezone(timezone.utc) - start.astimezone(timezone.utc)
    return end - start


@dataclass(frozen=True, kw_only=True)
class Interval:
    """Immutable half-open time range ``[start, end)``.

    ``start`` is included and ``end`` is excluded. Every operation that
    produces an interval builds a new instance, so ``start <= end`` holds for
    every value in existence.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        _check_bound(self.start, "start")
        _check_bound(self.end, "end")
        if self.start > self.end:
            raise InvalidRange(
                f"Interval start ({self.start}) must be <= end ({self.end}).\n"
                f"Hint: Swap the bounds or check the duration used to derive them."
            )

    def __str__(self) -> str:
        """Mathematical notation, e.g. ``[2015-01-01T00:00:00, 2015-01-05T00:00:00)``."""
        return f"[{self.start.isoformat()}, {self.end.isoformat()})"

    # Duration queries

    def timestamp_duration(self) -> float:
        """Return the elapsed time between both bounds in seconds."""
        return _elapsed(self.start, self.end).total_seconds()

    def calendar_duration(self) -> relativedelta:
        """Return the elapsed time between both bounds in calendar units."""
        return relativedelta(self.end, self.start)

    def compare_duration(self, other: "Interval") -> int:
        """Compare durations by laying ``other``'s span onto this start.

        Returns -1, 0 or 1 when this interval is shorter than, as long as, or
        longer than ``other``. Re-anchoring the calendar span keeps months and
        years meaningful where a raw seconds comparison would not.
        """
        anchored = self.start + other.calendar_duration()
        if self.end < anchored:
            return -1
        if self.end > anchored:
            return 1
        return 0

    def duration_equals(self, other: "Interval") -> bool:
        return self.compare_duration(other) == 0

    def duration_greater_than(self, other: "Interval") -> bool:
        return self.compare_duration(other) == 1

    def duration_less_than(self, other: "Interval") -> bool:
        return self.compare_duration(other) == -1

    def timestamp_duration_diff(self, other: "Interval") -> float:
        """Return how many seconds longer this interval is than ``other``."""
        return self.timestamp_duration() - other.timestamp_duration()

    def calendar_duration_diff(self, other: "Interval") -> relativedelta:
        """Return how much longer this interval is than ``other`` in calendar units."""
        return relativedelta(self.end, self.start + other.calendar_duration())

    # Iteration

    def subdivide(self, stride: Duration) -> Iterator["Interval"]:
        """Split the interval into consecutive pieces of ``stride`` length.

        The first piece starts at ``start``, the last piece ends at ``end``
        and may be shorter than ``stride``. Each piece starts where the
        previous one ended. A zero-length interval yields a single
        zero-length piece.

        Raises:
            InvalidDuration: If ``stride`` does not move forward. Checked
                immediately, and again at each step for calendar strides.
        """
        _ensure_progress(self.start, stride, forward=True)
        logger.debug("Subdividing %s by %r", self, stride)

        def generate() -> Iterator[Interval]:
            cursor = self.start
            while True:
                _ensure_progress(cursor, stride, forward=True)
                upper = min(cursor + stride, self.end)
                yield Interval(start=cursor, end=upper)
                cursor = upper
                if cursor >= self.end:
                    return

        return generate()

    def subdivide_backwards(self, stride: Duration) -> Iterator["Interval"]:
        """Split the interval into pieces of ``stride`` length, walking back from ``end``.

        The first piece ends at ``end``, the last piece starts at ``start``
        and may be shorter than ``stride``. Each piece ends where the
        previous one started.
        """
        _ensure_progress(self.end, stride, forward=False)
        logger.debug("Subdividing %s backwards by %r", self, stride)

        def generate() -> Iterator[Interval]:
            cursor = self.end
            while True:
                _ensure_progress(cursor, stride, forward=False)
                lower = max(cursor - stride, self.start)
                yield Interval(start=lower, end=cursor)
                cursor = lower
                if cursor <= self.start:
                    return

        return generate()

    def datepoints(
        self, stride: Duration, exclude_start: bool = False
    ) -> Iterator[datetime]:
        """Yield ``start``, ``start + stride``, ... for every point before ``end``."""
        _ensure_progress(self.start, stride, forward=True)
        logger.debug("Walking datepoints of %s by %r", self, stride)

        def generate() -> Iterator[datetime]:
            cursor = self.start
            if exclude_start:
                cursor = cursor + stride
            while cursor < self.end:
                yield cursor
                _ensure_progress(cursor, stride, forward=True)
                cursor = cursor + stride

        return generate()

    def datepoints_backwards(
        self, stride: Duration, exclude_start: bool = False
    ) -> Iterator[datetime]:
        """Yield ``end``, ``end - stride``, ... for every point after ``start``.

        ``exclude_start`` drops the first yielded point, which is ``end``.
        """
        _ensure_progress(self.end, stride, forward=False)
        logger.debug("Walking datepoints of %s backwards by %r", self, stride)

        def generate() -> Iterator[datetime]:
            cursor = self.end
            if exclude_start:
                cursor = cursor - stride
            while cursor > self.start:
                yield cursor
                _ensure_progress(cursor, stride, forward=False)
                cursor = cursor - stride

        return generate()

    # Relations

    def equals(self, other: "Interval") -> bool:
        return self.start == other.start and self.end == other.end

    def abuts(self, other: "Interval") -> bool:
        """True if one interval ends exactly where the other starts."""
        return self.start == other.end or self.end == other.start

    def overlaps(self, other: "Interval") -> bool:
        """True if both intervals share some time. Abutting intervals do not."""
        return self.start < other.end and self.end > other.start

    @overload
    def is_after(self, other: "Interval") -> bool: ...

    @overload
    def is_after(self, other: datetime) -> bool: ...

    def is_after(self, other: "Interval | datetime") -> bool:
        """True if this interval lies entirely after a datepoint or interval."""
        if isinstance(other, Interval):
            return self.start >= other.end
        _check_operand(other)
        return self.start > other

    @overload
    def is_before(self, other: "Interval") -> bool: ...

    @overload
    def is_before(self, other: datetime) -> bool: ...

    def is_before(self, other: "Interval | datetime") -> bool:
        """True if this interval lies entirely before a datepoint or interval.

        The end bound is excluded, so an interval ending exactly on a
        datepoint is before it.
        """
        if isinstance(other, Interval):
            return self.end <= other.start
        _check_operand(other)
        return self.end <= other

    @overload
    def contains(self, other: "Interval") -> bool: ...

    @overload
    def contains(self, other: datetime) -> bool: ...

    def contains(self, other: "Interval | datetime") -> bool:
        """True if a datepoint or interval lies within this interval.

        Datepoints follow half-open rules: ``start`` is contained, ``end`` is
        not. An interval is contained when its start is contained and its end
        falls within ``[start, end]``, so an interval sharing this end still
        counts.
        """
        if isinstance(other, Interval):
            return self._contains_interval(other)
        _check_operand(other)
        return self._contains_point(other)

    def __contains__(self, other: "Interval | datetime") -> bool:
        return self.contains(other)

    def _contains_point(self, point: datetime) -> bool:
        return self.start <= point < self.end

    def _contains_interval(self, other: "Interval") -> bool:
        return self._contains_point(other.start) and (
            self.start <= other.end <= self.end
        )

    # Set algebra

    def intersect(self, other: "Interval") -> "Interval":
        """Return the time shared by both intervals.

        Raises:
            NonOverlapping: If the intervals share no time.
        """
        if not self.overlaps(other):
            raise NonOverlapping(
                f"Cannot intersect {self} with {other}: they do not overlap.\n"
                f"Hint: Check overlaps() first, or use gap() for disjoint intervals."
            )
        return Interval(
            start=max(self.start, other.start), end=min(self.end, other.end)
        )

    def gap(self, other: "Interval") -> "Interval":
        """Return the interval between two disjoint intervals.

        Abutting intervals produce a zero-length gap.

        Raises:
            Overlapping: If the intervals share some time.
        """
        if self.overlaps(other):
            raise Overlapping(
                f"Cannot compute the gap between {self} and {other}: they overlap.\n"
                f"Hint: Use intersect() to get the shared time instead."
            )
        if self.end <= other.start:
            return Interval(start=self.end, end=other.start)
        return Interval(start=other.end, end=self.start)

    def diff(self, other: "Interval") -> tuple["Interval | None", "Interval | None"]:
        """Return the parts of the merged span that are not shared by both intervals.

        Returns:
            ``(None, None)`` for equal intervals, a single piece and ``None``
            when both intervals share a bound, otherwise the piece before and
            the piece after the shared time.

        Raises:
            NonOverlapping: If the intervals are different and do not overlap.
        """
        if self.equals(other):
            return None, None

        if not self.overlaps(other):
            raise NonOverlapping(
                f"Cannot diff {self} with {other}: they do not overlap.\n"
                f"Hint: Use gap() to get the time between disjoint intervals."
            )

        shared = self.intersect(other)
        merged = self.merge(other)
        if merged.start == shared.start:
            return merged.starting_on(shared.end), None

        if merged.end == shared.end:
            return merged.ending_on(shared.start), None

        return merged.ending_on(shared.start), merged.starting_on(shared.end)

    def merge(self, other: "Interval", *others: "Interval") -> "Interval":
        """Return the smallest interval covering this one and all the others."""

        def widen(acc: Interval, nxt: Interval) -> Interval:
            if acc.start > nxt.start:
                acc = acc.starting_on(nxt.start)
            if acc.end < nxt.end:
                acc = acc.ending_on(nxt.end)
            return acc

        return reduce(widen, (other, *others), self)

    # Translation and resizing

    def starting_on(self, point: datetime) -> "Interval":
        if point == self.start:
            return self
        return Interval(start=point, end=self.end)

    def ending_on(self, point: datetime) -> "Interval":
        if point == self.end:
            return self
        return Interval(start=self.start, end=point)

    def with_duration_after_start(self, duration: Duration) -> "Interval":
        """Keep ``start`` and set the end ``duration`` after it."""
        _check_duration(duration)
        return self.ending_on(self.start + duration)

    def with_duration_before_end(self, duration: Duration) -> "Interval":
        """Keep ``end`` and set the start ``duration`` before it."""
        _check_duration(duration)
        return self.starting_on(self.end - duration)

    def move_start_date(self, duration: Duration) -> "Interval":
        _check_duration(duration)
        return self.starting_on(self.start + duration)

    def move_end_date(self, duration: Duration) -> "Interval":
        _check_duration(duration)
        return self.ending_on(self.end + duration)

    def move(self, duration: Duration) -> "Interval":
        """Shift both bounds by ``duration``."""
        _check_duration(duration)
        moved = Interval(start=self.start + duration, end=self.end + duration)
        if self.equals(moved):
            return self
        return moved

    def expand(self, duration: Duration) -> "Interval":
        """Pull ``start`` back and push ``end`` forward by ``duration``.

        A negative duration shrinks the interval instead.

        Raises:
            InvalidRange: If shrinking would cross the bounds.
        """
        _check_duration(duration)
        expanded = Interval(start=self.start - duration, end=self.end + duration)
        if self.equals(expanded):
            return self
        return expanded
