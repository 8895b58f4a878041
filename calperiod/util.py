"""Utility constants for calperiod.

Fixed-length units are ``timedelta`` values. Calendar units whose length
depends on where they are applied (months, years) are ``relativedelta``
values, so ``Interval(...).move(MONTH)`` lands on the same day of the next
month rather than a fixed number of seconds later.
"""

from datetime import timedelta

from dateutil.relativedelta import relativedelta

# Fixed-length units
SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
WEEK = timedelta(weeks=1)

# Calendar units
MONTH = relativedelta(months=1)
YEAR = relativedelta(years=1)
