from __future__ import annotations

import calendar
import datetime as dt

OUT_OF_RANGE = 99999
DAYS_IN_WINDOW = 183
WEEKS_IN_WINDOW = 26
DAYS_IN_WEEK = 7
MONTHS_IN_WINDOW = 6


def beginning_of_day(t: dt.datetime) -> dt.datetime:
    return t.replace(hour=0, minute=0, second=0, microsecond=0)


def days_since(date: dt.datetime, now: dt.datetime) -> int:
    """
    Whole days between `date` and `now`, each read as a calendar date in its own
    recorded local time (no timezone conversion).

    Returns OUT_OF_RANGE past the retention window. Dates after `now` land on 0.
    """
    days = (beginning_of_day(now).date() - beginning_of_day(date).date()).days
    if days > DAYS_IN_WINDOW:
        return OUT_OF_RANGE
    return max(0, days)


def sunday_weekday(d: dt.date) -> int:
    # date.weekday() is Monday = 0; the graph rows are Sunday = 0.
    return (d.weekday() + 1) % DAYS_IN_WEEK


def weekday_offset(now: dt.datetime) -> int:
    return sunday_weekday(now.date())


def start_of_week(d: dt.date) -> dt.date:
    return d - dt.timedelta(days=sunday_weekday(d))


def subtract_months(d: dt.date, months: int) -> dt.date:
    idx = d.year * 12 + (d.month - 1) - months
    year, month0 = divmod(idx, 12)
    month = month0 + 1
    last = calendar.monthrange(year, month)[1]
    return dt.date(year, month, min(d.day, last))
