from __future__ import annotations

import dataclasses
import datetime as dt

from .models import Grid
from .stats_clock import (
    DAYS_IN_WEEK,
    MONTHS_IN_WINDOW,
    WEEKS_IN_WINDOW,
    beginning_of_day,
    start_of_week,
    subtract_months,
    sunday_weekday,
)


@dataclasses.dataclass(frozen=True)
class GraphParameters:
    start_of_first_week: dt.date
    today_week: int
    max_week: int


def window_start(now: dt.datetime) -> dt.date:
    return subtract_months(beginning_of_day(now).date(), MONTHS_IN_WINDOW)


def _weeks_since_start(d: dt.date, start_of_first_week: dt.date) -> int:
    return (d - start_of_first_week).days // DAYS_IN_WEEK


def week_index(d: dt.date, now: dt.datetime) -> int:
    """Calendar weeks (Sunday start) between the week of `d` and the week containing `now`."""
    first = start_of_week(window_start(now))
    return _weeks_since_start(now.date(), first) - _weeks_since_start(d, first)


def build_grid(counts: dict[int, int], now: dt.datetime) -> Grid:
    """
    Lay a days-ago -> count map out as calendar weeks.

    Days older than six calendar months are dropped even when they are inside
    the 183-day retention window; the two windows differ by a few days.
    """
    today = beginning_of_day(now).date()
    start = window_start(now)
    first = start_of_week(start)
    today_weeks = _weeks_since_start(today, first)

    grid = Grid()
    for days_ago, count in counts.items():
        if count <= 0:
            continue
        d = today - dt.timedelta(days=days_ago)
        if d < start:
            continue
        week = today_weeks - _weeks_since_start(d, first)
        grid.add(week, sunday_weekday(d), count)
    return grid


def graph_parameters(grid: Grid, now: dt.datetime) -> GraphParameters:
    first = start_of_week(window_start(now))
    return GraphParameters(
        start_of_first_week=first,
        today_week=week_index(now.date(), now),
        max_week=max(WEEKS_IN_WINDOW, grid.max_week),
    )


def date_for_cell(week: int, day: int, now: dt.datetime) -> dt.date:
    return start_of_week(now.date()) - dt.timedelta(weeks=week) + dt.timedelta(days=day)
