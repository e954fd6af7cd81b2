from __future__ import annotations

import datetime as dt

import pytest

from git_contrib.models import Grid
from git_contrib.stats_aggregate import new_commit_counts
from git_contrib.stats_clock import WEEKS_IN_WINDOW, weekday_offset
from git_contrib.stats_grid import build_grid, date_for_cell, graph_parameters, window_start

NOW = dt.datetime(2023, 5, 17, 15, 0)  # Wednesday


def test_today_lands_in_week_zero() -> None:
    grid = build_grid({0: 3}, NOW)
    assert grid.get(0, 3) == 3
    assert grid.total() == 3
    assert graph_parameters(grid, NOW).today_week == 0


def test_today_is_week_zero_for_every_weekday() -> None:
    for i in range(21):
        now = NOW + dt.timedelta(days=i)
        grid = build_grid({0: 1}, now)
        assert grid.get(0, weekday_offset(now)) == 1
        assert graph_parameters(grid, now).today_week == 0


def test_week_boundaries_follow_the_calendar() -> None:
    grid = build_grid({1: 1, 3: 2, 4: 5}, NOW)
    assert grid.get(0, 2) == 1  # Tuesday
    assert grid.get(0, 0) == 2  # Sunday 2023-05-14
    assert grid.get(1, 6) == 5  # Saturday 2023-05-13, previous week


def test_days_before_six_month_start_are_dropped() -> None:
    assert window_start(NOW) == dt.date(2022, 11, 17)
    grid = build_grid({181: 4, 182: 9, 183: 9}, NOW)
    assert grid.total() == 4
    assert grid.get(26, 4) == 4


def test_zero_buckets_leave_grid_sparse() -> None:
    grid = build_grid(new_commit_counts(), NOW)
    assert len(grid) == 0
    params = graph_parameters(grid, NOW)
    assert params.max_week == WEEKS_IN_WINDOW
    assert params.start_of_first_week == dt.date(2022, 11, 13)


def test_date_for_cell_inverts_layout() -> None:
    assert date_for_cell(0, 3, NOW) == dt.date(2023, 5, 17)
    assert date_for_cell(1, 6, NOW) == dt.date(2023, 5, 13)
    assert date_for_cell(26, 4, NOW) == dt.date(2022, 11, 17)


def test_grid_accumulates_and_defaults_to_zero() -> None:
    grid = Grid()
    grid.add(2, 5, 1)
    grid.add(2, 5, 2)
    assert grid.get(2, 5) == 3
    assert grid.get(2, 4) == 0
    assert grid.get(9, 0) == 0
    assert grid.column(9) == (0,) * 7
    assert grid.max_week == 2
    with pytest.raises(ValueError):
        grid.add(0, 7, 1)
    with pytest.raises(ValueError):
        grid.get(-1, 0)
