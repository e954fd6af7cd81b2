from __future__ import annotations

import datetime as dt
import sys
from typing import TextIO

from .models import GraphOptions, Grid
from .stats_clock import DAYS_IN_WEEK, weekday_offset
from .stats_grid import date_for_cell, graph_parameters

RESET = "\033[0m"
STYLE_EMPTY = "\033[0;37;30m"
STYLE_LIGHT = "\033[1;30;47m"
STYLE_MEDIUM = "\033[1;30;43m"
STYLE_HIGH = "\033[1;30;42m"
STYLE_TODAY = "\033[1;37;45m"

# Shown instead of colours when the terminal gets plain text.
GLYPHS = {
    STYLE_EMPTY: "-",
    STYLE_LIGHT: "+",
    STYLE_MEDIUM: "*",
    STYLE_HIGH: "#",
    STYLE_TODAY: "@",
}

CELL_WIDTH = 3
SEPARATOR = " "
GUTTER_WIDTH = 5
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
COMPACT_DAY_LABELS = {1: "Mon", 3: "Wed", 5: "Fri"}
FULL_DAY_LABELS = ("S", "M", "T", "W", "T", "F", "S")


def cell_style(count: int, *, today: bool) -> str:
    if today:
        return STYLE_TODAY
    if count >= 10:
        return STYLE_HIGH
    if count >= 5:
        return STYLE_MEDIUM
    if count > 0:
        return STYLE_LIGHT
    return STYLE_EMPTY


def _field(value: int) -> str:
    # Right-aligned in the cell; 3+ digit values simply take the whole field.
    return f"{value:>{CELL_WIDTH}d}"


def render_cell(
    count: int,
    *,
    today: bool,
    day_of_month: int | None = None,
    show_count: bool = False,
    use_color: bool = True,
) -> str:
    style = cell_style(count, today=today)
    if day_of_month is not None and not use_color:
        # Two-digit day followed by the density glyph.
        text = f"{day_of_month:>2d}{GLYPHS[style]}"
    elif day_of_month is not None:
        text = _field(day_of_month)
    elif show_count and count > 0:
        text = _field(count)
    elif use_color:
        text = " " * CELL_WIDTH
    else:
        text = GLYPHS[style].rjust(CELL_WIDTH)
    if not use_color:
        return text + SEPARATOR
    return f"{style}{text}{SEPARATOR}{RESET}"


def day_label(day: int, *, full: bool) -> str:
    if full:
        label = FULL_DAY_LABELS[day]
    else:
        label = COMPACT_DAY_LABELS.get(day, "")
    return f" {label}".ljust(GUTTER_WIDTH) if label else " " * GUTTER_WIDTH


def month_label(week: int, now: dt.datetime) -> str:
    for day in range(DAYS_IN_WEEK):
        d = date_for_cell(week, day, now)
        if d.day == 1:
            return MONTH_ABBR[d.month - 1] + " "
    return " " * (CELL_WIDTH + len(SEPARATOR))


def render_month_header(max_week: int, now: dt.datetime) -> str:
    groups = [month_label(week, now) for week in range(max_week + 1, -1, -1)]
    return (" " * GUTTER_WIDTH + "".join(groups)).rstrip()


def render_graph(grid: Grid, options: GraphOptions, now: dt.datetime) -> str:
    """
    Calendar graph: a month header, then one row per weekday (Sunday first).

    Columns run from the oldest week on the left to the current week on the
    right. Today's cell is always styled as today, whatever its count.
    """
    options.validate()
    params = graph_parameters(grid, now)
    today_day = weekday_offset(now)

    lines = [render_month_header(params.max_week, now)]
    for day in range(DAYS_IN_WEEK):
        row = [day_label(day, full=options.full_weekdays)]
        for week in range(params.max_week + 1, -1, -1):
            count = grid.get(week, day)
            dom = date_for_cell(week, day, now).day if options.show_days else None
            row.append(
                render_cell(
                    count,
                    today=(week == params.today_week and day == today_day),
                    day_of_month=dom,
                    show_count=options.show_count,
                    use_color=options.use_color,
                )
            )
        lines.append("".join(row))
    return "\n".join(lines) + "\n"


def print_graph(grid: Grid, options: GraphOptions, now: dt.datetime, stream: TextIO | None = None) -> None:
    out = render_graph(grid, options, now)
    (stream or sys.stdout).write(out)
