from __future__ import annotations

import dataclasses
import datetime as dt

from .errors import ConfigError

DAYS_PER_COLUMN = 7


@dataclasses.dataclass(frozen=True)
class Commit:
    author_email: str
    authored_at: dt.datetime  # carries the author's recorded UTC offset


@dataclasses.dataclass(frozen=True)
class GraphOptions:
    email: str = ""
    show_count: bool = False
    show_days: bool = False
    full_weekdays: bool = False
    use_color: bool = True
    verbose: bool = False

    def validate(self) -> None:
        if self.show_count and self.show_days:
            raise ConfigError("--count and --days are mutually exclusive")


class Grid:
    """
    Sparse week-index -> 7-slot column of commit counts.

    Week 0 is the week containing today; larger indices are further in the past.
    Slots are indexed by day of week with Sunday = 0. Absent weeks and days read as 0.
    """

    def __init__(self) -> None:
        self._weeks: dict[int, list[int]] = {}

    def add(self, week: int, day: int, count: int) -> None:
        self._check(week, day)
        col = self._weeks.setdefault(week, [0] * DAYS_PER_COLUMN)
        col[day] += count

    def get(self, week: int, day: int) -> int:
        self._check(week, day)
        col = self._weeks.get(week)
        if col is None:
            return 0
        return col[day]

    def column(self, week: int) -> tuple[int, ...]:
        col = self._weeks.get(week)
        if col is None:
            return (0,) * DAYS_PER_COLUMN
        return tuple(col)

    @property
    def max_week(self) -> int:
        return max(self._weeks) if self._weeks else 0

    def total(self) -> int:
        return sum(sum(col) for col in self._weeks.values())

    def __len__(self) -> int:
        return len(self._weeks)

    def __repr__(self) -> str:
        return f"Grid({dict(sorted(self._weeks.items()))!r})"

    @staticmethod
    def _check(week: int, day: int) -> None:
        if week < 0:
            raise ValueError(f"week index must be >= 0, got {week}")
        if not 0 <= day < DAYS_PER_COLUMN:
            raise ValueError(f"day of week must be in 0..6, got {day}")
