from __future__ import annotations

import datetime as dt
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TextIO

from .git import read_commits
from .identity import AuthorFilter
from .models import Commit
from .stats_clock import DAYS_IN_WINDOW, OUT_OF_RANGE, days_since

CommitSource = Callable[[Path], Iterable[Commit]]


def new_commit_counts() -> dict[int, int]:
    # Day 0 is added on demand; every older day renders even when empty.
    return {k: 0 for k in range(DAYS_IN_WINDOW, 0, -1)}


def aggregate_commits(
    commits: Iterable[Commit],
    *,
    author: AuthorFilter,
    now: dt.datetime,
    counts: dict[int, int] | None = None,
) -> dict[int, int]:
    if counts is None:
        counts = new_commit_counts()
    for c in commits:
        if not author.matches(c.author_email):
            continue
        days_ago = days_since(c.authored_at, now)
        if days_ago == OUT_OF_RANGE:
            continue
        counts[days_ago] = counts.get(days_ago, 0) + 1
    return counts


def aggregate_repositories(
    repos: Iterable[Path],
    *,
    author: AuthorFilter,
    now: dt.datetime,
    commit_source: CommitSource = read_commits,
    progress: TextIO | None = None,
) -> dict[int, int]:
    """
    Sum per-day commit counts across repositories into one count map.

    The first repository that cannot be read aborts the whole run: the
    RepoAccessError from the commit source propagates unchanged.
    """
    counts = new_commit_counts()
    for repo in repos:
        commits = list(commit_source(repo))
        before = sum(counts.values())
        aggregate_commits(commits, author=author, now=now, counts=counts)
        if progress is not None:
            print(f"{repo}: {len(commits)} commits, {sum(counts.values()) - before} in window", file=progress)
    return counts
