from __future__ import annotations

import datetime as dt
import sys
from pathlib import Path
from typing import TextIO

from .config import load_repo_paths
from .git import read_commits
from .identity import AuthorFilter
from .models import GraphOptions
from .stats_aggregate import CommitSource, aggregate_repositories
from .stats_grid import build_grid
from .stats_render import print_graph


def select_repositories(*, path: Path | None, dotfile: Path) -> list[Path]:
    if path is not None:
        return [path]
    return [Path(p) for p in load_repo_paths(dotfile)]


def run_stats(
    options: GraphOptions,
    *,
    path: Path | None,
    dotfile: Path,
    now: dt.datetime | None = None,
    commit_source: CommitSource = read_commits,
    stream: TextIO | None = None,
) -> int:
    """
    One graph run: `now` is read once here and threaded through aggregation,
    layout and rendering so all of them agree on "today".
    """
    options.validate()
    if now is None:
        now = dt.datetime.now().astimezone()

    repos = select_repositories(path=path, dotfile=dotfile)
    if options.verbose:
        where = str(path) if path is not None else f"{len(repos)} stored repositories ({dotfile})"
        who = options.email or "all authors"
        print(f"Reading {where} for {who}", file=sys.stderr)

    counts = aggregate_repositories(
        repos,
        author=AuthorFilter(options.email),
        now=now,
        commit_source=commit_source,
        progress=sys.stderr if options.verbose else None,
    )
    grid = build_grid(counts, now)
    print_graph(grid, options, now, stream=stream)
    return 0
