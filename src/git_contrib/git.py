from __future__ import annotations

import datetime as dt
import os
import subprocess
import sys
from pathlib import Path

from .errors import ConfigError, RepoAccessError
from .models import Commit


def run_git(args: list[str], cwd: Path, timeout_s: int = 300) -> tuple[int, str, str]:
    proc = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
        timeout=timeout_s,
    )
    return proc.returncode, proc.stdout, proc.stderr


def discover_git_roots(root: Path, exclude_dirnames: set[str]) -> list[Path]:
    roots: list[Path] = []

    def onerror(err: OSError) -> None:
        print(f"Note: skipping {err.filename} ({err.strerror})", file=sys.stderr)

    for dirpath, dirnames, filenames in os.walk(root, onerror=onerror):
        has_git = ".git" in dirnames or ".git" in filenames
        if has_git:
            roots.append(Path(dirpath))
        dirnames[:] = sorted(d for d in dirnames if d not in exclude_dirnames and d != ".git")
    return roots


def get_global_email() -> str:
    try:
        code, out, _ = run_git(["config", "--global", "--get", "user.email"], cwd=Path.cwd())
    except (OSError, subprocess.TimeoutExpired) as e:
        raise ConfigError(f"cannot read global git config: {e}") from e
    if code == 0:
        return out.strip()
    return ""


def parse_author_time(value: str) -> dt.datetime | None:
    s = (value or "").strip()
    if not s:
        return None
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        d = dt.datetime.fromisoformat(s)
    except ValueError:
        return None
    if d.tzinfo is None:
        d = d.replace(tzinfo=dt.timezone.utc)
    return d


def read_commits(repo: Path) -> list[Commit]:
    """
    Commits reachable from HEAD, newest first, with the author email and the
    author date in the author's own UTC offset.

    Raises RepoAccessError when `repo` is not a git repository or HEAD does not
    resolve to a commit (e.g. a freshly initialised repository).
    """
    path = str(repo)
    if not repo.is_dir():
        raise RepoAccessError(path, "no such directory")
    try:
        code, _, err = run_git(["rev-parse", "--git-dir"], cwd=repo)
        if code != 0:
            raise RepoAccessError(path, "not a git repository")
        code, out, err = run_git(["rev-parse", "--verify", "--quiet", "HEAD^{commit}"], cwd=repo)
        if code != 0 or not out.strip():
            raise RepoAccessError(path, "cannot resolve HEAD (no commits yet?)")
        head = out.strip()
        code, out, err = run_git(["log", "--format=%ae%x09%aI", head], cwd=repo)
    except (OSError, subprocess.TimeoutExpired) as e:
        raise RepoAccessError(path, f"failed to run git: {e}") from e
    if code != 0:
        raise RepoAccessError(path, f"git log failed: {err.strip()}")

    commits: list[Commit] = []
    for line in out.splitlines():
        if not line.strip():
            continue
        parts = line.split("\t", 1)
        if len(parts) != 2:
            continue
        when = parse_author_time(parts[1])
        if when is None:
            continue
        commits.append(Commit(author_email=parts[0].strip(), authored_at=when))
    return commits
