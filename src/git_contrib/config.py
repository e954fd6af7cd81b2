from __future__ import annotations

import os
import sys
from pathlib import Path

from .errors import ConfigError
from .git import get_global_email

DOTFILE_NAME = ".git-contrib"
DOTFILE_ENV = "GIT_CONTRIB_DOTFILE"


def dotfile_path() -> Path:
    override = os.environ.get(DOTFILE_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / DOTFILE_NAME


def load_repo_paths(path: Path) -> list[str]:
    """
    Stored repository paths, one per line. A missing or unreadable file means
    there are no stored repositories yet.
    """
    if not path.exists():
        return []
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Note: cannot read {path} ({e}); treating it as empty.", file=sys.stderr)
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def merge_paths(new: list[str], existing: list[str]) -> list[str]:
    out = list(existing)
    seen = set(existing)
    for p in new:
        if p not in seen:
            out.append(p)
            seen.add(p)
    return out


def save_repo_paths(path: Path, repos: list[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(repos), encoding="utf-8")


def add_repo_paths(path: Path, new: list[str]) -> list[str]:
    repos = merge_paths(new, load_repo_paths(path))
    save_repo_paths(path, repos)
    return repos


def resolve_self_email() -> str:
    email = get_global_email()
    if not email:
        raise ConfigError("--self needs user.email in your global git config (git config --global user.email you@example.com)")
    return email
