from __future__ import annotations

from pathlib import Path

from .config import add_repo_paths
from .errors import ConfigError
from .git import discover_git_roots

DEFAULT_EXCLUDE_DIRNAMES = {".git", "vendor", "node_modules"}


def scan_folder(folder: Path, exclude_dirnames: set[str] | None = None) -> list[Path]:
    if not folder.is_dir():
        raise ConfigError(f"not a directory: {folder}")
    if exclude_dirnames is None:
        exclude_dirnames = DEFAULT_EXCLUDE_DIRNAMES
    return [p.resolve() for p in discover_git_roots(folder.resolve(), exclude_dirnames)]


def add_folder(folder: Path, dotfile: Path) -> list[Path]:
    print("Found folders:\n")
    found = scan_folder(folder)
    for repo in found:
        print(repo)
    add_repo_paths(dotfile, [str(p) for p in found])
    print(f"\nSuccessfully added {len(found)} repositories to {dotfile}\n")
    return found
