from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import BUILD_DATE, COMMIT_HASH, __version__, stats_cli
from .config import dotfile_path
from .errors import GitContribError
from .scan import add_folder


def version_text() -> str:
    lines = [f"git-contrib version {__version__}"]
    if BUILD_DATE:
        lines.append(f"Built on {BUILD_DATE}")
    if COMMIT_HASH:
        lines.append(f"Commit {COMMIT_HASH}")
    return "\n".join(lines)


def _dispatch(argv: list[str]) -> int:
    if argv and argv[0] in ("-h", "--help"):
        p = stats_cli._build_parser()
        p.prog = "git-contrib"
        p.print_help()
        print("")
        print("commands:")
        print("  add <folder>   Find git repositories under <folder> and remember them (alias: scan).")
        print("  version        Print version and build information.")
        print("")
        print("Run `git-contrib <command> --help` for command-specific options.")
        return 0
    if argv and argv[0] in ("version", "--version"):
        print(version_text())
        return 0
    if argv and argv[0] in ("add", "scan"):
        p = argparse.ArgumentParser(
            prog=f"git-contrib {argv[0]}",
            description="Scan a folder for git repositories and add them to the repository list.",
        )
        p.add_argument("folder", type=Path, help="Folder to scan recursively.")
        p.add_argument("--dotfile", type=Path, default=None, help="Repository list file (default: ~/.git-contrib or $GIT_CONTRIB_DOTFILE).")
        args = p.parse_args(argv[1:])
        add_folder(args.folder, args.dotfile if args.dotfile is not None else dotfile_path())
        return 0
    return stats_cli.main(argv)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        return _dispatch(argv)
    except GitContribError as e:
        print(f"error: {e}", file=sys.stderr)
        return e.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
