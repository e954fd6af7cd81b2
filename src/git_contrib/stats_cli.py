from __future__ import annotations

import argparse
import dataclasses
import os
import sys
from pathlib import Path

from .config import dotfile_path, resolve_self_email
from .errors import ConfigError
from .models import GraphOptions
from .stats_run import run_stats


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show a contribution graph of the last six months of git commits.")
    parser.add_argument("-e", "--email", type=str, default="", help="Only count commits whose author email matches exactly.")
    parser.add_argument("-s", "--self", dest="self_email", action="store_true", help="Use user.email from your global git config as --email.")
    parser.add_argument("-c", "--count", action="store_true", help="Print the commit count inside each cell.")
    parser.add_argument("-d", "--days", action="store_true", help="Print the day of the month inside each cell.")
    parser.add_argument(
        "-p",
        "--path",
        type=Path,
        default=None,
        help="Analyze this repository only (default: every repository added with `git-contrib add`).",
    )
    parser.add_argument("-w", "--weekdays", action="store_true", help="Label every weekday row instead of Mon/Wed/Fri.")
    parser.add_argument("--no-color", action="store_true", help="Plain text cells (also when NO_COLOR is set or stdout is not a terminal).")
    parser.add_argument("--dotfile", type=Path, default=None, help="Repository list file (default: ~/.git-contrib or $GIT_CONTRIB_DOTFILE).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Report each repository read on stderr.")
    return parser


def _use_color(args: argparse.Namespace) -> bool:
    if args.no_color or os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


def options_from_args(args: argparse.Namespace) -> GraphOptions:
    options = GraphOptions(
        email=str(args.email or "").strip(),
        show_count=bool(args.count),
        show_days=bool(args.days),
        full_weekdays=bool(args.weekdays),
        use_color=_use_color(args),
        verbose=bool(args.verbose),
    )
    options.validate()
    if args.self_email:
        if options.email:
            raise ConfigError("--email and --self are mutually exclusive")
        options = dataclasses.replace(options, email=resolve_self_email())
    return options


def main(argv: list[str]) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    options = options_from_args(args)
    return run_stats(
        options,
        path=args.path.resolve() if args.path is not None else None,
        dotfile=args.dotfile if args.dotfile is not None else dotfile_path(),
    )
