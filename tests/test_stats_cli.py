from __future__ import annotations

import io
import sys

import pytest

from git_contrib.cli import main
from git_contrib.stats_cli import _build_parser, options_from_args


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


def _options(argv: list[str]):
    return options_from_args(_build_parser().parse_args(argv))


@pytest.fixture(autouse=True)
def _no_env_color(monkeypatch) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)


def test_color_on_for_terminal(monkeypatch) -> None:
    monkeypatch.setattr(sys, "stdout", _TtyStream())
    assert _options([]).use_color is True


def test_no_color_env_disables_color(monkeypatch) -> None:
    monkeypatch.setattr(sys, "stdout", _TtyStream())
    monkeypatch.setenv("NO_COLOR", "1")
    assert _options([]).use_color is False


def test_no_color_flag_disables_color(monkeypatch) -> None:
    monkeypatch.setattr(sys, "stdout", _TtyStream())
    assert _options(["--no-color"]).use_color is False


def test_non_terminal_stdout_disables_color(monkeypatch) -> None:
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    assert _options([]).use_color is False


def test_weekdays_flag_sets_full_labels() -> None:
    assert _options(["-w"]).full_weekdays is True
    assert _options([]).full_weekdays is False


def test_weekdays_flag_labels_every_row(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("GIT_CONTRIB_DOTFILE", str(tmp_path / "dotfile"))
    assert main(["-w", "--no-color"]) == 0
    rows = capsys.readouterr().out.splitlines()[1:]
    assert [r[:5] for r in rows] == [" S   ", " M   ", " T   ", " W   ", " T   ", " F   ", " S   "]
