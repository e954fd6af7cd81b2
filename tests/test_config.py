from __future__ import annotations

from pathlib import Path

import pytest

from git_contrib.config import add_repo_paths, dotfile_path, load_repo_paths, merge_paths, resolve_self_email, save_repo_paths
from git_contrib.errors import ConfigError


def test_load_repo_paths_missing_file_is_empty(tmp_path: Path) -> None:
    assert load_repo_paths(tmp_path / "nope") == []


def test_load_repo_paths_skips_blank_lines(tmp_path: Path) -> None:
    p = tmp_path / ".git-contrib"
    p.write_text("/a\n\n/b\n", encoding="utf-8")
    assert load_repo_paths(p) == ["/a", "/b"]


def test_load_repo_paths_unreadable_file_is_empty(tmp_path: Path, capsys) -> None:
    p = tmp_path / ".git-contrib"
    p.write_bytes(b"\xff\xfe\xfa")
    assert load_repo_paths(p) == []
    assert "treating it as empty" in capsys.readouterr().err


def test_merge_paths_keeps_order_and_dedupes() -> None:
    assert merge_paths(["/c", "/a", "/c"], ["/a", "/b"]) == ["/a", "/b", "/c"]


def test_add_repo_paths_creates_parent_and_appends(tmp_path: Path) -> None:
    p = tmp_path / "cfg" / ".git-contrib"
    assert add_repo_paths(p, ["/a", "/b"]) == ["/a", "/b"]
    assert add_repo_paths(p, ["/b", "/c"]) == ["/a", "/b", "/c"]
    assert p.read_text(encoding="utf-8") == "/a\n/b\n/c"


def test_save_repo_paths_round_trips(tmp_path: Path) -> None:
    p = tmp_path / ".git-contrib"
    save_repo_paths(p, ["/x"])
    assert load_repo_paths(p) == ["/x"]


def test_dotfile_path_env_override(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("GIT_CONTRIB_DOTFILE", str(tmp_path / "list"))
    assert dotfile_path() == tmp_path / "list"
    monkeypatch.delenv("GIT_CONTRIB_DOTFILE")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert dotfile_path() == tmp_path / ".git-contrib"


def test_resolve_self_email(tmp_path: Path, monkeypatch) -> None:
    global_cfg = tmp_path / "global.gitconfig"
    global_cfg.write_text("[user]\n\temail = you@example.com\n", encoding="utf-8")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_cfg))
    assert resolve_self_email() == "you@example.com"

    global_cfg.write_text("", encoding="utf-8")
    with pytest.raises(ConfigError):
        resolve_self_email()
