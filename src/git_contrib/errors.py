from __future__ import annotations


class GitContribError(RuntimeError):
    exit_code = 1


class ConfigError(GitContribError):
    """Conflicting or missing options; reported before any output."""

    exit_code = 2


class RepoAccessError(GitContribError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
