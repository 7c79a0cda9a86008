"""Small helpers for running Git commands with combined output."""

from __future__ import annotations

import subprocess

from .constants import DEFAULT_GIT_BIN
from .errors import GitError


class GitClient:
    def __init__(self, git_bin: str = DEFAULT_GIT_BIN) -> None:
        self.git_bin = git_bin

    # ---------- process helpers ----------
    def _run_out(self, args: list[str]) -> str:
        """Run git in the current directory and return stdout+stderr, raising GitError on failure."""
        cmd = [self.git_bin, *args]
        try:
            proc = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT)
        except OSError as e:
            raise GitError(f"{' '.join(cmd)}: {e}") from e
        out = proc.stdout.decode("utf-8", "ignore").strip()
        if proc.returncode != 0:
            raise GitError(f"{' '.join(cmd)}: exit status {proc.returncode}, {out}")
        return out

    # ---------- repo ops ----------
    def clone(self, url: str) -> str:
        return self._run_out(["clone", url])

    def pull(self) -> str:
        return self._run_out(["pull"])
