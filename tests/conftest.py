"""
Shared fixtures: isolated environment, and fakes for the GitHub listing and git.

The fakes record the working directory each git call runs in so tests can
check where clones and pulls happen.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from ghmirror.core.errors import GitError
from ghmirror.core.types import Repository

_ENV_VARS = (
    "GITHUB_TOKEN",
    "GHMIRROR_TOKEN",
    "GHMIRROR_API_BASE",
    "GHMIRROR_GIT_BIN",
    "GHMIRROR_HTTP_TIMEOUT",
    "GHMIRROR_DEFAULT_DEST",
)


@pytest.fixture(autouse=True)
def _isolated(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class FakeGitHub:
    def __init__(self, repos: list[Repository]):
        self.repos = repos
        self.users: list[str] = []

    def list_user_repos(self, user: str) -> list[Repository]:
        self.users.append(user)
        return list(self.repos)


class FakeGit:
    def __init__(self, fail_on: set[str] | None = None):
        self.calls: list[tuple[str, str | None, Path]] = []
        self.fail_on = fail_on or set()

    def clone(self, url: str) -> str:
        self.calls.append(("clone", url, Path.cwd()))
        if "clone" in self.fail_on:
            raise GitError(f"git clone {url}: exit status 128, fatal: repository not found")
        return f"Cloning into '{url.rsplit('/', 1)[-1].removesuffix('.git')}'..."

    def pull(self) -> str:
        self.calls.append(("pull", None, Path.cwd()))
        if "pull" in self.fail_on:
            raise GitError("git pull: exit status 1, fatal: not a git repository")
        return "Already up to date."


def repo(name: str, fork: bool = False) -> Repository:
    return Repository(name=name, clone_url=f"https://github.com/alice/{name}.git", fork=fork)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return Path(os.getcwd())
