"""Small types and Enums used by ghmirror."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Action(str, Enum):
    """What the runner did with one listed repository."""

    skip = "skip"
    clone = "clone"
    pull = "pull"


@dataclass(frozen=True)
class Repository:
    name: str
    clone_url: str
    fork: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Repository:
        return cls(name=data["name"], clone_url=data["clone_url"], fork=bool(data.get("fork")))


@dataclass(frozen=True)
class MirrorConfig:
    """Parsed invocation options for one run."""

    user: str
    token: str
    include_forks: bool = False
    extra_repos: tuple[str, ...] = ()
    verbose: bool = False
    dest: str = "."

    def wants(self, repo: Repository) -> bool:
        """Forks are only mirrored when asked for, globally or by name."""
        if not repo.fork:
            return True
        return self.include_forks or repo.name in self.extra_repos
