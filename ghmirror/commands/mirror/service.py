"""Services for the mirror command."""

from __future__ import annotations

import logging
import os

from ...core.git_client import GitClient
from ...core.github_client import GitHubClient
from ...core.types import Action, MirrorConfig, Repository
from ...core.utils import working_directory

logger = logging.getLogger(__name__)


def _log_output(out: str) -> None:
    if out:
        logger.info("%s", out)


def mirror_repo(repo: Repository, git: GitClient) -> Action:
    """Clone repo into the current directory, or pull it if a same-named entry exists."""
    try:
        os.stat(repo.name)
    except FileNotFoundError:
        logger.info("cloning %s", repo.name)
        _log_output(git.clone(repo.clone_url))
        return Action.clone

    with working_directory(repo.name):
        logger.info("pulling %s", repo.name)
        _log_output(git.pull())
    return Action.pull


def mirror_all(config: MirrorConfig, github: GitHubClient, git: GitClient) -> list[tuple[str, Action]]:
    """List the user's repositories, then clone or pull each wanted one inside config.dest.

    Stops at the first failure; the exception propagates to the caller.
    """
    repos = github.list_user_repos(config.user)
    logger.info("found %d repositories for %s", len(repos), config.user)

    os.makedirs(config.dest, exist_ok=True)
    results: list[tuple[str, Action]] = []
    with working_directory(config.dest):
        for repo in repos:
            if not config.wants(repo):
                logger.info("%s is a fork, skipping it.", repo.name)
                results.append((repo.name, Action.skip))
                continue
            results.append((repo.name, mirror_repo(repo, git)))

    counts = {a: sum(1 for _, done in results if done is a) for a in Action}
    logger.info(
        "Done. cloned=%d, pulled=%d, skipped=%d.",
        counts[Action.clone],
        counts[Action.pull],
        counts[Action.skip],
    )
    return results
