"""GitHub API operations: bearer-authenticated repository listing."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from typing import Any
from urllib.parse import quote, urlencode

from .constants import API_BASE, GITHUB_API_ACCEPT, HTTP_TIMEOUT_SEC, PER_PAGE, USER_AGENT
from .errors import GitHubError
from .types import Repository
from .utils import next_page

logger = logging.getLogger(__name__)


class GitHubClient:
    def __init__(self, token: str, api_base: str = API_BASE, timeout: float = HTTP_TIMEOUT_SEC) -> None:
        self.token = token
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    # ---------- low-level HTTP ----------
    def _request_json(self, url: str) -> tuple[Any, str | None]:
        """GET url and return (decoded body, Link header)."""
        req = urllib.request.Request(url)
        req.add_header("Accept", GITHUB_API_ACCEPT)
        req.add_header("User-Agent", USER_AGENT)
        req.add_header("Authorization", f"Bearer {self.token}")
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                body = resp.read()
                link = resp.headers.get("Link")
        except urllib.error.HTTPError as e:
            raise GitHubError(f"GET {url}: {e.code} {e.reason}") from e
        except urllib.error.URLError as e:
            raise GitHubError(f"GET {url}: {e.reason}") from e
        try:
            return json.loads(body.decode("utf-8")), link
        except ValueError as e:
            raise GitHubError(f"GET {url}: invalid JSON: {e}") from e

    # ---------- public API ----------
    def list_user_repos(self, user: str, per_page: int = PER_PAGE) -> list[Repository]:
        """All repositories owned by user, following Link rel="next" until exhausted."""
        repos: list[Repository] = []
        page: int | None = 1
        while page is not None:
            query = urlencode({"per_page": per_page, "page": page})
            url = f"{self.api_base}/users/{quote(user, safe='')}/repos?{query}"
            data, link = self._request_json(url)
            if not isinstance(data, list):
                raise GitHubError(f"GET {url}: expected a list of repositories")
            try:
                repos.extend(Repository.from_api(r) for r in data)
            except (KeyError, TypeError) as e:
                raise GitHubError(f"GET {url}: malformed repository entry: {e}") from e
            logger.debug("page %d: %d repositories", page, len(data))
            page = next_page(link)
        return repos
