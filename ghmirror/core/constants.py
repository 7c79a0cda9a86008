"""Module holding constants used across ghmirror."""

API_BASE = "https://api.github.com"
GITHUB_API_ACCEPT = "application/vnd.github+json"
USER_AGENT = "ghmirror/0.1"
DEFAULT_DEST = "."
DEFAULT_GIT_BIN = "git"
PER_PAGE = 20
HTTP_TIMEOUT_SEC = 30
