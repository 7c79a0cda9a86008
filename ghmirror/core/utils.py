"""Lightweight helpers: working directory scope, Link headers, name lists."""
from __future__ import annotations

import os
import re
from collections.abc import Iterator
from contextlib import contextmanager
from urllib.parse import parse_qs, urlparse

_LINK_RE = re.compile(r'<([^>]+)>\s*;\s*rel="?([^",]+)"?')


@contextmanager
def working_directory(path: str) -> Iterator[str]:
    """chdir into path for the duration of the block, then restore the previous cwd."""
    previous = os.getcwd()
    os.chdir(path)
    try:
        yield previous
    finally:
        os.chdir(previous)


def next_page(link_header: str | None) -> int | None:
    """Return the page number of the rel="next" entry of a Link header, if any."""
    if not link_header:
        return None
    for url, rel in _LINK_RE.findall(link_header):
        if rel != "next":
            continue
        page = parse_qs(urlparse(url).query).get("page")
        if page and page[0].isdigit():
            return int(page[0])
    return None


def split_names(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(n.strip() for n in value.split(",") if n.strip())


_TRUE = {"1", "t", "T", "true", "TRUE", "True"}
_FALSE = {"0", "f", "F", "false", "FALSE", "False"}


def parse_bool(value: str) -> bool:
    """Parse a command-line boolean the way Go's flag package spells them."""
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"invalid boolean value {value!r}")
