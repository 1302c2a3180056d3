"""Domain matching strategies used to decide which driver handles a URL."""
from __future__ import annotations

import fnmatch
from typing import Iterable
from urllib.parse import urlparse


def is_match(domains: Iterable[str], url: str) -> bool:
    """Return True if any domain fragment occurs literally anywhere in url.

    No case or scheme normalization is done. An empty url never matches, and
    empty fragments are ignored since they would be found in any string.
    """
    if not url:
        return False
    for d in domains:
        if d and d in url:
            return True
    return False


def _host_of(url: str) -> str:
    try:
        host = urlparse(url).netloc.lower()
    except ValueError:
        return ""
    # Strip credentials and port
    host = host.rsplit("@", 1)[-1]
    if ":" in host:
        host = host.split(":", 1)[0]
    return host


def host_matches(domains: Iterable[str], url: str) -> bool:
    """Stricter check: the URL host equals a domain or is one of its subdomains."""
    host = _host_of(url or "")
    if not host:
        return False
    for d in domains:
        part = (d or "").lower()
        if part and (host == part or host.endswith("." + part)):
            return True
    return False


def glob_matches(patterns: Iterable[str], url: str) -> bool:
    """Match the full URL against shell-style patterns like 'https://*.example.com/*'."""
    if not url:
        return False
    return any(p and fnmatch.fnmatchcase(url, p) for p in patterns)
