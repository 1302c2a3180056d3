"""Network utilities for fetching provider descriptor documents.

Provides a lazily built HTTP session and a single-attempt GET used by the
fetch pipeline. Retries are deliberately disabled at the adapter level: each
fetch performs exactly one outbound request.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

import requests
import urllib3
from requests.adapters import HTTPAdapter
from urllib3.exceptions import InsecureRequestWarning
from urllib3.util.retry import Retry

from ..model import TransportError
from .config import get_network_config

logger = logging.getLogger(__name__)

# Global session (lazy-initialized)
_SESSION: Optional[requests.Session] = None


def build_session() -> requests.Session:
    """Build a configured requests session with default headers and no retries.

    Returns:
        Configured Session instance
    """
    session = requests.Session()

    retry = Retry(total=0, connect=0, read=0, raise_on_status=False)
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    session.headers.update({
        # Some providers answer 403 to unknown agents
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/124.0.0.0 Safari/537.36"
        ),
        "Accept": "application/xml, application/json;q=0.9, */*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    })

    return session


def get_session() -> requests.Session:
    """Get the global HTTP session (lazy initialization).

    Returns:
        Configured Session instance
    """
    global _SESSION
    if _SESSION is None:
        _SESSION = build_session()
    return _SESSION


def fetch_text(
    url: str,
    provider_key: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> str:
    """HTTP GET returning the decoded response body.

    Args:
        url: Fully built API URL
        provider_key: Provider identifier used to look up network settings
        headers: Additional per-call headers

    Returns:
        Response body as text

    Raises:
        TransportError: On connection failures, timeouts or non-2xx status
    """
    net = get_network_config(provider_key)
    timeout = float(net.get("timeout_s") or 15)
    verify = bool(net.get("verify_ssl", True))

    # Merge headers: session defaults < provider headers < per-call headers
    req_headers = {str(k): str(v) for k, v in net.get("headers", {}).items() if v is not None}
    if headers:
        req_headers.update(headers)

    if not verify:
        urllib3.disable_warnings(InsecureRequestWarning)

    try:
        resp = get_session().get(url, headers=req_headers or None, timeout=timeout, verify=verify)
        resp.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise TransportError(url, str(e)) from e

    return resp.text
