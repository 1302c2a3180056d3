"""Handle generation for embedkit.

Provides the default slug collaborator used to derive resource identifiers
from API URLs when a driver declares no identifier field.
"""
from __future__ import annotations

import re
import unicodedata


def strip_accents(text: str) -> str:
    if text is None:
        return ""
    nfkd = unicodedata.normalize("NFKD", str(text))
    return "".join(ch for ch in nfkd if not unicodedata.combining(ch))


def create_handle(value: str, max_length: int = 255, delimiter: str = "-") -> str:
    """Convert an arbitrary string (typically a URL) into a URL-safe handle.

    Lowercases, strips accents and markup, and collapses every run of
    non-alphanumeric characters into a single delimiter. The result is
    deterministic for a given input.

    Args:
        value: Input string to convert
        max_length: Maximum length of the handle
        delimiter: Separator placed between alphanumeric runs

    Returns:
        Handle string (empty if the input has no alphanumeric content)
    """
    if value is None:
        return ""

    s = strip_accents(str(value))
    # Drop markup
    s = re.sub(r"<[^>]*>", "", s)
    s = s.lower()
    s = re.sub(r"[^0-9a-z]+", delimiter, s)
    s = s.strip(delimiter)

    if len(s) > max_length:
        s = s[:max_length].rstrip(delimiter)
    return s
