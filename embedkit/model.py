"""Data models for embedkit.

Provides the CanonicalRecord produced by every fetch, the EmbedOptions that
control re-rendering, and the exception hierarchy shared by the pipeline.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .core.config import get_embed_defaults


class EmbedError(Exception):
    """Base class for every failure raised by embedkit."""


class TransportError(EmbedError):
    """The provider API could not be reached or answered with a non-2xx status."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Could not fetch {url}: {reason}")


class DocumentParseError(EmbedError):
    """A descriptor document is neither well-formed XML nor JSON."""


class MissingFieldError(EmbedError):
    """A field the driver declares as required is absent from the document."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Required field '{field}' is missing from the descriptor document")


class RenderSourceMissingError(EmbedError):
    """A stored record has no document to render."""


class RenderNodeMissingError(EmbedError):
    """The stored document has no embed-markup node."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Stored document has no <{tag}> node")


class EmbedLocation(str, Enum):
    """Where the host displays the embed."""

    MAIN = "main"
    SIDEBAR = "sidebar"


@dataclass(frozen=True)
class CanonicalRecord:
    """Normalized result of querying a provider for one resource.

    Attributes:
        source_url: The exact API URL that was requested
        raw_document: Fetched document text, or an <error> payload on failure (never empty)
        id: Identifier read from the driver's id field, or a handle derived from source_url
        title: Title read from the driver's title field
        thumbnail_url: Thumbnail read from the driver's thumbnail field
        failed: True if building the URL, fetching or extracting failed
        error: Human-readable cause of the failure, if any
    """

    source_url: str
    raw_document: str
    id: Optional[str] = None
    title: Optional[str] = None
    thumbnail_url: Optional[str] = None
    failed: bool = False
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the storage column layout used by hosts."""
        d = asdict(self)
        return {
            "url": d["source_url"],
            "oembed_xml": d["raw_document"],
            "res_id": d["id"],
            "title": d["title"],
            "thumbnail_url": d["thumbnail_url"],
            "failed": d["failed"],
            "error": d["error"],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CanonicalRecord":
        """Rebuild a record from a storage row produced by to_dict()."""
        return cls(
            source_url=str(data.get("url") or ""),
            raw_document=str(data.get("oembed_xml") or ""),
            id=data.get("res_id"),
            title=data.get("title"),
            thumbnail_url=data.get("thumbnail_url"),
            failed=bool(data.get("failed", False)),
            error=data.get("error"),
        )


@dataclass(frozen=True)
class EmbedOptions:
    """Placement options controlling how stored embed markup is resized.

    width_side/height_side only apply when location is SIDEBAR.
    """

    location: EmbedLocation = EmbedLocation.MAIN
    width: int = 640
    height: int = 360
    width_side: Optional[int] = None
    height_side: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmbedOptions":
        """Build options from a host field-settings mapping.

        Unknown locations are treated as main; blank main sizes fall back to
        640x360 and blank side sizes stay None.
        """
        try:
            location = EmbedLocation(data.get("location") or EmbedLocation.MAIN)
        except ValueError:
            location = EmbedLocation.MAIN

        def _opt_int(key: str) -> Optional[int]:
            val = data.get(key)
            if val is None or val == "":
                return None
            return int(val)

        return cls(
            location=location,
            width=_opt_int("width") or 640,
            height=_opt_int("height") or 360,
            width_side=_opt_int("width_side"),
            height_side=_opt_int("height_side"),
        )

    @classmethod
    def from_config(cls, location: EmbedLocation = EmbedLocation.MAIN) -> "EmbedOptions":
        """Build options from the 'embed' configuration section."""
        return cls.from_dict({**get_embed_defaults(), "location": EmbedLocation(location).value})
