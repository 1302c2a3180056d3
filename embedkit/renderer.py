"""Re-render stored descriptor documents into embed markup.

Rendering never touches the network. It reads the document persisted in a
CanonicalRecord, extracts the player markup and, for the sidebar, rewrites
its width/height attributes so it fits the narrower column.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from .documents import parse_document
from .model import (
    CanonicalRecord,
    EmbedLocation,
    EmbedOptions,
    RenderNodeMissingError,
    RenderSourceMissingError,
)

logger = logging.getLogger(__name__)

_WIDTH_RE = re.compile(r'width="([^"]*)"')
_HEIGHT_RE = re.compile(r'height="([^"]*)"')


def get_embed_size(options: EmbedOptions, size: str) -> Optional[int]:
    """Return the width or height to use for a placement.

    The side-specific value wins only when the location is the sidebar and
    that value is set; otherwise the main size is used.

    Args:
        options: Placement options
        size: "width" or "height"
    """
    if size not in ("width", "height"):
        raise ValueError(f"Unknown size {size!r}")
    side = getattr(options, f"{size}_side")
    if options.location != EmbedLocation.SIDEBAR or side is None:
        return getattr(options, size)
    return side


def resize_markup(markup: str, width, height) -> str:
    """Replace every width="..." and height="..." attribute value, leaving the rest untouched."""
    markup = _WIDTH_RE.sub(lambda _m: f'width="{width}"', markup)
    return _HEIGHT_RE.sub(lambda _m: f'height="{height}"', markup)


def render(record: CanonicalRecord, options: EmbedOptions, embed_tag: str = "html") -> str:
    """Build display markup from a stored record.

    Raises:
        RenderSourceMissingError: If the record holds no document
        DocumentParseError: If the stored document cannot be parsed
        RenderNodeMissingError: If the document has no embed-markup node
    """
    if not record.raw_document or not record.raw_document.strip():
        raise RenderSourceMissingError(f"No stored document to render for {record.source_url or 'record'}")

    doc = parse_document(record.raw_document)

    # Could be child elements rather than text if the provider did not escape its html
    player = doc.first_text(embed_tag)
    if player is None:
        raise RenderNodeMissingError(embed_tag)

    if options.location == EmbedLocation.SIDEBAR:
        w = get_embed_size(options, "width")
        h = get_embed_size(options, "height")
        logger.debug("Resizing embed for sidebar to %sx%s", w, h)
        player = resize_markup(player, w, h)

    return player
