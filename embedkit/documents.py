"""Descriptor document parsing and field lookup.

oEmbed providers answer in XML (root tag ``oembed``) or JSON. Both are wrapped
in a DescriptorDocument so field extraction is a single routine regardless of
the provider's format.
"""
from __future__ import annotations

import json
import logging
import xml.etree.ElementTree as ET
from typing import Any, Optional, Union
from xml.sax.saxutils import escape

from .model import DocumentParseError

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Could not load XML from oEmbed remote service"


def _local_name(tag: str) -> str:
    """Strip an ElementTree '{namespace}' prefix."""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


class DescriptorDocument:
    """A parsed descriptor document (XML element tree or JSON object)."""

    def __init__(self, root: Union[ET.Element, Any], fmt: str, text: str = ""):
        self.root = root
        self.format = fmt
        self.text = text or self.serialize()

    def serialize(self) -> str:
        if self.format == "xml":
            return ET.tostring(self.root, encoding="unicode")
        return json.dumps(self.root)

    def first_text(self, tag: str) -> Optional[str]:
        """Return the text of the first node named ``tag`` in document order, or None."""
        if not tag:
            return None
        if self.format == "xml":
            for el in self.root.iter():
                if isinstance(el.tag, str) and _local_name(el.tag) == tag:
                    return "".join(el.itertext())
            return None
        return _first_json_value(self.root, tag)


def _first_json_value(node: Any, key: str) -> Optional[str]:
    # Depth-first, keys of a level before its children
    if isinstance(node, dict):
        if key in node and node[key] is not None and not isinstance(node[key], (dict, list)):
            return str(node[key])
        for value in node.values():
            found = _first_json_value(value, key)
            if found is not None:
                return found
    elif isinstance(node, list):
        for item in node:
            found = _first_json_value(item, key)
            if found is not None:
                return found
    return None


def parse_document(text: str) -> DescriptorDocument:
    """Parse descriptor text, sniffing XML vs JSON from the first character.

    Raises:
        DocumentParseError: If the text is empty or malformed
    """
    if not text or not text.strip():
        raise DocumentParseError("Descriptor document is empty")

    body = text.strip()
    if body.startswith("<"):
        try:
            return DescriptorDocument(ET.fromstring(body.encode("utf-8")), "xml", body)
        except ET.ParseError as e:
            raise DocumentParseError(f"Malformed XML descriptor: {e}") from e

    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise DocumentParseError(f"Malformed JSON descriptor: {e}") from e
    if not isinstance(data, (dict, list)):
        raise DocumentParseError("JSON descriptor is not an object")
    return DescriptorDocument(data, "json", body)


def get_first_element_text(doc: DescriptorDocument, tag_name: str) -> Optional[str]:
    return doc.first_text(tag_name)


def error_document(message: str = FETCH_ERROR_MESSAGE) -> str:
    """Build the placeholder payload stored when a fetch fails."""
    return f"<error>{escape(message)}</error>"
