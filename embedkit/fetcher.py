"""Fetch-normalize pipeline turning a provider API response into a CanonicalRecord.

fetch() never raises: every failure (URL building, transport, parsing,
missing required fields) collapses into a record with ``failed=True`` and an
``<error>`` payload, so hosts always receive something storable.
"""
from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

from .core.naming import create_handle
from .core.network import fetch_text
from .documents import DescriptorDocument, error_document, parse_document
from .model import CanonicalRecord, EmbedError, MissingFieldError

if TYPE_CHECKING:
    from .driver import Provider

logger = logging.getLogger(__name__)


def fetch_document(url: str, provider_key: Optional[str] = None) -> DescriptorDocument:
    """Perform the single network fetch and parse the response.

    Returns:
        The parsed document; its source text is kept in ``.text``

    Raises:
        TransportError: On network failures or non-2xx status
        DocumentParseError: If the body is not a parseable document
    """
    return parse_document(fetch_text(url, provider_key=provider_key))


# fetch() shadows the name with its collaborator argument
_fetch_document = fetch_document


def extract_fields(
    provider: "Provider",
    doc: DescriptorDocument,
    source_url: str,
    slugify: Callable[[str], str] = create_handle,
) -> dict:
    """Read id, title and thumbnail from a document using the driver's field names.

    Raises:
        MissingFieldError: If the driver declares an id field the document lacks
    """
    id_tag = provider.id_tag_name
    if id_tag is None:
        res_id = slugify(source_url)
    else:
        res_id = doc.first_text(id_tag)
        if res_id is None:
            raise MissingFieldError(id_tag)

    return {
        "id": res_id,
        "title": doc.first_text(provider.title_tag_name),
        "thumbnail_url": doc.first_text(provider.thumbnail_tag_name),
    }


def fetch(
    provider: "Provider",
    params: Mapping[str, Any],
    slugify: Callable[[str], str] = create_handle,
    fetch_document: Optional[Callable[[str], DescriptorDocument]] = None,
) -> CanonicalRecord:
    """Query a provider once and normalize its answer.

    Args:
        provider: Driver responsible for the resource
        params: Driver-specific parameters (usually {"url": resource_url})
        slugify: Handle generator used when the driver declares no id field
        fetch_document: Transport + parse collaborator taking the API URL; defaults to
            the HTTP fetch with the driver's network settings

    Returns:
        CanonicalRecord; check ``failed`` before using id/title/thumbnail_url
    """
    try:
        url = provider.build_api_url(params)
    except Exception as e:
        logger.warning("%s could not build an API URL from %r: %s", provider.name, params, e)
        return CanonicalRecord(
            source_url="",
            raw_document=error_document(),
            failed=True,
            error=f"Invalid parameters: {e}",
        )

    if fetch_document is None:
        fetch_document = functools.partial(_fetch_document, provider_key=provider.key or None)

    logger.info("Fetching oEmbed data from %s for %s", url, provider.name)
    try:
        doc = fetch_document(url)
        fields = extract_fields(provider, doc, url, slugify=slugify)
    except EmbedError as e:
        logger.warning("oEmbed fetch failed for %s: %s", url, e)
        return CanonicalRecord(source_url=url, raw_document=error_document(), failed=True, error=str(e))
    except Exception as e:
        logger.exception("Unexpected error while fetching oEmbed data from %s", url)
        return CanonicalRecord(source_url=url, raw_document=error_document(), failed=True, error=str(e))

    return CanonicalRecord(
        source_url=url,
        raw_document=doc.text,
        id=fields["id"],
        title=fields["title"],
        thumbnail_url=fields["thumbnail_url"],
    )

