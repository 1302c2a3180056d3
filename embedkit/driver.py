"""Abstract driver for services that offer an oEmbed API.

A driver is immutable configuration: its name, the domain fragments it
answers for, how to build the API URL, and which document fields hold the
identifier, title, thumbnail and embed markup. The fetch and render
pipelines operate on the Provider protocol, never on a concrete driver.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple, Union, runtime_checkable
from urllib.parse import urlencode

from . import fetcher, matching, renderer
from .model import CanonicalRecord, EmbedOptions


@runtime_checkable
class Provider(Protocol):
    """Capability set the pipelines need from a driver."""

    key: str
    api_format: str
    title_tag_name: str
    thumbnail_tag_name: str
    id_tag_name: Optional[str]
    embed_tag_name: str

    @property
    def name(self) -> str: ...

    @property
    def domains(self) -> Tuple[str, ...]: ...

    def is_match(self, url: str) -> bool: ...

    def build_api_url(self, params: Mapping[str, Any]) -> str: ...

    def about(self) -> Dict[str, Any]: ...


class ServiceDriver(ABC):
    """Base class for oEmbed service drivers.

    Subclasses supply a name and domains to the constructor and implement
    build_api_url() and about(). Field names, the embed tag and is_match()
    may be overridden.
    """

    # Machine-friendly registry key (e.g., "vimeo")
    key: str = ""

    # Format requested from the API: "xml" or "json"
    api_format: str = "xml"
    root_tag_name: str = "oembed"

    title_tag_name: str = "title"
    thumbnail_tag_name: str = "thumbnail_url"
    # None means the id is derived from the API URL
    id_tag_name: Optional[str] = None
    embed_tag_name: str = "html"

    def __init__(self, name: str, domains: Union[str, Sequence[str]]):
        if not domains:
            raise ValueError(f"Driver {name!r} needs at least one domain")
        self._name = name
        # Snapshot so later changes to the caller's list cannot leak in
        self._domains = domains if isinstance(domains, str) else tuple(domains)

    def __setattr__(self, attr: str, value: Any) -> None:
        if attr in ("_name", "_domains") and attr in self.__dict__:
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(attr, value)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name!r}>"

    @property
    def name(self) -> str:
        return self._name

    @property
    def domains(self) -> Tuple[str, ...]:
        """Domains as a tuple, even when configured with a single string."""
        if isinstance(self._domains, str):
            return (self._domains,)
        return tuple(self._domains)

    def get_domain(self) -> Union[str, Sequence[str]]:
        """Domains exactly as configured. Prefer ``domains``."""
        return self._domains

    def is_match(self, url: str) -> bool:
        """Check if this driver handles url. Override for stricter logic."""
        return matching.is_match(self.domains, url)

    @abstractmethod
    def build_api_url(self, params: Mapping[str, Any]) -> str:
        """Return the oEmbed API URL for the given parameters."""

    @abstractmethod
    def about(self) -> Dict[str, Any]:
        """Return the credits of the driver."""

    def get_jit_url_patterns(self) -> List[str]:
        """URL globs the host must allow for remote image manipulation.

        i.e. ['http://*.example.org/*', 'http://*.example.org/images/*']
        """
        return []

    def fetch(self, params: Mapping[str, Any]) -> CanonicalRecord:
        return fetcher.fetch(self, params)

    def get_embed_code(self, record: CanonicalRecord, options: EmbedOptions) -> str:
        """Markup for displaying a stored record in the host."""
        return renderer.render(record, options, embed_tag=self.embed_tag_name)


def build_oembed_url(endpoint: str, params: Mapping[str, Any], **extra: Any) -> str:
    """Standard oEmbed query: url, optional maxwidth/maxheight, then driver extras.

    Raises:
        ValueError: If params has no resource 'url'
    """
    resource = params.get("url") if params else None
    if not resource:
        raise ValueError("Missing resource 'url' parameter")

    query: Dict[str, Any] = {"url": str(resource)}
    if params.get("width"):
        query["maxwidth"] = int(params["width"])
    if params.get("height"):
        query["maxheight"] = int(params["height"])
    query.update({k: v for k, v in extra.items() if v is not None})
    return f"{endpoint}?{urlencode(query)}"
