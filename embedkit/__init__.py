"""embedkit: oEmbed provider abstraction.

This package selects the driver responsible for a resource URL, fetches and
normalizes the provider's oEmbed descriptor into a storable record, and
re-renders stored records into size-adjusted embed markup.

Key modules:
- core: Ambient utilities (config, network, naming)
- model: CanonicalRecord, EmbedOptions and the error hierarchy
- documents: XML/JSON descriptor parsing and field lookup
- matching: Domain matching strategies
- driver: Provider protocol and ServiceDriver base class
- fetcher: fetch() pipeline
- renderer: render() pipeline
- providers: Central registry of drivers and provider selection

Drivers:
- vimeo_driver: Vimeo
- youtube_driver: YouTube
- flickr_driver: Flickr
- dailymotion_driver: Dailymotion
- soundcloud_driver: SoundCloud

Usage:
    from embedkit import PROVIDERS, select_provider, fetch, render
    from embedkit.model import EmbedOptions
"""

from .driver import Provider, ServiceDriver
from .fetcher import fetch
from .model import CanonicalRecord, EmbedLocation, EmbedOptions
from .providers import PROVIDERS, get_enabled_providers, get_jit_url_patterns, select_provider
from .renderer import render

__all__ = [
    "Provider",
    "ServiceDriver",
    "fetch",
    "render",
    "CanonicalRecord",
    "EmbedLocation",
    "EmbedOptions",
    "PROVIDERS",
    "get_enabled_providers",
    "get_jit_url_patterns",
    "select_provider",
]
