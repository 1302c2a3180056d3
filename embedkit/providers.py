"""Providers registry mapping provider keys to driver instances.

Centralizes driver imports and the provider selection used by hosts. Drivers
are immutable, so the registry instances can be shared between callers;
selection always takes an explicit ordered collection and the first match
wins.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .core.config import is_provider_enabled
from .dailymotion_driver import DailymotionDriver
from .driver import Provider, ServiceDriver
from .flickr_driver import FlickrDriver
from .soundcloud_driver import SoundCloudDriver
from .vimeo_driver import VimeoDriver
from .youtube_driver import YouTubeDriver

logger = logging.getLogger(__name__)

PROVIDERS: dict[str, ServiceDriver] = {
    "vimeo": VimeoDriver(),
    "youtube": YouTubeDriver(),
    "flickr": FlickrDriver(),
    "dailymotion": DailymotionDriver(),
    "soundcloud": SoundCloudDriver(),
}


def get_enabled_providers() -> List[ServiceDriver]:
    """Registry drivers in order, minus those switched off in the 'providers' config section."""
    return [drv for key, drv in PROVIDERS.items() if is_provider_enabled(key)]


def select_provider(url: str, providers: Sequence[Provider]) -> Optional[Provider]:
    """Return the first provider whose is_match() accepts url, or None.

    Args:
        url: Resource URL (e.g., a video page)
        providers: Ordered collection to scan
    """
    if not url:
        return None
    for provider in providers:
        if provider.is_match(url):
            logger.debug("Selected %s for %s", provider.name, url)
            return provider
    logger.debug("No provider matches %s", url)
    return None


def get_jit_url_patterns(providers: Iterable[ServiceDriver]) -> List[str]:
    """Collect the remote-image URL globs every driver needs, de-duplicated in order."""
    seen: List[str] = []
    for provider in providers:
        for pattern in provider.get_jit_url_patterns() or []:
            if pattern not in seen:
                seen.append(pattern)
    return seen


__all__ = ["PROVIDERS", "get_enabled_providers", "select_provider", "get_jit_url_patterns"]
