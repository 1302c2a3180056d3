"""Driver for the SoundCloud oEmbed API (JSON responses).

SoundCloud URLs are matched on the host name rather than by substring, so a
link that merely mentions soundcloud.com in its query is not claimed.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping

from . import matching
from .driver import ServiceDriver, build_oembed_url

API_URL = "https://soundcloud.com/oembed"


class SoundCloudDriver(ServiceDriver):
    key = "soundcloud"
    api_format = "json"

    def __init__(self):
        super().__init__("SoundCloud", ["soundcloud.com", "snd.sc"])

    def is_match(self, url: str) -> bool:
        return matching.host_matches(self.domains, url)

    def build_api_url(self, params: Mapping[str, Any]) -> str:
        return build_oembed_url(API_URL, params, format=self.api_format)

    def about(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": "1.0",
            "release_date": "2012-05-08",
            "author": {
                "name": "embedkit",
                "website": "https://soundcloud.com",
                "email": "",
            },
        }
