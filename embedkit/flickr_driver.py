"""Driver for the Flickr oEmbed API.

Photo pages and short links (flic.kr) are matched with glob patterns so that
other Flickr hosts (the API itself, static farms) are never selected.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from . import matching
from .driver import ServiceDriver, build_oembed_url

API_URL = "https://www.flickr.com/services/oembed/"

URL_PATTERNS = (
    "http*://*flickr.com/photos/*",
    "http*://flic.kr/*",
)


class FlickrDriver(ServiceDriver):
    key = "flickr"

    def __init__(self):
        super().__init__("Flickr", ["flickr.com", "flic.kr"])

    def is_match(self, url: str) -> bool:
        return matching.glob_matches(URL_PATTERNS, url)

    def build_api_url(self, params: Mapping[str, Any]) -> str:
        return build_oembed_url(API_URL, params, format=self.api_format)

    def about(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": "1.1",
            "release_date": "2011-09-12",
            "author": {
                "name": "embedkit",
                "website": "https://www.flickr.com",
                "email": "",
            },
        }

    def get_jit_url_patterns(self) -> List[str]:
        return [
            "http://farm*.static.flickr.com/*",
            "https://farm*.staticflickr.com/*",
            "https://live.staticflickr.com/*",
        ]
