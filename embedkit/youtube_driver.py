"""Driver for the YouTube oEmbed API."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from .driver import ServiceDriver, build_oembed_url

API_URL = "https://www.youtube.com/oembed"


class YouTubeDriver(ServiceDriver):
    key = "youtube"

    def __init__(self):
        super().__init__("YouTube", ["youtube.com", "youtu.be"])

    def build_api_url(self, params: Mapping[str, Any]) -> str:
        return build_oembed_url(API_URL, params, format=self.api_format)

    def about(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": "1.3",
            "release_date": "2012-03-01",
            "author": {
                "name": "embedkit",
                "website": "https://www.youtube.com",
                "email": "",
            },
        }

    def get_jit_url_patterns(self) -> List[str]:
        return ["https://i.ytimg.com/*", "http://i.ytimg.com/*"]
