"""Driver for the Vimeo oEmbed API.

Vimeo exposes a numeric ``video_id`` in its descriptor, which is used as the
resource id instead of a handle derived from the API URL.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from .driver import ServiceDriver, build_oembed_url

API_URL = "https://vimeo.com/api/oembed.xml"


class VimeoDriver(ServiceDriver):
    key = "vimeo"
    id_tag_name = "video_id"

    def __init__(self):
        super().__init__("Vimeo", "vimeo.com")

    def build_api_url(self, params: Mapping[str, Any]) -> str:
        return build_oembed_url(API_URL, params)

    def about(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": "1.3",
            "release_date": "2012-03-01",
            "author": {
                "name": "embedkit",
                "website": "https://vimeo.com",
                "email": "",
            },
        }

    def get_jit_url_patterns(self) -> List[str]:
        return ["https://i.vimeocdn.com/*"]
