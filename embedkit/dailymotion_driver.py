"""Driver for the Dailymotion oEmbed API (JSON responses)."""
from __future__ import annotations

from typing import Any, Dict, Mapping

from .driver import ServiceDriver, build_oembed_url

API_URL = "https://www.dailymotion.com/services/oembed"


class DailymotionDriver(ServiceDriver):
    key = "dailymotion"
    api_format = "json"

    def __init__(self):
        super().__init__("Dailymotion", ["dailymotion.com", "dai.ly"])

    def build_api_url(self, params: Mapping[str, Any]) -> str:
        return build_oembed_url(API_URL, params, format=self.api_format)

    def about(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": "1.0",
            "release_date": "2012-05-08",
            "author": {
                "name": "embedkit",
                "website": "https://www.dailymotion.com",
                "email": "",
            },
        }
