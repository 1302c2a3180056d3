"""Pytest configuration and shared fixtures for embedkit tests."""
from __future__ import annotations

import json
import os
import shutil
import tempfile
from typing import Any, Dict, Generator, Mapping
from unittest.mock import MagicMock, patch

import pytest
import requests

import embedkit.core.config as config_module
import embedkit.core.network as network_module
from embedkit.driver import ServiceDriver, build_oembed_url


# ============================================================================
# Isolation
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_config(tmp_path) -> Generator[None, None, None]:
    """Point the config loader at an empty location and reset module caches."""
    missing = os.path.join(str(tmp_path), "no_config.json")
    with patch.dict(os.environ, {"EMBEDKIT_CONFIG_PATH": missing}):
        config_module._CONFIG_CACHE = None
        network_module._SESSION = None
        yield
    config_module._CONFIG_CACHE = None
    network_module._SESSION = None


# ============================================================================
# Path and Configuration Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Create a temporary directory for test files."""
    dirpath = tempfile.mkdtemp(prefix="embedkit_test_")
    yield dirpath
    shutil.rmtree(dirpath, ignore_errors=True)


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    """Return a sample configuration dictionary."""
    return {
        "providers": {
            "vimeo": True,
            "youtube": True,
            "flickr": False,
            "dailymotion": True,
        },
        "provider_settings": {
            "vimeo": {
                "network": {
                    "timeout_s": 5,
                    "headers": {"X-Test": "1"},
                }
            },
            "youtube": {
                "network": {
                    "verify_ssl": False,
                    "headers": "not-a-dict",
                }
            },
        },
        "embed": {
            "width": 800,
            "height": 450,
            "width_side": 300,
        },
    }


@pytest.fixture
def config_file(temp_dir: str, sample_config: Dict[str, Any]) -> str:
    """Create a temporary config file."""
    config_path = os.path.join(temp_dir, "config.json")
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(sample_config, f)
    return config_path


@pytest.fixture
def use_config(config_file: str) -> Generator[str, None, None]:
    """Activate the sample config file for the duration of a test."""
    with patch.dict(os.environ, {"EMBEDKIT_CONFIG_PATH": config_file}):
        config_module._CONFIG_CACHE = None
        yield config_file
    config_module._CONFIG_CACHE = None


# ============================================================================
# Driver Fixtures
# ============================================================================

class ExampleDriver(ServiceDriver):
    """Minimal driver for a fictional video host."""

    key = "example"

    def __init__(self, domains=("video.example.com",)):
        super().__init__("Example Video", list(domains))

    def build_api_url(self, params: Mapping[str, Any]) -> str:
        return build_oembed_url("https://api.example.com/oembed", params)

    def about(self) -> Dict[str, Any]:
        return {"name": self.name, "version": "0.1"}


class ExampleIdDriver(ExampleDriver):
    """Same host, but the descriptor carries an explicit identifier."""

    key = "example_id"
    id_tag_name = "video_id"


@pytest.fixture
def example_driver() -> ExampleDriver:
    return ExampleDriver()


@pytest.fixture
def example_id_driver() -> ExampleIdDriver:
    return ExampleIdDriver()


# ============================================================================
# Descriptor Documents
# ============================================================================

@pytest.fixture
def oembed_xml() -> str:
    """A video descriptor as returned by an XML oEmbed endpoint."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        "<oembed>"
        "<type>video</type>"
        "<version>1.0</version>"
        "<title>Sunset over the harbour</title>"
        "<author_name>Jane Doe</author_name>"
        "<thumbnail_url>https://img.example.com/sunset.jpg</thumbnail_url>"
        "<video_id>76979871</video_id>"
        "<width>640</width>"
        "<height>360</height>"
        "<html>&lt;iframe src=\"https://player.example.com/76979871\" "
        "width=\"640\" height=\"360\" frameborder=\"0\" allowfullscreen&gt;&lt;/iframe&gt;</html>"
        "</oembed>"
    )


@pytest.fixture
def oembed_json() -> str:
    """A video descriptor as returned by a JSON oEmbed endpoint."""
    return json.dumps({
        "type": "video",
        "version": "1.0",
        "title": "Morning run",
        "thumbnail_url": "https://img.example.com/run.jpg",
        "width": 480,
        "height": 270,
        "html": '<iframe src="https://player.example.com/x7" width="480" height="270"></iframe>',
    })


# ============================================================================
# Network Mocks
# ============================================================================

def make_response(text: str, status_code: int = 200) -> MagicMock:
    """Build a mock requests.Response with text and raise_for_status behaviour."""
    resp = MagicMock(spec=requests.Response)
    resp.text = text
    resp.status_code = status_code
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status_code} Error")
    else:
        resp.raise_for_status.return_value = None
    return resp


@pytest.fixture
def mock_session() -> Generator[MagicMock, None, None]:
    """Replace the shared HTTP session; set .get.return_value / side_effect per test."""
    session = MagicMock(spec=requests.Session)
    with patch("embedkit.core.network.get_session", return_value=session):
        yield session


@pytest.fixture
def response_factory():
    """Expose make_response to tests."""
    return make_response
