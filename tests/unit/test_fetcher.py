"""Unit tests for embedkit.fetcher module."""
from __future__ import annotations

from unittest.mock import patch

import requests

from embedkit.core.naming import create_handle
from embedkit.documents import FETCH_ERROR_MESSAGE, parse_document
from embedkit.fetcher import extract_fields, fetch
from embedkit.model import DocumentParseError, TransportError

PARAMS = {"url": "https://video.example.com/42"}
API_URL = "https://api.example.com/oembed?url=https%3A%2F%2Fvideo.example.com%2F42"


class TestFetchSuccess:
    """Tests for successful fetches."""

    def test_builds_record(self, example_driver, oembed_xml):
        with patch("embedkit.fetcher.fetch_text", return_value=oembed_xml):
            rec = fetch(example_driver, PARAMS)

        assert rec.failed is False
        assert rec.error is None
        assert rec.source_url == API_URL
        assert rec.raw_document == oembed_xml.strip()
        assert rec.title == "Sunset over the harbour"
        assert rec.thumbnail_url == "https://img.example.com/sunset.jpg"

    def test_id_derived_from_api_url(self, example_driver, oembed_xml):
        with patch("embedkit.fetcher.fetch_text", return_value=oembed_xml):
            rec = fetch(example_driver, PARAMS)

        assert rec.id == create_handle(API_URL)

    def test_id_is_stable_across_calls(self, example_driver, oembed_json):
        with patch("embedkit.fetcher.fetch_text", return_value=oembed_json):
            first = fetch(example_driver, PARAMS)
            second = fetch(example_driver, PARAMS)

        assert first.id == second.id

    def test_id_from_declared_field(self, example_id_driver, oembed_xml):
        with patch("embedkit.fetcher.fetch_text", return_value=oembed_xml):
            rec = fetch(example_id_driver, PARAMS)

        assert rec.failed is False
        assert rec.id == "76979871"

    def test_missing_title_and_thumbnail_are_none(self, example_driver):
        with patch("embedkit.fetcher.fetch_text", return_value="<oembed><type>rich</type></oembed>"):
            rec = fetch(example_driver, PARAMS)

        assert rec.failed is False
        assert rec.title is None
        assert rec.thumbnail_url is None

    def test_single_request_with_provider_key(self, example_driver, oembed_xml):
        with patch("embedkit.fetcher.fetch_text", return_value=oembed_xml) as mock:
            fetch(example_driver, PARAMS)

        assert mock.call_count == 1
        assert mock.call_args[0][0] == API_URL
        assert mock.call_args[1]["provider_key"] == "example"

    def test_custom_slugify(self, example_driver, oembed_xml):
        with patch("embedkit.fetcher.fetch_text", return_value=oembed_xml):
            rec = fetch(example_driver, PARAMS, slugify=lambda url: "fixed-handle")

        assert rec.id == "fixed-handle"

    def test_custom_fetch_document(self, example_driver, oembed_json):
        calls = []

        def fake_fetch_document(url):
            calls.append(url)
            return parse_document(oembed_json)

        rec = fetch(example_driver, PARAMS, fetch_document=fake_fetch_document)

        assert calls == [API_URL]
        assert rec.title == "Morning run"

    def test_custom_fetch_document_bypasses_transport(self, example_driver, oembed_xml):
        with patch("embedkit.fetcher.fetch_text") as mock:
            rec = fetch(example_driver, PARAMS, fetch_document=lambda url: parse_document(oembed_xml))

        mock.assert_not_called()
        assert rec.failed is False


class TestFetchFailure:
    """Tests for failures collapsing into error records."""

    def _assert_failed(self, rec):
        assert rec.failed is True
        assert rec.raw_document == f"<error>{FETCH_ERROR_MESSAGE}</error>"
        assert rec.id is None
        assert rec.title is None
        assert rec.thumbnail_url is None

    def test_connection_error(self, example_driver, mock_session):
        mock_session.get.side_effect = requests.exceptions.ConnectionError("connection refused")

        rec = fetch(example_driver, PARAMS)

        self._assert_failed(rec)
        assert rec.source_url == API_URL
        assert "connection refused" in rec.error

    def test_http_error(self, example_driver, mock_session, response_factory):
        mock_session.get.return_value = response_factory("Not Found", status_code=404)

        self._assert_failed(fetch(example_driver, PARAMS))

    def test_transport_error(self, example_driver):
        with patch("embedkit.fetcher.fetch_text", side_effect=TransportError(API_URL, "unreachable")):
            self._assert_failed(fetch(example_driver, PARAMS))

    def test_malformed_document(self, example_driver):
        with patch("embedkit.fetcher.fetch_text", return_value="<oembed><title>"):
            self._assert_failed(fetch(example_driver, PARAMS))

    def test_missing_declared_id_field(self, example_id_driver, oembed_json):
        with patch("embedkit.fetcher.fetch_text", return_value=oembed_json):
            rec = fetch(example_id_driver, PARAMS)

        self._assert_failed(rec)
        assert "video_id" in rec.error

    def test_invalid_params(self, example_driver):
        with patch("embedkit.fetcher.fetch_text") as mock:
            rec = fetch(example_driver, {})

        self._assert_failed(rec)
        assert rec.source_url == ""
        assert mock.call_count == 0

    def test_unexpected_error_does_not_raise(self, example_driver):
        with patch("embedkit.fetcher.fetch_text", side_effect=RuntimeError("boom")):
            rec = fetch(example_driver, PARAMS)

        self._assert_failed(rec)
        assert rec.error == "boom"

    def test_document_parse_error_from_collaborator(self, example_driver):
        def broken(url):
            raise DocumentParseError("bad")

        self._assert_failed(fetch(example_driver, PARAMS, fetch_document=broken))


class TestExtractFields:
    """Tests for extract_fields function."""

    def test_uses_driver_field_names(self, example_driver):
        class Renamed(type(example_driver)):
            title_tag_name = "name"
            thumbnail_tag_name = "preview"

        doc = parse_document('{"name": "Renamed", "preview": "https://img.example.com/p.jpg"}')
        fields = extract_fields(Renamed(), doc, API_URL)

        assert fields == {
            "id": create_handle(API_URL),
            "title": "Renamed",
            "thumbnail_url": "https://img.example.com/p.jpg",
        }
