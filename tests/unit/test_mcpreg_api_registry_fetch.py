"""Unit tests for fetch_document and fetch_json."""

import pytest
import requests

from mcpreg.api.registry.fetch_document import fetch_document
from mcpreg.api.registry.fetch_json import GITHUB_ACCEPT, fetch_json
from mcpreg.api.registry.FetchError import FetchError
from tests.unit.conftest import FakeResponse

pytestmark = pytest.mark.registry

URL = "https://example.test/doc"


class TestFetchDocument:
    def test_success_passes_timeout(self, fake_http):
        fake_http.add(URL, FakeResponse("hello"))
        assert fetch_document(URL, 7.5, "doc") == "hello"
        assert fake_http.calls[0]["timeout"] == 7.5

    def test_status_error(self, fake_http):
        fake_http.add(URL, FakeResponse(status_code=503, reason="Service Unavailable"))
        with pytest.raises(FetchError, match="Failed to fetch registry README: 503 Service Unavailable"):
            fetch_document(URL, 5, "registry README")

    def test_unknown_url_is_404(self, fake_http):
        with pytest.raises(FetchError, match="404"):
            fetch_document(URL, 5)

    def test_network_error(self, fake_http):
        fake_http.add(URL, requests.ConnectionError("connection refused"))
        with pytest.raises(FetchError, match="Error fetching doc: connection refused"):
            fetch_document(URL, 5, "doc")

    def test_timeout(self, fake_http):
        fake_http.add(URL, requests.Timeout("timed out"))
        with pytest.raises(FetchError, match="timed out"):
            fetch_document(URL, 0.1, "doc")


class TestFetchJson:
    def test_success_sends_accept_header(self, fake_http):
        fake_http.add(URL, FakeResponse(json_data={"name": "demo"}))
        assert fetch_json(URL, 5, "repo details") == {"name": "demo"}
        assert fake_http.calls[0]["headers"] == {"Accept": GITHUB_ACCEPT}

    def test_invalid_json(self, fake_http):
        fake_http.add(URL, FakeResponse("<html>"))
        with pytest.raises(FetchError, match="Invalid JSON in repo details"):
            fetch_json(URL, 5, "repo details")

    def test_status_error(self, fake_http):
        fake_http.add(URL, FakeResponse(status_code=403, reason="Forbidden"))
        with pytest.raises(FetchError, match="403 Forbidden"):
            fetch_json(URL, 5, "repo details")
