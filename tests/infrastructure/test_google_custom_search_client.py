"""
Tests for GoogleCustomSearchClient adapter.

Uses FakeSession and FakeResponse to test without network calls.
Covers: query validation, request building, parsing, error mapping.
"""

import pytest
from typing import Optional, Dict, Any

import requests

from app.domain.exceptions import UpstreamSearchError
from app.infrastructure.external.google_custom_search_client import GoogleCustomSearchClient


# =============================================================================
# Fake HTTP Session and Response for testing
# =============================================================================


class FakeResponse:
    """Fake HTTP response for testing."""

    def __init__(
        self,
        json_data: Optional[Any] = None,
        status_code: int = 200,
        raise_on_json: bool = False,
    ):
        self._json_data = json_data if json_data is not None else {}
        self.status_code = status_code
        self._raise_on_json = raise_on_json

    def json(self) -> Any:
        if self._raise_on_json:
            raise ValueError("Invalid JSON")
        return self._json_data

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"HTTP {self.status_code}")


class FakeSession:
    """Fake HTTP session for testing GoogleCustomSearchClient."""

    def __init__(
        self,
        response: Optional[FakeResponse] = None,
        error: Optional[Exception] = None,
    ):
        self._response = response or FakeResponse()
        self._error = error
        self.last_url: Optional[str] = None
        self.last_params: Optional[Dict[str, Any]] = None
        self.last_timeout: Optional[float] = None

    def get(self, url: str, params: Optional[Dict[str, Any]] = None, timeout: Optional[float] = None) -> FakeResponse:
        self.last_url = url
        self.last_params = params
        self.last_timeout = timeout
        if self._error is not None:
            raise self._error
        return self._response


def _make_client(session: FakeSession, timeout: float = 10.0) -> GoogleCustomSearchClient:
    return GoogleCustomSearchClient(
        api_key="test-key",
        search_engine_id="test-cx",
        timeout=timeout,
        session=session,
    )


def _make_item(n: int) -> Dict[str, Any]:
    """Helper to create a Custom Search image item JSON structure."""
    return {
        "kind": "customsearch#result",
        "title": f"Picture {n}",
        "link": f"https://upload.example.org/{n}.png",
        "displayLink": "upload.example.org",
        "mime": "image/png",
        "image": {"height": 600, "width": 800},
    }


# =============================================================================
# Tests: Construction and input validation
# =============================================================================


class TestValidation:

    def test_empty_api_key_raises(self):
        with pytest.raises(ValueError, match="api_key"):
            GoogleCustomSearchClient(api_key="", search_engine_id="cx", session=FakeSession())

    def test_empty_search_engine_id_raises(self):
        with pytest.raises(ValueError, match="search_engine_id"):
            GoogleCustomSearchClient(api_key="k", search_engine_id="", session=FakeSession())

    def test_empty_query_raises_value_error(self):
        client = _make_client(FakeSession())

        with pytest.raises(ValueError, match="query cannot be empty"):
            client.image_search("   ")


# =============================================================================
# Tests: API request building
# =============================================================================


class TestRequestBuilding:
    """Tests for correct API request construction."""

    def test_image_search_params(self):
        """Request carries key, cx, query and the image search type."""
        session = FakeSession(FakeResponse({"items": []}))
        client = _make_client(session)

        client.image_search("photosynthesis leaf diagram")

        assert session.last_url == "https://www.googleapis.com/customsearch/v1"
        assert session.last_params == {
            "key": "test-key",
            "cx": "test-cx",
            "q": "photosynthesis leaf diagram",
            "searchType": "image",
        }

    def test_timeout_is_forwarded(self):
        session = FakeSession(FakeResponse({"items": []}))
        client = _make_client(session, timeout=3.5)

        client.image_search("query")

        assert session.last_timeout == 3.5


# =============================================================================
# Tests: Response parsing
# =============================================================================


class TestResponseParsing:

    def test_returns_items_in_order(self):
        items = [_make_item(3), _make_item(1), _make_item(2)]
        client = _make_client(FakeSession(FakeResponse({"items": items})))

        result = client.image_search("query")

        assert [item["link"] for item in result] == [
            "https://upload.example.org/3.png",
            "https://upload.example.org/1.png",
            "https://upload.example.org/2.png",
        ]

    def test_missing_items_returns_empty_list(self):
        """The API omits 'items' entirely when nothing matched."""
        client = _make_client(FakeSession(FakeResponse({"searchInformation": {"totalResults": "0"}})))

        assert client.image_search("query") == []

    def test_non_dict_items_are_dropped(self):
        client = _make_client(FakeSession(FakeResponse({"items": [_make_item(1), "junk", None]})))

        result = client.image_search("query")

        assert len(result) == 1


# =============================================================================
# Tests: Error handling
# =============================================================================


class TestErrorHandling:

    def test_http_error_raises_upstream_search_error(self):
        client = _make_client(FakeSession(FakeResponse(status_code=403)))

        with pytest.raises(UpstreamSearchError, match="HTTP 403") as exc_info:
            client.image_search("query")

        assert exc_info.value.phrase == "query"

    def test_connection_error_raises_upstream_search_error(self):
        session = FakeSession(error=requests.exceptions.ConnectionError("refused"))
        client = _make_client(session)

        with pytest.raises(UpstreamSearchError) as exc_info:
            client.image_search("query")

        assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)

    def test_timeout_raises_upstream_search_error(self):
        session = FakeSession(error=requests.exceptions.Timeout("slow"))
        client = _make_client(session)

        with pytest.raises(UpstreamSearchError):
            client.image_search("query")

    def test_invalid_json_raises_upstream_search_error(self):
        client = _make_client(FakeSession(FakeResponse(raise_on_json=True)))

        with pytest.raises(UpstreamSearchError, match="unreadable"):
            client.image_search("query")

    def test_non_object_body_raises_upstream_search_error(self):
        client = _make_client(FakeSession(FakeResponse(["not", "an", "object"])))

        with pytest.raises(UpstreamSearchError, match="Unexpected"):
            client.image_search("query")
