"""
Google Custom Search client implementing the ImageSearchProvider port.

Talks to the Custom Search JSON API with searchType=image. The API key
and the search engine id (cx) are fixed at construction; callers only
pass the query.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from app.domain.exceptions import UpstreamSearchError
from app.domain.ports import ImageSearchProvider

logger = logging.getLogger(__name__)


class GoogleCustomSearchClient(ImageSearchProvider):
    """
    Image search through the Google Custom Search JSON API.

    Usage:
        # Production
        client = GoogleCustomSearchClient(api_key="...", search_engine_id="...")
        items = client.image_search("water cycle evaporation diagram")

        # Testing (with fake session)
        client = GoogleCustomSearchClient(api_key="k", search_engine_id="cx", session=fake_session)
    """

    BASE_URL = "https://www.googleapis.com/customsearch/v1"
    SEARCH_TYPE = "image"

    def __init__(
        self,
        api_key: str,
        search_engine_id: str,
        timeout: float = 10.0,
        session: Optional[Any] = None,
    ) -> None:
        """
        Initialize the Custom Search client.

        Args:
            api_key: Google API key with the Custom Search API enabled
            search_engine_id: Programmable Search Engine identifier (cx)
            timeout: Per-request timeout in seconds
            session: Optional HTTP session for dependency injection.
                    If None, creates a new requests.Session().
        """
        if not api_key:
            raise ValueError("api_key cannot be empty")
        if not search_engine_id:
            raise ValueError("search_engine_id cannot be empty")

        self._api_key = api_key
        self._search_engine_id = search_engine_id
        self._timeout = timeout
        # Shared by the worker threads running concurrent searches: read-only,
        # credentials travel as query params and no cookies are relied on
        self._session = session if session is not None else requests.Session()

    def image_search(self, query: str) -> List[Dict[str, Any]]:
        """
        Search images for a query.

        Args:
            query: Search phrase

        Returns:
            Raw result items in API order; empty when the API reports no
            items (the 'items' key is omitted on zero results)

        Raises:
            ValueError: If query is empty or blank
            UpstreamSearchError: If the request fails or the status is not successful
        """
        if not query or not query.strip():
            raise ValueError("query cannot be empty")

        params = {
            "key": self._api_key,
            "cx": self._search_engine_id,
            "q": query,
            "searchType": self.SEARCH_TYPE,
        }

        try:
            response = self._session.get(self.BASE_URL, params=params, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            logger.warning(f"Custom Search request failed for '{query}': {type(e).__name__}")
            raise UpstreamSearchError(
                f"Custom Search request failed for '{query}': {e}", phrase=query
            ) from e
        except ValueError as e:
            raise UpstreamSearchError(
                f"Custom Search returned an unreadable response for '{query}': {e}",
                phrase=query,
            ) from e

        if not isinstance(data, dict):
            raise UpstreamSearchError(
                f"Unexpected Custom Search response format for '{query}'", phrase=query
            )

        items = data.get("items") or []
        return [item for item in items if isinstance(item, dict)]
