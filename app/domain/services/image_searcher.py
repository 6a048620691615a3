"""
Domain service that runs one image search and normalizes its results.
"""

import logging
from typing import Any, Dict, List, Optional

from app.domain.exceptions import UpstreamSearchError
from app.domain.ports import ImageSearchProvider
from app.domain.value_objects import ImageResult

logger = logging.getLogger(__name__)


class ImageSearcher:
    """
    Maps one search phrase to an ordered list of ImageResult.

    The provider's order is preserved. Items without a link are skipped,
    since an image without a URL cannot be shown.
    """

    def __init__(self, provider: ImageSearchProvider) -> None:
        self._provider = provider

    def search(self, phrase: str) -> List[ImageResult]:
        """
        Search images for a single phrase.

        Args:
            phrase: A non-empty search phrase

        Returns:
            Image results in provider order (possibly empty)

        Raises:
            ValueError: If phrase is empty or blank
            UpstreamSearchError: If the search request fails. The error
                always carries the phrase that triggered it.
        """
        if not phrase or not phrase.strip():
            raise ValueError("search phrase cannot be empty")

        try:
            items = self._provider.image_search(phrase)
        except UpstreamSearchError as e:
            if e.phrase is None:
                e.phrase = phrase
            raise

        results = []
        for item in items or []:
            result = self._parse_item(item)
            if result is not None:
                results.append(result)

        logger.debug(f"Phrase '{phrase}' returned {len(results)} images")
        return results

    def _parse_item(self, item: Dict[str, Any]) -> Optional[ImageResult]:
        """
        Convert one raw provider item into an ImageResult.

        Args:
            item: Raw item with 'link', 'displayLink' and 'title' keys

        Returns:
            ImageResult, or None if the item has no usable link
        """
        if not isinstance(item, dict):
            return None

        link = item.get("link")
        if not isinstance(link, str) or not link.strip():
            return None

        return ImageResult(
            link=link,
            display_link=self._as_text(item.get("displayLink")),
            title=self._as_text(item.get("title")),
        )

    @staticmethod
    def _as_text(value: Any) -> str:
        return "" if value is None else str(value)
