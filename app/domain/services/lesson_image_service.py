"""
Domain service orchestrating the lesson-text-to-images pipeline.

=============================================================================
NOTES: Pipeline shape
=============================================================================

    lesson text --> TermGenerator --> [phrase 1, phrase 2, phrase 3]
                                          |          |          |
                                     ImageSearcher (concurrent fan-out)
                                          |          |          |
                                          +----- flatten -------+
                                                    |
                                           ImageSearchResponse

Step 1 is a single blocking call; if it fails, no search is issued.
Step 2 runs every search at the same time, so the latency of the whole
step is roughly that of the slowest search rather than the sum.
Step 3 waits for all searches and only then decides: any failure fails
the whole request (there is no partial-results mode), otherwise results
are flattened in phrase order, whatever order the searches finished in.

Both collaborators are synchronous (they wrap blocking HTTP clients), so
each call is pushed to a worker thread with asyncio.to_thread and the
event loop only coordinates.

=============================================================================
"""

import asyncio
import logging
import time
from typing import List, Optional

from app.domain.exceptions import UpstreamSearchError
from app.domain.utils.concurrency import gather_bounded, first_failure
from app.domain.value_objects import ImageResult, ImageSearchResponse

from .image_searcher import ImageSearcher
from .term_generator import TermGenerator

logger = logging.getLogger(__name__)


class LessonImageService:
    """
    Turns a lesson text into search phrases and the images found for them.

    The service holds no per-request state, so a single instance can
    serve any number of concurrent requests.

    Usage:
        service = LessonImageService(
            term_generator=TermGenerator(openai_client, model="gpt-3.5-turbo-instruct"),
            image_searcher=ImageSearcher(google_search_client),
        )
        response = await service.generate_images_for_text("The water cycle...")
    """

    def __init__(
        self,
        term_generator: TermGenerator,
        image_searcher: ImageSearcher,
        max_concurrency: Optional[int] = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            term_generator: Produces the search phrases
            image_searcher: Runs one image search per phrase
            max_concurrency: Upper bound on searches in flight. None runs
                every phrase at once.
        """
        if max_concurrency is not None and max_concurrency < 1:
            raise ValueError(f"max_concurrency must be >= 1, got {max_concurrency}")

        self._term_generator = term_generator
        self._image_searcher = image_searcher
        self._max_concurrency = max_concurrency

    async def generate_images_for_text(self, lesson_text: str) -> ImageSearchResponse:
        """
        Run the full pipeline for one lesson text.

        Args:
            lesson_text: Raw lesson text (may be empty)

        Returns:
            ImageSearchResponse with the phrases and the flattened results

        Raises:
            InvalidGenerationFormat: If the generated phrases are malformed
            UpstreamGenerationError: If the completion service fails
            UpstreamSearchError: If any of the image searches fails
        """
        start_time = time.time()

        search_terms = await asyncio.to_thread(self._term_generator.generate, lesson_text)
        logger.info(f"Searching images for {len(search_terms)} phrases")

        outcomes = await gather_bounded(
            search_terms.as_list(),
            self._search_phrase,
            max_concurrency=self._max_concurrency,
        )

        failure = first_failure(outcomes)
        if failure is not None:
            failed = sum(1 for outcome in outcomes if isinstance(outcome, BaseException))
            logger.error(f"{failed} of {len(outcomes)} image searches failed: {failure}")
            if isinstance(failure, UpstreamSearchError):
                raise failure
            raise UpstreamSearchError(f"Image search failed: {failure}") from failure

        results: List[ImageResult] = []
        for phrase_results in outcomes:
            results.extend(phrase_results)

        latency_ms = (time.time() - start_time) * 1000
        logger.info(f"Returning {len(results)} images in {latency_ms:.0f} ms")

        return ImageSearchResponse(search_terms=search_terms, results=tuple(results))

    async def _search_phrase(self, phrase: str) -> List[ImageResult]:
        return await asyncio.to_thread(self._image_searcher.search, phrase)
