"""
Domain service that turns lesson text into image search phrases.
"""

import logging

from app.domain.exceptions import InvalidGenerationFormat
from app.domain.ports import CompletionClient
from app.domain.prompts import build_terms_prompt
from app.domain.term_parsing import PhraseParseError, parse_phrase_list
from app.domain.value_objects import SearchPhraseSet, TERMS_PER_LESSON

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOKENS = 256


class TermGenerator:
    """
    Derives a fixed set of search phrases from a lesson text.

    One call to `generate` makes exactly one completion request; there
    are no retries. The output of the completion service is validated
    before anything downstream sees it.

    Usage:
        generator = TermGenerator(completion_client, model="gpt-3.5-turbo-instruct")
        phrases = generator.generate("Photosynthesis converts light into energy...")
    """

    def __init__(
        self,
        completion_client: CompletionClient,
        model: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> None:
        """
        Initialize the generator.

        Args:
            completion_client: Port used to call the completion service
            model: Model identifier sent with every request
            max_tokens: Output length limit for the completion
        """
        if not model:
            raise ValueError("model cannot be empty")
        if max_tokens < 1:
            raise ValueError(f"max_tokens must be >= 1, got {max_tokens}")

        self._completion_client = completion_client
        self._model = model
        self._max_tokens = max_tokens

    @property
    def model(self) -> str:
        return self._model

    def generate(self, lesson_text: str) -> SearchPhraseSet:
        """
        Generate the search phrases for a lesson text.

        Args:
            lesson_text: Raw lesson text. May be empty; it is passed to
                the completion service as-is.

        Returns:
            SearchPhraseSet with TERMS_PER_LESSON phrases

        Raises:
            InvalidGenerationFormat: If the completion is not a JSON array
                of TERMS_PER_LESSON non-empty strings
            UpstreamGenerationError: If the completion request fails
        """
        prompt = build_terms_prompt(lesson_text, count=TERMS_PER_LESSON)

        logger.info(
            f"Requesting {TERMS_PER_LESSON} search phrases "
            f"(model={self._model}, lesson_chars={len(lesson_text)})"
        )
        completion = self._completion_client.complete(
            prompt=prompt,
            max_tokens=self._max_tokens,
            model=self._model,
        )

        parsed = parse_phrase_list(completion.text, expected_count=TERMS_PER_LESSON)
        if isinstance(parsed, PhraseParseError):
            logger.warning(f"Rejected completion output: {parsed.reason}")
            raise InvalidGenerationFormat(parsed.reason, raw_text=completion.text)

        logger.debug(f"Generated search phrases: {list(parsed.phrases)}")
        return SearchPhraseSet(phrases=parsed.phrases)
