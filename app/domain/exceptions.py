"""
Domain exceptions for the lesson image pipeline.

Each exception also derives from the builtin the rest of the codebase
already catches: ValueError for malformed data, RuntimeError for failures
of an upstream service or of the runtime environment.
"""

from typing import Optional


class LessonImageError(Exception):
    """Base class for all errors raised by the lesson image pipeline."""


class ConfigurationError(LessonImageError, RuntimeError):
    """
    A required setting is missing or invalid.

    Raised once at startup, before any request is processed.
    """


class InvalidGenerationFormat(LessonImageError, ValueError):
    """
    The completion service answered, but not with a list of search phrases.

    Attributes:
        raw_text: The raw completion text that failed validation
    """

    def __init__(self, reason: str, raw_text: Optional[str] = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.raw_text = raw_text


class UpstreamGenerationError(LessonImageError, RuntimeError):
    """The completion service could not be reached or returned an error status."""


class UpstreamSearchError(LessonImageError, RuntimeError):
    """
    The image search service failed for one phrase.

    Attributes:
        phrase: The search phrase whose request failed
    """

    def __init__(self, message: str, phrase: Optional[str] = None) -> None:
        super().__init__(message)
        self.phrase = phrase
