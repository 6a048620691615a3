"""
Domain layer - Core business logic and value objects.

This layer contains the value objects, the error taxonomy, and defines
the ports (interfaces) that the infrastructure layer must implement.

It has NO dependencies on external frameworks or APIs.
"""

from .value_objects import SearchPhraseSet, ImageResult, ImageSearchResponse, TERMS_PER_LESSON
from .exceptions import (
    LessonImageError,
    ConfigurationError,
    InvalidGenerationFormat,
    UpstreamGenerationError,
    UpstreamSearchError,
)

__all__ = [
    # Value Objects
    "SearchPhraseSet",
    "ImageResult",
    "ImageSearchResponse",
    "TERMS_PER_LESSON",
    # Errors
    "LessonImageError",
    "ConfigurationError",
    "InvalidGenerationFormat",
    "UpstreamGenerationError",
    "UpstreamSearchError",
]
