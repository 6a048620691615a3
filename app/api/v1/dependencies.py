"""
FastAPI dependencies for dependency injection.

This module provides singleton instances of settings, adapters and
services for use with FastAPI's Depends() system.

Note: We use module-level singletons instead of @lru_cache with Depends()
parameters, which is an antipattern that can cause unexpected behavior.
"""

from typing import Optional

from app.config import Settings
from app.domain.ports import CompletionClient, ImageSearchProvider
from app.domain.services import ImageSearcher, LessonImageService, TermGenerator
from app.infrastructure.external.google_custom_search_client import GoogleCustomSearchClient
from app.infrastructure.external.openai_completion_client import OpenAICompletionClient

# Module-level singletons (initialized lazily)
_settings: Optional[Settings] = None
_completion_client: Optional[CompletionClient] = None
_image_search_provider: Optional[ImageSearchProvider] = None
_lesson_image_service: Optional[LessonImageService] = None


def get_settings() -> Settings:
    """Provide the settings, read from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def get_completion_client() -> CompletionClient:
    """Provide a singleton instance of the completion client."""
    global _completion_client
    if _completion_client is None:
        settings = get_settings()
        _completion_client = OpenAICompletionClient(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            timeout=settings.http_timeout_seconds,
        )
    return _completion_client


def get_image_search_provider() -> ImageSearchProvider:
    """Provide a singleton instance of the image search provider."""
    global _image_search_provider
    if _image_search_provider is None:
        settings = get_settings()
        _image_search_provider = GoogleCustomSearchClient(
            api_key=settings.custom_search_key,
            search_engine_id=settings.custom_search_cx,
            timeout=settings.http_timeout_seconds,
        )
    return _image_search_provider


def get_lesson_image_service() -> LessonImageService:
    """Provide the LessonImageService with all dependencies wired."""
    global _lesson_image_service
    if _lesson_image_service is None:
        settings = get_settings()
        _lesson_image_service = LessonImageService(
            term_generator=TermGenerator(
                completion_client=get_completion_client(),
                model=settings.openai_model,
            ),
            image_searcher=ImageSearcher(get_image_search_provider()),
        )
    return _lesson_image_service


def reset_dependencies() -> None:
    """
    Reset all singletons. Useful for testing.

    This allows tests to inject mock dependencies by resetting
    the module state between test cases.
    """
    global _settings, _completion_client, _image_search_provider
    global _lesson_image_service

    _settings = None
    _completion_client = None
    _image_search_provider = None
    _lesson_image_service = None
