#!/usr/bin/env python3
"""
Lesson Image Generation Script.

Runs the full pipeline against the real services and prints the result:
1. Generate search phrases from the lesson text (OpenAI completions)
2. Search images for every phrase concurrently (Google Custom Search)
3. Print {"searchTerms": [...], "results": [...]} as JSON

Usage:
    python -m scripts.generate_images "Photosynthesis converts light into chemical energy"
    python -m scripts.generate_images --file lesson.txt

Requires OPENAI_API_KEY, CUSTOM_SEARCH_KEY and CUSTOM_SEARCH_CX in the environment.

Exit codes:
    0: success
    1: the pipeline failed (bad completion output or upstream error)
    2: configuration error
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from app.api.v1.converters import domain_response_to_api
from app.config import Settings, configure_logging
from app.domain.exceptions import ConfigurationError, LessonImageError
from app.domain.services import ImageSearcher, LessonImageService, TermGenerator
from app.infrastructure.external.google_custom_search_client import GoogleCustomSearchClient
from app.infrastructure.external.openai_completion_client import OpenAICompletionClient

logger = logging.getLogger(__name__)


def build_service(settings: Settings) -> LessonImageService:
    """Wire the pipeline with the real HTTP adapters."""
    completion_client = OpenAICompletionClient(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout=settings.http_timeout_seconds,
    )
    search_client = GoogleCustomSearchClient(
        api_key=settings.custom_search_key,
        search_engine_id=settings.custom_search_cx,
        timeout=settings.http_timeout_seconds,
    )
    return LessonImageService(
        term_generator=TermGenerator(completion_client, model=settings.openai_model),
        image_searcher=ImageSearcher(search_client),
    )


def read_lesson_text(text: Optional[str], file_path: Optional[str]) -> str:
    """Return the lesson text from the positional argument or from a file."""
    if file_path is not None:
        return Path(file_path).read_text(encoding="utf-8")
    return text or ""


def main(lesson_text: str, settings: Settings) -> int:
    """
    Run the pipeline and print the response.

    Args:
        lesson_text: Lesson text to illustrate
        settings: Validated settings

    Returns:
        Process exit code
    """
    service = build_service(settings)

    try:
        response = asyncio.run(service.generate_images_for_text(lesson_text))
    except LessonImageError as e:
        logger.error(f"Pipeline failed: {e}")
        return 1

    payload = domain_response_to_api(response).model_dump(by_alias=True)
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Find illustrative images for a lesson text",
    )
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Lesson text (omit when using --file)",
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Read the lesson text from this file",
    )
    args = parser.parse_args()

    if args.text is not None and args.file is not None:
        parser.error("pass either a lesson text or --file, not both")

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    configure_logging(settings.log_level)

    try:
        sys.exit(main(read_lesson_text(args.text, args.file), settings))
    except KeyboardInterrupt:
        logger.info("\nInterrupted by user")
        sys.exit(130)
