"""
API endpoints for lesson image search.

This module defines the FastAPI routes that take a lesson text and return
the generated search phrases with the images found for them. It handles
HTTP concerns and delegates to domain services.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.config import Settings
from app.domain.exceptions import (
    InvalidGenerationFormat,
    UpstreamGenerationError,
    UpstreamSearchError,
)
from app.domain.services import LessonImageService
from app.api.v1 import schemas as api
from app.api.v1.converters import domain_response_to_api
from app.api.v1.dependencies import get_lesson_image_service, get_settings

router = APIRouter()


@router.post("/search", response_model=api.ImageSearchResponse)
async def search_images(
    request: api.ImageSearchRequest,
    service: LessonImageService = Depends(get_lesson_image_service),
) -> api.ImageSearchResponse:
    """
    Generate search phrases for a lesson text and find images for each.

    Args:
        request: Request with the lesson text

    Returns:
        ImageSearchResponse with searchTerms and results

    Raises:
        400: The completion service did not return a valid phrase list
        502: The completion or the image search service failed
    """
    try:
        domain_response = await service.generate_images_for_text(request.query)
    except InvalidGenerationFormat as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid response from the completion service: {e}",
        )
    except UpstreamGenerationError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )
    except UpstreamSearchError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )

    return domain_response_to_api(domain_response)


@router.get("/health", response_model=api.HealthResponse)
def health_check(
    settings: Settings = Depends(get_settings),
) -> api.HealthResponse:
    """
    Report that the service is configured and which model it uses.
    """
    return api.HealthResponse(status="ok", model=settings.openai_model)
