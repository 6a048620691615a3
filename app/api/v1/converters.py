"""
Converters between domain value objects and API schemas.

This module centralizes all conversion logic between the domain layer
and the API layer, maintaining clean separation of concerns.
"""

from app.domain import value_objects as domain_vo
from app.api.v1 import schemas as api


def domain_image_result_to_api(result: domain_vo.ImageResult) -> api.ImageResult:
    """
    Convert a domain ImageResult value object to an API ImageResult model.

    Args:
        result: Domain ImageResult value object

    Returns:
        API ImageResult model
    """
    return api.ImageResult(
        link=result.link,
        display_link=result.display_link,
        title=result.title,
    )


def domain_response_to_api(response: domain_vo.ImageSearchResponse) -> api.ImageSearchResponse:
    """
    Convert a domain ImageSearchResponse value object to an API ImageSearchResponse model.

    Args:
        response: Domain ImageSearchResponse value object

    Returns:
        API ImageSearchResponse model
    """
    return api.ImageSearchResponse(
        search_terms=response.search_terms.as_list(),
        results=[domain_image_result_to_api(r) for r in response.results],
    )
