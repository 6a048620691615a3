"""
API request/response models for the v1 endpoints.

Field names on the wire follow the camelCase names the presentation layer
already renders (searchTerms, displayLink); Python code uses snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field


# request body of POST /search
class ImageSearchRequest(BaseModel):
    """
    Request body for POST /search endpoint.
    """
    query: str = Field(
        default="",
        description="Lesson text to illustrate. May be empty.",
    )


# response body of POST /search

class ImageResult(BaseModel):
    """
    API representation of an ImageResult value object.
    """
    model_config = ConfigDict(populate_by_name=True)

    link: str = Field(description="Direct URL of the image")
    display_link: str = Field(
        default="",
        alias="displayLink",
        description="Hostname of the page hosting the image",
    )
    title: str = Field(default="", description="Title of the page hosting the image")


class ImageSearchResponse(BaseModel):
    """
    Response wrapper for POST /search: the generated phrases and every image found.
    """
    model_config = ConfigDict(populate_by_name=True)

    search_terms: list[str] = Field(
        alias="searchTerms",
        description="Search phrases generated from the lesson text, in order",
    )
    results: list[ImageResult] = Field(
        default_factory=list,
        description="Images ordered by phrase, then by search rank",
    )


class HealthResponse(BaseModel):
    status: str = Field(default="ok")
    model: str = Field(description="Completion model used to generate phrases")
