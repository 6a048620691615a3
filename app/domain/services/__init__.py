"""
Domain services package.

Services orchestrate domain logic that doesn't naturally belong to a single
value object. They coordinate between value objects and ports to implement
use cases.

Following Hexagonal Architecture principles, services depend only on domain
value objects and port protocols (never on concrete implementations).
"""

from .term_generator import TermGenerator
from .image_searcher import ImageSearcher
from .lesson_image_service import LessonImageService

__all__ = [
    "TermGenerator",
    "ImageSearcher",
    "LessonImageService",
]
