"""
Value objects for the domain layer.

Value objects are immutable objects that represent descriptive aspects
of the domain with no conceptual identity.
"""

from dataclasses import dataclass, field
from typing import Tuple


TERMS_PER_LESSON = 3
"""Number of search phrases generated for every lesson text"""


@dataclass(frozen=True)
class SearchPhraseSet:
    """
    The ordered search phrases derived from one lesson text.

    Created once per request by the TermGenerator and consumed by the
    orchestrator. The order matters: it is the order in which image
    results are laid out in the final response.
    """

    phrases: Tuple[str, ...]
    """Exactly TERMS_PER_LESSON non-empty phrases, in generation order"""

    def __post_init__(self) -> None:
        """Validate phrase set constraints."""
        # Accept any sequence but store a tuple so the set stays immutable
        object.__setattr__(self, "phrases", tuple(self.phrases))

        if len(self.phrases) != TERMS_PER_LESSON:
            raise ValueError(
                f"expected exactly {TERMS_PER_LESSON} search phrases, "
                f"got {len(self.phrases)}"
            )

        for phrase in self.phrases:
            if not isinstance(phrase, str) or not phrase.strip():
                raise ValueError(f"search phrases must be non-empty strings, got {phrase!r}")

    def __iter__(self):
        return iter(self.phrases)

    def __len__(self) -> int:
        return len(self.phrases)

    def as_list(self) -> list[str]:
        """Return the phrases as a plain list (for serialization)."""
        return list(self.phrases)


@dataclass(frozen=True)
class ImageResult:
    """
    A single image found for a search phrase.

    Duplicate links across different phrases are allowed; results are
    never deduplicated.
    """

    link: str
    """Direct URL of the image"""

    display_link: str = ""
    """Hostname of the page hosting the image (e.g., 'en.wikipedia.org')"""

    title: str = ""
    """Title of the page hosting the image"""

    def __post_init__(self) -> None:
        """Validate result constraints."""
        if not self.link or not self.link.strip():
            raise ValueError("image link cannot be empty")


@dataclass(frozen=True)
class ImageSearchResponse:
    """
    Aggregated outcome of one lesson text run through the pipeline.

    Results are ordered by phrase first, then by the order in which the
    search service returned them for that phrase.
    """

    search_terms: SearchPhraseSet
    """The phrases that were searched"""

    results: Tuple[ImageResult, ...] = field(default_factory=tuple)
    """Flattened image results across all phrases"""

    def __post_init__(self) -> None:
        object.__setattr__(self, "results", tuple(self.results))
