"""
Tests for domain value objects.
"""

import pytest

from app.domain.value_objects import (
    SearchPhraseSet,
    ImageResult,
    ImageSearchResponse,
    TERMS_PER_LESSON,
)


class TestSearchPhraseSet:
    """Tests for the SearchPhraseSet value object."""

    def test_create_with_three_phrases(self):
        """Test creating a phrase set with the expected number of phrases."""
        phrases = SearchPhraseSet(phrases=("a", "b", "c"))

        assert len(phrases) == TERMS_PER_LESSON
        assert list(phrases) == ["a", "b", "c"]
        assert phrases.as_list() == ["a", "b", "c"]

    def test_list_input_is_stored_as_tuple(self):
        """A list passed in is frozen into a tuple."""
        source = ["a", "b", "c"]
        phrases = SearchPhraseSet(phrases=source)
        source.append("d")

        assert phrases.phrases == ("a", "b", "c")

    @pytest.mark.parametrize("values", [("a", "b"), ("a", "b", "c", "d"), ()])
    def test_wrong_count_raises(self, values):
        """Only exactly three phrases are accepted."""
        with pytest.raises(ValueError, match="exactly 3"):
            SearchPhraseSet(phrases=values)

    def test_blank_phrase_raises(self):
        """Blank phrases are rejected."""
        with pytest.raises(ValueError, match="non-empty strings"):
            SearchPhraseSet(phrases=("a", "  ", "c"))

    def test_non_string_phrase_raises(self):
        """Non-string phrases are rejected."""
        with pytest.raises(ValueError, match="non-empty strings"):
            SearchPhraseSet(phrases=("a", 2, "c"))

    def test_immutability(self):
        """Test that the phrase set is immutable (frozen dataclass)."""
        phrases = SearchPhraseSet(phrases=("a", "b", "c"))

        with pytest.raises(Exception):  # FrozenInstanceError
            phrases.phrases = ("x", "y", "z")


class TestImageResult:
    """Tests for the ImageResult value object."""

    def test_create_image_result(self):
        result = ImageResult(
            link="https://example.com/a.png",
            display_link="example.com",
            title="A",
        )

        assert result.link == "https://example.com/a.png"
        assert result.display_link == "example.com"
        assert result.title == "A"

    def test_optional_fields_default_to_empty(self):
        result = ImageResult(link="https://example.com/a.png")

        assert result.display_link == ""
        assert result.title == ""

    def test_empty_link_raises(self):
        with pytest.raises(ValueError, match="link cannot be empty"):
            ImageResult(link="")

    def test_equal_results_compare_equal(self):
        """Duplicates are plain values; nothing makes two equal results distinct."""
        first = ImageResult(link="https://example.com/a.png", display_link="example.com")
        second = ImageResult(link="https://example.com/a.png", display_link="example.com")

        assert first == second


class TestImageSearchResponse:
    """Tests for the ImageSearchResponse value object."""

    def test_results_are_frozen_into_tuple(self):
        results = [ImageResult(link="https://example.com/a.png")]
        response = ImageSearchResponse(
            search_terms=SearchPhraseSet(phrases=("a", "b", "c")),
            results=results,
        )
        results.append(ImageResult(link="https://example.com/b.png"))

        assert len(response.results) == 1
        assert isinstance(response.results, tuple)

    def test_defaults_to_no_results(self):
        response = ImageSearchResponse(search_terms=SearchPhraseSet(phrases=("a", "b", "c")))

        assert response.results == ()
