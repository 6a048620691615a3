"""
Validation of raw completion text into search phrases.

The completion service is asked for a bare JSON array of phrases, but
nothing guarantees it complies. `parse_phrase_list` inspects the raw text
and returns exactly one of two outcomes:

- ValidPhraseList: a well-formed list of the expected number of phrases
- PhraseParseError: the reason the text was rejected

Callers decide what to do with a rejection; this module never raises.
"""

import json
from dataclasses import dataclass
from typing import Tuple, Union

from .value_objects import TERMS_PER_LESSON


@dataclass(frozen=True)
class ValidPhraseList:
    """Completion text that decoded to the expected list of phrases."""

    phrases: Tuple[str, ...]


@dataclass(frozen=True)
class PhraseParseError:
    """Completion text that could not be turned into phrases."""

    reason: str


PhraseParseResult = Union[ValidPhraseList, PhraseParseError]


def parse_phrase_list(raw_text: str, expected_count: int = TERMS_PER_LESSON) -> PhraseParseResult:
    """
    Decode and validate the completion output.

    Checks, in order:
    1. The text is valid JSON
    2. The decoded value is a JSON array
    3. The array has exactly `expected_count` elements
    4. Every element is a string that is not blank

    Surrounding whitespace is stripped from the text and from each phrase.

    Args:
        raw_text: Text returned by the completion service
        expected_count: Required number of phrases

    Returns:
        ValidPhraseList on success, PhraseParseError otherwise
    """
    if raw_text is None:
        return PhraseParseError("completion returned no text")

    try:
        decoded = json.loads(raw_text.strip())
    except (json.JSONDecodeError, TypeError) as e:
        return PhraseParseError(f"completion output is not valid JSON: {e}")

    if not isinstance(decoded, list):
        return PhraseParseError(
            f"completion output must be a JSON array, got {type(decoded).__name__}"
        )

    if len(decoded) != expected_count:
        return PhraseParseError(
            f"completion output must contain exactly {expected_count} phrases, "
            f"got {len(decoded)}"
        )

    phrases = []
    for position, item in enumerate(decoded, start=1):
        if not isinstance(item, str):
            return PhraseParseError(
                f"phrase {position} must be a string, got {type(item).__name__}"
            )
        if not item.strip():
            return PhraseParseError(f"phrase {position} is empty")
        phrases.append(item.strip())

    return ValidPhraseList(phrases=tuple(phrases))
