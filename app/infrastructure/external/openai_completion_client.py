"""
OpenAI completions client implementing the CompletionClient port.

=============================================================================
NOTES: Infrastructure Adapter Pattern
=============================================================================

This class is an ADAPTER in Hexagonal Architecture. It:
1. Implements a domain PORT (CompletionClient)
2. Handles infrastructure concerns (HTTP, auth headers, JSON parsing)
3. Translates the provider's response into a domain CompletionResult

The constructor accepts an optional `session` parameter:
- In production: uses requests.Session() by default
- In tests: inject a fake session that returns canned responses

=============================================================================
"""

import logging
from typing import Any, Optional

import requests

from app.domain.exceptions import UpstreamGenerationError
from app.domain.ports import CompletionClient, CompletionResult

logger = logging.getLogger(__name__)


class OpenAICompletionClient(CompletionClient):
    """
    Client for the OpenAI legacy completions endpoint.

    Usage:
        # Production
        client = OpenAICompletionClient(api_key="sk-...", model="gpt-3.5-turbo-instruct")
        result = client.complete(prompt, max_tokens=256, model=client.get_model_name())

        # Testing (with fake session)
        client = OpenAICompletionClient(api_key="test", session=fake_session)
    """

    BASE_URL = "https://api.openai.com/v1/completions"

    def __init__(
        self,
        api_key: str,
        model: str,
        timeout: float = 10.0,
        session: Optional[Any] = None,
    ) -> None:
        """
        Initialize the OpenAI client.

        Args:
            api_key: OpenAI API key, sent as a bearer token
            model: Default model identifier reported by get_model_name()
            timeout: Per-request timeout in seconds
            session: Optional HTTP session for dependency injection.
                    If None, creates a new requests.Session().
        """
        if not api_key:
            raise ValueError("api_key cannot be empty")

        self._model = model
        self._timeout = timeout
        # Shared by the worker threads running concurrent calls: headers are set
        # once here and no per-request state (cookies, auth) is written later
        self._session = session if session is not None else requests.Session()
        self._session.headers.update({
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        })

    def get_model_name(self) -> str:
        """Get the default model identifier."""
        return self._model

    def complete(self, prompt: str, max_tokens: int, model: str) -> CompletionResult:
        """
        Request a completion for a prompt.

        Args:
            prompt: Instruction text
            max_tokens: Output length limit
            model: Model identifier

        Returns:
            CompletionResult with the text of the first choice

        Raises:
            UpstreamGenerationError: If the request fails, the status is not
                successful, or the body carries no generated text
        """
        payload = {
            "model": model,
            "prompt": prompt,
            "max_tokens": max_tokens,
        }

        try:
            response = self._session.post(self.BASE_URL, json=payload, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            logger.warning(f"OpenAI completion request failed: {type(e).__name__}")
            raise UpstreamGenerationError(f"OpenAI completion request failed: {e}") from e
        except ValueError as e:
            # Body was not JSON
            raise UpstreamGenerationError(f"OpenAI returned an unreadable response: {e}") from e

        return CompletionResult(text=self._extract_text(data))

    # =========================================================================
    # Private helper methods
    # =========================================================================

    def _extract_text(self, data: Any) -> str:
        """
        Pull the generated text out of a completions response body.

        Args:
            data: Decoded JSON body, expected as {"choices": [{"text": ...}]}

        Returns:
            The text of the first choice

        Raises:
            UpstreamGenerationError: If the body has no usable first choice
        """
        try:
            text = data["choices"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise UpstreamGenerationError("Unexpected OpenAI response format") from e

        if not isinstance(text, str):
            raise UpstreamGenerationError("Unexpected OpenAI response format")

        return text
