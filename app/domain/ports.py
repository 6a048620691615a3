"""
Port interfaces (protocols) for the domain layer.

Ports define the contracts between the domain and infrastructure layers.
They are implemented by adapters in the infrastructure layer, allowing
the domain to remain independent of technical details.

Following Hexagonal Architecture principles, the domain layer depends only
on these abstract protocols, never on concrete implementations.
"""

from dataclasses import dataclass
from typing import Protocol, List, Dict, Any


@dataclass(frozen=True)
class CompletionResult:
    """Text produced by a completion call."""

    text: str
    """The generated text, exactly as returned by the service"""


class CompletionClient(Protocol):
    """
    Port for a text-completion service.

    The TermGenerator uses it to turn a prompt into generated text. The
    actual model provider (OpenAI, a local model, etc.) is an
    implementation detail.
    """

    def complete(self, prompt: str, max_tokens: int, model: str) -> CompletionResult:
        """
        Generate text for a prompt.

        Args:
            prompt: The full instruction text sent to the model
            max_tokens: Upper bound on the length of the generated text
            model: Identifier of the model to use

        Returns:
            CompletionResult with the generated text

        Raises:
            UpstreamGenerationError: If the service cannot be reached,
                answers with a non-success status, or returns a body
                without generated text
        """
        ...

    def get_model_name(self) -> str:
        """
        Get the identifier of the default model for this client.

        Returns:
            Model name (e.g., 'gpt-3.5-turbo-instruct')
        """
        ...


class ImageSearchProvider(Protocol):
    """
    Port for an image search service.

    Implementations hold their own credentials and search context, so
    the domain only passes the query text.
    """

    def image_search(self, query: str) -> List[Dict[str, Any]]:
        """
        Search images for a query.

        Args:
            query: The search phrase

        Returns:
            Raw result items in the order returned by the service. Each
            item is expected to carry 'link', 'displayLink' and 'title'.
            An empty list when the service found nothing.

        Raises:
            UpstreamSearchError: If the service cannot be reached or
                answers with a non-success status
        """
        ...
