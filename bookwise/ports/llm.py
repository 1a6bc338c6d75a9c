"""LLM port: abstract interface for generative backends."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from bookwise.domain.models import Book


class LLMPort(ABC):
    """Abstraction over the generative model used for recommendations."""

    provider: str

    @abstractmethod
    async def recommend_books(self, books: Sequence[Book], query: str) -> str:
        """
        Ask the model for recommendations drawn from ``books``.

        Returns the model's raw answer text. The answer is expected to embed
        a JSON array but may surround it with prose.
        """
        ...
