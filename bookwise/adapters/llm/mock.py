import json
import logging
from collections.abc import Sequence

from bookwise.domain.models import Book
from bookwise.ports.llm import LLMPort
from bookwise.prompts.templates import estimate_tokens, render_recommendation_prompt

logger = logging.getLogger(__name__)


class MockLLMAdapter(LLMPort):
    """
    Mock LLM adapter for local development without model access.

    Answers the way a chat model typically does: a sentence of prose followed
    by a JSON array. Books whose genre is named in the query are preferred;
    otherwise the first catalog entries are suggested.
    """

    provider = "mock"

    def __init__(self, max_picks: int = 3) -> None:
        self._max_picks = max_picks

    async def recommend_books(self, books: Sequence[Book], query: str) -> str:
        """Return a deterministic, model-shaped recommendation answer."""
        prompt = render_recommendation_prompt(books, query)
        logger.info(
            "MockLLM: recommend_books called (%d books, %d estimated tokens)",
            len(books),
            estimate_tokens(prompt["system"] + prompt["user"]),
        )

        lowered = query.lower()
        picks = [b for b in books if b.genre.lower() in lowered][: self._max_picks]
        if not picks:
            picks = list(books[: self._max_picks])

        items = [
            {
                "id": str(position),
                "bookId": book.id,
                "reason": (
                    f'"{book.title}" by {book.author} is a {book.genre.lower()} pick '
                    f"that fits your request: {book.description}"
                ),
                "confidence": round(0.95 - (position - 1) * 0.05, 2),
            }
            for position, book in enumerate(picks, start=1)
        ]
        return "Here are my recommendations:\n" + json.dumps(items, indent=2)
