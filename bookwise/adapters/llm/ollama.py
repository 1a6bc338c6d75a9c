import logging
from collections.abc import Sequence

import httpx

from bookwise.domain.errors import BackendUnavailableError, MalformedModelOutputError
from bookwise.domain.models import Book
from bookwise.ports.llm import LLMPort
from bookwise.prompts.templates import RECOMMEND_BOOKS, render_recommendation_prompt

logger = logging.getLogger(__name__)


class OllamaLLMAdapter(LLMPort):
    """Recommendation backend on a self-hosted Ollama server (``/api/chat``)."""

    provider = "ollama"

    def __init__(
        self,
        base_url: str,
        model: str,
        timeout: float = 180.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._chat_url = f"{base_url.rstrip('/')}/api/chat"
        self._model = model
        self._timeout = timeout
        self._transport = transport

    async def recommend_books(self, books: Sequence[Book], query: str) -> str:
        prompt = render_recommendation_prompt(books, query)
        # Plain chat mode: a JSON format constraint would force an object, not an array.
        payload = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": prompt["system"]},
                {"role": "user", "content": prompt["user"]},
            ],
            "stream": False,
            "options": {"num_predict": RECOMMEND_BOOKS.max_tokens},
        }
        logger.info("Ollama recommendation request: model=%s, url=%s", self._model, self._chat_url)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.post(self._chat_url, json=payload)
                resp.raise_for_status()
                body = resp.json()
        except httpx.HTTPError as exc:
            raise BackendUnavailableError(str(exc), provider=self.provider) from exc
        except ValueError as exc:
            raise BackendUnavailableError(
                "Ollama returned an undecodable response body", provider=self.provider
            ) from exc

        message = body.get("message") if isinstance(body, dict) else None
        answer = message.get("content") if isinstance(message, dict) else None
        if not isinstance(answer, str):
            raise MalformedModelOutputError(
                "Ollama response has no message content", provider=self.provider
            )
        logger.info("Ollama answered with %d chars", len(answer))
        return answer
