import logging
from collections.abc import Sequence

from openai import AsyncOpenAI, OpenAIError

from bookwise.domain.errors import BackendUnavailableError, MalformedModelOutputError
from bookwise.domain.models import Book
from bookwise.ports.llm import LLMPort
from bookwise.prompts.templates import RECOMMEND_BOOKS, render_recommendation_prompt

logger = logging.getLogger(__name__)


class OpenAILLMAdapter(LLMPort):
    """Recommendation backend on the OpenAI chat completions API."""

    provider = "openai"

    def __init__(
        self,
        api_key: str | None,
        model: str,
        base_url: str | None = None,
        temperature: float = 0.7,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._client = client or AsyncOpenAI(api_key=api_key, base_url=base_url)
        self._model = model
        self._temperature = temperature

    async def recommend_books(self, books: Sequence[Book], query: str) -> str:
        prompt = render_recommendation_prompt(books, query)
        logger.info(
            "OpenAI recommendation request: model=%s, catalog=%d books",
            self._model,
            len(books),
        )
        try:
            completion = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": prompt["system"]},
                    {"role": "user", "content": prompt["user"]},
                ],
                max_tokens=RECOMMEND_BOOKS.max_tokens,
                temperature=self._temperature,
            )
        except OpenAIError as exc:
            raise BackendUnavailableError(str(exc), provider=self.provider) from exc

        if not completion.choices or not completion.choices[0].message.content:
            raise MalformedModelOutputError(
                "OpenAI completion has no message content", provider=self.provider
            )
        answer = completion.choices[0].message.content
        logger.info("OpenAI answered with %d chars", len(answer))
        return answer
