"""Amazon Bedrock adapter for Anthropic models (Claude 3 Haiku by default)."""

import asyncio
import json
import logging
from collections.abc import Sequence
from functools import partial
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from bookwise.domain.errors import BackendUnavailableError, MalformedModelOutputError
from bookwise.domain.models import Book
from bookwise.ports.llm import LLMPort
from bookwise.prompts.templates import RECOMMEND_BOOKS, render_recommendation_prompt

logger = logging.getLogger(__name__)


class BedrockLLMAdapter(LLMPort):
    """LLM adapter invoking an Anthropic model through ``bedrock-runtime``."""

    provider = "bedrock"

    def __init__(
        self,
        model_id: str,
        region: str,
        anthropic_version: str = "bedrock-2023-05-31",
        client: Any = None,
    ) -> None:
        self._client = client or boto3.client("bedrock-runtime", region_name=region)
        self._model_id = model_id
        self._anthropic_version = anthropic_version
        logger.info("Bedrock adapter initialized: model=%s, region=%s", model_id, region)

    async def _generate(self, system: str, user: str, max_tokens: int) -> str:
        """Invoke the model and return the text of the first content block."""
        body = json.dumps(
            {
                "anthropic_version": self._anthropic_version,
                "max_tokens": max_tokens,
                "system": system,
                "messages": [{"role": "user", "content": user}],
            }
        )
        logger.info("Bedrock request: model=%s, max_tokens=%d", self._model_id, max_tokens)
        loop = asyncio.get_running_loop()
        try:
            resp = await loop.run_in_executor(
                None,
                partial(
                    self._client.invoke_model,
                    modelId=self._model_id,
                    contentType="application/json",
                    accept="application/json",
                    body=body,
                ),
            )
            raw = resp["body"].read()
        except (BotoCoreError, ClientError) as exc:
            raise BackendUnavailableError(str(exc), provider=self.provider) from exc

        try:
            payload = json.loads(raw)
        except ValueError as exc:
            raise BackendUnavailableError(
                "Bedrock returned an undecodable response body", provider=self.provider
            ) from exc

        content = payload.get("content") if isinstance(payload, dict) else None
        if not content or not isinstance(content[0], dict) or "text" not in content[0]:
            raise MalformedModelOutputError(
                "Bedrock response has no text content block", provider=self.provider
            )
        result = content[0]["text"]
        logger.info("Bedrock response: %d chars", len(result))
        return result

    async def recommend_books(self, books: Sequence[Book], query: str) -> str:
        """Ask the Bedrock-hosted model for catalog recommendations."""
        prompt = render_recommendation_prompt(books, query)
        return await self._generate(
            prompt["system"], prompt["user"], RECOMMEND_BOOKS.max_tokens
        )
