"""
AWS Lambda entry point for API Gateway proxy events.

Deployed with ``bookwise.lambda_handler.handler`` as the function handler.
The recommendation service is built once per container on first use and every
invocation runs on the same event loop, so pooled HTTP clients held by the
backend adapters stay usable across warm invocations. ``make_handler`` wires a
handler around an explicit service instead.
"""

import asyncio
import base64
import json
import logging
from collections.abc import Callable, Coroutine
from functools import lru_cache
from typing import Any, TypeVar

from bookwise.config import get_settings
from bookwise.container import build_recommendation_service
from bookwise.domain.errors import InvalidQueryError
from bookwise.logging_config import configure_logging
from bookwise.services.recommendation import RecommendationService, parse_query

logger = logging.getLogger(__name__)

T = TypeVar("T")

HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
}

LambdaHandler = Callable[[dict[str, Any], Any], dict[str, Any]]

_loop = asyncio.new_event_loop()


def _run(coro: Coroutine[Any, Any, T]) -> T:
    """Run ``coro`` to completion on the container-wide event loop."""
    return _loop.run_until_complete(coro)


def _response(status_code: int, body: dict[str, Any]) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(HEADERS),
        "body": json.dumps(body, ensure_ascii=False),
    }


def _event_body(event: dict[str, Any]) -> str | None:
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body).decode("utf-8")
        except ValueError as exc:
            raise InvalidQueryError() from exc
    return body


async def handle_event(service: RecommendationService, event: dict[str, Any]) -> dict[str, Any]:
    try:
        query = parse_query(_event_body(event))
    except InvalidQueryError as exc:
        return _response(400, {"error": str(exc)})

    outcome = await service.recommend(query)
    return _response(200, outcome.as_payload())


def make_handler(service: RecommendationService) -> LambdaHandler:
    """Build a Lambda handler bound to ``service``."""

    def _handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
        return _run(handle_event(service, event))

    return _handler


@lru_cache
def _default_service() -> RecommendationService:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Initializing recommendation service (provider=%s)", settings.llm_provider.value)
    return build_recommendation_service(settings)


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    return _run(handle_event(_default_service(), event))
