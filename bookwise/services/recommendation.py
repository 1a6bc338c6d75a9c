"""Recommendation request handling: generative model first, keyword fallback second."""

import json
import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from bookwise.config import FallbackMarker
from bookwise.domain import catalog
from bookwise.domain.errors import InvalidQueryError, MalformedModelOutputError
from bookwise.domain.models import Book, Recommendation
from bookwise.ports.llm import LLMPort
from bookwise.ports.recommender import RecommenderPort
from bookwise.services.extraction import extract_json_array

logger = logging.getLogger(__name__)

FALLBACK_SOURCE = "fallback"


def parse_query(raw_body: str | bytes | None) -> str:
    """
    Pull ``query`` out of a JSON request body.

    Raises InvalidQueryError when the body is not a JSON object or ``query``
    is missing, not a string, or blank.
    """
    try:
        payload = json.loads(raw_body or "{}")
    except ValueError as exc:
        raise InvalidQueryError() from exc
    if not isinstance(payload, dict):
        raise InvalidQueryError()
    query = payload.get("query")
    if not isinstance(query, str) or not query.strip():
        raise InvalidQueryError()
    return query


@dataclass(frozen=True)
class RecommendationOutcome:
    query: str
    recommendations: list[Recommendation]
    source: str | None = None

    @property
    def used_fallback(self) -> bool:
        return self.source == FALLBACK_SOURCE

    def as_payload(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "recommendations": [r.as_payload() for r in self.recommendations],
            "query": self.query,
        }
        if self.source is not None:
            body["source"] = self.source
        return body


class RecommendationService:
    """
    Turns a reader's query into at most ``max_results`` recommendations.

    One call to the generative backend per request, no retries. Failures never
    propagate: a backend error, unparsable output or output referencing no
    catalog book all end in the keyword recommender.
    """

    def __init__(
        self,
        llm: LLMPort,
        fallback: RecommenderPort,
        books: Sequence[Book] = catalog.BOOKS,
        fallback_marker: FallbackMarker = FallbackMarker.LEGACY,
        max_results: int = 5,
    ) -> None:
        self._llm = llm
        self._fallback = fallback
        self._books = tuple(books)
        self._known_ids = {b.id for b in self._books}
        self._marker = fallback_marker
        if max_results < 1:
            raise ValueError("max_results must be at least 1")
        self._max_results = max_results

    async def recommend(self, query: str) -> RecommendationOutcome:
        if not isinstance(query, str) or not query.strip():
            raise InvalidQueryError()

        try:
            recommendations = await self._ask_model(query)
        except MalformedModelOutputError as exc:
            logger.warning("Failed to parse model recommendations: %s", exc)
            source = FALLBACK_SOURCE if self._marker is FallbackMarker.ALWAYS else None
            return RecommendationOutcome(query, self._fallback.recommend(query), source)
        except Exception:
            logger.exception("Error getting recommendations, using keyword fallback")
            return RecommendationOutcome(query, self._fallback.recommend(query), FALLBACK_SOURCE)

        logger.info("Model returned %d recommendations", len(recommendations))
        return RecommendationOutcome(query, recommendations)

    async def _ask_model(self, query: str) -> list[Recommendation]:
        answer = await self._llm.recommend_books(self._books, query)
        parsed = extract_json_array(answer)
        if parsed is None:
            raise MalformedModelOutputError("No JSON array found in model output")
        recommendations = self.validate(parsed)
        if not recommendations:
            raise MalformedModelOutputError("Model output holds no valid recommendations")
        return recommendations

    def validate(self, items: list[Any]) -> list[Recommendation]:
        """
        Keep only well-formed entries that reference catalogued books.

        Survivors are ordered by descending confidence, capped at
        ``max_results`` and renumbered "1".."N".
        """
        kept: list[tuple[str, str, float]] = []
        seen: set[str] = set()
        for item in items:
            if not isinstance(item, dict):
                continue
            book_id = item.get("bookId")
            if isinstance(book_id, int) and not isinstance(book_id, bool):
                book_id = str(book_id)
            if not isinstance(book_id, str) or book_id not in self._known_ids:
                logger.warning("Dropping recommendation for unknown book id %r", book_id)
                continue
            if book_id in seen:
                continue
            reason = item.get("reason")
            if not isinstance(reason, str) or not reason.strip():
                continue
            confidence = item.get("confidence")
            if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
                continue
            if math.isnan(confidence) or not 0.0 <= confidence <= 1.0:
                continue
            seen.add(book_id)
            kept.append((book_id, reason, float(confidence)))

        kept.sort(key=lambda entry: entry[2], reverse=True)
        return [
            Recommendation(id=str(position), book_id=book_id, reason=reason, confidence=confidence)
            for position, (book_id, reason, confidence) in enumerate(
                kept[: self._max_results], start=1
            )
        ]
