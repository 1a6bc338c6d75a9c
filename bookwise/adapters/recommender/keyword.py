"""
Keyword-based fallback recommender.

Works entirely offline: the query is lower-cased and checked against the
category table in declaration order. The first category with a keyword
occurring anywhere in the query supplies up to ``max_results`` picks, scored
on a fixed linear decay (0.90, 0.87, 0.84, ...). Queries matching nothing get
the generic picks, each reason quoting the query back to the reader.
"""

import logging
from collections.abc import Sequence

from bookwise.adapters.recommender.categories import (
    CATEGORIES,
    GENERIC_PICKS,
    Category,
)
from bookwise.domain.models import Recommendation
from bookwise.ports.recommender import RecommenderPort

logger = logging.getLogger(__name__)

TOP_CONFIDENCE = 0.90
CONFIDENCE_STEP = 0.03


class KeywordRecommender(RecommenderPort):
    """Deterministic recommender driven by a static keyword table."""

    def __init__(
        self,
        categories: Sequence[Category] = CATEGORIES,
        generic_picks: Sequence[tuple[str, str, float]] = GENERIC_PICKS,
        max_results: int = 5,
    ) -> None:
        self._categories = tuple(categories)
        self._generic = tuple(generic_picks)
        if max_results < 1:
            raise ValueError("max_results must be at least 1")
        self._max_results = max_results

    def match(self, query: str) -> Category | None:
        """Return the first category triggered by ``query``, if any."""
        normalized = query.lower()
        for category in self._categories:
            if category.matches(normalized):
                return category
        return None

    def recommend(self, query: str) -> list[Recommendation]:
        category = self.match(query)
        if category is None:
            logger.info("Keyword fallback: no category matched, using generic picks")
            scored = [
                (book_id, reason.format(query=query), confidence)
                for book_id, reason, confidence in self._generic
            ]
        else:
            logger.info("Keyword fallback: matched category '%s'", category.tag.value)
            scored = [
                (book_id, reason, round(TOP_CONFIDENCE - index * CONFIDENCE_STEP, 2))
                for index, (book_id, reason) in enumerate(
                    category.picks[: self._max_results]
                )
            ]

        return [
            Recommendation(
                id=str(position),
                book_id=book_id,
                reason=reason,
                confidence=confidence,
            )
            for position, (book_id, reason, confidence) in enumerate(
                scored[: self._max_results], start=1
            )
        ]
