"""Recommender port: abstract interface for the offline recommendation engine."""

from abc import ABC, abstractmethod

from bookwise.domain.models import Recommendation


class RecommenderPort(ABC):
    """Abstraction for a recommender that needs no external service."""

    @abstractmethod
    def recommend(self, query: str) -> list[Recommendation]:
        """Return ranked recommendations for a free-text query. Never raises."""
        ...
