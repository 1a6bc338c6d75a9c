"""Domain records shared by the services, adapters and API layers."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Book:
    id: str
    title: str
    author: str
    genre: str
    description: str


@dataclass(frozen=True)
class Recommendation:
    """A single suggested book with the reason it was picked."""

    id: str
    book_id: str
    reason: str
    confidence: float

    def as_payload(self) -> dict[str, object]:
        """Wire representation used by every recommendation response."""
        return {
            "id": self.id,
            "bookId": self.book_id,
            "reason": self.reason,
            "confidence": self.confidence,
        }


@dataclass
class ReadingList:
    id: str
    user_id: str
    name: str
    description: str = ""
    book_ids: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)


@dataclass(frozen=True)
class User:
    id: str
    email: str
    name: str


@dataclass(frozen=True)
class AuthTokens:
    id_token: str
    access_token: str
    refresh_token: str | None = None
