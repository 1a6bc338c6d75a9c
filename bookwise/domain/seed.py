"""Sample users and reading lists loaded by the in-memory adapters."""

from datetime import datetime

from bookwise.domain.models import ReadingList, User

MOCK_USERS: tuple[User, ...] = (
    User(id="1", email="john.doe@example.com", name="John Doe"),
    User(id="2", email="admin@library.com", name="Admin User"),
)


def mock_reading_lists() -> list[ReadingList]:
    """Fresh copies each call; adapters mutate their lists in place."""
    return [
        ReadingList(
            id="1",
            user_id="1",
            name="Summer Reading 2024",
            description="Books to read during summer vacation",
            book_ids=["1", "2", "4"],
            created_at=datetime.fromisoformat("2024-06-01T10:00:00+00:00"),
            updated_at=datetime.fromisoformat("2024-06-15T14:30:00+00:00"),
        ),
        ReadingList(
            id="2",
            user_id="1",
            name="Sci-Fi Favorites",
            description="My favorite science fiction novels",
            book_ids=["2", "7"],
            created_at=datetime.fromisoformat("2024-05-10T10:00:00+00:00"),
            updated_at=datetime.fromisoformat("2024-05-10T10:00:00+00:00"),
        ),
    ]
