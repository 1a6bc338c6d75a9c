"""Reading-list repository port."""

from abc import ABC, abstractmethod

from bookwise.domain.models import ReadingList


class ReadingListRepository(ABC):
    """Storage for reading lists, keyed by list id and scoped by owner."""

    @abstractmethod
    async def list_for_user(self, user_id: str) -> list[ReadingList]:
        ...

    @abstractmethod
    async def get(self, list_id: str) -> ReadingList | None:
        ...

    @abstractmethod
    async def add(self, reading_list: ReadingList) -> ReadingList:
        ...

    @abstractmethod
    async def save(self, reading_list: ReadingList) -> ReadingList:
        ...

    @abstractmethod
    async def delete(self, list_id: str) -> bool:
        """Remove a list. Returns False when it did not exist."""
        ...
