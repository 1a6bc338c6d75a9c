"""In-process reading-list storage."""

import logging
from dataclasses import replace

from bookwise.domain.models import ReadingList
from bookwise.ports.reading_lists import ReadingListRepository

logger = logging.getLogger(__name__)


class InMemoryReadingListRepository(ReadingListRepository):
    """Keeps reading lists in a dict. State is lost on restart and not shared between workers."""

    def __init__(self, seed: list[ReadingList] | None = None) -> None:
        self._lists: dict[str, ReadingList] = {}
        for reading_list in seed or []:
            self._lists[reading_list.id] = reading_list
        logger.info("InMemory reading lists initialized with %d lists", len(self._lists))

    async def list_for_user(self, user_id: str) -> list[ReadingList]:
        return [replace(rl, book_ids=list(rl.book_ids)) for rl in self._lists.values() if rl.user_id == user_id]

    async def get(self, list_id: str) -> ReadingList | None:
        found = self._lists.get(list_id)
        return replace(found, book_ids=list(found.book_ids)) if found else None

    async def add(self, reading_list: ReadingList) -> ReadingList:
        self._lists[reading_list.id] = reading_list
        return reading_list

    async def save(self, reading_list: ReadingList) -> ReadingList:
        self._lists[reading_list.id] = reading_list
        return reading_list

    async def delete(self, list_id: str) -> bool:
        return self._lists.pop(list_id, None) is not None
