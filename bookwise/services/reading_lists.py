"""Reading-list management with catalog and ownership checks."""

import uuid
from collections.abc import Iterable

from fastapi import HTTPException, status

from bookwise.domain import catalog
from bookwise.domain.models import ReadingList, utcnow
from bookwise.ports.reading_lists import ReadingListRepository


def _unique_book_ids(book_ids: Iterable[str]) -> list[str]:
    """De-duplicate while keeping first-seen order. Raises 400 on unknown ids."""
    ordered = list(dict.fromkeys(str(b) for b in book_ids))
    unknown = [b for b in ordered if not catalog.has_book(b)]
    if unknown:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown book id(s): {', '.join(unknown)}",
        )
    return ordered


class ReadingListService:
    """CRUD over a user's reading lists."""

    def __init__(self, repository: ReadingListRepository) -> None:
        self._repository = repository

    async def list_lists(self, user_id: str) -> list[ReadingList]:
        lists = await self._repository.list_for_user(user_id)
        return sorted(lists, key=lambda rl: rl.created_at)

    async def get_list(self, list_id: str, user_id: str) -> ReadingList:
        """
        Fetch one list owned by ``user_id``.

        Lists owned by someone else are reported exactly like missing ones.
        """
        reading_list = await self._repository.get(list_id)
        if reading_list is None or reading_list.user_id != user_id:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Reading list not found",
            )
        return reading_list

    async def create_list(
        self,
        user_id: str,
        name: str,
        description: str = "",
        book_ids: Iterable[str] = (),
    ) -> ReadingList:
        reading_list = ReadingList(
            id=str(uuid.uuid4()),
            user_id=user_id,
            name=name,
            description=description,
            book_ids=_unique_book_ids(book_ids),
        )
        return await self._repository.add(reading_list)

    async def update_list(
        self,
        list_id: str,
        user_id: str,
        name: str | None = None,
        description: str | None = None,
        book_ids: Iterable[str] | None = None,
    ) -> ReadingList:
        """Apply a partial update; fields left as None are unchanged."""
        reading_list = await self.get_list(list_id, user_id)
        if name is not None:
            reading_list.name = name
        if description is not None:
            reading_list.description = description
        if book_ids is not None:
            reading_list.book_ids = _unique_book_ids(book_ids)
        reading_list.updated_at = utcnow()
        return await self._repository.save(reading_list)

    async def delete_list(self, list_id: str, user_id: str) -> None:
        await self.get_list(list_id, user_id)
        await self._repository.delete(list_id)
