import pytest
from fastapi import HTTPException

from bookwise.adapters.storage.memory import InMemoryReadingListRepository
from bookwise.domain.seed import mock_reading_lists
from bookwise.services.reading_lists import ReadingListService


@pytest.fixture
def service() -> ReadingListService:
    return ReadingListService(InMemoryReadingListRepository(seed=mock_reading_lists()))


async def test_lists_are_scoped_to_owner_and_ordered(service):
    lists = await service.list_lists("1")
    assert [rl.name for rl in lists] == ["Sci-Fi Favorites", "Summer Reading 2024"]
    assert await service.list_lists("2") == []


async def test_create_deduplicates_book_ids(service):
    created = await service.create_list("2", "Holiday", book_ids=["5", "21", "5"])

    assert created.book_ids == ["5", "21"]
    assert created.user_id == "2"
    assert [rl.id for rl in await service.list_lists("2")] == [created.id]


async def test_create_rejects_unknown_books(service):
    with pytest.raises(HTTPException) as info:
        await service.create_list("1", "Bad", book_ids=["1", "999"])
    assert info.value.status_code == 400
    assert "999" in info.value.detail


async def test_other_users_list_is_not_found(service):
    with pytest.raises(HTTPException) as info:
        await service.get_list("1", "2")
    assert info.value.status_code == 404


async def test_update_is_partial_and_touches_updated_at(service):
    before = await service.get_list("1", "1")
    updated = await service.update_list("1", "1", book_ids=["3"])

    assert updated.name == before.name
    assert updated.description == before.description
    assert updated.book_ids == ["3"]
    assert updated.updated_at > before.updated_at
    assert (await service.get_list("1", "1")).book_ids == ["3"]


async def test_returned_lists_are_copies(service):
    fetched = await service.get_list("2", "1")
    fetched.book_ids.append("70")
    assert (await service.get_list("2", "1")).book_ids == ["2", "7"]


async def test_delete_removes_list(service):
    await service.delete_list("2", "1")
    with pytest.raises(HTTPException):
        await service.get_list("2", "1")


async def test_delete_of_other_users_list_is_refused(service):
    with pytest.raises(HTTPException) as info:
        await service.delete_list("1", "2")
    assert info.value.status_code == 404
    assert await service.get_list("1", "1")
