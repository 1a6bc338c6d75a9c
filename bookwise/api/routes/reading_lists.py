"""Reading-list routes; every list is scoped to the signed-in user."""

from fastapi import APIRouter, Depends, Response, status

from bookwise.api.deps import get_current_user, get_reading_list_service
from bookwise.api.schemas import (
    ReadingListCreateRequest,
    ReadingListResponse,
    ReadingListUpdateRequest,
)
from bookwise.domain.models import User
from bookwise.services.reading_lists import ReadingListService

router = APIRouter(prefix="/reading-lists", tags=["Reading Lists"])


@router.get("", response_model=list[ReadingListResponse])
async def list_reading_lists(
    user: User = Depends(get_current_user),
    service: ReadingListService = Depends(get_reading_list_service),
) -> list[ReadingListResponse]:
    lists = await service.list_lists(user.id)
    return [ReadingListResponse.model_validate(rl) for rl in lists]


@router.post("", response_model=ReadingListResponse, status_code=status.HTTP_201_CREATED)
async def create_reading_list(
    data: ReadingListCreateRequest,
    user: User = Depends(get_current_user),
    service: ReadingListService = Depends(get_reading_list_service),
) -> ReadingListResponse:
    reading_list = await service.create_list(
        user.id, data.name, data.description, data.book_ids
    )
    return ReadingListResponse.model_validate(reading_list)


@router.get("/{list_id}", response_model=ReadingListResponse)
async def get_reading_list(
    list_id: str,
    user: User = Depends(get_current_user),
    service: ReadingListService = Depends(get_reading_list_service),
) -> ReadingListResponse:
    return ReadingListResponse.model_validate(await service.get_list(list_id, user.id))


@router.put("/{list_id}", response_model=ReadingListResponse)
async def update_reading_list(
    list_id: str,
    data: ReadingListUpdateRequest,
    user: User = Depends(get_current_user),
    service: ReadingListService = Depends(get_reading_list_service),
) -> ReadingListResponse:
    reading_list = await service.update_list(
        list_id,
        user.id,
        name=data.name,
        description=data.description,
        book_ids=data.book_ids,
    )
    return ReadingListResponse.model_validate(reading_list)


@router.delete("/{list_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reading_list(
    list_id: str,
    user: User = Depends(get_current_user),
    service: ReadingListService = Depends(get_reading_list_service),
) -> Response:
    await service.delete_list(list_id, user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
