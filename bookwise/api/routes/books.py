"""Catalog browsing routes."""

from fastapi import APIRouter, HTTPException, Query

from bookwise.api.schemas import BookResponse
from bookwise.domain import catalog

router = APIRouter(prefix="/books", tags=["Books"])


@router.get("", response_model=list[BookResponse])
async def list_books(
    genre: str | None = Query(default=None, description="Exact genre, case-insensitive"),
    q: str | None = Query(default=None, description="Substring of title or author"),
) -> list[BookResponse]:
    books = catalog.list_books()
    if genre:
        wanted = genre.strip().lower()
        books = tuple(b for b in books if b.genre.lower() == wanted)
    if q:
        needle = q.strip().lower()
        books = tuple(
            b for b in books if needle in b.title.lower() or needle in b.author.lower()
        )
    return [BookResponse.model_validate(b) for b in books]


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(book_id: str) -> BookResponse:
    book = catalog.get_book(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return BookResponse.model_validate(book)
