"""Request and response models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes with camelCase keys, accepts either casing on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ── Books ──────────────────────────────────────────

class BookResponse(CamelModel):
    id: str
    title: str
    author: str
    genre: str
    description: str


# ── Recommendations ────────────────────────────────

class RecommendationRequest(BaseModel):
    query: str


class RecommendationItem(CamelModel):
    id: str
    book_id: str
    reason: str
    confidence: float = Field(ge=0.0, le=1.0)


class RecommendationsResponse(BaseModel):
    recommendations: list[RecommendationItem]
    query: str
    source: str | None = None


class ErrorResponse(BaseModel):
    error: str


# ── Reading Lists ──────────────────────────────────

class ReadingListCreateRequest(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    description: str = ""
    book_ids: list[str] = Field(default_factory=list)


class ReadingListUpdateRequest(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    book_ids: list[str] | None = None


class ReadingListResponse(CamelModel):
    id: str
    user_id: str
    name: str
    description: str
    book_ids: list[str]
    created_at: datetime
    updated_at: datetime


# ── Auth ───────────────────────────────────────────

class SignupRequest(BaseModel):
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str
    name: str = Field(min_length=1)


class ConfirmRequest(BaseModel):
    email: str
    code: str = Field(min_length=1)


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    id_token: str
    access_token: str
    refresh_token: str | None = None
    token_type: str = "bearer"


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str
