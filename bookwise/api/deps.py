"""FastAPI dependencies resolving services stored on ``app.state``."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from bookwise.domain.models import User
from bookwise.services.auth import AuthService
from bookwise.services.reading_lists import ReadingListService
from bookwise.services.recommendation import RecommendationService

bearer_scheme = HTTPBearer(auto_error=False)


def get_recommendation_service(request: Request) -> RecommendationService:
    return request.app.state.recommendation_service


def get_reading_list_service(request: Request) -> ReadingListService:
    return request.app.state.reading_list_service


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_access_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials


async def get_current_user(
    token: str = Depends(get_access_token),
    auth: AuthService = Depends(get_auth_service),
) -> User:
    return await auth.current_user(token)
