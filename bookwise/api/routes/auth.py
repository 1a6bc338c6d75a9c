"""Authentication routes backed by the configured identity provider."""

from fastapi import APIRouter, Depends, Response, status

from bookwise.api.deps import get_access_token, get_auth_service, get_current_user
from bookwise.api.schemas import (
    ConfirmRequest,
    LoginRequest,
    SignupRequest,
    TokenResponse,
    UserResponse,
)
from bookwise.domain.models import User
from bookwise.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    data: SignupRequest,
    auth: AuthService = Depends(get_auth_service),
) -> dict[str, str]:
    await auth.signup(data.email, data.password, data.name)
    return {"email": data.email, "status": "confirmation_required"}


@router.post("/confirm", status_code=status.HTTP_204_NO_CONTENT)
async def confirm(
    data: ConfirmRequest,
    auth: AuthService = Depends(get_auth_service),
) -> Response:
    await auth.confirm(data.email, data.code)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/login", response_model=TokenResponse)
async def login(
    data: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    tokens = await auth.login(data.email, data.password)
    return TokenResponse(
        id_token=tokens.id_token,
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
    )


@router.post("/signout", status_code=status.HTTP_204_NO_CONTENT)
async def signout(
    token: str = Depends(get_access_token),
    auth: AuthService = Depends(get_auth_service),
) -> Response:
    await auth.logout(token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=UserResponse)
async def me(user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(user)
