"""Authentication flows over the managed identity provider."""

import logging

from fastapi import HTTPException, status

from bookwise.domain.errors import IdentityError, NotAuthorizedError
from bookwise.domain.models import AuthTokens, User
from bookwise.ports.identity import IdentityPort

logger = logging.getLogger(__name__)


def _http_error(exc: IdentityError) -> HTTPException:
    code = (
        status.HTTP_401_UNAUTHORIZED
        if isinstance(exc, NotAuthorizedError)
        else status.HTTP_400_BAD_REQUEST
    )
    return HTTPException(status_code=code, detail=str(exc))


class AuthService:
    """Handles registration, confirmation, sign-in and token checks for the API."""

    def __init__(self, identity: IdentityPort) -> None:
        self._identity = identity

    async def signup(self, email: str, password: str, name: str) -> None:
        """Register a new account. Email confirmation is required before login."""
        try:
            await self._identity.sign_up(email, password, name)
        except IdentityError as exc:
            raise _http_error(exc) from exc

    async def confirm(self, email: str, code: str) -> None:
        try:
            await self._identity.confirm_sign_up(email, code)
        except IdentityError as exc:
            raise _http_error(exc) from exc

    async def login(self, email: str, password: str) -> AuthTokens:
        try:
            return await self._identity.sign_in(email, password)
        except IdentityError as exc:
            raise _http_error(exc) from exc

    async def logout(self, access_token: str) -> None:
        try:
            await self._identity.sign_out(access_token)
        except IdentityError as exc:
            raise _http_error(exc) from exc

    async def current_user(self, access_token: str) -> User:
        """Resolve a bearer token to its user. Raises 401 when invalid."""
        try:
            return await self._identity.get_user(access_token)
        except IdentityError as exc:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=str(exc),
                headers={"WWW-Authenticate": "Bearer"},
            ) from exc


class AuthSession:
    """
    Client-side session state over an identity provider.

    Holds the tokens and user of a single signed-in account. Sign-in and
    sign-up errors propagate as IdentityError so callers can show the
    provider's message; ``get_auth_token`` and ``check_session`` never raise.
    """

    def __init__(self, identity: IdentityPort) -> None:
        self._identity = identity
        self._tokens: AuthTokens | None = None
        self.user: User | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    async def check_session(self) -> User | None:
        """Refresh ``user`` from the stored tokens; clears the session if they are rejected."""
        if self._tokens is None:
            self.user = None
            return None
        try:
            self.user = await self._identity.get_user(self._tokens.access_token)
        except IdentityError as exc:
            logger.info("User is not signed in: %s", exc)
            self._tokens = None
            self.user = None
        return self.user

    async def login(self, email: str, password: str) -> User | None:
        self._tokens = await self._identity.sign_in(email, password)
        return await self.check_session()

    async def signup(self, email: str, password: str, name: str) -> None:
        # No automatic login: the account needs confirming first.
        await self._identity.sign_up(email, password, name)

    async def confirm_sign_up(self, email: str, code: str) -> None:
        await self._identity.confirm_sign_up(email, code)

    async def logout(self) -> None:
        tokens, self._tokens, self.user = self._tokens, None, None
        if tokens is None:
            return
        try:
            await self._identity.sign_out(tokens.access_token)
        except IdentityError as exc:
            logger.error("Logout error: %s", exc)

    async def get_auth_token(self) -> str | None:
        """ID token for API calls, or None when signed out."""
        if self._tokens is None:
            return None
        return self._tokens.id_token
