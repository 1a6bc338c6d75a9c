import logging
import secrets
from dataclasses import dataclass

from bookwise.domain.errors import IdentityError, NotAuthorizedError
from bookwise.domain.models import AuthTokens, User
from bookwise.ports.identity import IdentityPort

logger = logging.getLogger(__name__)

CONFIRMATION_CODE = "123456"
MIN_PASSWORD_LENGTH = 8


@dataclass
class _Account:
    user: User
    password: str
    confirmed: bool = False


class MockIdentityAdapter(IdentityPort):
    """
    In-memory identity provider for local development and tests.

    Mirrors the user-pool flow: accounts start unconfirmed, the confirmation
    code is always ``CONFIRMATION_CODE`` and tokens are opaque random strings
    valid until sign-out.
    """

    def __init__(self, seed_users: list[User] | None = None, seed_password: str = "") -> None:
        self._accounts: dict[str, _Account] = {}
        self._tokens: dict[str, str] = {}  # access token -> email
        for user in seed_users or []:
            self._accounts[user.email.lower()] = _Account(user, seed_password, confirmed=True)

    async def sign_up(self, email: str, password: str, name: str) -> None:
        key = email.lower()
        if key in self._accounts:
            raise IdentityError("An account with the given email already exists.", code="UsernameExistsException")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise IdentityError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.",
                code="InvalidPasswordException",
            )
        user = User(id=secrets.token_hex(8), email=email, name=name)
        self._accounts[key] = _Account(user, password)
        logger.info("MockIdentity: registered %s (confirmation code %s)", email, CONFIRMATION_CODE)

    async def confirm_sign_up(self, email: str, code: str) -> None:
        account = self._accounts.get(email.lower())
        if account is None:
            raise IdentityError("Username/client id combination not found.", code="UserNotFoundException")
        if code != CONFIRMATION_CODE:
            raise IdentityError("Invalid verification code provided, please try again.", code="CodeMismatchException")
        account.confirmed = True

    async def sign_in(self, email: str, password: str) -> AuthTokens:
        account = self._accounts.get(email.lower())
        if account is None or not account.password or account.password != password:
            raise NotAuthorizedError("Incorrect username or password.", code="NotAuthorizedException")
        if not account.confirmed:
            raise NotAuthorizedError("User is not confirmed.", code="UserNotConfirmedException")
        access_token = secrets.token_urlsafe(32)
        self._tokens[access_token] = email.lower()
        return AuthTokens(
            id_token=secrets.token_urlsafe(32),
            access_token=access_token,
            refresh_token=secrets.token_urlsafe(32),
        )

    async def sign_out(self, access_token: str) -> None:
        if self._tokens.pop(access_token, None) is None:
            raise NotAuthorizedError("Access Token has been revoked", code="NotAuthorizedException")

    async def get_user(self, access_token: str) -> User:
        email = self._tokens.get(access_token)
        if email is None:
            raise NotAuthorizedError("Invalid Access Token", code="NotAuthorizedException")
        return self._accounts[email].user
