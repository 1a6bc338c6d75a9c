"""Identity port: abstract interface for the managed identity provider."""

from abc import ABC, abstractmethod

from bookwise.domain.models import AuthTokens, User


class IdentityPort(ABC):
    """Sign-up, confirmation and token lifecycle of a hosted user pool.

    Every failure surfaces as ``IdentityError`` (``NotAuthorizedError`` for
    bad credentials or tokens) carrying a message fit for end users.
    """

    @abstractmethod
    async def sign_up(self, email: str, password: str, name: str) -> None:
        ...

    @abstractmethod
    async def confirm_sign_up(self, email: str, code: str) -> None:
        ...

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> AuthTokens:
        ...

    @abstractmethod
    async def sign_out(self, access_token: str) -> None:
        ...

    @abstractmethod
    async def get_user(self, access_token: str) -> User:
        ...
