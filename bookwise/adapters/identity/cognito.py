"""Amazon Cognito user-pool adapter."""

import asyncio
import logging
from functools import partial
from typing import Any

import boto3
from botocore.exceptions import ClientError

from bookwise.domain.errors import IdentityError, NotAuthorizedError
from bookwise.domain.models import AuthTokens, User
from bookwise.ports.identity import IdentityPort

logger = logging.getLogger(__name__)

_UNAUTHORIZED_CODES = {"NotAuthorizedException", "UserNotConfirmedException"}


class CognitoIdentityAdapter(IdentityPort):
    """Identity provider backed by a Cognito app client (USER_PASSWORD_AUTH)."""

    def __init__(self, client_id: str, region: str, client: Any = None) -> None:
        self._client = client or boto3.client("cognito-idp", region_name=region)
        self._client_id = client_id
        logger.info("Cognito adapter initialized: region=%s", region)

    async def _call(self, operation: str, **kwargs: Any) -> dict[str, Any]:
        """Run a blocking boto3 call in the default executor, mapping errors."""
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(
                None, partial(getattr(self._client, operation), **kwargs)
            )
        except ClientError as exc:
            error = exc.response.get("Error", {})
            code = error.get("Code")
            message = error.get("Message") or str(exc)
            logger.warning("Cognito %s failed: %s (%s)", operation, message, code)
            if code in _UNAUTHORIZED_CODES:
                raise NotAuthorizedError(message, code=code) from exc
            raise IdentityError(message, code=code) from exc

    async def sign_up(self, email: str, password: str, name: str) -> None:
        await self._call(
            "sign_up",
            ClientId=self._client_id,
            Username=email,
            Password=password,
            UserAttributes=[
                {"Name": "email", "Value": email},
                {"Name": "name", "Value": name},
            ],
        )
        logger.info("Cognito sign-up submitted for %s", email)

    async def confirm_sign_up(self, email: str, code: str) -> None:
        await self._call(
            "confirm_sign_up",
            ClientId=self._client_id,
            Username=email,
            ConfirmationCode=code,
        )

    async def sign_in(self, email: str, password: str) -> AuthTokens:
        resp = await self._call(
            "initiate_auth",
            ClientId=self._client_id,
            AuthFlow="USER_PASSWORD_AUTH",
            AuthParameters={"USERNAME": email, "PASSWORD": password},
        )
        result = resp.get("AuthenticationResult")
        if not result:
            # MFA or new-password challenges are not supported by this client.
            raise IdentityError(
                f"Unsupported sign-in challenge: {resp.get('ChallengeName')}",
                code="ChallengeRequired",
            )
        return AuthTokens(
            id_token=result["IdToken"],
            access_token=result["AccessToken"],
            refresh_token=result.get("RefreshToken"),
        )

    async def sign_out(self, access_token: str) -> None:
        await self._call("global_sign_out", AccessToken=access_token)

    async def get_user(self, access_token: str) -> User:
        resp = await self._call("get_user", AccessToken=access_token)
        attributes = {a["Name"]: a["Value"] for a in resp.get("UserAttributes", [])}
        return User(
            id=attributes.get("sub", resp["Username"]),
            email=attributes.get("email", ""),
            name=attributes.get("name", resp["Username"]),
        )
