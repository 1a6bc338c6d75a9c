"""Tests for the identity adapters and the client-side auth session."""

import pytest
from botocore.exceptions import ClientError

from bookwise.adapters.identity.cognito import CognitoIdentityAdapter
from bookwise.adapters.identity.mock import CONFIRMATION_CODE, MockIdentityAdapter
from bookwise.domain.errors import IdentityError, NotAuthorizedError
from bookwise.domain.seed import MOCK_USERS
from bookwise.services.auth import AuthSession
from tests.fakes import SEED_PASSWORD

EMAIL = "reader@example.com"
PASSWORD = "long-enough-1"


# ── Mock adapter ───────────────────────────────────


async def test_mock_signup_confirm_login_flow():
    identity = MockIdentityAdapter()
    await identity.sign_up(EMAIL, PASSWORD, "Reader")

    with pytest.raises(NotAuthorizedError) as info:
        await identity.sign_in(EMAIL, PASSWORD)
    assert info.value.code == "UserNotConfirmedException"

    await identity.confirm_sign_up(EMAIL, CONFIRMATION_CODE)
    tokens = await identity.sign_in(EMAIL, PASSWORD)
    user = await identity.get_user(tokens.access_token)

    assert user.email == EMAIL
    assert user.name == "Reader"


async def test_mock_rejects_duplicate_and_weak_signups(identity):
    with pytest.raises(IdentityError) as dup:
        await identity.sign_up("John.Doe@example.com", PASSWORD, "John")
    assert dup.value.code == "UsernameExistsException"

    with pytest.raises(IdentityError) as weak:
        await identity.sign_up(EMAIL, "short", "Reader")
    assert weak.value.code == "InvalidPasswordException"


async def test_mock_wrong_confirmation_code():
    identity = MockIdentityAdapter()
    await identity.sign_up(EMAIL, PASSWORD, "Reader")
    with pytest.raises(IdentityError) as info:
        await identity.confirm_sign_up(EMAIL, "000000")
    assert info.value.code == "CodeMismatchException"


async def test_mock_wrong_password(identity):
    with pytest.raises(NotAuthorizedError):
        await identity.sign_in("john.doe@example.com", "not-the-password")


async def test_mock_seed_without_password_cannot_sign_in():
    identity = MockIdentityAdapter(seed_users=list(MOCK_USERS), seed_password="")
    with pytest.raises(NotAuthorizedError):
        await identity.sign_in("john.doe@example.com", "")


async def test_mock_sign_out_revokes_token(identity):
    tokens = await identity.sign_in("john.doe@example.com", SEED_PASSWORD)
    await identity.sign_out(tokens.access_token)

    with pytest.raises(NotAuthorizedError):
        await identity.get_user(tokens.access_token)
    with pytest.raises(NotAuthorizedError):
        await identity.sign_out(tokens.access_token)


# ── Cognito adapter ────────────────────────────────


class FakeCognitoClient:
    def __init__(self, responses: dict | None = None, errors: dict | None = None):
        self.responses = responses or {}
        self.errors = errors or {}
        self.calls: list[tuple[str, dict]] = []

    def __getattr__(self, operation):
        def call(**kwargs):
            self.calls.append((operation, kwargs))
            if operation in self.errors:
                code, message = self.errors[operation]
                raise ClientError({"Error": {"Code": code, "Message": message}}, operation)
            return self.responses.get(operation, {})

        return call


def _cognito(client: FakeCognitoClient) -> CognitoIdentityAdapter:
    return CognitoIdentityAdapter(client_id="app-client", region="us-east-1", client=client)


async def test_cognito_sign_in_returns_tokens():
    client = FakeCognitoClient(
        responses={
            "initiate_auth": {
                "AuthenticationResult": {
                    "IdToken": "id",
                    "AccessToken": "access",
                    "RefreshToken": "refresh",
                }
            }
        }
    )
    tokens = await _cognito(client).sign_in(EMAIL, PASSWORD)

    assert (tokens.id_token, tokens.access_token, tokens.refresh_token) == ("id", "access", "refresh")
    operation, kwargs = client.calls[0]
    assert operation == "initiate_auth"
    assert kwargs["AuthFlow"] == "USER_PASSWORD_AUTH"
    assert kwargs["ClientId"] == "app-client"
    assert kwargs["AuthParameters"] == {"USERNAME": EMAIL, "PASSWORD": PASSWORD}


async def test_cognito_challenge_is_unsupported():
    client = FakeCognitoClient(responses={"initiate_auth": {"ChallengeName": "SMS_MFA"}})
    with pytest.raises(IdentityError) as info:
        await _cognito(client).sign_in(EMAIL, PASSWORD)
    assert info.value.code == "ChallengeRequired"


@pytest.mark.parametrize(
    "code, expected",
    [
        ("NotAuthorizedException", NotAuthorizedError),
        ("UserNotConfirmedException", NotAuthorizedError),
        ("UsernameExistsException", IdentityError),
    ],
)
async def test_cognito_maps_client_errors(code, expected):
    client = FakeCognitoClient(errors={"sign_up": (code, "nope")})
    with pytest.raises(expected) as info:
        await _cognito(client).sign_up(EMAIL, PASSWORD, "Reader")
    assert info.value.code == code
    assert str(info.value) == "nope"


async def test_cognito_sign_up_sends_attributes():
    client = FakeCognitoClient()
    await _cognito(client).sign_up(EMAIL, PASSWORD, "Reader")

    _, kwargs = client.calls[0]
    assert kwargs["UserAttributes"] == [
        {"Name": "email", "Value": EMAIL},
        {"Name": "name", "Value": "Reader"},
    ]


async def test_cognito_get_user_reads_attributes():
    client = FakeCognitoClient(
        responses={
            "get_user": {
                "Username": "reader",
                "UserAttributes": [
                    {"Name": "sub", "Value": "abc-123"},
                    {"Name": "email", "Value": EMAIL},
                    {"Name": "name", "Value": "Reader"},
                ],
            }
        }
    )
    user = await _cognito(client).get_user("access")
    assert (user.id, user.email, user.name) == ("abc-123", EMAIL, "Reader")


# ── Auth session ───────────────────────────────────


async def test_session_login_and_logout(identity):
    session = AuthSession(identity)
    assert await session.get_auth_token() is None
    assert not session.is_authenticated

    user = await session.login("john.doe@example.com", SEED_PASSWORD)

    assert user.name == "John Doe"
    assert session.is_authenticated
    assert await session.get_auth_token()

    await session.logout()
    assert session.user is None
    assert await session.get_auth_token() is None


async def test_session_login_failure_propagates(identity):
    session = AuthSession(identity)
    with pytest.raises(NotAuthorizedError):
        await session.login("john.doe@example.com", "wrong-password")
    assert not session.is_authenticated


async def test_session_check_clears_revoked_tokens(identity):
    session = AuthSession(identity)
    await session.login("john.doe@example.com", SEED_PASSWORD)
    token = session._tokens.access_token
    await identity.sign_out(token)

    assert await session.check_session() is None
    assert await session.get_auth_token() is None


async def test_session_logout_tolerates_provider_errors(identity):
    session = AuthSession(identity)
    await session.login("john.doe@example.com", SEED_PASSWORD)
    await identity.sign_out(session._tokens.access_token)

    await session.logout()
    assert not session.is_authenticated


async def test_session_signup_does_not_sign_in(identity):
    session = AuthSession(identity)
    await session.signup(EMAIL, PASSWORD, "Reader")
    await session.confirm_sign_up(EMAIL, CONFIRMATION_CODE)
    assert not session.is_authenticated
