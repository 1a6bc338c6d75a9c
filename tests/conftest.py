import pytest
from httpx import ASGITransport, AsyncClient

from bookwise.adapters.identity.mock import MockIdentityAdapter
from bookwise.adapters.recommender.keyword import KeywordRecommender
from bookwise.adapters.storage.memory import InMemoryReadingListRepository
from bookwise.config import FallbackMarker, IdentityProvider, LLMProvider, Settings
from bookwise.domain.errors import BackendUnavailableError
from bookwise.domain.seed import MOCK_USERS, mock_reading_lists
from bookwise.main import create_app
from bookwise.ports.llm import LLMPort
from bookwise.services.recommendation import RecommendationService
from tests.fakes import SEED_PASSWORD, FakeLLM

BASE = "http://test"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        llm_provider=LLMProvider.MOCK,
        identity_provider=IdentityProvider.MOCK,
        fallback_marker=FallbackMarker.LEGACY,
        log_level="WARNING",
    )


@pytest.fixture
def unreachable_llm() -> FakeLLM:
    return FakeLLM(error=BackendUnavailableError("connection refused", provider="fake"))


@pytest.fixture
def llm(unreachable_llm: FakeLLM) -> FakeLLM:
    """Backend used by the HTTP app; unreachable unless a test scripts it."""
    return unreachable_llm


@pytest.fixture
def service_for():
    """Build a RecommendationService around a given backend."""

    def _build(llm: LLMPort, marker: FallbackMarker = FallbackMarker.LEGACY) -> RecommendationService:
        return RecommendationService(
            llm=llm,
            fallback=KeywordRecommender(),
            fallback_marker=marker,
        )

    return _build


@pytest.fixture
def identity() -> MockIdentityAdapter:
    return MockIdentityAdapter(seed_users=list(MOCK_USERS), seed_password=SEED_PASSWORD)


@pytest.fixture
def app(settings: Settings, llm: FakeLLM, identity: MockIdentityAdapter):
    return create_app(
        settings=settings,
        llm=llm,
        identity=identity,
        reading_lists=InMemoryReadingListRepository(seed=mock_reading_lists()),
    )


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE) as c:
        yield c


@pytest.fixture
async def auth_client(client: AsyncClient):
    """Client signed in as the seeded user "1" (John Doe)."""
    resp = await client.post(
        "/auth/login",
        json={"email": "john.doe@example.com", "password": SEED_PASSWORD},
    )
    token = resp.json()["access_token"]
    client.headers["Authorization"] = f"Bearer {token}"
    return client
