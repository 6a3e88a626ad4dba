"""Shared test configuration and fixtures.

Each test gets a fresh in-memory SQLite database (aiosqlite) with all tables
created, and an httpx AsyncClient wired to the app with the database,
settings, notifier and AI proxy dependencies overridden. External services
are never contacted:

- Resend is replaced by an ``httpx.MockTransport`` that records requests.
- The LLM is replaced by a ``FakeListChatModel`` with canned replies.
"""

import json
from collections.abc import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

import boloflix.models  # noqa: F401  register models on the metadata
from boloflix.api.deps import get_ai_proxy, get_notifier
from boloflix.auth.jwt import create_admin_token
from boloflix.config import Settings, get_settings
from boloflix.database import Base, get_db
from boloflix.main import app
from boloflix.services.ai_proxy import AIProxy
from boloflix.services.notifier import Notifier

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
ADMIN_PASSWORD = "bolo-de-fuba"
OPERATOR_EMAIL = "cozinha@boloflix.test"


class ResendRecorder:
    """Stands in for the Resend API and remembers every request."""

    def __init__(self, status_code: int = 200, fail_with: Exception | None = None) -> None:
        self.status_code = status_code
        self.fail_with = fail_with
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with
        return httpx.Response(self.status_code, json={"id": f"email-{len(self.requests)}"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def recipients(self) -> list[str]:
        return [json.loads(r.content)["to"][0] for r in self.requests]


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Fully configured settings; nothing read from the environment matters."""
    return Settings(
        _env_file=None,
        environment="test",
        database_url=TEST_DATABASE_URL,
        gemini_api_key="test-gemini-key",
        resend_api_key="re_test_key",
        notification_email=OPERATOR_EMAIL,
        admin_password=ADMIN_PASSWORD,
        jwt_secret_key="test-secret-key-with-enough-entropy",
    )


# ---------------------------------------------------------------------------
# Database: one in-memory database per test
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session bound to a fresh in-memory database."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session = AsyncSession(bind=engine, expire_on_commit=False)
    try:
        yield session
    finally:
        await session.close()
        await engine.dispose()


# ---------------------------------------------------------------------------
# External service doubles
# ---------------------------------------------------------------------------


@pytest.fixture
def resend() -> ResendRecorder:
    return ResendRecorder()


@pytest.fixture
def fake_llm() -> FakeListChatModel:
    """Fake chat model; tests set ``fake_llm.responses`` to the replies they need."""
    return FakeListChatModel(responses=["{}"])


@pytest.fixture
def ai_proxy(test_settings: Settings, fake_llm: FakeListChatModel) -> AIProxy:
    return AIProxy(test_settings, llm=fake_llm)


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def client(
    db_session: AsyncSession,
    test_settings: Settings,
    resend: ResendRecorder,
    ai_proxy: AIProxy,
) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to the test doubles."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_notifier] = lambda: Notifier(test_settings, transport=resend.transport)
    app.dependency_overrides[get_ai_proxy] = lambda: ai_proxy

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(test_settings: Settings) -> dict[str, str]:
    """Return Authorization headers carrying a valid admin token."""
    return {"Authorization": f"Bearer {create_admin_token(test_settings)}"}


@pytest.fixture
def subscription_payload() -> dict:
    """A complete checkout body as sent by the web client."""
    return {
        "customerName": "Ana",
        "customerEmail": "ana@test.com",
        "planTitle": "Bolo Curioso",
        "planPrice": 60,
        "flavorPreference": "Chocolate com morango",
        "deliveryDay": "Quarta-feira",
        "deliveryTime": "Manhã",
    }
