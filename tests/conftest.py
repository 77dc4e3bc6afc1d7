"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.tv_account.api.router import get_account_service
from src.tv_account.application.service import AccountApplicationService
from src.tv_common.database import get_db_session
from src.tv_horizon.client import HorizonClient
from src.tv_ledger.api.router import get_transaction_service
from src.tv_ledger.application.service import TransactionApplicationService
from tests.fakes import HORIZON_BASE, FakeHorizon, InMemoryTransactionRepository


@pytest.fixture
def fake_horizon() -> FakeHorizon:
    return FakeHorizon()


@pytest.fixture
async def horizon(fake_horizon: FakeHorizon) -> HorizonClient:
    """Real HorizonClient over MockTransport; no retries, no backoff."""
    http = httpx.AsyncClient(
        transport=httpx.MockTransport(fake_horizon.handler), base_url=HORIZON_BASE
    )
    yield HorizonClient(http=http, max_retries=0, backoff_seconds=0)
    await http.aclose()


@pytest.fixture
def repo() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository()


@pytest.fixture
def db() -> MagicMock:
    """Session stand-in: services only await commit/rollback on it directly."""
    session = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.fixture
async def client(
    repo: InMemoryTransactionRepository, horizon: HorizonClient, db: MagicMock
) -> AsyncClient:
    """Async HTTP client for the FastAPI app, wired to the fakes above."""

    async def _session():
        yield db

    app.dependency_overrides[get_db_session] = _session
    app.dependency_overrides[get_transaction_service] = lambda: TransactionApplicationService(
        repo=repo, horizon=horizon, list_ttl_seconds=0
    )
    app.dependency_overrides[get_account_service] = lambda: AccountApplicationService(
        horizon=horizon
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
