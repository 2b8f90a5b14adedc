import os

# Settings require an API key; set one before any resilink module builds them
os.environ.setdefault("RESILINK_API_KEY", "RESILINK-TEST-KEY")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from resilink.core.audit import AuditLogger
from resilink.core.config import settings
from resilink.core.database import create_tables
from resilink.core.store import RecordStore
from resilink.dependencies import get_store
from resilink.main import app
from resilink.services.alerts import AlertService
from resilink.services.incidents import IncidentService
from resilink.services.reports import ReportService
from resilink.services.resources import ResourceService


@pytest_asyncio.fixture
async def store(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'resilink-test.db'}")
    await create_tables(engine)
    session_factory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    yield RecordStore(session_factory)
    await engine.dispose()


@pytest.fixture
def audit(store):
    return AuditLogger(store)


@pytest.fixture
def incident_service(store, audit):
    return IncidentService(store, audit)


@pytest.fixture
def resource_service(store, audit):
    return ResourceService(store, audit)


@pytest.fixture
def alert_service(store, audit):
    return AlertService(store, audit)


@pytest.fixture
def report_service(store, audit):
    return ReportService(store, audit)


@pytest.fixture
def api_headers():
    return {"X-API-KEY": settings.API_KEY}


@pytest_asyncio.fixture
async def client(store):
    app.dependency_overrides[get_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
