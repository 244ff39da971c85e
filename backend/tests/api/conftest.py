"""Route test fixtures - async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - file_client runs on a file-backed database so each request gets its own
      connection and transaction
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency; FOR UPDATE is a no-op there
"""

from contextlib import asynccontextmanager
from datetime import date

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import biztime.models  # noqa: F401
from biztime.db.base import Base
from biztime.infrastructure.database import (
    DatabaseSessionManager, enable_sqlite_foreign_keys, get_db,
)
import biztime.infrastructure.database as db_module
from biztime.main import app
from biztime.models.company import Company
from biztime.models.industry import CompanyIndustry, Industry
from biztime.models.invoice import Invoice


@asynccontextmanager
async def _schema_engine(url: str):
    engine = create_async_engine(url, echo=False)
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@asynccontextmanager
async def _app_client(engine, session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = engine
    fake_manager._session_factory = session_factory
    db_module.db_manager = fake_manager

    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
        db_module.db_manager = original_manager


@pytest.fixture
async def test_engine():
    async with _schema_engine("sqlite+aiosqlite:///:memory:") as engine:
        yield engine


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    async with _app_client(test_engine, test_session_factory) as c:
        yield c


@pytest.fixture
async def file_engine(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'biztime.db'}"
    async with _schema_engine(url) as engine:
        yield engine


@pytest.fixture
async def file_session_factory(file_engine):
    return async_sessionmaker(
        file_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def file_client(file_engine, file_session_factory):
    async with _app_client(file_engine, file_session_factory) as c:
        yield c


@pytest.fixture
async def seed_company(test_db):
    company = Company(code="test", name="Test Company", description="this is a test")
    test_db.add(company)
    await test_db.commit()
    return company


@pytest.fixture
async def seed_invoice(test_db, seed_company):
    invoice = Invoice(comp_code=seed_company.code, amt=100)
    test_db.add(invoice)
    await test_db.commit()
    await test_db.refresh(invoice)
    return invoice


@pytest.fixture
async def paid_invoice(test_db, seed_company):
    invoice = Invoice(
        comp_code=seed_company.code, amt=250, paid=True,
        paid_date=date(2026, 1, 15),
    )
    test_db.add(invoice)
    await test_db.commit()
    await test_db.refresh(invoice)
    return invoice


@pytest.fixture
async def seed_industry(test_db):
    industry = Industry(code="tech", industry="Technology")
    test_db.add(industry)
    await test_db.commit()
    return industry


@pytest.fixture
async def linked_industry(test_db, seed_company, seed_industry):
    test_db.add(CompanyIndustry(
        comp_code=seed_company.code, industry_code=seed_industry.code,
    ))
    await test_db.commit()
    return seed_industry
