"""Pytest configuration and shared fixtures"""

import pytest
from typing import AsyncGenerator
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from src.models.database import Base, configure_sqlite
from src.models import db_models  # noqa: F401
from src.models.events import Sale, SaleItem, Amendment, TaxPayment, parse_timestamp
from src.services.event_store import EventStore, DatabaseEventStore


# Test database setup (SQLite in-memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db_engine():
    """Fresh in-memory database engine per test, tables created"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )
    configure_sqlite(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker:
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session for a single test

    Yields:
        Async database session
    """
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


@pytest.fixture
def event_store(session_factory) -> DatabaseEventStore:
    """Event store on the test database; reads are sequential on the shared connection"""
    return DatabaseEventStore(session_factory=session_factory, concurrent_reads=False)


@pytest.fixture
def mock_store():
    """Storage collaborator double returning no events until configured"""
    store = MagicMock(spec=EventStore)
    store.supports_concurrent_reads = True
    store.list_all_sales = AsyncMock(return_value=[])
    store.list_all_amendments = AsyncMock(return_value=[])
    store.list_payments_up_to = AsyncMock(return_value=[])
    store.save = AsyncMock(return_value=None)
    return store


@pytest.fixture
def sample_sale() -> Sale:
    """Invoice inv-1 with two items, taxed at 20%"""
    return Sale(
        invoice_id="inv-1",
        date=parse_timestamp("2024-02-22T10:00:00Z"),
        items=[
            SaleItem(item_id="item-1", cost=Decimal("1000"), tax_rate=Decimal("0.2")),
            SaleItem(item_id="item-2", cost=Decimal("2000"), tax_rate=Decimal("0.2")),
        ],
    )


@pytest.fixture
def sample_payment() -> TaxPayment:
    """Payment of 500 made before the sample sale"""
    return TaxPayment(date=parse_timestamp("2024-02-22T09:00:00Z"), amount=Decimal("500"))


@pytest.fixture
def sample_amendment() -> Amendment:
    """Amendment to item-2 of inv-1, dated the day after the sale"""
    return Amendment(
        invoice_id="inv-1",
        item_id="item-2",
        date=parse_timestamp("2024-02-23T10:00:00Z"),
        cost=Decimal("1800"),
        tax_rate=Decimal("0.17"),
    )
