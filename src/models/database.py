"""Async database setup for the event tables"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from src.config import settings


def configure_sqlite(async_engine: AsyncEngine) -> None:
    """Enable foreign keys on every SQLite connection, and WAL for file databases"""
    if async_engine.dialect.name != "sqlite":
        return
    in_memory = async_engine.url.database in (None, "", ":memory:")

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_pragmas(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        # WAL lets the position reads run alongside a writer
        if not in_memory:
            cursor.execute("PRAGMA journal_mode = WAL")
        cursor.close()


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    future=True
)
configure_sqlite(engine)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

Base = declarative_base()


async def init_models() -> None:
    """Create event tables if they do not exist"""
    # Import models so they are registered with Base
    from src.models import db_models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
