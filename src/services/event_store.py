"""Storage collaborator for the event ledger

EventStore is the only storage surface the position service depends on.
DatabaseEventStore implements it on the async SQLAlchemy models.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Union
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from src.config import settings
from src.models import database as db_module
from src.models.events import Sale, Amendment, TaxPayment
from src.models.db_models import (
    SaleEvent as SaleEventDB,
    Amendment as AmendmentDB,
    TaxPayment as TaxPaymentDB,
)
from src.models.db_utils import (
    sale_to_db,
    db_to_sale,
    amendment_to_db,
    db_to_amendment,
    payment_to_db,
    db_to_payment,
)
from src.services.errors import LedgerValidationError, StorageError
from src.utils.retry import async_retry_with_backoff

logger = logging.getLogger(__name__)

EventRecord = Union[Sale, Amendment, TaxPayment]


class EventStore(ABC):
    """Read and append access to the recorded events"""

    # Whether the three position reads may be issued in parallel
    supports_concurrent_reads: bool = False

    @abstractmethod
    async def list_all_sales(self) -> List[Sale]:
        """All sales with their items, in ingestion order"""

    @abstractmethod
    async def list_all_amendments(self) -> List[Amendment]:
        """All amendments, in ingestion order"""

    @abstractmethod
    async def list_payments_up_to(self, date: datetime) -> List[TaxPayment]:
        """Payments dated at or before date"""

    @abstractmethod
    async def save(self, record: EventRecord) -> None:
        """Append one event record"""


class DatabaseEventStore(EventStore):
    """SQLAlchemy-backed event store"""
    
    def __init__(
        self,
        session_factory: Optional[async_sessionmaker] = None,
        db: Optional[AsyncSession] = None,
        concurrent_reads: Optional[bool] = None
    ):
        """
        Args:
            session_factory: Factory for per-call sessions (defaults to
                the application's AsyncSessionLocal)
            db: Single session to use for every call; forces sequential reads
            concurrent_reads: Override settings.CONCURRENT_READS
        """
        self._session_factory = session_factory
        self._db = db
        if db is not None:
            self.supports_concurrent_reads = False
        elif concurrent_reads is not None:
            self.supports_concurrent_reads = concurrent_reads
        else:
            self.supports_concurrent_reads = settings.CONCURRENT_READS

    def _open_session(self):
        """Return (session, should_close)"""
        if self._db is not None:
            return self._db, False
        factory = self._session_factory or db_module.AsyncSessionLocal
        return factory(), True

    @async_retry_with_backoff(exceptions=(OperationalError,))
    async def _fetch(self, query) -> list:
        session, should_close = self._open_session()
        try:
            result = await session.execute(query)
            return list(result.scalars().all())
        finally:
            if should_close:
                await session.close()

    async def _read(self, query, what: str) -> list:
        try:
            return await self._fetch(query)
        except SQLAlchemyError as e:
            logger.error(f"Error reading {what}: {e}", exc_info=True)
            raise StorageError(f"Failed to read {what}") from e

    async def list_all_sales(self) -> List[Sale]:
        query = (
            select(SaleEventDB)
            .options(selectinload(SaleEventDB.items))
            .order_by(SaleEventDB.id)
        )
        rows = await self._read(query, "sales")
        return [db_to_sale(row) for row in rows]

    async def list_all_amendments(self) -> List[Amendment]:
        rows = await self._read(select(AmendmentDB).order_by(AmendmentDB.id), "amendments")
        return [db_to_amendment(row) for row in rows]

    async def list_payments_up_to(self, date: datetime) -> List[TaxPayment]:
        query = (
            select(TaxPaymentDB)
            .where(TaxPaymentDB.date <= date)
            .order_by(TaxPaymentDB.id)
        )
        rows = await self._read(query, "tax payments")
        return [db_to_payment(row) for row in rows]

    async def save(self, record: EventRecord) -> None:
        if isinstance(record, Sale):
            row = sale_to_db(record)
        elif isinstance(record, Amendment):
            row = amendment_to_db(record)
        elif isinstance(record, TaxPayment):
            row = payment_to_db(record)
        else:
            raise TypeError(f"Unsupported event record: {type(record).__name__}")

        session, should_close = self._open_session()
        try:
            if isinstance(record, Sale):
                existing = await session.execute(
                    select(SaleEventDB.id).where(SaleEventDB.invoice_id == record.invoice_id)
                )
                if existing.scalar_one_or_none() is not None:
                    raise LedgerValidationError(
                        f"Sale already recorded for invoice {record.invoice_id}",
                        errors=[{
                            "loc": ["body", "invoiceId"],
                            "msg": "invoice already recorded",
                            "type": "value_error.duplicate",
                        }],
                    )

            session.add(row)
            await session.flush()
            sequence = row.id
            await session.commit()
            logger.info(f"Saved {type(record).__name__} (sequence {sequence})")
        except LedgerValidationError:
            await session.rollback()
            raise
        except IntegrityError as e:
            await session.rollback()
            logger.warning(f"Integrity error saving {type(record).__name__}: {e}")
            raise LedgerValidationError(
                f"{type(record).__name__} conflicts with a recorded event"
            ) from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Error saving {type(record).__name__}: {e}", exc_info=True)
            raise StorageError(f"Failed to save {type(record).__name__}") from e
        finally:
            if should_close:
                await session.close()
