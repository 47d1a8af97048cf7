"""
Seed the ledger database with demonstration events.

Clears all recorded events, then loads three sales and two tax payments.

Usage:
    python scripts/seed_data.py
"""

import asyncio
import logging
import sys
import uuid
from decimal import Decimal
from pathlib import Path

from sqlalchemy import delete

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.logging_config import setup_logging
from src.models.database import AsyncSessionLocal, init_models
from src.models.db_models import SaleEvent, SaleItem, Amendment, TaxPayment as TaxPaymentDB
from src.models.events import Sale, SaleItem as SaleItemModel, TaxPayment, parse_timestamp
from src.services.event_store import DatabaseEventStore
from src.services.tax_position_service import TaxPositionService

logger = logging.getLogger(__name__)


def _item(cost: str, tax_rate: str) -> SaleItemModel:
    return SaleItemModel(item_id=str(uuid.uuid4()), cost=Decimal(cost), tax_rate=Decimal(tax_rate))


SEED_SALES = [
    ("2024-02-22T10:00:00Z", [_item("1000", "0.2"), _item("2000", "0.2")]),
    ("2024-02-23T12:00:00Z", [_item("1500", "0.1")]),
    ("2024-02-24T15:00:00Z", [_item("2500", "0.15"), _item("3000", "0.18")]),
]

SEED_PAYMENTS = [
    ("2024-02-22T09:00:00Z", "500"),
    ("2024-02-24T14:00:00Z", "1000"),
]


async def clear_events() -> None:
    """Delete every recorded event"""
    async with AsyncSessionLocal() as session:
        for model in (SaleItem, SaleEvent, Amendment, TaxPaymentDB):
            await session.execute(delete(model))
        await session.commit()
    logger.info("Cleared existing events")


async def seed() -> None:
    await init_models()
    await clear_events()
    
    service = TaxPositionService(store=DatabaseEventStore())
    
    for i, (date, items) in enumerate(SEED_SALES, start=1):
        await service.record_sale(Sale(invoice_id=str(uuid.uuid4()), date=parse_timestamp(date), items=items))
        logger.info(f"Sales Event {i} seeded")
    
    for i, (date, amount) in enumerate(SEED_PAYMENTS, start=1):
        await service.record_payment(TaxPayment(date=parse_timestamp(date), amount=Decimal(amount)))
        logger.info(f"Tax Payment Event {i} seeded")
    
    position = await service.compute_tax_position("2024-02-25T00:00:00Z")
    logger.info(f"Seeding completed; tax position as of {position.date}: {position.tax_position}")


if __name__ == "__main__":
    setup_logging()
    try:
        asyncio.run(seed())
    except Exception as e:
        logger.error(f"Error during seeding: {e}", exc_info=True)
        sys.exit(1)
