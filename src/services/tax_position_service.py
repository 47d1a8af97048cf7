"""Tax position service

Records sales, amendments and tax payments, and reconstructs the net tax
position as of any date from the full event history.
"""

import asyncio
from datetime import datetime
from typing import Optional, Union
import logging

from pydantic import ValidationError

from src.ledger import build_version_index, resolve_as_of, total_tax, total_payments, net_position
from src.models.events import Sale, Amendment, TaxPayment, TaxPosition, parse_timestamp
from src.services.errors import LedgerValidationError
from src.services.event_store import EventStore, DatabaseEventStore

logger = logging.getLogger(__name__)


class TaxPositionService:
    """Service computing the tax position from the recorded events"""

    def __init__(self, store: Optional[EventStore] = None):
        """
        Args:
            store: Storage collaborator (defaults to DatabaseEventStore)
        """
        self.store = store or DatabaseEventStore()

    async def record_sale(self, sale: Sale) -> None:
        await self.store.save(sale)
        logger.info(f"Recorded sale {sale.invoice_id} with {len(sale.items)} item(s)")

    async def record_amendment(self, amendment: Amendment) -> None:
        await self.store.save(amendment)
        logger.info(f"Recorded amendment to {amendment.invoice_id}/{amendment.item_id}")

    async def record_payment(self, payment: TaxPayment) -> None:
        await self.store.save(payment)
        logger.info(f"Recorded tax payment dated {payment.date.isoformat()}")

    async def compute_tax_position(self, query_date: Union[str, datetime]) -> TaxPosition:
        """
        Compute the net tax position as of query_date

        Args:
            query_date: ISO-8601 string (echoed back unchanged) or datetime

        Returns:
            TaxPosition with the echoed date and net position

        Raises:
            LedgerValidationError: query_date is not a valid timestamp
            StorageError: a storage read failed
        """
        try:
            as_of = parse_timestamp(query_date)
        except ValidationError as e:
            raise LedgerValidationError(
                f"Invalid date: {query_date!r}",
                errors=[{"loc": ["query", "date"], "msg": err["msg"], "type": err["type"]} for err in e.errors()],
            ) from e
        echoed = query_date if isinstance(query_date, str) else query_date.isoformat()

        if self.store.supports_concurrent_reads:
            sales, amendments, payments = await asyncio.gather(
                self.store.list_all_sales(),
                self.store.list_all_amendments(),
                self.store.list_payments_up_to(as_of),
            )
        else:
            sales = await self.store.list_all_sales()
            amendments = await self.store.list_all_amendments()
            payments = await self.store.list_payments_up_to(as_of)

        index = build_version_index(sales, amendments)
        resolved = resolve_as_of(index, as_of)

        tax = total_tax(resolved.values())
        paid = total_payments(payments, as_of)
        position = net_position(tax, paid)

        logger.info(
            f"Tax position as of {as_of.isoformat()}: {position} "
            f"(tax={tax}, payments={paid}, items={len(resolved)}/{len(index)})"
        )
        return TaxPosition(
            date=echoed,
            tax_position=position,
            total_tax=tax,
            total_payments=paid,
            resolved_items=len(resolved),
        )
