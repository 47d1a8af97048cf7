"""Request models for the ledger API

Field names are camelCase on the wire. Money and rates are bounded to
the precision of their storage columns.
"""

from decimal import Decimal
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

from src.models.events import Sale, SaleItem, Amendment, TaxPayment, IsoTimestamp

MONEY_DIGITS, MONEY_PLACES = 18, 4
RATE_DIGITS, RATE_PLACES = 12, 6


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SaleItemRequest(WireModel):
    """Line item within a SALES event"""
    item_id: str = Field(alias="itemId", min_length=1)
    cost: Decimal = Field(max_digits=MONEY_DIGITS, decimal_places=MONEY_PLACES)
    tax_rate: Decimal = Field(alias="taxRate", max_digits=RATE_DIGITS, decimal_places=RATE_PLACES)


class SalesEventRequest(WireModel):
    """POST /transactions body with eventType SALES"""
    event_type: Literal["SALES"] = Field(alias="eventType")
    invoice_id: str = Field(alias="invoiceId", min_length=1)
    date: IsoTimestamp
    items: List[SaleItemRequest]

    def to_sale(self) -> Sale:
        return Sale(
            invoice_id=self.invoice_id,
            date=self.date,
            items=[
                SaleItem(item_id=item.item_id, cost=item.cost, tax_rate=item.tax_rate)
                for item in self.items
            ],
        )


class TaxPaymentEventRequest(WireModel):
    """POST /transactions body with eventType TAX_PAYMENT"""
    event_type: Literal["TAX_PAYMENT"] = Field(alias="eventType")
    date: IsoTimestamp
    amount: Decimal = Field(max_digits=MONEY_DIGITS, decimal_places=MONEY_PLACES)

    def to_payment(self) -> TaxPayment:
        return TaxPayment(date=self.date, amount=self.amount)


class AmendSaleRequest(WireModel):
    """PATCH /sale body"""
    date: IsoTimestamp
    invoice_id: str = Field(alias="invoiceId", min_length=1)
    item_id: str = Field(alias="itemId", min_length=1)
    cost: Decimal = Field(max_digits=MONEY_DIGITS, decimal_places=MONEY_PLACES)
    tax_rate: Decimal = Field(alias="taxRate", max_digits=RATE_DIGITS, decimal_places=RATE_PLACES)

    def to_amendment(self) -> Amendment:
        return Amendment(
            invoice_id=self.invoice_id,
            item_id=self.item_id,
            date=self.date,
            cost=self.cost,
            tax_rate=self.tax_rate,
        )
