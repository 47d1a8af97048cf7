"""Event record models for the tax ledger

Sales, amendments and tax payments are immutable, append-only records.
All timestamps are held as naive UTC datetimes.
"""

import re
from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, List, Optional, Union
from pydantic import BaseModel, BeforeValidator, Field, TypeAdapter, field_validator, model_validator


_NUMERIC = re.compile(r"^\s*[+-]?\d+(\.\d*)?\s*$")


def _iso_only(value):
    # pydantic reads numbers and digit strings as unix epochs
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and not _NUMERIC.match(value):
        return value
    raise ValueError("must be an ISO-8601 timestamp string")


IsoTimestamp = Annotated[datetime, BeforeValidator(_iso_only)]

_datetime_adapter = TypeAdapter(IsoTimestamp)


def to_utc_naive(value: datetime) -> datetime:
    """Convert a datetime to naive UTC; naive input is taken as UTC"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_timestamp(value: Union[str, datetime]) -> datetime:
    """
    Parse an ISO-8601 timestamp into naive UTC.
    
    Raises:
        pydantic.ValidationError: if the value is not a valid timestamp
    """
    if isinstance(value, datetime):
        return to_utc_naive(value)
    return to_utc_naive(_datetime_adapter.validate_python(value))


class SaleItem(BaseModel):
    """Line item carried by a sale"""
    item_id: str = Field(min_length=1)
    cost: Optional[Decimal] = None
    tax_rate: Optional[Decimal] = None


class Sale(BaseModel):
    """Sale event with its ordered line items"""
    invoice_id: str = Field(min_length=1)
    date: datetime
    items: List[SaleItem] = Field(default_factory=list)
    # Persisted ingestion sequence, None until stored
    sequence: Optional[int] = None

    @field_validator("date")
    @classmethod
    def _normalize_date(cls, v: datetime) -> datetime:
        return to_utc_naive(v)

    @model_validator(mode="after")
    def _unique_item_ids(self) -> "Sale":
        seen = set()
        for item in self.items:
            if item.item_id in seen:
                raise ValueError(f"Duplicate itemId in sale {self.invoice_id}: {item.item_id}")
            seen.add(item.item_id)
        return self


class Amendment(BaseModel):
    """Standalone override of one line item"""
    invoice_id: str = Field(min_length=1)
    item_id: str = Field(min_length=1)
    date: datetime
    cost: Optional[Decimal] = None
    tax_rate: Optional[Decimal] = None
    sequence: Optional[int] = None

    @field_validator("date")
    @classmethod
    def _normalize_date(cls, v: datetime) -> datetime:
        return to_utc_naive(v)


class TaxPayment(BaseModel):
    """Tax payment event"""
    date: datetime
    amount: Optional[Decimal] = None
    sequence: Optional[int] = None

    @field_validator("date")
    @classmethod
    def _normalize_date(cls, v: datetime) -> datetime:
        return to_utc_naive(v)


class TaxPosition(BaseModel):
    """Net tax position as of a date"""
    date: str
    tax_position: Decimal
    total_tax: Decimal = Decimal("0")
    total_payments: Decimal = Decimal("0")
    resolved_items: int = 0
