"""Position aggregation over resolved versions and payments"""

from datetime import datetime
from decimal import Decimal, localcontext
from typing import Iterable

from src.models.events import TaxPayment
from .versions import LineItemVersion

ZERO = Decimal("0")

# Enough digits for Numeric(18,4) * Numeric(12,6) products summed over
# large ledgers without the context rounding anything.
ACCUMULATION_PRECISION = 60


def total_tax(versions: Iterable[LineItemVersion]) -> Decimal:
    """Sum cost * tax_rate; missing cost or rate counts as zero"""
    with localcontext() as ctx:
        ctx.prec = ACCUMULATION_PRECISION
        total = ZERO
        for version in versions:
            cost = version.cost if version.cost is not None else ZERO
            rate = version.tax_rate if version.tax_rate is not None else ZERO
            total += cost * rate
    return total


def total_payments(payments: Iterable[TaxPayment], query_date: datetime) -> Decimal:
    """Sum payment amounts dated at or before query_date; missing amounts count as zero"""
    with localcontext() as ctx:
        ctx.prec = ACCUMULATION_PRECISION
        total = ZERO
        for payment in payments:
            if payment.date > query_date:
                continue
            if payment.amount is not None:
                total += payment.amount
    return total


def net_position(tax: Decimal, payments: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = ACCUMULATION_PRECISION
        return tax - payments
