"""Utilities for converting between event models and SQLAlchemy rows"""

from .events import Sale, SaleItem, Amendment, TaxPayment
from .decimal_wire import wire_to_decimal
from .db_models import (
    SaleEvent as SaleEventDB,
    SaleItem as SaleItemDB,
    Amendment as AmendmentDB,
    TaxPayment as TaxPaymentDB,
)


def sale_to_db(sale: Sale) -> SaleEventDB:
    """Convert Sale to SQLAlchemy rows, keeping item order as line numbers"""
    return SaleEventDB(
        invoice_id=sale.invoice_id,
        date=sale.date,
        items=[
            SaleItemDB(
                item_id=item.item_id,
                line_number=line_number,
                cost=item.cost,
                tax_rate=item.tax_rate,
            )
            for line_number, item in enumerate(sale.items, start=1)
        ],
    )


def db_to_sale(row: SaleEventDB) -> Sale:
    """Convert SQLAlchemy sale row (items loaded) to Sale"""
    return Sale(
        invoice_id=row.invoice_id,
        date=row.date,
        sequence=row.id,
        items=[
            SaleItem(
                item_id=item.item_id,
                cost=wire_to_decimal(item.cost),
                tax_rate=wire_to_decimal(item.tax_rate),
            )
            for item in sorted(row.items, key=lambda i: i.line_number)
        ],
    )


def amendment_to_db(amendment: Amendment) -> AmendmentDB:
    return AmendmentDB(
        invoice_id=amendment.invoice_id,
        item_id=amendment.item_id,
        date=amendment.date,
        cost=amendment.cost,
        tax_rate=amendment.tax_rate,
    )


def db_to_amendment(row: AmendmentDB) -> Amendment:
    return Amendment(
        invoice_id=row.invoice_id,
        item_id=row.item_id,
        date=row.date,
        cost=wire_to_decimal(row.cost),
        tax_rate=wire_to_decimal(row.tax_rate),
        sequence=row.id,
    )


def payment_to_db(payment: TaxPayment) -> TaxPaymentDB:
    return TaxPaymentDB(date=payment.date, amount=payment.amount)


def db_to_payment(row: TaxPaymentDB) -> TaxPayment:
    return TaxPayment(
        date=row.date,
        amount=wire_to_decimal(row.amount),
        sequence=row.id,
    )
