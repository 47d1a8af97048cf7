"""Temporal index builder

Groups every sale line item and amendment by identity. Each identity
maps to its versions in insertion order: all sale-derived versions first
(sales in retrieval order, items in sale order), then amendments in
retrieval order, numbered by one shared counter. Nothing is filtered here.
"""

from itertools import count
from typing import Iterable
import logging

from src.models.events import Sale, Amendment
from .versions import LineItemVersion, OriginKind, VersionIndex

logger = logging.getLogger(__name__)


def build_version_index(sales: Iterable[Sale], amendments: Iterable[Amendment]) -> VersionIndex:
    """
    Build the per-identity version lists
    
    Args:
        sales: Sales in storage retrieval order
        amendments: Amendments in storage retrieval order
        
    Returns:
        Mapping of (invoice_id, item_id) to versions in insertion order
    """
    index: VersionIndex = {}
    sequence = count()

    for sale in sales:
        for item in sale.items:
            identity = (sale.invoice_id, item.item_id)
            index.setdefault(identity, []).append(
                LineItemVersion(
                    identity=identity,
                    effective_date=sale.date,
                    cost=item.cost,
                    tax_rate=item.tax_rate,
                    origin=OriginKind.SALE,
                    sequence=next(sequence),
                )
            )

    for amendment in amendments:
        identity = (amendment.invoice_id, amendment.item_id)
        index.setdefault(identity, []).append(
            LineItemVersion(
                identity=identity,
                effective_date=amendment.date,
                cost=amendment.cost,
                tax_rate=amendment.tax_rate,
                origin=OriginKind.AMENDMENT,
                sequence=next(sequence),
            )
        )

    logger.debug(f"Built version index: {len(index)} identities")
    return index
