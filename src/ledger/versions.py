"""Line item versions: the unit the as-of reconstruction reasons about"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Tuple

# (invoice_id, item_id)
Identity = Tuple[str, str]


class OriginKind(str, Enum):
    """Record a version was derived from"""
    SALE = "sale"
    AMENDMENT = "amendment"


@dataclass(frozen=True)
class LineItemVersion:
    """One recorded state of a line item"""
    identity: Identity
    effective_date: datetime
    cost: Optional[Decimal]
    tax_rate: Optional[Decimal]
    origin: OriginKind
    # Assigned at index build time; tie-break for equal dates only
    sequence: int

    @property
    def is_amendment(self) -> bool:
        return self.origin is OriginKind.AMENDMENT


VersionIndex = Dict[Identity, List[LineItemVersion]]
