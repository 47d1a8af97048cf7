"""Decimal wire serialization utilities"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union
import logging

logger = logging.getLogger(__name__)


def decimal_to_wire(d: Optional[Decimal]) -> Optional[str]:
    """
    Convert Decimal to an exact string without exponent notation.
    
    Examples:
        >>> decimal_to_wire(Decimal("100.0"))
        "100"
        >>> decimal_to_wire(Decimal("1E+3"))
        "1000"
        >>> decimal_to_wire(None)
        None
    """
    if d is None:
        return None
    
    s = format(d, 'f')
    if '.' in s:
        s = s.rstrip('0').rstrip('.')
    if s in ('', '-0'):
        return '0'
    return s


def wire_to_decimal(x: Any) -> Optional[Decimal]:
    """
    Parse a stored or wire value to Decimal.
    
    Floats go through str() so 0.2 becomes Decimal("0.2"), not its
    binary expansion. Unparseable and non-finite values (inf, NaN)
    yield None.
    """
    if x is None or x == "":
        return None

    try:
        d = x if isinstance(x, Decimal) else Decimal(str(x))
    except (InvalidOperation, ValueError, TypeError) as e:
        logger.warning(f"Failed to parse value as Decimal: {x}, error: {e}")
        return None

    if not d.is_finite():
        logger.warning(f"Ignoring non-finite stored value: {x}")
        return None
    return d


def decimal_to_json_number(d: Decimal) -> Union[int, float]:
    """Convert Decimal to a JSON number, int when integral"""
    if d == d.to_integral_value():
        return int(d)
    return float(d)
