"""Column types for exact decimal storage"""

from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.types import TypeDecorator

from .decimal_wire import decimal_to_wire, wire_to_decimal


class ExactDecimal(TypeDecorator):
    """
    Decimal column that round-trips without loss.

    SQLite has no decimal type and binds Numeric through float, so there the
    value is stored as its exact decimal text. Other dialects use Numeric.
    """

    impl = String
    cache_ok = True

    def __init__(self, precision: int, scale: int):
        # sign and decimal point on top of the digits
        super().__init__(length=precision + 2)
        self.precision = precision
        self.scale = scale

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(self.precision + 2))
        return dialect.type_descriptor(Numeric(self.precision, self.scale, asdecimal=True))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        if dialect.name == "sqlite":
            return decimal_to_wire(value)
        return value

    def process_result_value(self, value, dialect):
        return wire_to_decimal(value)
