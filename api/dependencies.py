"""FastAPI dependencies shared by the routes"""

from src.services.event_store import DatabaseEventStore
from src.services.tax_position_service import TaxPositionService


def get_tax_position_service() -> TaxPositionService:
    """Service bound to the application database"""
    return TaxPositionService(store=DatabaseEventStore())
