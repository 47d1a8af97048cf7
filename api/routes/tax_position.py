"""API route for querying the tax position"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
import logging

from api.dependencies import get_tax_position_service
from api.errors import bad_request, internal_error
from src.config import settings
from src.models.decimal_wire import decimal_to_wire, decimal_to_json_number
from src.services.errors import LedgerValidationError
from src.services.tax_position_service import TaxPositionService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/tax-position")
async def query_tax_position(
    date: Optional[str] = Query(None, description="ISO-8601 timestamp to compute the position as of"),
    service: TaxPositionService = Depends(get_tax_position_service)
):
    """
    Get the net tax position as of a date
    
    Returns:
        {"date": <echoed query date>, "taxPosition": <net position>}
    """
    if not date:
        raise bad_request(
            "Invalid date query parameter",
            [{"loc": ["query", "date"], "msg": "field required", "type": "missing"}],
        )
    
    try:
        result = await service.compute_tax_position(date)
        
        if settings.DECIMAL_WIRE_FORMAT.lower() == "string":
            tax_position = decimal_to_wire(result.tax_position)
        else:
            tax_position = decimal_to_json_number(result.tax_position)
        
        return JSONResponse(
            status_code=200,
            content={"date": result.date, "taxPosition": tax_position}
        )
    
    except LedgerValidationError as e:
        raise bad_request("Invalid date query parameter", e.errors)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error computing tax position: {e}", exc_info=True)
        raise internal_error("Error computing tax position", e)
