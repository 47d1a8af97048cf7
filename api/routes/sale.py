"""API route for amending a recorded sale line item"""

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import ValidationError
import logging

from api.dependencies import get_tax_position_service
from api.errors import bad_request, internal_error
from api.schemas import AmendSaleRequest
from src.services.errors import LedgerValidationError
from src.services.tax_position_service import TaxPositionService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.patch("/sale", status_code=202)
async def amend_sale(
    request: AmendSaleRequest,
    service: TaxPositionService = Depends(get_tax_position_service)
):
    """
    Record an amendment to one sale line item
    
    The item need not belong to a recorded sale.
    """
    try:
        try:
            amendment = request.to_amendment()
        except ValidationError as e:
            raise bad_request("Invalid amendment data", e.errors())
        
        await service.record_amendment(amendment)
        return Response(status_code=202)
    
    except HTTPException:
        raise
    except LedgerValidationError as e:
        raise bad_request(e.message, e.errors)
    except Exception as e:
        logger.error(f"Error processing amendment: {e}", exc_info=True)
        raise internal_error("Internal Server Error", e)
