"""API routes for ingesting sales and tax payments"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Response
from pydantic import ValidationError
import logging

from api.dependencies import get_tax_position_service
from api.errors import bad_request, internal_error
from api.schemas import SalesEventRequest, TaxPaymentEventRequest
from src.services.errors import LedgerValidationError
from src.services.tax_position_service import TaxPositionService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/transactions", status_code=202)
async def ingest_transaction(
    event: Dict[str, Any] = Body(...),
    service: TaxPositionService = Depends(get_tax_position_service)
):
    """
    Ingest a SALES or TAX_PAYMENT event
    
    Returns:
        202 with an empty body once the event is recorded
    """
    event_type = event.get("eventType")
    try:
        if event_type == "SALES":
            try:
                sale = SalesEventRequest.model_validate(event).to_sale()
            except ValidationError as e:
                raise bad_request("Invalid sales event data", e.errors())
            await service.record_sale(sale)
        
        elif event_type == "TAX_PAYMENT":
            try:
                payment = TaxPaymentEventRequest.model_validate(event).to_payment()
            except ValidationError as e:
                raise bad_request("Invalid tax payment event data", e.errors())
            await service.record_payment(payment)
        
        else:
            raise bad_request(
                "Invalid event type",
                [{"loc": ["body", "eventType"], "msg": "must be SALES or TAX_PAYMENT", "type": "value_error"}],
            )
        
        return Response(status_code=202)
    
    except HTTPException:
        raise
    except LedgerValidationError as e:
        raise bad_request(e.message, e.errors)
    except Exception as e:
        logger.error(f"Error ingesting transaction: {e}", exc_info=True)
        raise internal_error("Internal Server Error", e)
