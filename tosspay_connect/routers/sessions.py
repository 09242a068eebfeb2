from fastapi import APIRouter, Depends, HTTPException
from typing import Dict, Any
from ..settings import settings
from ..schemas.host import AuthorizePaymentRequest, PaymentProcessorContext, RefundPaymentRequest
from ..processors.base import PaymentProcessor
from ..processors.registry import get_processor_by_name
from ..utils.errors import ConfigurationError

router = APIRouter(prefix="/sessions")


def get_processor() -> PaymentProcessor:
    try:
        processor = get_processor_by_name(settings.DEFAULT_PROCESSOR)
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    if not processor:
        raise HTTPException(status_code=400, detail="Processor not found")
    return processor


# Failures come back as {"error", "code", "detail"} with HTTP 200, same as
# successes: the host branches on the body, never on an exception.

@router.post("/initiate")
async def initiate(context: PaymentProcessorContext, processor: PaymentProcessor = Depends(get_processor)):
    return await processor.initiate_payment(context)


@router.post("/update")
async def update(context: PaymentProcessorContext, processor: PaymentProcessor = Depends(get_processor)):
    return await processor.update_payment(context)


@router.post("/{session_id}/data")
async def update_data(
    session_id: str, data: Dict[str, Any], processor: PaymentProcessor = Depends(get_processor)
):
    return await processor.update_payment_data(session_id, data)


@router.post("/status")
async def status(session_data: Dict[str, Any], processor: PaymentProcessor = Depends(get_processor)):
    result = await processor.get_payment_status(session_data)
    return {"status": result.value}


@router.post("/authorize")
async def authorize(body: AuthorizePaymentRequest, processor: PaymentProcessor = Depends(get_processor)):
    return await processor.authorize_payment(body.session_data, body.context)


@router.post("/retrieve")
async def retrieve(session_data: Dict[str, Any], processor: PaymentProcessor = Depends(get_processor)):
    return await processor.retrieve_payment(session_data)


@router.post("/refund")
async def refund(body: RefundPaymentRequest, processor: PaymentProcessor = Depends(get_processor)):
    return await processor.refund_payment(body.session_data, body.refund_amount)


@router.post("/capture")
async def capture(session_data: Dict[str, Any], processor: PaymentProcessor = Depends(get_processor)):
    return await processor.capture_payment(session_data)


@router.post("/cancel")
async def cancel(session_data: Dict[str, Any], processor: PaymentProcessor = Depends(get_processor)):
    return await processor.cancel_payment(session_data)


@router.post("/delete")
async def delete(session_data: Dict[str, Any], processor: PaymentProcessor = Depends(get_processor)):
    return await processor.delete_payment(session_data)
