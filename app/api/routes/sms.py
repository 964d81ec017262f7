from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.api import deps
from app.schemas.dispatch import BulkSmsRequest, BulkSmsResponse
from app.schemas.sms import SmsSendRequest, SmsSendResponse
from app.services.dispatch_service import BulkDispatcher
from app.services.sms_service import SmsSendError, SmsSender

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sms"])


@router.post("/send-sms", response_model=SmsSendResponse)
def send_sms(
    payload: SmsSendRequest,
    sender: SmsSender = Depends(deps.get_sms_sender),
):
    """
    Sends one message to one recipient. Provider failures surface as 500.
    """
    try:
        sender.send(payload.to, payload.message)
    except SmsSendError as exc:
        logger.warning("SMS send failed (to=%s): %s", payload.to, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to send SMS: {exc}",
        ) from exc
    logger.info("SMS sent (to=%s)", payload.to)
    return SmsSendResponse(status="success", message="SMS sent successfully", to=payload.to)


@router.post("/send-bulk-sms", response_model=BulkSmsResponse)
def send_bulk_sms(
    payload: BulkSmsRequest,
    dispatcher: BulkDispatcher = Depends(deps.get_dispatcher),
):
    """
    Sends the same message to every recipient. Always 200; check ``failed`` for partial failure.
    """
    result = dispatcher.dispatch(payload.to, payload.message)
    return BulkSmsResponse(sent=list(result.sent), failed=list(result.failed), total=result.total)
