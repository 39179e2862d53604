"""Notification dispatch endpoints."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from .....api.dependencies import (
    get_recipient_store,
    get_send_call_command,
    get_send_notification_command,
)
from ....registry.core.protocols import RecipientStore
from ...application.commands import SendCall, SendNotification
from ..models import SendAllRequest, SendCallHintResponse, SendCallRequest, SendDirectRequest

router = APIRouter(tags=["Notifications"])


@router.get(
    "/send-call",
    response_model=SendCallHintResponse,
    summary="Usage hint for call dispatch",
)
async def send_call_hint(
    store: RecipientStore = Depends(get_recipient_store)
) -> SendCallHintResponse:
    return SendCallHintResponse(
        message=(
            "POST JSON {patientName, channelId|roomId, doctorUid?, targetRole?, useTopic?} "
            "to this endpoint to notify recipients of an incoming call"
        ),
        registered_tokens=await store.destination_count(),
    )


@router.post(
    "/send-call",
    summary="Dispatch an incoming-call notification",
    description=(
        "Send to a registered doctorUid directly, to the role topic when useTopic is set, "
        "or to every registered token (optionally filtered by targetRole)"
    ),
)
async def send_call(
    request: SendCallRequest,
    command: SendCall = Depends(get_send_call_command)
) -> Dict[str, Any]:
    outcome = await command.execute(request.to_intent())
    return outcome.to_response()


@router.post("/send", summary="Send a plain notification to one token")
async def send_direct(
    request: SendDirectRequest,
    command: SendNotification = Depends(get_send_notification_command)
) -> Dict[str, Any]:
    outcome = await command.to_token(request.token, request.title, request.body)
    return {"ok": True, "messageId": outcome.message_id}


@router.post("/send-all", summary="Send a plain notification to every registered token")
async def send_all(
    request: Optional[SendAllRequest] = Body(default=None),
    command: SendNotification = Depends(get_send_notification_command)
) -> Dict[str, Any]:
    request = request or SendAllRequest()
    outcome = await command.to_all(request.title, request.body)
    return outcome.to_response()
