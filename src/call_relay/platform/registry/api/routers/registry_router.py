"""Device registration and registry introspection endpoints."""


from fastapi import APIRouter, Depends, status

from .....api.dependencies import (
    get_list_recipients_query,
    get_register_recipient_command,
    get_registry_stats_query,
)
from ...application.commands import RegisterRecipient, RegisterRecipientRequest
from ...application.queries import GetRegistryStats, ListRecipients
from ..models import (
    RecipientSummary,
    RegisterRequest,
    RegisterResponse,
    RegistryListingResponse,
    RegistryStatusResponse,
)


router = APIRouter(tags=["Registry"])


@router.get(
    "/",
    response_model=RegistryStatusResponse,
    summary="Liveness check",
)
async def liveness(
    stats_query: GetRegistryStats = Depends(get_registry_stats_query)
) -> RegistryStatusResponse:
    stats = await stats_query.execute()
    return RegistryStatusResponse(
        registered_users=stats.registered_users,
        total_tokens=stats.total_tokens,
    )


@router.post("/", summary="Usage hint")
async def root_post_hint() -> dict:
    return {"ok": True, "message": "POST to / received - use /register to send tokens"}


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_200_OK,
    summary="Register a device token",
    description="Store or replace the push token of a recipient identity",
)
async def register(
    request: RegisterRequest,
    command: RegisterRecipient = Depends(get_register_recipient_command)
) -> RegisterResponse:
    record = await command.execute(
        RegisterRecipientRequest(uid=request.uid, token=request.token, role=request.role)
    )
    return RegisterResponse(uid=record.identity, token=record.destination)


@router.get(
    "/tokens",
    response_model=RegistryListingResponse,
    summary="List registered devices",
    description="Diagnostic listing of the registry with truncated tokens",
)
async def list_tokens(
    list_query: ListRecipients = Depends(get_list_recipients_query)
) -> RegistryListingResponse:
    listing = await list_query.execute()
    return RegistryListingResponse(
        total_users=listing.total_users,
        total_tokens=listing.total_tokens,
        users=[RecipientSummary.from_domain(record) for record in listing.records],
    )
