"""Legacy login endpoint."""

from fastapi import APIRouter, Depends

from .....api.dependencies import get_client_ip, get_legacy_login_command
from ...application.commands import LegacyLogin
from ..models import LoginRequest, LoginResponse

router = APIRouter(tags=["Authentication"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Legacy login",
    description="Verify a legacy username/password and issue a bearer token",
    responses={
        400: {"description": "Missing username or password"},
        401: {"description": "Invalid credentials"},
        429: {"description": "Too many login attempts"},
    },
)
async def login(
    request: LoginRequest,
    client_ip: str = Depends(get_client_ip),
    command: LegacyLogin = Depends(get_legacy_login_command)
) -> LoginResponse:
    result = await command.execute(request.username, request.password, client_ip)
    return LoginResponse(token=result.token)
