"""Call relay application factory.

Builds the FastAPI application and the collaborators it serves requests with.
Collaborators not passed in explicitly are created from settings.
"""

import logging
from contextlib import asynccontextmanager
from functools import partial
from typing import Optional

from fastapi import FastAPI

from .api.dependencies import RelayServices
from .api.exception_handlers import register_exception_handlers
from .api.middleware import RequestLoggingMiddleware
from .config.settings import RegistryBackend, RelaySettings, get_settings
from .platform.auth.application.services import SecretVerifier
from .platform.auth.core.protocols import LegacyAccountStore, TokenIssuer
from .platform.auth.infrastructure.adapters import JoseTokenIssuer
from .platform.auth.infrastructure.limiters import FixedWindowRateLimiter
from .platform.auth.infrastructure.repositories import MemoryLegacyAccountStore
from .platform.dispatch.core.protocols import PushTransport
from .platform.dispatch.infrastructure.adapters import FirebasePushTransport, make_firebase_app
from .platform.registry.core.protocols import RecipientStore
from .platform.registry.infrastructure.repositories import (
    JsonFileRecipientStore,
    MemoryRecipientStore,
)

logger = logging.getLogger(__name__)


def build_recipient_store(settings: RelaySettings) -> RecipientStore:
    if settings.registry_backend is RegistryBackend.JSON_FILE:
        logger.info(f"Using JSON file registry at {settings.registry_file}")
        return JsonFileRecipientStore(settings.registry_file, default_role=settings.default_recipient_role)

    logger.info("Using in-memory registry; registrations are lost on restart")
    return MemoryRecipientStore(default_role=settings.default_recipient_role)


def build_push_transport(settings: RelaySettings) -> PushTransport:
    if not settings.firebase_configured:
        logger.warning(
            "Firebase credentials not configured "
            "(set FIREBASE_SERVICE_ACCOUNT or FIREBASE_CREDENTIALS_PATH); sends will fail"
        )
    return FirebasePushTransport(app_factory=partial(make_firebase_app, settings))


def build_account_store(settings: RelaySettings) -> LegacyAccountStore:
    if settings.legacy_accounts_file is None:
        logger.info("No legacy accounts file configured; legacy login will reject every attempt")
        return MemoryLegacyAccountStore()
    return MemoryLegacyAccountStore.from_json_file(settings.legacy_accounts_file)


def build_token_issuer(settings: RelaySettings) -> TokenIssuer:
    return JoseTokenIssuer(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
        expires_in=settings.jwt_expires_in,
        issuer=settings.app_name,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    services: RelayServices = app.state.services
    logger.info(
        f"{services.settings.app_name} {services.settings.app_version} started "
        f"({services.settings.environment}, {await services.recipient_store.size()} registered users)"
    )
    yield
    logger.info(f"{services.settings.app_name} shutting down")


def create_app(
    settings: Optional[RelaySettings] = None,
    *,
    recipient_store: Optional[RecipientStore] = None,
    push_transport: Optional[PushTransport] = None,
    account_store: Optional[LegacyAccountStore] = None,
    token_issuer: Optional[TokenIssuer] = None,
    rate_limiter: Optional[FixedWindowRateLimiter] = None,
    secret_verifier: Optional[SecretVerifier] = None
) -> FastAPI:
    """Create the call relay application.

    Args:
        settings: Settings to use, defaults to the environment
        recipient_store: Registry backend, defaults to the configured one
        push_transport: Push transport, defaults to Firebase
        account_store: Legacy account lookup
        token_issuer: Identity provider used after a successful legacy login
        rate_limiter: Login attempt limiter
        secret_verifier: Password hash verifier shared by all login requests

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    services = RelayServices(
        settings=settings,
        recipient_store=recipient_store if recipient_store is not None else build_recipient_store(settings),
        push_transport=push_transport if push_transport is not None else build_push_transport(settings),
        account_store=account_store if account_store is not None else build_account_store(settings),
        token_issuer=token_issuer if token_issuer is not None else build_token_issuer(settings),
        rate_limiter=rate_limiter or FixedWindowRateLimiter.from_string(settings.login_rate_limit),
        secret_verifier=secret_verifier or SecretVerifier(),
    )

    app = FastAPI(
        title="Neo Call Relay",
        version=settings.app_version,
        description="Device registry and incoming-call push notification relay",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.services = services

    register_exception_handlers(app, is_production=settings.is_production)
    app.add_middleware(RequestLoggingMiddleware)

    from .platform.registry.api.routers import router as registry_router
    app.include_router(registry_router)

    from .platform.dispatch.api.routers import router as notifications_router
    app.include_router(notifications_router)

    from .platform.auth.api.routers import router as auth_router
    app.include_router(auth_router)

    logger.info("Created call relay application")
    return app
