"""FastAPI dependencies resolving relay collaborators from application state."""

from dataclasses import dataclass, field

from fastapi import Depends, Request

from ..config.settings import RelaySettings
from ..platform.auth.application.commands import LegacyLogin
from ..platform.auth.application.services import SecretVerifier
from ..platform.auth.core.protocols import LegacyAccountStore, TokenIssuer
from ..platform.auth.infrastructure.limiters import FixedWindowRateLimiter
from ..platform.dispatch.application.commands import SendCall, SendNotification
from ..platform.dispatch.application.services import DeliveryAccountant, DispatchRouter
from ..platform.dispatch.core.protocols import PushTransport
from ..platform.registry.application.commands import RegisterRecipient
from ..platform.registry.application.queries import GetRegistryStats, ListRecipients
from ..platform.registry.core.protocols import RecipientStore


@dataclass
class RelayServices:
    """Collaborators created once at startup and shared by all requests."""

    settings: RelaySettings
    recipient_store: RecipientStore
    push_transport: PushTransport
    account_store: LegacyAccountStore
    token_issuer: TokenIssuer
    rate_limiter: FixedWindowRateLimiter
    secret_verifier: SecretVerifier = field(default_factory=SecretVerifier)


def get_services(request: Request) -> RelayServices:
    """Get the relay services attached to the running application."""
    return request.app.state.services


def get_recipient_store(services: RelayServices = Depends(get_services)) -> RecipientStore:
    return services.recipient_store


def get_dispatch_router(services: RelayServices = Depends(get_services)) -> DispatchRouter:
    return DispatchRouter(
        store=services.recipient_store,
        broadcast_topic=services.settings.broadcast_topic,
        role_topics=services.settings.role_topics,
    )


# Command Dependencies
def get_register_recipient_command(
    store: RecipientStore = Depends(get_recipient_store)
) -> RegisterRecipient:
    return RegisterRecipient(store)


def get_send_call_command(
    services: RelayServices = Depends(get_services),
    router: DispatchRouter = Depends(get_dispatch_router)
) -> SendCall:
    return SendCall(
        router=router,
        transport=services.push_transport,
        accountant=DeliveryAccountant(),
    )


def get_send_notification_command(
    services: RelayServices = Depends(get_services)
) -> SendNotification:
    return SendNotification(
        store=services.recipient_store,
        transport=services.push_transport,
        accountant=DeliveryAccountant(),
    )


def get_legacy_login_command(services: RelayServices = Depends(get_services)) -> LegacyLogin:
    return LegacyLogin(
        account_store=services.account_store,
        token_issuer=services.token_issuer,
        rate_limiter=services.rate_limiter,
        identity_prefix=services.settings.legacy_identity_prefix,
        verifier=services.secret_verifier,
    )


# Query Dependencies
def get_registry_stats_query(
    store: RecipientStore = Depends(get_recipient_store)
) -> GetRegistryStats:
    return GetRegistryStats(store)


def get_list_recipients_query(
    store: RecipientStore = Depends(get_recipient_store)
) -> ListRecipients:
    return ListRecipients(store)


def get_client_ip(
    request: Request,
    services: RelayServices = Depends(get_services)
) -> str:
    """Get client IP address, honouring proxy headers when trusted."""
    if services.settings.trust_forwarded_headers:
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip

    client = request.client
    if client and client.host:
        return client.host

    return "unknown"
