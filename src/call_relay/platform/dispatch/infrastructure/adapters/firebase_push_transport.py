"""Firebase Cloud Messaging push transport."""

import asyncio
import json
import logging
from typing import Callable, List, Optional, Sequence

import firebase_admin
from firebase_admin import credentials as firebase_credentials
from firebase_admin import exceptions as firebase_exceptions
from firebase_admin import messaging
from firebase_admin.messaging import UnregisteredError as FCMUnregisteredError

from .....config.constants import FCM_MAX_BATCH_SIZE
from .....config.settings import RelaySettings
from .....core.exceptions import ConfigurationError, TransportFailureError
from .....utils.redaction import destination_preview
from ...core.entities import CallNotification
from ...core.protocols import SendResponse

logger = logging.getLogger(__name__)


def make_firebase_app(settings: RelaySettings) -> Optional[firebase_admin.App]:
    """Initialize the Firebase Admin app from settings.

    Returns None when no credentials are configured. The raw service account
    JSON takes precedence over a credentials file path.
    """
    if not settings.firebase_configured:
        return None

    try:
        return firebase_admin.get_app(settings.app_name)
    except ValueError:
        pass

    try:
        if settings.firebase_service_account is not None:
            service_account = json.loads(settings.firebase_service_account.get_secret_value())
            credential = firebase_credentials.Certificate(service_account)
        else:
            credential = firebase_credentials.Certificate(str(settings.firebase_credentials_path))
    except (ValueError, OSError) as e:
        raise ConfigurationError(f"Invalid Firebase credentials: {e}") from e

    app = firebase_admin.initialize_app(
        credential,
        options={"httpTimeout": settings.firebase_http_timeout},
        name=settings.app_name,
    )
    logger.info("Firebase Admin initialized")
    return app


class FirebasePushTransport:
    """Push transport backed by the Firebase Admin SDK.

    The SDK is synchronous, so every call runs in a worker thread; the SDK's
    own HTTP timeout bounds it. The Firebase app is created lazily on first
    use.
    """

    def __init__(
        self,
        app: Optional[firebase_admin.App] = None,
        app_factory: Optional[Callable[[], Optional[firebase_admin.App]]] = None,
        android_priority: str = "high",
        batch_size: int = FCM_MAX_BATCH_SIZE
    ):
        if batch_size <= 0 or batch_size > FCM_MAX_BATCH_SIZE:
            raise ValueError(f"batch_size must be between 1 and {FCM_MAX_BATCH_SIZE}")

        self._app = app
        self._app_factory = app_factory
        self.android_priority = android_priority
        self.batch_size = batch_size

    def _get_app(self) -> firebase_admin.App:
        if self._app is None and self._app_factory is not None:
            self._app = self._app_factory()
        if self._app is None:
            raise TransportFailureError(
                "Push transport not configured",
                details={"reason": "firebase_not_initialized"},
            )
        return self._app

    def _build_message(
        self,
        notification: CallNotification,
        token: Optional[str] = None,
        topic: Optional[str] = None
    ) -> messaging.Message:
        return messaging.Message(
            notification=messaging.Notification(title=notification.title, body=notification.body),
            data=dict(notification.data) or None,
            android=messaging.AndroidConfig(priority=self.android_priority),
            token=token,
            topic=topic,
        )

    async def send(self, notification: CallNotification, destination: str) -> str:
        app = self._get_app()
        message = self._build_message(notification, token=destination)
        try:
            return await asyncio.to_thread(messaging.send, message, app=app)
        except firebase_exceptions.FirebaseError as e:
            logger.warning(f"FCM: delivery to {destination_preview(destination)} failed: {e.code}: {e}")
            raise TransportFailureError("Push delivery failed", details={"code": e.code}) from e

    async def send_to_topic(self, notification: CallNotification, topic: str) -> str:
        app = self._get_app()
        message = self._build_message(notification, topic=topic)
        try:
            return await asyncio.to_thread(messaging.send, message, app=app)
        except firebase_exceptions.FirebaseError as e:
            logger.warning(f"FCM: delivery to topic {topic} failed: {e.code}: {e}")
            raise TransportFailureError("Push delivery failed", details={"code": e.code}) from e

    async def send_multicast(
        self,
        notification: CallNotification,
        destinations: Sequence[str]
    ) -> List[SendResponse]:
        app = self._get_app()
        results: List[SendResponse] = []

        for start in range(0, len(destinations), self.batch_size):
            chunk = destinations[start:start + self.batch_size]
            messages = [self._build_message(notification, token=token) for token in chunk]
            try:
                batch_response = await asyncio.to_thread(messaging.send_each, messages, app=app)
            except firebase_exceptions.FirebaseError as e:
                logger.warning(f"FCM: batch of {len(chunk)} failed: {e.code}: {e}")
                results.extend(
                    SendResponse(success=False, error_code=e.code, error_message=str(e))
                    for _ in chunk
                )
                continue

            # send_each() preserves message order
            for token, response in zip(chunk, batch_response.responses):
                results.append(self._to_send_response(token, response))

        return results

    def _to_send_response(self, token: str, response: messaging.SendResponse) -> SendResponse:
        if response.success:
            return SendResponse(success=True, message_id=response.message_id)

        error = response.exception
        if isinstance(error, FCMUnregisteredError):
            logger.info(f"FCM: {destination_preview(token)} is no longer registered")
        else:
            logger.warning(f"FCM: delivery failed for {destination_preview(token)}: {error}")
        return SendResponse(
            success=False,
            error_code=getattr(error, "code", None) or type(error).__name__,
            error_message=str(error) if error else None,
        )
