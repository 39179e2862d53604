"""Push transport adapters."""

from .firebase_push_transport import FirebasePushTransport, make_firebase_app

__all__ = ["FirebasePushTransport", "make_firebase_app"]
