"""Helpers for keeping delivery addresses and secrets out of logs and responses."""

from typing import Optional

from ..config.constants import DESTINATION_PREVIEW_LENGTH


def destination_preview(destination: Optional[str], length: int = DESTINATION_PREVIEW_LENGTH) -> str:
    """Truncate a destination identifier for display."""
    if not destination:
        return ""
    if len(destination) <= length:
        return destination
    return f"{destination[:length]}..."


def mask_username(username: Optional[str]) -> str:
    """Mask username for security in logs."""
    if not username or len(username) <= 4:
        return "***"
    return f"{username[:2]}...{username[-2:]}"
