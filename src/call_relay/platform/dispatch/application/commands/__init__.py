"""Dispatch commands."""

from .send_call import SendCall
from .send_notification import SendNotification

__all__ = ["SendCall", "SendNotification"]
