"""Dispatch API routers."""

from .notifications_router import router

__all__ = ["router"]
