"""Registry API routers."""

from .registry_router import router

__all__ = ["router"]
