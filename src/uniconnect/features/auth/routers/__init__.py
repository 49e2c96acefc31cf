"""Auth routers."""

from .auth_router import router

__all__ = ["router"]
