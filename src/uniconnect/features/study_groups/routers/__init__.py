"""Study group routers."""

from .study_group_router import router

__all__ = ["router"]
