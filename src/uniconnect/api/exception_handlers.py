"""
Application exception handlers for the FastAPI app.

Typed service errors are rendered as ``{"message": ..., "error": {...}}``
with the status their class maps to.
"""
from typing import Any, Callable, Dict, Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
import logging

from ..core.exceptions.base import UniConnectError, create_error_response

logger = logging.getLogger(__name__)


class ExceptionHandlerRegistry:
    """Registry for the service's exception handlers."""
    
    def __init__(
        self,
        response_formatter: Optional[Callable[[UniConnectError], Dict[str, Any]]] = None,
        is_production: bool = True
    ):
        """
        Initialize exception handler registry.
        
        Args:
            response_formatter: Function turning a typed error into a response body
            is_production: Whether running in production mode
        """
        self.response_formatter = response_formatter or create_error_response
        self.is_production = is_production
    
    def register_handlers(self, app: FastAPI) -> None:
        """Register exception handlers for the application.
        
        Args:
            app: FastAPI application instance
        """
        @app.exception_handler(UniConnectError)
        async def uniconnect_error_handler(request: Request, exc: UniConnectError):
            """Handle typed service errors."""
            status_code = exc.status_code
            if status_code >= 500:
                logger.error(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")
            else:
                logger.info(f"{exc.error_code} on {request.method} {request.url.path}")
            return JSONResponse(
                status_code=status_code,
                content=self.response_formatter(exc)
            )
        
        @app.exception_handler(RequestValidationError)
        async def validation_error_handler(request: Request, exc: RequestValidationError):
            """Handle request body/query validation errors."""
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={
                    "message": "Invalid body",
                    "errors": jsonable_encoder(exc.errors()),
                }
            )
        
        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle unexpected exceptions."""
            logger.error(f"Unhandled exception: {exc}", exc_info=True)
            
            content: Dict[str, Any] = {"message": "Unexpected server error"}
            if not self.is_production:
                content["detail"] = str(exc)
            
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=content
            )


def register_exception_handlers(
    app: FastAPI,
    response_formatter: Optional[Callable[[UniConnectError], Dict[str, Any]]] = None,
    is_production: bool = True
) -> None:
    """
    Register exception handlers for a FastAPI application.
    
    Args:
        app: FastAPI application instance
        response_formatter: Custom response formatter function
        is_production: Whether running in production mode
    """
    registry = ExceptionHandlerRegistry(response_formatter, is_production)
    registry.register_handlers(app)
