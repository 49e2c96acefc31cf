"""
Request timing middleware.
"""
import time
import logging
from typing import Callable, List, Optional
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Logs every request with its status and duration and adds an
    ``X-Process-Time`` header. Requests slower than the threshold are
    logged at WARNING.
    """
    
    def __init__(
        self,
        app,
        *,
        add_timing_header: bool = True,
        slow_request_threshold: float = 1.0,  # seconds
        exclude_paths: Optional[List[str]] = None,
    ):
        super().__init__(app)
        self.add_timing_header = add_timing_header
        self.slow_request_threshold = slow_request_threshold
        self.exclude_paths = exclude_paths or []
    
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request with timing measurement."""
        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            return await call_next(request)
        
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed = time.perf_counter() - start
            logger.error(
                f"{request.method} {request.url.path} failed after {elapsed * 1000:.2f}ms"
            )
            raise
        
        elapsed = time.perf_counter() - start
        if self.add_timing_header:
            response.headers["X-Process-Time"] = f"{elapsed:.6f}"
        
        level = logging.WARNING if elapsed >= self.slow_request_threshold else logging.INFO
        logger.log(
            level,
            "%s %s -> %s in %.2fms",
            request.method, request.url.path, response.status_code, elapsed * 1000,
        )
        return response
