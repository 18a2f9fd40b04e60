"""
Request logging middleware.
Assigns a request ID, enforces the request size limit and logs each request.
"""

from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
import logging
import time
import uuid

from rental_api.services.error_handler import ErrorHandlerService
from rental_api.utils.exceptions import PayloadTooLargeError

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request tracking and preprocessing.
    Handles request IDs, body size limits and request/response logging.
    """

    def __init__(
        self,
        app: ASGIApp,
        max_request_size: int = 10 * 1024 * 1024,  # 10MB
        enable_request_logging: bool = True
    ):
        super().__init__(app)
        self.max_request_size = max_request_size
        self.enable_request_logging = enable_request_logging

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request through the middleware.

        Args:
            request: FastAPI request object
            call_next: Next middleware/handler in chain

        Returns:
            Response object
        """
        # Generate request ID for tracking
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id

        start_time = time.time()

        if self.enable_request_logging:
            self._log_request(request, request_id)

        size = self._get_content_length(request)
        if size is not None and size > self.max_request_size:
            response = ErrorHandlerService.handle_api_exception(
                PayloadTooLargeError(size, self.max_request_size), request
            )
        else:
            response = await call_next(request)

        if self.enable_request_logging:
            self._log_response(request, response, request_id, time.time() - start_time)

        response.headers["X-Request-ID"] = request_id
        return response

    @staticmethod
    def _get_content_length(request: Request):
        content_length = request.headers.get("content-length")
        if not content_length:
            return None
        try:
            return int(content_length)
        except ValueError:
            return None

    def _log_request(self, request: Request, request_id: str) -> None:
        """Log incoming request method and path."""
        logger.info(
            f"Request [{request_id}]: {request.method} {request.url.path}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "query_params": str(request.query_params)
            }
        )

    def _log_response(
        self,
        request: Request,
        response: Response,
        request_id: str,
        processing_time: float
    ) -> None:
        """Log response status and timing."""
        logger.info(
            f"Response [{request_id}]: {response.status_code} - {processing_time:.3f}s",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "processing_time": processing_time
            }
        )
