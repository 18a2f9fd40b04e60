"""
Error handling service for consistent error response formatting and logging.
Provides centralized error handling with structured responses and appropriate logging.
"""

from http import HTTPStatus
from typing import Dict, Any, Optional, List
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from rental_api.utils.exceptions import APIException, ValidationError, RouteNotFoundError
from rental_api.utils.validators import format_error
import logging

logger = logging.getLogger(__name__)

# Messages for request-level failures raised by FastAPI before a handler runs
REQUEST_ERROR_MESSAGES = {
    "json_invalid": "Request body must be valid JSON",
}


class ErrorHandlerService:
    """
    Service for handling and formatting errors consistently across the application.

    Bodies are always one of:
        {"error": "Validation error", "details": [...]}
        {"error": <label>, "message": <message>}
    """

    @staticmethod
    def format_error_response(
        error: str,
        message: Optional[str] = None,
        details: Optional[List[str]] = None
    ) -> Dict[str, Any]:
        """
        Format error response in a consistent structure.

        Args:
            error: Short error label, e.g. "Not Found"
            message: Human-readable error message
            details: List of validation messages

        Returns:
            Formatted error response dictionary
        """
        response: Dict[str, Any] = {"error": error}

        if details is not None:
            response["details"] = details

        if message is not None:
            response["message"] = message

        return response

    @staticmethod
    def handle_api_exception(
        exception: APIException,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """
        Handle custom API exceptions with structured response.

        Args:
            exception: API exception instance
            request: Optional FastAPI request object

        Returns:
            JSON response with formatted error
        """
        extra = {
            "status_code": exception.status_code,
            "request_id": ErrorHandlerService._get_request_id(request),
            "path": request.url.path if request else None
        }

        if isinstance(exception, ValidationError):
            logger.warning(
                f"Validation Error: {len(exception.details)} violations - {exception.detail}",
                extra=extra
            )
            error_response = ErrorHandlerService.format_error_response(
                error=exception.error,
                details=exception.details
            )
        else:
            if exception.status_code >= 500:
                logger.error(f"API Exception: {exception.error} - {exception.detail}", extra=extra)
            else:
                logger.warning(f"API Exception: {exception.error} - {exception.detail}", extra=extra)
            error_response = ErrorHandlerService.format_error_response(
                error=exception.error,
                message=exception.detail
            )

        return JSONResponse(
            status_code=exception.status_code,
            content=error_response,
            headers=exception.headers
        )

    @staticmethod
    def handle_request_validation_error(
        exception: RequestValidationError,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """
        Handle FastAPI request validation errors (malformed JSON bodies).

        Args:
            exception: FastAPI request validation error
            request: Optional FastAPI request object

        Returns:
            400 JSON response in the validation error format
        """
        details = []
        for error in exception.errors():
            error_type = error.get("type", "")
            if error_type in REQUEST_ERROR_MESSAGES:
                details.append(REQUEST_ERROR_MESSAGES[error_type])
                continue
            # drop the "body" / "query" / "path" prefix FastAPI adds to locations
            loc = tuple(error.get("loc") or ())
            if loc and loc[0] in ("body", "query", "path"):
                loc = loc[1:]
            details.append(format_error({**error, "loc": loc}))

        return ErrorHandlerService.handle_api_exception(ValidationError(details), request)

    @staticmethod
    def handle_http_exception(
        exception: StarletteHTTPException,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """
        Handle HTTP exceptions raised by routing.

        Unknown paths and unsupported methods both answer 404 with the
        requested URL in the message.

        Args:
            exception: Starlette HTTP exception
            request: Optional FastAPI request object

        Returns:
            JSON response with HTTP error information
        """
        if exception.status_code in (HTTPStatus.NOT_FOUND, HTTPStatus.METHOD_NOT_ALLOWED):
            path = ErrorHandlerService._get_original_url(request)
            return ErrorHandlerService.handle_api_exception(RouteNotFoundError(path), request)

        logger.warning(
            f"HTTP Exception: {exception.status_code} - {exception.detail}",
            extra={
                "status_code": exception.status_code,
                "request_id": ErrorHandlerService._get_request_id(request),
                "path": request.url.path if request else None
            }
        )

        error_response = ErrorHandlerService.format_error_response(
            error=ErrorHandlerService._get_status_phrase(exception.status_code),
            message=str(exception.detail)
        )

        return JSONResponse(
            status_code=exception.status_code,
            content=error_response,
            headers=getattr(exception, "headers", None)
        )

    @staticmethod
    def handle_unexpected_error(
        exception: Exception,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """
        Handle unexpected errors with secure error responses.

        Args:
            exception: Unexpected exception
            request: Optional FastAPI request object

        Returns:
            JSON response with generic error message
        """
        # Log the unexpected error with full traceback
        logger.error(
            f"Unexpected Error: {type(exception).__name__} - {str(exception)}",
            extra={
                "request_id": ErrorHandlerService._get_request_id(request),
                "path": request.url.path if request else None,
                "exception_type": type(exception).__name__
            },
            exc_info=exception
        )

        # Format response (don't expose internal details)
        error_response = ErrorHandlerService.format_error_response(
            error="Internal server error",
            message="An unexpected error occurred. Please try again later."
        )

        return JSONResponse(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            content=error_response
        )

    @staticmethod
    def _get_request_id(request: Optional[Request]) -> Optional[str]:
        """Request ID assigned by the request logging middleware, if any."""
        if request is None:
            return None
        return getattr(request.state, "request_id", None)

    @staticmethod
    def _get_original_url(request: Optional[Request]) -> str:
        """Path plus query string, as the client sent it."""
        if request is None:
            return "/"
        if request.url.query:
            return f"{request.url.path}?{request.url.query}"
        return request.url.path

    @staticmethod
    def _get_status_phrase(status_code: int) -> str:
        try:
            return HTTPStatus(status_code).phrase
        except ValueError:
            return "Error"
