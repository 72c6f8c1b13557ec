"""
Centralized error handling and standardized error responses
"""
from flask import jsonify, request
from werkzeug.exceptions import HTTPException
from typing import Dict
import os
from whatsnew.utils.logger import logger


class AppError(Exception):
    """Base application error"""
    def __init__(self, message: str, status_code: int = 500, error_code: str = None, details: Dict = None):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or f"ERR_{status_code}"
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """Validation error (400)"""
    def __init__(self, message: str, details: Dict = None):
        super().__init__(message, 400, "VALIDATION_ERROR", details)


class PayloadTooLargeError(AppError):
    """Catalog larger than the configured limit (413)"""
    def __init__(self, message: str, limit: int = None, details: Dict = None):
        details = details or {}
        if limit:
            details['limit'] = limit
        super().__init__(message, 413, "PAYLOAD_TOO_LARGE", details)


def _is_debug() -> bool:
    return os.getenv('FLASK_ENV') == 'development' or os.getenv('DEBUG') == 'True'


def _request_info() -> tuple:
    """Path and method of the current request, or Nones outside a request"""
    try:
        return request.path, request.method
    except RuntimeError:
        return None, None


def create_error_response(
    message: str,
    status_code: int = 500,
    error_code: str = None,
    details: Dict = None,
    include_traceback: bool = False
) -> tuple:
    """
    Create standardized error response

    Args:
        message: Error message
        status_code: HTTP status code
        error_code: Application error code
        details: Additional error details
        include_traceback: Whether to include traceback (only in debug mode)

    Returns:
        Tuple of (JSON response, status_code)
    """
    error_code = error_code or f"ERR_{status_code}"
    details = details or {}

    response = {
        'success': False,
        'error': {
            'message': message,
            'code': error_code,
            'status_code': status_code
        }
    }

    if details:
        response['error']['details'] = details

    if include_traceback:
        import traceback as tb
        response['error']['traceback'] = tb.format_exc()

    path, method = _request_info()
    logger.error(
        f"Error {error_code}: {message}",
        extra={
            'status_code': status_code,
            'error_code': error_code,
            'details': details,
            'path': path,
            'method': method
        }
    )

    return jsonify(response), status_code


def handle_app_error(error: AppError) -> tuple:
    """Handle AppError exceptions"""
    return create_error_response(
        error.message,
        error.status_code,
        error.error_code,
        error.details,
        include_traceback=False
    )


def handle_http_error(error: HTTPException) -> tuple:
    """Handle werkzeug HTTP errors that have no dedicated handler"""
    return create_error_response(
        error.description or error.name,
        error.code,
        error.name.upper().replace(' ', '_'),
    )


def handle_generic_error(error: Exception) -> tuple:
    """Handle generic exceptions"""
    error_message = str(error) or "An unexpected error occurred"
    path, method = _request_info()

    logger.exception(
        f"Unhandled exception: {error_message}",
        extra={
            'exception_type': type(error).__name__,
            'path': path,
            'method': method
        }
    )

    is_debug = _is_debug()

    return create_error_response(
        error_message if is_debug else "An internal server error occurred",
        500,
        "INTERNAL_ERROR",
        {'exception_type': type(error).__name__} if is_debug else {},
        include_traceback=is_debug
    )


def register_error_handlers(app):
    """
    Register error handlers with Flask app

    Args:
        app: Flask application instance
    """
    @app.errorhandler(AppError)
    def handle_app_error_handler(error: AppError):
        return handle_app_error(error)

    @app.errorhandler(404)
    def handle_not_found(error):
        path, _ = _request_info()
        path = path or 'unknown'
        return create_error_response(
            f"Endpoint not found: {path}",
            404,
            "NOT_FOUND",
            {'path': path}
        )

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        path, method = _request_info()
        return create_error_response(
            f"Method not allowed: {method or 'unknown'}",
            405,
            "METHOD_NOT_ALLOWED",
            {'method': method or 'unknown', 'path': path or 'unknown'}
        )

    @app.errorhandler(500)
    def handle_internal_error(error):
        return handle_generic_error(error)

    @app.errorhandler(Exception)
    def handle_all_exceptions(error):
        if isinstance(error, HTTPException):
            return handle_http_error(error)
        return handle_generic_error(error)
