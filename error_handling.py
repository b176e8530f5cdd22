"""
Standardized error handling for the station console API

Provides:
- Consistent error response format
- Error handler decorator for route handlers
- Flask error handlers for common HTTP errors
- Exception types raised by the services and the scheduling core
"""
import logging
import traceback
from functools import wraps

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


# ============================================================================
# Error Response Format
# ============================================================================


def error_response(message, status_code=400, details=None):
    """
    Create a standardized error response

    Args:
        message: User-friendly error message
        status_code: HTTP status code
        details: Optional additional details (dict)

    Returns:
        tuple: (response, status_code)
    """
    response = {"success": False, "error": message}

    if details:
        response["details"] = details

    return jsonify(response), status_code


# ============================================================================
# Specific Error Classes (for raising)
# ============================================================================


class ResourceNotFoundError(Exception):
    """Raise when a requested channel or program doesn't exist (404)"""

    pass


class ValidationError(ValueError):
    """Raise when input validation or a business rule fails (400)"""

    def __init__(self, message="", details=None):
        super().__init__(message)
        self.details = details


class InvalidTimeFormat(ValidationError):
    """Raise when a wall-clock value is not a zero-padded 24-hour HH:MM"""

    def __init__(self, value):
        super().__init__(f"Invalid time format: {value!r} (expected HH:MM)", details={"value": str(value)})
        self.value = value


class ServiceUnavailableError(Exception):
    """Raise when the database or an upstream dependency is unavailable (503)"""

    pass


# ============================================================================
# Error Handler Decorator
# ============================================================================


def handle_errors(default_message="An error occurred", log_errors=True, include_traceback_in_dev=False):
    """
    Decorator to handle exceptions in route handlers

    Usage:
        @bp.route('/api/resource')
        @handle_errors()
        def my_route():
            # Any exception will be caught and returned as error response

    Args:
        default_message: Fallback message if exception has no message
        log_errors: If True, logs errors to logger
        include_traceback_in_dev: If True and app.debug=True, includes traceback

    Returns:
        Decorated function that catches and handles exceptions
    """

    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except HTTPException:
                # Let Flask handle HTTP exceptions (abort, get_or_404, etc.)
                raise
            except ServiceUnavailableError as e:
                if log_errors:
                    logger.warning(f"Service unavailable in {f.__name__}: {e}")
                return error_response(str(e) or "Service temporarily unavailable", 503)

            except ResourceNotFoundError as e:
                if log_errors:
                    logger.warning(f"Resource not found in {f.__name__}: {e}")
                return error_response(str(e) or "Resource not found", 404)

            except ValidationError as e:
                if log_errors:
                    logger.warning(f"Validation error in {f.__name__}: {e}")
                return error_response(str(e) or "Validation error", 400, e.details)

            except ValueError as e:
                if log_errors:
                    logger.warning(f"Value error in {f.__name__}: {e}")
                return error_response(str(e) or default_message, 400)

            except Exception as exc:
                if log_errors:
                    logger.error(f"Unexpected error in {f.__name__}", exc_info=True)

                from flask import current_app

                if current_app.config.get("DEBUG") and include_traceback_in_dev:
                    details = {"exception_type": type(exc).__name__, "traceback": traceback.format_exc()}
                    return error_response(str(exc), 500, details)
                return error_response(default_message or "An internal error occurred", 500)

        return wrapper

    return decorator


# ============================================================================
# Flask Error Handlers (register these in app.py)
# ============================================================================


def register_error_handlers(app):
    """
    Register global error handlers for the Flask app

    Call this in app.py after creating the Flask app:
        register_error_handlers(app)
    """

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors"""
        return error_response("Resource not found", 404)

    @app.errorhandler(400)
    def bad_request(error):
        """Handle 400 errors"""
        return error_response("Bad request", 400)

    @app.errorhandler(405)
    def method_not_allowed(error):
        """Handle 405 errors"""
        return error_response("Method not allowed", 405)

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors"""
        logger.error(f"Internal server error: {error}", exc_info=True)

        if app.config.get("DEBUG"):
            return error_response(str(error), 500)
        return error_response("An internal error occurred", 500)


# ============================================================================
# Database Error Helpers
# ============================================================================


def handle_db_error(e, operation="database operation"):
    """
    Translate a SQLAlchemy error into a service exception

    Args:
        e: The exception
        operation: Description of what was being attempted

    Raises:
        ValidationError: constraint violation (duplicate id, bad reference)
        ServiceUnavailableError: connection or locking problem
    """
    from sqlalchemy.exc import IntegrityError, OperationalError

    if isinstance(e, IntegrityError):
        logger.warning(f"Database integrity error during {operation}: {e}")
        raise ValidationError("Database constraint violation. Check for duplicates or invalid references.") from e

    if isinstance(e, OperationalError):
        logger.error(f"Database operational error during {operation}: {e}", exc_info=True)
        raise ServiceUnavailableError("Database is temporarily unavailable") from e

    logger.error(f"Database error during {operation}: {e}", exc_info=True)
    raise e
