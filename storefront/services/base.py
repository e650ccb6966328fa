"""
Base classes and utilities for the service layer.

This module provides the ServiceResult pattern (inspired by Rust's Result type)
and the BaseService class shared by every storefront service. Remote reads and
writes return a ServiceResult; fallback policies (sample data, notifications)
are decided by the caller.
"""

import logging
import time
from dataclasses import dataclass
from functools import wraps
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    A result type that encapsulates success or failure from service operations.

    Attributes:
        ok: True if operation succeeded, False otherwise
        value: The success value (present if ok=True)
        error: Error code (present if ok=False)
        error_detail: Human-readable error message (present if ok=False)

    Examples:
        >>> result = service_ok(services)
        >>> if result.ok:
        ...     return Response({"services": result.value}, 200)

        >>> result = service_err("remote_read_error", "relation services does not exist")
        >>> print(result.error)  # "remote_read_error"
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_detail: Optional[str] = None


def service_ok(value: T) -> ServiceResult[T]:
    """
    Create a successful ServiceResult.

    Args:
        value: The success value

    Returns:
        ServiceResult with ok=True and the value
    """
    return ServiceResult(ok=True, value=value)


def service_err(error: str, error_detail: str = "") -> ServiceResult:
    """
    Create a failed ServiceResult.

    Args:
        error: Error code (e.g., "remote_read_error", "validation_error")
        error_detail: Human-readable error message

    Returns:
        ServiceResult with ok=False and error information

    Example:
        >>> return service_err(ErrorCodes.VALIDATION_ERROR, "Please enter a comment.")
    """
    return ServiceResult(ok=False, error=error, error_detail=error_detail or error)


class BaseService:
    """
    Base class for all services providing common functionality.

    Provides:
    - Logging with class name
    - Performance timing decorator

    Usage:
        class CatalogService(BaseService):
            def __init__(self, data):
                super().__init__()
                self.data = data

            @BaseService.log_performance
            def fetch_services(self):
                self.logger.info("Fetching services")
                # ... implementation
    """

    def __init__(self):
        """Initialize base service with logger."""
        self.logger = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    @staticmethod
    def log_performance(func: Callable) -> Callable:
        """
        Decorator to log performance of service methods.

        Logs execution time and any errors that occur.

        Args:
            func: The service method to wrap

        Returns:
            Wrapped function with performance logging
        """

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            start_time = time.time()
            method_name = f"{self.__class__.__name__}.{func.__name__}"

            try:
                self.logger.debug(f"{method_name} started")
                result = func(self, *args, **kwargs)
                elapsed_time = (time.time() - start_time) * 1000  # Convert to ms

                if isinstance(result, ServiceResult):
                    if result.ok:
                        self.logger.info(f"{method_name} completed successfully in {elapsed_time:.2f}ms")
                    else:
                        self.logger.warning(
                            f"{method_name} failed with error '{result.error}' in {elapsed_time:.2f}ms"
                        )
                else:
                    self.logger.info(f"{method_name} completed in {elapsed_time:.2f}ms")

                return result

            except Exception as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"{method_name} raised exception after {elapsed_time:.2f}ms: {str(e)}",
                    exc_info=True,
                )
                raise

        return wrapper


class ErrorCodes:
    """Standard error codes used across storefront services."""

    # Auth errors
    AUTH_ERROR = "auth_error"
    NOT_AUTHENTICATED = "not_authenticated"
    PERMISSION_DENIED = "permission_denied"

    # Remote errors
    REMOTE_READ_ERROR = "remote_read_error"
    REMOTE_WRITE_ERROR = "remote_write_error"

    # Cart / checkout errors
    CART_EMPTY = "cart_empty"
    CHECKOUT_IN_PROGRESS = "checkout_in_progress"
    ITEM_NOT_FOUND = "item_not_found"

    # Review errors
    REVIEW_NOT_ALLOWED = "review_not_allowed"

    # Listing errors
    SERVICE_NOT_FOUND = "service_not_found"

    # Chat errors
    CHAT_UNAVAILABLE = "chat_unavailable"
    CHAT_ERROR = "chat_error"

    # Validation errors
    VALIDATION_ERROR = "validation_error"

    # Internal errors
    INTERNAL_ERROR = "internal_error"
