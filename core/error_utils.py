"""Standardized error handling utilities for consistent logging and exception management.

This module provides utilities to create consistent error handling patterns across
the codebase.
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn, Type

from core.errors import AppError


def log_and_reraise(logger: logging.Logger, exception: Exception, operation_name: str, **context: Any) -> NoReturn:
    """Log an exception with structured context and re-raise it.

    Must be called from inside an ``except`` block.

    Args:
        logger: Logger to use for error logging
        exception: The original exception that occurred
        operation_name: Human-readable name of the operation that failed
        **context: Additional context fields for structured logging

    Raises:
        The original exception after logging
    """
    logger.error(f"{operation_name} failed", extra={
        "operation": operation_name,
        "exception_type": type(exception).__name__,
        "exception_message": str(exception),
        **context
    })
    raise exception


def log_and_raise_domain_error(
    logger: logging.Logger,
    exception: Exception,
    domain_exception_class: Type[AppError],
    operation_name: str,
    custom_message: str | None = None,
    **context: Any
) -> NoReturn:
    """Log an exception and raise the appropriate domain exception.

    Args:
        logger: Logger to use for error logging
        exception: The original exception that occurred
        domain_exception_class: Domain exception class to raise
        operation_name: Human-readable name of the operation that failed
        custom_message: Custom message for the domain exception (defaults to operation_name)
        **context: Additional context fields for structured logging

    Raises:
        An instance of domain_exception_class with appropriate message and cause
    """
    logger.error(f"{operation_name} failed", extra={
        "operation": operation_name,
        "original_exception": type(exception).__name__,
        "exception_message": str(exception),
        **context
    })

    message = custom_message or f"{operation_name} failed: {exception}"
    raise domain_exception_class(message) from exception


def log_validation_failure(
    logger: logging.Logger,
    error: Exception,
    operation_name: str,
    **context: Any
) -> None:
    """Log a rejected user input at warning level."""
    logger.warning(f"{operation_name} rejected input", extra={
        "operation": operation_name,
        "field": getattr(error, "field", None),
        "reason": str(error),
        **context
    })


def log_operation_success(
    logger: logging.Logger,
    operation_name: str,
    **context: Any
) -> None:
    """Log successful completion of an operation with structured context.

    Args:
        logger: Logger to use for success logging
        operation_name: Human-readable name of the operation that succeeded
        **context: Additional context fields for structured logging
    """
    logger.info(f"{operation_name} completed successfully", extra={
        "operation": operation_name,
        "status": "success",
        **context
    })
