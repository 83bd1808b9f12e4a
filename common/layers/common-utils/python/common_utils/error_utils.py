"""Helpers for consistent error logging and responses."""

from __future__ import annotations

from typing import Any, Dict
import logging

from .lambda_response import lambda_response

__all__ = ["error_response", "log_exception"]


def log_exception(message: str, exc: BaseException, logger: logging.Logger) -> None:
    """Log ``exc`` with ``message`` and its traceback using ``logger``."""

    logger.error("%s: %s", message, exc, exc_info=exc)


def error_response(
    logger: logging.Logger, status: int, message: str, exc: Exception | None = None
) -> Dict[str, Any]:
    """Return ``lambda_response`` with error details after logging ``message``."""

    if exc is not None:
        logger.error("%s: %s", message, exc)
        return lambda_response(status, {"error": message, "detail": str(exc)})
    logger.error("%s", message)
    return lambda_response(status, {"error": message})
