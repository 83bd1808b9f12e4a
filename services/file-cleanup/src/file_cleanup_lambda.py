"""Scheduled entry point that runs one file cleanup pass."""

from __future__ import annotations

from typing import Any, Dict

from common_utils import configure_logger, error_response, lambda_response
from file_cleanup.config import ConfigurationError, load_settings
from file_cleanup.service import build_service

logger = configure_logger(__name__)


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    logger.info("File cleanup job started")
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        return error_response(logger, 500, "Invalid cleanup configuration", exc)

    service = build_service(settings)
    try:
        report = service.delete_old_files()
    finally:
        service.close()
    logger.info("File cleanup job finished: %s", report.outcome.value)
    return lambda_response(200, report)
