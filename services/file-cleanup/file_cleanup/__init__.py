"""Scheduled deletion of expired files reported by the management API."""

from .config import CleanupSettings, ConfigurationError, load_settings
from .keys import build_storage_key
from .models import CallResult, CallStatus, CleanupReport, RunOutcome
from .service import FileDeletionService, build_service

__version__ = "1.0.0"

__all__ = [
    "CleanupSettings",
    "ConfigurationError",
    "load_settings",
    "build_storage_key",
    "CallResult",
    "CallStatus",
    "CleanupReport",
    "RunOutcome",
    "FileDeletionService",
    "build_service",
]
