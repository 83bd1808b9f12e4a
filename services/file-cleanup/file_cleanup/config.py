"""Cleanup settings resolved from Parameter Store and environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

from common_utils import configure_logger
from common_utils.get_ssm import get_config
from common_utils.get_secret import get_secret, secret_name_for

logger = configure_logger(__name__)

DEFAULT_INTERVAL_HOURS = 24
DELETE_STRATEGIES = ("api", "s3")


class ConfigurationError(Exception):
    """Raised when required settings are missing or invalid."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


@dataclass(frozen=True)
class CleanupSettings:
    """Everything a cleanup run needs, read once at startup."""

    api_base_url: str
    api_token: str
    bucket_name: str
    base_path: str
    root_path: str
    get_files_to_delete_endpoint: str
    mark_file_as_deleted_endpoint: str
    delete_s3_file_endpoint: str = ""
    cleanup_interval_hours: float = DEFAULT_INTERVAL_HOURS
    delete_strategy: str = "api"
    aws_region: Optional[str] = None


def _setting(name: str, decrypt: bool = False) -> Optional[str]:
    value = get_config(name, decrypt=decrypt) or os.environ.get(name)
    if value is None:
        return None
    return value.strip() or None


def _api_token() -> Optional[str]:
    if secret_name_for("API_TOKEN"):
        return get_secret("API_TOKEN")
    return _setting("API_TOKEN", decrypt=True)


def load_settings() -> CleanupSettings:
    """Build :class:`CleanupSettings` or raise :class:`ConfigurationError`.

    Every problem is collected before raising so a single failed start
    reports all missing values at once.
    """
    problems: List[str] = []

    def required(name: str) -> str:
        value = _setting(name)
        if not value:
            problems.append(f"{name} is missing")
            return ""
        return value

    api_base_url = required("API_BASE_URL")
    token = _api_token()
    if not token:
        problems.append("API_TOKEN is missing")
    bucket_name = required("S3_BUCKET_NAME")
    base_path = required("S3_BASE_PATH")
    root_path = required("S3_ROOT_PATH")
    list_endpoint = required("GET_FILES_TO_DELETE_ENDPOINT")
    mark_endpoint = required("MARK_FILE_AS_DELETED_ENDPOINT")

    strategy = (_setting("DELETE_STRATEGY") or "api").lower()
    if strategy not in DELETE_STRATEGIES:
        problems.append(
            f"DELETE_STRATEGY must be one of {', '.join(DELETE_STRATEGIES)}, got {strategy!r}"
        )
    if strategy == "api":
        delete_endpoint = required("DELETE_S3_FILE_ENDPOINT")
    else:
        delete_endpoint = _setting("DELETE_S3_FILE_ENDPOINT") or ""

    raw_interval = _setting("CLEANUP_INTERVAL_HOURS")
    interval: float = DEFAULT_INTERVAL_HOURS
    if raw_interval:
        try:
            interval = float(raw_interval)
        except ValueError:
            problems.append(f"CLEANUP_INTERVAL_HOURS must be a number, got {raw_interval!r}")
        else:
            if interval <= 0:
                problems.append("CLEANUP_INTERVAL_HOURS must be positive")

    if problems:
        for problem in problems:
            logger.error("Configuration error: %s", problem)
        raise ConfigurationError(problems)

    return CleanupSettings(
        api_base_url=api_base_url,
        api_token=token or "",
        bucket_name=bucket_name,
        base_path=base_path,
        root_path=root_path,
        get_files_to_delete_endpoint=list_endpoint,
        mark_file_as_deleted_endpoint=mark_endpoint,
        delete_s3_file_endpoint=delete_endpoint,
        cleanup_interval_hours=interval,
        delete_strategy=strategy,
        aws_region=_setting("AWS_REGION"),
    )
