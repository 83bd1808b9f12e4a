"""Interchangeable ways of removing a stored object."""

from __future__ import annotations

from typing import Optional, Protocol

from .api_client import ApiClient
from .config import CleanupSettings, ConfigurationError
from .models import CallResult
from .object_store import S3Storage


class Deleter(Protocol):
    name: str

    def delete(self, bucket: str, key: str) -> CallResult:
        ...


class ApiDeleter:
    """Delegates removal to the management API's delete endpoint."""

    name = "api"

    def __init__(self, api_client: ApiClient, endpoint: str) -> None:
        self.api_client = api_client
        self.endpoint = endpoint

    def delete(self, bucket: str, key: str) -> CallResult:
        return self.api_client.delete_s3_file(
            self.api_client.url_for(self.endpoint), bucket, key
        )


class S3Deleter:
    """Removes the object from the bucket directly."""

    name = "s3"

    def __init__(self, storage: S3Storage) -> None:
        self.storage = storage

    def delete(self, bucket: str, key: str) -> CallResult:
        return self.storage.delete(bucket, key)


def build_deleter(
    settings: CleanupSettings,
    api_client: ApiClient,
    storage: Optional[S3Storage] = None,
) -> Deleter:
    """Return the deleter named by ``settings.delete_strategy``."""
    if settings.delete_strategy == "api":
        return ApiDeleter(api_client, settings.delete_s3_file_endpoint)
    if settings.delete_strategy == "s3":
        return S3Deleter(storage or S3Storage(region_name=settings.aws_region))
    raise ConfigurationError([f"Unknown DELETE_STRATEGY {settings.delete_strategy!r}"])
