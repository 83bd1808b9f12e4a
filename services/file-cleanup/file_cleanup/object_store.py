"""Direct access to the S3 bucket holding cleanup candidates."""

from __future__ import annotations

from typing import Any, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from common_utils import configure_logger, iter_s3_objects

from .models import CallResult, CallStatus, StoredObject

logger = configure_logger(__name__)


class S3Storage:
    """Best-effort delete and list operations against S3.

    Failures are logged and reported through the return value; nothing is
    raised to the caller.
    """

    def __init__(self, client: Any = None, region_name: Optional[str] = None) -> None:
        self._client = client
        self._region_name = region_name

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = boto3.client("s3", region_name=self._region_name)
        return self._client

    def delete(self, bucket: str, key: str) -> CallResult:
        logger.info("Attempting to delete file: %s from bucket: %s", key, bucket)
        try:
            self.client.delete_object(Bucket=bucket, Key=key)
        except (BotoCoreError, ClientError) as exc:
            logger.exception("Error deleting file: %s from bucket: %s", key, bucket)
            return CallResult(CallStatus.TRANSPORT_ERROR, reason=str(exc))
        logger.info("Successfully deleted file: %s from bucket: %s", key, bucket)
        return CallResult.success()

    def list(self, bucket: str, prefix: str = "") -> List[StoredObject]:
        logger.info("Listing files in bucket: %s", bucket)
        objects: List[StoredObject] = []
        try:
            for obj in iter_s3_objects(self.client, bucket, prefix):
                stored = StoredObject(key=obj["Key"], size=int(obj.get("Size", 0)))
                logger.info("File: %s, size: %s bytes", stored.key, stored.size)
                objects.append(stored)
        except (BotoCoreError, ClientError):
            logger.exception("Error listing files in bucket: %s", bucket)
            return []
        return objects
