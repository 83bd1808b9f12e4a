"""HTTP client for the file management API."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from common_utils import configure_logger

from .models import ApiResponseEnvelope, CallResult, CallStatus, CandidateList

logger = configure_logger(__name__)


def _require(value: str, name: str) -> None:
    if not value or not value.strip():
        raise ValueError(f"{name} must not be empty")


class ApiClient:
    """Thin wrapper over ``httpx.Client`` with bearer-token auth.

    Every call reports its outcome as a :class:`CallResult`; bad status codes,
    transport failures and undecodable bodies are logged and never raised.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: Optional[float] = None,
    ) -> None:
        _require(base_url, "base_url")
        self.base_url = base_url
        kwargs: dict[str, Any] = {
            "headers": {"Authorization": f"Bearer {token}"},
            "transport": transport,
        }
        if timeout is not None:
            kwargs["timeout"] = timeout
        self._client = httpx.Client(**kwargs)

    def url_for(self, endpoint: str) -> str:
        """Join the base URL and a relative endpoint path."""
        return f"{self.base_url}{endpoint}"

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def get_files_to_delete(self, endpoint: str) -> CandidateList:
        """Fetch the names of files that are due for deletion."""
        _require(endpoint, "endpoint")
        logger.info("Calling API at endpoint: %s", endpoint)
        try:
            resp = self._client.get(endpoint)
        except httpx.HTTPError as exc:
            logger.error("HTTP request error while fetching files to delete: %s", exc)
            return CandidateList(CallStatus.TRANSPORT_ERROR, reason=str(exc))
        except Exception as exc:
            logger.exception("An unexpected error occurred while fetching files to delete")
            return CandidateList(CallStatus.UNEXPECTED_ERROR, reason=str(exc))

        if not resp.is_success:
            logger.warning(
                "API call failed. Status code: %s, reason: %s",
                resp.status_code,
                resp.reason_phrase,
            )
            return CandidateList(
                CallStatus.HTTP_ERROR,
                reason=resp.reason_phrase,
                status_code=resp.status_code,
            )

        logger.debug("API response content: %s", resp.text)
        try:
            envelope = ApiResponseEnvelope.from_dict(resp.json())
        except ValueError as exc:
            logger.error("Could not decode files-to-delete response: %s", exc)
            return CandidateList(
                CallStatus.DECODE_ERROR, reason=str(exc), status_code=resp.status_code
            )
        except Exception as exc:
            logger.exception("An unexpected error occurred while reading files to delete")
            return CandidateList(
                CallStatus.UNEXPECTED_ERROR, reason=str(exc), status_code=resp.status_code
            )

        files = envelope.files
        if files is None:
            logger.warning("No data returned from API.")
            return CandidateList(CallStatus.OK, status_code=resp.status_code)
        if envelope.results and envelope.results.message:
            logger.info("API message: %s", envelope.results.message)
        return CandidateList(CallStatus.OK, status_code=resp.status_code, files=files)

    def delete_s3_file(self, endpoint: str, bucket_name: str, key_name: str) -> CallResult:
        """Ask the API to remove ``key_name`` from ``bucket_name``."""
        _require(endpoint, "endpoint")
        _require(bucket_name, "bucket_name")
        _require(key_name, "key_name")
        logger.info(
            "Calling API to delete S3 file. Endpoint: %s, bucket: %s, key: %s",
            endpoint,
            bucket_name,
            key_name,
        )
        result = self._post(endpoint, {"bucketName": bucket_name, "keyName": key_name})
        if result:
            logger.info("Successfully deleted S3 file: %s from bucket: %s", key_name, bucket_name)
        else:
            logger.warning("Failed to delete S3 file %s: %s", key_name, result.reason)
        return result

    def mark_file_as_deleted(self, endpoint: str, file_to_delete: str) -> CallResult:
        """Record in the system of record that ``file_to_delete`` is gone."""
        _require(endpoint, "endpoint")
        _require(file_to_delete, "file_to_delete")
        logger.info(
            "Calling API to mark file as deleted. Endpoint: %s, file: %s",
            endpoint,
            file_to_delete,
        )
        result = self._post(endpoint, {"fileToDelete": file_to_delete})
        if result:
            logger.info("Successfully marked file as deleted: %s", file_to_delete)
        else:
            logger.warning("Failed to mark file as deleted %s: %s", file_to_delete, result.reason)
        return result

    def _post(self, endpoint: str, payload: dict[str, str]) -> CallResult:
        try:
            resp = self._client.post(endpoint, json=payload)
        except httpx.HTTPError as exc:
            logger.error("HTTP request error calling %s: %s", endpoint, exc)
            return CallResult(CallStatus.TRANSPORT_ERROR, reason=str(exc))
        except Exception as exc:
            logger.exception("An unexpected error occurred calling %s", endpoint)
            return CallResult(CallStatus.UNEXPECTED_ERROR, reason=str(exc))
        if resp.is_success:
            return CallResult.success(resp.status_code)
        return CallResult(
            CallStatus.HTTP_ERROR,
            reason=f"{resp.status_code} {resp.reason_phrase}".strip(),
            status_code=resp.status_code,
        )
