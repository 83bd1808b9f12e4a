"""Dataclasses describing API payloads, call results and cleanup reports."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class CallStatus(str, Enum):
    """Outcome of a single remote call."""

    OK = "ok"
    HTTP_ERROR = "http_error"
    TRANSPORT_ERROR = "transport_error"
    DECODE_ERROR = "decode_error"
    UNEXPECTED_ERROR = "unexpected_error"
    SKIPPED = "skipped"


class RunOutcome(str, Enum):
    """How a cleanup run ended."""

    NOTHING_TO_DO = "nothing_to_do"
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass
class CallResult:
    """Result of a delete or mark-deleted call."""

    status: CallStatus
    reason: str = ""
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status is CallStatus.OK

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, status_code: Optional[int] = None) -> "CallResult":
        return cls(CallStatus.OK, status_code=status_code)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"status": self.status.value}
        if self.reason:
            data["reason"] = self.reason
        if self.status_code is not None:
            data["status_code"] = self.status_code
        return data


@dataclass
class CandidateList(CallResult):
    """Result of the list-candidates call together with the file names."""

    files: List[str] = field(default_factory=list)


def _lookup(data: Dict[str, Any], name: str) -> Any:
    """Case-insensitive key lookup used for the API envelope."""
    if name in data:
        return data[name]
    lowered = name.lower()
    for key, value in data.items():
        if isinstance(key, str) and key.lower() == lowered:
            return value
    return None


@dataclass
class ApiResults:
    """Nested ``results`` object of the list-candidates response."""

    data: Optional[List[str]] = None
    message: Optional[str] = None
    response_code: bool = False


@dataclass
class ApiResponseEnvelope:
    """Wrapper returned by the list-candidates endpoint."""

    results: Optional[ApiResults] = None

    @classmethod
    def from_dict(cls, payload: Any) -> "ApiResponseEnvelope":
        if not isinstance(payload, dict):
            raise ValueError("Response body must be a JSON object")
        raw = _lookup(payload, "results")
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise ValueError("'results' must be a JSON object")
        data = _lookup(raw, "Data")
        if data is not None:
            if not isinstance(data, list):
                raise ValueError("'Data' must be a list")
            if any(item is not None and not isinstance(item, str) for item in data):
                raise ValueError("'Data' entries must be strings")
            data = [item for item in data if item is not None]
        return cls(
            results=ApiResults(
                data=data,
                message=_lookup(raw, "Message"),
                response_code=bool(_lookup(raw, "ResponseCode")),
            )
        )

    @property
    def files(self) -> Optional[List[str]]:
        return self.results.data if self.results else None


@dataclass
class FileMetadata:
    """Where a candidate file lives and when it was processed."""

    file_name: str
    bucket_name: str
    key: str
    event_date: datetime.datetime = field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc)
    )


@dataclass
class ItemOutcome:
    """Everything that happened to one candidate during a run."""

    file_name: str
    metadata: Optional[FileMetadata] = None
    deleted: Optional[CallResult] = None
    marked: Optional[CallResult] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and bool(self.deleted) and bool(self.marked)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"file_name": self.file_name}
        if self.metadata is not None:
            data["bucket_name"] = self.metadata.bucket_name
            data["key"] = self.metadata.key
            data["event_date"] = self.metadata.event_date.isoformat()
        if self.deleted is not None:
            data["deleted"] = self.deleted.to_dict()
        if self.marked is not None:
            data["marked"] = self.marked.to_dict()
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass
class CleanupReport:
    """Summary of a single cleanup run."""

    outcome: RunOutcome = RunOutcome.NOTHING_TO_DO
    started_at: datetime.datetime = field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc)
    )
    finished_at: Optional[datetime.datetime] = None
    items: List[ItemOutcome] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def candidates(self) -> int:
        return len(self.items)

    @property
    def deleted(self) -> int:
        return sum(1 for item in self.items if item.deleted)

    @property
    def marked(self) -> int:
        return sum(1 for item in self.items if item.marked)

    @property
    def failed(self) -> int:
        return sum(1 for item in self.items if not item.succeeded)

    def finish(self, outcome: RunOutcome) -> "CleanupReport":
        self.outcome = outcome
        self.finished_at = datetime.datetime.now(datetime.timezone.utc)
        return self

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "outcome": self.outcome.value,
            "started_at": self.started_at.isoformat(),
            "finished_at": self.finished_at.isoformat() if self.finished_at else None,
            "candidates": self.candidates,
            "deleted": self.deleted,
            "marked": self.marked,
            "failed": self.failed,
            "items": [item.to_dict() for item in self.items],
        }
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass
class StoredObject:
    """Key and size of an object in the bucket."""

    key: str
    size: int


__all__ = [
    "CallStatus",
    "RunOutcome",
    "CallResult",
    "CandidateList",
    "ApiResults",
    "ApiResponseEnvelope",
    "FileMetadata",
    "ItemOutcome",
    "CleanupReport",
    "StoredObject",
]
