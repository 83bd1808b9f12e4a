"""Utilities for walking S3 listings."""

from typing import Any, Dict, Iterator

__all__ = ["iter_s3_objects"]


def iter_s3_objects(client: Any, bucket: str, prefix: str = "") -> Iterator[Dict[str, Any]]:
    """Yield every object summary in ``bucket`` under ``prefix``.

    Follows ``list_objects_v2`` continuation tokens until the listing is no
    longer truncated. Client errors propagate to the caller.
    """
    token = None
    while True:
        kwargs: Dict[str, Any] = {"Bucket": bucket}
        if prefix:
            kwargs["Prefix"] = prefix
        if token:
            kwargs["ContinuationToken"] = token
        resp = client.list_objects_v2(**kwargs)
        for obj in resp.get("Contents", []):
            yield obj
        if resp.get("IsTruncated"):
            token = resp.get("NextContinuationToken")
        else:
            break
