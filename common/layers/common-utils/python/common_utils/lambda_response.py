"""Utilities for building Lambda-style HTTP responses."""

from typing import Any, Dict

__all__ = ["lambda_response"]


def lambda_response(status: int, body: Any) -> Dict[str, Any]:
    """Return a standard Lambda response dictionary.

    Objects exposing ``to_dict`` (run reports, call results) are converted so
    the response stays JSON serialisable.
    """
    if hasattr(body, "to_dict"):
        body = body.to_dict()
    return {"statusCode": status, "body": body}
