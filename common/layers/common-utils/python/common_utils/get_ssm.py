"""Shared helpers for retrieving SSM parameters and parsing S3 URIs."""

import logging
import os
from typing import Optional, Tuple
import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

# Simple in-memory cache so a single run doesn't repeatedly hit SSM
_SSM_CACHE: dict[str, str] = {}
_ssm_client = None

PREFIX_ENV = "SSM_PARAMETER_PREFIX"


def _client():
    global _ssm_client
    if _ssm_client is None:
        _ssm_client = boto3.client("ssm")
    return _ssm_client


def get_values_from_ssm(name: str, decrypt: bool = False) -> Optional[str]:
    """Retrieve a parameter value from SSM with optional decryption.

    Returns ``None`` when the parameter does not exist; any other failure is
    logged and re-raised.
    """
    if name in _SSM_CACHE:
        return _SSM_CACHE[name]
    try:
        resp = _client().get_parameter(Name=name, WithDecryption=decrypt)
    except ClientError as exc:
        if exc.response.get("Error", {}).get("Code") == "ParameterNotFound":
            logger.debug("Parameter %s not found", name)
            return None
        logger.error("Error retrieving parameter %s: %s", name, exc)
        raise
    value = resp["Parameter"]["Value"]
    _SSM_CACHE[name] = value
    if decrypt:
        logger.info("Loaded encrypted parameter %s", name)
    else:
        logger.info("Parameter Value for %s: %s", name, value)
    return value


def get_environment_prefix() -> Optional[str]:
    """Return the SSM prefix for the current environment, if one is configured."""
    prefix = (os.environ.get(PREFIX_ENV) or "").strip()
    if not prefix:
        return None
    return prefix.rstrip("/")


def parse_s3_uri(s3_uri: str) -> Tuple[str, str]:
    """Split an ``s3://`` URI into bucket and key."""
    if not s3_uri.startswith("s3://"):
        raise ValueError(f"Invalid S3 URI: {s3_uri}")
    bucket, _, key = s3_uri[5:].partition("/")
    return bucket, key


def get_config(name: str, decrypt: bool = False) -> Optional[str]:
    """Return configuration ``name`` from SSM.

    The value is read under ``get_environment_prefix()``. When no prefix is
    configured Parameter Store is not consulted and ``None`` is returned, so
    callers fall back to environment variables.
    """
    prefix = get_environment_prefix()
    if prefix is None:
        return None
    return get_values_from_ssm(f"{prefix}/{name}", decrypt)
