# Module Metadata
__author__ = "Koushik Sinha"
__version__ = "1.1.0"
__modified_by__ = "Koushik Sinha"

from .logging_utils import configure_logger
from .get_ssm import (
    get_values_from_ssm,
    get_environment_prefix,
    parse_s3_uri,
    get_config,
)
from .get_secret import get_secret
from .lambda_response import lambda_response
from .error_utils import log_exception, error_response
from .s3_utils import iter_s3_objects

__all__ = [
    "get_values_from_ssm",
    "get_environment_prefix",
    "parse_s3_uri",
    "get_config",
    "get_secret",
    "configure_logger",
    "lambda_response",
    "log_exception",
    "error_response",
    "iter_s3_objects",
]
