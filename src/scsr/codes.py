"""Code constants for scsr.

These constants prevent stringly-typed error codes and size statuses
and ensure client code uses the correct values.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes surfaced by a report run."""

    # Fatal to the run
    DIRECTORY_MISSING = "DIRECTORY_MISSING"

    # Isolated to one artifact (logged, skipped)
    ARTIFACT_PARSE_ERROR = "ARTIFACT_PARSE_ERROR"


class SizeStatus(str, Enum):
    """Deployed bytecode size classification."""

    OK = "OK"
    NEAR_LIMIT = "NEAR_LIMIT"
    OVER_LIMIT = "OVER_LIMIT"
