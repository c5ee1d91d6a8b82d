"""Validation code constants for jsonfeed_model validation reports.

These constants prevent stringly-typed issue codes and ensure
client code uses the correct validation codes.
"""

from enum import Enum


class ValidationCode(str, Enum):
    """Validation issue codes."""

    # Target / declared revision
    UNSUPPORTED_TARGET_VERSION = "UNSUPPORTED_TARGET_VERSION"
    UNKNOWN_DECLARED_VERSION = "UNKNOWN_DECLARED_VERSION"
    INCOMPATIBLE_DECLARED_VERSION = "INCOMPATIBLE_DECLARED_VERSION"

    # Structure
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    MISSING_ONE_OF = "MISSING_ONE_OF"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    UNKNOWN_KEY = "UNKNOWN_KEY"
