"""Violation code constants for phcformat.FormatViolation.

These constants prevent stringly-typed error codes and let client
code branch on the kind of violation without parsing messages.
"""

from enum import Enum


class ViolationCode(str, Enum):
    """Format violation codes."""

    # Top-level input
    INVALID_INPUT = "INVALID_INPUT"
    MISSING_ID = "MISSING_ID"

    # Field grammar
    INVALID_ID = "INVALID_ID"
    INVALID_VERSION = "INVALID_VERSION"
    INVALID_PARAM_NAME = "INVALID_PARAM_NAME"
    INVALID_PARAM_VALUE = "INVALID_PARAM_VALUE"
    INVALID_PARAM_FORMAT = "INVALID_PARAM_FORMAT"
    EMPTY_PARAMS = "EMPTY_PARAMS"

    # Binary fields
    INVALID_BINARY = "INVALID_BINARY"
    INVALID_BASE64 = "INVALID_BASE64"

    # Structure
    TOO_MANY_FIELDS = "TOO_MANY_FIELDS"
    UNRECOGNIZED_FIELDS = "UNRECOGNIZED_FIELDS"
    HASH_WITHOUT_SALT = "HASH_WITHOUT_SALT"
