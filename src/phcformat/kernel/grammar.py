"""Field grammar for PHC strings.

Every pattern is matched against the whole candidate string. Digits are
ASCII-only, and a trailing newline never sneaks past an anchor.

The base64 field pattern deliberately overlaps with the parameter value
alphabet; the decoder resolves that overlap by consumption order, not
here.
"""

import re
from typing import Optional

from phcformat.codes import ViolationCode
from phcformat._internal.format_contract import (
    ID_PATTERN,
    PARAM_NAME_PATTERN,
    PARAM_VALUE_PATTERN,
    BASE64_FIELD_PATTERN,
    VERSION_PATTERN,
)


ID_REGEX = re.compile(ID_PATTERN)
PARAM_NAME_REGEX = re.compile(PARAM_NAME_PATTERN)
PARAM_VALUE_REGEX = re.compile(PARAM_VALUE_PATTERN)
BASE64_FIELD_REGEX = re.compile(BASE64_FIELD_PATTERN)
VERSION_REGEX = re.compile(VERSION_PATTERN)


class FormatViolation(ValueError):
    """Raised when a PHC string or record violates the format."""

    def __init__(self, message: str, code: ViolationCode = ViolationCode.INVALID_INPUT):
        super().__init__(message)
        self.message = message
        self.code = code

    def __reduce__(self):
        return (self.__class__, (self.message, self.code))


def _matches(regex: re.Pattern, candidate: object) -> bool:
    return isinstance(candidate, str) and regex.fullmatch(candidate) is not None


def is_valid_id(candidate: object) -> bool:
    """1-32 chars of lowercase letters, digits and '-'."""
    return _matches(ID_REGEX, candidate)


def is_valid_param_name(candidate: object) -> bool:
    return _matches(PARAM_NAME_REGEX, candidate)


def is_valid_param_value(candidate: object) -> bool:
    """Letters, digits, '+', '.' and '-'; no '/' and no '='."""
    return _matches(PARAM_VALUE_REGEX, candidate)


def is_valid_base64_field(candidate: object) -> bool:
    """Zero or more chars of letters, digits, '/', '+', '.' and '-'."""
    return _matches(BASE64_FIELD_REGEX, candidate)


def is_valid_version(candidate: object) -> bool:
    return _matches(VERSION_REGEX, candidate)


def parse_version(segment: str) -> Optional[int]:
    """Return the version number of a ``v=<digits>`` segment, else None."""
    match = VERSION_REGEX.fullmatch(segment) if isinstance(segment, str) else None
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError as e:
        # Digit runs past the interpreter's int conversion limit
        raise FormatViolation(
            f"version is too large: {e}",
            ViolationCode.INVALID_VERSION,
        ) from e


def int_to_text(value: int, field: str) -> str:
    """Render an int, reporting ints too large to convert as violations."""
    try:
        return str(value)
    except ValueError as e:
        code = ViolationCode.INVALID_VERSION if field == "version" else ViolationCode.INVALID_PARAM_VALUE
        raise FormatViolation(f"{field} is too large: {e}", code) from e


def require_id(candidate: object) -> str:
    """Validate an algorithm id, raising FormatViolation on failure."""
    if not is_valid_id(candidate):
        raise FormatViolation(f"id must satisfy {ID_PATTERN}", ViolationCode.INVALID_ID)
    return candidate


def require_param_name(candidate: object) -> str:
    if not is_valid_param_name(candidate):
        raise FormatViolation(
            f"params names must satisfy {PARAM_NAME_PATTERN}",
            ViolationCode.INVALID_PARAM_NAME,
        )
    return candidate


def require_param_value(candidate: object):
    """Validate a parameter value.

    Integers are always legal (bools are not integers here). Strings must
    satisfy the value pattern. Anything else is a violation.
    """
    if isinstance(candidate, int) and not isinstance(candidate, bool):
        return candidate
    if not is_valid_param_value(candidate):
        raise FormatViolation(
            f"params values must satisfy {PARAM_VALUE_PATTERN}",
            ViolationCode.INVALID_PARAM_VALUE,
        )
    return candidate
