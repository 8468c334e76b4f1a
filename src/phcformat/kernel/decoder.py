"""PHC string decoder.

Fields are positional and several optional ones share a permissive
alphabet, so recovery is an ordered sequence of checks:

1. the first segment is the id;
2. a ``v=<digits>`` segment right after it is the version;
3. trailing base64-shaped segments are hash and salt (or salt alone);
4. whatever remains last is the parameter segment;
5. anything left over is unrecognized.

Reordering these steps changes which strings are accepted.
"""

from typing import Any, Dict, List

from phcformat.codes import ViolationCode
from phcformat._internal.format_contract import (
    FIELD_DELIMITER,
    MAX_FIELDS,
    MAX_FIELDS_WITHOUT_VERSION,
)
from .b64 import decode_b64
from .grammar import FormatViolation, is_valid_base64_field, is_valid_version, parse_version, require_id
from .params import deserialize_params
from .record import PhcRecord


def _max_fields(parts: List[str]) -> int:
    """Field cap: five when segment 1 is version-shaped, four otherwise."""
    if len(parts) > 1 and is_valid_version(parts[1]):
        return MAX_FIELDS
    return MAX_FIELDS_WITHOUT_VERSION


def decode(phc: Any) -> PhcRecord:
    """Parse a PHC string into a PhcRecord.

    Parameter values that are canonical integers are returned as int.

    Raises:
        FormatViolation: on the first structural or grammar violation.
    """
    if not isinstance(phc, str) or phc == "":
        raise FormatViolation("PHC string must be a non-empty string", ViolationCode.INVALID_INPUT)
    if not phc.startswith(FIELD_DELIMITER):
        raise FormatViolation(
            f"PHC string must start with '{FIELD_DELIMITER}'",
            ViolationCode.INVALID_INPUT,
        )

    # Drop the empty segment before the leading delimiter
    parts = phc.split(FIELD_DELIMITER)[1:]
    if len(parts) < 1:
        raise FormatViolation("PHC string must contain at least an id", ViolationCode.MISSING_ID)

    max_fields = _max_fields(parts)
    if len(parts) > max_fields:
        raise FormatViolation(
            f"PHC string contains too many fields: {len(parts)}/{max_fields}",
            ViolationCode.TOO_MANY_FIELDS,
        )

    record_id, fields = parts[0], parts[1:]
    require_id(record_id)

    result: Dict[str, Any] = {"id": record_id}

    if fields and is_valid_version(fields[0]):
        result["version"] = parse_version(fields.pop(0))

    if fields and is_valid_base64_field(fields[-1]):
        if len(fields) > 1 and is_valid_base64_field(fields[-2]):
            result["hash"] = decode_b64(fields.pop(), "hash")
        result["salt"] = decode_b64(fields.pop(), "salt")

    if fields:
        result["params"] = deserialize_params(fields.pop())

    if fields:
        raise FormatViolation(
            f"PHC string contains unrecognized fields: {','.join(fields)}",
            ViolationCode.UNRECOGNIZED_FIELDS,
        )

    return PhcRecord(**result)
