"""PHC string encoder.

Segments are validated as they are appended, so the first violation
stops encoding:

    $<id>[$v=<version>][$<name>=<value>(,<name>=<value>)*][$<salt>[$<hash>]]
"""

import logging
from collections.abc import Mapping
from typing import Any, List

from phcformat.codes import ViolationCode
from phcformat._internal.format_contract import FIELD_DELIMITER
from .b64 import encode_b64
from .grammar import FormatViolation, int_to_text, require_id
from .params import serialize_params
from .record import PhcRecord


logger = logging.getLogger(__name__)


def _as_fields(record: Any) -> Mapping:
    """Normalize the encoder input to a mapping of present fields."""
    if isinstance(record, PhcRecord):
        return record.model_dump(exclude_none=True)
    if not isinstance(record, Mapping):
        raise FormatViolation("record must be a mapping or PhcRecord", ViolationCode.INVALID_INPUT)
    if len(record) == 0:
        raise FormatViolation("record is empty", ViolationCode.INVALID_INPUT)
    # None is absence, not a value.
    return {key: value for key, value in record.items() if value is not None}


def encode(record: Any) -> str:
    """Serialize a PhcRecord (or a mapping with the same keys) to a PHC string.

    A ``hash`` without a ``salt`` is dropped without validation; the
    decoder, by contrast, can never produce one.

    Raises:
        FormatViolation: on the first field that violates the format.
    """
    fields = _as_fields(record)

    if "id" not in fields:
        raise FormatViolation("id must be a string", ViolationCode.MISSING_ID)
    record_id = fields["id"]
    if not isinstance(record_id, str):
        raise FormatViolation("id must be a string", ViolationCode.INVALID_ID)
    require_id(record_id)

    segments: List[str] = [record_id]

    if "version" in fields:
        version = fields["version"]
        if not isinstance(version, int) or isinstance(version, bool) or version < 0:
            raise FormatViolation(
                "version must be a non-negative integer",
                ViolationCode.INVALID_VERSION,
            )
        segments.append(f"v={int_to_text(version, 'version')}")

    if "params" in fields:
        segments.append(serialize_params(fields["params"]))

    if "salt" in fields:
        segments.append(encode_b64(fields["salt"], "salt"))
        if "hash" in fields:
            segments.append(encode_b64(fields["hash"], "hash"))
    elif "hash" in fields:
        logger.debug("Dropping hash for id %r: no salt present", record_id)

    return "".join(FIELD_DELIMITER + segment for segment in segments)
