"""Unpadded standard-alphabet base64 for PHC salt and hash segments."""

import base64
import binascii

from phcformat.codes import ViolationCode
from phcformat._internal.format_contract import BASE64_PAD
from .grammar import FormatViolation


BINARY_TYPES = (bytes, bytearray, memoryview)


def is_binary(value: object) -> bool:
    return isinstance(value, BINARY_TYPES)


def encode_b64(data, field: str = "data") -> str:
    """Encode a bytes-like object as base64 with padding stripped."""
    if not is_binary(data):
        raise FormatViolation(
            f"{field} must be a bytes-like object (bytes, bytearray or memoryview)",
            ViolationCode.INVALID_BINARY,
        )
    return base64.b64encode(bytes(data)).decode("ascii").rstrip(BASE64_PAD)


def decode_b64(text: str, field: str = "data") -> bytes:
    """Decode a base64 segment, tolerating missing padding.

    Characters outside the standard alphabet are rejected rather than
    silently discarded.
    """
    padded = text + BASE64_PAD * (-len(text) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise FormatViolation(
            f"{field} is not valid base64: {e}",
            ViolationCode.INVALID_BASE64,
        ) from e
