"""Public API for the phcformat package.

High-level entry points. Callers should import from here (or the package
root) rather than from phcformat.kernel.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel

from phcformat.codes import ViolationCode
from phcformat.kernel.decoder import decode
from phcformat.kernel.encoder import encode
from phcformat.kernel.grammar import FormatViolation
from phcformat.kernel.record import PhcRecord


logger = logging.getLogger(__name__)


class CheckResult(BaseModel):
    """Result of checking a PHC string without raising."""
    ok: bool
    code: Optional[ViolationCode] = None  # Set when ok is False
    message: Optional[str] = None
    id: Optional[str] = None  # Algorithm id when the string decoded


def check(phc: Any) -> CheckResult:
    """Check whether ``phc`` is an acceptable PHC string.

    Format violations are reported in the result instead of raised.
    """
    try:
        record = decode(phc)
    except FormatViolation as e:
        logger.debug("PHC string rejected (%s): %s", e.code.value, e.message)
        return CheckResult(ok=False, code=e.code, message=e.message)
    return CheckResult(ok=True, id=record.id)


__all__ = [
    "encode",
    "decode",
    "check",
    "CheckResult",
    "PhcRecord",
    "FormatViolation",
    "ViolationCode",
]
