"""phcformat: encoder and decoder for the PHC string format."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("phc-format")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from phcformat.api import encode, decode, check, CheckResult
from phcformat.codes import ViolationCode
from phcformat.kernel.grammar import FormatViolation
from phcformat.kernel.record import PhcRecord

__all__ = [
    "__version__",
    "encode",
    "decode",
    "check",
    "CheckResult",
    "PhcRecord",
    "FormatViolation",
    "ViolationCode",
]
