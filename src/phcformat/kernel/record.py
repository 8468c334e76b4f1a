"""PhcRecord: the structured form of a PHC string."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from phcformat.codes import ViolationCode
from .b64 import BINARY_TYPES, encode_b64
from .grammar import FormatViolation, require_id, require_param_name, require_param_value
from .params import ParamMap


class PhcRecord(BaseModel):
    """Components of a PHC string.

    ``None`` means the field is absent. A hash may only be present
    alongside a salt. Records are immutable values; two records with the
    same contents compare equal and hash alike; params are held in a
    read-only ParamMap.

    Direct construction reports violations as a pydantic ValidationError
    wrapping the FormatViolation (see ``errors()[0]["ctx"]["error"]``);
    encode() and decode() raise FormatViolation itself.
    """
    id: str  # Algorithm identifier, e.g. "argon2id"
    version: Optional[int] = Field(None, ge=0)  # e.g. 19 for "v=19"
    params: Optional[ParamMap] = None  # insertion-ordered, read-only
    salt: Optional[bytes] = None
    hash: Optional[bytes] = None

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    @field_validator('id')
    @classmethod
    def validate_id(cls, v: str) -> str:
        return require_id(v)

    @field_validator('params')
    @classmethod
    def validate_params(cls, v: Optional[ParamMap]) -> Optional[ParamMap]:
        """Params, when present, must be non-empty and satisfy the grammar."""
        if v is None:
            return v
        if not v:
            raise FormatViolation("params must not be empty", ViolationCode.EMPTY_PARAMS)
        for name, value in v.items():
            require_param_name(name)
            require_param_value(value)
        return v

    @field_validator('salt', 'hash', mode='before')
    @classmethod
    def normalize_binary(cls, v: Any) -> Any:
        """Accept any bytes-like buffer, stored as immutable bytes."""
        if isinstance(v, BINARY_TYPES) and not isinstance(v, bytes):
            return bytes(v)
        return v

    @model_validator(mode='after')
    def check_hash_requires_salt(self) -> "PhcRecord":
        if self.hash is not None and self.salt is None:
            raise FormatViolation(
                "hash may only be present when salt is present",
                ViolationCode.HASH_WITHOUT_SALT,
            )
        return self

    @classmethod
    def from_string(cls, phc: str) -> "PhcRecord":
        """Parse a PHC string (see phcformat.kernel.decoder.decode)."""
        from .decoder import decode
        return decode(phc)

    def to_string(self) -> str:
        """Serialize to a PHC string (see phcformat.kernel.encoder.encode)."""
        from .encoder import encode
        return encode(self)

    def to_json_dict(self) -> Dict[str, Any]:
        """JSON-ready view: absent fields omitted, binary fields as unpadded base64."""
        data: Dict[str, Any] = {"id": self.id}
        if self.version is not None:
            data["version"] = self.version
        if self.params is not None:
            data["params"] = dict(self.params)
        if self.salt is not None:
            data["salt"] = encode_b64(self.salt, "salt")
        if self.hash is not None:
            data["hash"] = encode_b64(self.hash, "hash")
        return data
