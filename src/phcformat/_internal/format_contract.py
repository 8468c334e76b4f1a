"""Format contract constants for PHC strings."""

FIELD_DELIMITER = "$"
PARAM_SEPARATOR = ","
PARAM_ASSIGN = "="
BASE64_PAD = "="

# id + version + params + salt + hash
MAX_FIELDS = 5
# Without a version segment the cap drops by one.
MAX_FIELDS_WITHOUT_VERSION = MAX_FIELDS - 1

ID_PATTERN = r"[a-z0-9-]{1,32}"
PARAM_NAME_PATTERN = r"[a-z0-9-]{1,32}"
PARAM_VALUE_PATTERN = r"[a-zA-Z0-9+.-]+"
BASE64_FIELD_PATTERN = r"[a-zA-Z0-9/+.-]*"
VERSION_PATTERN = r"v=([0-9]+)"
