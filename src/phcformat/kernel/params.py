"""Parameter segment codec: ``name=value(,name=value)*``."""

import re
from collections.abc import Mapping
from typing import Any, Dict, Union

from pydantic_core import core_schema

from phcformat.codes import ViolationCode
from phcformat._internal.format_contract import PARAM_SEPARATOR, PARAM_ASSIGN
from .grammar import FormatViolation, int_to_text, require_param_name, require_param_value


ParamValue = Union[str, int]

_CANONICAL_INT = re.compile(r"-?(0|[1-9][0-9]*)")


class ParamMap(Mapping):
    """Immutable, insertion-ordered, hashable parameter mapping.

    Compares equal to any mapping with the same items.
    """

    __slots__ = ("_data",)

    def __init__(self, items: Any = ()):
        self._data: Dict[str, ParamValue] = dict(items)

    def __getitem__(self, key: str) -> ParamValue:
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(tuple(self._data.items()))

    def __repr__(self) -> str:
        return f"ParamMap({self._data!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        from_dict = core_schema.no_info_after_validator_function(
            cls, handler.generate_schema(Dict[str, Union[int, str]])
        )
        return core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_dict],
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: dict(v), info_arg=False
            ),
        )


def _promote(value: str) -> ParamValue:
    """Promote a canonical base-10 integer string to int.

    Only strings that print back identically are promoted ("1000" but
    not "007", "-0" or "1e3"), so re-serializing never changes the text.
    """
    if _CANONICAL_INT.fullmatch(value) and value != "-0":
        try:
            return int(value)
        except ValueError:
            # Past the int conversion limit; the text is still a legal value
            return value
    return value


def serialize_params(params: Mapping) -> str:
    """Serialize a non-empty mapping in its iteration order.

    Raises:
        FormatViolation: if params is not a mapping, is empty, or any
            name or value fails the grammar.
    """
    if not isinstance(params, Mapping):
        raise FormatViolation("params must be a mapping", ViolationCode.INVALID_INPUT)
    if len(params) == 0:
        raise FormatViolation("params must not be empty", ViolationCode.EMPTY_PARAMS)

    entries = []
    for name, value in params.items():
        require_param_name(name)
        require_param_value(value)
        if isinstance(value, int):
            value = int_to_text(value, f"params value '{name}'")
        entries.append(f"{name}{PARAM_ASSIGN}{value}")
    return PARAM_SEPARATOR.join(entries)


def deserialize_params(text: str) -> Dict[str, ParamValue]:
    """Parse a parameter segment into an ordered dict.

    Each entry is split on its first '='. Values that are canonical
    integers come back as int; everything else stays a string.
    """
    result: Dict[str, ParamValue] = {}
    for entry in text.split(PARAM_SEPARATOR):
        name, sep, value = entry.partition(PARAM_ASSIGN)
        if not name or not sep:
            raise FormatViolation(
                "params must be in the format name=value",
                ViolationCode.INVALID_PARAM_FORMAT,
            )
        require_param_name(name)
        require_param_value(value)
        result[name] = _promote(value)
    return result
