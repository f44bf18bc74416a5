"""JSON string values and their conversions to numbers."""

from __future__ import annotations

import math
from typing import Optional

from .flags import ToStringFlag
from .serialize import COLOR_FG_GREEN, COLOR_RESET, escape_str
from .types import JsonType
from .values import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    JsonObject,
)

__all__ = ["JsonString"]

_MAX_LENGTH = INT32_MAX - 1
_LEADING_SPACE = " \t\n\v\f\r"


def _parse_integer(text: str) -> Optional[int]:
    body = text.lstrip(_LEADING_SPACE)
    if not body or body[-1] in _LEADING_SPACE:
        return None
    try:
        return int(body, 10)
    except ValueError:
        return None


def _parse_float(text: str) -> float:
    body = text.lstrip(_LEADING_SPACE)
    if not body or body[-1] in _LEADING_SPACE:
        return 0.0
    try:
        result = float(body)
    except ValueError:
        return 0.0
    if math.isinf(result) and "inf" not in body.lower():
        # Out of range for a double.
        return 0.0
    return result


class JsonString(JsonObject):
    """A JSON string."""

    JSON_TYPE = JsonType.STRING

    def __init__(self, value: str = "") -> None:
        super().__init__()
        self._value = self._checked(value)

    @staticmethod
    def _checked(value: str) -> str:
        if not isinstance(value, str):
            raise TypeError(f"string value must be str, not {type(value).__name__}")
        if len(value) >= _MAX_LENGTH:
            raise ValueError("string is too long")
        return value

    @property
    def value(self) -> str:
        """The text held."""
        return self._value

    @value.setter
    def value(self, new_value: str) -> None:
        self._value = self._checked(new_value)

    def __len__(self) -> int:
        return len(self._value)

    def _serialize_default(self, level: int, flags: int) -> str:
        text = '"' + escape_str(self._value, flags) + '"'
        if flags & ToStringFlag.COLOR:
            return COLOR_FG_GREEN + text + COLOR_RESET
        return text

    def as_bool(self) -> bool:
        return len(self._value) != 0

    def as_int32(self) -> int:
        parsed = _parse_integer(self._value)
        if parsed is None:
            return 0
        return max(INT32_MIN, min(INT32_MAX, parsed))

    def as_int64(self) -> int:
        parsed = _parse_integer(self._value)
        if parsed is None:
            return 0
        return max(INT64_MIN, min(INT64_MAX, parsed))

    def as_uint64(self) -> int:
        if self._value.lstrip(_LEADING_SPACE).startswith("-"):
            return 0
        parsed = _parse_integer(self._value)
        if parsed is None:
            return 0
        return min(UINT64_MAX, parsed)

    def as_float(self) -> float:
        return _parse_float(self._value)

    def as_str(self) -> str:
        return self._value

    def string_length(self) -> int:
        return len(self._value)

    def _equals_same_type(self, other: JsonObject) -> bool:
        return isinstance(other, JsonString) and self._value == other.value