"""Boolean and floating point JSON values."""

from __future__ import annotations

import math
from typing import Optional

from .flags import ToStringFlag
from .serialize import COLOR_FG_MAGENTA, COLOR_RESET, format_double
from .types import JsonType
from .values import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    JsonObject,
    userdata_to_json_string,
)

__all__ = ["JsonBoolean", "JsonDouble", "double_to_json_string"]


class JsonBoolean(JsonObject):
    """A JSON true or false."""

    JSON_TYPE = JsonType.BOOLEAN

    def __init__(self, value: bool = False) -> None:
        super().__init__()
        self._value = bool(value)

    @property
    def value(self) -> bool:
        """The boolean held."""
        return self._value

    @value.setter
    def value(self, new_value: bool) -> None:
        self._value = bool(new_value)

    def _serialize_default(self, level: int, flags: int) -> str:
        text = "true" if self._value else "false"
        if flags & ToStringFlag.COLOR:
            return COLOR_FG_MAGENTA + text + COLOR_RESET
        return text

    def as_bool(self) -> bool:
        return self._value

    def as_int32(self) -> int:
        return int(self._value)

    def as_int64(self) -> int:
        return int(self._value)

    def as_uint64(self) -> int:
        return int(self._value)

    def as_float(self) -> float:
        return float(self._value)

    def _equals_same_type(self, other: JsonObject) -> bool:
        return self._value == other.value


def _text_serializer(obj: JsonObject, level: int, flags: int) -> str:
    # Distinct from userdata_to_json_string so a new value can drop it.
    return userdata_to_json_string(obj, level, flags)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


class JsonDouble(JsonObject):
    """A JSON floating point number.

    When ``text`` is given it is emitted verbatim instead of a formatted
    value, until the value is changed.
    """

    JSON_TYPE = JsonType.DOUBLE

    def __init__(self, value: float = 0.0, text: Optional[str] = None) -> None:
        super().__init__()
        self._value = float(value)
        if text is not None:
            self.set_serializer(_text_serializer, str(text))

    @property
    def value(self) -> float:
        """The number held."""
        return self._value

    @value.setter
    def value(self, new_value: float) -> None:
        self._value = float(new_value)
        if self._serializer is _text_serializer:
            self.set_serializer(None)

    @property
    def text(self) -> Optional[str]:
        """The verbatim representation, if one is in use."""
        if self._serializer is _text_serializer:
            return self._userdata
        return None

    def _serialize_default(self, level: int, flags: int) -> str:
        return format_double(self._value, flags, None)

    def as_bool(self) -> bool:
        return self._value != 0

    def as_int32(self) -> int:
        d = self._value
        if math.isnan(d):
            return INT32_MIN
        if d < INT32_MIN:
            return INT32_MIN
        if d > INT32_MAX:
            return INT32_MAX
        return int(d)

    def as_int64(self) -> int:
        d = self._value
        if math.isnan(d):
            return INT64_MIN
        if d > float(INT64_MAX):
            return INT64_MAX
        if d < float(INT64_MIN):
            return INT64_MIN
        return _clamp(int(d), INT64_MIN, INT64_MAX)

    def as_uint64(self) -> int:
        d = self._value
        if math.isnan(d):
            return 0
        if d > float(UINT64_MAX):
            return UINT64_MAX
        if d < 0:
            return 0
        return _clamp(int(d), 0, UINT64_MAX)

    def as_float(self) -> float:
        return self._value

    def _equals_same_type(self, other: JsonObject) -> bool:
        return self._value == other.value


def double_to_json_string(obj: JsonObject, level: int = 0, flags: int = 0) -> str:
    """A serializer for doubles that takes its printf format from the userdata."""
    return format_double(obj.as_float(), flags, obj.userdata)