"""JSON integers, held as signed or unsigned 64-bit values."""

from __future__ import annotations

from .types import JsonType
from .values import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    JsonObject,
)

__all__ = ["JsonInt"]


def _checked(value: int, unsigned: bool) -> int:
    value = int(value)
    low, high = (0, UINT64_MAX) if unsigned else (INT64_MIN, INT64_MAX)
    if not low <= value <= high:
        kind = "unsigned" if unsigned else "signed"
        raise ValueError(f"{value} does not fit in a {kind} 64-bit integer")
    return value


class JsonInt(JsonObject):
    """A JSON integer in either the signed or the unsigned 64-bit range."""

    JSON_TYPE = JsonType.INT

    def __init__(self, value: int = 0, unsigned: bool = False) -> None:
        super().__init__()
        self._unsigned = bool(unsigned)
        self._value = _checked(value, self._unsigned)

    @property
    def value(self) -> int:
        """The integer held."""
        return self._value

    @property
    def is_unsigned(self) -> bool:
        """True when the value is held as an unsigned 64-bit integer."""
        return self._unsigned

    def assign(self, value: int, unsigned: bool = False) -> None:
        """Replace the value, as signed or unsigned 64-bit."""
        unsigned = bool(unsigned)
        self._value = _checked(value, unsigned)
        self._unsigned = unsigned

    def increment(self, delta: int) -> None:
        """Add a signed 64-bit delta.

        A signed value that would overflow becomes unsigned; one that would
        underflow sticks at the signed minimum. An unsigned value saturates at
        the unsigned maximum and turns signed when it would drop below zero.
        """
        delta = _checked(delta, False)
        v = self._value
        if not self._unsigned:
            if delta > 0 and v > INT64_MAX - delta:
                self._value = v + delta
                self._unsigned = True
            elif delta < 0 and v < INT64_MIN - delta:
                self._value = INT64_MIN
            else:
                self._value = v + delta
            return
        if delta > 0 and v > UINT64_MAX - delta:
            self._value = UINT64_MAX
        elif delta < 0 and v < -delta:
            self._value = v + delta
            self._unsigned = False
        else:
            self._value = v + delta

    def _serialize_default(self, level: int, flags: int) -> str:
        return str(self._value)

    def as_bool(self) -> bool:
        return self._value != 0

    def as_int32(self) -> int:
        return max(INT32_MIN, min(INT32_MAX, self._value))

    def as_int64(self) -> int:
        return min(self._value, INT64_MAX)

    def as_uint64(self) -> int:
        return max(self._value, 0)

    def as_float(self) -> float:
        return float(self._value)

    def _equals_same_type(self, other: JsonObject) -> bool:
        return isinstance(other, JsonInt) and self._value == other.value