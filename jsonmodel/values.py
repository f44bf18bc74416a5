"""The common base of JSON values: type, serialization, userdata and lifetime."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Optional

from .flags import ToStringFlag
from .types import JsonError, JsonType

__all__ = [
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "UINT64_MAX",
    "JsonObject",
    "get_type",
    "is_type",
    "to_json_string",
    "userdata_to_json_string",
    "equal",
]

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1

Serializer = Callable[["JsonObject", int, int], str]
UserDelete = Callable[["JsonObject", Any], None]


class JsonObject(ABC):
    """A reference-counted JSON value.

    Subclasses supply the type tag, the default serialization and the
    conversions that make sense for them; the base class answers with the
    neutral value for everything else.
    """

    JSON_TYPE: ClassVar[JsonType]

    def __init__(self) -> None:
        self._ref_count = 1
        self._serializer: Optional[Serializer] = None
        self._userdata: Any = None
        self._user_delete: Optional[UserDelete] = None

    # -- type -------------------------------------------------------------

    @property
    def json_type(self) -> JsonType:
        """The type tag of this value."""
        return self.JSON_TYPE

    # -- serialization ----------------------------------------------------

    def to_json_string(self, flags: int = ToStringFlag.SPACED) -> str:
        """Return this value as JSON text."""
        return self.serialize(0, flags)

    def serialize(self, level: int = 0, flags: int = ToStringFlag.SPACED) -> str:
        """Return JSON text for this value at the given nesting level."""
        self._check_alive()
        if self._serializer is not None:
            return self._serializer(self, level, flags)
        return self._serialize_default(level, flags)

    @abstractmethod
    def _serialize_default(self, level: int, flags: int) -> str:
        """The standard JSON text for this kind of value."""

    @property
    def serializer(self) -> Optional[Serializer]:
        """The custom serializer, or None when the default one is used."""
        return self._serializer

    # -- userdata ---------------------------------------------------------

    @property
    def userdata(self) -> Any:
        """The opaque data attached with set_userdata() or set_serializer()."""
        return self._userdata

    def set_userdata(self, userdata: Any, user_delete: Optional[UserDelete] = None) -> None:
        """Attach userdata, first handing any previous userdata to its deleter."""
        if self._user_delete is not None:
            self._user_delete(self, self._userdata)
        self._userdata = userdata
        self._user_delete = user_delete

    def set_serializer(
        self,
        to_string_func: Optional[Serializer],
        userdata: Any = None,
        user_delete: Optional[UserDelete] = None,
    ) -> None:
        """Use a custom serializer; None restores the default one.

        The userdata and its deleter are set in either case.
        """
        self.set_userdata(userdata, user_delete)
        self._serializer = to_string_func

    # -- lifetime ---------------------------------------------------------

    @property
    def ref_count(self) -> int:
        """The number of owners this value currently has."""
        return self._ref_count

    def _check_alive(self) -> None:
        if self._ref_count <= 0:
            raise JsonError("value has already been freed")

    def retain(self) -> "JsonObject":
        """Take another reference to this value and return it."""
        self._check_alive()
        self._ref_count += 1
        return self

    def release(self) -> bool:
        """Drop a reference; return True if that freed the value."""
        self._check_alive()
        self._ref_count -= 1
        if self._ref_count > 0:
            return False
        if self._user_delete is not None:
            self._user_delete(self, self._userdata)
        self._dispose()
        return True

    def _dispose(self) -> None:
        """Release whatever the value owns; containers free their members."""

    # -- conversions ------------------------------------------------------

    def as_bool(self) -> bool:
        """The value as a boolean; False for types without one."""
        return False

    def as_int32(self) -> int:
        """The value as a 32-bit integer, clamped; 0 for types without one."""
        return 0

    def as_int64(self) -> int:
        """The value as a 64-bit integer, clamped; 0 for types without one."""
        return 0

    def as_uint64(self) -> int:
        """The value as an unsigned 64-bit integer, clamped; 0 otherwise."""
        return 0

    def as_float(self) -> float:
        """The value as a float; 0.0 for types without one."""
        return 0.0

    def as_str(self) -> str:
        """The string contents for strings, otherwise the JSON text."""
        return self.to_json_string(ToStringFlag.SPACED)

    def string_length(self) -> int:
        """Length of the string contents; 0 for non-strings."""
        return 0

    # -- comparison -------------------------------------------------------

    def equals(self, other: Optional["JsonObject"]) -> bool:
        """Deep equality: same type and equal contents."""
        if self is other:
            return True
        if other is None:
            return False
        if self.json_type != other.json_type:
            return False
        return self._equals_same_type(other)

    def _equals_same_type(self, other: "JsonObject") -> bool:
        return False


def get_type(obj: Optional[JsonObject]) -> JsonType:
    """Return the type of a value; None stands for JSON null."""
    if obj is None:
        return JsonType.NULL
    return obj.json_type


def is_type(obj: Optional[JsonObject], json_type: JsonType) -> bool:
    """Tell whether a value (None meaning null) is of the given type."""
    return get_type(obj) == json_type


def to_json_string(obj: Optional[JsonObject], flags: int = ToStringFlag.SPACED) -> str:
    """Return JSON text for a value; None gives "null"."""
    if obj is None:
        return "null"
    return obj.to_json_string(flags)


def userdata_to_json_string(obj: JsonObject, level: int = 0, flags: int = 0) -> str:
    """A serializer that emits the object's userdata string as-is."""
    data = obj.userdata
    if not isinstance(data, str):
        raise JsonError("userdata serializer needs a string as userdata")
    return data


def equal(a: Optional[JsonObject], b: Optional[JsonObject]) -> bool:
    """Deep equality of two values, where None is JSON null."""
    if a is b:
        return True
    if a is None or b is None:
        return False
    return a.equals(b)