"""Core type tags and the package's exception type."""

from enum import IntEnum

__all__ = ["JsonType", "JsonError"]


class JsonType(IntEnum):
    """The kind of value a JSON node holds."""

    NULL = 0
    BOOLEAN = 1
    DOUBLE = 2
    INT = 3
    OBJECT = 4
    ARRAY = 5
    STRING = 6

    @property
    def type_name(self) -> str:
        """Lower-case name of the type, as used in diagnostics."""
        return self.name.lower()


class JsonError(Exception):
    """Raised when an operation on a JSON value cannot be carried out."""