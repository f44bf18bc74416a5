"""Flags that control serialization, key insertion and option scope."""

from enum import IntEnum, IntFlag

__all__ = ["ToStringFlag", "AddFlag", "OptionScope", "DEF_HASH_ENTRIES"]

DEF_HASH_ENTRIES = 16


class ToStringFlag(IntFlag):
    """Formatting options for turning a value into JSON text."""

    PLAIN = 0
    SPACED = 1 << 0
    PRETTY = 1 << 1
    NOZERO = 1 << 2
    PRETTY_TAB = 1 << 3
    NOSLASHESCAPE = 1 << 4
    COLOR = 1 << 5


class AddFlag(IntFlag):
    """Options for adding a key to an object."""

    NONE = 0
    KEY_IS_NEW = 1 << 1
    CONSTANT_KEY = 1 << 2
    KEY_IS_CONSTANT = CONSTANT_KEY


class OptionScope(IntEnum):
    """Whether an option applies to every thread or only the current one."""

    GLOBAL = 0
    THREAD = 1