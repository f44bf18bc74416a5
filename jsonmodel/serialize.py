"""Text-level helpers for producing JSON: escaping, indentation, doubles."""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass

from .flags import OptionScope, ToStringFlag
from .types import JsonError

__all__ = [
    "NUMBER_CHARS",
    "HEX_CHARS",
    "COLOR_RESET",
    "COLOR_FG_GREEN",
    "COLOR_FG_BLUE",
    "COLOR_FG_MAGENTA",
    "escape_str",
    "indent",
    "format_double",
    "set_serialization_double_format",
    "get_serialization_double_format",
]

NUMBER_CHARS = "0123456789.+-eE"
HEX_CHARS = "0123456789abcdefABCDEF"

COLOR_RESET = "\033[0m"
COLOR_FG_GREEN = "\033[0;32m"
COLOR_FG_BLUE = "\033[0;34m"
COLOR_FG_MAGENTA = "\033[0;35m"

_STD_DOUBLE_FORMAT = "%.17g"
_BUF_SIZE = 128
_DIGITS = "0123456789"

_ESCAPES = {
    "\b": "\\b",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\f": "\\f",
    '"': '\\"',
    "\\": "\\\\",
    "/": "\\/",
}


@dataclass
class _GlobalOptions:
    double_format: str | None = None


_global = _GlobalOptions()
_thread = threading.local()


def _escape_char(ch: str, flags: int) -> str:
    if ch == "/" and flags & ToStringFlag.NOSLASHESCAPE:
        return ch
    escaped = _ESCAPES.get(ch)
    if escaped is not None:
        return escaped
    code = ord(ch)
    if code < 0x20:
        return "\\u00" + HEX_CHARS[code >> 4] + HEX_CHARS[code & 0xF]
    return ch


def escape_str(s: str, flags: int = 0) -> str:
    """Escape a string for use between JSON double quotes."""
    return "".join(_escape_char(ch, flags) for ch in s)


def indent(level: int, flags: int) -> str:
    """Return the indentation for a nesting level, if pretty output is on."""
    if not flags & ToStringFlag.PRETTY:
        return ""
    if flags & ToStringFlag.PRETTY_TAB:
        return "\t" * level
    return " " * (level * 2)


def set_serialization_double_format(double_format: str | None, scope: int) -> None:
    """Set the printf-style format used for doubles, globally or per thread.

    Setting the global format also drops the calling thread's own format.
    Passing None restores the default.
    """
    if scope == OptionScope.GLOBAL:
        _thread.double_format = None
        _global.double_format = double_format
    elif scope == OptionScope.THREAD:
        _thread.double_format = double_format
    else:
        raise JsonError(
            f"set_serialization_double_format: invalid global_or_thread value: {scope}"
        )


def get_serialization_double_format() -> str | None:
    """Return the format in effect for this thread, or None for the default."""
    local = getattr(_thread, "double_format", None)
    if local is not None:
        return local
    return _global.double_format


def _looks_numeric(text: str) -> bool:
    if text[:1] and text[0] in _DIGITS:
        return True
    return len(text) > 1 and text[0] == "-" and text[1] in _DIGITS


def format_double(value: float, flags: int = 0, fmt: str | None = None) -> str:
    """Render a double as JSON text.

    NaN and the infinities become NaN, Infinity and -Infinity. Otherwise the
    given format, the configured one, or "%.17g" is used, and ".0" is added
    where the result would not look like a floating point number.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    if fmt is None:
        fmt = get_serialization_double_format() or _STD_DOUBLE_FORMAT
    try:
        text = fmt % value
    except (TypeError, ValueError) as exc:
        raise JsonError(f"cannot format double with {fmt!r}: {exc}") from exc
    size = len(text)

    point = text.find(",")
    if point >= 0:
        text = text[:point] + "." + text[point + 1:]
    else:
        point = text.find(".")

    drops_decimals = ".0f" not in fmt
    if (
        size < _BUF_SIZE - 2
        and _looks_numeric(text)
        and point < 0
        and "e" not in text
        and drops_decimals
    ):
        text += ".0"

    if point >= 0 and flags & ToStringFlag.NOZERO:
        last = point + 1
        for pos in range(point + 1, len(text)):
            if text[pos] != "0":
                last = pos
        text = text[: last + 1] if last < len(text) else text[:last]

    return text[: _BUF_SIZE - 1]