"""Diagnostic output: debug, info and error messages.

Messages use printf-style formatting. Debug messages are shown only when
debugging is switched on; they go to standard output. Errors and info go to
standard error. With syslog switched on, and where the platform provides it,
all three go to the system log instead.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass

try:
    import syslog as _syslog
except ImportError:  # not available on every platform
    _syslog = None

__all__ = ["set_debug", "get_debug", "set_syslog", "debug", "error", "info"]


@dataclass
class _Settings:
    debug: int = 0
    use_syslog: int = 0


_settings = _Settings()


def set_debug(debug: int) -> None:
    """Switch debug output on (non-zero) or off (zero)."""
    _settings.debug = debug


def get_debug() -> int:
    """Return the current debug setting."""
    return _settings.debug


def set_syslog(use_syslog: int) -> None:
    """Send messages to the system log (non-zero) or to the console (zero)."""
    _settings.use_syslog = use_syslog


def _format(msg: str, args: tuple) -> str:
    return msg % args if args else msg


def _to_syslog(priority_name: str, text: str) -> bool:
    if not _settings.use_syslog or _syslog is None:
        return False
    _syslog.syslog(getattr(_syslog, priority_name), text)
    return True


def debug(msg: str, *args) -> None:
    """Emit a debug message if debugging is on."""
    if not _settings.debug:
        return
    text = _format(msg, args)
    if not _to_syslog("LOG_DEBUG", text):
        sys.stdout.write(text)


def error(msg: str, *args) -> None:
    """Emit an error message."""
    text = _format(msg, args)
    if not _to_syslog("LOG_ERR", text):
        sys.stderr.write(text)


def info(msg: str, *args) -> None:
    """Emit an informational message."""
    text = _format(msg, args)
    if not _to_syslog("LOG_INFO", text):
        sys.stderr.write(text)