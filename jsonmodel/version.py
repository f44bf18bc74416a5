"""Library version information."""

__all__ = [
    "MAJOR_VERSION",
    "MINOR_VERSION",
    "MICRO_VERSION",
    "VERSION",
    "VERSION_NUM",
    "version",
    "version_num",
]

MAJOR_VERSION = 0
MINOR_VERSION = 18
MICRO_VERSION = 99
VERSION_NUM = (MAJOR_VERSION << 16) | (MINOR_VERSION << 8) | MICRO_VERSION
VERSION = "0.18.99"


def version() -> str:
    """Return the version as a dotted string."""
    return VERSION


def version_num() -> int:
    """Return the version packed as major<<16 | minor<<8 | micro."""
    return VERSION_NUM