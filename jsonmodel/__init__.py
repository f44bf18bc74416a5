"""Typed JSON scalar values with coercing accessors and configurable serialization."""

__version__ = "0.18.99"

__all__ = [
    "arraylist",
    "debug",
    "flags",
    "integers",
    "scalars",
    "serialize",
    "strings",
    "types",
    "values",
    "version",
]