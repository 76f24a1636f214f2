from __future__ import annotations

"""
zkabi.errors — exception hierarchy shared by every zkabi module.

All errors derive from AbiError so callers can catch the whole family at once.
Decode/argument errors carry a `path` (JSONPath-like, rooted at "$") pointing at
the offending node of the document, rendered as "<message> @ <path>".
"""

from typing import Optional

__all__ = [
    "AbiError",
    "AbiTypeError",
    "AbiDecodeError",
    "EntryPointError",
    "ArgumentError",
]


class AbiError(Exception):
    """Base class for zkabi errors."""


class AbiTypeError(AbiError, TypeError):
    """Raised when a schema type is constructed with invalid parameters."""


class _LocatedError(AbiError):
    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        if path is not None:
            msg = f"{message} @ {path}"
        else:
            msg = message
        super().__init__(msg)


class AbiDecodeError(_LocatedError, ValueError):
    """Raised when an ABI document (or one of its type documents) is malformed."""


class ArgumentError(_LocatedError, ValueError):
    """Raised when witness arguments do not match a signature."""


class EntryPointError(AbiError, LookupError):
    """Raised when a typed program has no usable entry function."""
