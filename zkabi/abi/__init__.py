"""
zkabi.abi
=========

Public ABI surface of a compiled program's entry function.

This package provides:
  • The closed type schema (field, bool, uN, array, struct).
  • The Abi document (named, visibility-flagged inputs + ordered outputs) and
    its projection to a bare Signature.
  • The JSON document encoder/decoder.
  • Structural checking of witness arguments against a signature.

Everything here is pure and deterministic; no module keeps shared state.
"""

from __future__ import annotations

from .arguments import *  # noqa: F401,F403
from .decoding import *  # noqa: F401,F403
from .document import *  # noqa: F401,F403
from .encoding import *  # noqa: F401,F403
from .types import *  # noqa: F401,F403

from .arguments import __all__ as _all_arguments
from .decoding import __all__ as _all_decoding
from .document import __all__ as _all_document
from .encoding import __all__ as _all_encoding
from .types import __all__ as _all_types

__all__ = tuple(
    dict.fromkeys(  # preserve order, dedupe
        (*_all_types, *_all_document, *_all_encoding, *_all_decoding, *_all_arguments)
    )
)
