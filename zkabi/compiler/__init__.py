"""
zkabi.compiler — the slice of the typed program representation zkabi consumes.

  • signature — bare (inputs, outputs) type signature
  • program   — parameters, typed functions/modules/programs and entry lookup

Submodules import lazily so `zkabi.compiler` can be imported from inside
zkabi.abi without an import cycle.
"""
from __future__ import annotations

from typing import Any

__all__ = [
    # submodules (lazy)
    "signature",
    "program",
    # helpers
    "program_abi",
]

_SUBMODULES = {"signature", "program"}


def __getattr__(name: str) -> Any:  # pragma: no cover - thin dispatch
    if name in _SUBMODULES:
        import importlib
        return importlib.import_module(f"{__name__}.{name}")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover
    return sorted(list(globals().keys()) + sorted(_SUBMODULES))


def program_abi(program: Any, *, entry_point: str | None = None):
    """
    Derive the Abi of a typed program's entry function.

    Raises:
        zkabi.errors.EntryPointError if the entry module/function is missing.
    """
    from .program import TypedProgram  # lazy: avoids abi <-> compiler cycle

    if not isinstance(program, TypedProgram):
        raise TypeError(f"expected TypedProgram, got {type(program).__name__}")
    return program.abi(entry_point=entry_point)
