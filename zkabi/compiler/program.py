"""
program.py — typed program model handed over by the compiler front end.

Only what ABI derivation needs is modelled: a program is a set of modules keyed
by module id, each holding typed functions keyed by name; `main` names the
module that holds the entry function. Parameters carry a name, a resolved
schema type and a `private` flag (public parameters are disclosed to the
verifier, private ones stay with the prover).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from ..abi.document import Abi, derive_abi
from ..abi.types import AbiType, BOOL, FIELD, is_abi_type, is_valid_name
from ..config import load_config
from ..errors import AbiTypeError, EntryPointError
from .signature import Signature


@dataclass(frozen=True)
class Parameter:
    name: str
    type: AbiType
    private: bool = True

    def __post_init__(self) -> None:
        if not is_valid_name(self.name) or not self.name:
            raise AbiTypeError("parameter name must be a non-empty string")
        if not is_abi_type(self.type):
            raise AbiTypeError(f"parameter {self.name!r} must have a schema type, got {self.type!r}")

    @property
    def public(self) -> bool:
        return not self.private

    @classmethod
    def field_element(cls, name: str, *, private: bool = True) -> "Parameter":
        return cls(name, FIELD, private)

    @classmethod
    def boolean(cls, name: str, *, private: bool = True) -> "Parameter":
        return cls(name, BOOL, private)


@dataclass(frozen=True)
class TypedFunction:
    name: str
    parameters: Tuple[Parameter, ...] = ()
    signature: Signature = field(default_factory=Signature)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", tuple(self.parameters))

    @property
    def outputs(self) -> Tuple[AbiType, ...]:
        return self.signature.outputs


@dataclass(frozen=True)
class TypedModule:
    functions: Mapping[str, TypedFunction] = field(default_factory=dict)


@dataclass(frozen=True)
class TypedProgram:
    main: str
    modules: Mapping[str, TypedModule] = field(default_factory=dict)

    def entry_function(self, entry_point: Optional[str] = None) -> TypedFunction:
        """Locate the entry function (default name: ZKABI_ENTRY_POINT) in the main module."""
        name = entry_point or load_config().entry_point
        module = self.modules.get(self.main)
        if module is None:
            raise EntryPointError(f"main module {self.main!r} not found in program")
        fn = module.functions.get(name)
        if fn is None:
            raise EntryPointError(f"entry function {name!r} not found in module {self.main!r}")
        return fn

    def abi(self, entry_point: Optional[str] = None) -> Abi:
        return derive_abi(self.entry_function(entry_point))


__all__ = ["Parameter", "TypedFunction", "TypedModule", "TypedProgram"]
