"""
zkabi — public interface (ABI) of a compiled program's entry function.

This module exposes a small, stable façade:

- derive_abi(entry_function) -> Abi
    Project a typed entry function (parameters + signature) into an Abi.
- Abi.signature() -> Signature
    Bare input/output types, names and visibility dropped.
- dumps(abi, pretty=False) / loads(text)
    Canonical JSON document encoding and its strict inverse.
- check_arguments(signature, values)
    Structural check of JSON witness arguments against a signature.

See zkabi.abi for the full surface and zkabi.cli.abi_tool for the `zkabi` CLI.
"""

from __future__ import annotations

from .abi import (BOOL, FIELD, Abi, AbiInput, AbiOutput, AbiType, ArrayType,
                  BooleanType, FieldElementType, StructMember, StructType,
                  TypeKind, UintType, check_arguments, decode_abi,
                  decode_type, derive_abi, dump, dumps, encode_abi,
                  encode_type, load, loads, parse_arguments)
from .compiler.program import (Parameter, TypedFunction, TypedModule,
                               TypedProgram)
from .compiler.signature import Signature
from .errors import (AbiDecodeError, AbiError, AbiTypeError, ArgumentError,
                     EntryPointError)
from .version import __version__


def version() -> str:
    """Return the zkabi version string."""
    return __version__


__all__ = [
    "__version__",
    "version",
    # schema
    "TypeKind",
    "AbiType",
    "FieldElementType",
    "BooleanType",
    "UintType",
    "ArrayType",
    "StructMember",
    "StructType",
    "FIELD",
    "BOOL",
    # document
    "Abi",
    "AbiInput",
    "AbiOutput",
    "Signature",
    "derive_abi",
    # codec
    "encode_type",
    "encode_abi",
    "dumps",
    "dump",
    "decode_type",
    "decode_abi",
    "loads",
    "load",
    # arguments
    "check_arguments",
    "parse_arguments",
    # program model
    "Parameter",
    "TypedFunction",
    "TypedModule",
    "TypedProgram",
    # errors
    "AbiError",
    "AbiTypeError",
    "AbiDecodeError",
    "ArgumentError",
    "EntryPointError",
]
