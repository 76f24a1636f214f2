"""
Structural checking of JSON witness arguments against a Signature.

Accepted JSON shapes per type:
- field:  decimal string ("42") or non-negative integer, below the field modulus
- bool:   true / false
- uN:     "0x"-prefixed hex string of exactly N/4 digits ("0x0000002a" for u32)
- array:  list of exactly `size` values
- struct: object with exactly the member names

Values are normalized (field/uN -> int, struct -> dict in member order) but are
not flattened or encoded into field elements.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import msgspec

from ..compiler.signature import Signature
from ..config import load_config
from ..errors import ArgumentError
from .types import (AbiType, ArrayType, BooleanType, FieldElementType,
                    StructType, UintType)

__all__ = ["check_argument", "check_arguments", "parse_arguments"]

_DECIMAL = re.compile(r"^(0|[1-9][0-9]*)$")
_HEX = re.compile(r"^0x[0-9a-fA-F]+$")


def _check_field(value: Any, path: str, modulus: int) -> int:
    if isinstance(value, bool):
        raise ArgumentError("expected a field element, got a boolean", path)
    if isinstance(value, int):
        n = value
    elif isinstance(value, str):
        if not _DECIMAL.match(value):
            raise ArgumentError(f"expected a decimal field element, got {value!r}", path)
        n = int(value)
    else:
        raise ArgumentError(f"expected a field element, got {type(value).__name__}", path)
    if n < 0 or n >= modulus:
        raise ArgumentError("field element out of range", path)
    return n


def _check_uint(value: Any, ty: UintType, path: str) -> int:
    digits = ty.bitwidth // 4
    if not isinstance(value, str) or not _HEX.match(value):
        raise ArgumentError(f"expected a 0x-prefixed hex {ty.kind}, got {value!r}", path)
    if len(value) - 2 != digits:
        raise ArgumentError(f"{ty.kind} needs exactly {digits} hex digits, got {len(value) - 2}", path)
    return int(value, 16)


def _check(value: Any, ty: AbiType, path: str, modulus: int) -> Any:
    if isinstance(ty, FieldElementType):
        return _check_field(value, path, modulus)
    if isinstance(ty, BooleanType):
        if not isinstance(value, bool):
            raise ArgumentError(f"expected a boolean, got {value!r}", path)
        return value
    if isinstance(ty, UintType):
        return _check_uint(value, ty, path)
    if isinstance(ty, ArrayType):
        if not isinstance(value, list):
            raise ArgumentError(f"expected an array of {ty.size}, got {type(value).__name__}", path)
        if len(value) != ty.size:
            raise ArgumentError(f"expected {ty.size} elements, got {len(value)}", path)
        return [_check(v, ty.element_type, f"{path}[{i}]", modulus) for i, v in enumerate(value)]
    if isinstance(ty, StructType):
        if not isinstance(value, Mapping):
            raise ArgumentError(f"expected struct {ty.name}, got {type(value).__name__}", path)
        names = [m.name for m in ty.members]
        extra = [k for k in value if k not in names]
        if extra:
            raise ArgumentError(f"unexpected member {extra[0]!r} for struct {ty.name}", path)
        out: Dict[str, Any] = {}
        for m in ty.members:
            if m.name not in value:
                raise ArgumentError(f"missing member {m.name!r} of struct {ty.name}", path)
            out[m.name] = _check(value[m.name], m.type, f"{path}.{m.name}", modulus)
        return out
    raise ArgumentError(f"unsupported type {ty!r}", path)


def check_argument(value: Any, ty: AbiType, *, path: str = "$", modulus: Optional[int] = None) -> Any:
    if modulus is None:
        modulus = load_config().field_modulus
    return _check(value, ty, path, modulus)


def check_arguments(signature: Signature, values: Sequence[Any], *, modulus: Optional[int] = None) -> List[Any]:
    """Check `values` (one per input) against `signature.inputs`; returns normalized values."""
    if modulus is None:
        modulus = load_config().field_modulus
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise ArgumentError("arguments must be a JSON array", "$")
    if len(values) != len(signature.inputs):
        raise ArgumentError(
            f"expected {len(signature.inputs)} arguments, got {len(values)}", "$"
        )
    return [_check(v, t, f"$[{i}]", modulus) for i, (v, t) in enumerate(zip(values, signature.inputs))]


def parse_arguments(text: Union[str, bytes], signature: Signature, *, modulus: Optional[int] = None) -> List[Any]:
    try:
        values = msgspec.json.decode(text)
    except msgspec.DecodeError as e:
        raise ArgumentError(f"invalid JSON: {e}", "$") from e
    except UnicodeError as e:
        raise ArgumentError(f"arguments are not valid UTF-8 text: {e}", "$") from e
    return check_arguments(signature, values, modulus=modulus)
