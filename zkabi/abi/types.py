"""
ABI type schema for zkabi.

The schema is a closed set of structural types a program input or output may have:
  - field            a single arithmetic-field element
  - bool             a single boolean
  - u8/u16/u32/u64   a fixed-width unsigned integer
  - array            fixed-length homogeneous sequence of any schema type
  - struct           named, ordered list of (member_name, member_type)

Types here are plain immutable values; the textual document form lives in
zkabi.abi.encoding / zkabi.abi.decoding.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, Union

from ..errors import AbiTypeError

__all__ = [
    "TypeKind",
    "UINT_BITWIDTHS",
    "FieldElementType",
    "BooleanType",
    "UintType",
    "ArrayType",
    "StructMember",
    "StructType",
    "AbiType",
    "FIELD",
    "BOOL",
    "is_abi_type",
    "is_valid_name",
]


class TypeKind(str, Enum):
    """Discriminant values of encoded type documents."""

    FIELD = "field"
    BOOL = "bool"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    ARRAY = "array"
    STRUCT = "struct"


UINT_BITWIDTHS = (8, 16, 32, 64)


# ──────────────────────────────────────────────────────────────────────────────
# Scalars
# ──────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class FieldElementType:
    @property
    def kind(self) -> str:
        return TypeKind.FIELD.value

    def primitive_count(self) -> int:
        return 1

    def __str__(self) -> str:
        return "field"


@dataclass(frozen=True)
class BooleanType:
    @property
    def kind(self) -> str:
        return TypeKind.BOOL.value

    def primitive_count(self) -> int:
        return 1

    def __str__(self) -> str:
        return "bool"


@dataclass(frozen=True)
class UintType:
    bitwidth: int = 32

    def __post_init__(self) -> None:
        if isinstance(self.bitwidth, bool) or self.bitwidth not in UINT_BITWIDTHS:
            raise AbiTypeError(f"uint bitwidth must be one of {UINT_BITWIDTHS}, got {self.bitwidth!r}")

    @property
    def kind(self) -> str:
        return f"u{self.bitwidth}"

    def primitive_count(self) -> int:
        return 1

    def __str__(self) -> str:
        return self.kind


# ──────────────────────────────────────────────────────────────────────────────
# Compounds
# ──────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ArrayType:
    element_type: "AbiType"
    size: int

    def __post_init__(self) -> None:
        if not is_abi_type(self.element_type):
            raise AbiTypeError(f"array element must be a schema type, got {self.element_type!r}")
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise AbiTypeError("array size must be an int")
        if self.size < 0:
            raise AbiTypeError("array size must be >= 0")

    @property
    def kind(self) -> str:
        return TypeKind.ARRAY.value

    def primitive_count(self) -> int:
        return self.size * self.element_type.primitive_count()

    def __str__(self) -> str:
        return f"{self.element_type}[{self.size}]"


@dataclass(frozen=True)
class StructMember:
    name: str
    type: "AbiType"

    def __post_init__(self) -> None:
        if not is_valid_name(self.name):
            raise AbiTypeError("struct member name must be a valid Unicode string")
        if not is_abi_type(self.type):
            raise AbiTypeError(f"struct member {self.name!r} must have a schema type, got {self.type!r}")


@dataclass(frozen=True)
class StructType:
    name: str
    members: Tuple[StructMember, ...] = ()

    def __post_init__(self) -> None:
        if not is_valid_name(self.name):
            raise AbiTypeError("struct name must be a valid Unicode string")
        members = tuple(self.members)
        for m in members:
            if not isinstance(m, StructMember):
                raise AbiTypeError(f"struct {self.name!r} members must be StructMember, got {m!r}")
        object.__setattr__(self, "members", members)

    @classmethod
    def of(cls, name: str, members: Iterable[Tuple[str, "AbiType"]]) -> "StructType":
        """Build a struct from (member_name, member_type) pairs."""
        return cls(name, tuple(StructMember(n, t) for n, t in members))

    @property
    def kind(self) -> str:
        return TypeKind.STRUCT.value

    def member(self, name: str) -> StructMember:
        for m in self.members:
            if m.name == name:
                return m
        raise KeyError(name)

    def primitive_count(self) -> int:
        return sum(m.type.primitive_count() for m in self.members)

    def __str__(self) -> str:
        return self.name


AbiType = Union[FieldElementType, BooleanType, UintType, ArrayType, StructType]

FIELD = FieldElementType()
BOOL = BooleanType()

_TYPE_CLASSES = (FieldElementType, BooleanType, UintType, ArrayType, StructType)


def is_abi_type(obj: object) -> bool:
    return isinstance(obj, _TYPE_CLASSES)


def is_valid_name(obj: object) -> bool:
    """Names must be strings that survive UTF-8 encoding (no lone surrogates)."""
    if not isinstance(obj, str):
        return False
    try:
        obj.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
