"""
signature.py — bare function signature: ordered input types and output types.

A Signature is what type-checking consumers need; it carries no parameter
names and no visibility flags (see zkabi.abi.document.Abi.signature()).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..abi.types import AbiType, is_abi_type
from ..errors import AbiTypeError


@dataclass(frozen=True)
class Signature:
    inputs: Tuple[AbiType, ...] = ()
    outputs: Tuple[AbiType, ...] = ()

    def __post_init__(self) -> None:
        inputs = tuple(self.inputs)
        outputs = tuple(self.outputs)
        for t in inputs + outputs:
            if not is_abi_type(t):
                raise AbiTypeError(f"signature entries must be schema types, got {t!r}")
        object.__setattr__(self, "inputs", inputs)
        object.__setattr__(self, "outputs", outputs)

    def primitive_inputs(self) -> int:
        return sum(t.primitive_count() for t in self.inputs)

    def primitive_outputs(self) -> int:
        return sum(t.primitive_count() for t in self.outputs)

    def __str__(self) -> str:
        ins = ", ".join(str(t) for t in self.inputs)
        outs = ", ".join(str(t) for t in self.outputs)
        return f"({ins}) -> ({outs})"


__all__ = ["Signature"]
