"""
ABI document model: named, visibility-flagged inputs plus ordered outputs.

`public=True` means the input is disclosed to the verifier; `public=False`
keeps it private to the prover. The Abi owns its inputs/outputs outright and
has no reference back to the program it was derived from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Sequence, Tuple, Union

from ..compiler.signature import Signature
from ..errors import AbiTypeError
from .types import AbiType, is_abi_type, is_valid_name

__all__ = ["AbiInput", "AbiOutput", "Abi", "derive_abi"]

log = logging.getLogger(__name__)

AbiOutput = AbiType


@dataclass(frozen=True)
class AbiInput:
    name: str
    public: bool
    type: AbiType

    def __post_init__(self) -> None:
        if not is_valid_name(self.name):
            raise AbiTypeError("input name must be a valid Unicode string")
        if not isinstance(self.public, bool):
            raise AbiTypeError(f"input {self.name!r}: public must be a bool")
        if not is_abi_type(self.type):
            raise AbiTypeError(f"input {self.name!r} must have a schema type, got {self.type!r}")


@dataclass(frozen=True)
class Abi:
    inputs: Tuple[AbiInput, ...] = ()
    outputs: Tuple[AbiOutput, ...] = ()

    def __post_init__(self) -> None:
        inputs = tuple(self.inputs)
        outputs = tuple(self.outputs)
        for i in inputs:
            if not isinstance(i, AbiInput):
                raise AbiTypeError(f"Abi inputs must be AbiInput, got {i!r}")
        for o in outputs:
            if not is_abi_type(o):
                raise AbiTypeError(f"Abi outputs must be schema types, got {o!r}")
        object.__setattr__(self, "inputs", inputs)
        object.__setattr__(self, "outputs", outputs)

    def signature(self) -> Signature:
        """Project to the bare (inputs, outputs) type lists, dropping names and visibility."""
        return Signature(inputs=tuple(i.type for i in self.inputs), outputs=self.outputs)

    @property
    def public_inputs(self) -> Tuple[AbiInput, ...]:
        return tuple(i for i in self.inputs if i.public)

    @property
    def private_inputs(self) -> Tuple[AbiInput, ...]:
        return tuple(i for i in self.inputs if not i.public)

    # --- derivation / (de)serialization shortcuts ---------------------------

    @classmethod
    def from_function(cls, fn: Any) -> "Abi":
        return derive_abi(fn)

    def to_dict(self) -> dict:
        from .encoding import encode_abi

        return encode_abi(self)

    def to_json(self, *, pretty: bool = False) -> str:
        from .encoding import dumps

        return dumps(self, pretty=pretty)

    @classmethod
    def from_dict(cls, doc: Mapping[str, Any]) -> "Abi":
        from .decoding import decode_abi

        return decode_abi(doc)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "Abi":
        from .decoding import loads

        return loads(text)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Abi":
        from .decoding import load

        return load(path)

    def check_arguments(self, values: Sequence[Any]) -> List[Any]:
        """Check JSON-shaped witness arguments against this ABI's input types."""
        from .arguments import check_arguments

        return check_arguments(self.signature(), values)


def derive_abi(fn: Any) -> Abi:
    """
    Build the Abi of an entry function.

    `fn` needs `.parameters` (each with `.name`, `.private` and `.type`) and
    `.signature.outputs`. One AbiInput per parameter in declaration order,
    copied verbatim; outputs are the declared output types in order.
    """
    inputs = tuple(
        AbiInput(name=p.name, public=not p.private, type=p.type) for p in fn.parameters
    )
    outputs = tuple(fn.signature.outputs)
    log.debug(
        "derived abi for %s: %d inputs (%d public), %d outputs",
        getattr(fn, "name", "<entry>"),
        len(inputs),
        sum(1 for i in inputs if i.public),
        len(outputs),
    )
    return Abi(inputs=inputs, outputs=outputs)
