"""
Document encoder for zkabi ABIs (see decoding.py for the inverse).

Every type document carries a "type" discriminant. Leaf kinds carry nothing else:

    {"type": "field"}            {"type": "bool"}            {"type": "u32"}

Compound kinds carry a "components" payload with the nested type flattened into
it rather than wrapped again:

    array:  {"type": "array",  "components": {"size": 2, "type": "field"}}
    struct: {"type": "struct", "components": {"name": "Foo",
                                              "members": [{"name": "a", "type": "field"}]}}

An AbiInput document is a type document with "name" and "public" in front.
Key order is fixed, so dumps() output is deterministic byte-for-byte.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..config import load_config
from ..errors import AbiTypeError
from .document import Abi, AbiInput
from .types import (ArrayType, BooleanType, FieldElementType, StructType,
                    UintType)

__all__ = [
    "encode_type",
    "encode_input",
    "encode_abi",
    "dumps",
    "dump",
]


def encode_type(ty: Any) -> Dict[str, Any]:
    """Encode a schema type into its document (discriminant + optional components)."""
    if isinstance(ty, (FieldElementType, BooleanType, UintType)):
        return {"type": ty.kind}
    if isinstance(ty, ArrayType):
        components: Dict[str, Any] = {"size": ty.size}
        components.update(encode_type(ty.element_type))
        return {"type": ty.kind, "components": components}
    if isinstance(ty, StructType):
        members = []
        for m in ty.members:
            doc: Dict[str, Any] = {"name": m.name}
            doc.update(encode_type(m.type))
            members.append(doc)
        return {"type": ty.kind, "components": {"name": ty.name, "members": members}}
    raise AbiTypeError(f"cannot encode non-schema type {ty!r}")


def encode_input(inp: AbiInput) -> Dict[str, Any]:
    doc: Dict[str, Any] = {"name": inp.name, "public": inp.public}
    doc.update(encode_type(inp.type))
    return doc


def encode_abi(abi: Abi) -> Dict[str, Any]:
    """Encode an Abi into its top-level document {"inputs": [...], "outputs": [...]}."""
    if not isinstance(abi, Abi):
        raise AbiTypeError(f"expected Abi, got {type(abi).__name__}")
    try:
        return {
            "inputs": [encode_input(i) for i in abi.inputs],
            "outputs": [encode_type(o) for o in abi.outputs],
        }
    except RecursionError as e:
        raise AbiTypeError("type nesting too deep to encode") from e


def dumps(abi: Abi, *, pretty: bool = False, indent: Optional[int] = None) -> str:
    """
    Serialize an Abi to JSON text.

    Compact form has no whitespace: '{"inputs":[],"outputs":[]}'. Pretty form
    uses `indent` (default: ZKABI_INDENT) and '": "' separators.
    """
    doc = encode_abi(abi)
    if not pretty and indent is None:
        return json.dumps(doc, separators=(",", ":"), ensure_ascii=False)
    if indent is None:
        indent = load_config().indent
    return json.dumps(doc, indent=indent, ensure_ascii=False)


def dump(abi: Abi, path: Union[str, Path], *, pretty: bool = True) -> Path:
    """Write the encoded Abi to `path` (UTF-8, trailing newline). Returns the path."""
    p = Path(path)
    p.write_text(dumps(abi, pretty=pretty) + "\n", encoding="utf-8")
    return p
