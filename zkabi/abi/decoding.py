"""
Inverse of encoding.py: documents (or JSON text) back into zkabi ABI values.

Decoding is all-or-nothing. Every malformed node raises AbiDecodeError with the
path of the node, e.g.

    unknown type kind 'octagon' (expected one of: field, bool, ...) @ $.outputs[0]

Rules mirrored from the encoder:
- every type document needs a string "type" discriminant of a known kind;
- "array" and "struct" documents need a "components" object;
- array components: non-negative integer "size" plus the element document
  flattened in; struct components: string "name" plus a "members" list whose
  entries are element documents with a string "name" flattened in;
- AbiInput documents: string "name", boolean "public", flattened type document;
- top level: "inputs" and "outputs" lists, both required.

`strict=True` (default from ZKABI_STRICT) additionally rejects unknown keys.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

import msgspec

from ..config import load_config
from ..errors import AbiDecodeError, AbiTypeError
from .document import Abi, AbiInput
from .types import (BOOL, FIELD, AbiType, ArrayType, StructMember, StructType,
                    TypeKind, UintType)

__all__ = [
    "decode_type",
    "decode_input",
    "decode_abi",
    "loads",
    "load",
]

log = logging.getLogger(__name__)

_KNOWN_KINDS = ", ".join(k.value for k in TypeKind)


# ──────────────────────────────────────────────────────────────────────────────
# Node helpers
# ──────────────────────────────────────────────────────────────────────────────


def _mapping(doc: Any, path: str, what: str) -> Mapping[str, Any]:
    if not isinstance(doc, Mapping):
        raise AbiDecodeError(f"{what} must be an object, got {_json_kind(doc)}", path)
    return doc


def _require(doc: Mapping[str, Any], key: str, path: str) -> Any:
    if key not in doc:
        raise AbiDecodeError(f"missing required field {key!r}", path)
    return doc[key]


def _string(doc: Mapping[str, Any], key: str, path: str) -> str:
    v = _require(doc, key, path)
    if not isinstance(v, str):
        raise AbiDecodeError(f"{key!r} must be a string, got {_json_kind(v)}", f"{path}.{key}")
    return v


def _list(doc: Mapping[str, Any], key: str, path: str) -> List[Any]:
    v = _require(doc, key, path)
    if not isinstance(v, list):
        raise AbiDecodeError(f"{key!r} must be an array, got {_json_kind(v)}", f"{path}.{key}")
    return v


def _check_keys(doc: Mapping[str, Any], allowed: Iterable[str], path: str, strict: bool) -> None:
    if not strict:
        return
    allowed = set(allowed)
    for key in doc:
        if key not in allowed:
            raise AbiDecodeError(f"unexpected field {key!r}", path)


def _json_kind(v: Any) -> str:
    if v is None:
        return "null"
    if isinstance(v, bool):
        return "boolean"
    if isinstance(v, (int, float)):
        return "number"
    if isinstance(v, str):
        return "string"
    if isinstance(v, list):
        return "array"
    if isinstance(v, Mapping):
        return "object"
    return type(v).__name__


# ──────────────────────────────────────────────────────────────────────────────
# Types
# ──────────────────────────────────────────────────────────────────────────────


def _decode_type(doc: Mapping[str, Any], path: str, strict: bool, extra: tuple = ()) -> AbiType:
    """Decode the type document in `doc`; `extra` lists sibling keys owned by the caller."""
    kind = _require(doc, "type", path)
    if not isinstance(kind, str):
        raise AbiDecodeError(f"type discriminant must be a string, got {_json_kind(kind)}", f"{path}.type")

    if kind == TypeKind.FIELD.value:
        _check_keys(doc, ("type",) + extra, path, strict)
        return FIELD
    if kind == TypeKind.BOOL.value:
        _check_keys(doc, ("type",) + extra, path, strict)
        return BOOL
    if kind in (TypeKind.U8.value, TypeKind.U16.value, TypeKind.U32.value, TypeKind.U64.value):
        _check_keys(doc, ("type",) + extra, path, strict)
        return UintType(int(kind[1:]))

    if kind == TypeKind.ARRAY.value:
        _check_keys(doc, ("type", "components") + extra, path, strict)
        cpath = f"{path}.components"
        comps = _mapping(_require(doc, "components", path), cpath, "array components")
        size = _require(comps, "size", cpath)
        if isinstance(size, bool) or not isinstance(size, int):
            raise AbiDecodeError(f"array size must be an integer, got {_json_kind(size)}", f"{cpath}.size")
        if size < 0:
            raise AbiDecodeError(f"array size must be non-negative, got {size}", f"{cpath}.size")
        element = _decode_type(comps, cpath, strict, extra=("size",))
        return ArrayType(element, size)

    if kind == TypeKind.STRUCT.value:
        _check_keys(doc, ("type", "components") + extra, path, strict)
        cpath = f"{path}.components"
        comps = _mapping(_require(doc, "components", path), cpath, "struct components")
        _check_keys(comps, ("name", "members"), cpath, strict)
        name = _string(comps, "name", cpath)
        members = []
        for i, mdoc in enumerate(_list(comps, "members", cpath)):
            mpath = f"{cpath}.members[{i}]"
            mdoc = _mapping(mdoc, mpath, "struct member")
            mname = _string(mdoc, "name", mpath)
            members.append(StructMember(mname, _decode_type(mdoc, mpath, strict, extra=("name",))))
        return StructType(name, tuple(members))

    raise AbiDecodeError(f"unknown type kind {kind!r} (expected one of: {_KNOWN_KINDS})", f"{path}.type")


def decode_type(doc: Any, *, strict: Optional[bool] = None, path: str = "$") -> AbiType:
    """Decode a bare type document ({"type": ..., ["components": ...]})."""
    if strict is None:
        strict = load_config().strict_mode
    try:
        return _decode_type(_mapping(doc, path, "type document"), path, strict)
    except RecursionError as e:
        raise AbiDecodeError("type document nested too deeply", path) from e
    except AbiTypeError as e:
        raise AbiDecodeError(str(e), path) from e


# ──────────────────────────────────────────────────────────────────────────────
# Inputs / top level
# ──────────────────────────────────────────────────────────────────────────────


def _decode_input(doc: Any, path: str, strict: bool) -> AbiInput:
    doc = _mapping(doc, path, "input")
    name = _string(doc, "name", path)
    public = _require(doc, "public", path)
    if not isinstance(public, bool):
        raise AbiDecodeError(f"'public' must be a boolean, got {_json_kind(public)}", f"{path}.public")
    ty = _decode_type(doc, path, strict, extra=("name", "public"))
    return AbiInput(name=name, public=public, type=ty)


def decode_input(doc: Any, *, strict: Optional[bool] = None, path: str = "$") -> AbiInput:
    if strict is None:
        strict = load_config().strict_mode
    try:
        return _decode_input(doc, path, strict)
    except RecursionError as e:
        raise AbiDecodeError("input document nested too deeply", path) from e
    except AbiTypeError as e:
        raise AbiDecodeError(str(e), path) from e


def decode_abi(doc: Any, *, strict: Optional[bool] = None) -> Abi:
    """Decode a top-level ABI document {"inputs": [...], "outputs": [...]}."""
    if strict is None:
        strict = load_config().strict_mode
    path = "$"
    doc = _mapping(doc, path, "ABI document")
    _check_keys(doc, ("inputs", "outputs"), path, strict)
    raw_inputs = _list(doc, "inputs", path)
    raw_outputs = _list(doc, "outputs", path)
    try:
        inputs = [_decode_input(d, f"$.inputs[{i}]", strict) for i, d in enumerate(raw_inputs)]
        outputs = []
        for i, d in enumerate(raw_outputs):
            opath = f"$.outputs[{i}]"
            outputs.append(_decode_type(_mapping(d, opath, "output"), opath, strict))
    except RecursionError as e:
        raise AbiDecodeError("document nested too deeply", path) from e
    except AbiTypeError as e:
        raise AbiDecodeError(str(e), path) from e
    abi = Abi(inputs=tuple(inputs), outputs=tuple(outputs))
    log.debug("decoded abi: %d inputs, %d outputs", len(abi.inputs), len(abi.outputs))
    return abi


def loads(text: Union[str, bytes, bytearray], *, strict: Optional[bool] = None) -> Abi:
    """Parse JSON text and decode it as an ABI document."""
    cfg = load_config()
    try:
        raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    except UnicodeEncodeError as e:
        raise AbiDecodeError(f"document is not valid Unicode: {e.reason}", "$") from e
    if len(raw) > cfg.max_document_bytes:
        raise AbiDecodeError(
            f"document is {len(raw)} bytes, larger than the {cfg.max_document_bytes}-byte limit"
        )
    try:
        doc = msgspec.json.decode(raw)
    except msgspec.DecodeError as e:
        raise AbiDecodeError(f"invalid JSON: {e}", "$") from e
    except UnicodeDecodeError as e:
        raise AbiDecodeError(f"document is not valid UTF-8: {e.reason} at byte {e.start}", "$") from e
    except RecursionError as e:
        raise AbiDecodeError("document nested too deeply", "$") from e
    return decode_abi(doc, strict=strict)


def load(path: Union[str, Path], *, strict: Optional[bool] = None) -> Abi:
    """Read and decode an ABI file. OSError propagates unchanged."""
    return loads(Path(path).read_bytes(), strict=strict)
