# -*- coding: utf-8 -*-
"""
Property tests for the ABI document codec.

- decode(encode(A)) == A for arbitrary nested Abi values (compact and pretty)
- signature() keeps input order/length and leaves outputs untouched
- encoding is a pure function of the value
"""
from __future__ import annotations

from hypothesis import given, settings, strategies as st

from zkabi.abi.decoding import decode_abi, decode_type, loads
from zkabi.abi.document import Abi, AbiInput
from zkabi.abi.encoding import dumps, encode_abi, encode_type
from zkabi.abi.types import (BOOL, FIELD, UINT_BITWIDTHS, ArrayType,
                             StructMember, StructType, UintType)

# -----------------------------------------------------------------------------
# Strategies
# -----------------------------------------------------------------------------

NAMES = st.text(
    alphabet=st.characters(min_codepoint=0x20, max_codepoint=0x2FF),
    min_size=0,
    max_size=12,
)
LEAVES = st.one_of(
    st.just(FIELD),
    st.just(BOOL),
    st.sampled_from(UINT_BITWIDTHS).map(UintType),
)


def _compound(children):
    arrays = st.builds(ArrayType, children, st.integers(min_value=0, max_value=64))
    structs = st.builds(
        StructType,
        NAMES,
        st.lists(st.builds(StructMember, NAMES, children), max_size=4).map(tuple),
    )
    return st.one_of(arrays, structs)


TYPES = st.recursive(LEAVES, _compound, max_leaves=20)
INPUTS = st.builds(AbiInput, NAMES, st.booleans(), TYPES)
ABIS = st.builds(
    Abi,
    st.lists(INPUTS, max_size=5).map(tuple),
    st.lists(TYPES, max_size=5).map(tuple),
)


# -----------------------------------------------------------------------------
# Laws
# -----------------------------------------------------------------------------


@settings(max_examples=200, deadline=None)
@given(ABIS)
def test_roundtrip_law(abi: Abi) -> None:
    assert decode_abi(encode_abi(abi)) == abi
    assert loads(dumps(abi)) == abi
    assert loads(dumps(abi, pretty=True)) == abi


@settings(max_examples=200, deadline=None)
@given(TYPES)
def test_type_roundtrip(ty) -> None:
    assert decode_type(encode_type(ty)) == ty
    assert ty.primitive_count() >= 0


@settings(max_examples=100, deadline=None)
@given(ABIS)
def test_signature_projection(abi: Abi) -> None:
    sig = abi.signature()
    assert len(sig.inputs) == len(abi.inputs)
    assert list(sig.inputs) == [i.type for i in abi.inputs]
    assert sig.outputs == abi.outputs


@settings(max_examples=100, deadline=None)
@given(ABIS)
def test_encoding_is_deterministic(abi: Abi) -> None:
    rebuilt = Abi(inputs=tuple(abi.inputs), outputs=tuple(abi.outputs))
    assert dumps(abi) == dumps(rebuilt)
