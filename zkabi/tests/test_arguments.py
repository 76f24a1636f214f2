from __future__ import annotations

import pytest

from zkabi.abi.arguments import check_argument, check_arguments, parse_arguments
from zkabi.abi.document import Abi, AbiInput
from zkabi.abi.types import BOOL, FIELD, ArrayType, StructType, UintType
from zkabi.compiler.signature import Signature
from zkabi.config import BN254_MODULUS, load_config
from zkabi.errors import ArgumentError
from zkabi.tests import read_fixture

FOO = StructType.of("Foo", [("b", FIELD), ("c", BOOL)])
SIG = Signature(inputs=(ArrayType(FOO, 2),), outputs=(BOOL,))


def test_struct_array_arguments_fixture() -> None:
    values = parse_arguments(read_fixture("witness_args.json"), SIG)
    assert values == [[{"b": 1, "c": True}, {"b": 2, "c": False}]]


def test_field_accepts_decimal_string_and_int() -> None:
    assert check_argument("0", FIELD) == 0
    assert check_argument(42, FIELD) == 42
    assert check_argument(str(BN254_MODULUS - 1), FIELD) == BN254_MODULUS - 1


@pytest.mark.parametrize("value", ["-1", "0x10", "01", "1.5", 1.5, True, None, -3, str(BN254_MODULUS)])
def test_field_rejects(value) -> None:
    with pytest.raises(ArgumentError):
        check_argument(value, FIELD)


def test_field_modulus_is_configurable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ZKABI_FIELD_MODULUS", "17")
    load_config.cache_clear()
    assert check_argument("16", FIELD) == 16
    with pytest.raises(ArgumentError, match="out of range"):
        check_argument("17", FIELD)


def test_bool_must_be_json_boolean() -> None:
    assert check_argument(False, BOOL) is False
    for bad in (0, 1, "true"):
        with pytest.raises(ArgumentError):
            check_argument(bad, BOOL)


def test_uint_hex_width() -> None:
    assert check_argument("0x2a", UintType(8)) == 42
    assert check_argument("0x0000002a", UintType(32)) == 42
    with pytest.raises(ArgumentError, match="exactly 2"):
        check_argument("0x002a", UintType(8))
    with pytest.raises(ArgumentError):
        check_argument(42, UintType(8))


def test_arity_mismatch() -> None:
    with pytest.raises(ArgumentError, match="expected 1 arguments, got 0"):
        check_arguments(SIG, [])
    with pytest.raises(ArgumentError, match="JSON array"):
        check_arguments(SIG, "[]")  # type: ignore[arg-type]


def test_error_paths() -> None:
    with pytest.raises(ArgumentError) as ei:
        check_arguments(SIG, [[{"b": "1", "c": True}, {"b": "2", "c": "no"}]])
    assert ei.value.path == "$[0][1].c"

    with pytest.raises(ArgumentError) as ei:
        check_arguments(SIG, [[{"b": "1", "c": True}]])
    assert ei.value.path == "$[0]"
    assert "expected 2 elements" in str(ei.value)


def test_struct_members_exact() -> None:
    with pytest.raises(ArgumentError, match="missing member 'c'"):
        check_argument({"b": "1"}, FOO)
    with pytest.raises(ArgumentError, match="unexpected member 'd'"):
        check_argument({"b": "1", "c": True, "d": 0}, FOO)


def test_struct_result_follows_member_order() -> None:
    out = check_argument({"c": True, "b": "7"}, FOO)
    assert list(out) == ["b", "c"]


def test_invalid_json_arguments() -> None:
    with pytest.raises(ArgumentError, match="invalid JSON"):
        parse_arguments("[1,", SIG)


def test_abi_check_arguments_goes_through_signature() -> None:
    abi = Abi(inputs=(AbiInput("a", False, FIELD), AbiInput("b", True, BOOL)))
    assert abi.check_arguments(["3", True]) == [3, True]


def test_arguments_must_be_utf8() -> None:
    with pytest.raises(ArgumentError) as ei:
        parse_arguments(b'[[{"b": "1", "c": "\xff"}]]', SIG)
    assert ei.value.path == "$"
    with pytest.raises(ArgumentError):
        parse_arguments('["\ud800"]', SIG)
