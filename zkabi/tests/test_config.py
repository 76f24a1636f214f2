from __future__ import annotations

import pytest

from zkabi.config import BN254_MODULUS, load_config


def test_defaults() -> None:
    cfg = load_config()
    assert cfg.strict_mode is True
    assert cfg.indent == 2
    assert cfg.max_document_bytes == 4_194_304
    assert cfg.entry_point == "main"
    assert cfg.log_level == "WARNING"
    assert cfg.field_modulus == BN254_MODULUS
    assert cfg.as_dict()["field_modulus"] == str(BN254_MODULUS)


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ZKABI_STRICT", "no")
    monkeypatch.setenv("ZKABI_INDENT", "4")
    monkeypatch.setenv("ZKABI_MAX_DOC_BYTES", "0x1000")
    monkeypatch.setenv("ZKABI_ENTRY_POINT", " prove ")
    monkeypatch.setenv("ZKABI_LOG_LEVEL", "debug")
    monkeypatch.setenv("ZKABI_FIELD_MODULUS", "101")
    load_config.cache_clear()
    cfg = load_config()
    assert cfg.strict_mode is False
    assert cfg.indent == 4
    assert cfg.max_document_bytes == 4096
    assert cfg.entry_point == "prove"
    assert cfg.log_level == "DEBUG"
    assert cfg.field_modulus == 101


def test_invalid_and_out_of_range_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ZKABI_INDENT", "99")
    monkeypatch.setenv("ZKABI_MAX_DOC_BYTES", "lots")
    monkeypatch.setenv("ZKABI_FIELD_MODULUS", "1")
    monkeypatch.setenv("ZKABI_ENTRY_POINT", "   ")
    load_config.cache_clear()
    cfg = load_config()
    assert cfg.indent == 8
    assert cfg.max_document_bytes == 4_194_304
    assert cfg.field_modulus == BN254_MODULUS
    assert cfg.entry_point == "main"


def test_load_config_is_cached() -> None:
    assert load_config() is load_config()
