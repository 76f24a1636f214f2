from __future__ import annotations

import pytest

from zkabi.config import load_config


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Each test sees the default config unless it sets ZKABI_* itself."""
    for name in (
        "ZKABI_STRICT",
        "ZKABI_INDENT",
        "ZKABI_MAX_DOC_BYTES",
        "ZKABI_ENTRY_POINT",
        "ZKABI_LOG_LEVEL",
        "ZKABI_FIELD_MODULUS",
    ):
        monkeypatch.delenv(name, raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()
