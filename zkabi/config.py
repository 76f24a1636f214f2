"""
zkabi.config — environment-driven settings for the ABI codec and CLI.

Configuration precedence:
  1) Environment variables (ZKABI_*)
  2) Hardcoded defaults below

Key env vars:
  - ZKABI_STRICT          (bool)  default: true      reject unknown document keys
  - ZKABI_INDENT          (int)   default: 2         pretty-print indent (0..8)
  - ZKABI_MAX_DOC_BYTES   (int)   default: 4_194_304 largest document accepted by loads()
  - ZKABI_ENTRY_POINT     (str)   default: "main"    entry function name
  - ZKABI_LOG_LEVEL       (str)   default: "WARNING" CLI log level
  - ZKABI_FIELD_MODULUS   (int)   default: BN254 scalar field prime

Usage:
    from zkabi.config import load_config
    cfg = load_config()
    if cfg.strict_mode: ...

load_config() is cached; tests that tweak the environment call
load_config.cache_clear() afterwards.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict

# BN254 (alt_bn128) scalar field, the default curve of the proving backends.
BN254_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617


# ----------------------------- helpers ---------------------------------------


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    return val in ("1", "true", "t", "yes", "y", "on")


def _env_int(name: str, default: int, *, min_v: int, max_v: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = int(raw, 0)
    except ValueError:
        return default
    if v < min_v:
        return min_v
    if v > max_v:
        return max_v
    return v


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_modulus(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = int(raw.strip(), 0)
    except ValueError:
        return default
    return v if v > 1 else default


# ------------------------------- config --------------------------------------


@dataclass(frozen=True)
class AbiConfig:
    strict_mode: bool
    indent: int
    max_document_bytes: int
    entry_point: str
    log_level: str
    field_modulus: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "strict_mode": self.strict_mode,
            "indent": self.indent,
            "max_document_bytes": self.max_document_bytes,
            "entry_point": self.entry_point,
            "log_level": self.log_level,
            "field_modulus": str(self.field_modulus),
        }


@lru_cache(maxsize=1)
def load_config() -> AbiConfig:
    """
    Build and cache an AbiConfig from environment + defaults.
    """
    return AbiConfig(
        strict_mode=_env_bool("ZKABI_STRICT", True),
        indent=_env_int("ZKABI_INDENT", 2, min_v=0, max_v=8),
        max_document_bytes=_env_int("ZKABI_MAX_DOC_BYTES", 4_194_304, min_v=1_024, max_v=1 << 30),
        entry_point=_env_str("ZKABI_ENTRY_POINT", "main"),
        log_level=_env_str("ZKABI_LOG_LEVEL", "WARNING").upper(),
        field_modulus=_env_modulus("ZKABI_FIELD_MODULUS", BN254_MODULUS),
    )


__all__ = ["AbiConfig", "BN254_MODULUS", "load_config"]
