"""
zkabi.tests helpers

Exports:
- TEST_ROOT
- fixture_path(*parts) -> Path
- read_fixture(name) -> str (trailing whitespace stripped)
- configure_test_logging() -> None

Environment toggles:
- ZKABI_TEST_LOG=1  → enable DEBUG logging for zkabi.*
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

TEST_ROOT: Path = Path(__file__).resolve().parent


def fixture_path(*parts: Union[str, Path]) -> Path:
    return (TEST_ROOT / "fixtures").joinpath(*map(Path, parts))


def read_fixture(name: str) -> str:
    return fixture_path(name).read_text(encoding="utf-8").rstrip()


def configure_test_logging() -> None:
    if os.getenv("ZKABI_TEST_LOG", "").strip().lower() in ("1", "true", "yes", "on"):
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        logging.getLogger("zkabi").setLevel(logging.DEBUG)
