"""
zkabi.cli
---------

Command-line entrypoints for zkabi.

ENTRYPOINTS maps a tool name to its "module:function" target. The same map
backs the `zkabi` console script and `python -m zkabi.cli [TOOL] ...`, and is
resolved lazily so importing this package does not pull in typer/rich.
"""

from __future__ import annotations

import sys
from importlib import import_module
from typing import Callable, Dict, List, Optional

ENTRYPOINTS: Dict[str, str] = {
    "zkabi": "zkabi.cli.abi_tool:main",
}

DEFAULT_TOOL = "zkabi"


def resolve_entrypoint(name: str) -> Callable[[], None]:
    """Import and return the `main` callable registered under `name` (KeyError if unknown)."""
    module_path, attr = ENTRYPOINTS[name].split(":", 1)
    return getattr(import_module(module_path), attr)


def dispatch(argv: Optional[List[str]] = None) -> None:
    """
    Run a registered tool. A leading argument naming a registered tool selects
    it and is dropped from argv; anything else runs DEFAULT_TOOL unchanged.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    name = DEFAULT_TOOL
    if args and args[0] in ENTRYPOINTS:
        name = args.pop(0)
    sys.argv = [name, *args]
    resolve_entrypoint(name)()


__all__ = ["ENTRYPOINTS", "DEFAULT_TOOL", "resolve_entrypoint", "dispatch"]
