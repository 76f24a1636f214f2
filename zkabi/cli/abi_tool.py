#!/usr/bin/env python3
"""
zkabi.cli.abi_tool
==================

Inspect, validate and re-format ABI documents, and check witness arguments
against them.

Examples:
  python -m zkabi.cli.abi_tool inspect out/abi.json
  python -m zkabi.cli.abi_tool inspect out/abi.json --json
  python -m zkabi.cli.abi_tool check out/abi.json
  python -m zkabi.cli.abi_tool fmt out/abi.json --compact --out abi.min.json
  python -m zkabi.cli.abi_tool signature out/abi.json
  python -m zkabi.cli.abi_tool check-args out/abi.json witness_args.json

Exit codes: 0 ok, 1 malformed document or mismatched arguments, 2 unreadable file.
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from zkabi.abi.arguments import parse_arguments
from zkabi.abi.decoding import load
from zkabi.abi.document import Abi
from zkabi.abi.encoding import dumps
from zkabi.config import load_config
from zkabi.errors import AbiDecodeError, ArgumentError
from zkabi.version import __version__

log = logging.getLogger(__name__)

app = typer.Typer(
    name="zkabi",
    add_completion=False,
    no_args_is_help=True,
    help="Inspect and validate program ABI documents.",
)

# -------------------- utils --------------------


def _configure_logging(level: str) -> None:
    if logging.getLogger().handlers:
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _die(msg: str, code: int) -> None:
    sys.stderr.write(msg.rstrip() + "\n")
    raise typer.Exit(code)


def _load_abi(path: Path) -> Abi:
    try:
        return load(path)
    except OSError as e:
        _die(f"cannot read {path}: {e.strerror or e}", 2)
    except AbiDecodeError as e:
        _die(f"{path}: {e}", 1)
    raise AssertionError("unreachable")  # pragma: no cover


def _summary(abi: Abi) -> Dict[str, Any]:
    sig = abi.signature()
    return {
        "signature": str(sig),
        "inputs": [
            {
                "name": i.name,
                "visibility": "public" if i.public else "private",
                "type": str(i.type),
                "primitives": i.type.primitive_count(),
            }
            for i in abi.inputs
        ],
        "outputs": [{"type": str(o), "primitives": o.primitive_count()} for o in abi.outputs],
        "primitive_inputs": sig.primitive_inputs(),
        "primitive_outputs": sig.primitive_outputs(),
    }


# -------------------- commands --------------------


@app.callback()
def _root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    _configure_logging("DEBUG" if verbose else load_config().log_level)


@app.command("inspect")
def inspect_cmd(
    path: Path = typer.Argument(..., help="ABI JSON document."),
    as_json: bool = typer.Option(False, "--json", help="Machine-readable output."),
) -> None:
    """Show inputs, outputs and the bare signature of an ABI."""
    abi = _load_abi(path)
    summary = _summary(abi)
    if as_json:
        typer.echo(json.dumps(summary, indent=load_config().indent))
        return

    console = Console()
    table = Table(title=f"inputs ({len(abi.inputs)})", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("name")
    table.add_column("visibility")
    table.add_column("type")
    table.add_column("primitives", justify="right")
    for idx, row in enumerate(summary["inputs"]):
        table.add_row(str(idx), row["name"], row["visibility"], row["type"], str(row["primitives"]))
    console.print(table)

    out = Table(title=f"outputs ({len(abi.outputs)})", box=box.SIMPLE)
    out.add_column("#", justify="right")
    out.add_column("type")
    out.add_column("primitives", justify="right")
    for idx, row in enumerate(summary["outputs"]):
        out.add_row(str(idx), row["type"], str(row["primitives"]))
    console.print(out)
    console.print(f"signature: {summary['signature']}", markup=False, highlight=False)


@app.command("check")
def check_cmd(path: Path = typer.Argument(..., help="ABI JSON document.")) -> None:
    """Exit 0 if the document decodes, 1 (with the reason) if it does not."""
    abi = _load_abi(path)
    log.info("%s: %d inputs, %d outputs", path, len(abi.inputs), len(abi.outputs))
    typer.echo("ok")


@app.command("fmt")
def fmt_cmd(
    path: Path = typer.Argument(..., help="ABI JSON document."),
    compact: bool = typer.Option(False, "--compact", help="No whitespace."),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write here instead of stdout."),
) -> None:
    """Re-emit the canonical encoding of an ABI document."""
    abi = _load_abi(path)
    text = dumps(abi, pretty=not compact)
    if out is None:
        typer.echo(text)
        return
    out.write_text(text + "\n", encoding="utf-8")
    log.info("wrote %s", out)


@app.command("signature")
def signature_cmd(path: Path = typer.Argument(..., help="ABI JSON document.")) -> None:
    """Print the bare signature, e.g. '(field[2], bool) -> (field)'."""
    typer.echo(str(_load_abi(path).signature()))


@app.command("check-args")
def check_args_cmd(
    path: Path = typer.Argument(..., help="ABI JSON document."),
    args_path: Path = typer.Argument(..., help="JSON array of witness arguments."),
) -> None:
    """Check witness arguments against the ABI inputs."""
    abi = _load_abi(path)
    try:
        text = args_path.read_bytes()
    except OSError as e:
        _die(f"cannot read {args_path}: {e.strerror or e}", 2)
    try:
        values = parse_arguments(text, abi.signature())
    except ArgumentError as e:
        _die(f"{args_path}: {e}", 1)
    typer.echo(f"ok: {len(values)} arguments match {abi.signature()}")


@app.command("version")
def version_cmd() -> None:
    typer.echo(__version__)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
