from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict

import typer
from rich.console import Console
from rich.markup import escape

from selection_trail.core.exceptions import SelectionTrailError
from selection_trail.document import DocumentTree, load_html, load_json

console = Console()

HTML_SUFFIXES = {".html", ".htm"}


def load_document(path: Path, *, verbose: bool = False) -> DocumentTree:
    """
    Load an HTML or JSON document, chosen by file suffix.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()

    if path.suffix.lower() in HTML_SUFFIXES:
        tree = load_html(path)
    elif path.suffix.lower() == ".json":
        tree = load_json(path)
    else:
        raise SelectionTrailError(
            f"Unsupported document type {path.suffix!r} (expected .html, .htm or .json)"
        )

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded {len(tree)} nodes in {elapsed:.2f}s")

    return tree


def fail(exc: Exception) -> typer.Exit:
    """Print ``exc`` and return the Exit to raise."""
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
    return typer.Exit(code=1)


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
