"""Generate command -- write the documentation header of an OpenAPI document.

The header is written to stdout (or to ``--output``) by the selected
backend. Unsupported root-level features are reported as warnings on
stderr, one per line; they do not change the exit status.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from oasgen.code import Generator
from oasgen.code.registry import get_backend
from oasgen.commands.common import fail, load_spec_or_exit
from oasgen.config import OasgenConfig
from oasgen.exceptions import OasgenError
from oasgen.output import debug, success, warning


def generate_command(
    ctx: typer.Context,
    file: str = typer.Argument(
        ..., help="OpenAPI 3.1 document (.json, .yaml, .yml), or - for stdin."
    ),
    backend: Optional[str] = typer.Option(
        None, "--backend", "-b", help="Code backend (default: from config, else rust)."
    ),
    output_path: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write to this file instead of stdout."
    ),
) -> None:
    """Generate the module documentation header for FILE.

    Example::

        oasgen generate petstore.yaml
        oasgen generate petstore.json --backend python -o header.py
    """
    spec = load_spec_or_exit(file)

    config: OasgenConfig = (ctx.obj or {}).get("config") or OasgenConfig()
    name = backend if backend is not None else config.backend
    try:
        generator = Generator(get_backend(name))
    except OasgenError as exc:
        fail(exc)
    debug(f"Using backend '{name}'")

    if output_path is None:
        warnings = generator.write_to(spec, sys.stdout)
    else:
        try:
            with open(output_path, "w", encoding="utf-8") as out:
                warnings = generator.write_to(spec, out)
        except OSError as exc:
            fail(OasgenError(f"Cannot write {output_path}: {exc}"))
        success(f"Wrote {output_path}")

    for message in warnings:
        warning(message)
