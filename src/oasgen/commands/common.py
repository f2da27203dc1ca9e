"""Helpers shared by the CLI sub-commands."""

from __future__ import annotations

from typing import NoReturn

import typer

from oasgen.exceptions import OasgenError
from oasgen.model import Spec
from oasgen.output import debug, error


def fail(exc: OasgenError) -> NoReturn:
    """Report *exc* on stderr and exit with its exit code."""
    error(str(exc))
    raise typer.Exit(code=exc.exit_code)


def load_spec_or_exit(file: str) -> Spec:
    """Read and decode *file*, exiting with the error's code on failure.

    Args:
        file: Path to a ``.json``/``.yaml``/``.yml`` document, or ``-`` for
            stdin.
    """
    from oasgen.parser import read_spec

    debug(f"Reading {file}")
    try:
        return read_spec(file)
    except OasgenError as exc:
        fail(exc)
