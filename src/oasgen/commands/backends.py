"""Backends command -- list the code backends that ``generate`` can use."""

from __future__ import annotations

import typer

from oasgen.code.registry import get_registry
from oasgen.config import OasgenConfig
from oasgen.output import get_output


def backends_command(ctx: typer.Context) -> None:
    """List the available code backends.

    The configured default is marked in the Default column. Third-party
    backends from the ``oasgen.backends`` entry-point group are included.

    Example::

        oasgen backends
    """
    config: OasgenConfig = (ctx.obj or {}).get("config") or OasgenConfig()

    rows = [
        [backend.name, backend.description, "*" if backend.name == config.backend else ""]
        for backend in get_registry().backends()
    ]
    get_output().print_table(["Name", "Description", "Default"], rows, title="Backends")
