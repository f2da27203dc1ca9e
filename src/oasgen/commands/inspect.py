"""Inspect commands -- examine the contents of a document.

Provides the ``oasgen inspect`` sub-command group with read-only commands
that decode a document and present part of it as a table: the operations
under ``paths`` and the named entries under ``components``.
"""

from __future__ import annotations

from typing import Any

import typer
from pydantic.alias_generators import to_camel

from oasgen.commands.common import load_spec_or_exit
from oasgen.model import Components, Schema, is_pointer
from oasgen.output import get_output

inspect_app = typer.Typer(no_args_is_help=True)

_FILE_ARGUMENT_HELP = "OpenAPI 3.1 document (.json, .yaml, .yml), or - for stdin."


@inspect_app.command("paths")
def inspect_paths(
    file: str = typer.Argument(..., help=_FILE_ARGUMENT_HELP),
) -> None:
    """List every operation in FILE.

    Displays a table with the HTTP method, path, operation id, summary and
    deprecation status of each operation, sorted by path then method.

    Example::

        oasgen inspect paths petstore.yaml
    """
    spec = load_spec_or_exit(file)

    headers = ["Method", "Path", "Operation ID", "Summary", "Deprecated"]
    rows: list[list[str]] = []
    for path, method, op in sorted(spec.operations(), key=lambda o: (o[0], o[1].value)):
        rows.append([
            method.value.upper(),
            path,
            op.operation_id or "-",
            op.summary or "-",
            "Yes" if op.deprecated else "",
        ])

    get_output().print_table(
        headers, rows, title=f"{spec.info.title} -- Paths ({len(rows)})"
    )


@inspect_app.command("components")
def inspect_components(
    file: str = typer.Argument(..., help=_FILE_ARGUMENT_HELP),
) -> None:
    """List the named components defined in FILE.

    One row per entry of every ``components`` map, with its kind and, for
    Reference Objects, the ``$ref`` they point to.

    Example::

        oasgen inspect components petstore.yaml
    """
    spec = load_spec_or_exit(file)

    headers = ["Kind", "Name", "Details"]
    rows = [
        [kind, name, _describe(value)]
        for kind, name, value in _iter_components(spec.components)
    ]

    get_output().print_table(
        headers, rows, title=f"{spec.info.title} -- Components ({len(rows)})"
    )


def _iter_components(components: Components):  # noqa: ANN202
    """Yield ``(kind, name, value)`` for every named component, in field order."""
    for field_name, field_info in Components.model_fields.items():
        kind = field_info.alias or to_camel(field_name)
        entries = getattr(components, field_name)
        for name, value in entries.items():
            yield kind, name, value


def _describe(value: Any) -> str:
    if is_pointer(value):
        return f"$ref {value.ref}"
    if isinstance(value, Schema):
        if value.ref is not None:
            return f"$ref {value.ref}"
        return ", ".join(t.value for t in value.types) or "-"
    return "-"
