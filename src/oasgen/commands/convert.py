"""Convert command -- decode a document and encode it again as JSON or YAML.

Useful to normalise a document: ``format`` aliases are written in their
canonical spelling and single-element ``type`` lists as a bare string.
"""

from __future__ import annotations

import typer

from oasgen.commands.common import fail, load_spec_or_exit
from oasgen.exceptions import OasgenError
from oasgen.output import print_data
from oasgen.parser.codec import OUTPUT_FORMATS


def convert_command(
    file: str = typer.Argument(
        ..., help="OpenAPI 3.1 document (.json, .yaml, .yml), or - for stdin."
    ),
    to: str = typer.Option(
        "json", "--to", "-t", help=f"Output format: {', '.join(OUTPUT_FORMATS)}."
    ),
) -> None:
    """Decode FILE and print it re-encoded as JSON or YAML.

    Example::

        oasgen convert petstore.yaml --to json > petstore.json
    """
    from oasgen.parser.codec import dumps

    spec = load_spec_or_exit(file)
    try:
        print_data(dumps(spec, to.lower()))
    except OasgenError as exc:
        fail(exc)
