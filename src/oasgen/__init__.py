"""oasgen -- typed OpenAPI 3.1 document model and documentation generator.

This package decodes an OpenAPI 3.1 document (JSON or YAML) into a tree of
Pydantic models, encodes that tree back faithfully, and renders a
documentation header for generated source code through a pluggable backend.

Typical workflow::

    oasgen generate openapi.yaml              # "//! " module docs on stdout
    oasgen generate openapi.json -b python    # "# " comment block instead
    oasgen convert openapi.yaml --to json     # decode, then re-encode

Modules:
    app: Typer application factory and CLI entry point.
    model: The document model (Spec, Schema, Reference, ...).
    parser: Loading, decoding/encoding and ``$ref`` resolution.
    code: Documentation synthesis and the backend registry.
    config: XDG-aware configuration and precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
