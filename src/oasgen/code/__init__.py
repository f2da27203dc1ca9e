"""Code generation -- header synthesis and language backends.

Sub-modules:

* :mod:`~oasgen.code.generator` -- builds the documentation header from a
  :class:`~oasgen.model.Spec` and collects unsupported-feature warnings.
* :mod:`~oasgen.code.backend` -- the :class:`Backend` base class and the
  built-in backends.
* :mod:`~oasgen.code.registry` -- backend lookup, including third-party
  backends from the ``oasgen.backends`` entry-point group.
"""

from oasgen.code.backend import Backend, LineCommentBackend, NullBackend, PythonBackend, RustBackend
from oasgen.code.generator import (
    Generator,
    ModuleDocs,
    render_module_docs,
    synthesize_module_docs,
    unsupported_features,
)
from oasgen.code.registry import BackendRegistry, get_backend

__all__ = [
    "Backend",
    "BackendRegistry",
    "Generator",
    "LineCommentBackend",
    "ModuleDocs",
    "NullBackend",
    "PythonBackend",
    "RustBackend",
    "get_backend",
    "render_module_docs",
    "synthesize_module_docs",
    "unsupported_features",
]
