"""Code backends -- how synthesized documentation is written for a language.

A backend receives text that has already been assembled by
:mod:`oasgen.code.generator` and decides how to embed it in the target
language. The base class renders nothing, so a backend only overrides the
capabilities it supports.

Third-party backends are registered as entry points in the
``oasgen.backends`` group. Every backend is looked up by name with
:func:`~oasgen.code.registry.get_backend`.

Example:
    A backend for a language with ``--`` line comments::

        class LuaBackend(LineCommentBackend):
            doc_prefix = "-- "

            @property
            def name(self) -> str:
                return "lua"
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

__all__ = [
    "Backend",
    "LineCommentBackend",
    "NullBackend",
    "PythonBackend",
    "RustBackend",
    "split_lines",
]


class Backend(ABC):
    """Base class for all code backends.

    Subclasses must implement the :attr:`name` property. :meth:`module_docs`
    defaults to writing nothing.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the unique backend name used on the command line (``"rust"``)."""
        ...

    @property
    def description(self) -> str:
        """Return a one-line description shown in listings. Defaults to ``""``."""
        return ""

    def module_docs(self, docs: str, out: TextIO) -> None:
        """Write module (file) level documentation to *out*.

        *docs* may contain CommonMark. The default implementation writes
        nothing.

        Args:
            docs: The synthesized documentation text.
            out: The text stream to write to.
        """
        return None


class LineCommentBackend(Backend):
    """Backend that writes every line of the docs behind a comment marker.

    Each line of *docs* becomes ``doc_prefix + line + line_end``. Lines are
    written as they are; no wrapping to a maximum width is performed.
    """

    doc_prefix: str = ""
    line_end: str = "\n"

    def module_docs(self, docs: str, out: TextIO) -> None:
        for line in split_lines(docs):
            out.write(self.doc_prefix)
            out.write(line)
            out.write(self.line_end)


class RustBackend(LineCommentBackend):
    """Rust: inner doc comments (``//!``) at the top of the module."""

    doc_prefix = "//! "

    @property
    def name(self) -> str:
        return "rust"

    @property
    def description(self) -> str:
        return "Rust module docs (//! comments)"


class PythonBackend(LineCommentBackend):
    """Python: a block of ``#`` comments at the top of the module."""

    doc_prefix = "# "

    @property
    def name(self) -> str:
        return "python"

    @property
    def description(self) -> str:
        return "Python module header (# comments)"


class NullBackend(Backend):
    """Backend that renders nothing; only the warnings are reported."""

    @property
    def name(self) -> str:
        return "none"

    @property
    def description(self) -> str:
        return "No output, report warnings only"


def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\n``, dropping one trailing ``\\r`` from each line.

    A trailing newline does not produce an empty last line. Unlike
    :meth:`str.splitlines`, other Unicode line separators are kept inside
    the line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
