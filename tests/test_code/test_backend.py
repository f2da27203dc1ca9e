"""Tests for oasgen.code.backend."""

from __future__ import annotations

import io

import pytest

from oasgen.code.backend import (
    Backend,
    LineCommentBackend,
    NullBackend,
    PythonBackend,
    RustBackend,
    split_lines,
)


class TestRustBackend:
    """Every line of the docs becomes a ``//!`` inner doc comment."""

    def test_module_docs(self) -> None:
        out = io.StringIO()

        RustBackend().module_docs("Pet Store\n\nVersion: 1.0.0", out)

        assert out.getvalue() == "//! Pet Store\n//! \n//! Version: 1.0.0\n"

    def test_long_lines_are_not_wrapped(self) -> None:
        line = "word " * 40
        out = io.StringIO()

        RustBackend().module_docs(line, out)

        assert out.getvalue() == f"//! {line}\n"

    def test_name(self) -> None:
        assert RustBackend().name == "rust"


class TestPythonBackend:
    """Every line of the docs becomes a ``#`` comment."""

    def test_module_docs(self) -> None:
        out = io.StringIO()

        PythonBackend().module_docs("Title\n\nVersion: 2", out)

        assert out.getvalue() == "# Title\n# \n# Version: 2\n"


class TestNullBackend:
    """The default capability writes nothing."""

    def test_module_docs(self) -> None:
        out = io.StringIO()

        NullBackend().module_docs("Title", out)

        assert out.getvalue() == ""


class TestCustomBackend:
    """Subclassing is how new languages are added."""

    def test_line_comment_subclass(self) -> None:
        class LuaBackend(LineCommentBackend):
            doc_prefix = "-- "
            line_end = "\r\n"

            @property
            def name(self) -> str:
                return "lua"

        out = io.StringIO()
        LuaBackend().module_docs("a\nb", out)

        assert out.getvalue() == "-- a\r\n-- b\r\n"

    def test_name_is_required(self) -> None:
        with pytest.raises(TypeError):
            Backend()  # type: ignore[abstract]

    def test_default_description(self) -> None:
        class Quiet(Backend):
            @property
            def name(self) -> str:
                return "quiet"

        assert Quiet().description == ""


class TestSplitLines:
    """Lines are split on newlines only."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("", []),
            ("a", ["a"]),
            ("a\n", ["a"]),
            ("a\n\nb", ["a", "", "b"]),
            ("a\r\nb\r\n", ["a", "b"]),
            ("a\n\n", ["a", ""]),
            ("a b", ["a b"]),
        ],
    )
    def test_split_lines(self, text: str, expected: list[str]) -> None:
        assert split_lines(text) == expected
