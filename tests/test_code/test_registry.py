"""Tests for oasgen.code.registry."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from oasgen.code.backend import Backend, LineCommentBackend, RustBackend
from oasgen.code.registry import (
    ENTRY_POINT_GROUP,
    BackendRegistry,
    get_backend,
    get_registry,
    reset_registry,
)
from oasgen.exceptions import BackendError, InvalidUsageError
from oasgen.exit_codes import EXIT_BACKEND_ERROR, EXIT_INVALID_USAGE


class GoBackend(LineCommentBackend):
    doc_prefix = "// "

    @property
    def name(self) -> str:
        return "go"


class _FakeEntryPoint:
    """Minimal stand-in for importlib.metadata.EntryPoint."""

    def __init__(self, name: str, target: Any) -> None:
        self.name = name
        self._target = target

    def load(self) -> Any:
        if isinstance(self._target, Exception):
            raise self._target
        return self._target


@pytest.fixture
def fake_entry_points(monkeypatch: pytest.MonkeyPatch):
    """Replace entry-point discovery with a controllable list."""
    registered: list[_FakeEntryPoint] = []

    def _entry_points(group: str | None = None) -> list[_FakeEntryPoint]:
        assert group == ENTRY_POINT_GROUP
        return list(registered)

    monkeypatch.setattr("importlib.metadata.entry_points", _entry_points)
    return registered


class TestBackendRegistry:
    """Registration and lookup."""

    def test_builtins(self) -> None:
        registry = BackendRegistry()

        assert registry.names() == ["none", "python", "rust"]
        assert isinstance(registry.get("rust"), RustBackend)

    def test_without_builtins(self) -> None:
        assert BackendRegistry(include_builtins=False).names() == []

    def test_unknown_backend(self) -> None:
        with pytest.raises(InvalidUsageError, match="Unknown backend 'cobol'") as exc_info:
            BackendRegistry().get("cobol")

        assert exc_info.value.exit_code == EXIT_INVALID_USAGE
        assert "none, python, rust" in str(exc_info.value)

    def test_duplicate_registration(self) -> None:
        registry = BackendRegistry()

        with pytest.raises(BackendError, match="already registered") as exc_info:
            registry.register(RustBackend())

        assert exc_info.value.exit_code == EXIT_BACKEND_ERROR

    def test_backends_sorted_by_name(self) -> None:
        registry = BackendRegistry()
        registry.register(GoBackend())

        assert [b.name for b in registry.backends()] == ["go", "none", "python", "rust"]


class TestDiscover:
    """Third-party backends come from entry points."""

    def test_loads_valid_backends(self, fake_entry_points: list[_FakeEntryPoint]) -> None:
        fake_entry_points.append(_FakeEntryPoint("go", GoBackend))
        registry = BackendRegistry()

        assert registry.discover() == ["go"]
        assert isinstance(registry.get("go"), GoBackend)

    def test_failures_are_logged_and_skipped(
        self,
        fake_entry_points: list[_FakeEntryPoint],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        fake_entry_points.extend([
            _FakeEntryPoint("broken", ImportError("no module named 'oasgen_broken'")),
            _FakeEntryPoint("clash", RustBackend),
            _FakeEntryPoint("not-a-backend", dict),
            _FakeEntryPoint("go", GoBackend),
        ])
        registry = BackendRegistry()

        with caplog.at_level(logging.WARNING, logger="oasgen.code.registry"):
            loaded = registry.discover()

        assert loaded == ["go"]
        messages = [record.getMessage() for record in caplog.records]
        assert any("Failed to load backend 'broken'" in m for m in messages)
        assert any("Failed to load backend 'clash'" in m for m in messages)
        assert any("does not provide a Backend" in m for m in messages)


class TestGlobalRegistry:
    """The process-wide registry is built lazily."""

    def test_get_backend(self, fake_entry_points: list[_FakeEntryPoint]) -> None:
        fake_entry_points.append(_FakeEntryPoint("go", GoBackend))
        reset_registry()

        assert isinstance(get_backend("go"), GoBackend)
        assert get_registry() is get_registry()

    def test_get_backend_unknown(self, fake_entry_points: list[_FakeEntryPoint]) -> None:
        reset_registry()

        with pytest.raises(InvalidUsageError):
            get_backend("cobol")

    def test_backend_instances_are_backends(self) -> None:
        reset_registry()

        assert all(isinstance(b, Backend) for b in get_registry().backends())
