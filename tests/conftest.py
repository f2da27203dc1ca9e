"""Shared test fixtures for oasgen.

Provides reusable fixtures for loading fixture documents, creating isolated
config environments, managing output state, and running CLI commands.
These fixtures are automatically discovered by pytest and available to
all test modules without explicit imports.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from oasgen.code.registry import reset_registry
from oasgen.model import Spec
from oasgen.output import OutputFormat, OutputManager, reset_output, set_output

FIXTURES_DIR = Path(__file__).parent / "fixtures"

PETSTORE_JSON = FIXTURES_DIR / "petstore_3.1.json"
PETSTORE_YAML = FIXTURES_DIR / "petstore_3.1.yaml"
UNSUPPORTED_YAML = FIXTURES_DIR / "unsupported_3.1.yaml"


# ---------------------------------------------------------------------------
# Auto-reset global state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_globals_between_tests() -> None:
    """Reset the global OutputManager and backend registry after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale.
    """
    yield
    reset_output()
    reset_registry()


# ---------------------------------------------------------------------------
# Document fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def petstore_raw() -> dict[str, Any]:
    """Raw petstore 3.1 document, as plain containers."""
    with open(PETSTORE_JSON, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def petstore_spec(petstore_raw: dict[str, Any]) -> Spec:
    """Decoded petstore 3.1 document."""
    from oasgen.parser.codec import decode_spec

    return decode_spec(petstore_raw)


@pytest.fixture
def minimal_raw() -> dict[str, Any]:
    """The smallest valid document: version and info only."""
    return {
        "openapi": "3.1.0",
        "info": {"title": "Minimal", "version": "0.1.0"},
    }


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Sets XDG_CONFIG_HOME and XDG_DATA_HOME to subdirectories of tmp_path so
    that tests never touch real user config, clears OASGEN_* environment
    variables and NO_COLOR, and changes the working directory to tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setattr("oasgen.config._is_xdg_platform", lambda: True)

    for var in ["OASGEN_BACKEND", "NO_COLOR"]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def plain_output() -> OutputManager:
    """Install a PLAIN-format, colourless output manager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner; stdout and stderr are captured separately."""
    from typer.testing import CliRunner

    return CliRunner()
