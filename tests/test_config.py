"""Tests for oasgen.config -- XDG paths, config files and precedence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from oasgen.config import (
    BACKEND_ENV_VAR,
    OasgenConfig,
    get_config_dir,
    get_data_dir,
    load_global_config,
    load_project_config,
    resolve_config,
)
from oasgen.exceptions import ConfigError


def _write_user_config(root: Path, data: object) -> Path:
    path = root / "config" / "oasgen" / "config.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))
    return path


def _write_project_config(root: Path, data: object) -> Path:
    path = root / "oasgen.json"
    path.write_text(json.dumps(data))
    return path


# ---------------------------------------------------------------------------
# Directories
# ---------------------------------------------------------------------------


class TestDirectories:
    def test_config_dir_follows_xdg(self, isolated_config: Path) -> None:
        assert get_config_dir() == isolated_config / "config" / "oasgen"

    def test_config_dir_is_not_created(self, isolated_config: Path) -> None:
        assert not get_config_dir().exists()

    def test_data_dir_is_created(self, isolated_config: Path) -> None:
        path = get_data_dir()

        assert path == isolated_config / "data" / "oasgen"
        assert path.is_dir()

    def test_fallback_outside_xdg_platforms(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("oasgen.config._is_xdg_platform", lambda: False)
        monkeypatch.setattr(Path, "home", lambda: tmp_path)

        assert get_config_dir() == tmp_path / ".oasgen"
        assert get_data_dir() == tmp_path / ".oasgen" / "data"


# ---------------------------------------------------------------------------
# Config files
# ---------------------------------------------------------------------------


class TestLoadGlobalConfig:
    def test_defaults_without_a_file(self, isolated_config: Path) -> None:
        config = load_global_config()

        assert config == OasgenConfig()
        assert config.backend == "rust"
        assert config.output.no_color is False

    def test_reads_the_user_file(self, isolated_config: Path) -> None:
        _write_user_config(isolated_config, {"backend": "python", "output": {"quiet": True}})

        config = load_global_config()

        assert config.backend == "python"
        assert config.output.quiet is True
        assert config.output.no_color is False

    def test_invalid_json(self, isolated_config: Path) -> None:
        path = _write_user_config(isolated_config, {})
        path.write_text("{not json")

        with pytest.raises(ConfigError, match="Invalid global config"):
            load_global_config()

    def test_not_an_object(self, isolated_config: Path) -> None:
        _write_user_config(isolated_config, ["rust"])

        with pytest.raises(ConfigError, match="expected a JSON object"):
            load_global_config()

    def test_wrong_types(self, isolated_config: Path) -> None:
        _write_user_config(isolated_config, {"output": {"quiet": "very"}})

        with pytest.raises(ConfigError, match="Invalid global config"):
            load_global_config()


class TestLoadProjectConfig:
    def test_absent(self, isolated_config: Path) -> None:
        assert load_project_config() is None

    def test_present(self, isolated_config: Path) -> None:
        _write_project_config(isolated_config, {"backend": "none"})

        assert load_project_config() == {"backend": "none"}

    def test_not_an_object(self, isolated_config: Path) -> None:
        _write_project_config(isolated_config, "rust")

        with pytest.raises(ConfigError, match="Invalid project config"):
            load_project_config()


# ---------------------------------------------------------------------------
# Precedence
# ---------------------------------------------------------------------------


class TestResolveConfig:
    def test_defaults(self, isolated_config: Path) -> None:
        assert resolve_config() == OasgenConfig()

    def test_project_overrides_user_per_key(self, isolated_config: Path) -> None:
        _write_user_config(
            isolated_config,
            {"backend": "python", "output": {"no_color": True, "quiet": True}},
        )
        _write_project_config(isolated_config, {"output": {"quiet": False}})

        config = resolve_config()

        assert config.backend == "python"
        assert config.output.no_color is True
        assert config.output.quiet is False

    def test_environment_overrides_project(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _write_project_config(isolated_config, {"backend": "none"})
        monkeypatch.setenv(BACKEND_ENV_VAR, "python")

        assert resolve_config().backend == "python"

    def test_empty_environment_variable_is_ignored(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(BACKEND_ENV_VAR, "")

        assert resolve_config().backend == "rust"

    def test_invalid_project_value(self, isolated_config: Path) -> None:
        _write_project_config(isolated_config, {"backend": 3})

        with pytest.raises(ConfigError, match="Invalid configuration"):
            resolve_config()
