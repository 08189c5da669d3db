"""
Unit tests for settings loading.

Covers defaults, TOML discovery, environment overrides and the release
shortcuts.
"""

from pathlib import Path

import pytest

from unitgraph.core.settings import find_config_file, load_settings


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project directory with .unitgraph/config.toml."""
    config_dir = tmp_path / ".unitgraph"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text(
        '[build]\ndescription = "build/units.toml"\n\n'
        '[repository]\npath = "out/packages.db"\n\n'
        '[logging]\nlevel = "DEBUG"\n'
    )
    return tmp_path


class TestLoadSettings:
    """Tests for settings sources and precedence."""

    def test_defaults_without_config_file(self, tmp_path):
        settings = load_settings(config_path=tmp_path / "absent.toml")

        assert settings.build.description == "units.toml"
        assert settings.build.release is False
        assert settings.repository.path == ".unitgraph/repository.db"
        assert settings.logging.level == "warning"

    def test_toml_values_are_used(self, project_dir):
        settings = load_settings(start_dir=str(project_dir))

        assert settings.build.description == "build/units.toml"
        assert settings.repository.path == "out/packages.db"
        assert settings.logging.level == "debug"
        assert settings.config_file == str(project_dir / ".unitgraph" / "config.toml")

    def test_environment_overrides_toml(self, project_dir, monkeypatch):
        monkeypatch.setenv("UNITGRAPH_REPOSITORY__PATH", "/tmp/elsewhere.db")

        settings = load_settings(start_dir=str(project_dir))

        assert settings.repository.path == "/tmp/elsewhere.db"

    def test_init_values_override_everything(self, project_dir):
        settings = load_settings(start_dir=str(project_dir), build={"release": True})

        assert settings.build.release is True

    def test_pyproject_tool_section(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text(
            '[tool.unitgraph.build]\ndescription = "modules.toml"\n'
        )

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.build.description == "modules.toml"
        assert find_config_file(str(tmp_path)) == tmp_path / "pyproject.toml"

    def test_broken_toml_is_reported_not_raised(self, tmp_path):
        config_dir = tmp_path / ".unitgraph"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("[build\n")

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.config_error is not None
        assert settings.build.description == "units.toml"

    def test_to_dict_has_all_sections(self, project_dir):
        data = load_settings(start_dir=str(project_dir)).to_dict()

        assert set(data) >= {"build", "repository", "logging"}
        assert data["logging"]["file"] is False  # from the test environment
        assert "_config_file" in data


class TestReleaseShortcuts:
    """Tests for UNITGRAPH_RELEASE and the legacy version_release variable."""

    def test_release_env_var(self, tmp_path, monkeypatch):
        monkeypatch.setenv("UNITGRAPH_RELEASE", "true")

        settings = load_settings(config_path=tmp_path / "absent.toml")

        assert settings.build.release is True

    def test_release_env_var_false(self, tmp_path, monkeypatch):
        monkeypatch.setenv("UNITGRAPH_RELEASE", "0")

        settings = load_settings(config_path=tmp_path / "absent.toml")

        assert settings.build.release is False

    def test_legacy_property_presence_requests_release(self, tmp_path, monkeypatch):
        monkeypatch.setenv("version_release", "")

        settings = load_settings(config_path=tmp_path / "absent.toml")

        assert settings.build.release is True

    def test_nested_release_variable(self, tmp_path, monkeypatch):
        monkeypatch.setenv("UNITGRAPH_BUILD__RELEASE", "true")

        settings = load_settings(config_path=tmp_path / "absent.toml")

        assert settings.build.release is True
