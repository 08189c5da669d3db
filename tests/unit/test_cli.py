"""
Unit tests for the unitgraph CLI.

Commands are invoked directly with a mocked GraphContext whose evaluate()
returns a real evaluation of the sample description, and through the main
group against a description file in a temp directory.
"""

import json
from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from unitgraph.cli import cli
from unitgraph.cli.commands import classpath, config, packages, plan, publish, units
from unitgraph.core.exceptions import CyclicDependencyError
from unitgraph.services.graph import BuildEvaluator


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_ctx(tmp_path, sample_description, logger):
    """Create a mock GraphContext backed by the sample evaluation."""
    ctx = MagicMock()
    ctx.cwd = tmp_path
    ctx.has_description = True
    ctx.description_path = tmp_path / "units.toml"
    ctx.repository_path = tmp_path / ".unitgraph" / "repository.db"
    ctx.evaluate.return_value = BuildEvaluator(logger=logger).evaluate(sample_description)
    return ctx


class TestInspectCommands:
    """Tests for units, classpath and plan."""

    def test_units_lists_every_unit(self, runner, mock_ctx):
        result = runner.invoke(units, [], obj=mock_ctx)

        assert result.exit_code == 0, result.output
        assert "Version: 1.0.0-SNAPSHOT" in result.output
        for name in ["main", "lwjgl2Plugin", "soundsystem-all", "playerDemo"]:
            assert name in result.output
        assert "bundle" in result.output

    def test_missing_description_fails(self, runner, mock_ctx):
        mock_ctx.has_description = False

        result = runner.invoke(units, [], obj=mock_ctx)

        assert result.exit_code == 1
        assert "Build description not found" in result.output
        mock_ctx.evaluate.assert_not_called()

    def test_classpath_compile(self, runner, mock_ctx):
        result = runner.invoke(classpath, ["lwjgl2Plugin"], obj=mock_ctx)

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "build/classes/lwjgl2Plugin",
            "build/classes/main",
            "org.lwjgl.lwjgl:lwjgl:2.9.3",
        ]

    def test_classpath_units_only(self, runner, mock_ctx):
        result = runner.invoke(classpath, ["playerDemo", "--runtime", "--units"], obj=mock_ctx)

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["main", "javaSoundPlugin", "utils"]

    def test_classpath_unknown_unit(self, runner, mock_ctx):
        result = runner.invoke(classpath, ["codecA"], obj=mock_ctx)

        assert result.exit_code == 1
        assert "Unknown unit 'codecA'" in result.output

    def test_graph_error_becomes_click_error(self, runner, mock_ctx):
        mock_ctx.evaluate.side_effect = CyclicDependencyError(["a", "b", "a"])

        result = runner.invoke(units, [], obj=mock_ctx)

        assert result.exit_code == 1
        assert "a -> b -> a" in result.output

    def test_plan_for_target(self, runner, mock_ctx):
        result = runner.invoke(plan, ["lwjgl2PluginJar"], obj=mock_ctx)

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert "mainClasses" in lines[0]
        assert "lwjgl2PluginJar" in lines[-1]

    def test_plan_unknown_target(self, runner, mock_ctx):
        result = runner.invoke(plan, ["deploy"], obj=mock_ctx)

        assert result.exit_code == 2
        assert "Unknown action 'deploy'" in result.output

    def test_plan_all(self, runner, mock_ctx):
        result = runner.invoke(plan, ["--all"], obj=mock_ctx)

        assert result.exit_code == 0, result.output
        assert "mainJavadocJar" in result.output
        assert "umbrella" in result.output


class TestPublishCommands:
    """Tests for publish and packages."""

    def test_publish_dry_run_json(self, runner, mock_ctx):
        result = runner.invoke(publish, ["--dry-run", "--json"], obj=mock_ctx)

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [p["artifact_name"] for p in data] == [
            "main",
            "javaSoundPlugin",
            "lwjgl2Plugin",
            "utils",
            "soundsystem-all",
        ]
        assert data[0]["variants"][0]["kind"] == "api"
        assert not mock_ctx.repository_path.exists()

    def test_publish_stores_packages(self, runner, mock_ctx):
        result = runner.invoke(publish, [], obj=mock_ctx)

        assert result.exit_code == 0, result.output
        assert "com.paulscode:main:1.0.0-SNAPSHOT published" in result.output
        assert "Stored 5 package(s)" in result.output

        again = runner.invoke(publish, [], obj=mock_ctx)
        assert "com.paulscode:main:1.0.0-SNAPSHOT replaced" in again.output

    def test_packages_lists_stored(self, runner, mock_ctx):
        runner.invoke(publish, [], obj=mock_ctx)

        result = runner.invoke(packages, [], obj=mock_ctx)

        assert result.exit_code == 0, result.output
        assert "soundsystem-all" in result.output
        assert "api, runtime, sources, documentation" in result.output

    def test_packages_without_repository(self, runner, mock_ctx):
        result = runner.invoke(packages, [], obj=mock_ctx)

        assert result.exit_code == 0
        assert "No packages published." in result.output


class TestMainGroup:
    """Tests through the top-level group."""

    def test_help_without_command(self, runner):
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "unitgraph units" in result.output

    def test_units_from_file(self, runner, description_file, monkeypatch):
        monkeypatch.chdir(description_file.parent)

        result = runner.invoke(cli, ["units"])

        assert result.exit_code == 0, result.output
        assert "lwjgl2Plugin" in result.output

    def test_release_flag_stamps_version(self, runner, description_file, monkeypatch):
        monkeypatch.chdir(description_file.parent)

        result = runner.invoke(cli, ["--release", "-f", str(description_file), "units"])

        assert result.exit_code == 0, result.output
        assert "1.0.0-SNAPSHOT" not in result.output

    def test_config_command(self, runner, description_file, monkeypatch):
        monkeypatch.chdir(description_file.parent)

        result = runner.invoke(cli, ["config"])

        assert result.exit_code == 0, result.output
        assert "build.description = units.toml" in result.output
        assert "Release build: False" in result.output

    def test_invalid_package_url_is_reported(self, runner, tmp_path, monkeypatch):
        path = tmp_path / "units.toml"
        path.write_text(
            "[project]\nmaven_group = \"com.paulscode\"\narchives_base_name = \"soundsystem\"\n"
            "[package]\nurl = \"ftp://example.com\"\n[units.main]\n"
        )
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(cli, ["units"])

        assert result.exit_code == 1
        assert "Build description does not validate" in result.output
        assert isinstance(result.exception, SystemExit)


def test_config_command_with_mock_context(runner, mock_ctx):
    mock_ctx.settings.to_dict.return_value = {
        "build": {"description": "units.toml", "release": False},
        "_config_file": "/project/.unitgraph/config.toml",
    }
    mock_ctx.release = False

    result = runner.invoke(config, [], obj=mock_ctx)

    assert result.exit_code == 0, result.output
    assert "Config file: /project/.unitgraph/config.toml" in result.output
    assert "build.release = False" in result.output
