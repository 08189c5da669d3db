"""
Shared pytest fixtures for unitgraph tests.

- reset_container: fresh DI container and settings environment per test
- registry / graph / layout: empty graph services with a NullLogger
- description_file: the sample build description written to a temp dir
"""

from pathlib import Path

import pytest

from unitgraph.core.bootstrap import reset
from unitgraph.services.description import parse_description
from unitgraph.services.graph import BuildLayout, DependencyGraph, UnitRegistry
from unitgraph.services.logging import NullLogger

SAMPLE_DESCRIPTION = """
[project]
maven_group = "com.paulscode"
archives_base_name = "soundsystem"

[package]
name = "SoundSystem"
description = "3D sound library"
url = "https://github.com/wagyourtail/SoundSystem"
license = { name = "SoundSystem License" }
authors = [
    { id = "paulscode", name = "Paul Lamb" },
    { id = "wagyourtail", name = "Wagyourtail", email = "wagyourtail@example.com" },
]
scm = { connection = "scm:git:https://github.com/wagyourtail/SoundSystem.git" }

[units.main]
docs = true

[units.javaSoundPlugin]
extends = ["main"]
extension = "library"

[units.lwjgl2Plugin]
extends = ["main"]
extension = "library"
dependencies = ["org.lwjgl.lwjgl:lwjgl:2.9.3"]

[units.utils]
extends = ["main"]
extension = "library"

[bundles.all]
units = ["main", "javaSoundPlugin", "utils"]
artifact_name = "soundsystem-all"
sources = false

[demos.playerDemo]
extends = ["main", "javaSoundPlugin", "utils"]
"""


@pytest.fixture(autouse=True)
def reset_container(monkeypatch):
    """Reset the DI container and isolate settings from the environment."""
    monkeypatch.delenv("UNITGRAPH_RELEASE", raising=False)
    monkeypatch.delenv("UNITGRAPH_BUILD__RELEASE", raising=False)
    monkeypatch.delenv("version_release", raising=False)
    monkeypatch.setenv("UNITGRAPH_LOGGING__FILE", "false")
    reset()
    yield
    reset()


@pytest.fixture
def logger() -> NullLogger:
    return NullLogger()


@pytest.fixture
def registry(logger) -> UnitRegistry:
    return UnitRegistry(logger=logger)


@pytest.fixture
def layout() -> BuildLayout:
    return BuildLayout("soundsystem", "1.0.0-SNAPSHOT")


@pytest.fixture
def graph(registry, layout, logger) -> DependencyGraph:
    return DependencyGraph(registry, output_of=layout.classes_dir, logger=logger)


@pytest.fixture
def sample_description():
    """The sample build description, parsed."""
    return parse_description(SAMPLE_DESCRIPTION)


@pytest.fixture
def description_file(tmp_path: Path) -> Path:
    """Write the sample build description to units.toml in a temp dir."""
    path = tmp_path / "units.toml"
    path.write_text(SAMPLE_DESCRIPTION)
    return path
