"""
Unit tests for ArtifactDeriver.
"""

from unittest.mock import MagicMock

import pytest

from unitgraph.core.models import ArtifactKind, ArtifactOptions, ExtensionPolicy, UnitKind
from unitgraph.services.graph import ArtifactDeriver


@pytest.fixture
def deriver(registry, layout, logger):
    return ArtifactDeriver(registry, layout, logger=logger)


class TestBinaryArtifact:
    """Tests for the always-present binary archive."""

    def test_binary_descriptor(self, registry, deriver):
        unit = registry.register("main", include_sources=False)

        (binary,) = deriver.derive_artifacts(unit)

        assert binary.kind is ArtifactKind.BINARY
        assert binary.location == "build/libs/soundsystem-main-1.0.0-SNAPSHOT.jar"
        assert binary.task_name == "mainJar"
        assert binary.triggers == ["jar"]
        assert binary.includes == ["**/*.class"]
        assert binary.classifier is None

    def test_binary_packs_only_own_output(self, registry, graph, deriver):
        registry.register("main")
        plugin = registry.register("lwjgl2Plugin")
        graph.extend("lwjgl2Plugin", ["main"], ExtensionPolicy.LIBRARY)

        binary = deriver.derive_artifacts(plugin)[0]

        assert binary.contents == ["build/classes/lwjgl2Plugin"]

    def test_artifact_name_names_the_archive(self, registry, deriver):
        unit = registry.register("all", artifact_name="soundsystem-all")

        binary = deriver.derive_artifacts(unit)[0]

        assert binary.location == "build/libs/soundsystem-soundsystem-all-1.0.0-SNAPSHOT.jar"
        assert binary.task_name == "allJar"

    def test_bundle_packs_member_outputs_in_order(self, registry, deriver):
        registry.register("x")
        registry.register("y")
        registry.register("z")
        bundle = registry.register("pkg", kind=UnitKind.BUNDLE, members=["x", "y", "z"])

        binary = deriver.derive_artifacts(bundle)[0]

        assert binary.contents == [
            "build/classes/pkg",
            "build/classes/x",
            "build/classes/y",
            "build/classes/z",
        ]


class TestOptionalArtifacts:
    """Tests for sources and documentation archives."""

    def test_sources_included_by_default(self, registry, deriver):
        unit = registry.register("main", source_roots=["src/main/java"])

        artifacts = deriver.derive_artifacts(unit)

        assert [a.kind for a in artifacts] == [ArtifactKind.BINARY, ArtifactKind.SOURCES]
        sources = artifacts[1]
        assert sources.classifier == "sources"
        assert sources.location == "build/libs/soundsystem-main-1.0.0-SNAPSHOT-sources.jar"
        assert sources.task_name == "mainSourcesJar"
        assert sources.triggers == ["build"]
        assert sources.contents == ["src/main/java"]
        assert sources.includes == ["**/*.java"]

    def test_opting_out_of_sources(self, registry, deriver):
        unit = registry.register("main")

        artifacts = deriver.derive_artifacts(unit, ArtifactOptions(include_sources=False))

        assert [a.kind for a in artifacts] == [ArtifactKind.BINARY]

    def test_documentation_archive(self, registry, deriver):
        unit = registry.register("main", source_roots=["src/main/java"], include_docs=True)

        docs = deriver.derive_artifacts(unit)[-1]

        assert docs.kind is ArtifactKind.DOCUMENTATION
        assert docs.classifier == "javadoc"
        assert docs.task_name == "mainJavadocJar"
        assert docs.location.endswith("-javadoc.jar")
        assert docs.triggers == ["build"]

    def test_documentation_without_sources_is_empty_not_an_error(self, registry, layout):
        logger = MagicMock()
        deriver = ArtifactDeriver(registry, layout, logger=logger)
        unit = registry.register("empty")

        artifacts = deriver.derive_artifacts(
            unit, ArtifactOptions(include_sources=False, include_docs=True)
        )

        docs = artifacts[-1]
        assert docs.kind is ArtifactKind.DOCUMENTATION
        assert docs.is_empty
        assert docs.contents == []
        logger.warning.assert_called_once()
