"""
Unit tests for VariantPublisher.

Covers variant binding, metadata, convergence on re-publication and
artifact name conflicts.
"""

import pytest

from unitgraph.core.exceptions import DuplicateArtifactNameError
from unitgraph.core.models import (
    ArtifactKind,
    Author,
    ExtensionPolicy,
    License,
    PackageMetadata,
    SourceControl,
    UnitKind,
    VariantKind,
)
from unitgraph.services.graph import ArtifactDeriver, VariantPublisher

VERSION = "1.0.0-SNAPSHOT"


@pytest.fixture
def deriver(registry, layout, logger):
    return ArtifactDeriver(registry, layout, logger=logger)


@pytest.fixture
def publisher(graph, deriver, logger):
    return VariantPublisher(graph, deriver, "com.paulscode", VERSION, logger=logger)


@pytest.fixture
def metadata():
    return PackageMetadata(
        name="SoundSystem",
        description="3D sound library",
        url="https://github.com/wagyourtail/SoundSystem",
        license=License(name="SoundSystem License"),
        authors=[
            Author(id="paulscode", name="Paul Lamb"),
            Author(id="wagyourtail", name="Wagyourtail"),
        ],
        scm=SourceControl(url="https://github.com/wagyourtail/SoundSystem"),
    )


class TestVariants:
    """Tests for variant binding."""

    def test_default_unit_has_api_runtime_and_sources(self, registry, publisher, metadata):
        unit = registry.register("main")

        package = publisher.publish(unit, metadata)

        assert package.variant_kinds == [VariantKind.API, VariantKind.RUNTIME, VariantKind.SOURCES]
        assert package.coordinates == "com.paulscode:main:1.0.0-SNAPSHOT"

    def test_api_and_runtime_bind_to_binary(self, registry, publisher, deriver, metadata):
        unit = registry.register("main")
        binary = deriver.derive_artifacts(unit)[0]

        package = publisher.publish(unit, metadata)

        for kind in (VariantKind.API, VariantKind.RUNTIME):
            variant = package.variant(kind)
            assert variant.artifact_kind is ArtifactKind.BINARY
            assert variant.artifact == binary.location
            assert variant.consumable is True

    def test_no_sources_artifact_means_no_sources_variant(self, registry, publisher, metadata):
        unit = registry.register("main", include_sources=False)

        package = publisher.publish(unit, metadata)

        assert package.variant(VariantKind.SOURCES) is None
        assert package.variant_kinds == [VariantKind.API, VariantKind.RUNTIME]

    def test_documentation_variant_when_opted_in(self, registry, publisher, metadata):
        unit = registry.register("main", include_docs=True, source_roots=["src/main/java"])

        package = publisher.publish(unit, metadata)

        docs = package.variant(VariantKind.DOCUMENTATION)
        assert docs is not None
        assert docs.artifact_kind is ArtifactKind.DOCUMENTATION
        assert docs.artifact.endswith("-javadoc.jar")

    def test_variant_dependencies(self, registry, graph, publisher, metadata):
        registry.register("main")
        plugin = registry.register(
            "lwjgl2Plugin",
            dependencies=["org.lwjgl.lwjgl:lwjgl:2.9.3"],
            runtime_dependencies=["org.lwjgl.lwjgl:lwjgl-platform:2.9.3"],
        )
        graph.extend("lwjgl2Plugin", ["main"], ExtensionPolicy.LIBRARY)

        package = publisher.publish(plugin, metadata)

        assert package.variant(VariantKind.API).dependencies == [
            "com.paulscode:main:1.0.0-SNAPSHOT",
            "org.lwjgl.lwjgl:lwjgl:2.9.3",
        ]
        assert package.variant(VariantKind.RUNTIME).dependencies == [
            "com.paulscode:main:1.0.0-SNAPSHOT",
            "org.lwjgl.lwjgl:lwjgl:2.9.3",
            "org.lwjgl.lwjgl:lwjgl-platform:2.9.3",
        ]
        assert package.variant(VariantKind.SOURCES).dependencies == []

    def test_plain_parent_is_not_a_published_dependency(self, registry, graph, publisher, metadata):
        registry.register("main")
        child = registry.register("child")
        graph.extend("child", ["main"])

        package = publisher.publish(child, metadata)

        assert package.variant(VariantKind.API).dependencies == []


class TestMetadataAndConvergence:
    """Tests for metadata attachment and one-descriptor-per-unit."""

    def test_metadata_is_attached(self, registry, publisher, metadata):
        package = publisher.publish(registry.register("main"), metadata)

        assert package.metadata.name == "SoundSystem"
        assert [a.id for a in package.metadata.authors] == ["paulscode", "wagyourtail"]
        assert package.metadata.license.name == "SoundSystem License"

    def test_publishing_twice_converges(self, registry, publisher, metadata):
        unit = registry.register("main")

        publisher.publish(unit, metadata)
        publisher.publish(unit, PackageMetadata(name="Renamed"))

        assert len(publisher.packages) == 1
        assert publisher.get("main").metadata.name == "Renamed"

    def test_artifact_name_taken_by_other_unit_raises(self, registry, publisher, metadata):
        publisher.publish(registry.register("core"), metadata)
        other = registry.register("other")
        other.artifact_name = "core"

        with pytest.raises(DuplicateArtifactNameError) as exc_info:
            publisher.publish(other, metadata)

        assert exc_info.value.units == ["core", "other"]
        assert len(publisher.packages) == 1

    def test_explicit_artifacts_are_used(self, registry, publisher, deriver, metadata):
        unit = registry.register("main")
        binary_only = deriver.derive_artifacts(unit)[:1]

        package = publisher.publish(unit, metadata, binary_only)

        assert package.variant_kinds == [VariantKind.API, VariantKind.RUNTIME]


class TestBundleDependencies:
    """Tests for the dependencies a bundle package exposes."""

    @pytest.fixture
    def bundle(self, registry, graph):
        registry.register("main", dependencies=["org.slf4j:slf4j-api:1.7.30"])
        registry.register("codec", dependencies=["org.jcraft:jorbis:0.0.17"])
        graph.extend("codec", ["main"], ExtensionPolicy.LIBRARY)
        bundle = registry.register("all", kind=UnitKind.BUNDLE, members=["main", "codec"])
        graph.extend("all", ["main", "codec"])
        return bundle

    def test_member_externals_are_listed(self, bundle, publisher, metadata):
        package = publisher.publish(bundle, metadata)

        assert package.variant(VariantKind.API).dependencies == [
            "org.slf4j:slf4j-api:1.7.30",
            "org.jcraft:jorbis:0.0.17",
        ]
        assert "org.jcraft:jorbis:0.0.17" in package.variant(VariantKind.RUNTIME).dependencies

    def test_packed_members_are_not_listed(self, bundle, publisher, metadata):
        package = publisher.publish(bundle, metadata)

        for kind in (VariantKind.API, VariantKind.RUNTIME):
            dependencies = package.variant(kind).dependencies
            assert not any(d.startswith("com.paulscode:") for d in dependencies)

    def test_unpacked_parent_is_listed(self, registry, graph, publisher, metadata):
        registry.register("main")
        registry.register("codec", dependencies=["org.jcraft:jorbis:0.0.17"])
        graph.extend("codec", ["main"], ExtensionPolicy.LIBRARY)
        bundle = registry.register("codecs", kind=UnitKind.BUNDLE, members=["codec"])
        graph.extend("codecs", ["codec"])

        package = publisher.publish(bundle, metadata)

        assert package.variant(VariantKind.API).dependencies == [
            "com.paulscode:main:1.0.0-SNAPSHOT",
            "org.jcraft:jorbis:0.0.17",
        ]

    def test_later_member_wins_on_conflict(self, registry, graph, publisher, metadata):
        registry.register("a", dependencies=["org.jcraft:jorbis:0.0.15"])
        registry.register("b", dependencies=["org.jcraft:jorbis:0.0.17"])
        bundle = registry.register("ab", kind=UnitKind.BUNDLE, members=["a", "b"])
        graph.extend("ab", ["a", "b"])

        package = publisher.publish(bundle, metadata)

        assert package.variant(VariantKind.RUNTIME).dependencies == ["org.jcraft:jorbis:0.0.17"]
