"""
Build directory layout.

Maps units and artifact names to the paths the external build produces:
compiled classes and archives.
"""

from __future__ import annotations


class BuildLayout:
    """Output locations for one evaluation."""

    def __init__(self, archives_base_name: str, version: str, build_dir: str = "build") -> None:
        self.archives_base_name = archives_base_name
        self.version = version
        self.build_dir = build_dir.rstrip("/") or "."

    def classes_dir(self, unit_name: str) -> str:
        """Directory holding a unit's compiled output."""
        return f"{self.build_dir}/classes/{unit_name}"

    def archive_path(self, artifact_name: str, classifier: str | None = None) -> str:
        """Archive path: ``<base>-<artifact>-<version>[-<classifier>].jar`` under libs/."""
        stem = f"{self.archives_base_name}-{artifact_name}-{self.version}"
        if classifier:
            stem = f"{stem}-{classifier}"
        return f"{self.build_dir}/libs/{stem}.jar"
