"""
Click context extension for the unitgraph CLI.

Provides the GraphContext dataclass passed through the Click command chain
via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.settings import UnitGraphSettings, load_settings

if TYPE_CHECKING:
    from ..core.models.description import BuildDescription
    from ..services.graph.evaluator import Evaluation


@dataclass
class GraphContext:
    """Extended context passed through the Click command chain.

    Attributes:
        cwd: Current working directory
        description_path: Build description file
        release: Whether versions are release timestamps
        verbose: Debug output to stderr
        settings: Loaded settings
    """

    cwd: Path
    description_path: Path
    release: bool
    verbose: bool = False
    settings: UnitGraphSettings = field(default_factory=UnitGraphSettings)
    _evaluation: Evaluation | None = field(default=None, repr=False)

    @classmethod
    def create(
        cls,
        cwd: Path | None = None,
        description: str | None = None,
        release: bool = False,
        verbose: bool = False,
    ) -> GraphContext:
        """Create a GraphContext for the current environment.

        Command-line values win over settings: ``--release`` forces a release
        build, ``--file`` replaces the configured description path.

        Args:
            cwd: Working directory override (defaults to Path.cwd())
            description: Build description path from the command line
            release: --release flag
            verbose: --verbose flag
        """
        if cwd is None:
            cwd = Path.cwd()

        settings = load_settings(start_dir=str(cwd))
        description_path = Path(description or settings.build.description)
        if not description_path.is_absolute():
            description_path = cwd / description_path

        return cls(
            cwd=cwd,
            description_path=description_path,
            release=release or settings.build.release,
            verbose=verbose,
            settings=settings,
        )

    @property
    def has_description(self) -> bool:
        return self.description_path.is_file()

    @property
    def repository_path(self) -> Path:
        """Local package repository database file."""
        path = Path(self.settings.repository.path)
        if not path.is_absolute():
            path = self.cwd / path
        return path

    def load_description(self) -> BuildDescription:
        from ..services.description.loader import load_description

        return load_description(self.description_path)

    def evaluate(self) -> Evaluation:
        """Evaluate the build description once per invocation."""
        if self._evaluation is None:
            from ..services.graph.evaluator import BuildEvaluator

            self._evaluation = BuildEvaluator().evaluate(
                self.load_description(), release=self.release
            )
        return self._evaluation
