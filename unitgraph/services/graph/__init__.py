"""
Unit graph services.

Registry, dependency graph, artifact derivation, publication and composition
of one build-description evaluation.
"""

from .artifacts import ArtifactDeriver
from .builder import DependencyGraph
from .composition import CompositionLayer
from .evaluator import BuildEvaluator, Evaluation
from .layout import BuildLayout
from .publisher import VariantPublisher
from .registry import UnitRegistry
from .versioning import SNAPSHOT_VERSION, resolve_version

__all__ = [
    "SNAPSHOT_VERSION",
    "ArtifactDeriver",
    "BuildEvaluator",
    "BuildLayout",
    "CompositionLayer",
    "DependencyGraph",
    "Evaluation",
    "UnitRegistry",
    "VariantPublisher",
    "resolve_version",
]
