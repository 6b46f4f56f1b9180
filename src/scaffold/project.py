# src/scaffold/project.py

from dataclasses import dataclass, field

from .constants import DEFAULT_ACTIVE_VARIANT
from .graph import TaskGraph
from .mode import BuildMode
from .properties import FlagSource
from .prune import PruneReport
from .rules import ModuleKind
from .variants import VariantMatrix


@dataclass
class Project:
    """One module of a multi-module build.

    Plugins fill in ``mode``, ``namespace`` and ``reports``; everything else
    is supplied when the project is created.
    """

    path: str
    kind: ModuleKind
    flags: FlagSource
    graph: TaskGraph = field(default_factory=TaskGraph)
    variant_matrix: VariantMatrix = field(default_factory=VariantMatrix)
    active_variant: str = DEFAULT_ACTIVE_VARIANT

    # set by plugins
    mode: BuildMode | None = None
    namespace: str | None = None
    baseline_profile: bool = False
    reports: list[PruneReport] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.path.rsplit(":", 1)[-1] or self.path

    def finalize(self) -> None:
        """Compute variants, then run the graph's finalize callbacks."""
        self.variant_matrix.compute()
        self.graph.finalize()
