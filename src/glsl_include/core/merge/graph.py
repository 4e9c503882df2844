"""Dependency graph construction over registered fragments."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Set, Tuple

from ..exceptions import MissingDependencyError
from .scanner import ScanResult


@dataclass
class DependencyGraph:
    """Include edges between fragments.

    ``out_edges[a]`` are the names ``a`` includes (in order of first
    appearance); ``in_edges[b]`` are the names that include ``b``.
    Every registered name has an entry in all four maps.
    """

    out_edges: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    in_edges: Dict[str, Set[str]] = field(default_factory=dict)
    out_degrees: Dict[str, int] = field(default_factory=dict)
    in_degrees: Dict[str, int] = field(default_factory=dict)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self.out_edges)

    def roots(self) -> Tuple[str, ...]:
        """Names that no other fragment includes."""
        return tuple(name for name in self.out_edges if self.in_degrees[name] == 0)


def build_graph(
    fragments: Mapping[str, str],
    scans: Mapping[str, ScanResult],
) -> DependencyGraph:
    """Build forward and reverse edges from per-fragment scan results.

    Args:
        fragments: Registered fragments, name to raw content
        scans: Scan result for every registered fragment

    Returns:
        The validated graph

    Raises:
        MissingDependencyError: A fragment includes a name that is not registered.
    """
    # Validate every fragment before building anything.
    for name in fragments:
        for target in scans[name].includes:
            if target not in fragments:
                raise MissingDependencyError(target, included_by=name)

    graph = DependencyGraph()
    for name in fragments:
        graph.out_edges[name] = scans[name].includes
        graph.in_edges[name] = set()

    for source, targets in graph.out_edges.items():
        for target in targets:
            graph.in_edges[target].add(source)

    for name in fragments:
        graph.out_degrees[name] = len(graph.out_edges[name])
        graph.in_degrees[name] = len(graph.in_edges[name])

    return graph


__all__ = ["DependencyGraph", "build_graph"]
