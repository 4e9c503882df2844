"""Include resolution pipeline: scan, graph, order, substitute."""
from __future__ import annotations

from .engine import IncludeMerger, merge_sources
from .graph import DependencyGraph, build_graph
from .ordering import toposort
from .scanner import DirectiveScanner, IncludeDirective, ScanResult, scan
from .substitution import substitute, substitute_fragment

__all__ = [
    "IncludeMerger",
    "merge_sources",
    "DependencyGraph",
    "build_graph",
    "toposort",
    "DirectiveScanner",
    "IncludeDirective",
    "ScanResult",
    "scan",
    "substitute",
    "substitute_fragment",
]
