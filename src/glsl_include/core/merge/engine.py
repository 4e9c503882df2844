"""IncludeMerger - register shader fragments and merge them into one source.

Example:
    merger = IncludeMerger()
    merger.add("main.frag", "#include <common.glsl>\\nvoid main() {}\\n")
    merger.add("common.glsl", "#pragma once\\nfloat saturate(float x);\\n")
    source = merger.merge()
"""
from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .graph import DependencyGraph, build_graph
from .ordering import toposort
from .scanner import DirectiveScanner, ScanResult
from .substitution import substitute

logger = logging.getLogger(__name__)


class IncludeMerger:
    """Registry of named fragments plus the merge pipeline.

    Fragments are only validated when merging. A merger may be reused across
    merges; each merge works on fresh state and never modifies the registry.
    """

    def __init__(self, skip_block_comments: bool = False) -> None:
        self._sources: Dict[str, str] = {}
        self.scanner = DirectiveScanner(skip_block_comments=skip_block_comments)

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def add(self, name: str, content: str) -> None:
        """Add a source, replacing any source already registered as ``name``.

        Use ``#include <name>`` in another source to include this one.
        """
        self._sources[name] = content

    def remove(self, name: str) -> None:
        """Remove a source. Unknown names are ignored."""
        self._sources.pop(name, None)

    def get(self, name: str) -> Optional[str]:
        """Return the raw content registered as ``name``, or None."""
        return self._sources.get(name)

    def clear(self) -> None:
        self._sources.clear()

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._sources)

    def __contains__(self, name: object) -> bool:
        return name in self._sources

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def scan(self) -> Dict[str, ScanResult]:
        return {name: self.scanner.scan(content) for name, content in self._sources.items()}

    def graph(self) -> DependencyGraph:
        """Build and validate the include graph of the registered sources."""
        return build_graph(self._sources, self.scan())

    def order(self) -> List[str]:
        """Return the merge order (dependencies first, root last)."""
        return toposort(self.graph())

    def merge(self) -> str:
        """Merge all added sources into one.

        Returns:
            The root source with every include resolved.

        Raises:
            MissingDependencyError: An include names an unregistered source.
            AmbiguousRootError: Not exactly one source is left un-included.
            CyclicDependencyError: The includes form a cycle.
        """
        scans = self.scan()
        graph = build_graph(self._sources, scans)
        order = toposort(graph)
        logger.debug("Merging %d sources with root %s", len(order), order[-1])
        return substitute(self._sources, scans, order, self.scanner)

    build = merge


def merge_sources(sources: Dict[str, str], *, skip_block_comments: bool = False) -> str:
    """Merge a name-to-content mapping in one call."""
    merger = IncludeMerger(skip_block_comments=skip_block_comments)
    for name, content in sources.items():
        merger.add(name, content)
    return merger.merge()


__all__ = ["IncludeMerger", "merge_sources"]
