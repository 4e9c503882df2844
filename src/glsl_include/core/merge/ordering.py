"""Topological ordering of fragments (Kahn's algorithm).

Using the toposort we both reject cyclic include sets and get the order in
which fragments must be merged: every fragment comes after all of the
fragments it includes, and the single root comes last.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, List

from ..exceptions import AmbiguousRootError, CyclicDependencyError
from .graph import DependencyGraph

logger = logging.getLogger(__name__)


def toposort(graph: DependencyGraph) -> List[str]:
    """Return the processing order for ``graph``, dependencies first.

    Kahn's walk starts from the root and visits includers before includes.
    Children are queued in reverse order of appearance, so reversing the walk
    merges a fragment's earlier includes before its later ones.

    Raises:
        AmbiguousRootError: Not exactly one fragment is left un-included.
        CyclicDependencyError: Some fragments are only reachable through a cycle.
    """
    in_degrees: Dict[str, int] = dict(graph.in_degrees)

    roots = graph.roots()
    if len(roots) != 1:
        raise AmbiguousRootError(roots)

    queue: Deque[str] = deque(roots)
    walk: List[str] = []
    while queue:
        current = queue.popleft()
        walk.append(current)
        for target in reversed(graph.out_edges[current]):
            in_degrees[target] -= 1
            if in_degrees[target] == 0:
                queue.append(target)

    remaining = [name for name, degree in in_degrees.items() if degree != 0]
    if remaining:
        raise CyclicDependencyError(remaining)

    walk.reverse()
    logger.debug("Processing order: %s", walk)
    return walk


__all__ = ["toposort"]
