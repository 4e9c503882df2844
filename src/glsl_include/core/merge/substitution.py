"""Ordered textual substitution of include directives."""
from __future__ import annotations

from typing import Dict, List, Mapping, Sequence, Set

from .scanner import DirectiveScanner, IncludeDirective, ScanResult


def _deleted(directive: IncludeDirective) -> str:
    # Drop the whole line unless something follows the directive on it.
    if directive.tail_is_blank:
        return ""
    return directive.tail.lstrip()


def substitute_fragment(
    content: str,
    merged: Mapping[str, str],
    scans: Mapping[str, ScanResult],
    visited: Set[str],
    scanner: DirectiveScanner,
) -> str:
    """Replace the include directives of one fragment.

    The first directive for a name is replaced by that name's merged text;
    the rest of its line is kept. Later directives for the same name are
    deleted. A directive for an include-once fragment that was already
    visited in this merge is deleted as well.

    Args:
        content: Raw fragment text
        merged: Merged text of every fragment processed so far
        scans: Scan results (for include-once flags)
        visited: Names substituted or suppressed so far; updated in place
        scanner: Scanner used to find directive lines

    Returns:
        The fragment text with every directive resolved
    """
    handled: Set[str] = set()
    out: List[str] = []
    for line, directive in scanner.iter_lines(content):
        if directive is None:
            out.append(line)
            continue

        name = directive.name
        if name in handled:
            out.append(_deleted(directive))
            continue
        handled.add(name)

        if scans[name].pragma_once and name in visited:
            out.append(_deleted(directive))
        else:
            out.append(merged[name] + directive.tail)
        visited.add(name)

    return "".join(out)


def substitute(
    fragments: Mapping[str, str],
    scans: Mapping[str, ScanResult],
    order: Sequence[str],
    scanner: DirectiveScanner,
) -> str:
    """Merge fragments along ``order`` and return the root's text.

    ``order`` must be non-empty and list dependencies before dependents with
    the root last. Remaining ``#pragma once`` directives are stripped from
    the result.
    """
    merged: Dict[str, str] = {}
    visited: Set[str] = set()
    for name in order:
        merged[name] = substitute_fragment(fragments[name], merged, scans, visited, scanner)
    return scanner.strip_pragma_once(merged[order[-1]])


__all__ = ["substitute", "substitute_fragment"]
