"""Directive scanning for shader fragments.

Handles:
- #include <name>  - Reference another registered fragment
- #pragma once     - Mark a fragment as include-once

Directives are only recognised at the start of a line (leading spaces and
tabs are allowed). Anything embedded mid-line, such as ``// #include <a>``,
is plain text.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class IncludeDirective:
    """An ``#include <name>`` occurrence at the start of a line."""

    name: str
    # Text after the closing '>' including the line ending.
    tail: str

    @property
    def tail_is_blank(self) -> bool:
        return not self.tail.strip()


@dataclass(frozen=True)
class ScanResult:
    """Scan result for a single fragment.

    ``includes`` holds each referenced name once, in order of first appearance.
    """

    includes: Tuple[str, ...] = field(default_factory=tuple)
    pragma_once: bool = False


class DirectiveScanner:
    """Line-based scanner for include and include-once directives.

    Args:
        skip_block_comments: When True, lines that start inside a ``/* ... */``
            block comment are never treated as directives. The default keeps
            plain line anchoring, so a directive alone on a line inside a block
            comment is still picked up.
    """

    INCLUDE_PATTERN = re.compile(r"^[ \t]*#include[ \t]+<([A-Za-z0-9_.]+)>")

    PRAGMA_ONCE_PATTERN = re.compile(r"^[ \t]*#pragma[ \t]+once\b")

    # Lines end at CR, LF or CRLF only; form feeds and the like stay mid-line.
    LINE_PATTERN = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+")

    def __init__(self, skip_block_comments: bool = False) -> None:
        self.skip_block_comments = skip_block_comments

    def iter_lines(self, content: str) -> Iterator[Tuple[str, Optional[IncludeDirective]]]:
        """Yield every line of ``content`` with its include directive, if any.

        Lines keep their endings, so joining the yielded lines reproduces
        ``content`` exactly.
        """
        for line, is_code in self._iter_marked_lines(content):
            match = self.INCLUDE_PATTERN.match(line) if is_code else None
            if match is None:
                yield line, None
            else:
                yield line, IncludeDirective(name=match.group(1), tail=line[match.end():])

    def find_includes(self, content: str) -> Tuple[str, ...]:
        """Return unique included names in order of first appearance."""
        seen: dict[str, None] = {}
        for _, directive in self.iter_lines(content):
            if directive is not None:
                seen.setdefault(directive.name, None)
        return tuple(seen)

    def has_pragma_once(self, content: str) -> bool:
        """Check whether any line of ``content`` starts with ``#pragma once``."""
        return any(
            is_code and self.PRAGMA_ONCE_PATTERN.match(line)
            for line, is_code in self._iter_marked_lines(content)
        )

    def strip_pragma_once(self, content: str) -> str:
        """Remove every ``#pragma once`` directive.

        A line holding only the directive is dropped with its line ending.
        Anything after the directive, such as a trailing comment, is kept
        with its leading whitespace removed.
        """
        kept: List[str] = []
        for line, is_code in self._iter_marked_lines(content):
            match = self.PRAGMA_ONCE_PATTERN.match(line) if is_code else None
            if match is None:
                kept.append(line)
                continue
            rest = line[match.end():]
            if rest.strip():
                kept.append(rest.lstrip())
        return "".join(kept)

    def scan(self, content: str) -> ScanResult:
        """Scan a fragment for its includes and include-once declaration."""
        return ScanResult(
            includes=self.find_includes(content),
            pragma_once=self.has_pragma_once(content),
        )

    def _iter_marked_lines(self, content: str) -> Iterator[Tuple[str, bool]]:
        """Yield ``(line, is_code)``; ``is_code`` is False inside block comments."""
        in_comment = False
        for line in self.LINE_PATTERN.findall(content):
            if not self.skip_block_comments:
                yield line, True
                continue
            yield line, not in_comment
            in_comment = _advance_comment_state(line, in_comment)


def _advance_comment_state(line: str, in_comment: bool) -> bool:
    """Return whether a block comment is still open at the end of ``line``."""
    pos = 0
    while True:
        if in_comment:
            end = line.find("*/", pos)
            if end < 0:
                return True
            in_comment = False
            pos = end + 2
        else:
            start = line.find("/*", pos)
            if start < 0:
                return False
            line_comment = line.find("//", pos)
            if 0 <= line_comment < start:
                return False
            in_comment = True
            pos = start + 2


def scan(content: str, *, skip_block_comments: bool = False) -> ScanResult:
    """Scan ``content`` with a throwaway scanner."""
    return DirectiveScanner(skip_block_comments=skip_block_comments).scan(content)


__all__ = ["DirectiveScanner", "IncludeDirective", "ScanResult", "scan"]
