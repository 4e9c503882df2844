"""Load shader sources from disk into a name-to-content mapping.

A source is registered under its file name, which is what ``#include <name>``
refers to. Directories are listed one level deep; include names are never
resolved as paths.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence, Union

from glsl_include.core.exceptions import DuplicateSourceError, SourceNotFoundError
from glsl_include.core.merge import IncludeMerger
from glsl_include.core.utils.io import read_text

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _iter_source_files(path: Path, extensions: Optional[Sequence[str]]) -> Iterable[Path]:
    if path.is_dir():
        for child in sorted(path.iterdir()):
            if not child.is_file():
                continue
            if extensions is not None and child.suffix not in extensions:
                continue
            yield child
    elif path.is_file():
        # Explicit files are taken regardless of suffix.
        yield path
    else:
        raise SourceNotFoundError(f"Source not found: {path}", context={"path": str(path)})


def load_sources(
    paths: Iterable[PathLike],
    extensions: Optional[Sequence[str]] = None,
) -> Dict[str, str]:
    """Read every source file under ``paths``.

    Args:
        paths: Files and/or directories
        extensions: Suffixes to pick up from directories (None means all files)

    Returns:
        Mapping of file name to content, in discovery order

    Raises:
        SourceNotFoundError: A path does not exist or cannot be read
        DuplicateSourceError: Two files share the same name
    """
    sources: Dict[str, str] = {}
    origins: Dict[str, Path] = {}
    for raw in paths:
        for file_path in _iter_source_files(Path(raw), extensions):
            name = file_path.name
            if name in origins:
                raise DuplicateSourceError(
                    f"Duplicate source name {name}: {origins[name]} and {file_path}",
                    context={"name": name, "paths": [str(origins[name]), str(file_path)]},
                )
            try:
                sources[name] = read_text(file_path)
            except (OSError, UnicodeDecodeError) as exc:
                raise SourceNotFoundError(
                    f"Cannot read source {file_path}: {exc}",
                    context={"path": str(file_path)},
                ) from exc
            origins[name] = file_path
            logger.debug("Loaded source %s from %s", name, file_path)
    return sources


def merger_from_paths(
    paths: Iterable[PathLike],
    extensions: Optional[Sequence[str]] = None,
    *,
    skip_block_comments: bool = False,
) -> IncludeMerger:
    """Build an IncludeMerger holding every source found under ``paths``."""
    merger = IncludeMerger(skip_block_comments=skip_block_comments)
    for name, content in load_sources(paths, extensions).items():
        merger.add(name, content)
    return merger


def merge_files(
    paths: Iterable[PathLike],
    extensions: Optional[Sequence[str]] = None,
    *,
    skip_block_comments: bool = False,
) -> str:
    """Load sources from disk and merge them in one call."""
    return merger_from_paths(paths, extensions, skip_block_comments=skip_block_comments).merge()


__all__ = ["load_sources", "merger_from_paths", "merge_files"]
