"""
glsl-include - flatten #include directives across named shader sources

Sources are registered by name, merged in dependency order, and
``#pragma once`` sources are inserted at most once.
"""

from glsl_include.core.exceptions import (
    AmbiguousRootError,
    CyclicDependencyError,
    GlslIncludeError,
    MergeError,
    MissingDependencyError,
)
from glsl_include.core.merge import IncludeMerger, merge_sources

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "IncludeMerger",
    "merge_sources",
    "GlslIncludeError",
    "MergeError",
    "MissingDependencyError",
    "AmbiguousRootError",
    "CyclicDependencyError",
]
