from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence


class GlslIncludeError(Exception):
    """Base exception for glsl-include."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class MergeError(GlslIncludeError):
    """A registered fragment set cannot be merged into a single document."""


class MissingDependencyError(MergeError):
    """Raised when an include directive names a fragment that was never added."""

    def __init__(self, name: str, *, included_by: str | None = None) -> None:
        self.name = name
        self.included_by = included_by
        super().__init__(
            f"Cannot include missing source {name}.",
            context={"name": name, "included_by": included_by},
        )


class AmbiguousRootError(MergeError):
    """Raised when the number of fragments nobody includes is not exactly one."""

    def __init__(self, candidates: Sequence[str]) -> None:
        self.candidates: List[str] = list(candidates)
        super().__init__(
            "There must be exactly 1 file which is not included by any other file.",
            context={"candidates": self.candidates},
        )


class CyclicDependencyError(MergeError):
    """Raised when include edges form a cycle."""

    def __init__(self, names: Sequence[str]) -> None:
        self.names: List[str] = list(names)
        super().__init__(
            "Cyclic dependency detected.",
            context={"names": self.names},
        )


class SourceNotFoundError(GlslIncludeError, FileNotFoundError):
    """Raised when a source path cannot be read."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        GlslIncludeError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)


class DuplicateSourceError(GlslIncludeError, ValueError):
    """Raised when two source files would register under the same fragment name."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        GlslIncludeError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ConfigError(GlslIncludeError):
    """Raised when configuration cannot be loaded or fails validation."""


__all__ = [
    "GlslIncludeError",
    "MergeError",
    "MissingDependencyError",
    "AmbiguousRootError",
    "CyclicDependencyError",
    "SourceNotFoundError",
    "DuplicateSourceError",
    "ConfigError",
]
