"""
glsl-include configuration management (YAML layers + environment overrides).
"""
from __future__ import annotations

import copy
import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import yaml

from glsl_include.core.exceptions import ConfigError
from glsl_include.core.schemas.validation import validate_payload
from glsl_include.core.utils.io import read_yaml
from glsl_include.core.utils.merge import deep_merge
from glsl_include.data import get_data_path

logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAMES = (".glsl-include.yml", ".glsl-include.yaml")


class ConfigManager:
    """Load, merge, and validate configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: GLSL_INCLUDE_<section>__<key>
    2. Project config: explicit ``config_path``, else ``.glsl-include.yml`` in ``root``
    3. Bundled defaults: glsl_include.data/config/defaults.yaml
    """

    ENV_PREFIX = "GLSL_INCLUDE_"

    def __init__(self, root: Optional[Path] = None, config_path: Optional[Path] = None) -> None:
        self.root = Path(root) if root is not None else Path.cwd()
        self.config_path = Path(config_path) if config_path is not None else None
        self.defaults_path = get_data_path("config", "defaults.yaml")

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        # Fail closed: configuration must never silently ignore invalid YAML.
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}", context={"path": str(path)}) from exc
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {path} must contain a mapping, got {type(data).__name__}",
                context={"path": str(path)},
            )
        return data

    def project_config_path(self) -> Optional[Path]:
        if self.config_path is not None:
            if not self.config_path.exists():
                raise ConfigError(
                    f"Config file not found: {self.config_path}",
                    context={"path": str(self.config_path)},
                )
            return self.config_path
        for name in PROJECT_CONFIG_NAMES:
            candidate = self.root / name
            if candidate.exists():
                return candidate
        return None

    # ------------------------------------------------------------------
    # Environment overrides
    # ------------------------------------------------------------------

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(self.ENV_PREFIX):
                continue
            raw = key[len(self.ENV_PREFIX):]
            segs = raw.split("__")
            if not raw or any(seg == "" for seg in segs):
                raise ConfigError(
                    f"Malformed {self.ENV_PREFIX}* key: empty segment in '{key}'.",
                    context={"key": key},
                )
            yield [seg.lower() for seg in segs], self._coerce_type(os.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur = root
        for part in path[:-1]:
            nxt = cur.get(part)
            if not isinstance(nxt, dict):
                nxt = {}
                cur[part] = nxt
            cur = nxt
        cur[path[-1]] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> Dict[str, Any]:
        result = copy.deepcopy(cfg)
        for path, value in self._iter_env_overrides():
            logger.debug("Config override from environment: %s=%r", ".".join(path), value)
            self._set_nested(result, path, value)
        return result

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load merged configuration.

        Args:
            validate: If True, validate against the bundled JSON schema

        Raises:
            ConfigError: On unreadable YAML, malformed env keys or schema failures.
        """
        cfg = self.load_yaml(self.defaults_path)

        project_path = self.project_config_path()
        if project_path is not None:
            logger.debug("Loading project config from %s", project_path)
            cfg = deep_merge(cfg, self.load_yaml(project_path))

        cfg = self.apply_env_overrides(cfg)

        if validate:
            validate_payload(cfg, "config.schema")
        return cfg


def get_setting(cfg: Dict[str, Any], path: str, default: Any = None) -> Any:
    """Get config value by dot-separated path like ``merge.skip_block_comments``."""
    current: Any = cfg
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return default if current is None else current


__all__ = ["ConfigManager", "get_setting", "PROJECT_CONFIG_NAMES"]
