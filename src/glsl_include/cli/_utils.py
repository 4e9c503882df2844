"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict

from glsl_include.core.config import ConfigManager, get_setting
from glsl_include.core.merge import IncludeMerger
from glsl_include.core.sources import merger_from_paths


def get_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Return the merged configuration for this invocation (loaded once)."""
    cfg = getattr(args, "_config", None)
    if cfg is None:
        config_path = getattr(args, "config", None)
        cfg = ConfigManager(config_path=Path(config_path) if config_path else None).load_config()
        args._config = cfg
    return cfg


def skip_block_comments(args: argparse.Namespace) -> bool:
    """Command-line flag wins over ``merge.skip_block_comments``."""
    flag = getattr(args, "skip_block_comments", None)
    if flag is not None:
        return bool(flag)
    return bool(get_setting(get_config(args), "merge.skip_block_comments", False))


def build_merger(args: argparse.Namespace) -> IncludeMerger:
    """Load the sources named on the command line into a merger."""
    cfg = get_config(args)
    extensions = get_setting(cfg, "sources.extensions")
    return merger_from_paths(
        args.paths,
        extensions,
        skip_block_comments=skip_block_comments(args),
    )


__all__ = ["get_config", "skip_block_comments", "build_merger"]
