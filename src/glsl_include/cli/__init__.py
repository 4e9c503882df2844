"""
glsl-include CLI package.

Commands are auto-discovered from cli/commands/*.py. Each command module
defines SUMMARY, register_args(parser) and main(args) -> int.
"""
from ._output import OutputFormatter
from ._args import (
    add_json_flag,
    add_sources_arg,
    add_skip_block_comments_flag,
    add_standard_flags,
)
from ._utils import build_merger, get_config, skip_block_comments

__all__ = [
    # Output formatting
    "OutputFormatter",
    # Argument helpers
    "add_json_flag",
    "add_sources_arg",
    "add_skip_block_comments_flag",
    "add_standard_flags",
    # Utilities
    "build_merger",
    "get_config",
    "skip_block_comments",
]
