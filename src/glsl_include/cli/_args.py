"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode.

    Args:
        parser: ArgumentParser to add the flag to
    """
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_sources_arg(parser: argparse.ArgumentParser) -> None:
    """Add the positional source files/directories argument."""
    parser.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="Shader source files or directories; each file is registered under its file name",
    )


def add_skip_block_comments_flag(parser: argparse.ArgumentParser) -> None:
    """Add --skip-block-comments (overrides merge.skip_block_comments)."""
    parser.add_argument(
        "--skip-block-comments",
        action="store_true",
        default=None,
        help="Ignore #include lines that start inside /* ... */ comments",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add flags shared by every source-processing command.

    Adds: PATH..., --json, --skip-block-comments
    """
    add_sources_arg(parser)
    add_json_flag(parser)
    add_skip_block_comments_flag(parser)


__all__ = [
    "add_json_flag",
    "add_sources_arg",
    "add_skip_block_comments_flag",
    "add_standard_flags",
]
