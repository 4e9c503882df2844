"""
glsl-include check command.

SUMMARY: Check that shader sources merge cleanly
"""

from __future__ import annotations

import argparse
import sys

from glsl_include.cli import OutputFormatter, add_standard_flags, build_merger
from glsl_include.core.exceptions import GlslIncludeError

SUMMARY = "Check that shader sources merge cleanly"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Run the full merge without writing anything."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        merger = build_merger(args)
        order = merger.order()
        merger.merge()
    except GlslIncludeError as e:
        formatter.error(e)
        return 1

    formatter.success(
        {"valid": True, "root": order[-1], "sources": len(merger)},
        f"✓ {len(merger)} source(s) merge cleanly (root: {order[-1]})",
    )
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
