"""
glsl-include merge command.

SUMMARY: Merge shader sources into a single source
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from glsl_include.cli import OutputFormatter, add_standard_flags, build_merger
from glsl_include.core.exceptions import GlslIncludeError
from glsl_include.core.utils.io import atomic_write_text

SUMMARY = "Merge shader sources into a single source"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_standard_flags(parser)
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write the merged source to FILE instead of stdout",
    )


def main(args: argparse.Namespace) -> int:
    """Merge the sources and write the root's resolved text."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        merger = build_merger(args)
        order = merger.order()
        content = merger.merge()
    except GlslIncludeError as e:
        formatter.error(e, error_code="merge_error")
        return 1

    root = order[-1]
    if args.output:
        output = Path(args.output)
        try:
            atomic_write_text(output, content)
        except OSError as e:
            formatter.error(e, error_code="write_error")
            return 1
        formatter.success(
            {"root": root, "sources": len(merger), "output": str(output)},
            f"Merged {len(merger)} source(s) from {root} into {output}",
        )
    elif formatter.json_mode:
        formatter.success({"root": root, "sources": len(merger), "content": content}, "")
    else:
        formatter.raw(content)

    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
