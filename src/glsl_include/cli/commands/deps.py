"""
glsl-include deps command.

SUMMARY: Show the include graph and merge order
"""

from __future__ import annotations

import argparse
import sys

from glsl_include.cli import OutputFormatter, add_standard_flags, build_merger
from glsl_include.core.exceptions import GlslIncludeError

SUMMARY = "Show the include graph and merge order"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        merger = build_merger(args)
        scans = merger.scan()
        graph = merger.graph()
        order = merger.order()
    except GlslIncludeError as e:
        formatter.error(e, error_code="graph_error")
        return 1

    sources = {
        name: {
            "includes": list(graph.out_edges[name]),
            "included_by": sorted(graph.in_edges[name]),
            "pragma_once": scans[name].pragma_once,
        }
        for name in order
    }

    if formatter.json_mode:
        formatter.json_output({"root": order[-1], "order": order, "sources": sources})
        return 0

    formatter.text(f"Root: {order[-1]}")
    formatter.text("Merge order:")
    for index, name in enumerate(order, start=1):
        marker = " (pragma once)" if sources[name]["pragma_once"] else ""
        formatter.text(f"  {index}. {name}{marker}")
        includes = sources[name]["includes"]
        if includes:
            formatter.text_kv("includes", ", ".join(includes), prefix="       ")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
