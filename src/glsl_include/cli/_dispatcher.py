"""
Auto-discovery CLI dispatcher for glsl-include.

Scans cli/commands/ and registers every module found there as a command.
Adding a new command = just add a .py file to cli/commands/.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any

from glsl_include.cli._output import OutputFormatter
from glsl_include.cli._utils import get_config
from glsl_include.core.config import get_setting
from glsl_include.core.exceptions import ConfigError
from glsl_include.core.logging import configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def discover_commands() -> dict[str, dict[str, Any]]:
    """
    Discover all commands under cli/commands.

    Returns:
        Dict mapping command name to command info dict
    """
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue

        cmd_name = item.stem
        module = importlib.import_module(f"glsl_include.cli.commands.{cmd_name}")
        commands[cmd_name] = {
            "module": module,
            "summary": getattr(module, "SUMMARY", cmd_name),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }

    return commands


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with auto-discovered commands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="glsl-include",
        description="Flatten #include directives across named shader sources",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Configuration file (default: .glsl-include.yml in the current directory)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Override logging.level from the configuration",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
        metavar="<command>",
    )

    for cmd_name, cmd_info in sorted(discover_commands().items()):
        primary_name = cmd_name.replace("_", "-")
        aliases = [cmd_name] if primary_name != cmd_name else []
        cmd_parser = subparsers.add_parser(
            primary_name,
            aliases=aliases,
            help=cmd_info["summary"],
        )
        if cmd_info["register_args"]:
            cmd_info["register_args"](cmd_parser)
        if cmd_info["main"]:
            cmd_parser.set_defaults(_func=cmd_info["main"])

    return parser


def _get_version() -> str:
    from glsl_include import __version__

    return __version__


def _setup_logging(args: argparse.Namespace) -> None:
    cfg = get_config(args)
    level = args.log_level or get_setting(cfg, "logging.level", "WARNING")
    log_path = get_setting(cfg, "logging.path")
    configure_logging(level=level, log_path=Path(log_path) if log_path else None)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the glsl-include CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        _setup_logging(args)
    except ConfigError as e:
        OutputFormatter(json_mode=bool(getattr(args, "json", False))).error(e, error_code="config_error")
        return 1

    func: Callable[[argparse.Namespace], int] | None = getattr(args, "_func", None)
    if func is None:
        parser.print_help()
        return 0

    logger.debug("Running command %s", args.command)
    return int(func(args) or 0)


if __name__ == "__main__":
    sys.exit(main())
