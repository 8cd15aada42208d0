"""
Command-line interface for welc.

Usage:
    welc channels [-c HOST] [NAME ...]
    welc providers [-c HOST] [NAME ...]
    welc header [--encoding ENC] FILE

Example:
    welc channels -c DC01 Security "Microsoft-Windows-PowerShell/*"
"""

import argparse
import logging
import sys
import tomllib
from pathlib import Path
from typing import List, Optional

from ..config import get_config, set_config_path
from ..config.validators import LOG_LEVELS
from ..eventlog import EventLogChannelCollector, channel_configs, channel_definitions
from ..manifest import channel_definitions as header_channel_definitions
from ..manifest import read_header
from ..report import channel_configs_frame, channel_definitions_frame, render_frame
from ..system.commands import check_wevtutil_installed
from ..validation import (
    CommandError,
    ValidationError,
    WelcError,
    handle_cli_error,
    validate_enum_choice,
    validate_path_exists,
)

# --- Logging Setup ---
LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s"
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the `welc` command."""
    parser = argparse.ArgumentParser(
        prog="welc",
        description="Inspect Windows Event Log channel configuration and definitions.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a config.toml file (defaults to conf/config.toml).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Override the log level from the configuration (e.g., DEBUG).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    channels_parser = subparsers.add_parser(
        "channels", help="Show the configuration of event log channels on a host."
    )
    channels_parser.add_argument(
        "-c", "--computer", type=str, help="Remote host to query (default: local host)."
    )
    channels_parser.add_argument(
        "names", nargs="*", help="Log names or wildcard patterns (default: all logs)."
    )

    providers_parser = subparsers.add_parser(
        "providers", help="Show the channels registered providers write to."
    )
    providers_parser.add_argument(
        "-c", "--computer", type=str, help="Remote host to query (default: local host)."
    )
    providers_parser.add_argument(
        "names", nargs="*", help="Provider names or wildcard patterns (default: all providers)."
    )

    header_parser = subparsers.add_parser(
        "header", help="Show the channel definitions declared in an mc.exe header."
    )
    header_parser.add_argument("file", type=str, help="Header file generated by mc.exe.")
    header_parser.add_argument(
        "--encoding",
        type=str,
        default="utf-8",
        help="Text encoding of the header file (default: utf-8).",
    )

    return parser


def _make_collector(args: argparse.Namespace) -> EventLogChannelCollector:
    wevtutil_path = get_config().collector.wevtutil_path
    if not check_wevtutil_installed(wevtutil_path):
        raise CommandError(
            f"'{wevtutil_path}' was not found. It ships with Windows; "
            "set [collector] wevtutil_path in config.toml if it is not on PATH.",
            command=[wevtutil_path],
        )
    return EventLogChannelCollector(computer_name=args.computer)


def _run_channels(args: argparse.Namespace, max_rows: int) -> str:
    collector = _make_collector(args)
    channel = collector.collect(log_names=args.names or None, provider_names=[])
    return render_frame(channel_configs_frame(channel_configs(channel)), max_rows)


def _run_providers(args: argparse.Namespace, max_rows: int) -> str:
    collector = _make_collector(args)
    channel = collector.collect(log_names=[], provider_names=args.names or None)
    return render_frame(channel_definitions_frame(channel_definitions(channel)), max_rows)


def _run_header(args: argparse.Namespace, max_rows: int) -> str:
    path = validate_path_exists(args.file, field_name="header file")
    definitions = header_channel_definitions(read_header(path, encoding=args.encoding))
    return render_frame(channel_definitions_frame(definitions), max_rows)


_COMMANDS = {
    "channels": _run_channels,
    "providers": _run_providers,
    "header": _run_header,
}


def main_cli(argv: Optional[List[str]] = None) -> None:
    """
    Main command-line interface for welc.

    Parses arguments, loads the configuration, runs the selected command and
    prints its table to stdout.

    Raises:
        SystemExit: With code 1 on configuration, validation, command or
            parse errors.
    """
    args = build_parser().parse_args(argv)

    # Tables go to stdout, so log records go to stderr.
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    if args.config is not None:
        set_config_path(args.config)

    try:
        app_config = get_config()
        level_name = app_config.report.log_level
        if args.log_level:
            level_name = validate_enum_choice(
                args.log_level, LOG_LEVELS, field_name="--log-level", case_sensitive=False
            )
    except (OSError, ValidationError, tomllib.TOMLDecodeError) as e:
        handle_cli_error(error=e, context="configuration loading", exit_code=1, logger=logger)

    logging.getLogger().setLevel(getattr(logging, level_name))

    try:
        output = _COMMANDS[args.command](args, app_config.report.max_rows)
    except (ValidationError, WelcError, OSError) as e:
        handle_cli_error(error=e, context=f"'{args.command}' command", exit_code=1, logger=logger)

    print(output)


if __name__ == "__main__":
    main_cli()
