"""Command-line interface for sessionlog."""

import argparse
import sys
from pathlib import Path

from .config import LoggerConfig, LoggerConfigError, load_logger_config
from .formatting import delinearize
from .logging import Logger, LogWriteError
from .severity import InvalidLevelError, Severity, all_level_names, parse_level


def _level_arg(value: str) -> Severity:
    """argparse type for severity arguments."""
    try:
        return parse_level(value)
    except InvalidLevelError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="sessionlog",
        description="Append leveled, session-tagged records to a log file.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'log' subcommand
    log_parser = subparsers.add_parser("log", help="Append one record to a log file")
    target = log_parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--path", type=Path, help="Path to the log file")
    target.add_argument(
        "--config",
        type=Path,
        help="Path to a YAML logger config (path, level, session, ...)",
    )
    log_parser.add_argument(
        "--level",
        type=_level_arg,
        required=False,
        help="Severity threshold (default: INF, or the config value)",
    )
    log_parser.add_argument(
        "--session",
        required=False,
        help="Session ID (default: generated from the clock and PID)",
    )
    log_parser.add_argument(
        "--severity",
        type=_level_arg,
        default=Severity.INFO,
        help="Severity of the record (default: INF)",
    )
    log_parser.add_argument(
        "--untagged",
        action="store_true",
        help="Do not number multi-line records",
    )
    log_parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat a write failure as an error instead of a warning",
    )
    log_parser.add_argument(
        "message",
        nargs="?",
        help="Message to log (default: read from stdin)",
    )

    # 'levels' subcommand
    subparsers.add_parser("levels", help="List severity names, most urgent first")

    # 'decode' subcommand
    decode_parser = subparsers.add_parser(
        "decode", help="Decode the body of a multi-line record"
    )
    decode_parser.add_argument("body", help="Percent-encoded record body")

    return parser


def _build_logger(args: argparse.Namespace) -> Logger:
    """Build a Logger from parsed arguments, applying CLI overrides.

    Raises:
        LoggerConfigError: If --config cannot be loaded.
    """
    if args.config is not None:
        config = load_logger_config(args.config)
    else:
        config = LoggerConfig(path=args.path)

    return Logger(
        config.path,
        args.level if args.level is not None else config.level,
        args.session if args.session is not None else config.session,
        tag_multi_line=config.tag_multi_line and not args.untagged,
        raise_on_error=config.raise_on_error or args.strict,
    )


def _run_log(args: argparse.Namespace) -> int:
    try:
        logger = _build_logger(args)
    except LoggerConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    message = args.message
    if message is None:
        message = sys.stdin.read().removesuffix("\n").removesuffix("\r")

    try:
        ok = logger.log(args.severity, message)
    except LogWriteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0 if ok else 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success, 1 for a failed write, 2 for usage errors).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "log":
        return _run_log(args)

    if args.command == "levels":
        for name in all_level_names():
            print(name)
        return 0

    if args.command == "decode":
        print(delinearize(args.body))
        return 0

    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
