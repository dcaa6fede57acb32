"""Main CLI entry point for TSC Baseline."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__, service
from .config import BaselineConfig, ErrorFormat
from .errors import BaselineError
from .logging_utils import configure_logging
from .settings import get_default_baseline_path, get_default_ignore_messages

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "Save a baseline of TypeScript errors and compare new errors against it. "
    "Useful for type-safe feature development in TypeScript projects that have "
    "a lot of errors. This tool will filter out errors that are already in the "
    "baseline and only show new errors."
)


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="tsc-baseline",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tsc --noEmit | tsc-baseline save
  tsc --noEmit | tsc-baseline check
  tsc --noEmit | tsc-baseline check --error-format gitlab
  tsc-baseline add 3f1c...e9
  tsc-baseline clear
        """,
    )

    parser.add_argument(
        "-p",
        "--path",
        help="Path to file to save baseline errors to. Defaults to .tsc-baseline.json",
    )
    parser.add_argument(
        "--ignore-messages",
        "--ignoreMessages",
        dest="ignore_messages",
        action="store_true",
        default=None,
        help="Ignores specific type error messages and only counts errors by code.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="command")

    save_parser = subparsers.add_parser("save", help="Save compiler errors as the baseline")
    save_parser.add_argument("message", nargs="?", help="Compiler output (default: stdin)")

    add_parser = subparsers.add_parser("add", help="Accept an error hash into the baseline")
    add_parser.add_argument("hash", nargs="?", help="Identity hash reported by 'check'")

    check_parser = subparsers.add_parser("check", help="Report errors not in the baseline")
    check_parser.add_argument("message", nargs="?", help="Compiler output (default: stdin)")
    check_parser.add_argument(
        "--error-format",
        default=ErrorFormat.HUMAN.value,
        choices=[fmt.value for fmt in ErrorFormat],
        help="Format to output errors (default: human)",
    )

    subparsers.add_parser("clear", help="Remove the baseline file")

    return parser


def create_config(args: argparse.Namespace, cwd: Optional[Path] = None) -> BaselineConfig:
    """Create configuration from command line arguments and the environment."""
    ignore_messages = args.ignore_messages
    if ignore_messages is None:
        ignore_messages = get_default_ignore_messages()

    config = BaselineConfig(
        path=args.path or get_default_baseline_path(),
        ignore_messages=ignore_messages,
        error_format=getattr(args, "error_format", ErrorFormat.HUMAN.value),
    )
    return BaselineConfig(
        path=str(config.resolve_path(cwd)),
        ignore_messages=config.ignore_messages,
        error_format=config.error_format,
    )


def read_input(args: argparse.Namespace) -> str:
    """Return compiler output from stdin when piped, else the positional argument."""
    stdin_text = ""
    if sys.stdin is not None and not sys.stdin.isatty():
        stdin_text = sys.stdin.read()
    return stdin_text or args.message or ""


def run_save(args: argparse.Namespace, config: BaselineConfig) -> int:
    """Handle the save command."""
    error_log = read_input(args)
    if not error_log:
        logger.debug("No compiler output given, nothing saved")
        return 0

    service.save(error_log, config)
    print(f"\nSaved baseline errors to '{config.path}'")
    return 0


def run_add(args: argparse.Namespace, config: BaselineConfig) -> int:
    """Handle the add command."""
    service.add(args.hash, config)
    print(f"Added hash '{args.hash.strip()}' to baseline file '{config.path}'")
    return 0


def run_check(args: argparse.Namespace, config: BaselineConfig) -> int:
    """Handle the check command."""
    error_log = read_input(args)
    if not error_log:
        logger.debug("No compiler output given, nothing checked")
        return 0

    result = service.check(error_log, config)
    rendered = result.render(config.error_format)

    if config.error_format == ErrorFormat.GITLAB.value:
        print(json.dumps(rendered, indent=2), file=sys.stderr)
    else:
        print(rendered, file=sys.stderr)

    # New errors fail CI by default
    return 1 if result.has_new_errors else 0


def run_clear(args: argparse.Namespace, config: BaselineConfig) -> int:
    """Handle the clear command."""
    service.clear(config)
    print(f"Removed baseline file '{config.path}'")
    return 0


COMMANDS = {
    "save": run_save,
    "add": run_add,
    "check": run_check,
    "clear": run_clear,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help(sys.stderr)
        return 1

    try:
        configure_logging("DEBUG" if args.verbose else None)
        config = create_config(args)
        logger.debug("Running command", extra={"command": args.command, **config.to_dict()})
        return COMMANDS[args.command](args, config)

    except BaselineError as e:
        print(f"\n{e.message}\n", file=sys.stderr)
        return 1

    except Exception as e:
        logger.debug("Unexpected failure", exc_info=e)
        print(f"Internal error: {str(e)}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
