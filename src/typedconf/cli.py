"""TypedConf command line entry point."""

import argparse
import logging
import sys
from typing import List, Optional

from .exceptions import TypedConfError
from .limits import ParserLimits, load_limits
from .parser import ConfigParser, ConfigSession
from .utils import dump_yaml


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""
    parser = argparse.ArgumentParser(prog="typedconf", description="TypedConf Configuration Parser")
    parser.add_argument("config", help="INI-style configuration file to parse.")
    parser.add_argument("--strict", action="store_true", help="Abort on the first invalid line")
    parser.add_argument("--limits", help="YAML file overriding the parser size limits")
    parser.add_argument("--print", dest="print_config", action="store_true", help="Print final configuration")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def print_config(session: ConfigSession) -> None:
    """Print configuration in YAML format.

    Args:
        session: Parsed session to print
    """
    print("Final Configuration:")
    print("=" * 50)
    print(dump_yaml(session.store.to_dict()))


def main(argv: Optional[List[str]] = None) -> int:
    """Parse, validate and optionally print a configuration file.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code  # (0 on success, 1 on any parse, validation or I/O error)
    """
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s %(message)s")

    try:
        limits = load_limits(args.limits) if args.limits else ParserLimits()
        session = ConfigParser(strict=args.strict, limits=limits).parse_file(args.config)
        session.validate()
    except (TypedConfError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not session.ok:
        # Lenient mode kept going past dropped entries; report them.
        for error in session.state.errors:
            print(f"Warning: {error}", file=sys.stderr)

    if args.print_config:
        print_config(session)
    return 0
