#!/usr/bin/env python3
"""CLI entry point - subcommand routing"""

import argparse
import sys


def build_parser():
    parser = argparse.ArgumentParser(prog="cutplan", description="Board cutting planner")
    parser.add_argument("input", nargs="?", help="cut list (.xlsx or .csv)")
    parser.add_argument("--config", help="JSON file with boards, kerf and margin")
    parser.add_argument("-y", "--yes", action="store_true", help="do not ask for confirmation")
    parser.add_argument("--png", action="store_true", help="also save an overview PNG")
    parser.add_argument("-v", "--verbose", action="store_true", help="show progress logs")
    return parser


def main(argv=None):
    """CLI entry point

    Subcommands:
    - (none): interactive cutting plan
    - web: start the web server
    """
    argv = sys.argv[1:] if argv is None else argv

    if argv and argv[0] == "web":
        from .web import run_server
        run_server()
        return 0

    args = build_parser().parse_args(argv)

    from .log import setup_logging
    setup_logging("INFO" if args.verbose else "WARNING")

    from pydantic import ValidationError
    from .config import CuttingConfig, load_config
    try:
        config = load_config(args.config) if args.config else CuttingConfig()
    except (OSError, ValidationError) as e:
        print(f"❌ Invalid configuration: {e}")
        return 1

    from .interactive import run_interactive
    return run_interactive(config, args.input, assume_yes=args.yes, png=args.png)


if __name__ == "__main__":
    sys.exit(main())
