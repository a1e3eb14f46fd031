#!/usr/bin/env python3

import argparse
from typing import List, Optional

from objectschema.core.config import load_config
from objectschema.core.log import configure_from_config
from objectschema.cli import config, validate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="objectschema", description="objectschema CLI Toolkit")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they accept the loaded config)
    validate.register(subparsers)
    config.register(subparsers)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        cfg = load_config()  # loaded once
        configure_from_config(cfg)
        return args.func(args, cfg)
    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
