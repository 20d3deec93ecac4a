"""
Plugin build command line.

Usage:
    plugin-build <out_dir> <target> [options]

Arguments:
    out_dir     - Output directory, removed and recreated on every run
    target      - Rust target triple passed to cargo
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .builder import Builder


class UsageErrorParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


class HelpAction(argparse.Action):
    """Print help and exit with status 1, as for any incomplete invocation."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS,
                 default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest,
                         default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help(sys.stderr)
        parser.exit(1)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the plugin build."""
    parser = UsageErrorParser(prog="plugin-build",
                              description="Plugin Build System",
                              add_help=False)
    parser.add_argument("-h", "--help", action=HelpAction,
                        help="Show this help message and exit")
    parser.add_argument("out_dir", help="Output directory")
    parser.add_argument("target", help="Rust target triple, e.g. x86_64-pc-windows-msvc")
    parser.add_argument("--assets", default="assets",
                        help="Directory whose contents are copied into the output directory")
    parser.add_argument("--path", default=".", dest="crate_dir",
                        help="Crate directory passed to cargo install")
    parser.add_argument("--cargo", default=os.environ.get("CARGO", "cargo"),
                        help="Cargo executable (default: $CARGO or cargo)")
    parser.add_argument("--no-progress", action="store_true",
                        help="Do not show a progress bar while copying assets")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point for the plugin build."""
    parser = build_parser()
    # Trailing positional arguments are ignored
    args, _ = parser.parse_known_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s: %(message)s')

    builder = Builder(
        args.out_dir,
        args.target,
        assets_dir=args.assets,
        crate_dir=args.crate_dir,
        cargo=args.cargo,
        show_progress=not args.no_progress,
    )

    success = builder.build()
    sys.exit(0 if success else 1)
