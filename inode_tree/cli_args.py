# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import argparse
import sys
from typing import NoReturn, Optional, Sequence


class _UsageErrorParser(argparse.ArgumentParser):
    # Usage errors exit with status 1 instead of argparse's 2
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


class ArgumentParserAdapter:
    def __init__(self, prog: Optional[str] = None):
        # -h is taken by hash mode, so help is long-option only
        self.parser = _UsageErrorParser(
            prog=prog,
            description="Print a directory tree with optional metadata"
                        " and report hard-linked (same inode) files",
            usage="%(prog)s [-i|-p|-s|-h|-d] [--owner]"
                  " [--output FILE] <directory>",
            add_help=False,
        )
        self._add_arguments()

    def _add_arguments(self):
        self.parser.add_argument(
            "directory",
            type=str,
            help="Mandatory parameter: start directory of the walk",
        )
        self.parser.add_argument(
            "-i",
            dest="inode",
            action="store_true",
            help="Optional: show inode numbers"
                 " (also enables duplicate detection)",
        )
        self.parser.add_argument(
            "-p",
            dest="permissions",
            action="store_true",
            help="Optional: show permissions (rwxr-xr-x)",
        )
        self.parser.add_argument(
            "-s",
            dest="size",
            action="store_true",
            help="Optional: show human-readable sizes",
        )
        self.parser.add_argument(
            "-h",
            dest="hash",
            action="store_true",
            help="Optional: hash-based duplicate detection."
                 " Not implemented, falls back to inode grouping",
        )
        self.parser.add_argument(
            "-d",
            dest="duplicates",
            action="store_true",
            help="Optional: detect duplicates (files sharing an inode)",
        )
        self.parser.add_argument(
            "--owner",
            action="store_true",
            help="Optional: show owning user and group",
        )
        self.parser.add_argument(
            "--output",
            type=str,
            default=None,
            help="Optional: also save the duplicate report to this file",
        )
        self.parser.add_argument(
            "--help",
            action="help",
            help="Show this help message and exit",
        )

    def parse(self, argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
        # Parse and return the command-line arguments
        return self.parser.parse_args(argv)

    def error(self, message: str) -> NoReturn:
        self.parser.error(message)
