# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import sys
from typing import Optional, Sequence

from inode_tree.cli_args import ArgumentParserAdapter
from inode_tree.logger_utils import get_logger
from inode_tree.report import ReportPrinter
from inode_tree.tree_config import WalkConfig
from inode_tree.walker import DirectoryWalker

logger = get_logger("inode_tree.main")


def main(argv: Optional[Sequence[str]] = None) -> None:
    # Parse command-line arguments (start directory, display flags)
    adapter = ArgumentParserAdapter(prog="inode-tree")
    args = adapter.parse(argv)

    try:
        config = WalkConfig(
            start_path=args.directory,
            show_inode=args.inode,
            show_permissions=args.permissions,
            show_size=args.size,
            # -i and -h imply duplicate detection
            detect_duplicates=args.duplicates or args.inode or args.hash,
            use_hash=args.hash,
            show_owner=args.owner,
            output_file_path=args.output,
        )
    except ValueError as e:
        adapter.error(str(e))

    if config.output_file_path and not config.detect_duplicates:
        logger.warning(
            "--output has no effect without -d, -i or -h;"
            " no duplicate report will be saved."
        )

    printer = ReportPrinter(config)
    walker = DirectoryWalker(config, printer)
    try:
        state = walker.run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        sys.exit(130)

    printer.print_summary(state)


# Allow running the script directly
if __name__ == "__main__":
    main()
