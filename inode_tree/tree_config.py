# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Tree drawing glyphs: one guide per depth level, one branch per entry
TREE_GUIDE = "│   "
TREE_BRANCH = "├── "

# Binary-prefix units used by format_size, capped at T
SIZE_UNITS = ("B", "K", "M", "G", "T")

# Joined paths longer than this (in bytes) are reported and skipped
MAX_PATH_LENGTH = 4096

# Environment variable overriding the diagnostic log level
LOG_LEVEL_ENV = "INODE_TREE_LOG_LEVEL"


@dataclass(frozen=True)
class WalkConfig:
    """
    Configuration for a single directory walk.
    Immutable once constructed.
    """

    # The directory to start from.
    # Kept exactly as given, it is echoed as the header line.
    start_path: str

    # Print the inode number of every entry.
    show_inode: bool = False

    # Print the rwxr-xr-x permission string of every entry.
    show_permissions: bool = False

    # Print a human-readable size for every non-directory entry.
    show_size: bool = False

    # Group regular files by identity key and print the duplicate report.
    detect_duplicates: bool = False

    # Content hash grouping was requested.
    # Not implemented: the walker warns and groups by inode.
    use_hash: bool = False

    # Print the owning user and group names of every entry.
    show_owner: bool = False

    # Path of a file where the duplicate report will also be saved.
    # If None, the report only goes to stdout.
    output_file_path: Optional[str] = None

    def __post_init__(self) -> None:
        """
        Validate and normalize the configuration parameters.
        The dataclass is frozen, so normalized values are set directly.
        """
        object.__setattr__(
            self, "start_path", self.normalize_start_path(self.start_path))
        object.__setattr__(
            self, "output_file_path",
            self.normalize_file_path(self.output_file_path))

    @staticmethod
    def normalize_start_path(start_path: str) -> str:
        """
        Reject an empty start path. Existence is checked by the walker,
        an unreadable start directory is not a configuration error.
        """
        if start_path is None or not str(start_path).strip():
            raise ValueError("A start directory must be specified.")
        return str(start_path)

    @staticmethod
    def normalize_file_path(file_path: str | None) -> str | None:
        """
        Normalize the output report path to an absolute path.
        """
        if file_path is None:
            return None
        return str(Path(file_path).resolve())
