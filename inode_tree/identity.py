# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

"""
Identity keys decide which regular files count as duplicates.

A key function takes a FileEntry and returns any hashable value; files
with equal keys land in the same DuplicateGroup. Only inode grouping is
implemented. A content-hash key would plug in here as another function.
"""

from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING

from inode_tree.logger_utils import get_logger

if TYPE_CHECKING:
    from inode_tree.walker import FileEntry

IdentityKeyFunc = Callable[["FileEntry"], Hashable]

logger = get_logger("inode_tree.identity")


def inode_key(entry: "FileEntry") -> Hashable:
    return entry.inode


def select_identity_key(use_hash: bool = False) -> IdentityKeyFunc:
    """
    Return the key function for a walk.
    Hash grouping was requested but is not available, so it falls back
    to inode grouping after a warning.
    """
    if use_hash:
        logger.warning(
            "Hash-based duplicate detection (-h) is not implemented;"
            " grouping files by inode instead."
        )
    return inode_key
