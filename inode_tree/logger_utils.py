# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import logging
import os
import sys

from inode_tree.tree_config import LOG_LEVEL_ENV


def get_logger(name: str = "inode_tree") -> logging.Logger:
    """
    Return a logger writing diagnostics to stderr.
    The level defaults to WARNING and can be set with INODE_TREE_LOG_LEVEL.
    When the root logger is already configured, records only propagate
    to it, so an embedding program sees each diagnostic once.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        level = logging.getLevelName(
            os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
        # Unknown names come back as "Level <name>" strings
        logger.setLevel(level if isinstance(level, int) else logging.WARNING)
        if not logging.getLogger().handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(levelname)s: %(message)s"))
            logger.addHandler(handler)
    return logger
