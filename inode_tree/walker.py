# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import os
from dataclasses import dataclass, field

from inode_tree import utils
from inode_tree.identity import IdentityKeyFunc, select_identity_key
from inode_tree.logger_utils import get_logger
from inode_tree.registry import DuplicateRegistry
from inode_tree.report import ReportPrinter
from inode_tree.tree_config import MAX_PATH_LENGTH, WalkConfig

logger = get_logger("inode_tree.walker")


@dataclass
class FileEntry:
    """Metadata of one directory entry, taken from lstat."""

    name: str
    path: str
    kind: str
    size: int
    mode: int
    uid: int
    gid: int
    inode: int

    @classmethod
    def from_stat(cls, name: str, path: str,
                  st: os.stat_result) -> "FileEntry":
        return cls(
            name=name,
            path=path,
            kind=utils.kind_from_mode(st.st_mode),
            size=st.st_size,
            mode=st.st_mode,
            uid=st.st_uid,
            gid=st.st_gid,
            inode=st.st_ino,
        )

    @property
    def is_dir(self) -> bool:
        return self.kind == utils.KIND_DIRECTORY

    @property
    def is_regular(self) -> bool:
        return self.kind == utils.KIND_REGULAR


@dataclass
class WalkState:
    # Regular files visited so far
    total_files: int = 0
    registry: DuplicateRegistry = field(default_factory=DuplicateRegistry)


class DirectoryWalker:
    """
    Depth-first, pre-order walk over a directory tree.

    Entries are listed in the order the OS returns them and printed as
    they are visited. Regular files are counted and, when duplicate
    detection is on, registered under their identity key.
    """

    def __init__(self,
                 config: WalkConfig,
                 printer: ReportPrinter | None = None,
                 state: WalkState | None = None,
                 identity_key: IdentityKeyFunc | None = None) -> None:
        self.cfg = config
        self.printer = printer or ReportPrinter(config)
        self.state = state or WalkState()
        self.identity_key = identity_key
        if self.identity_key is None and config.detect_duplicates:
            self.identity_key = select_identity_key(config.use_hash)

    def run(self) -> WalkState:
        self.walk(self.cfg.start_path, 0)
        return self.state

    def walk(self, path: str, depth: int) -> None:
        """
        Walk the tree below path, printing entries as they are visited.

        Pending directories are kept on an explicit stack of
        (remaining names, directory, depth), so nesting depth is not
        bounded by the interpreter's recursion limit. Each directory is
        listed in one pass and closed right away, so deep trees do not
        hold one descriptor per level. The top of the stack is always
        the deepest directory, which keeps the output pre-order.
        """
        names = self._list_directory(path, depth)
        if names is None:
            return

        if depth == 0:
            self.printer.print_header(path)

        stack = [(iter(names), path, depth)]
        while stack:
            pending, parent, level = stack[-1]
            name = next(pending, None)
            if name is None:
                stack.pop()
                continue

            entry = self._inspect(parent, name)
            if entry is None:
                continue

            self.printer.print_entry(entry, level)

            if entry.is_dir:
                child_names = self._list_directory(entry.path, level + 1)
                if child_names is not None:
                    stack.append((iter(child_names), entry.path, level + 1))
            elif entry.is_regular:
                self._register_file(entry)

    @staticmethod
    def _list_directory(path: str, depth: int) -> list[str] | None:
        # Entry names in OS order; scandir never yields '.' or '..'
        try:
            with os.scandir(path) as scanner:
                names = [dir_entry.name for dir_entry in scanner]
        except OSError as e:
            logger.error("Cannot open directory %s (%s)",
                         path, e.strerror or e)
            return None
        logger.debug("Entering directory %s (depth %d)", path, depth)
        return names

    def _inspect(self, parent: str, name: str) -> FileEntry | None:
        # Build the entry from lstat, symlinks are never followed
        full_path = os.path.join(parent, name)
        if len(os.fsencode(full_path)) > MAX_PATH_LENGTH:
            logger.warning("Path too long, skipping %s", full_path)
            return None
        try:
            st = os.lstat(full_path)
        except OSError as e:
            logger.warning("Cannot stat %s (%s)", full_path, e.strerror or e)
            return None
        return FileEntry.from_stat(name, full_path, st)

    def _register_file(self, entry: FileEntry) -> None:
        self.state.total_files += 1
        if self.cfg.detect_duplicates:
            self.state.registry.register(
                self.identity_key(entry), entry.path)
