# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field


@dataclass
class DuplicateGroup:
    """All registered paths sharing one identity key."""

    key: Hashable
    paths: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.paths)


@dataclass
class DuplicateReport:
    # Groups with more than one path, in the order keys were first seen
    groups: list[DuplicateGroup]

    # Sum of counts across the reported groups
    duplicate_files: int

    @property
    def group_count(self) -> int:
        return len(self.groups)


class DuplicateRegistry:
    """
    Groups file paths by identity key (the inode number today).

    Backed by a dict, so lookup is constant time and iteration follows
    the order in which keys were first registered. Paths are only ever
    appended for the lifetime of a run.
    """

    def __init__(self) -> None:
        self._groups: dict[Hashable, DuplicateGroup] = {}

    def register(self, identity_key: Hashable, path: str) -> None:
        # Create the group on first sight, otherwise append
        group = self._groups.get(identity_key)
        if group is None:
            group = DuplicateGroup(key=identity_key)
            self._groups[identity_key] = group
        group.paths.append(path)

    def report(self) -> DuplicateReport:
        # Singleton groups are not duplicates and are left out
        groups = [g for g in self._groups.values() if g.count > 1]
        return DuplicateReport(
            groups=groups,
            duplicate_files=sum(g.count for g in groups),
        )

    def groups(self) -> Iterator[DuplicateGroup]:
        # Every group, singletons included
        return iter(self._groups.values())

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, identity_key: Hashable) -> bool:
        return identity_key in self._groups
