# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

from typing import TYPE_CHECKING

from inode_tree import utils
from inode_tree.logger_utils import get_logger
from inode_tree.registry import DuplicateReport
from inode_tree.tree_config import TREE_BRANCH, TREE_GUIDE, WalkConfig

if TYPE_CHECKING:
    from inode_tree.walker import FileEntry, WalkState

logger = get_logger("inode_tree.report")


class ReportPrinter:
    """
    Renders tree lines while the walk runs and the final
    duplicate/summary report once it is finished.
    """

    def __init__(self, config: WalkConfig) -> None:
        self.cfg = config

    def format_entry_line(self, entry: "FileEntry", depth: int) -> str:
        """
        Build one tree line:
        <guides><branch>(<type>) <name>[ [size]][ [perms]][ [inode: n]]
        """
        parts = [
            TREE_GUIDE * depth,
            TREE_BRANCH,
            f"({utils.entry_type_char(entry.kind)}) {entry.name}",
        ]
        if self.cfg.show_size and not entry.is_dir:
            parts.append(f" [{utils.format_size(entry.size)}]")
        if self.cfg.show_permissions:
            parts.append(
                f" [{utils.format_permissions(entry.mode, entry.kind)}]")
        if self.cfg.show_inode:
            parts.append(f" [inode: {entry.inode}]")
        if self.cfg.show_owner:
            parts.append(
                f" [owner: {utils.format_owner(entry.uid, entry.gid)}]")
        return "".join(parts)

    @staticmethod
    def print_header(start_path: str) -> None:
        print(start_path)

    def print_entry(self, entry: "FileEntry", depth: int) -> None:
        print(self.format_entry_line(entry, depth))

    @staticmethod
    def format_duplicate_report(report: DuplicateReport,
                                total_files: int) -> list[str]:
        # Lines of the duplicate report followed by the summary
        lines = ["", "Duplicate files found (by inode):"]
        for group in report.groups:
            lines.append(f"[inode: {group.key}]")
            lines.extend(f"{TREE_BRANCH}{path}" for path in group.paths)

        plural = "s" if report.group_count != 1 else ""
        lines.append("")
        lines.append(f"Total files: {total_files}")
        lines.append(
            f"Duplicate files: {report.duplicate_files}"
            f" ({report.group_count} group{plural})"
        )
        return lines

    def print_summary(self, state: "WalkState") -> None:
        """
        Print the duplicate report when detection is enabled,
        otherwise only the total number of files visited.
        """
        if not self.cfg.detect_duplicates:
            print(f"\nTotal files: {state.total_files}")
            return

        report = state.registry.report()
        for line in self.format_duplicate_report(report, state.total_files):
            print(line)

        if self.cfg.output_file_path:
            self.save_report(
                report, state.total_files, self.cfg.output_file_path)

    def save_report(self, report: DuplicateReport,
                    total_files: int,
                    output_report_path: str) -> None:
        # Save the duplicate report to a specified file
        try:
            with open(output_report_path, "w", encoding="utf-8") as f:
                f.writelines(
                    line + "\n" for line
                    in self.format_duplicate_report(report, total_files)
                )
            logger.info("Saved duplicate report to: %s", output_report_path)
        except OSError as e:
            logger.error("Failed to save report to %s: %s",
                         output_report_path, e)
