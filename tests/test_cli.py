# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.


import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def create_file(path: Path, content: str = "data") -> str:
    path.write_text(content)
    return str(path)


def run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ, PYTHONIOENCODING="utf-8")
    result = subprocess.run(
        [sys.executable, "-m", "inode_tree", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        cwd=PROJECT_ROOT,
        env=env,
    )
    return result


def test_help_shows_usage() -> None:
    result = run_cli("--help")
    assert result.returncode == 0
    assert "usage" in result.stdout.lower()


def test_missing_directory_argument() -> None:
    result = run_cli()
    assert result.returncode == 1
    assert result.stdout == ""
    assert "usage" in result.stderr.lower()


def test_unknown_flag(tmp_path: Path) -> None:
    result = run_cli("-x", str(tmp_path))
    assert result.returncode == 1
    assert result.stdout == ""
    assert "usage" in result.stderr.lower()


def test_plain_listing(tmp_path: Path) -> None:
    create_file(tmp_path / "a.txt")

    result = run_cli(str(tmp_path))
    assert result.returncode == 0
    assert result.stdout == (
        f"{tmp_path}\n"
        "├── (f) a.txt\n"
        "\n"
        "Total files: 1\n"
    )


def test_hardlink_duplicates_reported(tmp_path: Path) -> None:
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    a = create_file(root / "sub" / "a.txt", "x" * 2048)
    os.link(a, root / "b.txt")
    inode = os.stat(a).st_ino

    result = run_cli("-d", "-s", str(root))
    assert result.returncode == 0
    assert "│   ├── (f) a.txt [2.0K]" in result.stdout
    assert "├── (f) b.txt [2.0K]" in result.stdout
    assert f"[inode: {inode}]" in result.stdout
    assert f"├── {a}" in result.stdout
    assert f"├── {root / 'b.txt'}" in result.stdout
    assert "Total files: 2" in result.stdout
    assert "Duplicate files: 2 (1 group)" in result.stdout


def test_inode_flag_enables_duplicates(tmp_path: Path) -> None:
    create_file(tmp_path / "a.txt")

    result = run_cli("-i", str(tmp_path))
    assert result.returncode == 0
    assert "Duplicate files found (by inode):" in result.stdout
    assert "Duplicate files: 0 (0 groups)" in result.stdout


def test_hash_flag_warns_and_falls_back(tmp_path: Path) -> None:
    create_file(tmp_path / "a.txt")

    result = run_cli("-h", str(tmp_path))
    assert result.returncode == 0
    assert "not implemented" in result.stderr
    assert "Duplicate files found (by inode):" in result.stdout


def test_nonexistent_start_directory(tmp_path: Path) -> None:
    missing = tmp_path / "missing"

    result = run_cli(str(missing))
    assert result.returncode == 0
    assert str(missing) in result.stderr
    assert result.stdout == "\nTotal files: 0\n"


@pytest.mark.skipif(os.geteuid() == 0,
                    reason="root ignores directory permissions")
def test_unreadable_subdirectory_exit_zero(tmp_path: Path) -> None:
    locked = tmp_path / "locked"
    locked.mkdir()
    create_file(tmp_path / "z.txt")
    locked.chmod(0)
    try:
        result = run_cli(str(tmp_path))
    finally:
        locked.chmod(0o755)

    assert result.returncode == 0
    assert str(locked) in result.stderr
    assert "├── (f) z.txt" in result.stdout


def test_output_report(tmp_path: Path) -> None:
    scan = tmp_path / "scan"
    scan.mkdir()
    a = create_file(scan / "a.txt")
    os.link(a, scan / "b.txt")
    report = tmp_path / "report.txt"

    result = run_cli("-d", "--output", str(report), str(scan))
    assert result.returncode == 0
    assert report.exists()
    assert a in report.read_text(encoding="utf-8")


def test_output_without_duplicate_detection_warns(tmp_path: Path) -> None:
    scan = tmp_path / "scan"
    scan.mkdir()
    create_file(scan / "a.txt")
    report = tmp_path / "report.txt"

    result = run_cli("--output", str(report), str(scan))
    assert result.returncode == 0
    assert "--output has no effect" in result.stderr
    assert not report.exists()


def test_deep_tree_exits_zero(tmp_path: Path) -> None:
    levels = 1100
    dirs = []
    current = str(tmp_path / "deep")
    os.mkdir(current)
    for _ in range(levels):
        current = os.path.join(current, "a")
        os.mkdir(current)
        dirs.append(current)
    try:
        result = run_cli(str(tmp_path / "deep"))
    finally:
        for path in reversed(dirs):
            os.rmdir(path)

    assert result.returncode == 0
    assert "RecursionError" not in result.stderr
    assert result.stdout.endswith("├── (d) a\n\nTotal files: 0\n")
