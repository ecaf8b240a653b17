# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import grp
import pwd
import stat

from inode_tree.tree_config import SIZE_UNITS

# File kinds reported by the walker
KIND_DIRECTORY = "directory"
KIND_REGULAR = "regular"
KIND_SYMLINK = "symlink"
KIND_OTHER = "other"

# (bit, glyph) pairs for owner, group and other, in display order
_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"), (stat.S_IWUSR, "w"), (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"), (stat.S_IWGRP, "w"), (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"), (stat.S_IWOTH, "w"), (stat.S_IXOTH, "x"),
)


def format_size(size_bytes: int) -> str:
    """
    Convert a file size in bytes to a short human-readable string
    (e.g., '0.0B', '1.0K', '2.5M').

    Divides by 1024 until the value drops below 1024 or the unit
    reaches T, which is never exceeded.
    """
    value = float(size_bytes)
    unit_index = 0
    while value >= 1024.0 and unit_index < len(SIZE_UNITS) - 1:
        value /= 1024.0
        unit_index += 1
    return f"{value:.1f}{SIZE_UNITS[unit_index]}"


def kind_from_mode(mode: int) -> str:
    """Classify raw st_mode bits into one of the KIND_* values."""
    if stat.S_ISDIR(mode):
        return KIND_DIRECTORY
    if stat.S_ISLNK(mode):
        return KIND_SYMLINK
    if stat.S_ISREG(mode):
        return KIND_REGULAR
    return KIND_OTHER


def format_permissions(mode: int, kind: str | None = None) -> str:
    """
    Translate st_mode bits into a 10-character string like 'drwxr-xr-x'.

    Args:
        mode (int): Raw mode bits, only the permission bits are required
            when kind is given.
        kind (str | None): One of the KIND_* values. Derived from mode
            if omitted.

    Returns:
        str: Type glyph ('d', 'l' or '-') followed by nine rwx glyphs.
    """
    if kind is None:
        kind = kind_from_mode(mode)
    if kind == KIND_DIRECTORY:
        type_glyph = "d"
    elif kind == KIND_SYMLINK:
        type_glyph = "l"
    else:
        type_glyph = "-"
    return type_glyph + "".join(
        glyph if mode & bit else "-" for bit, glyph in _PERMISSION_BITS
    )


def entry_type_char(kind: str) -> str:
    # Tree-line glyph: special files are shown as plain files
    if kind == KIND_DIRECTORY:
        return "d"
    if kind == KIND_SYMLINK:
        return "l"
    return "f"


def format_owner(uid: int, gid: int) -> str:
    """
    Resolve uid and gid to 'user:group'.
    Ids without a passwd/group entry are shown as numbers.
    """
    try:
        user = pwd.getpwuid(uid).pw_name
    except KeyError:
        user = str(uid)
    try:
        group = grp.getgrgid(gid).gr_name
    except KeyError:
        group = str(gid)
    return f"{user}:{group}"
