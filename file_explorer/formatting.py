"""Text helpers for listing rows, permission strings and sizes."""

import datetime

# Bit masks in display order: owner, group, others
PERMISSION_BITS = [
    (0o400, 'r'), (0o200, 'w'), (0o100, 'x'),
    (0o040, 'r'), (0o020, 'w'), (0o010, 'x'),
    (0o004, 'r'), (0o002, 'w'), (0o001, 'x'),
]

SIZE_UNITS = [('K', 1024), ('M', 1024 ** 2), ('G', 1024 ** 3)]


def get_permissions_string(mode):
    """Helper function to format the nine rwx permission bits"""
    return ''.join(char if mode & mask else '-' for mask, char in PERMISSION_BITS)


def get_mode_string(mode, is_dir):
    """Permission string prefixed with the 'd'/'-' type marker"""
    return ('d' if is_dir else '-') + get_permissions_string(mode)


#Helper Function for Sizing Format.
def format_file_size(size):
    if size < 1024:
        return f"{size}B"
    for unit, divisor in SIZE_UNITS:
        if size < divisor * 1024 or unit == 'G':
            return f"{size / divisor:.1f}{unit}"


def format_mtime(timestamp):
    return datetime.datetime.fromtimestamp(timestamp).strftime('%Y-%m-%d %H:%M')


def entry_marker(is_dir):
    return "[DIR] " if is_dir else "[FILE]"


def format_entry_row(name, is_dir, st, owner, group):
    """
    Build one detailed listing row.

    :param name: Entry name shown in the last column.
    :param is_dir: Whether the entry is a directory (size column shows <DIR>).
    :param st: os.stat_result for the entry.
    :param owner: Resolved owner name.
    :param group: Resolved group name.
    :return: The formatted row.
    """
    size = "<DIR>" if is_dir else format_file_size(st.st_size)
    return (
        f"{get_mode_string(st.st_mode, is_dir)} {st.st_nlink:>3} "
        f"{owner:>8} {group:>8} {size:>8} {format_mtime(st.st_mtime)} {name}"
    )
