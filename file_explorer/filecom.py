"""
Filesystem commands behind the explorer menu.

These functions do the actual work and raise OSError on failure; the shell
decides what to print.
"""

import errno
import logging
import os
import shutil
import stat

logger = logging.getLogger(__name__)

READ_ALL = stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH
WRITE_ALL = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH
EXEC_ALL = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH

# Highest value accepted for an octal permission string
MAX_OCTAL_MODE = 0o7777


class InvalidOctalError(ValueError):
    """Raised when a permission string is not a valid octal mode."""


def resolve(current_path, name):
    """Resolve a user supplied name against the current directory."""
    return os.path.join(current_path, name)


def entry_is_dir(entry):
    # Broken symlinks and unreadable entries count as non-directories
    try:
        return entry.is_dir()
    except OSError:
        return False


def sort_key(entry):
    return (not entry_is_dir(entry), entry.name)


def list_directory(path):
    """Return the immediate children of path, directories first then by name."""
    with os.scandir(path) as it:
        entries = list(it)
    entries.sort(key=sort_key)
    return entries


def list_subdirectories(path):
    return [entry.name for entry in list_directory(path) if entry_is_dir(entry)]


def search(root, term):
    """
    Walk root depth-first and yield (path, is_dir) for every name containing term.

    Directory symlinks are reported but not followed. Errors from unreadable
    directories propagate to the caller, ending the walk.
    """
    for entry in list_directory(root):
        is_dir = entry_is_dir(entry)
        if term in entry.name:
            yield entry.path, is_dir
        if entry.is_dir(follow_symlinks=False):
            yield from search(entry.path, term)


def copy_path(source, destination):
    """Copy a file (or a directory tree) to destination, overwriting it."""
    if os.path.isdir(source):
        shutil.copytree(source, destination, dirs_exist_ok=True)
    else:
        if os.path.isdir(destination):
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), destination)
        shutil.copy2(source, destination)
    logger.info("Copied %s to %s", source, destination)


def move_path(source, destination):
    # A plain rename: crossing devices fails with EXDEV instead of copying
    os.replace(source, destination)
    logger.info("Moved %s to %s", source, destination)


def delete_path(path):
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    else:
        os.remove(path)
    logger.info("Deleted %s", path)


def create_file(path):
    # Exclusive create so an entry appearing after the existence check is kept
    with open(path, 'x'):
        pass
    logger.info("Created file %s", path)


def create_directory(path):
    os.mkdir(path)
    logger.info("Created directory %s", path)


def get_permissions(path):
    return stat.S_IMODE(os.stat(path).st_mode)


def parse_octal(text):
    """
    Parse an octal permission string such as '755'.

    :param text: Raw user input.
    :return: The mode as an int.
    :raises InvalidOctalError: If text is not octal or exceeds 7777.
    """
    text = text.strip()
    try:
        value = int(text, 8)
    except ValueError:
        raise InvalidOctalError(f"not an octal value: {text!r}") from None
    if value < 0 or value > MAX_OCTAL_MODE:
        raise InvalidOctalError(f"octal value out of range: {text!r}")
    return value


def apply_permission_option(mode, option):
    """
    Compute the new mode for permission menu options 1-7.

    Option 7 replaces everything with r--r--r--, special bits included.
    Returns None for an unknown option.
    """
    if option == 1:
        return mode | READ_ALL
    if option == 2:
        return mode | WRITE_ALL
    if option == 3:
        return mode | EXEC_ALL
    if option == 4:
        return mode & ~READ_ALL
    if option == 5:
        return mode & ~WRITE_ALL
    if option == 6:
        return mode & ~EXEC_ALL
    if option == 7:
        return READ_ALL
    return None


def set_permissions(path, mode):
    os.chmod(path, mode)
    logger.info("Changed permissions of %s to %o", path, mode)
