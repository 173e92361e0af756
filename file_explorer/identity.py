"""
Owner/group lookups and permission support for the host platform.

POSIX systems resolve ids through the pwd/grp databases. Elsewhere the
lookups report "unsupported" so a detailed listing still prints.
"""

import os

try:
    import grp
    import pwd
except ImportError:  # not available outside POSIX
    grp = None
    pwd = None

UNKNOWN = "unknown"
UNSUPPORTED = "unsupported"

# True when the platform stores rwx bits for owner/group/others
SUPPORTS_POSIX_PERMISSIONS = os.name == 'posix'


def owner_name(uid):
    if pwd is None:
        return UNSUPPORTED
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return UNKNOWN


def group_name(gid):
    if grp is None:
        return UNSUPPORTED
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return UNKNOWN
