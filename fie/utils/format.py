import datetime
import math
import stat
from typing import Optional

from fie.utils.entry import EntryRecord, FSEntry

SIZE_WIDTH = 5
TIME_WIDTH = 17
TIME_FORMAT = '%y-%m-%d %H:%M:%S'

# decimal scale, ascending
SIZE_UNITS = (
    (1, ''),
    (1_000, 'K'),
    (1_000_000, 'M'),
    (1_000_000_000, 'G'),
    (1_000_000_000_000, 'T'),
)

PERMISSION_BITS = (
    (stat.S_IRUSR, 'r'), (stat.S_IWUSR, 'w'), (stat.S_IXUSR, 'x'),
    (stat.S_IRGRP, 'r'), (stat.S_IWGRP, 'w'), (stat.S_IXGRP, 'x'),
    (stat.S_IROTH, 'r'), (stat.S_IWOTH, 'w'), (stat.S_IXOTH, 'x'),
)


def format_size(size: Optional[float]) -> str:
    """Format byte count as human-readable string.

    Uses decimal units (1K = 1000 bytes) and 3 significant digits.
    The result is left-justified to at least 5 characters.

    Parameters
    ----------
    size : Optional[float]
        Non-negative byte count, None if size is not shown.

    Returns
    -------
    str
        Formatted size, e.g. ``'1.5K '``.
    """
    if size is None:
        return ''.ljust(SIZE_WIDTH)
    size = math.ceil(size)
    index = 0
    while index + 1 < len(SIZE_UNITS) and SIZE_UNITS[index + 1][0] <= size:
        index += 1
    value = size / SIZE_UNITS[index][0]
    # 999.95K rounds to 1e+03K at 3 digits, show it as 1M
    if float(f'{value:.3g}') >= 1000 and index + 1 < len(SIZE_UNITS):
        index += 1
        value = size / SIZE_UNITS[index][0]
    suffix = SIZE_UNITS[index][1]
    return f'{value:.3g}{suffix}'.ljust(SIZE_WIDTH)


def format_permissions(mode: int) -> str:
    """Format permission bits as 9-character rwx string.

    Parameters
    ----------
    mode : int
        Permission bits, e.g. ``st_mode``.

    Returns
    -------
    str
        Permissions, e.g. ``'rwxr-xr--'``.
    """
    return ''.join(char if mode & bit else '-' for bit, char in PERMISSION_BITS)


def format_timestamp(last_modified: Optional[datetime.datetime]) -> str:
    if last_modified is None:
        return ''.ljust(TIME_WIDTH)
    return last_modified.strftime(TIME_FORMAT).ljust(TIME_WIDTH)


def make_record(entry: FSEntry) -> EntryRecord:
    """Build display record from raw entry metadata.

    Parameters
    ----------
    entry : FSEntry
        Entry metadata.

    Returns
    -------
    EntryRecord
        Formatted record.
    """
    return EntryRecord(
        type=entry.type,
        permissions=format_permissions(entry.mode),
        size=format_size(entry.size),
        modified=format_timestamp(entry.last_modified),
        name=entry.name,
        target=entry.target
    )
