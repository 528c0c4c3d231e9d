import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class EntryType(Enum):
    """Type of a directory entry, valued by its display tag."""

    SYMLINK = 'l'
    DIRECTORY = 'd'
    OTHER = '.'

    @property
    def tag(self) -> str:
        return self.value


def classify(entry: Any) -> EntryType:
    """Classify filesystem entry.

    Symlinks are checked before directories, so a link to a directory
    is still a link.

    Parameters
    ----------
    entry : Any
        Object with ``is_symlink`` and ``is_dir`` predicates, e.g. ``os.DirEntry``.

    Returns
    -------
    EntryType
        Entry type.
    """
    if entry.is_symlink():
        return EntryType.SYMLINK
    elif entry.is_dir():
        return EntryType.DIRECTORY
    else:
        return EntryType.OTHER


@dataclass(frozen=True)
class FSEntry:
    name: str
    path: str
    type: EntryType
    mode: int = 0
    size: Optional[int] = None
    last_modified: Optional[datetime.datetime] = None
    target: Optional[str] = None


@dataclass(frozen=True)
class EntryRecord:
    type: EntryType
    permissions: str
    size: str
    modified: str
    name: str
    target: Optional[str] = None

    @property
    def display_name(self) -> str:
        if self.target is None:
            return self.name
        return f'{self.name} -> {self.target}'
