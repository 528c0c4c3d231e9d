import datetime
import logging
import os
import stat
from typing import List, Optional

from fie.connector import Connector
from fie.exceptions import EnumerationDeniedError, PathNotFoundError
from fie.utils.entry import EntryType, FSEntry, classify

LOGGER = logging.getLogger(__name__)


class LocalConnector(Connector):
    """Local file system connector."""

    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    def scandir(self, path: str, read_links: bool = False) -> List[FSEntry]:
        result = []
        try:
            with os.scandir(path) as it:
                for entry in it:
                    result.append(self._make_entry(entry, read_links))
        except NotADirectoryError as err:
            raise EnumerationDeniedError(path, 'not a directory') from err
        except PermissionError as err:
            raise EnumerationDeniedError(path, 'permission denied') from err
        except FileNotFoundError as err:
            raise PathNotFoundError(path) from err
        except OSError as err:
            raise EnumerationDeniedError(path, err.strerror or str(err)) from err
        return result

    def _make_entry(self, entry: os.DirEntry, read_links: bool) -> FSEntry:
        entry_type = self._classify(entry)
        mode = self._get_mode(entry)
        size = None
        last_modified = None
        try:
            is_file = entry.is_file()
            if is_file or entry.is_dir():
                last_modified = datetime.datetime.fromtimestamp(entry.stat().st_mtime)
            if is_file:
                size = entry.stat().st_size
        except (OSError, ValueError, OverflowError) as err:
            LOGGER.debug("metadata unavailable for '%s': %s", entry.path, err)
        target = self._get_target(entry) if read_links and entry_type is EntryType.SYMLINK else None
        return FSEntry(entry.name, entry.path, entry_type, mode, size, last_modified, target)

    @staticmethod
    def _classify(entry: os.DirEntry) -> EntryType:
        try:
            return classify(entry)
        except OSError as err:
            LOGGER.debug("type unavailable for '%s': %s", entry.path, err)
        try:
            mode = entry.stat(follow_symlinks=False).st_mode
        except OSError:
            return EntryType.OTHER
        if stat.S_ISLNK(mode):
            return EntryType.SYMLINK
        elif stat.S_ISDIR(mode):
            return EntryType.DIRECTORY
        return EntryType.OTHER

    @staticmethod
    def _get_mode(entry: os.DirEntry) -> int:
        try:
            return entry.stat().st_mode
        except OSError:
            pass
        # dangling symlink
        try:
            return entry.stat(follow_symlinks=False).st_mode
        except OSError as err:
            LOGGER.debug("permissions unavailable for '%s': %s", entry.path, err)
            return 0

    @staticmethod
    def _get_target(entry: os.DirEntry) -> Optional[str]:
        try:
            return os.readlink(entry.path)
        except OSError as err:
            LOGGER.debug("link target unavailable for '%s': %s", entry.path, err)
            return None
