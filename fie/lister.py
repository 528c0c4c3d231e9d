import logging
import os
from typing import Iterable, List

from fie.connector import Connector
from fie.exceptions import PathNotFoundError
from fie.renderer import Renderer
from fie.utils.entry import EntryRecord
from fie.utils.format import make_record

LOGGER = logging.getLogger(__name__)

EMPTY_MESSAGE = 'Directory is empty.'


def sort_records(records: Iterable[EntryRecord]) -> List[EntryRecord]:
    return sorted(records, key=lambda record: os.fsencode(record.name))


class Lister:
    """Directory listing.

    Attributes
    ----------
    connector : Connector
        Filesystem connector.
    renderer : Renderer
        Output renderer.
    show_link_targets : bool, default=False
        Resolve and display symlink targets.
    """

    def __init__(
        self,
        connector: Connector,
        renderer: Renderer,
        show_link_targets: bool = False
    ):
        self.connector = connector
        self.renderer = renderer
        self.show_link_targets = show_link_targets

    def collect(self, path: str) -> List[EntryRecord]:
        """Build sorted records for directory content.

        Parameters
        ----------
        path : str
            Directory path.

        Returns
        -------
        List[EntryRecord]
            Records sorted by name.

        Raises
        ------
        PathNotFoundError
            If path does not exist.
        EnumerationDeniedError
            If path cannot be listed.
        """
        if not self.connector.exists(path):
            raise PathNotFoundError(path)
        entries = self.connector.scandir(path, read_links=self.show_link_targets)
        LOGGER.debug("found %d entries in '%s'", len(entries), path)
        return sort_records(make_record(entry) for entry in entries)

    def run(self, path: str) -> List[EntryRecord]:
        """List directory.

        Nothing is printed if the path cannot be listed.

        Parameters
        ----------
        path : str
            Directory path.

        Returns
        -------
        List[EntryRecord]
            Rendered records.
        """
        records = self.collect(path)
        if not records:
            self.renderer.print_notice(EMPTY_MESSAGE)
        else:
            self.renderer.render(records)
        return records
