from abc import ABC, abstractmethod
from typing import List

from fie.utils.entry import FSEntry


class Connector(ABC):
    """Abstract class for filesystem access."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check that path exists.

        Parameters
        ----------
        path : str
            File or directory path.

        Returns
        -------
        bool
            True if path exists.
        """
        pass

    @abstractmethod
    def scandir(self, path: str, read_links: bool = False) -> List[FSEntry]:
        """List directory content with metadata.

        Parameters
        ----------
        path : str
            Directory path.
        read_links : bool, default=False
            Resolve symlink targets.

        Returns
        -------
        List[FSEntry]
            Immediate children of the directory, unordered.

        Raises
        ------
        PathNotFoundError
            If the directory does not exist.
        EnumerationDeniedError
            If the directory itself cannot be listed.
        """
        pass
