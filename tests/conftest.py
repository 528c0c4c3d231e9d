import datetime
import io
from typing import Dict, List

import pytest
from rich.console import Console

from fie.connector import Connector
from fie.exceptions import PathNotFoundError
from fie.renderer import Renderer
from fie.utils.entry import FSEntry


class MemoryConnector(Connector):
    """In-memory connector keyed by directory path."""

    def __init__(self, tree: Dict[str, List[FSEntry]]):
        self.tree = tree
        self.scanned: List[str] = []

    def exists(self, path: str) -> bool:
        return path in self.tree

    def scandir(self, path: str, read_links: bool = False) -> List[FSEntry]:
        if path not in self.tree:
            raise PathNotFoundError(path)
        self.scanned.append(path)
        entries = self.tree[path]
        if not read_links:
            entries = [
                FSEntry(e.name, e.path, e.type, e.mode, e.size, e.last_modified) for e in entries
            ]
        return entries


class CapturedRenderer(Renderer):

    def __init__(self, color_system=None):
        self.out = io.StringIO()
        self.err = io.StringIO()
        super().__init__(
            Console(file=self.out, color_system=color_system, force_terminal=color_system is not None),
            Console(file=self.err, color_system=color_system, force_terminal=color_system is not None)
        )


@pytest.fixture
def renderer() -> CapturedRenderer:
    return CapturedRenderer()


@pytest.fixture
def mtime() -> datetime.datetime:
    return datetime.datetime(2023, 1, 2, 3, 4, 5)
