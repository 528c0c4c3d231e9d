__version__ = '0.3.0'

from fie.config import ListingConfig
from fie.connector import Connector
from fie.exceptions import EnumerationDeniedError, PathNotFoundError
from fie.lister import Lister
from fie.local import LocalConnector
from fie.renderer import Renderer
from fie.utils.entry import EntryRecord, EntryType, FSEntry
