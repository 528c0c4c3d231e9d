from typing import Iterable

from rich.console import Console
from rich.text import Text

from fie.utils.entry import EntryRecord, EntryType

NAME_STYLES = {
    EntryType.SYMLINK: '#ffc0cb',
    EntryType.DIRECTORY: '#00ffff',
    EntryType.OTHER: '#ffd700',
}
ERROR_STYLE = '#dc143c'
NOTICE_STYLE = '#ffd700'

def escape_name(name: str) -> str:
    """Escape non-printable characters, e.g. tab as ``\\t``."""
    return ''.join(char if char.isprintable() else repr(char)[1:-1] for char in name)


# label and gap to next column, aligned with record fields
HEADERS = (
    ('Permissions', ' '),
    ('Size', '   '),
    ('Last Modified', '      '),
    ('Name', ''),
)


def make_console(color: str = 'auto', stderr: bool = False) -> Console:
    """Create console for color mode.

    Parameters
    ----------
    color : str, default='auto'
        'always' forces escapes, 'never' disables them,
        'auto' emits them only on a capable terminal.
    stderr : bool, default=False
        Write to standard error.

    Returns
    -------
    Console
        Rich console.
    """
    if color == 'always':
        return Console(stderr=stderr, force_terminal=True, highlight=False)
    elif color == 'never':
        return Console(stderr=stderr, color_system=None, highlight=False)
    return Console(stderr=stderr, highlight=False)


class Renderer:
    """Table renderer.

    Attributes
    ----------
    console : Console
        Output console.
    error_console : Console
        Console for error messages.
    """

    def __init__(self, console: Console, error_console: Console):
        self.console = console
        self.error_console = error_console

    def render(self, records: Iterable[EntryRecord]) -> None:
        self.print_headers()
        for record in records:
            self.print_record(record)

    def print_headers(self) -> None:
        text = Text()
        for label, gap in HEADERS:
            text.append(label, style='underline')
            text.append(gap)
        self.console.print(text, soft_wrap=True)

    def print_record(self, record: EntryRecord) -> None:
        text = Text(f'{record.type.tag}{record.permissions}  {record.size}  {record.modified}  ')
        text.append(escape_name(record.display_name), style=NAME_STYLES[record.type])
        self.console.print(text, soft_wrap=True)

    def print_notice(self, message: str) -> None:
        self.console.print(Text(message, style=NOTICE_STYLE), soft_wrap=True)

    def print_error(self, message: str) -> None:
        self.error_console.print(Text(message, style=ERROR_STYLE), soft_wrap=True)
