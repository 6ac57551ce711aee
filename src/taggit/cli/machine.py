"""Machine readable reports.

Every field of a report is written as ``ETX key STX value``. A report starts
with the ``filename`` field; the first report of a stream carries no leading
ETX, so the stream for two files reads::

    filename STX a.mp3 ETX filetype STX mp3 ... ETX filename STX b.flac ...

The ETX in front of every later ``filename`` is intended: without it the last
value of one report would run into the next report's ``filename`` key, and
splitting on ETX would no longer yield whole fields.

NUL bytes are removed from values.
"""

from typing import Iterable, Tuple

from ..constants import ASCII_ETX, ASCII_STX
from ..tagging.value import TagType, TypedValue


def render_value(value: TypedValue) -> str:
    if value.type is TagType.BOOLEAN:
        return "true" if value.as_bool() else "false"
    if value.type is TagType.INTEGER:
        return str(value.as_int())
    if value.type is TagType.STRING:
        return value.as_str().replace("\x00", "")
    return ""


def render_field(key: str, value: str) -> str:
    return f"{ASCII_ETX}{key}{ASCII_STX}{value}"


def render_record(name: str, fields: Iterable[Tuple[str, TypedValue]], first: bool = True) -> str:
    """Frame one file report; *first* drops the ETX in front of the filename."""
    head = render_field("filename", name.replace("\x00", ""))
    if first:
        head = head[len(ASCII_ETX):]
    return head + "".join(render_field(key, render_value(value)) for key, value in fields)
