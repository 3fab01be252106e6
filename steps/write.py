from collections.abc import Iterable

from settings import LOG_ENCODING
from src.logfile import append_entry
from src.logger import trace_call
from src.models import LogRunState


def render_message(message) -> str:
    """Bytes are decoded as log text; anything else goes through str()."""
    if isinstance(message, (bytes, bytearray)):
        return bytes(message).decode(LOG_ENCODING, errors="replace")
    return str(message)


def write_log(path: str, message) -> None:
    """
    Append one timestamped line per message.

    message may be a single value or any iterable of messages (a list, a
    generator, lines read from stdin). Strings, bytes and non-iterable values
    count as one message. Each message is written verbatim, embedded newlines
    included, and the file is reopened for every line.
    """
    trace_call("write_log", path=path, message=message)

    if isinstance(message, (str, bytes, bytearray)) or not isinstance(message, Iterable):
        messages = [message]
    else:
        messages = message

    for item in messages:
        append_entry(path, render_message(item))


def write(state: LogRunState) -> dict:
    """Workflow step: append the run's messages."""
    write_log(state["path"], state["messages"])
    return {"status": "written"}
