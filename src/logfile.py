"""
Low-level log file access shared by the lifecycle steps.

Every call opens and closes its own handle; no handle outlives a call.
OS errors are translated into logkit errors with the original kept as cause.
"""

from contextlib import contextmanager
from pathlib import Path

from settings import LOG_ENCODING
from src.errors import LogError, LogNotFoundError, LogPermissionError
from src.timestamp import get_log_date


@contextmanager
def translate_os_errors(path, action: str):
    """
    Re-raise OS errors as logkit errors.

    Missing files become LogNotFoundError, access errors LogPermissionError,
    anything else (a directory in place of a file, a full disk) LogError.
    """
    try:
        yield
    except FileNotFoundError as e:
        raise LogNotFoundError(f"Cannot {action} {path}: {e.strerror or e}") from e
    except PermissionError as e:
        raise LogPermissionError(f"Cannot {action} {path}: {e.strerror or e}") from e
    except OSError as e:
        raise LogError(f"Cannot {action} {path}: {e.strerror or e}") from e


def format_entry(message) -> str:
    """Build one log record: "<timestamp> <message>" with a trailing newline."""
    return f"{get_log_date()} {message}\n"


def append_entry(path, message) -> None:
    """Append one timestamped record to the log file at path."""
    with translate_os_errors(path, "append to"):
        with open(path, "a", encoding=LOG_ENCODING) as f:
            f.write(format_entry(message))


def read_log(path) -> str:
    """Return the full text of the log file at path."""
    with translate_os_errors(path, "read"):
        try:
            return Path(path).read_text(encoding=LOG_ENCODING)
        except UnicodeDecodeError as e:
            raise LogError(f"Cannot read {path}: not valid {LOG_ENCODING} text ({e.reason})") from e
