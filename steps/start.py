import os
from pathlib import Path

from settings import START_MESSAGE
from src.errors import InvalidArgumentError, LogNotFoundError
from src.logfile import append_entry, translate_os_errors
from src.logger import trace, trace_call
from src.models import LogRunState


def start_log(log_directory: str, log_file_name: str, append: bool = False) -> str:
    """
    Create a fresh log file and write the "Log Started processing." line.

    Any existing file at the target path is deleted without confirmation
    or backup, unless append is True.

    Args:
        log_directory: Existing, writable directory
        log_file_name: File name inside log_directory
        append: Keep an existing file and add the start line to it

    Returns:
        Path of the log file

    Raises:
        InvalidArgumentError: an argument is empty
        LogNotFoundError: log_directory does not exist
        LogPermissionError: the directory is not writable or the old file can't be removed
    """
    trace_call("start_log", log_directory=log_directory, log_file_name=log_file_name, append=append)

    if not log_directory or not isinstance(log_directory, str):
        raise InvalidArgumentError("log_directory must be a non-empty string")
    if not log_file_name or not isinstance(log_file_name, str):
        raise InvalidArgumentError("log_file_name must be a non-empty string")

    directory = Path(log_directory)
    if not directory.is_dir():
        raise LogNotFoundError(f"Log directory does not exist: {log_directory}")

    path = os.path.join(log_directory, log_file_name)
    log_path = Path(path)

    if log_path.exists() and not append:
        trace(f"Removing existing file: {path}")
        with translate_os_errors(path, "remove"):
            log_path.unlink()

    if not log_path.exists():
        trace(f"Creating new file: {path}")
        with translate_os_errors(path, "create"):
            log_path.touch()

    append_entry(path, START_MESSAGE)
    return path


def start(state: LogRunState) -> dict:
    """Workflow step: create the log file for this run."""
    path = start_log(state["log_directory"], state["log_file_name"])
    return {"path": path, "status": "started"}
