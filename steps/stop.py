import sys

from settings import FINISH_MESSAGE
from src.logfile import append_entry
from src.logger import trace, trace_call
from src.models import LogRunState


def stop_log(path: str, no_exit: bool = False) -> None:
    """
    Write the "Log Finished" line, then EXIT THE PROCESS.

    By default this ends the whole host process with status 0, not just the
    function. Pass no_exit=True to return normally instead (e.g. to mail the
    log with send_log afterwards).
    """
    trace_call("stop_log", path=path, no_exit=no_exit)

    append_entry(path, FINISH_MESSAGE)

    if no_exit:
        return

    trace("Exiting with status 0")
    sys.exit(0)


def stop(state: LogRunState) -> dict:
    """Workflow step: write the closing line without exiting."""
    stop_log(state["path"], no_exit=True)
    return {"status": "stopped"}
