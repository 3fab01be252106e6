"""
Diagnostic trace channel for logkit.

Traces received arguments and key decisions to stderr (when VERBOSE is set)
and optionally to a separate trace file with timestamps. Never writes to the
log file being managed.
"""

import sys
from datetime import datetime, timezone

VERBOSE = False
TRACE_FILE = None


def trace(message: str) -> None:
    """
    Emit a diagnostic message on the trace channel.

    Args:
        message: The message to trace
    """
    if VERBOSE:
        print(f"VERBOSE: {message}", file=sys.stderr)

    if not TRACE_FILE:
        return

    try:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        with open(TRACE_FILE, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")

    except IOError as e:
        # Tracing must never break the operation being traced
        print(f"Warning: Failed to write to trace file: {e}", file=sys.stderr)


def trace_call(name: str, **arguments) -> None:
    """Trace an operation name together with the arguments it received."""
    rendered = ", ".join(f"{key}={value!r}" for key, value in arguments.items())
    trace(f"{name}({rendered})")
