from datetime import datetime

from settings import DEFAULT_DATE_FORMAT
from src.errors import InvalidFormatError


def get_log_date(date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """
    Render the current local date and time wrapped in square brackets.

    Args:
        date_format: strftime pattern (default: "%Y-%m-%d %H:%M:%S")

    Returns:
        e.g. "[2025-01-01 09:30:00]"

    Raises:
        InvalidFormatError: date_format is not a string, or strftime rejects it
    """
    if not isinstance(date_format, str):
        raise InvalidFormatError(f"Date format must be a string, got {type(date_format).__name__}")

    try:
        rendered = datetime.now().strftime(date_format)
    except ValueError as e:
        raise InvalidFormatError(f"Invalid date format {date_format!r}: {e}") from e

    # Only a rendering that is exactly one bracket pair is left unwrapped
    inner = rendered[1:-1]
    if rendered.startswith("[") and rendered.endswith("]") and "[" not in inner and "]" not in inner:
        return rendered
    return f"[{rendered}]"
