import smtplib
import sys

from pydantic import ValidationError

from settings import DEFAULT_SMTP_PORT, SMTP_TIMEOUT
from src.errors import InvalidArgumentError, LogError, TransportError
from src.logfile import read_log
from src.logger import trace, trace_call
from src.models import LogMail, LogRunState


def deliver_log(smtp_server: str, path: str, sender: str, to, subject: str,
                port: int = DEFAULT_SMTP_PORT, timeout: float = SMTP_TIMEOUT) -> LogMail:
    """
    Mail the full content of a log file through an SMTP relay.

    Args:
        smtp_server: Relay hostname or address
        path: Log file to send (read in full at call time)
        sender: From address
        to: Comma-separated addresses, or a list of addresses
        subject: Subject line
        port: Relay port
        timeout: Socket timeout in seconds

    Returns:
        The LogMail that was sent

    Raises:
        LogNotFoundError / LogPermissionError / LogError: the log file can't be read
        InvalidArgumentError: empty relay, sender or recipient list, or a header with a line break
        TransportError: relay unreachable or message rejected
    """
    trace_call("deliver_log", smtp_server=smtp_server, path=path, sender=sender, to=to,
               subject=subject, port=port)

    body = read_log(path)

    try:
        mail = LogMail(smtp_server=smtp_server, port=port, sender=sender,
                       recipients=to, subject=subject, body=body)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid mail settings: {e}") from e

    # Build the message before connecting so bad headers never open a session
    try:
        message = mail.to_message()
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid mail header: {e}") from e

    trace(f"Connecting to {mail.smtp_server}:{mail.port}")
    try:
        with smtplib.SMTP(mail.smtp_server, mail.port, timeout=timeout) as smtp:
            smtp.send_message(message, from_addr=mail.sender, to_addrs=mail.recipients)
    except (smtplib.SMTPException, OSError) as e:
        raise TransportError(f"Failed to send {path} via {mail.smtp_server}: {e}") from e

    trace(f"Sent {path} to {', '.join(mail.recipients)}")
    return mail


def send_log(smtp_server: str, path: str, sender: str, to, subject: str,
             port: int = DEFAULT_SMTP_PORT, no_exit: bool = False) -> int:
    """
    Mail a log file and EXIT THE PROCESS with 0 (sent) or 1 (any failure).

    The specific failure is only reported on the trace channel. Pass
    no_exit=True to get the status back instead of exiting; use deliver_log
    when the structured error is needed.
    """
    try:
        deliver_log(smtp_server, path, sender, to, subject, port=port)
        exit_code = 0
    except LogError as e:
        trace(f"Send failed: {e}")
        exit_code = 1

    if no_exit:
        return exit_code

    sys.exit(exit_code)


def send(state: LogRunState) -> dict:
    """Workflow step: mail the finished log, recording the exit status."""
    mail = state["mail"]
    exit_code = send_log(mail.smtp_server, state["path"], mail.sender, mail.recipients,
                         mail.subject, port=mail.port, no_exit=True)
    return {"exit_code": exit_code, "status": "sent" if exit_code == 0 else "send_failed"}
