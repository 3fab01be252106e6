from email.message import EmailMessage
from typing import TypedDict, Optional
from pydantic import BaseModel, Field, field_validator

from settings import DEFAULT_SMTP_PORT


def split_recipients(value) -> list[str]:
    """Accept "a@x, b@y" or a list of addresses; drop blanks."""
    if isinstance(value, str):
        value = value.split(",")
    return [str(address).strip() for address in value if str(address).strip()]


class MailSettings(BaseModel):
    """Relay and envelope settings for mailing a finished log."""
    smtp_server: str = Field(min_length=1, description="Mail relay hostname or address")
    port: int = Field(default=DEFAULT_SMTP_PORT, gt=0, description="Mail relay port")
    sender: str = Field(min_length=1, description="From address")
    recipients: list[str] = Field(min_length=1, description="To addresses")
    subject: str = Field(default="", description="Mail subject line")

    @field_validator("smtp_server", "sender", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("recipients", mode="before")
    @classmethod
    def parse_recipients(cls, value):
        return split_recipients(value)


class LogMail(MailSettings):
    """A log file ready to send: mail settings plus the full log text as body."""
    body: str = Field(description="Full log file content, read at send time")

    def to_message(self) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = ", ".join(self.recipients)
        message["Subject"] = self.subject
        message.set_content(self.body)
        return message


class LogRunState(TypedDict):
    # Input
    log_directory: str
    log_file_name: str
    messages: list[str]
    mail: Optional[MailSettings]       # Set only when the run mails the log

    # Set by the start step
    path: Optional[str]

    # Set by the send step
    exit_code: Optional[int]           # 0 sent, 1 failed

    # Workflow status
    status: str  # "pending" | "started" | "written" | "stopped" | "sent" | "send_failed"
