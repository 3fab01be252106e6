"""
Configuration for the logkit project.
"""

# Log file format
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"  # Sortable yyyy-MM-dd HH:mm:ss, local time
START_MESSAGE = "Log Started processing."
FINISH_MESSAGE = "Log Finished"
LOG_ENCODING = "utf-8"

# Mail relay (defaults, can be overridden via CLI or .env)
DEFAULT_SMTP_PORT = 25
SMTP_TIMEOUT = 30  # Seconds before a relay connection attempt is abandoned

# Environment variables read by main.py
ENV_SMTP_SERVER = "SMTP_SERVER"
ENV_SMTP_PORT = "SMTP_PORT"
ENV_MAIL_FROM = "LOG_MAIL_FROM"
ENV_MAIL_TO = "LOG_MAIL_TO"
ENV_MAIL_SUBJECT = "LOG_MAIL_SUBJECT"
