import os
import sys
from dotenv import load_dotenv

load_dotenv()

from pydantic import ValidationError

from settings import (
    DEFAULT_SMTP_PORT, ENV_SMTP_SERVER, ENV_SMTP_PORT,
    ENV_MAIL_FROM, ENV_MAIL_TO, ENV_MAIL_SUBJECT,
)
from src import logger
from src.errors import LogError
from src.graph import create_graph
from src.models import MailSettings
from steps.start import start_log
from steps.write import write_log
from steps.stop import stop_log
from steps.send import send_log


def read_messages(stream):
    """Yield one message per input line, without the line ending."""
    for line in stream:
        yield line.rstrip("\r\n")


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        description="Create, write, close and mail timestamped log files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Step by step
  python main.py start /tmp nightly.log
  python main.py write /tmp/nightly.log "Backup copied"
  some_job | python main.py write /tmp/nightly.log
  python main.py stop /tmp/nightly.log

  # Mail a finished log (relay settings may come from .env)
  python main.py send /tmp/nightly.log --smtp-server mail.local --from ops@x --to a@x,b@x

  # Whole lifecycle, messages from stdin
  some_job | python main.py run /tmp nightly.log --send
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Trace arguments and decisions on stderr")
    parser.add_argument("--trace-file", default=None,
                        help="Also append trace output to this file")

    commands = parser.add_subparsers(dest="command", required=True)

    start_parser = commands.add_parser("start", help="Create a fresh log file")
    start_parser.add_argument("log_directory")
    start_parser.add_argument("log_file_name")
    start_parser.add_argument("--append", action="store_true",
                              help="Keep an existing file instead of replacing it")

    write_parser = commands.add_parser("write", help="Append messages to a log file")
    write_parser.add_argument("path")
    write_parser.add_argument("messages", nargs="*",
                              help="Messages to append (default: one per stdin line)")

    stop_parser = commands.add_parser("stop", help="Write the closing line")
    stop_parser.add_argument("path")
    stop_parser.add_argument("--no-exit", action="store_true",
                             help="Return instead of exiting after the closing line")

    send_parser = commands.add_parser("send", help="Mail a log file")
    send_parser.add_argument("path")
    add_mail_arguments(send_parser)

    run_parser = commands.add_parser("run", help="Start, write stdin lines, stop, optionally send")
    run_parser.add_argument("log_directory")
    run_parser.add_argument("log_file_name")
    run_parser.add_argument("--send", action="store_true", help="Mail the log when finished")
    add_mail_arguments(run_parser)

    return parser


def add_mail_arguments(parser) -> None:
    parser.add_argument("--smtp-server", default=os.environ.get(ENV_SMTP_SERVER),
                        help=f"Mail relay (default: ${ENV_SMTP_SERVER})")
    # String default: argparse applies type=int only when this subcommand runs
    parser.add_argument("--port", type=int,
                        default=os.environ.get(ENV_SMTP_PORT) or str(DEFAULT_SMTP_PORT),
                        help=f"Mail relay port (default: ${ENV_SMTP_PORT} or {DEFAULT_SMTP_PORT})")
    parser.add_argument("--from", dest="sender", default=os.environ.get(ENV_MAIL_FROM),
                        help=f"Sender address (default: ${ENV_MAIL_FROM})")
    parser.add_argument("--to", default=os.environ.get(ENV_MAIL_TO),
                        help=f"Comma-separated recipients (default: ${ENV_MAIL_TO})")
    parser.add_argument("--subject", default=os.environ.get(ENV_MAIL_SUBJECT, ""),
                        help=f"Subject line (default: ${ENV_MAIL_SUBJECT})")


def run_lifecycle(args) -> int:
    """Run start → write → stop (→ send) as one workflow; returns the exit status."""
    mail = None
    if args.send:
        mail = MailSettings(smtp_server=args.smtp_server or "", port=args.port,
                            sender=args.sender or "", recipients=args.to or "",
                            subject=args.subject)

    graph = create_graph(enable_send=args.send)
    initial_state = {
        "log_directory": args.log_directory,
        "log_file_name": args.log_file_name,
        "messages": list(read_messages(sys.stdin)),
        "mail": mail,
        "path": None,
        "exit_code": None,
        "status": "pending",
    }
    result = graph.invoke(initial_state)
    return result.get("exit_code") or 0


def main(argv=None):
    args = build_parser().parse_args(argv)

    logger.VERBOSE = args.verbose
    logger.TRACE_FILE = args.trace_file

    try:
        if args.command == "start":
            path = start_log(args.log_directory, args.log_file_name, append=args.append)
            print(path)
        elif args.command == "write":
            write_log(args.path, args.messages if args.messages else read_messages(sys.stdin))
        elif args.command == "stop":
            stop_log(args.path, no_exit=args.no_exit)
        elif args.command == "send":
            send_log(args.smtp_server or "", args.path, args.sender or "", args.to or "",
                     args.subject, port=args.port)
        elif args.command == "run":
            sys.exit(run_lifecycle(args))
    except (LogError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
