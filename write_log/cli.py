"""write-log — append leveled, timestamped messages to a daily log file and the console."""

import logging
import os
import sys
from argparse import ArgumentParser

from write_log.config import load_config, validate_message
from write_log.errors import LogValidationError
from write_log.levels import LogLevel
from write_log.logger import write_logs


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="write-log",
        description="Append leveled, timestamped messages to a log file and the console.",
    )
    parser.add_argument(
        "messages",
        nargs="*",
        help="Message(s) to log. Reads one message per line from stdin when omitted",
    )
    parser.add_argument(
        "--level",
        help="Log level: " + ", ".join(level.value for level in LogLevel) + " (default: Info)",
    )
    parser.add_argument(
        "--log-path",
        help="Log file path (default: ./PowerShell-YYYY-MM-DD.log)",
    )
    parser.add_argument(
        "--indent-level",
        type=int,
        help="Indent the message by N x 2 spaces, 0-10 (default: 0)",
    )
    parser.add_argument(
        "--suppress-console",
        action="store_true",
        default=None,
        help="Only write to the log file",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors on the console",
    )
    return parser


def _stdin_messages():
    # Undecodable bytes become U+FFFD instead of aborting the rest of the input
    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(errors="replace")
    for line in sys.stdin:
        line = line.rstrip("\r\n")
        if line.strip():
            yield line


def run(args) -> int:
    """Apply defaults <- env vars <- CLI args, then log every message."""
    options = load_config(
        level=args.level,
        log_path=args.log_path,
        indent_level=args.indent_level,
        suppress_console=args.suppress_console,
        color=False if args.no_color else None,
    )

    if args.messages:
        for message in args.messages:
            validate_message(message)
        messages = args.messages
    else:
        messages = _stdin_messages()
    return write_logs(messages, options)


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=os.environ.get("WRITE_LOG_DIAGNOSTICS", "WARNING").upper(),
        format="%(asctime)s [write-log] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        run(args)
    except LogValidationError as e:
        parser.error(str(e))
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)


if __name__ == "__main__":
    main()
