"""Leveled logger that appends timestamped lines to a daily file and echoes them in color.

Each call runs its stages in order: validate, resolve path, ensure the
directory, format, append to file, write to console. Validation problems raise
LogValidationError before anything is touched. I/O problems and anything
unexpected are reported on this module's logger and never reach the caller.
"""

import logging
import os
from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterable

from write_log.config import LogOptions, validate_message, validate_options
from write_log.formatter import format_entry
from write_log.levels import LogLevel
from write_log.writer import append_line, ensure_directory, write_console

logger = logging.getLogger(__name__)

_UNSET = object()


def _prepare(options: LogOptions | None, **overrides) -> LogOptions:
    options = options or LogOptions()
    changes = {k: v for k, v in overrides.items() if v is not _UNSET}
    if changes:
        options = replace(options, **changes)
    return validate_options(options)


def _emit(message: str, options: LogOptions, log_path: str, stream, time_func) -> None:
    try:
        directory = ensure_directory(log_path)
        if not directory.ok:
            logger.warning(
                "Could not create log directory %s: %s",
                os.path.dirname(log_path), directory.error,
            )
            return
        if directory.created:
            logger.debug("Created log directory %s", os.path.dirname(log_path))

        now = time_func()
        line = format_entry(message, options.level, options.indent_level, now)

        appended = append_line(log_path, line)
        if not appended.ok:
            logger.warning("Failed to write to log file %s: %s", log_path, appended.error)

        if not options.suppress_console:
            write_console(line, options.level, options.color, stream)
    except Exception as e:
        logger.error("Unexpected error while logging: %s", e, exc_info=True)


def write_log(
    message: str,
    options: LogOptions | None = None,
    *,
    level: LogLevel | str = _UNSET,
    log_path: str | None = _UNSET,
    indent_level: int = _UNSET,
    suppress_console: bool = _UNSET,
    stream=None,
    time_func: Callable[[], datetime] | None = None,
) -> None:
    """Log a single message.

    Keyword arguments override the matching fields of ``options``. Raises
    LogValidationError for a bad level, an indent outside 0..10 or an empty
    message; every other failure is reported as a warning or error.
    """
    options = _prepare(
        options, level=level, log_path=log_path,
        indent_level=indent_level, suppress_console=suppress_console,
    )
    validate_message(message)
    try:
        path = options.resolve_path()
    except Exception as e:
        logger.error("Could not resolve log path: %s", e, exc_info=True)
        return
    _emit(message, options, path, stream, time_func or datetime.now)


def write_logs(
    messages: Iterable[str],
    options: LogOptions | None = None,
    *,
    level: LogLevel | str = _UNSET,
    log_path: str | None = _UNSET,
    indent_level: int = _UNSET,
    suppress_console: bool = _UNSET,
    stream=None,
    time_func: Callable[[], datetime] | None = None,
) -> int:
    """Log every message from an iterable, one at a time in arrival order.

    The log path is resolved once for the whole batch, so a batch that runs
    past midnight stays in the file it started in. Returns the number of
    messages processed.
    """
    options = _prepare(
        options, level=level, log_path=log_path,
        indent_level=indent_level, suppress_console=suppress_console,
    )
    try:
        path = options.resolve_path()
    except Exception as e:
        logger.error("Could not resolve log path: %s", e, exc_info=True)
        return 0

    count = 0
    for message in messages:
        validate_message(message)
        _emit(message, options, path, stream, time_func or datetime.now)
        count += 1
    return count
