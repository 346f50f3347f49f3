"""I/O stages: directory creation, single-write append, and console output.

The file stages never raise for OSError or ValueError (bad path, unencodable
text); they hand back a StageResult so the caller decides whether to carry
on with the next stage.
"""

import os
import sys
from dataclasses import dataclass

from write_log.formatter import colorize
from write_log.levels import LogLevel


@dataclass(frozen=True)
class StageResult:
    ok: bool
    error: Exception | None = None
    created: bool = False


def ensure_directory(log_path: str) -> StageResult:
    """Create the parent directory of log_path (and missing ancestors) if absent."""
    dir_path = os.path.dirname(log_path)
    # Bare filename or filesystem root: nothing to create
    if not dir_path or os.path.isdir(dir_path):
        return StageResult(ok=True)
    try:
        os.makedirs(dir_path, exist_ok=True)
    except (OSError, ValueError) as e:
        return StageResult(ok=False, error=e)
    return StageResult(ok=True, created=True)


def append_line(log_path: str, line: str) -> StageResult:
    """Append one line (plus newline) to log_path as UTF-8 in a single write."""
    try:
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except (OSError, ValueError) as e:
        return StageResult(ok=False, error=e)
    return StageResult(ok=True)


def write_console(line: str, level: LogLevel, color: bool = True, stream=None):
    stream = stream or sys.stdout
    stream.write((colorize(line, level) if color else line) + "\n")
    stream.flush()
