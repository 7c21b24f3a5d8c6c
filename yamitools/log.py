"""Levelled diagnostic messages written to a configurable stream."""

from __future__ import annotations

import inspect
import os
import sys
import threading
from enum import IntEnum
from typing import TextIO


class LogLevel(IntEnum):
    """Verbosity levels; a message is shown when the configured level is at least its own."""

    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4


class AssertionFailure(AssertionError):
    """Raised by :func:`check` when its condition does not hold."""


_level: int = int(LogLevel.ERROR)
_stream: TextIO | None = None


def configure(level: int = LogLevel.ERROR, stream: TextIO | None = None) -> None:
    """Set the verbosity level and the output stream (``None`` means standard error)."""
    global _level, _stream
    _level = int(level)
    _stream = stream


def format_message(prefix: str, thread_id: int, filename: str, line: int, message: str) -> str:
    """Build one log line without its trailing newline."""
    name = os.path.basename(filename)
    return f"libyami {prefix} {thread_id} ({name}, {line}): {message}"


def _caller_location() -> tuple[str, int]:
    # _caller_location <- _emit <- public function <- user code
    frame = inspect.currentframe()
    for _ in range(3):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return "<unknown>", 0
    try:
        return frame.f_code.co_filename, frame.f_lineno
    finally:
        del frame


def _emit(level: LogLevel, message: str) -> None:
    if _level < level:
        return
    filename, line = _caller_location()
    text = format_message(level.name.lower(), threading.get_native_id(), filename, line, message)
    stream = _stream if _stream is not None else sys.stderr
    stream.write(text + "\n")


def error(message: str) -> None:
    """Log an error message."""
    _emit(LogLevel.ERROR, message)


def warning(message: str) -> None:
    """Log a warning message."""
    _emit(LogLevel.WARNING, message)


def info(message: str) -> None:
    """Log an informational message."""
    _emit(LogLevel.INFO, message)


def debug(message: str) -> None:
    """Log a debug message."""
    _emit(LogLevel.DEBUG, message)


def fourcc_to_str(fourcc: int) -> str:
    """Return the four characters packed little-endian into ``fourcc``."""
    return (fourcc & 0xFFFFFFFF).to_bytes(4, "little").decode("latin-1")


def debug_fourcc(prompt: str, fourcc: int) -> None:
    """Log a fourcc code both as hex and as its characters at debug level."""
    _emit(LogLevel.DEBUG, f"{prompt}, fourcc: 0x{fourcc:x}, {fourcc_to_str(fourcc)}")


def check(condition: object, message: str = "assert fails") -> None:
    """Log an error and raise :class:`AssertionFailure` when ``condition`` is false."""
    if not condition:
        _emit(LogLevel.ERROR, message)
        raise AssertionFailure(message)