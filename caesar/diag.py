"""Diagnostic messages: warnings and errors that name the place they came from."""

from __future__ import annotations

import os
import sys

__all__ = ["DiagError", "say_warning", "raise_error", "check_warning", "check_error"]


class DiagError(RuntimeError):
    """Error raised by the diagnostic helpers."""

    def __init__(self, message: str, file: str = "", line: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.file = file
        self.line = line


def _caller_location(depth: int) -> tuple[str, int]:
    frame = sys._getframe(depth + 1)
    return os.path.basename(frame.f_code.co_filename), frame.f_lineno


def _warn(message: str, depth: int) -> None:
    file, line = _caller_location(depth + 1)
    print(f"Warning : {message} ({file}, {line})", flush=True)


def _error(message: str, depth: int) -> None:
    file, line = _caller_location(depth + 1)
    print(f"Error : {message} ({file}, {line})", flush=True)
    raise DiagError(message, file, line)


def say_warning(message: str) -> None:
    """Print a warning naming the caller's file and line."""
    _warn(message, 1)


def raise_error(message: str) -> None:
    """Print an error naming the caller's file and line, then raise DiagError."""
    _error(message, 1)


def check_warning(condition: bool, message: str) -> None:
    """Warn with ``message`` unless ``condition`` holds."""
    if not condition:
        _warn(message, 1)


def check_error(condition: bool, message: str) -> None:
    """Raise DiagError with ``message`` unless ``condition`` holds."""
    if not condition:
        _error(message, 1)