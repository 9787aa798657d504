"""Severity-filtered logging to a plain text file."""

from __future__ import annotations

import os
from enum import IntEnum
from pathlib import Path

DEFAULT_LOG_FILE = "GAME301EngineLog.txt"


class MessageType(IntEnum):
    """Message severities; a higher value is more verbose."""

    NONE = 0
    FATAL_ERROR = 1
    ERROR = 2
    WARNING = 3
    TRACE = 4
    INFO = 5


class Debug:
    """Writes messages to a log file when they pass the current severity."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_LOG_FILE) -> None:
        self.path = Path(path)
        self.severity = MessageType.NONE

    def init(self) -> None:
        """Truncate the log file and allow fatal errors only."""
        self.path.write_text("")
        self.severity = MessageType.FATAL_ERROR

    def set_severity(self, severity: MessageType) -> None:
        self.severity = MessageType(severity)

    def info(self, message: str, file_name: str, line: int) -> None:
        self.log(MessageType.INFO, "INFO: " + message, file_name, line)

    def trace(self, message: str, file_name: str, line: int) -> None:
        self.log(MessageType.TRACE, "TRACE: " + message, file_name, line)

    def warning(self, message: str, file_name: str, line: int) -> None:
        self.log(MessageType.WARNING, "WARNING: " + message, file_name, line)

    def error(self, message: str, file_name: str, line: int) -> None:
        self.log(MessageType.ERROR, "ERROR: " + message, file_name, line)

    def fatal_error(self, message: str, file_name: str, line: int) -> None:
        self.log(MessageType.FATAL_ERROR, "IT DIED SON: " + message, file_name, line)

    def log(self, message_type: MessageType, message: str, file_name: str, line: int) -> None:
        """Append a message if its type is within the current severity.

        The log file is opened (and so created) even when nothing is written.
        """
        with self.path.open("a") as out:
            if message_type <= self.severity and self.severity > MessageType.NONE:
                out.write(f"{message} in: {file_name} on line: {line}\n")