"""Exceptions raised by streamsha."""

from typing import Optional


class StreamShaError(Exception):
    """Base class for streamsha errors."""


class ChecksumFormatError(StreamShaError, ValueError):
    """A checksum line could not be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
