"""Error codes and the error value carried by failed operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ErrorCode(IntEnum):
    """Category of a failure."""

    OK = 0
    DNS = 1
    CONNECTION = 2
    TLS = 3
    HTTP2 = 4
    TIMEOUT = 5
    CANCELLED = 6
    INVALID_URL = 7
    INTERNAL = 8


@dataclass
class Error:
    """An error code with a human-readable message.

    An error is truthy when it describes an actual failure.
    """

    code: ErrorCode = ErrorCode.OK
    message: str = ""

    def __bool__(self) -> bool:
        return self.code != ErrorCode.OK