"""Failures surfaced by the artwork submission pipeline."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    SERVER = "server"
    NETWORK = "network"


class SubmissionError(Exception):
    """Base class for every failure a user can recover from by resubmitting."""

    kind: ErrorKind = ErrorKind.SERVER

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SubmissionError):
    """Missing title or image; raised before any network activity."""

    kind = ErrorKind.VALIDATION


class ServerError(SubmissionError):
    """A response was received but it did not describe a created artwork."""

    kind = ErrorKind.SERVER

    def __init__(self, message: str, http_status: int | None = None) -> None:
        super().__init__(message)
        self.http_status = http_status


class MalformedResponseError(ServerError):
    pass


class NetworkError(SubmissionError):
    """No response at all: refused connection, DNS failure, timeout..."""

    kind = ErrorKind.NETWORK
