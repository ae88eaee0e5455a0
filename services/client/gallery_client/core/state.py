"""Observable submission status and upload progress."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional, Union

from gallery_client.schemas.artwork import ArtworkCreated, SubmissionFailure

logger = logging.getLogger(__name__)


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    UPLOADING = "uploading"
    SUCCESS = "success"
    ERROR = "error"


_ALLOWED_TRANSITIONS = {
    SubmissionStatus.IDLE: {SubmissionStatus.UPLOADING},
    SubmissionStatus.UPLOADING: {SubmissionStatus.SUCCESS, SubmissionStatus.ERROR},
    SubmissionStatus.SUCCESS: {SubmissionStatus.UPLOADING, SubmissionStatus.IDLE},
    SubmissionStatus.ERROR: {SubmissionStatus.UPLOADING, SubmissionStatus.IDLE},
}

SubmissionResult = Union[ArtworkCreated, SubmissionFailure]
StateListener = Callable[["UploadState"], None]


class InvalidTransition(RuntimeError):
    def __init__(self, current: SubmissionStatus, target: SubmissionStatus) -> None:
        super().__init__(f"Cannot move from {current.value} to {target.value}")
        self.current = current
        self.target = target


class UploadState:
    """
    Single-writer state container observed by the UI.

    Holds the submission status, the upload percentage, the user-facing
    message and the outcome of the last attempt. Every mutation goes through
    a method that notifies subscribers once the new values are in place.
    """

    def __init__(self) -> None:
        self._status = SubmissionStatus.IDLE
        self._progress = 0
        self._message = ""
        self._result: Optional[SubmissionResult] = None
        self._listeners: List[StateListener] = []

    @property
    def status(self) -> SubmissionStatus:
        return self._status

    @property
    def progress(self) -> int:
        return self._progress

    @property
    def message(self) -> str:
        return self._message

    @property
    def result(self) -> Optional[SubmissionResult]:
        return self._result

    @property
    def is_uploading(self) -> bool:
        return self._status is SubmissionStatus.UPLOADING

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener; the returned callable removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def begin_upload(self, message: str) -> None:
        self._move_to(SubmissionStatus.UPLOADING)
        self._progress = 0
        self._result = None
        self._message = message
        self._notify()

    def report_progress(self, percent: int) -> bool:
        """
        Publish a new upload percentage.

        Stale or out-of-order values lower than the current one are dropped.

        Returns:
            True if the value was applied
        """
        if not self.is_uploading:
            logger.debug(f"Ignoring progress {percent}% while {self._status.value}")
            return False

        percent = max(0, min(100, percent))
        if percent < self._progress:
            logger.debug(
                f"Dropping stale progress {percent}% (current {self._progress}%)")
            return False
        if percent == self._progress:
            return True

        self._progress = percent
        self._notify()
        return True

    def succeed(self, result: ArtworkCreated, message: str) -> None:
        self._move_to(SubmissionStatus.SUCCESS)
        self._result = result
        self._message = message
        self._notify()

    def fail(self, failure: SubmissionFailure) -> None:
        self._move_to(SubmissionStatus.ERROR)
        self._result = failure
        self._message = failure.message
        self._notify()

    def reset(self, message: Optional[str] = None) -> None:
        """Return to idle with zero progress; message is kept when None."""
        if self._status is not SubmissionStatus.IDLE:
            self._move_to(SubmissionStatus.IDLE)
        self._progress = 0
        self._result = None
        if message is not None:
            self._message = message
        self._notify()

    def set_message(self, message: str) -> None:
        self._message = message
        self._notify()

    def _move_to(self, target: SubmissionStatus) -> None:
        if target not in _ALLOWED_TRANSITIONS[self._status]:
            raise InvalidTransition(self._status, target)
        logger.debug(f"Submission status {self._status.value} -> {target.value}")
        self._status = target

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception(f"State listener {listener!r} failed")
