"""Artwork submission: validate, upload with progress, reconcile the outcome."""

from __future__ import annotations

import logging
import math

from gallery_client.core.errors import ErrorKind, SubmissionError, ValidationError
from gallery_client.core.form import FormSnapshot, SubmissionForm
from gallery_client.core.state import UploadState
from gallery_client.schemas.artwork import SubmissionFailure
from gallery_client.services.api_client import GalleryApiClient

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Please provide a Title and select an Image."
UPLOADING_MESSAGE = "Uploading, creating artwork, and processing image..."


def upload_percent(bytes_sent: int, bytes_total: int) -> int:
    """Whole percentage of the body sent, rounded half up and clamped to 0-100."""
    percent = math.floor(bytes_sent * 100 / bytes_total + 0.5)
    return max(0, min(100, percent))


def validate_snapshot(snapshot: FormSnapshot) -> None:
    if not snapshot.fields.title or snapshot.file is None:
        raise ValidationError(VALIDATION_MESSAGE)


class ArtworkSubmitter:
    """
    Drives one artwork submission at a time against the gallery API.

    The submitter is the only writer of the UploadState status and progress
    while a request is in flight. A second submit during an upload is refused.
    """

    def __init__(self, api: GalleryApiClient, state: UploadState) -> None:
        self.api = api
        self.state = state

    async def submit(self, form: SubmissionForm) -> None:
        """
        Create an artwork from the form's current values.

        Validation failures set a message and perform no I/O. Every other
        failure lands in the error status with the form left untouched; on
        success the form is cleared.
        """
        if self.state.is_uploading:
            logger.warning("Submit ignored: an upload is already in flight")
            return

        snapshot = form.snapshot()
        try:
            validate_snapshot(snapshot)
        except ValidationError as e:
            logger.info(f"Submission rejected locally: {e.message}")
            self.state.set_message(e.message)
            return

        image = snapshot.file
        self.state.begin_upload(UPLOADING_MESSAGE)
        logger.info(
            f"Starting artwork upload: title='{snapshot.fields.title}', "
            f"artist_id='{snapshot.fields.artist_id}', image={image.filename} ({image.size} bytes)")

        try:
            created = await self.api.create_artwork(
                snapshot.fields.as_form_data(),
                image,
                on_progress=self._on_progress,
            )
        except SubmissionError as e:
            logger.warning(f"Artwork upload failed ({e.kind.value}): {e.message}")
            self.state.fail(SubmissionFailure(
                kind=e.kind,
                message=e.message,
                http_status=getattr(e, "http_status", None),
            ))
            return
        except Exception as e:
            logger.exception(f"Artwork upload aborted by unexpected error: {e!r}")
            self.state.fail(SubmissionFailure(
                kind=ErrorKind.NETWORK,
                message=f"Unexpected error: {e}",
            ))
            raise

        logger.info(
            f"Artwork created: artwork_id={created.artwork_id}, image_id={created.image_id}")
        form.clear()
        self.state.succeed(
            created,
            f"SUCCESS! Artwork ID: {created.artwork_id}, Image ID: {created.image_id}",
        )

    def _on_progress(self, bytes_sent: int, bytes_total: int) -> None:
        if bytes_total <= 0:
            return
        self.state.report_progress(upload_percent(bytes_sent, bytes_total))
