"""In-memory holder for the artwork creation form."""

from __future__ import annotations

import logging
import mimetypes
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

from gallery_client.core.state import UploadState

logger = logging.getLogger(__name__)

ACCEPTED_IMAGE_TYPES = ("image/jpeg", "image/png", "image/gif")


class FormField(str, Enum):
    """Text fields of the form; each value is also the multipart part name."""

    TITLE = "title"
    ARTIST_ID = "artist_id"
    GRADE = "grade"
    SCHOOL = "school"
    DESCRIPTION = "description"


class SelectedFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def is_accepted_image(self) -> bool:
        return self.content_type in ACCEPTED_IMAGE_TYPES

    @classmethod
    def from_path(cls, path: Path, content_type: Optional[str] = None) -> "SelectedFile":
        """Read a file from disk, guessing its MIME type from the name."""
        if content_type is None:
            guessed, _ = mimetypes.guess_type(path.name)
            content_type = guessed or "application/octet-stream"
        return cls(filename=path.name, content_type=content_type, data=path.read_bytes())


class ArtworkFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    artist_id: str = ""
    grade: str = ""
    school: str = ""
    description: str = ""

    def as_form_data(self) -> dict[str, str]:
        return {field.value: getattr(self, field.value) for field in FormField}


class FormSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    fields: ArtworkFields
    file: Optional[SelectedFile] = None


class SubmissionForm:
    """
    Current values of the artwork form.

    Inputs are accepted verbatim; checking them is the submitter's job.
    Picking a file clears any stale outcome on the shared UploadState.
    """

    def __init__(self, state: UploadState) -> None:
        self._state = state
        self._fields = ArtworkFields()
        self._file: Optional[SelectedFile] = None

    @property
    def fields(self) -> ArtworkFields:
        return self._fields

    @property
    def file(self) -> Optional[SelectedFile]:
        return self._file

    @property
    def can_submit(self) -> bool:
        return bool(self._fields.title) and self._file is not None and not self._state.is_uploading

    def set_field(self, field: FormField, value: str) -> None:
        self._fields = self._fields.model_copy(update={field.value: value})

    def set_file(self, file: Optional[SelectedFile]) -> None:
        if self._state.is_uploading:
            logger.warning("File selection ignored while an upload is in flight")
            return

        self._file = file
        if file is not None:
            self._state.reset(message=f"File selected: {file.filename}")
        else:
            self._state.reset()

    def snapshot(self) -> FormSnapshot:
        return FormSnapshot(fields=self._fields, file=self._file)

    def clear(self) -> None:
        """Empty all text fields and drop the file without touching the status."""
        self._fields = ArtworkFields()
        self._file = None
