from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from gallery_client.core.settings import Settings, get_settings
from gallery_client.core.state import SubmissionStatus, UploadState
from gallery_client.schemas.artwork import ArtworkCreated
from gallery_client.services.api_client import thumbnail_url

STATUS_COLORS = {
    SubmissionStatus.IDLE: "gray",
    SubmissionStatus.UPLOADING: "blue",
    SubmissionStatus.SUCCESS: "green",
    SubmissionStatus.ERROR: "red",
}


class Presentation(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: SubmissionStatus
    color: str
    message: str
    # only set while uploading
    progress: Optional[int] = None
    thumbnail_url: Optional[str] = None
    thumbnail_alt: Optional[str] = None
    preview_caption: Optional[str] = None


def present(state: UploadState, settings: Optional[Settings] = None) -> Presentation:
    """Derive what the uploader panel shows for the current state."""
    status = state.status
    fields = {
        "status": status,
        "color": STATUS_COLORS[status],
        "message": f"Status: {state.message}",
    }

    if status is SubmissionStatus.UPLOADING:
        fields["progress"] = state.progress

    result = state.result
    if status is SubmissionStatus.SUCCESS and isinstance(result, ArtworkCreated):
        settings = settings or get_settings()
        fields["thumbnail_url"] = thumbnail_url(settings, result.image_id)
        fields["thumbnail_alt"] = f"Uploaded Image ID {result.image_id}"
        fields["preview_caption"] = f"Preview of Image ID: {result.image_id}"

    return Presentation(**fields)
