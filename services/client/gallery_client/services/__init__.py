"""Client-side services for the gallery web client."""

from .api_client import GalleryApiClient, UploadProgressStream
from .greeting import load_greeting
from .presenter import Presentation, present
from .submission_service import ArtworkSubmitter

__all__ = [
    "GalleryApiClient",
    "UploadProgressStream",
    "load_greeting",
    "Presentation",
    "present",
    "ArtworkSubmitter",
]
