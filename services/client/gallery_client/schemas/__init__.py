from .artwork import (
    Artwork,
    ArtworkCreated,
    ArtworkCreatedResponse,
    ErrorResponse,
    HelloResponse,
    SubmissionFailure,
)

__all__ = [
    "Artwork",
    "ArtworkCreated",
    "ArtworkCreatedResponse",
    "ErrorResponse",
    "HelloResponse",
    "SubmissionFailure",
]
