from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt

from gallery_client.core.errors import ErrorKind


class ArtworkCreated(BaseModel):
    model_config = ConfigDict(frozen=True)

    artwork_id: StrictInt
    image_id: StrictInt


class ArtworkCreatedResponse(BaseModel):
    success: Optional[bool] = None
    message: Optional[str] = None
    data: ArtworkCreated


class ErrorResponse(BaseModel):
    success: Optional[bool] = None
    error: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("Error", "error")
    )


class SubmissionFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    http_status: Optional[int] = None


class HelloResponse(BaseModel):
    message: str


class Artwork(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    thumbnail_url: str
    owner_name: str
