"""HTTP client for the gallery API."""

from __future__ import annotations

import io
import logging
from typing import AsyncIterator, Callable, Mapping, Optional

import httpx
import pydantic

from gallery_client.core.errors import MalformedResponseError, NetworkError, ServerError
from gallery_client.core.form import SelectedFile
from gallery_client.core.settings import Settings, get_settings
from gallery_client.schemas.artwork import (
    ArtworkCreated,
    ArtworkCreatedResponse,
    ErrorResponse,
    HelloResponse,
)

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network Error. Is the gallery API server running?"
INVALID_URL_MESSAGE = "Network Error. The gallery API address is invalid"

ProgressCallback = Callable[[int, int], None]


class UploadProgressStream(httpx.AsyncByteStream):
    """
    Wraps a request body and reports cumulative bytes handed to the transport.

    The callback receives (bytes_sent, bytes_total) after every chunk.
    """

    def __init__(
        self,
        stream: httpx.AsyncByteStream,
        total: int,
        on_progress: ProgressCallback,
    ) -> None:
        self._stream = stream
        self._total = total
        self._on_progress = on_progress

    async def __aiter__(self) -> AsyncIterator[bytes]:
        sent = 0
        async for chunk in self._stream:
            sent += len(chunk)
            self._on_progress(sent, self._total)
            yield chunk

    async def aclose(self) -> None:
        await self._stream.aclose()


class GalleryApiClient:
    """
    Async client for the endpoints the web client consumes.

    Transport failures are raised as NetworkError, non-2xx responses as
    ServerError; the caller decides what the user sees.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._client = httpx.AsyncClient(
            base_url=self.settings.api_base_url,
            timeout=self.settings.request_timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "GalleryApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def image_url(self, image_id: int) -> str:
        return _absolute(self.settings, self.settings.image_path.format(image_id=image_id))

    def thumbnail_url(self, image_id: int) -> str:
        return thumbnail_url(self.settings, image_id)

    async def create_artwork(
        self,
        fields: Mapping[str, str],
        image: SelectedFile,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ArtworkCreated:
        """
        POST the artwork metadata and its image as one multipart request.

        Args:
            fields: Text parts in the order they should be sent
            image: File sent as the "image" part
            on_progress: Called with (bytes_sent, bytes_total) while the body streams

        Returns:
            Identifiers assigned by the server

        Raises:
            NetworkError: If no response was received
            ServerError: If the response status is not 2xx
            MalformedResponseError: If a 2xx body lacks either identifier
        """
        request = self._build_request(
            "POST",
            self.settings.upload_path,
            data=dict(fields),
            files={"image": (image.filename, io.BytesIO(image.data), image.content_type)},
        )
        total = int(request.headers.get("Content-Length", 0))
        if on_progress is not None and total > 0:
            request.stream = UploadProgressStream(request.stream, total, on_progress)

        logger.info(
            f"POST {request.url} ({total} bytes, image '{image.filename}' {image.content_type})")
        response = await self._send(request)

        if not response.is_success:
            raise _server_error(response)

        try:
            body = ArtworkCreatedResponse.model_validate(response.json())
        except (ValueError, pydantic.ValidationError) as e:
            logger.error(f"Unexpected upload response from {request.url}: {e}")
            raise MalformedResponseError(
                f"HTTP Error ({response.status_code}): "
                "Upload response is missing artwork_id or image_id",
                http_status=response.status_code,
            ) from e

        return body.data

    async def hello(self) -> HelloResponse:
        request = self._build_request("GET", self.settings.hello_path)
        response = await self._send(request)
        if not response.is_success:
            raise ServerError(
                f"HTTP error! Status: {response.status_code}",
                http_status=response.status_code,
            )
        try:
            return HelloResponse.model_validate(response.json())
        except (ValueError, pydantic.ValidationError) as e:
            raise MalformedResponseError(
                f"Unexpected greeting response: {e}",
                http_status=response.status_code,
            ) from e

    def _build_request(self, method: str, path: str, **kwargs) -> httpx.Request:
        try:
            return self._client.build_request(method, path, **kwargs)
        except httpx.InvalidURL as exc:
            logger.error(f"Cannot build {method} request for {path!r}: {exc}")
            raise NetworkError(f"{INVALID_URL_MESSAGE}: {exc}") from exc

    async def _send(self, request: httpx.Request) -> httpx.Response:
        try:
            return await self._client.send(request)
        except httpx.RequestError as exc:
            logger.error(f"Request to {request.url} failed: {exc!r}")
            raise NetworkError(NETWORK_ERROR_MESSAGE) from exc


def thumbnail_url(settings: Settings, image_id: int) -> str:
    return _absolute(settings, settings.thumbnail_path.format(image_id=image_id))


def _absolute(settings: Settings, path: str) -> str:
    return settings.api_base_url.rstrip("/") + path


def _server_error(response: httpx.Response) -> ServerError:
    detail = None
    try:
        detail = ErrorResponse.model_validate(response.json()).error
    except (ValueError, pydantic.ValidationError):
        logger.debug(f"Error response without a JSON body (HTTP {response.status_code})")

    if not detail:
        detail = f"Request failed with status code {response.status_code}"

    logger.warning(f"Server rejected request: HTTP {response.status_code}: {detail}")
    return ServerError(
        f"HTTP Error ({response.status_code}): {detail}",
        http_status=response.status_code,
    )
