from __future__ import annotations

import logging

from gallery_client.core.errors import SubmissionError
from gallery_client.services.api_client import GalleryApiClient

logger = logging.getLogger(__name__)


async def load_greeting(api: GalleryApiClient) -> str:
    """Fetch the API greeting once; failures become an 'Error: ...' line."""
    try:
        hello = await api.hello()
    except SubmissionError as e:
        logger.warning(f"Greeting unavailable: {e.message}")
        return f"Error: {e.message}"
    return hello.message
