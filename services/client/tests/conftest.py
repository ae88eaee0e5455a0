"""Pytest fixtures for gallery client tests."""

from __future__ import annotations

import os

# Set environment BEFORE importing the client so cached settings pick it up
os.environ.setdefault("GALLERY_API_BASE_URL", "http://gallery.test")
os.environ.setdefault("GALLERY_LOG_LEVEL", "DEBUG")
os.environ.pop("GALLERY_CONFIG_FILE", None)

import pytest

from fakes import FakeGalleryApi
from gallery_client.core.form import SelectedFile, SubmissionForm
from gallery_client.core.settings import Settings, get_settings
from gallery_client.core.state import UploadState


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test see a fresh get_settings() result."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def settings():
    return Settings(api_base_url="http://gallery.test")


@pytest.fixture()
def fake_api():
    """Provide an in-process gallery API that assigns artwork 7 / image 42 first."""
    return FakeGalleryApi(next_artwork_id=7, next_image_id=42)


@pytest.fixture()
def upload_state():
    return UploadState()


@pytest.fixture()
def form(upload_state):
    return SubmissionForm(upload_state)


@pytest.fixture()
def jpeg_file():
    """A 50 KB payload labelled as a JPEG."""
    data = b"\xff\xd8\xff\xe0" + b"\x00" * (50 * 1024 - 6) + b"\xff\xd9"
    return SelectedFile(filename="birch-study.jpg", content_type="image/jpeg", data=data)


@pytest.fixture()
def png_file():
    data = b"\x89PNG\r\n\x1a\n" + b"\x00" * 2048
    return SelectedFile(filename="lichen.png", content_type="image/png", data=data)


@pytest.fixture()
def large_jpeg_file():
    """Big enough to be streamed in several chunks."""
    return SelectedFile(
        filename="adirondacks.jpg",
        content_type="image/jpeg",
        data=b"\xff\xd8" + b"\x11" * (300 * 1024) + b"\xff\xd9",
    )


@pytest.fixture()
def status_log(upload_state):
    """Record (status, progress, message) after every state notification."""
    events = []
    upload_state.subscribe(
        lambda s: events.append((s.status.value, s.progress, s.message)))
    return events
