"""Command line front end for the gallery web client."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from gallery_client.core.form import ACCEPTED_IMAGE_TYPES, FormField, SelectedFile, SubmissionForm
from gallery_client.core.settings import Settings, get_settings
from gallery_client.core.state import SubmissionStatus, UploadState
from gallery_client.services.api_client import GalleryApiClient
from gallery_client.services.gallery import list_artworks, render_gallery
from gallery_client.services.greeting import load_greeting
from gallery_client.services.login import LoginField, LoginForm
from gallery_client.services.presenter import present
from gallery_client.services.submission_service import ArtworkSubmitter

logger = logging.getLogger(__name__)

ANSI_COLORS = {
    "gray": "\033[90m",
    "blue": "\033[34m",
    "green": "\033[32m",
    "red": "\033[31m",
}
ANSI_RESET = "\033[0m"
PROGRESS_WIDTH = 30


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gallery-client", description="Go Art gallery client.")
    parser.add_argument("--api-url", help="Base URL of the gallery API (overrides GALLERY_API_BASE_URL)")
    parser.add_argument("--no-color", action="store_true", help="Disable colored status output.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("gallery", help="List the demo gallery.")
    sub.add_parser("hello", help="Fetch the API greeting.")

    login = sub.add_parser("login", help="Fill in the register/login form.")
    login.add_argument("--user-name", default="")
    login.add_argument("--email", default="")
    login.add_argument("--password", default="")

    upload = sub.add_parser("upload", help="Create an artwork and upload its image.")
    upload.add_argument("image", type=Path, help="Image file (JPEG, PNG or GIF).")
    upload.add_argument("--title", default="")
    upload.add_argument("--artist-id", default="")
    upload.add_argument("--grade", default="")
    upload.add_argument("--school", default="")
    upload.add_argument("--description", default="")

    return parser.parse_args(argv)


class StatusPrinter:
    """Renders UploadState changes to a terminal."""

    def __init__(self, settings: Settings, color: bool = True, stream=None) -> None:
        self.settings = settings
        self.color = color
        self.stream = stream or sys.stdout
        self._last_status = None
        self._last_message = None
        self._last_progress = None

    def __call__(self, state: UploadState) -> None:
        view = present(state, self.settings)

        if view.status is not self._last_status or view.message != self._last_message:
            line = self._paint(view.message, view.color)
            if view.thumbnail_url:
                line += f"\n{view.preview_caption}\n  thumbnail: {view.thumbnail_url}"
            print(line, file=self.stream)
            self._last_status = view.status
            self._last_message = view.message

        if view.progress is not None and view.progress != self._last_progress:
            filled = PROGRESS_WIDTH * view.progress // 100
            bar = "#" * filled + "-" * (PROGRESS_WIDTH - filled)
            print(f"[{bar}] {view.progress:3d}%", file=self.stream)
        self._last_progress = view.progress

    def _paint(self, text: str, color: str) -> str:
        if not self.color:
            return text
        return f"{ANSI_COLORS[color]}{text}{ANSI_RESET}"


async def run_upload(
    api: GalleryApiClient,
    args: argparse.Namespace,
    image: SelectedFile,
    printer: StatusPrinter,
) -> int:
    state = UploadState()
    form = SubmissionForm(state)
    submitter = ArtworkSubmitter(api, state)
    unsubscribe = state.subscribe(printer)

    try:
        form.set_field(FormField.TITLE, args.title)
        form.set_field(FormField.ARTIST_ID, args.artist_id)
        form.set_field(FormField.GRADE, args.grade)
        form.set_field(FormField.SCHOOL, args.school)
        form.set_field(FormField.DESCRIPTION, args.description)
        form.set_file(image)

        await submitter.submit(form)
    finally:
        unsubscribe()

    return 0 if state.status is SubmissionStatus.SUCCESS else 1


async def run_hello(api: GalleryApiClient) -> int:
    print(await load_greeting(api))
    return 0


def run_login(args: argparse.Namespace) -> int:
    form = LoginForm()
    form.set_field(LoginField.USER_NAME, args.user_name)
    form.set_field(LoginField.EMAIL, args.email)
    form.set_field(LoginField.PASSWORD, args.password)
    print(form.submit())
    return 0 if not form.missing_fields() else 1


def pick_image(path: Path) -> Optional[SelectedFile]:
    """Mimic the file picker: only existing JPEG, PNG or GIF files can be chosen."""
    if not path.is_file():
        print(f"Image file not found: {path}", file=sys.stderr)
        return None
    picked = SelectedFile.from_path(path)
    if not picked.is_accepted_image:
        print(
            f"Unsupported image type {picked.content_type}; "
            f"expected one of {', '.join(ACCEPTED_IMAGE_TYPES)}",
            file=sys.stderr,
        )
        return None
    return picked


async def _hello(settings: Settings) -> int:
    async with GalleryApiClient(settings) as api:
        return await run_hello(api)


async def _upload(
    settings: Settings,
    args: argparse.Namespace,
    image: SelectedFile,
    printer: StatusPrinter,
) -> int:
    async with GalleryApiClient(settings) as api:
        return await run_upload(api, args, image, printer)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    if args.api_url:
        settings = settings.model_copy(update={"api_base_url": args.api_url})

    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
    logger.debug(f"Running '{args.command}' against {settings.api_base_url}")

    if args.command == "gallery":
        print(render_gallery(list_artworks()))
        return 0

    if args.command == "login":
        return run_login(args)

    if args.command == "hello":
        return asyncio.run(_hello(settings))

    image = pick_image(args.image)
    if image is None:
        return 2
    printer = StatusPrinter(settings, color=not args.no_color)
    return asyncio.run(_upload(settings, args, image, printer))


if __name__ == "__main__":
    sys.exit(main())
