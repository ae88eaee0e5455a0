"""Tests for the artwork form holder."""

from __future__ import annotations

from gallery_client.core.errors import ErrorKind
from gallery_client.core.form import ArtworkFields, FormField, SelectedFile
from gallery_client.core.state import SubmissionStatus
from gallery_client.schemas.artwork import ArtworkCreated, SubmissionFailure


def test_form_starts_empty(form):
    assert form.fields == ArtworkFields()
    assert form.file is None
    assert form.can_submit is False


def test_set_field_changes_only_that_field(form):
    form.set_field(FormField.TITLE, "Birch Study")
    form.set_field(FormField.SCHOOL, "Lakeside")

    assert form.fields.title == "Birch Study"
    assert form.fields.school == "Lakeside"
    assert form.fields.artist_id == ""
    assert form.fields.grade == ""
    assert form.fields.description == ""


def test_set_field_accepts_values_verbatim(form):
    form.set_field(FormField.ARTIST_ID, "  not-a-number ")
    form.set_field(FormField.TITLE, "")

    assert form.fields.artist_id == "  not-a-number "
    assert form.fields.title == ""


def test_set_field_leaves_status_alone(form, upload_state):
    upload_state.begin_upload("Uploading...")
    form.set_field(FormField.TITLE, "edited")

    assert upload_state.status is SubmissionStatus.UPLOADING


def test_form_data_uses_wire_names_in_order(form):
    form.set_field(FormField.ARTIST_ID, "1")
    form.set_field(FormField.TITLE, "X")

    data = form.fields.as_form_data()

    assert list(data) == ["title", "artist_id", "grade", "school", "description"]
    assert data["artist_id"] == "1"


def test_set_file_clears_stale_outcome(form, upload_state, png_file):
    upload_state.begin_upload("Uploading...")
    upload_state.report_progress(80)
    upload_state.succeed(ArtworkCreated(artwork_id=3, image_id=4), "done")

    form.set_file(png_file)

    assert form.file == png_file
    assert upload_state.status is SubmissionStatus.IDLE
    assert upload_state.progress == 0
    assert upload_state.result is None
    assert upload_state.message == "File selected: lichen.png"


def test_clearing_file_also_resets_status(form, upload_state, png_file):
    form.set_file(png_file)
    upload_state.begin_upload("Uploading...")
    upload_state.report_progress(20)
    upload_state.fail(SubmissionFailure(kind=ErrorKind.NETWORK, message="offline"))

    form.set_file(None)

    assert form.file is None
    assert upload_state.status is SubmissionStatus.IDLE
    assert upload_state.progress == 0
    assert upload_state.message == "offline"


def test_set_file_ignored_while_uploading(form, upload_state, png_file, jpeg_file):
    form.set_file(png_file)
    upload_state.begin_upload("Uploading...")

    form.set_file(jpeg_file)

    assert form.file == png_file
    assert upload_state.status is SubmissionStatus.UPLOADING


def test_can_submit_requires_title_and_file(form, upload_state, png_file):
    form.set_field(FormField.TITLE, "X")
    assert form.can_submit is False

    form.set_file(png_file)
    assert form.can_submit is True

    upload_state.begin_upload("Uploading...")
    assert form.can_submit is False


def test_snapshot_is_detached_from_later_edits(form, png_file):
    form.set_field(FormField.TITLE, "before")
    form.set_file(png_file)

    snapshot = form.snapshot()
    form.set_field(FormField.TITLE, "after")

    assert snapshot.fields.title == "before"
    assert snapshot.file == png_file


def test_clear_empties_fields_and_file(form, png_file):
    for field in FormField:
        form.set_field(field, "value")
    form.set_file(png_file)

    form.clear()

    assert form.fields == ArtworkFields()
    assert form.file is None


def test_selected_file_from_path_guesses_type(tmp_path):
    path = tmp_path / "study.jpg"
    path.write_bytes(b"\xff\xd8\xff\xd9")

    picked = SelectedFile.from_path(path)

    assert picked.filename == "study.jpg"
    assert picked.content_type == "image/jpeg"
    assert picked.size == 4
    assert picked.is_accepted_image


def test_selected_file_unknown_type(tmp_path):
    path = tmp_path / "notes.unknownext"
    path.write_bytes(b"hello")

    picked = SelectedFile.from_path(path)

    assert picked.content_type == "application/octet-stream"
    assert not picked.is_accepted_image
