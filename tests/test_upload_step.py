"""Tests for the upload step."""

import pytest

from animal_portrait.domain.wizard import UserData
from animal_portrait.services.errors import (
    FileTooLargeError,
    StepActionError,
    UnsupportedFileError,
)
from animal_portrait.services.uploads import PHOTO_URL_PREFIX, UploadPhotoStep
from tests.conftest import PNG_BYTES, RecordingCallbacks


def _step(
    recorder: RecordingCallbacks, max_upload_bytes: int = 1024
) -> UploadPhotoStep:
    return UploadPhotoStep(
        user=UserData("Jane Doe", "jane@x.com", "42"),
        callbacks=recorder.callbacks,
        max_upload_bytes=max_upload_bytes,
    )


@pytest.mark.parametrize(
    "content_type", ["application/pdf", "text/plain", "video/mp4", "", None]
)
def test_non_image_files_are_not_accepted(content_type: str | None) -> None:
    step = _step(RecordingCallbacks())

    with pytest.raises(UnsupportedFileError):
        step.select_file("notes.txt", content_type, b"hello")

    assert step.photo.photo_url == ""
    assert step.photo.photo_file is None
    assert step.can_continue is False
    assert step.error


def test_image_is_accepted_and_handed_on() -> None:
    recorder = RecordingCallbacks()
    step = _step(recorder)

    photo = step.select_file("me.png", "image/png", PNG_BYTES)
    step.continue_()

    assert photo.photo_url.startswith(PHOTO_URL_PREFIX)
    assert photo.photo_file is not None
    assert photo.photo_file.content == PNG_BYTES
    assert recorder.completed == [{"photo": photo}]


def test_reupload_supersedes_previous_photo() -> None:
    step = _step(RecordingCallbacks())
    first = step.select_file("one.png", "image/png", PNG_BYTES)

    second = step.select_file("two.jpg", "image/jpeg", b"jpeg-bytes")

    assert step.photo == second
    assert second.photo_url != first.photo_url


def test_rejected_file_keeps_previously_accepted_photo() -> None:
    step = _step(RecordingCallbacks())
    accepted = step.select_file("one.png", "image/png", PNG_BYTES)

    with pytest.raises(UnsupportedFileError):
        step.select_file("doc.pdf", "application/pdf", b"%PDF")

    assert step.photo == accepted
    assert step.can_continue is True


def test_oversized_image_is_rejected() -> None:
    step = _step(RecordingCallbacks(), max_upload_bytes=4)

    with pytest.raises(FileTooLargeError):
        step.select_file("big.png", "image/png", PNG_BYTES)

    assert step.can_continue is False


def test_continue_requires_a_photo() -> None:
    recorder = RecordingCallbacks()
    step = _step(recorder)

    with pytest.raises(StepActionError):
        step.continue_()

    assert recorder.completed == []
    assert step.snapshot()["can_continue"] is False
