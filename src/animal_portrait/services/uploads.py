"""Upload step: accepts a single image and keeps it for the session."""

import logging
from dataclasses import dataclass, field
from typing import ClassVar
from uuid import uuid4

from animal_portrait.domain.wizard import PhotoData, UploadedPhoto, UserData, WizardStep
from animal_portrait.services.errors import (
    FileTooLargeError,
    StepActionError,
    UnsupportedFileError,
)
from animal_portrait.services.wizard import StepCallbacks

logger = logging.getLogger(__name__)

PHOTO_URL_PREFIX = "/wizard/photos/"


def photo_url_for(photo_id: str) -> str:
    """Return the session-scoped URL that serves an uploaded photo."""
    return f"{PHOTO_URL_PREFIX}{photo_id}"


@dataclass(eq=False)
class UploadPhotoStep:
    """Upload form state; holds the accepted file until the user continues."""

    step: ClassVar[WizardStep] = WizardStep.UPLOAD

    user: UserData
    callbacks: StepCallbacks
    max_upload_bytes: int
    photo: PhotoData = field(default_factory=PhotoData)
    error: str = ""

    def select_file(
        self, filename: str, content_type: str | None, content: bytes
    ) -> PhotoData:
        """Accept an image file, superseding any previously accepted one."""
        if not content_type or not content_type.startswith("image/"):
            self.error = "Please choose an image file (JPG, PNG or WEBP)."
            logger.info("Rejected non-image upload", extra={"type": content_type})
            raise UnsupportedFileError(self.error)
        if len(content) > self.max_upload_bytes:
            limit_mb = self.max_upload_bytes // (1024 * 1024)
            self.error = f"That photo is too large (max {limit_mb}MB)."
            raise FileTooLargeError(self.error)

        self.photo = PhotoData(
            photo_url=photo_url_for(uuid4().hex),
            photo_file=UploadedPhoto(
                filename=filename, content_type=content_type, content=content
            ),
        )
        self.error = ""
        return self.photo

    @property
    def can_continue(self) -> bool:
        return bool(self.photo.photo_url and self.photo.photo_file)

    def continue_(self) -> None:
        """Hand the accepted photo to the wizard."""
        if not self.can_continue:
            raise StepActionError("Upload a photo to continue.")
        self.callbacks.on_complete({"photo": self.photo})

    def snapshot(self) -> dict[str, object]:
        return {
            "full_name": self.user.full_name,
            "photo_url": self.photo.photo_url,
            "error": self.error,
            "can_continue": self.can_continue,
            "max_upload_bytes": self.max_upload_bytes,
        }

    def dispose(self) -> None:
        return None
