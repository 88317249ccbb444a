"""Generate step: simulated portrait generation with a progress indicator.

Nothing is transformed. A repeating ticker advances the progress towards a
cap while a single delay stands in for the generation work; once the delay
ends the progress jumps to 100, the result (the uploaded photo) is recorded
in the store and the step completes after a short pause.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import ClassVar, Protocol

from animal_portrait.domain.wizard import AnimalData, PhotoData, UserData, WizardStep
from animal_portrait.services.errors import StepActionError, StoreWriteError
from animal_portrait.services.wizard import StepCallbacks

logger = logging.getLogger(__name__)

STATUS_IDLE = "IDLE"
STATUS_GENERATING = "GENERATING"
STATUS_GENERATED = "GENERATED"
STATUS_FAILED = "FAILED"

COMPLETE_PROGRESS = 100


class GeneratedPhotoRepository(Protocol):
    """Persistence interface for generation records."""

    def create_generated_photo(
        self, user_id: str | None, animal: str, photo_url: str, status: str
    ) -> None:
        """Insert a generated photo row."""


@dataclass(frozen=True)
class GenerationTimings:
    """Timer settings for the simulated generation."""

    progress_step: int = 10
    progress_cap: int = 90
    progress_interval_seconds: float = 0.3
    generation_delay_seconds: float = 3.0
    completion_delay_seconds: float = 0.5


@dataclass(eq=False)
class GeneratePhotoStep:
    """Runs the simulated generation and owns its timers."""

    step: ClassVar[WizardStep] = WizardStep.GENERATE

    user: UserData
    photo: PhotoData
    animal: AnimalData
    callbacks: StepCallbacks
    repository: GeneratedPhotoRepository
    timings: GenerationTimings = field(default_factory=GenerationTimings)
    on_progress: Callable[[int], None] | None = None
    progress: int = 0
    status: str = STATUS_IDLE
    error: str = ""
    generated_image_url: str = ""
    _run_task: asyncio.Task[None] | None = field(default=None, init=False, repr=False)
    _ticker: asyncio.Task[None] | None = field(default=None, init=False, repr=False)

    def start(self) -> None:
        """Start a generation run on the running event loop."""
        if self._run_task is not None and not self._run_task.done():
            return
        self.status = STATUS_GENERATING
        self.error = ""
        self.progress = 0
        self._run_task = asyncio.get_running_loop().create_task(self._run())

    def retry(self) -> None:
        """Re-attempt the store write after a failure, keeping the progress."""
        if self.status != STATUS_FAILED:
            raise StepActionError("Generation can only be retried after a failure.")
        logger.info("Retrying generation", extra={"user_id": self.user.user_id})
        self.status = STATUS_GENERATING
        self.error = ""
        self._run_task = asyncio.get_running_loop().create_task(self._finish())

    async def wait(self) -> None:
        """Wait for the current run to finish."""
        if self._run_task is not None:
            await self._run_task

    def dispose(self) -> None:
        """Cancel any pending timers."""
        for task in (self._ticker, self._run_task):
            if task is not None and not task.done():
                task.cancel()

    @property
    def message(self) -> str:
        if self.status == STATUS_FAILED:
            return "Something went wrong while creating your photo."
        if self.status == STATUS_GENERATED:
            return "🎉 Your photo is ready! Proceed to purchase."
        if self.progress <= 0:
            return ""
        if self.progress <= 30:
            return "🎨 Analyzing your photo..."
        if self.progress <= 60:
            return "🐾 Adding your chosen animal..."
        if self.progress <= 90:
            return "✨ Applying finishing touches..."
        return "🎉 Finalizing your masterpiece..."

    def snapshot(self) -> dict[str, object]:
        return {
            "status": self.status,
            "progress": self.progress,
            "message": self.message,
            "animal": self.animal.animal,
            "error": self.error,
            "generated_image_url": self.generated_image_url,
            "can_retry": self.status == STATUS_FAILED,
        }

    async def _run(self) -> None:
        ticker = asyncio.create_task(self._tick())
        self._ticker = ticker
        try:
            await asyncio.sleep(self.timings.generation_delay_seconds)
        finally:
            ticker.cancel()
        self._set_progress(COMPLETE_PROGRESS)
        await self._finish()

    async def _finish(self) -> None:
        result_url = self.photo.photo_url
        context = {"user_id": self.user.user_id, "animal": self.animal.animal}
        try:
            self.repository.create_generated_photo(
                user_id=self.user.user_id,
                animal=self.animal.animal,
                photo_url=result_url,
                status="generated",
            )
        except StoreWriteError as exc:
            logger.exception("Failed to save generated photo", extra=context)
            self.status = STATUS_FAILED
            self.error = exc.message
            return
        except Exception:
            logger.exception("Unexpected error saving generated photo", extra=context)
            self.status = STATUS_FAILED
            self.error = "Something went wrong while saving your photo."
            return

        self.generated_image_url = result_url
        self.status = STATUS_GENERATED
        await asyncio.sleep(self.timings.completion_delay_seconds)
        self.callbacks.on_complete({"generated_image_url": result_url})

    async def _tick(self) -> None:
        while self.progress < self.timings.progress_cap:
            await asyncio.sleep(self.timings.progress_interval_seconds)
            self._set_progress(
                min(
                    self.progress + self.timings.progress_step,
                    self.timings.progress_cap,
                )
            )

    def _set_progress(self, value: int) -> None:
        if value <= self.progress:
            return
        self.progress = value
        if self.on_progress is not None:
            self.on_progress(value)
