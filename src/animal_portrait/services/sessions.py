"""Per-browser wizard sessions and the step views mounted for them."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol, TypeVar
from uuid import UUID, uuid4

from animal_portrait.domain.wizard import UploadedPhoto, WizardStep
from animal_portrait.services.animals import ChooseAnimalStep
from animal_portrait.services.errors import WrongStepError
from animal_portrait.services.generation import (
    GeneratedPhotoRepository,
    GeneratePhotoStep,
    GenerationTimings,
)
from animal_portrait.services.purchases import PurchaseRepository, PurchaseStep
from animal_portrait.services.signup import SignUpStep, UserRepository
from animal_portrait.services.uploads import UploadPhotoStep, photo_url_for
from animal_portrait.services.wizard import StepCallbacks, WizardController

logger = logging.getLogger(__name__)

ViewT = TypeVar("ViewT")


class StepView(Protocol):
    """Local state of the step that is currently shown."""

    step: WizardStep
    callbacks: StepCallbacks

    def snapshot(self) -> dict[str, object]:
        """Return the data the client needs to render the step."""

    def dispose(self) -> None:
        """Release timers or other resources held by the view."""


@dataclass
class StepFactory:
    """Builds the view for the controller's current step."""

    user_repository: UserRepository
    generated_photo_repository: GeneratedPhotoRepository
    purchase_repository: PurchaseRepository
    generation_timings: GenerationTimings = field(default_factory=GenerationTimings)
    max_upload_bytes: int = 10 * 1024 * 1024
    payment_delay_seconds: float = 2.0

    def mount(self, controller: WizardController) -> StepView:
        """Create the view for the current step, handing it only its slice."""
        state = controller.state
        callbacks = controller.callbacks(state.step)
        if state.step is WizardStep.SIGN_UP:
            return SignUpStep(repository=self.user_repository, callbacks=callbacks)
        if state.step is WizardStep.UPLOAD:
            return UploadPhotoStep(
                user=state.user,
                callbacks=callbacks,
                max_upload_bytes=self.max_upload_bytes,
            )
        if state.step is WizardStep.CHOOSE_ANIMAL:
            return ChooseAnimalStep(callbacks=callbacks)
        if state.step is WizardStep.GENERATE:
            view = GeneratePhotoStep(
                user=state.user,
                photo=state.photo,
                animal=state.animal,
                callbacks=callbacks,
                repository=self.generated_photo_repository,
                timings=self.generation_timings,
            )
            view.start()
            return view
        return PurchaseStep(
            user=state.user,
            generated_image_url=state.generated_image_url,
            callbacks=callbacks,
            repository=self.purchase_repository,
            payment_delay_seconds=self.payment_delay_seconds,
        )


@dataclass(eq=False)
class WizardSession:
    """One browser's wizard: the controller plus its mounted view."""

    id: UUID
    controller: WizardController
    factory: StepFactory
    expires_at: datetime
    _view: StepView | None = field(default=None, init=False, repr=False)

    @property
    def view(self) -> StepView:
        """Return the current step's view, remounting it after a transition."""
        step = self.controller.state.step
        if self._view is None or self._view.step is not step:
            if self._view is not None:
                self._view.dispose()
            self._view = self.factory.mount(self.controller)
            logger.info(
                "Mounted wizard step",
                extra={"session_id": str(self.id), "step": step.tag},
            )
        return self._view

    def require(self, view_type: type[ViewT]) -> ViewT:
        """Return the current view if it is of the expected type."""
        view = self.view
        if not isinstance(view, view_type):
            raise WrongStepError(
                f"This action is not available during the {view.step.tag} step."
            )
        return view

    def back(self) -> None:
        """Go back one step, if the current step allows it."""
        view = self.view
        if view.callbacks.on_back is None:
            raise WrongStepError(f"The {view.step.tag} step has no previous step.")
        view.callbacks.on_back()

    def find_photo(self, photo_id: str) -> UploadedPhoto | None:
        """Return an uploaded photo visible to this session."""
        url = photo_url_for(photo_id)
        candidates = [self.controller.state.photo]
        if isinstance(self._view, UploadPhotoStep):
            candidates.append(self._view.photo)
        for photo in candidates:
            if photo.photo_url == url and photo.photo_file is not None:
                return photo.photo_file
        return None

    def snapshot(self) -> dict[str, object]:
        view = self.view
        return {
            "step": view.step.tag,
            "progress": [
                {
                    "step": entry.step.tag,
                    "label": entry.step.label,
                    "status": entry.status,
                }
                for entry in self.controller.progress()
            ],
            "view": view.snapshot(),
        }

    def dispose(self) -> None:
        if self._view is not None:
            self._view.dispose()
            self._view = None


@dataclass
class InMemoryWizardSessionStore:
    """In-memory session store with sliding expiry."""

    factory: StepFactory
    ttl_seconds: int = 3600
    _sessions: dict[UUID, WizardSession] = field(default_factory=dict, init=False)

    def get(self, session_id: UUID | None) -> WizardSession | None:
        """Return a live session and extend its lifetime."""
        self._evict_expired()
        if session_id is None:
            return None
        session = self._sessions.get(session_id)
        if session is not None:
            session.expires_at = self._expiry()
        return session

    def create(self) -> WizardSession:
        """Create a new session at the sign-up step."""
        session = WizardSession(
            id=uuid4(),
            controller=WizardController(),
            factory=self.factory,
            expires_at=self._expiry(),
        )
        self._sessions[session.id] = session
        logger.info("Wizard session created", extra={"session_id": str(session.id)})
        return session

    def get_or_create(self, session_id: UUID | None) -> WizardSession:
        return self.get(session_id) or self.create()

    def close_all(self) -> None:
        """Dispose every session, cancelling pending timers."""
        for session in self._sessions.values():
            session.dispose()
        self._sessions.clear()

    def _evict_expired(self) -> None:
        now = datetime.now(tz=UTC)
        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if now >= session.expires_at
        ]
        for session_id in expired:
            self._sessions.pop(session_id).dispose()

    def _expiry(self) -> datetime:
        return datetime.now(tz=UTC) + timedelta(seconds=self.ttl_seconds)
