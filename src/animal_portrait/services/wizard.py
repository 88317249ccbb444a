"""Wizard controller: owns the wizard state and step transitions."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace

from animal_portrait.domain.wizard import STEP_ORDER, WizardState, WizardStep

logger = logging.getLogger(__name__)

_NEXT_STEP: dict[WizardStep, WizardStep] = {
    WizardStep.SIGN_UP: WizardStep.UPLOAD,
    WizardStep.UPLOAD: WizardStep.CHOOSE_ANIMAL,
    WizardStep.CHOOSE_ANIMAL: WizardStep.GENERATE,
    WizardStep.GENERATE: WizardStep.PURCHASE,
}

_PREVIOUS_STEP: dict[WizardStep, WizardStep] = {
    WizardStep.UPLOAD: WizardStep.SIGN_UP,
    WizardStep.CHOOSE_ANIMAL: WizardStep.UPLOAD,
    WizardStep.GENERATE: WizardStep.CHOOSE_ANIMAL,
}


@dataclass(frozen=True)
class StepCallbacks:
    """Callbacks handed to a step view."""

    on_complete: Callable[[Mapping[str, object]], None]
    on_back: Callable[[], None] | None = None


@dataclass(frozen=True)
class StepProgress:
    """Progress-bar entry for a single step."""

    step: WizardStep
    status: str


@dataclass
class WizardController:
    """Holds the wizard state; the only place steps are sequenced."""

    state: WizardState = field(default_factory=WizardState)

    def advance(
        self, step: WizardStep, data: Mapping[str, object] | None = None
    ) -> WizardState:
        """Merge step data into the state and make `step` current."""
        self.state = replace(self.state, step=step, **dict(data or {}))
        logger.info("Wizard moved to step", extra={"step": step.tag})
        return self.state

    def reset(self) -> WizardState:
        """Restore the initial state and return to sign-up."""
        self.state = WizardState()
        logger.info("Wizard reset")
        return self.state

    def callbacks(self, step: WizardStep) -> StepCallbacks:
        """Build the completion and back callbacks for a step."""

        def on_complete(data: Mapping[str, object] | None = None) -> None:
            if self.state.step is not step:
                logger.warning(
                    "Ignoring completion from inactive step",
                    extra={"step": step.tag},
                )
                return
            next_step = _NEXT_STEP.get(step)
            if next_step is None:
                self.reset()
                return
            self.advance(next_step, data)

        previous_step = _PREVIOUS_STEP.get(step)
        if previous_step is None:
            return StepCallbacks(on_complete=on_complete)

        def on_back() -> None:
            if self.state.step is step:
                self.advance(previous_step)

        return StepCallbacks(on_complete=on_complete, on_back=on_back)

    def progress(self) -> list[StepProgress]:
        """Return the status of every step for the progress bar."""
        current_index = STEP_ORDER.index(self.state.step)
        entries = []
        for index, step in enumerate(STEP_ORDER):
            if index == current_index:
                status = "active"
            elif index < current_index:
                status = "completed"
            else:
                status = "pending"
            entries.append(StepProgress(step=step, status=status))
        return entries
