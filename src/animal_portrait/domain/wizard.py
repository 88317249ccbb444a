"""Domain models for the portrait wizard."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class StepDefinition:
    """Declarative wizard step definition."""

    tag: str
    label: str


class WizardStep(Enum):
    """Enum of wizard steps in display order (single source of truth)."""

    SIGN_UP = StepDefinition("sign-up", "Sign Up")
    UPLOAD = StepDefinition("upload", "Upload")
    CHOOSE_ANIMAL = StepDefinition("choose-animal", "Choose")
    GENERATE = StepDefinition("generate", "Generate")
    PURCHASE = StepDefinition("purchase", "Purchase")

    @property
    def tag(self) -> str:
        return self.value.tag

    @property
    def label(self) -> str:
        return self.value.label


STEP_ORDER: tuple[WizardStep, ...] = tuple(WizardStep)


@dataclass(frozen=True)
class UserData:
    """User details collected at sign-up."""

    full_name: str = ""
    email: str = ""
    user_id: str | None = None


@dataclass(frozen=True)
class UploadedPhoto:
    """Raw uploaded image held for the lifetime of a session."""

    filename: str
    content_type: str
    content: bytes


@dataclass(frozen=True)
class PhotoData:
    """Displayable reference to the uploaded photo."""

    photo_url: str = ""
    photo_file: UploadedPhoto | None = None


@dataclass(frozen=True)
class AnimalData:
    """Animal chosen to appear in the portrait."""

    animal: str = ""


@dataclass(frozen=True)
class WizardState:
    """Current step plus everything collected by earlier steps."""

    step: WizardStep = WizardStep.SIGN_UP
    user: UserData = field(default_factory=UserData)
    photo: PhotoData = field(default_factory=PhotoData)
    animal: AnimalData = field(default_factory=AnimalData)
    generated_image_url: str = ""
