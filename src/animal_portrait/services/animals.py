"""Choose-animal step."""

from dataclasses import asdict, dataclass
from typing import ClassVar

from animal_portrait.domain.catalog import ANIMALS, find_animal
from animal_portrait.domain.wizard import AnimalData, WizardStep
from animal_portrait.services.errors import StepActionError
from animal_portrait.services.wizard import StepCallbacks


@dataclass(eq=False)
class ChooseAnimalStep:
    """Single-select over the animal catalog."""

    step: ClassVar[WizardStep] = WizardStep.CHOOSE_ANIMAL

    callbacks: StepCallbacks
    selected: str = ""

    def select(self, animal_id: str) -> None:
        if find_animal(animal_id) is None:
            raise StepActionError(f"Unknown animal: {animal_id}")
        self.selected = animal_id

    @property
    def can_continue(self) -> bool:
        return bool(self.selected)

    def continue_(self) -> None:
        if not self.can_continue:
            raise StepActionError("Choose an animal to continue.")
        self.callbacks.on_complete({"animal": AnimalData(animal=self.selected)})

    def snapshot(self) -> dict[str, object]:
        return {
            "animals": [asdict(animal) for animal in ANIMALS],
            "selected": self.selected,
            "can_continue": self.can_continue,
        }

    def dispose(self) -> None:
        return None
