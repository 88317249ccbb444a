"""Sign-up step: collects the user's name and email."""

import logging
import re
from dataclasses import dataclass
from typing import ClassVar, Protocol

from animal_portrait.domain.wizard import UserData, WizardStep
from animal_portrait.services.errors import StepActionError, StoreWriteError
from animal_portrait.services.wizard import StepCallbacks

logger = logging.getLogger(__name__)

# Same rule browsers apply to <input type="email">.
EMAIL_PATTERN = (
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@"
    r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)
_EMAIL_RE = re.compile(EMAIL_PATTERN)


class UserRepository(Protocol):
    """Persistence interface for signed-up users."""

    def create_user(self, full_name: str, email: str) -> str | None:
        """Insert a user row and return the identifier assigned by the store."""


@dataclass(eq=False)
class SignUpStep:
    """Sign-up form state."""

    step: ClassVar[WizardStep] = WizardStep.SIGN_UP

    repository: UserRepository
    callbacks: StepCallbacks
    full_name: str = ""
    email: str = ""
    error: str = ""
    is_loading: bool = False

    def submit(self, full_name: str, email: str) -> bool:
        """Save the user and complete the step; keep the store error on failure."""
        self.full_name = full_name.strip()
        self.email = email.strip()
        self.error = ""
        if not self.full_name:
            raise StepActionError("Full name is required.")
        if not _EMAIL_RE.match(self.email):
            raise StepActionError("Please enter a valid email address.")

        self.is_loading = True
        try:
            user_id = self.repository.create_user(
                full_name=self.full_name, email=self.email
            )
        except StoreWriteError as exc:
            logger.warning("Sign-up failed", extra={"error": exc.message})
            self.error = exc.message or "An error occurred during sign up"
            return False
        finally:
            self.is_loading = False

        self.callbacks.on_complete(
            {
                "user": UserData(
                    full_name=self.full_name, email=self.email, user_id=user_id
                )
            }
        )
        return True

    def snapshot(self) -> dict[str, object]:
        return {
            "full_name": self.full_name,
            "email": self.email,
            "error": self.error,
            "is_loading": self.is_loading,
        }

    def dispose(self) -> None:
        return None
