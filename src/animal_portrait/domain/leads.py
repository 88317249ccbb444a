"""Domain models for landing-page lead capture."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WaitingListEntry:
    """A visitor who asked to be notified."""

    email: str
    name: str
    country: str | None = None
