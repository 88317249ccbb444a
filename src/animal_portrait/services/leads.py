"""Waiting-list sign-ups from the standalone landing pages."""

import logging
from dataclasses import dataclass
from typing import Protocol

from animal_portrait.domain.leads import WaitingListEntry

logger = logging.getLogger(__name__)


class WaitingListRepository(Protocol):
    """Persistence interface for waiting-list entries."""

    def add_entry(self, entry: WaitingListEntry) -> None:
        """Insert a waiting-list row."""


@dataclass
class WaitingListService:
    """Application service behind both landing-page forms."""

    repository: WaitingListRepository

    def join(
        self, email: str, name: str, country: str | None = None
    ) -> WaitingListEntry:
        """Add a visitor to the waiting list."""
        entry = WaitingListEntry(
            email=email.strip(),
            name=name.strip(),
            country=(country or "").strip() or None,
        )
        self.repository.add_entry(entry)
        logger.info("Waiting list entry added", extra={"country": entry.country})
        return entry
