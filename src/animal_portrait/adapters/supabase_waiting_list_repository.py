"""Supabase-backed waiting-list repository."""

from dataclasses import dataclass

from supabase import Client

from animal_portrait.adapters.supabase_store import insert_row
from animal_portrait.domain.leads import WaitingListEntry
from animal_portrait.services.leads import WaitingListRepository


@dataclass
class SupabaseWaitingListRepository(WaitingListRepository):
    """Supabase implementation for waiting-list entries."""

    client: Client

    def add_entry(self, entry: WaitingListEntry) -> None:
        """Insert a waiting-list row."""
        insert_row(
            self.client,
            "waiting_list",
            {"email": entry.email, "name": entry.name, "country": entry.country},
        )
