"""Supabase-backed repository for generation records."""

from dataclasses import dataclass

from supabase import Client

from animal_portrait.adapters.supabase_store import insert_row
from animal_portrait.services.generation import GeneratedPhotoRepository


@dataclass
class SupabaseGeneratedPhotoRepository(GeneratedPhotoRepository):
    """Supabase implementation for generated photo rows."""

    client: Client

    def create_generated_photo(
        self, user_id: str | None, animal: str, photo_url: str, status: str
    ) -> None:
        """Insert a generated photo row."""
        insert_row(
            self.client,
            "generated_photos",
            {
                "user_id": user_id,
                "animal": animal,
                "photo_url": photo_url,
                "status": status,
            },
        )
