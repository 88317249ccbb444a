"""Supabase-backed user repository."""

from dataclasses import dataclass

from supabase import Client

from animal_portrait.adapters.supabase_store import insert_row
from animal_portrait.services.errors import StoreWriteError
from animal_portrait.services.signup import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def create_user(self, full_name: str, email: str) -> str | None:
        """Create a user row and return its id."""
        rows = insert_row(
            self.client, "users", {"full_name": full_name, "email": email}
        )
        if not rows:
            raise StoreWriteError("Failed to create user in Supabase")
        user_id = rows[0].get("id")
        return str(user_id) if user_id is not None else None
