"""Supabase-backed purchase repository."""

from dataclasses import dataclass

from supabase import Client

from animal_portrait.adapters.supabase_store import insert_row
from animal_portrait.services.purchases import PurchaseRepository


@dataclass
class SupabasePurchaseRepository(PurchaseRepository):
    """Supabase implementation for purchases."""

    client: Client

    def create_purchase(
        self, user_id: str | None, tier: str, price: float, status: str
    ) -> None:
        """Insert a purchase row."""
        insert_row(
            self.client,
            "purchases",
            {"user_id": user_id, "tier": tier, "price": price, "status": status},
        )
