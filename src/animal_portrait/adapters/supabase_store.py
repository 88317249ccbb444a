"""Shared Supabase insert helper."""

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from animal_portrait.services.errors import StoreWriteError


def insert_row(
    client: Client, table: str, payload: dict[str, object]
) -> list[dict[str, object]]:
    """Insert a single row and return the representation sent back by the store."""
    try:
        response = client.table(table).insert(payload).execute()
    except APIError as exc:
        raise StoreWriteError(exc.message or str(exc)) from exc
    except httpx.HTTPError as exc:
        raise StoreWriteError(str(exc) or "Could not reach the data store") from exc
    return response.data or []
