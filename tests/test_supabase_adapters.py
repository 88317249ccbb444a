"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field

import httpx
import pytest
from postgrest.exceptions import APIError

from animal_portrait.adapters.supabase_generated_photo_repository import (
    SupabaseGeneratedPhotoRepository,
)
from animal_portrait.adapters.supabase_purchase_repository import (
    SupabasePurchaseRepository,
)
from animal_portrait.adapters.supabase_user_repository import SupabaseUserRepository
from animal_portrait.adapters.supabase_waiting_list_repository import (
    SupabaseWaitingListRepository,
)
from animal_portrait.domain.leads import WaitingListEntry
from animal_portrait.services.errors import StoreWriteError


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: list[list[dict[str, object]]] = field(default_factory=list)
    payloads: list[object] = field(default_factory=list)
    error: Exception | None = None

    def queue(self, data: list[dict[str, object]]) -> None:
        self.response_queue.append(data)

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.payloads.append(payload)
        return self

    def execute(self) -> FakeResponse:
        if self.error is not None:
            raise self.error
        data = self.response_queue.pop(0) if self.response_queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_user_repository_returns_assigned_id() -> None:
    client = FakeSupabaseClient()
    client.table("users").queue(
        [{"id": 42, "full_name": "Jane Doe", "email": "jane@x.com"}]
    )

    user_id = SupabaseUserRepository(client).create_user("Jane Doe", "jane@x.com")

    assert user_id == "42"
    assert client.table("users").payloads == [
        {"full_name": "Jane Doe", "email": "jane@x.com"}
    ]


def test_supabase_user_repository_requires_a_row() -> None:
    client = FakeSupabaseClient()

    with pytest.raises(StoreWriteError, match="Failed to create user"):
        SupabaseUserRepository(client).create_user("Jane Doe", "jane@x.com")


def test_api_error_message_is_kept_verbatim() -> None:
    client = FakeSupabaseClient()
    client.table("users").error = APIError(
        {
            "message": (
                'duplicate key value violates unique constraint "users_email_key"'
            ),
            "code": "23505",
            "hint": None,
            "details": None,
        }
    )

    with pytest.raises(StoreWriteError) as excinfo:
        SupabaseUserRepository(client).create_user("Jane Doe", "jane@x.com")

    assert excinfo.value.message == (
        'duplicate key value violates unique constraint "users_email_key"'
    )


def test_transport_error_becomes_store_error() -> None:
    client = FakeSupabaseClient()
    client.table("purchases").error = httpx.ConnectError("connection refused")

    with pytest.raises(StoreWriteError, match="connection refused"):
        SupabasePurchaseRepository(client).create_purchase(
            user_id="42", tier="print", price=24.99, status="completed"
        )


def test_supabase_generated_photo_repository_payload() -> None:
    client = FakeSupabaseClient()

    SupabaseGeneratedPhotoRepository(client).create_generated_photo(
        user_id="42", animal="panda", photo_url="/wizard/photos/abc", status="generated"
    )

    assert client.table("generated_photos").payloads == [
        {
            "user_id": "42",
            "animal": "panda",
            "photo_url": "/wizard/photos/abc",
            "status": "generated",
        }
    ]


def test_supabase_purchase_repository_payload() -> None:
    client = FakeSupabaseClient()

    SupabasePurchaseRepository(client).create_purchase(
        user_id="42", tier="premium", price=49.99, status="completed"
    )

    assert client.table("purchases").payloads == [
        {"user_id": "42", "tier": "premium", "price": 49.99, "status": "completed"}
    ]


def test_supabase_waiting_list_repository_payload() -> None:
    client = FakeSupabaseClient()

    SupabaseWaitingListRepository(client).add_entry(
        WaitingListEntry(email="ana@x.com", name="Ana", country="Portugal")
    )

    assert client.table("waiting_list").payloads == [
        {"email": "ana@x.com", "name": "Ana", "country": "Portugal"}
    ]
