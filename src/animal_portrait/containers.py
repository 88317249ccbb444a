"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

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
from animal_portrait.config import Settings
from animal_portrait.services.generation import GenerationTimings
from animal_portrait.services.leads import WaitingListService
from animal_portrait.services.sessions import InMemoryWizardSessionStore, StepFactory


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_store: InMemoryWizardSessionStore
    waiting_list_service: WaitingListService
    close_resources: Callable[[], Awaitable[None]]


def generation_timings(settings: Settings) -> GenerationTimings:
    """Build generation timer settings from configuration."""
    return GenerationTimings(
        progress_step=settings.progress_step,
        progress_cap=settings.progress_cap,
        progress_interval_seconds=settings.progress_interval_seconds,
        generation_delay_seconds=settings.generation_delay_seconds,
        completion_delay_seconds=settings.completion_delay_seconds,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    step_factory = StepFactory(
        user_repository=SupabaseUserRepository(supabase_client),
        generated_photo_repository=SupabaseGeneratedPhotoRepository(supabase_client),
        purchase_repository=SupabasePurchaseRepository(supabase_client),
        generation_timings=generation_timings(resolved_settings),
        max_upload_bytes=resolved_settings.max_upload_bytes,
        payment_delay_seconds=resolved_settings.payment_delay_seconds,
    )
    session_store = InMemoryWizardSessionStore(
        factory=step_factory, ttl_seconds=resolved_settings.session_ttl_seconds
    )
    waiting_list_service = WaitingListService(
        SupabaseWaitingListRepository(supabase_client)
    )

    async def close_resources() -> None:
        session_store.close_all()

    return AppContainer(
        settings=resolved_settings,
        session_store=session_store,
        waiting_list_service=waiting_list_service,
        close_resources=close_resources,
    )
