"""Standalone landing pages that collect waiting-list sign-ups."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from animal_portrait.api.models import EarlyAccessRequest, WaitingListRequest
from animal_portrait.api.pages import EARLY_ACCESS_PAGE_HTML, WAITING_LIST_PAGE_HTML

if TYPE_CHECKING:
    from animal_portrait.containers import AppContainer

router = APIRouter(tags=["leads"])


@router.get("/waiting-list", response_class=HTMLResponse)
async def waiting_list_page() -> HTMLResponse:
    return HTMLResponse(WAITING_LIST_PAGE_HTML)


@router.post("/waiting-list")
async def join_waiting_list(
    payload: WaitingListRequest, request: Request
) -> dict[str, str]:
    """Add a visitor with their country to the waiting list."""
    container: AppContainer = request.app.state.container
    container.waiting_list_service.join(
        email=payload.email, name=payload.name, country=payload.country
    )
    return {"status": "ok"}


@router.get("/early-access", response_class=HTMLResponse)
async def early_access_page() -> HTMLResponse:
    return HTMLResponse(EARLY_ACCESS_PAGE_HTML)


@router.post("/early-access")
async def join_early_access(
    payload: EarlyAccessRequest, request: Request
) -> dict[str, str]:
    """Add a visitor to the waiting list from the early-access page."""
    container: AppContainer = request.app.state.container
    container.waiting_list_service.join(email=payload.email, name=payload.full_name)
    return {"status": "ok"}
