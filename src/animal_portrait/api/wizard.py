"""Wizard API endpoints backing the client-rendered wizard page."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import (
    APIRouter,
    Cookie,
    Depends,
    File,
    HTTPException,
    Request,
    UploadFile,  # noqa: TC002
    status,
)
from fastapi.responses import JSONResponse, Response

from animal_portrait.api.models import AnimalChoice, SignUpRequest, TierChoice
from animal_portrait.services.animals import ChooseAnimalStep
from animal_portrait.services.generation import GeneratePhotoStep
from animal_portrait.services.purchases import PurchaseStep
from animal_portrait.services.sessions import WizardSession  # noqa: TC001
from animal_portrait.services.signup import SignUpStep
from animal_portrait.services.uploads import PHOTO_URL_PREFIX, UploadPhotoStep

if TYPE_CHECKING:
    from animal_portrait.containers import AppContainer

SESSION_COOKIE = "wizard_session"

router = APIRouter(prefix="/wizard", tags=["wizard"])


def _parse_session_id(raw: str | None) -> UUID | None:
    if not raw:
        return None
    try:
        return UUID(raw)
    except ValueError:
        return None


def get_session(
    request: Request, wizard_session: str | None = Cookie(default=None)
) -> WizardSession:
    """Return the caller's wizard session, creating one if needed."""
    container: AppContainer = request.app.state.container
    return container.session_store.get_or_create(_parse_session_id(wizard_session))


def require_session(
    request: Request, wizard_session: str | None = Cookie(default=None)
) -> WizardSession:
    """Return the caller's existing wizard session."""
    container: AppContainer = request.app.state.container
    session = container.session_store.get(_parse_session_id(wizard_session))
    if session is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return session


def _state_response(
    session: WizardSession,
    status_code: int = status.HTTP_200_OK,
    detail: str | None = None,
) -> JSONResponse:
    content = session.snapshot()
    if detail is not None:
        content["detail"] = detail
    response = JSONResponse(content=content, status_code=status_code)
    response.set_cookie(SESSION_COOKIE, str(session.id), httponly=True, samesite="lax")
    return response


@router.get("/state")
async def wizard_state(session: WizardSession = Depends(get_session)) -> JSONResponse:
    """Return the current step and its view data."""
    return _state_response(session)


@router.post("/sign-up")
async def sign_up(
    payload: SignUpRequest, session: WizardSession = Depends(get_session)
) -> JSONResponse:
    """Submit the sign-up form."""
    view = session.require(SignUpStep)
    if not view.submit(payload.full_name, payload.email):
        return _state_response(
            session, status.HTTP_502_BAD_GATEWAY, detail=view.error
        )
    return _state_response(session)


@router.post("/upload")
async def upload_photo(
    file: UploadFile = File(...), session: WizardSession = Depends(get_session)
) -> JSONResponse:
    """Accept a photo chosen by browsing or drag-and-drop."""
    view = session.require(UploadPhotoStep)
    content = await file.read()
    view.select_file(file.filename or "photo", file.content_type, content)
    return _state_response(session)


@router.post("/upload/continue")
async def upload_continue(
    session: WizardSession = Depends(get_session),
) -> JSONResponse:
    session.require(UploadPhotoStep).continue_()
    return _state_response(session)


@router.post("/animal")
async def choose_animal(
    payload: AnimalChoice, session: WizardSession = Depends(get_session)
) -> JSONResponse:
    session.require(ChooseAnimalStep).select(payload.animal)
    return _state_response(session)


@router.post("/animal/continue")
async def animal_continue(
    session: WizardSession = Depends(get_session),
) -> JSONResponse:
    session.require(ChooseAnimalStep).continue_()
    return _state_response(session)


@router.post("/generate/retry")
async def generate_retry(
    session: WizardSession = Depends(get_session),
) -> JSONResponse:
    """Restart a generation whose store write failed."""
    session.require(GeneratePhotoStep).retry()
    return _state_response(session)


@router.post("/tier")
async def choose_tier(
    payload: TierChoice, session: WizardSession = Depends(get_session)
) -> JSONResponse:
    session.require(PurchaseStep).select_tier(payload.tier)
    return _state_response(session)


@router.post("/purchase")
async def purchase(session: WizardSession = Depends(get_session)) -> JSONResponse:
    """Run the simulated payment for the selected tier."""
    view = session.require(PurchaseStep)
    if not await view.purchase():
        return _state_response(
            session, status.HTTP_502_BAD_GATEWAY, detail=view.error
        )
    return _state_response(session)


@router.get("/download")
async def download(session: WizardSession = Depends(require_session)) -> Response:
    """Download the purchased image as an attachment."""
    link = session.require(PurchaseStep).download()
    photo = session.find_photo(link.url.removeprefix(PHOTO_URL_PREFIX))
    if photo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(
        content=photo.content,
        media_type=photo.content_type,
        headers={"Content-Disposition": f'attachment; filename="{link.filename}"'},
    )


@router.post("/start-over")
async def start_over(session: WizardSession = Depends(get_session)) -> JSONResponse:
    session.require(PurchaseStep).start_over()
    return _state_response(session)


@router.post("/back")
async def back(session: WizardSession = Depends(get_session)) -> JSONResponse:
    session.back()
    return _state_response(session)


@router.get("/photos/{photo_id}")
async def photo(
    photo_id: str, session: WizardSession = Depends(require_session)
) -> Response:
    """Serve an uploaded photo to the session that uploaded it."""
    uploaded = session.find_photo(photo_id)
    if uploaded is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(content=uploaded.content, media_type=uploaded.content_type)
