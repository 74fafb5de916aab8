import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from models.icp import OutreachTemplate
from models.requests import GenerateRequest, OutreachEditRequest, RefineRequest
from models.responses import ErrorResponse, FormOptions, SessionView
from models.state import CompleteState, ErrorKind, ErrorState
from services.errors import ICPServiceError
from services.form import (
    EXAMPLE_CATALOG,
    HIGH_VALUE_INDUSTRIES,
    MARKET_MAPPING,
    OTHER_INDUSTRY,
    FormError,
    build_inputs,
)
from services.report import render_report
from services.session import ICPSession, InvalidTransitionError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["icp"])

_ERROR_RESPONSES = {
    409: {"model": ErrorResponse, "description": "Action not allowed in the current phase"},
    500: {"model": ErrorResponse, "description": "Service not configured"},
    502: {"model": ErrorResponse, "description": "Generative model call failed"},
}


def get_session(request: Request) -> ICPSession:
    return request.app.state.session


def _conflict(e: InvalidTransitionError) -> HTTPException:
    return HTTPException(
        status_code=409,
        detail={"error": "Action not allowed", "detail": str(e)},
    )


def _status_for(kind: ErrorKind) -> int:
    return 500 if kind == ErrorKind.CONFIGURATION else 502


def _view_or_raise(state) -> SessionView:
    """Generation failures are kept in session state and also reported as HTTP errors."""
    if isinstance(state, ErrorState):
        raise HTTPException(
            status_code=_status_for(state.kind),
            detail={
                "error": "ICP generation failed",
                "detail": state.message,
                "kind": state.kind.value,
            },
        )
    return SessionView.from_state(state)


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.get("/options", response_model=FormOptions)
async def options() -> FormOptions:
    return FormOptions(
        markets=MARKET_MAPPING,
        industries=HIGH_VALUE_INDUSTRIES,
        other_industry=OTHER_INDUSTRY,
        example_catalog=EXAMPLE_CATALOG,
    )


@router.get("/session", response_model=SessionView)
async def current_session(session: ICPSession = Depends(get_session)) -> SessionView:
    return SessionView.from_state(session.state)


@router.post(
    "/generate",
    response_model=SessionView,
    responses={422: {"model": ErrorResponse, "description": "Invalid form selection"}, **_ERROR_RESPONSES},
    summary="Generate an Ideal Customer Profile",
    description=(
        "Builds the prompt from the service catalog, target market and industry, "
        "calls Gemini with the ICP schema and returns the completed session."
    ),
)
async def generate(
    body: GenerateRequest,
    session: ICPSession = Depends(get_session),
) -> SessionView:
    try:
        inputs = build_inputs(
            body.catalog_text, body.country, body.city, body.industry, body.custom_industry,
        )
    except FormError as e:
        raise HTTPException(status_code=422, detail={"error": "Invalid form input", "detail": str(e)})

    try:
        state = await session.submit(inputs)
    except InvalidTransitionError as e:
        raise _conflict(e)
    return _view_or_raise(state)


@router.post("/retry", response_model=SessionView, responses=_ERROR_RESPONSES)
async def retry(session: ICPSession = Depends(get_session)) -> SessionView:
    try:
        state = await session.retry()
    except InvalidTransitionError as e:
        raise _conflict(e)
    return _view_or_raise(state)


@router.post("/reset", response_model=SessionView, responses={409: _ERROR_RESPONSES[409]})
async def reset(session: ICPSession = Depends(get_session)) -> SessionView:
    try:
        state = session.reset()
    except InvalidTransitionError as e:
        raise _conflict(e)
    return SessionView.from_state(state)


@router.put("/outreach", response_model=OutreachTemplate, responses={409: _ERROR_RESPONSES[409]})
async def edit_outreach(
    body: OutreachEditRequest,
    session: ICPSession = Depends(get_session),
) -> OutreachTemplate:
    try:
        return session.edit_draft(body.subject, body.body)
    except InvalidTransitionError as e:
        raise _conflict(e)


@router.post(
    "/outreach/refine",
    response_model=OutreachTemplate,
    responses=_ERROR_RESPONSES,
    summary="Rewrite the outreach draft from feedback",
)
async def refine_outreach(
    body: RefineRequest,
    session: ICPSession = Depends(get_session),
) -> OutreachTemplate:
    try:
        return await session.refine_draft(body.feedback)
    except InvalidTransitionError as e:
        raise _conflict(e)
    except ValueError as e:
        raise HTTPException(status_code=422, detail={"error": "Invalid feedback", "detail": str(e)})
    except ICPServiceError as e:
        logger.error(f"Outreach refinement failed [{e.kind.value}]: {e.message}")
        raise HTTPException(
            status_code=_status_for(e.kind),
            detail={"error": "Refinement failed", "detail": e.message, "kind": e.kind.value},
        )


@router.get("/report", response_class=PlainTextResponse, responses={409: _ERROR_RESPONSES[409]})
async def report(session: ICPSession = Depends(get_session)) -> PlainTextResponse:
    state = session.state
    if not isinstance(state, CompleteState):
        raise HTTPException(
            status_code=409,
            detail={"error": "No report available", "detail": f"Session is {state.phase.value}"},
        )
    markdown = render_report(state.report, state.inputs.catalog_text, state.draft)
    return PlainTextResponse(markdown, media_type="text/markdown")
