"""API routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from skills_agent.api.schemas import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    HealthResponse,
    SessionInfo,
    SessionListResponse,
    SkillInfo,
    SkillsResponse,
)
from skills_agent.config import get_settings
from skills_agent.core import NotInitializedError
from skills_agent.dependencies import (
    get_llm_provider,
    get_router_model_name,
    get_session_store,
    get_skill_registry,
)
from skills_agent.sessions import Session, SessionStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _session_info(session: Session) -> SessionInfo:
    return SessionInfo(
        session_id=session.session_id,
        created_at=session.created_at,
        last_accessed=session.last_accessed,
        message_count=session.message_count,
        loaded_skills=session.orchestrator.get_loaded_skills(),
    )


async def _run_turn(session: Session, message: str) -> ChatResponse:
    try:
        response = await session.run(message)
    except NotInitializedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception:
        logger.exception("Failed to process message in session %s", session.session_id)
        raise HTTPException(
            status_code=500,
            detail="Failed to process message. Please try again.",
        )

    return ChatResponse(
        response=response,
        session_id=session.session_id,
        loaded_skills=session.orchestrator.get_loaded_skills(),
    )


async def _get_session_or_404(session_store: SessionStore, session_id: str) -> Session:
    session = await session_store.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


# Health & Info


@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
)
async def health_check(
    session_store: SessionStore = Depends(get_session_store),
) -> HealthResponse:
    """Check application health status."""
    settings = get_settings()
    provider = get_llm_provider()
    registry = get_skill_registry()

    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        environment=settings.env,
        llm_provider=provider.provider_name,
        llm_model=provider.model_name,
        router_model=get_router_model_name(),
        skills_count=registry.skill_count,
        tools_count=registry.tool_count,
        sessions_count=await session_store.count(),
    )


@router.get(
    "/skills",
    response_model=SkillsResponse,
    tags=["Info"],
)
async def list_skills() -> SkillsResponse:
    """List the skill catalog (metadata only)."""
    registry = get_skill_registry()
    return SkillsResponse(
        skills=[
            SkillInfo(
                name=metadata.name,
                description=metadata.description,
                version=metadata.version,
                tags=sorted(metadata.tags),
            )
            for metadata in registry.get_all_metadata()
        ]
    )


# Chat


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={500: {"model": ErrorResponse}},
    tags=["Chat"],
)
async def chat(
    request: ChatRequest,
    session_store: SessionStore = Depends(get_session_store),
) -> ChatResponse:
    """Process a chat message with automatic session management.

    If session_id is provided, continues that conversation.
    If not provided (or unknown), creates a new session.
    """
    session = None
    if request.session_id:
        session = await session_store.get(request.session_id)
        if not session:
            logger.warning("Session %s not found, creating new session", request.session_id)

    if not session:
        session = await session_store.create()

    return await _run_turn(session, request.message)


# Sessions


@router.post(
    "/sessions",
    response_model=SessionInfo,
    status_code=201,
    tags=["Sessions"],
)
async def create_session(
    session_store: SessionStore = Depends(get_session_store),
) -> SessionInfo:
    """Create an empty session."""
    session = await session_store.create()
    return _session_info(session)


@router.get(
    "/sessions",
    response_model=SessionListResponse,
    tags=["Sessions"],
)
async def list_sessions(
    session_store: SessionStore = Depends(get_session_store),
) -> SessionListResponse:
    """List live sessions."""
    sessions = await session_store.list_all()
    return SessionListResponse(
        sessions=[_session_info(s) for s in sessions],
        total=len(sessions),
    )


@router.get(
    "/sessions/{session_id}",
    response_model=SessionInfo,
    responses={404: {"model": ErrorResponse}},
    tags=["Sessions"],
)
async def get_session(
    session_id: str,
    session_store: SessionStore = Depends(get_session_store),
) -> SessionInfo:
    """Get session details, including loaded skills."""
    session = await _get_session_or_404(session_store, session_id)
    return _session_info(session)


@router.post(
    "/sessions/{session_id}/chat",
    response_model=ChatResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    tags=["Sessions"],
)
async def session_chat(
    session_id: str,
    request: ChatRequest,
    session_store: SessionStore = Depends(get_session_store),
) -> ChatResponse:
    """Continue a conversation in an existing session."""
    session = await _get_session_or_404(session_store, session_id)
    return await _run_turn(session, request.message)


@router.post(
    "/sessions/{session_id}/clear",
    response_model=SessionInfo,
    responses={404: {"model": ErrorResponse}},
    tags=["Sessions"],
)
async def clear_session(
    session_id: str,
    session_store: SessionStore = Depends(get_session_store),
) -> SessionInfo:
    """Clear history, tools and loaded skills of a session."""
    session = await _get_session_or_404(session_store, session_id)
    try:
        await session.clear()
    except NotInitializedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _session_info(session)


@router.delete(
    "/sessions/{session_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}},
    tags=["Sessions"],
)
async def delete_session(
    session_id: str,
    session_store: SessionStore = Depends(get_session_store),
) -> None:
    """Delete a session."""
    if not await session_store.delete(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
