"""API request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

# Health & Info

class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    environment: str
    llm_provider: str
    llm_model: str
    router_model: str
    skills_count: int
    tools_count: int
    sessions_count: int


class SkillInfo(BaseModel):
    """Skill metadata, without tool schemas."""

    name: str
    description: str
    version: str
    tags: list[str] = []


class SkillsResponse(BaseModel):
    """List of skills response."""

    skills: list[SkillInfo]


# Chat

class ChatRequest(BaseModel):
    """Chat request body."""

    message: str = Field(min_length=1, max_length=10000)
    session_id: str | None = Field(
        default=None,
        description="Optional session ID for conversation continuity",
    )


class ChatResponse(BaseModel):
    """Chat response body."""

    response: str
    session_id: str
    loaded_skills: list[str] = []


# Sessions

class SessionInfo(BaseModel):
    """Session information."""

    session_id: str
    created_at: datetime
    last_accessed: datetime
    message_count: int
    loaded_skills: list[str] = []


class SessionListResponse(BaseModel):
    """List of sessions response."""

    sessions: list[SessionInfo]
    total: int


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str
