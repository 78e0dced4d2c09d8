"""API module."""

from skills_agent.api.routes import router

__all__ = ["router"]
