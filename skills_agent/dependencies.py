"""Dependency wiring shared by the API and the CLI."""

from datetime import timedelta
from functools import lru_cache

from langchain_core.language_models import BaseChatModel

from skills_agent.config import get_settings
from skills_agent.core import Orchestrator, SkillRegistry
from skills_agent.llm import LLMProvider, create_llm_provider
from skills_agent.sessions import SessionStore
from skills_agent.skills import builtin_skills


@lru_cache
def get_llm_provider() -> LLMProvider:
    """Get cached LLM provider."""
    return create_llm_provider(get_settings())


def get_chat_model() -> BaseChatModel:
    """Chat model for the main agent."""
    return get_llm_provider().get_chat_model()


def get_router_model() -> BaseChatModel:
    """Chat model for routing, honoring ROUTER_MODEL and ROUTER_TEMPERATURE."""
    settings = get_settings()
    return get_llm_provider().get_chat_model(
        model=settings.router_model,
        temperature=settings.router_temperature,
    )


def get_router_model_name() -> str:
    settings = get_settings()
    return settings.router_model or get_llm_provider().model_name


@lru_cache
def get_skill_registry() -> SkillRegistry:
    """Get cached registry of built-in skills.

    Used for catalog listings only; every session gets its own registry.
    """
    registry = SkillRegistry()
    registry.register_all(builtin_skills())
    return registry


def create_orchestrator() -> Orchestrator:
    """Create an uninitialized orchestrator with fresh built-in skills."""
    settings = get_settings()
    return Orchestrator(
        chat_model=get_chat_model(),
        router_model=get_router_model(),
        registry=SkillRegistry(),
        skills=builtin_skills(),
        max_iterations=settings.max_iterations,
    )


@lru_cache
def get_session_store() -> SessionStore:
    """Get the process-wide in-memory session store."""
    settings = get_settings()
    ttl = None
    if settings.session_ttl_minutes is not None:
        ttl = timedelta(minutes=settings.session_ttl_minutes)
    return SessionStore(create_orchestrator, ttl=ttl, max_sessions=settings.max_sessions)
