"""Core module - skill system foundation."""

from skills_agent.core.agent import MainAgent
from skills_agent.core.base_skill import BaseSkill
from skills_agent.core.configured_skill import ConfiguredSkill
from skills_agent.core.exception import (
    ConfigurationError,
    NotInitializedError,
    RoutingError,
    RoutingParseError,
    SkillNotFoundError,
    SkillsAgentError,
)
from skills_agent.core.messages import Conversation, Message, MessageRole
from skills_agent.core.orchestrator import Orchestrator
from skills_agent.core.registry import LoadedSkill, SkillRegistry
from skills_agent.core.skill import Skill, SkillMetadata
from skills_agent.core.tool import Tool
from skills_agent.core.tool_agent import RouterResult, ToolAgent

__all__ = [
    # Skill system
    "Skill",
    "SkillMetadata",
    "BaseSkill",
    "ConfiguredSkill",
    "Tool",
    # Registry
    "SkillRegistry",
    "LoadedSkill",
    # Agents
    "MainAgent",
    "ToolAgent",
    "RouterResult",
    "Orchestrator",
    # Messages
    "Message",
    "MessageRole",
    "Conversation",
    # Errors
    "SkillsAgentError",
    "NotInitializedError",
    "SkillNotFoundError",
    "ConfigurationError",
    "RoutingError",
    "RoutingParseError",
]
