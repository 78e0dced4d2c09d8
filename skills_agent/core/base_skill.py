"""Base skill implementation with common functionality."""

from abc import ABC, abstractmethod

from skills_agent.core.skill import SkillMetadata
from skills_agent.core.tool import Tool


class BaseSkill(ABC):
    """Abstract base class providing common skill functionality.

    Subclasses must implement:
    - metadata
    - tools

    Optional override:
    - initialize / cleanup (default to no-ops)
    """

    @property
    @abstractmethod
    def metadata(self) -> SkillMetadata:
        """Skill metadata."""
        ...

    @property
    @abstractmethod
    def tools(self) -> list[Tool]:
        """List of available tools."""
        ...

    async def initialize(self) -> None:
        """Prepare resources the tools need (override if needed)."""

    async def cleanup(self) -> None:
        """Release resources acquired in initialize (override if needed)."""

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def description(self) -> str:
        return self.metadata.description

    def get_tool(self, name: str) -> Tool | None:
        """Get a tool by name."""
        for tool in self.tools:
            if tool.name == name:
                return tool
        return None

    def get_tool_names(self) -> list[str]:
        """Get list of all tool names."""
        return [tool.name for tool in self.tools]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, tools={self.get_tool_names()})"
