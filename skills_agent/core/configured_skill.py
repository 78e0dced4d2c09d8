"""Skill assembled from plain values instead of a subclass."""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from skills_agent.core.skill import SkillMetadata
from skills_agent.core.tool import Tool


@dataclass
class ConfiguredSkill:
    """A skill built from metadata, a tool list and optional hook callables.

    Provides the same interface as class-based skills. Useful for small
    ad-hoc skills and test doubles.

    Example:
        skill = ConfiguredSkill(
            metadata=SkillMetadata(name="echo", description="Echo text back"),
            tools=[echo_tool],
            on_initialize=open_connection,
        )
    """

    metadata: SkillMetadata
    tools: list[Tool] = field(default_factory=list)
    on_initialize: Callable[[], Any] | None = None
    on_cleanup: Callable[[], Any] | None = None

    async def initialize(self) -> None:
        await self._call_hook(self.on_initialize)

    async def cleanup(self) -> None:
        await self._call_hook(self.on_cleanup)

    @staticmethod
    async def _call_hook(hook: Callable[[], Any] | None) -> None:
        if hook is None:
            return
        result = hook()
        if asyncio.iscoroutine(result):
            await result

    @property
    def name(self) -> str:
        return self.metadata.name

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
        return (
            f"ConfiguredSkill(name={self.name!r}, "
            f"tools={len(self.tools)}, version={self.metadata.version!r})"
        )
