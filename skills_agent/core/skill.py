"""Skill protocol definition."""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from skills_agent.core.tool import Tool


@dataclass(frozen=True)
class SkillMetadata:
    """Lightweight description of a skill.

    This is everything the router sees about a skill. It never carries tool
    schemas, so exposing the whole catalog stays cheap.

    Attributes:
        name: Unique identifier (lowercase, hyphens for spaces).
        description: What the skill does and when to use it.
        version: Skill version string.
        author: Optional author.
        tags: Free-form labels.
    """

    name: str
    description: str
    version: str = "1.0.0"
    author: str | None = None
    tags: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags or ()))


@runtime_checkable
class Skill(Protocol):
    """Protocol defining the interface for skills.

    A skill is a named bundle of tools. Any object providing ``metadata`` and
    ``tools`` qualifies; no base class is required.

    Skills may also define zero-argument ``initialize()`` and ``cleanup()``
    hooks (sync or async). The registry calls them when present and treats
    missing hooks as no-ops.

    Example:
        class WeatherSkill:
            @property
            def metadata(self) -> SkillMetadata:
                return SkillMetadata(name="weather", description="Weather lookups")

            @property
            def tools(self) -> list[Tool]:
                return [get_weather_tool]
    """

    @property
    def metadata(self) -> SkillMetadata:
        """Metadata exposed to the router."""
        ...

    @property
    def tools(self) -> list[Tool]:
        """Ordered list of tools provided by this skill."""
        ...
