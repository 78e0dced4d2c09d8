"""Skill registry with progressive disclosure and lifecycle tracking."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from skills_agent.core.exception import SkillNotFoundError
from skills_agent.core.skill import Skill, SkillMetadata
from skills_agent.core.tool import Tool

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedSkill:
    """Result of loading a skill for the current session."""

    name: str
    tools: list[Tool]


@dataclass
class SkillRegistry:
    """Registry for managing skills and their lifecycle.

    Tracks three independent sets over skill names:
    - registered: every known skill
    - initialized: skills whose ``initialize`` hook has run
    - loaded: skills whose tools were handed out this session

    Only metadata is exposed up front; tools are handed out by
    :meth:`load_skill` once a skill is actually needed.

    Example:
        registry = SkillRegistry()
        registry.register_all([CalculatorSkill(), WeatherSkill()])
        await registry.initialize_all()

        loaded = registry.load_skill("weather")
        if loaded:
            agent.build_executor(loaded.tools)
    """

    _skills: dict[str, Skill] = field(default_factory=dict)
    _initialized: set[str] = field(default_factory=set)
    _loaded: list[str] = field(default_factory=list)

    def register(self, skill: Skill) -> None:
        """Add a skill to the registry.

        Registering a name twice overwrites the earlier skill and logs a
        warning. Initialized and loaded state of that name is kept.

        Args:
            skill: The skill to register.
        """
        name = skill.metadata.name

        if name in self._skills:
            logger.warning("Skill %s already registered, overwriting", name)

        self._skills[name] = skill
        logger.debug("Skill %s registered", name)

    def register_all(self, skills: Iterable[Skill]) -> None:
        """Register multiple skills, in order."""
        for skill in skills:
            self.register(skill)

    def get(self, name: str) -> Skill | None:
        """Get a skill by name, or None if not registered."""
        return self._skills.get(name)

    def get_names(self) -> list[str]:
        """Get names of all registered skills."""
        return list(self._skills.keys())

    def get_all_metadata(self) -> list[SkillMetadata]:
        """Get metadata for all skills.

        Returns:
            Metadata only; tool schemas are never included.
        """
        return [skill.metadata for skill in self._skills.values()]

    def get_catalog(self) -> str:
        """Format the metadata catalog used in the routing prompt."""
        return "\n".join(
            f"- {metadata.name}: {metadata.description}"
            for metadata in self.get_all_metadata()
        )

    def load_skill(self, name: str) -> LoadedSkill | None:
        """Load a skill for the current session.

        Args:
            name: The skill name.

        Returns:
            The skill's tools, or None if the skill is unknown or was already
            loaded this session.
        """
        skill = self._skills.get(name)
        if skill is None:
            logger.warning("Skill %s not found in registry", name)
            return None

        if name in self._loaded:
            logger.debug("Skill %s already loaded, skipping", name)
            return None

        self._loaded.append(name)
        tools = list(skill.tools)
        logger.info("Skill %s loaded with tools %s", name, [t.name for t in tools])

        return LoadedSkill(name=name, tools=tools)

    def is_skill_loaded(self, name: str) -> bool:
        """Check if a skill has been loaded this session."""
        return name in self._loaded

    def is_skill_initialized(self, name: str) -> bool:
        """Check if a skill's initialize hook has run."""
        return name in self._initialized

    def get_loaded_skill_names(self) -> list[str]:
        """Get names of skills loaded this session, in load order."""
        return list(self._loaded)

    async def initialize_skill(self, name: str) -> None:
        """Run a skill's initialize hook once.

        Args:
            name: The skill name.

        Raises:
            SkillNotFoundError: If the skill is not registered.
        """
        skill = self._skills.get(name)
        if skill is None:
            raise SkillNotFoundError(f"Skill '{name}' is not registered")

        if name in self._initialized:
            return

        await _run_hook(skill, "initialize")

        self._initialized.add(name)
        logger.debug("Skill %s initialized", name)

    async def initialize_all(self) -> None:
        """Initialize every registered skill."""
        for name in list(self._skills):
            await self.initialize_skill(name)
        logger.info("All skills initialized (%d)", len(self._skills))

    async def cleanup_skill(self, name: str) -> None:
        """Run a skill's cleanup hook if it was initialized.

        Raises:
            SkillNotFoundError: If the skill is not registered.
        """
        skill = self._skills.get(name)
        if skill is None:
            raise SkillNotFoundError(f"Skill '{name}' is not registered")

        if name not in self._initialized:
            return

        await _run_hook(skill, "cleanup")

        self._initialized.discard(name)
        logger.debug("Skill %s cleaned up", name)

    async def cleanup_all(self) -> None:
        """Run cleanup hooks of all initialized skills."""
        for name in list(self._skills):
            await self.cleanup_skill(name)

    def reset_loaded_skills(self) -> None:
        """Forget which skills were loaded this session.

        Initialization state is kept and no cleanup hooks run.
        """
        self._loaded.clear()

    @property
    def skill_count(self) -> int:
        """Number of registered skills."""
        return len(self._skills)

    @property
    def tool_count(self) -> int:
        """Total number of tools across all skills."""
        return sum(len(skill.tools) for skill in self._skills.values())

    def __repr__(self) -> str:
        return (
            f"SkillRegistry(skills={self.get_names()}, "
            f"loaded={self.get_loaded_skill_names()})"
        )


async def _run_hook(skill: Skill, hook_name: str) -> None:
    """Call an optional lifecycle hook, awaiting it when async."""
    hook = getattr(skill, hook_name, None)
    if hook is None:
        return
    result = hook()
    if asyncio.iscoroutine(result):
        await result
