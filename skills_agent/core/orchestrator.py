"""Two-phase orchestration: route the turn, then answer it."""

import logging
from collections.abc import Sequence

from langchain_core.language_models import BaseChatModel

from skills_agent.core.agent import DEFAULT_SYSTEM_PROMPT, MainAgent
from skills_agent.core.exception import ConfigurationError, NotInitializedError
from skills_agent.core.registry import SkillRegistry
from skills_agent.core.skill import Skill
from skills_agent.core.tool import Tool
from skills_agent.core.tool_agent import RouterResult, ToolAgent

logger = logging.getLogger(__name__)


class Orchestrator:
    """Coordinates the router, the registry and the main agent.

    Each turn:
    1. The ToolAgent picks the skills the message needs
    2. Newly requested skills are loaded from the registry
    3. If tools were added, the MainAgent rebuilds its executor
    4. The MainAgent answers with its current tool set

    One orchestrator is one session. Turns must not run concurrently on the
    same instance.

    Example:
        orchestrator = Orchestrator(chat_model)
        await orchestrator.initialize()
        answer = await orchestrator.run("What's 15% of 80?")
        orchestrator.get_loaded_skills()  # ["calculator"]
    """

    def __init__(
        self,
        chat_model: BaseChatModel,
        router_model: BaseChatModel | None = None,
        registry: SkillRegistry | None = None,
        skills: Sequence[Skill] | None = None,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
        max_iterations: int = 15,
    ):
        """Create an orchestrator and register its skills.

        Args:
            chat_model: Model answering the conversation.
            router_model: Model used for routing (defaults to chat_model).
            registry: Registry to use. A new one is created if omitted.
            skills: Skills to register. Defaults to the built-in skills
                when no registry is given.
            system_prompt: System prompt of the main agent.
            max_iterations: Tool-call rounds allowed per turn.
        """
        self.chat_model = chat_model
        self.router_model = router_model or chat_model
        self.system_prompt = system_prompt
        self.max_iterations = max_iterations

        if registry is None:
            registry = SkillRegistry()
            if skills is None:
                from skills_agent.skills import builtin_skills

                skills = builtin_skills()
        self.registry = registry
        if skills:
            self.registry.register_all(skills)

        self.tool_agent: ToolAgent | None = None
        self.main_agent: MainAgent | None = None
        self._tools: list[Tool] = []

    @property
    def is_initialized(self) -> bool:
        return self.tool_agent is not None and self.main_agent is not None

    @property
    def tools(self) -> list[Tool]:
        """Tools accumulated this session, in load order."""
        return list(self._tools)

    async def initialize(self) -> None:
        """Initialize skills and create both agents.

        Calling it again starts a fresh session: the new main agent has no
        tools, so the accumulated tools and loaded skills are reset too.

        Raises:
            ConfigurationError: If no skills are registered.
        """
        await self.registry.initialize_all()
        if self.registry.skill_count == 0:
            raise ConfigurationError("No skills registered.")

        self._tools = []
        self.registry.reset_loaded_skills()
        self.tool_agent = ToolAgent(self.router_model, self.registry)
        self.main_agent = MainAgent(
            self.chat_model,
            system_prompt=self.system_prompt,
            max_iterations=self.max_iterations,
        )
        self.main_agent.initialize()
        logger.info("Orchestrator initialized with skills %s", self.registry.get_names())

    def _require_initialized(self) -> tuple[ToolAgent, MainAgent]:
        if self.tool_agent is None or self.main_agent is None:
            raise NotInitializedError("Orchestrator not initialized. Call initialize() first.")
        return self.tool_agent, self.main_agent

    async def run(self, user_input: str) -> str:
        """Route and answer one user message.

        Raises:
            NotInitializedError: If called before initialize().
        """
        tool_agent, main_agent = self._require_initialized()

        result = await tool_agent.run(user_input)
        if self.handle_tools_loading(result):
            main_agent.build_executor(self._tools)

        return await main_agent.run(user_input)

    def handle_tools_loading(self, result: RouterResult) -> bool:
        """Load the skills named by the router.

        Returns:
            True if any tools were added and the executor needs a rebuild.
        """
        if not result.skills:
            logger.debug("No skills requested")
            return False

        logger.info("Processing skill request %s", result.skills)

        tools_added = False
        for skill_name in result.skills:
            if self._load_skill_tools(skill_name):
                tools_added = True

        if tools_added:
            logger.info("Tools added (%d total), executor rebuild needed", len(self._tools))

        return tools_added

    def _load_skill_tools(self, skill_name: str) -> bool:
        loaded = self.registry.load_skill(skill_name)
        if loaded is None:
            # Unknown or already loaded
            return False

        self._tools.extend(loaded.tools)
        return True

    def get_loaded_skills(self) -> list[str]:
        """Names of skills loaded this session."""
        return self.registry.get_loaded_skill_names()

    def get_available_skills(self) -> list[dict[str, str]]:
        """Name and description of every registered skill."""
        return [
            {"name": metadata.name, "description": metadata.description}
            for metadata in self.registry.get_all_metadata()
        ]

    def clear_history(self) -> None:
        """Start a fresh session: history, tools and loaded skills are reset.

        Raises:
            NotInitializedError: If called before initialize().
        """
        _, main_agent = self._require_initialized()

        main_agent.clear_history()
        self._tools = []
        main_agent.reset_tools()
        main_agent.build_executor([])
        self.registry.reset_loaded_skills()
        logger.info("History cleared")

    async def shutdown(self) -> None:
        """Run skill cleanup hooks. Call once when the session ends."""
        await self.registry.cleanup_all()
        logger.debug("Orchestrator shut down")
