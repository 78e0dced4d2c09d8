"""Main conversational agent with an incrementally grown tool set."""

import json
import logging
from collections.abc import Sequence
from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.runnables import Runnable

from skills_agent.core.exception import NotInitializedError
from skills_agent.core.messages import Conversation, Message, extract_text
from skills_agent.core.tool import Tool

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = """You are a helpful AI assistant with access to various skills.
Use the tools available to you to help answer questions and complete tasks.
Always be helpful, accurate, and funny in your responses."""

MAX_ITERATIONS_MESSAGE = "I couldn't complete the request within the allowed iterations."


class MainAgent:
    """Conversational agent that answers user turns.

    The agent owns:
    1. The current tool set, grown by :meth:`build_executor`
    2. The conversation history (user/assistant pairs)
    3. The executable context: the chat model bound to the tool set

    Example:
        agent = MainAgent(chat_model)
        agent.initialize()
        agent.build_executor(weather_tools)
        answer = await agent.run("What's the weather in Paris?")
    """

    def __init__(
        self,
        chat_model: BaseChatModel,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
        max_iterations: int = 15,
    ):
        """Initialize the agent.

        Args:
            chat_model: LangChain chat model to use.
            system_prompt: System prompt prepended to every turn.
            max_iterations: Maximum tool call iterations to prevent loops.
        """
        self.chat_model = chat_model
        self.system_prompt = system_prompt
        self.max_iterations = max_iterations
        self.history = Conversation()

        self._tools: list[Tool] = []
        self._executor: Runnable | None = None

    @property
    def tools(self) -> list[Tool]:
        """Current tool set, in merge order."""
        return list(self._tools)

    @property
    def tool_names(self) -> list[str]:
        return [tool.name for tool in self._tools]

    @property
    def is_initialized(self) -> bool:
        return self._executor is not None

    def initialize(self) -> None:
        """Start with an empty tool set."""
        self._tools = []
        self.build_executor()
        logger.info("Main agent initialized with no tools")

    def build_executor(self, new_tools: Sequence[Tool] | None = None) -> None:
        """Merge new tools into the tool set and rebuild the executor.

        Tools whose name is already present are dropped; the existing tool
        wins. The executor is rebuilt on every call, even without new tools.

        Args:
            new_tools: Tools to add.
        """
        if new_tools:
            seen = {tool.name for tool in self._tools}
            merged = list(self._tools)
            for tool in new_tools:
                if tool.name in seen:
                    continue
                seen.add(tool.name)
                merged.append(tool)

            added = len(merged) - len(self._tools)
            if added < len(new_tools):
                logger.debug("Skipped %d duplicate tools", len(new_tools) - added)
            self._tools = merged

        if self._tools:
            self._executor = self.chat_model.bind_tools(
                [tool.to_langchain_tool() for tool in self._tools]
            )
        else:
            self._executor = self.chat_model

        logger.debug("Executor rebuilt with tools %s", self.tool_names)

    def reset_tools(self) -> None:
        """Drop every tool. Call build_executor() afterwards to rebind."""
        self._tools = []

    def _get_tool(self, name: str) -> Tool | None:
        for tool in self._tools:
            if tool.name == name:
                return tool
        return None

    async def _execute_tool(self, tool_name: str, tool_args: dict[str, Any]) -> str:
        """Execute a tool and return the result as a string.

        Failures are reported back to the model as a JSON error payload.
        """
        tool = self._get_tool(tool_name)
        if tool is None:
            logger.warning("Model requested unavailable tool %s", tool_name)
            return json.dumps({"error": f"Tool '{tool_name}' is not available"})

        try:
            return await tool.run(tool_args)
        except Exception as e:
            logger.warning("Tool %s failed: %s", tool_name, e)
            return json.dumps({"error": str(e)})

    async def run(self, user_input: str) -> str:
        """Run one conversational turn.

        Args:
            user_input: The user's message.

        Returns:
            The assistant's text reply.

        Raises:
            NotInitializedError: If called before initialize().
        """
        if self._executor is None:
            raise NotInitializedError("Agent not initialized. Call initialize() first.")

        turn = Conversation()
        turn.add(Message.system(self.system_prompt))
        turn.extend(self.history.messages)
        turn.add_user(user_input)

        output: str | None = None
        for _ in range(self.max_iterations):
            response = await self._executor.ainvoke(turn.to_langchain())

            tool_calls = getattr(response, "tool_calls", None)
            if tool_calls:
                turn.add_assistant(extract_text(response.content), tool_calls=tool_calls)

                for tool_call in tool_calls:
                    result = await self._execute_tool(
                        tool_call["name"], tool_call.get("args") or {}
                    )
                    turn.add_tool_result(result, tool_call.get("id") or "")

                continue

            output = extract_text(response.content)
            break

        if output is None:
            logger.warning("Turn stopped after %d iterations", self.max_iterations)
            output = MAX_ITERATIONS_MESSAGE

        # History only changes once the model has fully answered
        self.history.add_user(user_input)
        self.history.add_assistant(output)

        return output

    def clear_history(self) -> None:
        """Forget the conversation. The tool set is left untouched."""
        self.history.clear()
        logger.debug("Chat history cleared")
