"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage
from pydantic import BaseModel

from skills_agent.config import Settings
from skills_agent.core import ConfiguredSkill, SkillMetadata, SkillRegistry, Tool


# Settings Fixtures

@pytest.fixture
def test_settings() -> Settings:
    """Test settings with defaults."""
    return Settings(
        env="development",
        debug=True,
        llm_provider="ollama",
        ollama_base_url="http://localhost:11434",
        ollama_model="llama3.2",
    )


# Tool/Skill Fixtures

class SimpleInput(BaseModel):
    """Simple input for test tools."""
    value: str


def simple_function(value: str) -> str:
    """Simple test function."""
    return f"Result: {value}"


async def async_function(value: str) -> str:
    """Async test function."""
    return f"Async: {value}"


def make_tool(name: str, description: str | None = None) -> Tool:
    """Create a tool with the given name."""
    return Tool(
        name=name,
        description=description or f"Tool {name}",
        function=async_function,
        input_schema=SimpleInput,
    )


def make_skill(name: str, tool_names: list[str], **kwargs) -> ConfiguredSkill:
    """Create a configured skill whose tools are described by skill name."""
    return ConfiguredSkill(
        metadata=SkillMetadata(name=name, description=f"Skill {name}"),
        tools=[make_tool(tool_name, f"{tool_name} from {name}") for tool_name in tool_names],
        **kwargs,
    )


@pytest.fixture
def simple_tool() -> Tool:
    """Simple tool for testing."""
    return Tool(
        name="simple_tool",
        description="A simple test tool",
        function=simple_function,
        input_schema=SimpleInput,
    )


@pytest.fixture
def async_tool() -> Tool:
    """Async tool for testing."""
    return Tool(
        name="async_tool",
        description="An async test tool",
        function=async_function,
        input_schema=SimpleInput,
    )


@pytest.fixture
def skill_a() -> ConfiguredSkill:
    return make_skill("skill_a", ["tool_a1", "tool_a2"])


@pytest.fixture
def skill_b() -> ConfiguredSkill:
    return make_skill("skill_b", ["tool_b1"])


@pytest.fixture
def skill_registry(skill_a: ConfiguredSkill, skill_b: ConfiguredSkill) -> SkillRegistry:
    """Registry with two skills registered."""
    registry = SkillRegistry()
    registry.register_all([skill_a, skill_b])
    return registry


# LLM Mocks

def router_reply(skills: list[str], reasoning: str = "test") -> AIMessage:
    """Router model reply selecting the given skills."""
    skill_list = ", ".join(f'"{s}"' for s in skills)
    return AIMessage(content=f'{{"skills": [{skill_list}], "reasoning": "{reasoning}"}}')


@pytest.fixture
def mock_chat_model() -> MagicMock:
    """Mock LangChain chat model."""
    model = MagicMock()
    model.ainvoke = AsyncMock(return_value=AIMessage(content="Mock response"))
    model.bind_tools = MagicMock(return_value=model)
    return model


@pytest.fixture
def mock_chat_model_with_tool_call() -> MagicMock:
    """Mock chat model that makes tool calls."""
    model = MagicMock()

    # First response: tool call
    tool_response = AIMessage(
        content="",
        tool_calls=[{"id": "call_1", "name": "async_tool", "args": {"value": "test"}}],
    )

    # Second response: final answer
    final_response = AIMessage(content="Final answer after tool call")

    model.ainvoke = AsyncMock(side_effect=[tool_response, final_response])
    model.bind_tools = MagicMock(return_value=model)

    return model


@pytest.fixture
def mock_router_model() -> MagicMock:
    """Mock router model. Set ainvoke.side_effect/return_value per test."""
    model = MagicMock()
    model.ainvoke = AsyncMock(return_value=router_reply([]))
    return model
