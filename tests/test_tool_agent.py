"""Tests for the skill router."""

from unittest.mock import AsyncMock

import pytest
from conftest import router_reply
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from skills_agent.core import RouterResult, RoutingParseError, ToolAgent
from skills_agent.core.tool_agent import parse_router_response


class TestParseRouterResponse:
    def test_json_surrounded_by_noise(self):
        result = parse_router_response('noise {"skills":["weather"],"reasoning":"x"}  trailing')
        assert result == RouterResult(skills=["weather"], reasoning="x")

    def test_code_fenced_json(self):
        content = '```json\n{"skills": ["calculator", "weather"], "reasoning": "both"}\n```'
        result = parse_router_response(content)
        assert result.skills == ["calculator", "weather"]

    def test_missing_fields_use_defaults(self):
        result = parse_router_response("{}")
        assert result.skills == []
        assert result.reasoning == "n/a"

    def test_null_fields_use_defaults(self):
        result = parse_router_response('{"skills": null, "reasoning": ""}')
        assert result.skills == []
        assert result.reasoning == "n/a"

    def test_no_json_raises(self):
        with pytest.raises(RoutingParseError, match="No JSON response"):
            parse_router_response("I think you need the weather skill")

    def test_invalid_json_raises(self):
        with pytest.raises(RoutingParseError, match="Invalid JSON"):
            parse_router_response('{"skills": [weather]}')

    def test_wrong_shape_raises(self):
        with pytest.raises(RoutingParseError):
            parse_router_response('{"skills": "weather"}')


class TestToolAgent:
    def test_prompt_contains_catalog_only(self, skill_registry, mock_router_model):
        agent = ToolAgent(mock_router_model, skill_registry)
        prompt = agent.build_prompt()

        assert "- skill_a: Skill skill_a" in prompt
        assert "- skill_b: Skill skill_b" in prompt
        assert "tool_a1" not in prompt
        assert '"skills"' in prompt

    def test_extract_response(self, skill_registry, mock_router_model):
        agent = ToolAgent(mock_router_model, skill_registry)

        result = agent.extract_response('noise {"skills":["weather"],"reasoning":"x"}  trailing')

        assert result.skills == ["weather"]
        assert result.reasoning == "x"

    def test_extract_response_without_json(self, skill_registry, mock_router_model):
        agent = ToolAgent(mock_router_model, skill_registry)

        result = agent.extract_response("no braces here")

        assert result == RouterResult(skills=[], reasoning="No JSON response")

    def test_extract_response_with_bad_json(self, skill_registry, mock_router_model):
        agent = ToolAgent(mock_router_model, skill_registry)

        result = agent.extract_response("{not json}")

        assert result.skills == []
        assert result.reasoning.startswith("Invalid JSON response")

    @pytest.mark.asyncio
    async def test_run_sends_system_and_user_message_only(self, skill_registry, mock_router_model):
        mock_router_model.ainvoke.return_value = router_reply(["skill_a"], "needs a")
        agent = ToolAgent(mock_router_model, skill_registry)

        result = await agent.run("do something with a")

        assert result.skills == ["skill_a"]
        assert result.reasoning == "needs a"

        messages = mock_router_model.ainvoke.call_args[0][0]
        assert len(messages) == 2
        assert isinstance(messages[0], SystemMessage)
        assert isinstance(messages[1], HumanMessage)
        assert messages[1].content == "do something with a"

    @pytest.mark.asyncio
    async def test_run_handles_content_fragments(self, skill_registry, mock_router_model):
        mock_router_model.ainvoke.return_value = AIMessage(
            content=[{"type": "text", "text": '{"skills": ["skill_b"], "reasoning": "b"}'}]
        )
        agent = ToolAgent(mock_router_model, skill_registry)

        result = await agent.run("b please")

        assert result.skills == ["skill_b"]

    @pytest.mark.asyncio
    async def test_run_degrades_on_model_error(self, skill_registry):
        model = AsyncMock()
        model.ainvoke.side_effect = RuntimeError("provider down")
        agent = ToolAgent(model, skill_registry)

        result = await agent.run("hello")

        assert result == RouterResult(skills=[], reasoning="Error during routing")

    @pytest.mark.asyncio
    async def test_run_does_not_touch_registry(self, skill_registry, mock_router_model):
        mock_router_model.ainvoke.return_value = router_reply(["skill_a"])
        agent = ToolAgent(mock_router_model, skill_registry)

        await agent.run("a")

        assert skill_registry.get_loaded_skill_names() == []
