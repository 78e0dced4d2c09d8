"""Skill router deciding which skills a user turn needs."""

import json
import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from pydantic import BaseModel, Field, ValidationError, field_validator

from skills_agent.core.exception import RoutingParseError
from skills_agent.core.messages import extract_text
from skills_agent.core.registry import SkillRegistry

logger = logging.getLogger(__name__)

ROUTER_SYSTEM_PROMPT = """You are a skill router. Your job is to analyze user requests \
and determine which skills are needed.

Available skills:
{skills_list}

Respond with a JSON object:
{
  "skills": ["skill1", "skill2"],
  "reasoning": "brief explanation"
}

Rules:
- Return empty array if no skills needed (general conversation)
- Only select skills that are clearly relevant
- Prefer fewer skills when possible
- If unclear, select the most likely skill"""

NO_JSON_REASONING = "No JSON response"
ROUTING_ERROR_REASONING = "Error during routing"


class RouterResult(BaseModel):
    """Routing decision for one user turn."""

    skills: list[str] = Field(default_factory=list)
    reasoning: str = "n/a"

    @field_validator("skills", mode="before")
    @classmethod
    def _default_skills(cls, value):
        return value or []

    @field_validator("reasoning", mode="before")
    @classmethod
    def _default_reasoning(cls, value):
        return value or "n/a"


def parse_router_response(content: str) -> RouterResult:
    """Decode the JSON object embedded in a router reply.

    The object is taken from the first ``{`` to the last ``}`` so that prose
    or code fences around it are ignored.

    Raises:
        RoutingParseError: If no JSON object can be decoded.
    """
    start = content.find("{")
    end = content.rfind("}")
    if start == -1 or end < start:
        raise RoutingParseError(NO_JSON_REASONING)

    try:
        data = json.loads(content[start : end + 1])
    except json.JSONDecodeError as e:
        raise RoutingParseError(f"Invalid JSON response: {e.msg}") from e

    if not isinstance(data, dict):
        raise RoutingParseError("Router response is not a JSON object")

    try:
        return RouterResult.model_validate(data)
    except ValidationError as e:
        raise RoutingParseError(f"Unexpected router response shape: {e.error_count()} errors") from e


class ToolAgent:
    """Routes user input to the skills it needs.

    Only skill metadata goes into the prompt, and no conversation history is
    sent, so each routing call stays small.

    Example:
        router = ToolAgent(chat_model, registry)
        result = await router.run("What's the weather in Paris?")
        result.skills  # ["weather"]
    """

    def __init__(self, chat_model: BaseChatModel, registry: SkillRegistry):
        self.chat_model = chat_model
        self.registry = registry

    def build_prompt(self) -> str:
        """Render the routing system prompt with the current catalog."""
        return ROUTER_SYSTEM_PROMPT.replace("{skills_list}", self.registry.get_catalog())

    async def run(self, user_input: str) -> RouterResult:
        """Pick the skills relevant to a user message.

        Never raises: any failure yields an empty skill list.
        """
        try:
            response = await self.chat_model.ainvoke([
                SystemMessage(content=self.build_prompt()),
                HumanMessage(content=user_input),
            ])
        except Exception:
            logger.exception("Routing error")
            return RouterResult(skills=[], reasoning=ROUTING_ERROR_REASONING)

        return self.extract_response(extract_text(response.content))

    def extract_response(self, content: str) -> RouterResult:
        """Parse a router reply, degrading to no skills on failure."""
        try:
            result = parse_router_response(content)
        except RoutingParseError as e:
            logger.warning("Skipping skill loading: %s", e)
            return RouterResult(skills=[], reasoning=str(e))

        logger.info("Route completed: skills=%s reasoning=%s", result.skills, result.reasoning)
        return result
