"""Web search skill."""

from skills_agent.skills.web_search.skill import WebSearchSkill

__all__ = ["WebSearchSkill"]
