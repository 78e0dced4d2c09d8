"""Web search skill."""

from skills_agent.core import BaseSkill, SkillMetadata, Tool
from skills_agent.skills.web_search.tools import (
    FetchUrlInput,
    WebSearchInput,
    fetch_url,
    web_search,
)


class WebSearchSkill(BaseSkill):
    """Web search and page fetching."""

    @property
    def metadata(self) -> SkillMetadata:
        return SkillMetadata(
            name="web-search",
            description="Search the web for information, articles, and documentation",
            version="1.0.0",
            tags=frozenset({"search", "web", "research"}),
        )

    @property
    def tools(self) -> list[Tool]:
        return [
            Tool(
                name="web_search",
                description="Search the web for information on any topic",
                function=web_search,
                input_schema=WebSearchInput,
            ),
            Tool(
                name="fetch_url",
                description="Fetch and extract text content from a URL",
                function=fetch_url,
                input_schema=FetchUrlInput,
            ),
        ]
