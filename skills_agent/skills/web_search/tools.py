"""Web search skill tools backed by demo data."""

import json

from pydantic import BaseModel, Field, HttpUrl

SEARCH_NOTE = "Demo data - connect to real search API for production"
FETCH_NOTE = "Demo data - implement real URL fetching for production"

MOCK_SEARCH_RESULTS: dict[str, list[dict[str, str]]] = {
    "python": [
        {
            "title": "Welcome to Python.org",
            "url": "https://www.python.org/",
            "snippet": "The official home of the Python Programming Language.",
        },
        {
            "title": "Python 3 Documentation",
            "url": "https://docs.python.org/3/",
            "snippet": "Tutorials, library reference and language reference for Python 3.",
        },
    ],
    "langchain": [
        {
            "title": "LangChain - Build context-aware reasoning applications",
            "url": "https://www.langchain.com/",
            "snippet": "LangChain is a framework for developing applications powered by language models.",
        },
        {
            "title": "LangChain Python Documentation",
            "url": "https://python.langchain.com/docs/",
            "snippet": "Build powerful AI applications in Python using LangChain.",
        },
    ],
    "typescript": [
        {
            "title": "TypeScript: JavaScript With Syntax For Types",
            "url": "https://www.typescriptlang.org/",
            "snippet": "TypeScript is a strongly typed programming language that builds on JavaScript.",
        },
    ],
    "default": [
        {
            "title": "Search Result 1",
            "url": "https://example.com/1",
            "snippet": "This is a placeholder search result for demonstration purposes.",
        },
        {
            "title": "Search Result 2",
            "url": "https://example.com/2",
            "snippet": "Another placeholder result showing the search functionality.",
        },
    ],
}


# Input Schemas

class WebSearchInput(BaseModel):
    """Input for web_search tool."""

    query: str = Field(description="The search query")
    max_results: int | None = Field(
        default=5,
        ge=1,
        le=10,
        description="Maximum number of results to return",
    )


class FetchUrlInput(BaseModel):
    """Input for fetch_url tool."""

    url: HttpUrl = Field(description="The URL to fetch content from")


def find_results(query: str) -> list[dict[str, str]]:
    """Return the first topic whose key appears in the query."""
    lowered = query.lower()
    for topic, results in MOCK_SEARCH_RESULTS.items():
        if topic != "default" and topic in lowered:
            return results
    return MOCK_SEARCH_RESULTS["default"]


# Tool Functions

async def web_search(query: str, max_results: int | None = 5) -> str:
    """Search the web for a query."""
    results = find_results(query)[: max_results or 5]

    return json.dumps(
        {
            "query": query,
            "results": results,
            "total_results": len(results),
            "note": SEARCH_NOTE,
        },
        indent=2,
    )


async def fetch_url(url: HttpUrl) -> str:
    """Fetch text content from a URL."""
    return json.dumps(
        {
            "url": str(url),
            "status": "success",
            "content": (
                f"This is simulated content from {url}. In production, this would "
                "fetch and parse the actual webpage content."
            ),
            "note": FETCH_NOTE,
        },
        indent=2,
    )
