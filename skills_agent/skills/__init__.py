"""Skills module - built-in capabilities."""

from skills_agent.core import Skill
from skills_agent.skills.calculator import CalculatorSkill
from skills_agent.skills.date_time import DateTimeSkill
from skills_agent.skills.weather import WeatherSkill
from skills_agent.skills.web_search import WebSearchSkill


def builtin_skills() -> list[Skill]:
    """Fresh instances of every built-in skill."""
    return [
        CalculatorSkill(),
        WeatherSkill(),
        WebSearchSkill(),
        DateTimeSkill(),
    ]


__all__ = [
    "CalculatorSkill",
    "DateTimeSkill",
    "WeatherSkill",
    "WebSearchSkill",
    "builtin_skills",
]
