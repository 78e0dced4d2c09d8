"""Weather skill."""

from skills_agent.skills.weather.skill import WeatherSkill

__all__ = ["WeatherSkill"]
