"""Weather skill."""

from skills_agent.core import BaseSkill, SkillMetadata, Tool
from skills_agent.skills.weather.tools import (
    GetForecastInput,
    GetWeatherInput,
    get_forecast,
    get_weather,
)


class WeatherSkill(BaseSkill):
    """Current conditions and short forecasts."""

    @property
    def metadata(self) -> SkillMetadata:
        return SkillMetadata(
            name="weather",
            description="Get current weather conditions and forecasts for any location",
            version="1.0.0",
            tags=frozenset({"weather", "forecast", "utility"}),
        )

    @property
    def tools(self) -> list[Tool]:
        return [
            Tool(
                name="get_weather",
                description="Get current weather conditions for a specific location",
                function=get_weather,
                input_schema=GetWeatherInput,
            ),
            Tool(
                name="get_forecast",
                description="Get weather forecast for the next few days",
                function=get_forecast,
                input_schema=GetForecastInput,
            ),
        ]
