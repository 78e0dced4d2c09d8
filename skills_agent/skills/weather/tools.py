"""Weather skill tools backed by demo data."""

import json
import math
import random
from datetime import date, timedelta
from typing import Literal

from pydantic import BaseModel, Field

DEMO_NOTE = "Demo data - connect to real weather API for production"

# Temperatures in Fahrenheit
MOCK_WEATHER_DATA: dict[str, dict] = {
    "new york": {"temp": 72, "condition": "Partly Cloudy", "humidity": 65},
    "london": {"temp": 58, "condition": "Rainy", "humidity": 80},
    "tokyo": {"temp": 68, "condition": "Sunny", "humidity": 55},
    "paris": {"temp": 64, "condition": "Cloudy", "humidity": 70},
    "sydney": {"temp": 78, "condition": "Sunny", "humidity": 45},
    "default": {"temp": 70, "condition": "Clear", "humidity": 50},
}

FORECAST_CONDITIONS = ["Sunny", "Partly Cloudy", "Cloudy", "Rainy", "Clear"]


# Input Schemas

class GetWeatherInput(BaseModel):
    """Input for get_weather tool."""

    location: str = Field(description="City name or location to get weather for")
    units: Literal["celsius", "fahrenheit"] | None = Field(
        default="fahrenheit",
        description="Temperature units",
    )


class GetForecastInput(BaseModel):
    """Input for get_forecast tool."""

    location: str = Field(description="City name or location to get forecast for")
    days: int | None = Field(
        default=3,
        ge=1,
        le=7,
        description="Number of days to forecast (1-7)",
    )


def lookup_weather(location: str) -> dict:
    """Demo readings for a location, falling back to the default entry."""
    return MOCK_WEATHER_DATA.get(location.strip().lower(), MOCK_WEATHER_DATA["default"])


def fahrenheit_to_celsius(temp: float) -> int:
    return math.floor((temp - 32) * 5 / 9 + 0.5)


# Tool Functions

async def get_weather(location: str, units: str | None = "fahrenheit") -> str:
    """Get current weather conditions for a location."""
    data = lookup_weather(location)

    temp = data["temp"]
    unit_symbol = "°F"
    if units == "celsius":
        temp = fahrenheit_to_celsius(temp)
        unit_symbol = "°C"

    return json.dumps(
        {
            "location": location,
            "temperature": f"{temp}{unit_symbol}",
            "condition": data["condition"],
            "humidity": f"{data['humidity']}%",
            "note": DEMO_NOTE,
        },
        indent=2,
        ensure_ascii=False,
    )


async def get_forecast(location: str, days: int | None = 3) -> str:
    """Get a forecast for the next few days."""
    base = lookup_weather(location)
    today = date.today()

    forecast = []
    for offset in range(1, (days or 3) + 1):
        day = today + timedelta(days=offset)
        forecast.append({
            "date": f"{day:%a, %b} {day.day}",
            "high": base["temp"] + random.randint(-5, 4),
            "low": base["temp"] - random.randint(5, 19),
            "condition": random.choice(FORECAST_CONDITIONS),
        })

    return json.dumps(
        {
            "location": location,
            "forecast": forecast,
            "note": DEMO_NOTE,
        },
        indent=2,
    )
