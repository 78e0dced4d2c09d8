"""Date and time skill tools."""

from datetime import UTC, datetime
from typing import Literal

from dateutil import parser as dateutil_parser
from pydantic import BaseModel, Field

SECONDS_PER_DAY = 60 * 60 * 24

# Days per unit for date_diff
UNIT_DAYS = {
    "days": 1.0,
    "weeks": 7.0,
    "months": 30.44,
    "years": 365.25,
}


# Input Schemas

class GetCurrentTimeInput(BaseModel):
    """Input for get_current_time tool (no parameters)."""


class FormatDateInput(BaseModel):
    """Input for format_date tool."""

    date: str = Field(
        description="Date to format (ISO string or natural language like '2024-01-15')"
    )
    format: Literal["short", "long", "iso", "relative"] = Field(
        description=(
            "Output format: short (1/15/2024), long (January 15, 2024), "
            "iso (2024-01-15T00:00:00+00:00), relative (3 days ago)"
        )
    )


class DateDiffInput(BaseModel):
    """Input for date_diff tool."""

    date1: str = Field(description="First date")
    date2: str = Field(description="Second date")
    unit: Literal["days", "weeks", "months", "years"] | None = Field(
        default="days",
        description="Unit for the difference",
    )


def parse_date(value: str) -> datetime | None:
    """Parse a date string, assuming UTC when no timezone is given."""
    try:
        parsed = dateutil_parser.parse(value)
    except (dateutil_parser.ParserError, ValueError, OverflowError):
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def describe_relative(parsed: datetime, now: datetime) -> str:
    days = int((now - parsed).total_seconds() // SECONDS_PER_DAY)
    if days == 0:
        return "today"
    if days == 1:
        return "yesterday"
    if days > 0:
        return f"{days} days ago"
    return f"in {abs(days)} days"


# Tool Functions

async def get_current_time() -> str:
    """Get the current date and time in UTC."""
    now = datetime.now(UTC)
    return f"Current time (UTC): {now.isoformat(timespec='milliseconds')}"


async def format_date(date: str, format: str) -> str:
    """Format a date string."""
    parsed = parse_date(date)
    if parsed is None:
        return f'Error: Could not parse date "{date}"'

    match format:
        case "short":
            return f"{parsed.month}/{parsed.day}/{parsed.year}"
        case "long":
            return f"{parsed:%B} {parsed.day}, {parsed.year}"
        case "iso":
            return parsed.isoformat()
        case "relative":
            return describe_relative(parsed, datetime.now(UTC))
    return f"Error: Unknown format {format!r}"


async def date_diff(date1: str, date2: str, unit: str | None = "days") -> str:
    """Calculate the absolute difference between two dates."""
    first = parse_date(date1)
    second = parse_date(date2)
    if first is None or second is None:
        return "Error: Could not parse one or both dates"

    unit = unit or "days"
    diff_days = abs((second - first).total_seconds()) / SECONDS_PER_DAY
    result = diff_days / UNIT_DAYS[unit]

    return f"Difference: {result:.2f} {unit}"
