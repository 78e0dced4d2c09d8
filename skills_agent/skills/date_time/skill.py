"""Date and time skill."""

from skills_agent.core import BaseSkill, SkillMetadata, Tool
from skills_agent.skills.date_time.tools import (
    DateDiffInput,
    FormatDateInput,
    GetCurrentTimeInput,
    date_diff,
    format_date,
    get_current_time,
)


class DateTimeSkill(BaseSkill):
    """Current time, date formatting and date arithmetic."""

    @property
    def metadata(self) -> SkillMetadata:
        return SkillMetadata(
            name="datetime",
            description="Get current date/time, format dates, and calculate date differences",
            version="1.0.0",
            tags=frozenset({"date", "time", "utility"}),
        )

    @property
    def tools(self) -> list[Tool]:
        return [
            Tool(
                name="get_current_time",
                description="Get the current date and time",
                function=get_current_time,
                input_schema=GetCurrentTimeInput,
            ),
            Tool(
                name="format_date",
                description="Format a date string into a different format",
                function=format_date,
                input_schema=FormatDateInput,
            ),
            Tool(
                name="date_diff",
                description="Calculate the difference between two dates",
                function=date_diff,
                input_schema=DateDiffInput,
            ),
        ]
