"""Date and time skill."""

from skills_agent.skills.date_time.skill import DateTimeSkill

__all__ = ["DateTimeSkill"]
