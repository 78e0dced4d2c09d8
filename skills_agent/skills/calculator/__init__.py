"""Calculator skill."""

from skills_agent.skills.calculator.skill import CalculatorSkill

__all__ = ["CalculatorSkill"]
