"""Calculator skill."""

from skills_agent.core import BaseSkill, SkillMetadata, Tool
from skills_agent.skills.calculator.tools import (
    CalculateInput,
    PercentageInput,
    calculate,
    percentage,
)


class CalculatorSkill(BaseSkill):
    """Mathematical calculations: expressions and percentages."""

    @property
    def metadata(self) -> SkillMetadata:
        return SkillMetadata(
            name="calculator",
            description=(
                "Performs mathematical calculations including basic arithmetic, "
                "percentages, and expressions"
            ),
            version="1.0.0",
            tags=frozenset({"math", "calculation", "utility"}),
        )

    @property
    def tools(self) -> list[Tool]:
        return [
            Tool(
                name="calculate",
                description=(
                    "Evaluate a mathematical expression. Supports +, -, *, /, ** (power), "
                    "parentheses, and common math functions."
                ),
                function=calculate,
                input_schema=CalculateInput,
            ),
            Tool(
                name="percentage",
                description="Calculate percentage of a number or percentage change between two numbers",
                function=percentage,
                input_schema=PercentageInput,
            ),
        ]
