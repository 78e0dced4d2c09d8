"""Calculator skill tools."""

import ast
import math
import operator
import re
from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel, Field

# Input Schemas

class CalculateInput(BaseModel):
    """Input for calculate tool."""

    expression: str = Field(
        description="The mathematical expression to evaluate, e.g., '2 + 2' or '(10 * 5) / 2'"
    )


class PercentageInput(BaseModel):
    """Input for percentage tool."""

    operation: Literal["of", "change"] = Field(
        description="'of' to calculate X% of Y, 'change' for percentage change from X to Y"
    )
    value1: float = Field(
        description="First number (percentage for 'of', original value for 'change')"
    )
    value2: float = Field(
        description="Second number (base number for 'of', new value for 'change')"
    )


# Expression evaluation

_BINARY_OPERATORS: dict[type, Callable[[float, float], float]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.FloorDiv: operator.floordiv,
    ast.Mod: operator.mod,
    ast.Pow: operator.pow,
}

_UNARY_OPERATORS: dict[type, Callable[[float], float]] = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}

_FUNCTIONS: dict[str, Callable[..., float]] = {
    "abs": abs,
    "round": round,
    "sqrt": math.sqrt,
    "exp": math.exp,
    "log": math.log,
    "log10": math.log10,
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "floor": math.floor,
    "ceil": math.ceil,
}

_CONSTANTS = {"pi": math.pi, "e": math.e}

_ALLOWED_CHARS = re.compile(r"[^0-9a-z+\-*/().,%\s]")

MAX_EXPONENT = 1000


class ExpressionError(ValueError):
    """Expression is not a supported arithmetic expression."""


def _evaluate_node(node: ast.AST) -> float:
    match node:
        case ast.Expression(body=body):
            return _evaluate_node(body)
        case ast.Constant(value=value) if isinstance(value, int | float) and not isinstance(
            value, bool
        ):
            return value
        case ast.Name(id=name) if name in _CONSTANTS:
            return _CONSTANTS[name]
        case ast.UnaryOp(op=op, operand=operand) if type(op) in _UNARY_OPERATORS:
            return _UNARY_OPERATORS[type(op)](_evaluate_node(operand))
        case ast.BinOp(left=left, op=op, right=right) if type(op) in _BINARY_OPERATORS:
            lhs = _evaluate_node(left)
            rhs = _evaluate_node(right)
            if isinstance(op, ast.Pow) and abs(rhs) > MAX_EXPONENT:
                raise ExpressionError(f"Exponent too large: {rhs}")
            return _BINARY_OPERATORS[type(op)](lhs, rhs)
        case ast.Call(func=ast.Name(id=name), args=args, keywords=[]) if name in _FUNCTIONS:
            return _FUNCTIONS[name](*(_evaluate_node(arg) for arg in args))
    raise ExpressionError(f"Unsupported expression element: {ast.dump(node)[:40]}")


def evaluate_expression(expression: str) -> float:
    """Evaluate an arithmetic expression without eval().

    Supports + - * / // % ** (``^`` is accepted for power), parentheses,
    the constants pi and e, and a few math functions (sqrt, log, sin, ...).

    Raises:
        ExpressionError: For unsupported syntax.
        ArithmeticError: For math errors such as division by zero.
    """
    sanitized = _ALLOWED_CHARS.sub("", expression.lower().replace("^", "**"))
    if not sanitized.strip():
        raise ExpressionError("Empty expression")

    try:
        tree = ast.parse(sanitized, mode="eval")
    except SyntaxError as e:
        raise ExpressionError(f"Invalid syntax: {e.msg}") from e

    return _evaluate_node(tree)


def format_number(value: float) -> str:
    """Format a number without a trailing .0 for whole values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# Tool Functions

async def calculate(expression: str) -> str:
    """Evaluate a mathematical expression."""
    try:
        result = evaluate_expression(expression)
        finite = math.isfinite(result)
    except (ExpressionError, ArithmeticError, TypeError, ValueError) as e:
        return f"Error evaluating expression: {e}"

    if not finite:
        return f'Error: Invalid result for expression "{expression}"'

    return f"{expression} = {format_number(result)}"


async def percentage(operation: str, value1: float, value2: float) -> str:
    """Calculate X% of Y or the percentage change from X to Y."""
    if operation == "of":
        result = (value1 / 100) * value2
        return f"{format_number(value1)}% of {format_number(value2)} = {format_number(result)}"

    if value1 == 0:
        return "Error: Percentage change from 0 is undefined"

    change = ((value2 - value1) / value1) * 100
    return (
        f"Percentage change from {format_number(value1)} to {format_number(value2)} "
        f"= {change:.2f}%"
    )
