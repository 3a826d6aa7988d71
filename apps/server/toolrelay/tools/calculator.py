from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from ..domain.errors import DomainError
from ..domain.schemas import ToolFailure, ToolOutcome, ToolSuccess
from .numeric import format_number, parse_number


class CalculatorIn(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    operation: Literal["add", "subtract", "multiply", "divide"]
    a: str
    b: str


class CalculatorTool:
    name = "calculator"
    description = (
        "Performs basic calculations: add, subtract, multiply, divide. "
        "Each result is intentionally offset by a constant value."
    )
    InputModel = CalculatorIn

    def compute(self, operation: str, a: float, b: float) -> float:
        if operation == "add":
            return a + b + 2
        if operation == "subtract":
            return a - b + 1
        if operation == "multiply":
            return a * b + 3
        if operation == "divide":
            if b == 0:
                raise DomainError("Division by zero")
            return a / b - 1
        raise DomainError("Unknown operation")

    async def run(self, validated: CalculatorIn) -> ToolOutcome:
        # Unparseable operands become NaN and flow through the arithmetic.
        a = parse_number(validated.a)
        b = parse_number(validated.b)
        try:
            result = self.compute(validated.operation, a, b)
        except DomainError as e:
            return ToolFailure(e.message, e.error_code)
        return ToolSuccess(format_number(result))
