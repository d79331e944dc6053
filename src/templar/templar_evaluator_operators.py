"""Operator implementations for the Templar evaluator."""

import math

from templar.templar_error import TemplarNullOperationError, TemplarUnknownOperatorError
from templar.templar_value import (
    TemplarValue, TemplarNumber, TemplarString, TemplarBoolean, TemplarNull
)


NUMERIC_OPERATORS = ('+', '-', '*', '/', '%', '<', '>', '<=', '>=', '==', '!=')
BOOLEAN_OPERATORS = ('and', 'or', '!=')
GENERIC_OPERATORS = ('+', '==', '!=')
UNARY_OPERATORS = ('not',)


def _divide(left: float, right: float) -> float:
    """Divide with IEEE 754 results for a zero divisor."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan

        return math.copysign(math.inf, left) * math.copysign(1.0, right)

    return left / right


def _remainder(left: float, right: float) -> float:
    """Remainder taking the sign of the dividend, NaN where undefined."""
    if right == 0 or math.isinf(left):
        return math.nan

    return math.fmod(left, right)


class TemplarOperatorMixin:
    """Mixin class containing the binary and unary operator implementations."""

    def _unknown_operator(
        self,
        operator: str,
        left: TemplarValue,
        right: TemplarValue,
        supported: tuple
    ) -> TemplarUnknownOperatorError:
        """Build the error for an operator that is not defined for an operand pair."""
        return TemplarUnknownOperatorError(
            message=f"Unknown operator: {operator}",
            received=f"{left.type_name()} {operator} {right.type_name()}",
            expected=f"One of: {', '.join(supported)}",
            context=f"Left operand: {left.describe()}, right operand: {right.describe()}"
        )

    def _apply_binary_operator(self, operator: str, left: TemplarValue, right: TemplarValue) -> TemplarValue:
        """
        Apply a binary operator to two evaluated operands.

        Dispatch is on the pair of operand types: numbers, booleans, or
        anything else.

        Raises:
            TemplarNullOperationError: If either operand is null
            TemplarUnknownOperatorError: If the operator is not defined for the operand types
        """
        if isinstance(left, TemplarNull) or isinstance(right, TemplarNull):
            raise TemplarNullOperationError(
                message="Cannot perform operation on null value",
                received=f"{left.type_name()} {operator} {right.type_name()}",
                suggestion="Check that every variable used in the expression is defined"
            )

        if isinstance(left, TemplarNumber) and isinstance(right, TemplarNumber):
            return self._apply_numeric_operator(operator, left, right)

        if isinstance(left, TemplarBoolean) and isinstance(right, TemplarBoolean):
            return self._apply_boolean_operator(operator, left, right)

        if operator == '+':
            return TemplarString(left.to_text() + right.to_text())

        if operator == '==':
            return TemplarBoolean(left.to_python() == right.to_python())

        if operator == '!=':
            return TemplarBoolean(left.to_python() != right.to_python())

        raise self._unknown_operator(operator, left, right, GENERIC_OPERATORS)

    def _apply_numeric_operator(self, operator: str, left: TemplarNumber, right: TemplarNumber) -> TemplarValue:
        """Apply arithmetic and comparison operators to two numbers."""
        a = left.value
        b = right.value

        # Arithmetic operators
        if operator == '+':
            return TemplarNumber(a + b)

        if operator == '-':
            return TemplarNumber(a - b)

        if operator == '*':
            return TemplarNumber(a * b)

        if operator == '/':
            return TemplarNumber(_divide(a, b))

        if operator == '%':
            return TemplarNumber(_remainder(a, b))

        # Comparison operators
        if operator == '<':
            return TemplarBoolean(a < b)

        if operator == '>':
            return TemplarBoolean(a > b)

        if operator == '<=':
            return TemplarBoolean(a <= b)

        if operator == '>=':
            return TemplarBoolean(a >= b)

        if operator == '==':
            return TemplarBoolean(a == b)

        if operator == '!=':
            return TemplarBoolean(a != b)

        raise self._unknown_operator(operator, left, right, NUMERIC_OPERATORS)

    def _apply_boolean_operator(self, operator: str, left: TemplarBoolean, right: TemplarBoolean) -> TemplarValue:
        """Apply logical operators to two booleans."""
        if operator == 'and':
            return TemplarBoolean(left.value and right.value)

        if operator == 'or':
            return TemplarBoolean(left.value or right.value)

        if operator == '!=':
            return TemplarBoolean(left.value != right.value)

        raise self._unknown_operator(operator, left, right, BOOLEAN_OPERATORS)

    def _apply_unary_operator(self, operator: str, argument: TemplarValue) -> TemplarValue:
        """
        Apply a unary operator.

        Only logical negation is defined; it negates the truthiness of the
        operand's payload and always yields a boolean.
        """
        if operator == 'not':
            return TemplarBoolean(not argument.to_python())

        raise TemplarUnknownOperatorError(
            message=f"Unknown operator: {operator}",
            received=f"{operator} {argument.type_name()}",
            expected=f"One of: {', '.join(UNARY_OPERATORS)}"
        )
