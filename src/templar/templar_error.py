"""Exception classes for Templar template evaluation with detailed context."""

from typing import Optional


class TemplarError(Exception):
    """Base exception for Templar errors with detailed context information."""

    def __init__(
        self,
        message: str,
        context: Optional[str] = None,
        expected: Optional[str] = None,
        received: Optional[str] = None,
        suggestion: Optional[str] = None,
        example: Optional[str] = None
    ):
        """
        Initialize detailed error.

        Args:
            message: Core error description
            context: Additional context information
            expected: What was expected
            received: What was actually received
            suggestion: Suggestion for fixing the error
            example: Example of correct usage
        """
        self.message = message
        self.context = context
        self.expected = expected
        self.received = received
        self.suggestion = suggestion
        self.example = example

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]

        if self.received:
            parts.append(f"Received: {self.received}")
        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.context:
            parts.append(f"Context: {self.context}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        if self.example:
            parts.append(f"Example: {self.example}")

        return "\n".join(parts)


class TemplarDuplicateDeclarationError(TemplarError):
    """A name was declared twice in the same scope."""


class TemplarConversionError(TemplarError):
    """A host value could not be converted into a runtime value."""


class TemplarEvalError(TemplarError):
    """Evaluation errors with detailed context."""


class TemplarInvalidAssignmentTargetError(TemplarEvalError):
    """The target of a set statement is not a plain identifier."""


class TemplarTypeError(TemplarEvalError):
    """A value of the wrong type was used by a statement or member access."""


class TemplarNullOperationError(TemplarEvalError):
    """A binary operator was applied to a null operand."""


class TemplarUnknownOperatorError(TemplarEvalError):
    """An operator is not defined for the operand types it was given."""


class TemplarNotCallableError(TemplarEvalError):
    """A call expression's callee is not a function."""


class TemplarNoSuchPropertyError(TemplarEvalError):
    """Member lookup found neither user data nor a built-in."""


class TemplarUnknownNodeError(TemplarEvalError):
    """An AST node carries a type tag the evaluator does not know."""


class TemplarDepthError(TemplarEvalError):
    """Evaluation nested deeper than the configured limit."""
