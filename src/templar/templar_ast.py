"""Templar AST node hierarchy.

These nodes are produced by an external template parser and consumed
read-only by the evaluator.  Every node class carries a `type` tag that the
evaluator dispatches on.
"""

from dataclasses import dataclass
from typing import ClassVar, Tuple, Union


@dataclass(frozen=True)
class TemplarASTNode:
    """Base class for all AST nodes."""
    type: ClassVar[str] = "ASTNode"


@dataclass(frozen=True)
class TemplarStatement(TemplarASTNode):
    """Base class for statements."""
    type: ClassVar[str] = "Statement"


@dataclass(frozen=True)
class TemplarExpression(TemplarStatement):
    """Base class for expressions; any expression may stand as a statement."""
    type: ClassVar[str] = "Expression"


@dataclass(frozen=True)
class TemplarProgram(TemplarStatement):
    """Root of a template: a sequence of statements."""
    type: ClassVar[str] = "Program"
    body: Tuple[TemplarStatement, ...] = ()


@dataclass(frozen=True)
class TemplarNumericLiteral(TemplarExpression):
    """A numeric literal; the payload may still be source text."""
    type: ClassVar[str] = "NumericLiteral"
    value: Union[int, float, str]


@dataclass(frozen=True)
class TemplarStringLiteral(TemplarExpression):
    """A string literal."""
    type: ClassVar[str] = "StringLiteral"
    value: str


@dataclass(frozen=True)
class TemplarBooleanLiteral(TemplarExpression):
    """A boolean literal."""
    type: ClassVar[str] = "BooleanLiteral"
    value: bool


@dataclass(frozen=True)
class TemplarIdentifier(TemplarExpression):
    """A variable reference."""
    type: ClassVar[str] = "Identifier"
    value: str


@dataclass(frozen=True)
class TemplarSet(TemplarStatement):
    """Assignment: `{% set assignee = value %}`."""
    type: ClassVar[str] = "Set"
    assignee: TemplarExpression
    value: TemplarExpression


@dataclass(frozen=True)
class TemplarIf(TemplarStatement):
    """Conditional with a body and an always-present (possibly empty) alternate."""
    type: ClassVar[str] = "If"
    test: TemplarExpression
    body: Tuple[TemplarStatement, ...] = ()
    alternate: Tuple[TemplarStatement, ...] = ()


@dataclass(frozen=True)
class TemplarFor(TemplarStatement):
    """Loop over an array, binding each element to loopvar."""
    type: ClassVar[str] = "For"
    loopvar: TemplarIdentifier
    iterable: TemplarExpression
    body: Tuple[TemplarStatement, ...] = ()


@dataclass(frozen=True)
class TemplarCallExpression(TemplarExpression):
    """Function call: `callee(args...)`."""
    type: ClassVar[str] = "CallExpression"
    callee: TemplarExpression
    args: Tuple[TemplarExpression, ...] = ()


@dataclass(frozen=True)
class TemplarMemberExpression(TemplarExpression):
    """
    Member access.

    With computed=False the property is an Identifier whose name is the key
    (`obj.key`); with computed=True the property is evaluated (`obj[expr]`).
    """
    type: ClassVar[str] = "MemberExpression"
    object: TemplarExpression
    property: TemplarExpression
    computed: bool = False


@dataclass(frozen=True)
class TemplarUnaryExpression(TemplarExpression):
    """Prefix operator applied to one argument."""
    type: ClassVar[str] = "UnaryExpression"
    operator: str
    argument: TemplarExpression


@dataclass(frozen=True)
class TemplarBinaryExpression(TemplarExpression):
    """Infix operator applied to two operands."""
    type: ClassVar[str] = "BinaryExpression"
    operator: str
    left: TemplarExpression
    right: TemplarExpression


# Every concrete node class, keyed by its type tag.
NODE_TYPES = {
    cls.type: cls for cls in (
        TemplarProgram, TemplarSet, TemplarIf, TemplarFor,
        TemplarNumericLiteral, TemplarStringLiteral, TemplarBooleanLiteral,
        TemplarIdentifier, TemplarCallExpression, TemplarMemberExpression,
        TemplarUnaryExpression, TemplarBinaryExpression,
    )
}
