"""Templar template evaluation package."""

# Main API
from templar.templar import Templar

# Exceptions
from templar.templar_error import (
    TemplarError, TemplarDuplicateDeclarationError, TemplarConversionError, TemplarEvalError,
    TemplarInvalidAssignmentTargetError, TemplarTypeError, TemplarNullOperationError,
    TemplarUnknownOperatorError, TemplarNotCallableError, TemplarNoSuchPropertyError,
    TemplarUnknownNodeError, TemplarDepthError
)

# Value types
from templar.templar_value import (
    TemplarValue, TemplarNumber, TemplarString, TemplarBoolean, TemplarObject, TemplarArray,
    TemplarFunction, TemplarNull, TEMPLAR_NULL
)

# AST nodes
from templar.templar_ast import (
    TemplarASTNode, TemplarStatement, TemplarExpression, TemplarProgram, TemplarSet, TemplarIf,
    TemplarFor, TemplarNumericLiteral, TemplarStringLiteral, TemplarBooleanLiteral, TemplarIdentifier,
    TemplarCallExpression, TemplarMemberExpression, TemplarUnaryExpression, TemplarBinaryExpression
)

# Lower-level components (for advanced usage)
from templar.templar_ast_loader import load_ast, loads_ast
from templar.templar_builtins import lookup_builtin, lookup_member
from templar.templar_environment import TemplarEnvironment
from templar.templar_evaluator import TemplarEvaluator
from templar.templar_host import to_runtime_value, to_host_value


__all__ = [
    # Main API
    "Templar",

    # Exceptions
    "TemplarError", "TemplarDuplicateDeclarationError", "TemplarConversionError", "TemplarEvalError",
    "TemplarInvalidAssignmentTargetError", "TemplarTypeError", "TemplarNullOperationError",
    "TemplarUnknownOperatorError", "TemplarNotCallableError", "TemplarNoSuchPropertyError",
    "TemplarUnknownNodeError", "TemplarDepthError",

    # Value types
    "TemplarValue", "TemplarNumber", "TemplarString", "TemplarBoolean", "TemplarObject", "TemplarArray",
    "TemplarFunction", "TemplarNull", "TEMPLAR_NULL",

    # AST nodes
    "TemplarASTNode", "TemplarStatement", "TemplarExpression", "TemplarProgram", "TemplarSet", "TemplarIf",
    "TemplarFor", "TemplarNumericLiteral", "TemplarStringLiteral", "TemplarBooleanLiteral", "TemplarIdentifier",
    "TemplarCallExpression", "TemplarMemberExpression", "TemplarUnaryExpression", "TemplarBinaryExpression",

    # Lower-level components
    "load_ast", "loads_ast", "lookup_builtin", "lookup_member", "TemplarEnvironment", "TemplarEvaluator",
    "to_runtime_value", "to_host_value",
]
