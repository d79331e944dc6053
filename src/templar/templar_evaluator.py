"""Evaluator for Templar Abstract Syntax Trees."""

from typing import Callable, Dict, List, Sequence

from templar.templar_ast import (
    TemplarASTNode, TemplarStatement, TemplarProgram, TemplarSet, TemplarIf, TemplarFor,
    TemplarNumericLiteral, TemplarStringLiteral, TemplarBooleanLiteral, TemplarIdentifier,
    TemplarCallExpression, TemplarMemberExpression, TemplarUnaryExpression, TemplarBinaryExpression
)
from templar.templar_builtins import builtin_names, lookup_member
from templar.templar_environment import TemplarEnvironment
from templar.templar_error import (
    TemplarDepthError, TemplarInvalidAssignmentTargetError, TemplarTypeError,
    TemplarNotCallableError, TemplarNoSuchPropertyError, TemplarUnknownNodeError
)
from templar.templar_evaluator_operators import TemplarOperatorMixin
from templar.templar_value import (
    TemplarValue, TemplarNumber, TemplarString, TemplarBoolean, TemplarObject,
    TemplarArray, TemplarFunction, TemplarNull, TEMPLAR_NULL
)


class TemplarEvaluator(TemplarOperatorMixin):
    """
    Tree-walking evaluator for template ASTs.

    Every construct evaluates either to text that lands in the output or to
    null, which contributes nothing.  Statement sequences fold into a single
    string by concatenating the printed form of each non-null result.

    The evaluator holds no per-run state, so one instance (and one AST) can
    be shared between runs as long as each run has its own environment chain.
    """

    def __init__(self, max_depth: int | None = 200):
        """
        Initialize evaluator.

        Args:
            max_depth: Maximum AST nesting depth to evaluate, or None for no limit
        """
        self.max_depth = max_depth

        self._handlers: Dict[str, Callable[[TemplarASTNode, TemplarEnvironment, int], TemplarValue]] = {
            # Program
            "Program": self._evaluate_program,

            # Statements
            "Set": self._evaluate_set,
            "If": self._evaluate_if,
            "For": self._evaluate_for,

            # Expressions
            "NumericLiteral": self._evaluate_numeric_literal,
            "StringLiteral": self._evaluate_string_literal,
            "BooleanLiteral": self._evaluate_boolean_literal,
            "Identifier": self._evaluate_identifier,
            "CallExpression": self._evaluate_call_expression,
            "MemberExpression": self._evaluate_member_expression,
            "UnaryExpression": self._evaluate_unary_expression,
            "BinaryExpression": self._evaluate_binary_expression,
        }

    def evaluate(self, node: TemplarASTNode, env: TemplarEnvironment, depth: int = 0) -> TemplarValue:
        """
        Evaluate an AST node.

        Args:
            node: Node to evaluate
            env: Environment for variable lookups and assignments
            depth: Current nesting depth

        Returns:
            Evaluation result as a TemplarValue

        Raises:
            TemplarEvalError: If evaluation fails
        """
        if self.max_depth is not None and depth > self.max_depth:
            raise TemplarDepthError(
                message=f"Template too deeply nested (max depth: {self.max_depth})",
                received=f"{node.type} node at depth {depth}",
                suggestion="Reduce nesting depth or increase max_depth limit"
            )

        handler = self._handlers.get(node.type)
        if handler is None:
            raise TemplarUnknownNodeError(
                message=f"Unknown node type: {node.type}",
                received=type(node).__name__,
                expected=", ".join(self._handlers)
            )

        return handler(node, env, depth)

    def evaluate_block(
        self,
        statements: Sequence[TemplarStatement],
        env: TemplarEnvironment,
        depth: int = 0
    ) -> TemplarString:
        """
        Evaluate statements in order and concatenate their printed results.

        Null results contribute nothing to the output.
        """
        parts: List[str] = []
        for statement in statements:
            result = self.evaluate(statement, env, depth + 1)
            if not isinstance(result, TemplarNull):
                parts.append(result.to_text())

        return TemplarString("".join(parts))

    def _evaluate_program(self, node: TemplarProgram, env: TemplarEnvironment, depth: int) -> TemplarString:
        return self.evaluate_block(node.body, env, depth)

    def _evaluate_set(self, node: TemplarSet, env: TemplarEnvironment, depth: int) -> TemplarNull:
        """Assign to a plain identifier, creating the variable if needed."""
        if not isinstance(node.assignee, TemplarIdentifier):
            raise TemplarInvalidAssignmentTargetError(
                message="Invalid left-hand side inside assignment expression",
                received=f"{node.assignee.type} node: {node.assignee!r}",
                expected="A plain identifier",
                example="{% set name = 'value' %}"
            )

        env.set_variable(node.assignee.value, self.evaluate(node.value, env, depth + 1))
        return TEMPLAR_NULL

    def _evaluate_if(self, node: TemplarIf, env: TemplarEnvironment, depth: int) -> TemplarString:
        """Evaluate the body or the alternate, depending on a boolean test."""
        test = self.evaluate(node.test, env, depth + 1)
        if not isinstance(test, TemplarBoolean):
            raise TemplarTypeError(
                message="Expected boolean expression in if statement",
                received=test.describe(),
                expected="boolean",
                suggestion="Compare the value explicitly, e.g. `x != 0` or `name == ''`"
            )

        return self.evaluate_block(node.body if test.value else node.alternate, env, depth)

    def _evaluate_for(self, node: TemplarFor, env: TemplarEnvironment, depth: int) -> TemplarString:
        """
        Evaluate the loop body once per array element.

        A single child scope is shared by all iterations.  Each iteration
        rebinds `loop` (a fresh metadata object) and the loop variable in
        that scope; outer variables with the same names are shadowed, not
        overwritten.
        """
        scope = TemplarEnvironment(env, name="for")

        iterable = self.evaluate(node.iterable, scope, depth + 1)
        if not isinstance(iterable, TemplarArray):
            raise TemplarTypeError(
                message="Expected array in for loop",
                received=iterable.describe(),
                expected="array"
            )

        # Bind both names in the loop scope so rebinding never reaches an enclosing scope.
        for name in {"loop", node.loopvar.value}:
            scope.declare(name, TEMPLAR_NULL)

        length = iterable.length()
        parts: List[str] = []
        for i, element in enumerate(iterable.value):
            scope.set_variable("loop", TemplarObject({
                "index": TemplarNumber(float(i + 1)),
                "index0": TemplarNumber(float(i)),
                "first": TemplarBoolean(i == 0),
                "last": TemplarBoolean(i == length - 1),
                "length": TemplarNumber(float(length)),
            }))
            scope.set_variable(node.loopvar.value, element)

            parts.append(self.evaluate_block(node.body, scope, depth).value)

        return TemplarString("".join(parts))

    def _evaluate_numeric_literal(self, node: TemplarNumericLiteral, _env: TemplarEnvironment, _depth: int) -> TemplarNumber:
        try:
            return TemplarNumber(float(node.value))

        except (TypeError, ValueError) as e:
            raise TemplarTypeError(
                message=f"Malformed numeric literal: {node.value!r}",
                received=repr(node.value),
                expected="number or numeric text"
            ) from e

    def _evaluate_string_literal(self, node: TemplarStringLiteral, _env: TemplarEnvironment, _depth: int) -> TemplarString:
        return TemplarString(node.value)

    def _evaluate_boolean_literal(self, node: TemplarBooleanLiteral, _env: TemplarEnvironment, _depth: int) -> TemplarBoolean:
        return TemplarBoolean(node.value)

    def _evaluate_identifier(self, node: TemplarIdentifier, env: TemplarEnvironment, _depth: int) -> TemplarValue:
        return env.lookup_variable(node.value)

    def _evaluate_call_expression(
        self,
        node: TemplarCallExpression,
        env: TemplarEnvironment,
        depth: int
    ) -> TemplarValue:
        """Evaluate arguments left to right, then the callee, then call it."""
        args = [self.evaluate(arg, env, depth + 1) for arg in node.args]

        callee = self.evaluate(node.callee, env, depth + 1)
        if not isinstance(callee, TemplarFunction):
            raise TemplarNotCallableError(
                message="Cannot call something that is not a function",
                received=callee.describe(),
                expected="function"
            )

        return callee.call(args, env)

    def _evaluate_member_expression(
        self,
        node: TemplarMemberExpression,
        env: TemplarEnvironment,
        depth: int
    ) -> TemplarValue:
        """Look up a property on an object, or a built-in member on any value."""
        if node.computed:
            prop = self.evaluate(node.property, env, depth + 1)

        elif isinstance(node.property, TemplarIdentifier):
            prop = TemplarString(node.property.value)

        else:
            raise TemplarTypeError(
                message="Non-computed member access needs an identifier as its property",
                received=f"{node.property.type} node"
            )

        if not isinstance(prop, TemplarString):
            raise TemplarTypeError(
                message="Cannot access property with non-string",
                received=prop.describe(),
                expected="string",
                context="Integer indexing of arrays is not supported"
            )

        obj = self.evaluate(node.object, env, depth + 1)

        value = lookup_member(obj, prop.value)
        if value is None:
            available = builtin_names(obj.type_name())
            if isinstance(obj, TemplarObject):
                available = sorted(obj.value) + available

            raise TemplarNoSuchPropertyError(
                message=f"{obj.type_name()} has no property '{prop.value}'",
                received=obj.describe(),
                context=f"Available properties: {', '.join(available) if available else '(none)'}"
            )

        return value

    def _evaluate_unary_expression(
        self,
        node: TemplarUnaryExpression,
        env: TemplarEnvironment,
        depth: int
    ) -> TemplarValue:
        argument = self.evaluate(node.argument, env, depth + 1)
        return self._apply_unary_operator(node.operator, argument)

    def _evaluate_binary_expression(
        self,
        node: TemplarBinaryExpression,
        env: TemplarEnvironment,
        depth: int
    ) -> TemplarValue:
        """Evaluate both operands eagerly, then apply the operator."""
        left = self.evaluate(node.left, env, depth + 1)
        right = self.evaluate(node.right, env, depth + 1)
        return self._apply_binary_operator(node.operator, left, right)
