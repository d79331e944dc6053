"""Shared fixtures and utilities for Templar tests."""

import pytest

from templar import (
    Templar, TemplarEnvironment, TemplarEvaluator, TemplarValue,
    TemplarProgram, TemplarSet, TemplarIf, TemplarFor, TemplarNumericLiteral, TemplarStringLiteral,
    TemplarBooleanLiteral, TemplarIdentifier, TemplarCallExpression, TemplarMemberExpression,
    TemplarUnaryExpression, TemplarBinaryExpression
)


@pytest.fixture
def templar():
    """Create a fresh Templar instance for each test."""
    return Templar()


@pytest.fixture
def evaluator():
    """Create a fresh evaluator for each test."""
    return TemplarEvaluator()


@pytest.fixture
def env():
    """Create an empty global environment."""
    return TemplarEnvironment(name="global")


class TemplarTestHelpers:
    """Helper utilities for building template ASTs in tests."""

    @staticmethod
    def num(value) -> TemplarNumericLiteral:
        return TemplarNumericLiteral(value)

    @staticmethod
    def string(value: str) -> TemplarStringLiteral:
        return TemplarStringLiteral(value)

    @staticmethod
    def boolean(value: bool) -> TemplarBooleanLiteral:
        return TemplarBooleanLiteral(value)

    @staticmethod
    def ident(name: str) -> TemplarIdentifier:
        return TemplarIdentifier(name)

    @staticmethod
    def binary(operator: str, left, right) -> TemplarBinaryExpression:
        return TemplarBinaryExpression(operator, left, right)

    @staticmethod
    def unary(operator: str, argument) -> TemplarUnaryExpression:
        return TemplarUnaryExpression(operator, argument)

    @staticmethod
    def member(obj, prop, computed: bool = False) -> TemplarMemberExpression:
        """Build `obj.prop` (prop given as a name) or `obj[prop]` when computed."""
        if isinstance(prop, str):
            prop = TemplarIdentifier(prop)

        return TemplarMemberExpression(obj, prop, computed)

    @staticmethod
    def dotted(path: str) -> TemplarMemberExpression | TemplarIdentifier:
        """Build a member chain from a dotted path such as `loop.index0`."""
        first, *rest = path.split(".")
        node = TemplarIdentifier(first)
        for name in rest:
            node = TemplarMemberExpression(node, TemplarIdentifier(name), False)

        return node

    @staticmethod
    def call(callee, *args) -> TemplarCallExpression:
        return TemplarCallExpression(callee, tuple(args))

    @staticmethod
    def set(name: str, value) -> TemplarSet:
        return TemplarSet(TemplarIdentifier(name), value)

    @staticmethod
    def if_(test, body=(), alternate=()) -> TemplarIf:
        return TemplarIf(test, tuple(body), tuple(alternate))

    @staticmethod
    def for_(loopvar: str, iterable, body=()) -> TemplarFor:
        return TemplarFor(TemplarIdentifier(loopvar), iterable, tuple(body))

    @staticmethod
    def program(*statements) -> TemplarProgram:
        return TemplarProgram(tuple(statements))

    @staticmethod
    def evaluate(node, data=None) -> TemplarValue:
        """Evaluate a single node against a fresh environment populated with data."""
        env = TemplarEnvironment(name="global")
        for name, value in (data or {}).items():
            env.set(name, value)

        return TemplarEvaluator().evaluate(node, env)

    @staticmethod
    def render(*statements, data=None) -> str:
        """Render statements as a program against data."""
        return Templar().render(TemplarProgram(tuple(statements)), data)


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return TemplarTestHelpers
