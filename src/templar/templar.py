"""Main Templar class: renders template ASTs against Python data."""

import logging
from typing import Any, Dict, Mapping

from templar.templar_ast import TemplarASTNode
from templar.templar_ast_loader import load_ast
from templar.templar_environment import TemplarEnvironment
from templar.templar_error import TemplarError
from templar.templar_evaluator import TemplarEvaluator
from templar.templar_value import TemplarValue


class Templar:
    """
    Template renderer.

    Builds a fresh global environment for every render, injects template
    data and helper callables into it, evaluates the template's AST and
    unwraps the resulting string.  Rendering is all-or-nothing: any error
    aborts the render and no partial output is returned.
    """

    def __init__(self, max_depth: int | None = 200):
        """
        Initialize Templar.

        Args:
            max_depth: Maximum AST nesting depth to evaluate, or None for no limit
        """
        self.max_depth = max_depth
        self._evaluator = TemplarEvaluator(max_depth=max_depth)
        self._logger = logging.getLogger("Templar")

    def create_environment(self, data: Mapping[str, Any] | None = None) -> TemplarEnvironment:
        """
        Create a global environment populated with template data.

        Args:
            data: Variables and helper callables to expose, keyed by name

        Returns:
            A new global environment

        Raises:
            TemplarConversionError: If a value cannot be converted
        """
        env = TemplarEnvironment(name="global")
        for name, value in (data or {}).items():
            env.set(name, value)

        return env

    def run(self, program: TemplarASTNode, env: TemplarEnvironment) -> TemplarValue:
        """
        Evaluate a program in the given environment.

        Returns:
            The program's result; for a Program node this is a string value

        Raises:
            TemplarError: If evaluation fails
        """
        return self._evaluator.evaluate(program, env)

    def render(self, program: TemplarASTNode | Dict[str, Any], data: Mapping[str, Any] | None = None) -> str:
        """
        Render a template to text.

        Args:
            program: Program node, or a dict-shaped AST as produced by an external parser
            data: Variables and helper callables to expose to the template

        Returns:
            The rendered template text

        Raises:
            TemplarError: If loading, conversion or evaluation fails
        """
        if isinstance(program, dict):
            program = load_ast(program)

        self._logger.debug("Rendering %s with bindings: %s", program.type, sorted(data or {}))

        try:
            env = self.create_environment(data)
            result = self.run(program, env)

        except TemplarError as e:
            self._logger.debug("Render failed: %s", e.message)
            raise

        output = result.to_text()
        self._logger.debug("Rendered %d characters", len(output))
        return output
