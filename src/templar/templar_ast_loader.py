"""
Build Templar AST nodes from plain data.

External parsers often hand over their trees as JSON.  This module turns
such documents (dicts carrying a "type" tag, lists of statements, operator
tokens) into the frozen node classes the evaluator consumes.
"""

import dataclasses
import json
from typing import Any, Dict

from templar.templar_ast import NODE_TYPES, TemplarASTNode
from templar.templar_error import TemplarError, TemplarUnknownNodeError


def load_ast(data: Dict[str, Any]) -> TemplarASTNode:
    """
    Convert a dict-shaped AST node (and its children) into node objects.

    Args:
        data: Mapping with a "type" key naming the node kind

    Returns:
        The corresponding AST node

    Raises:
        TemplarUnknownNodeError: If a node's type tag is not recognized
        TemplarError: If a node is not a mapping or is missing a required field
    """
    if not isinstance(data, dict):
        raise TemplarError(
            message="Malformed node: expected a mapping with a \"type\" key",
            received=type(data).__name__,
            expected="dict"
        )

    node_type = data.get("type")
    node_class = NODE_TYPES.get(node_type)  # type: ignore[arg-type]
    if node_class is None:
        raise TemplarUnknownNodeError(
            message=f"Unknown node type: {node_type}",
            received=repr(node_type),
            expected=", ".join(sorted(NODE_TYPES))
        )

    kwargs: Dict[str, Any] = {}
    for node_field in dataclasses.fields(node_class):
        if node_field.name not in data:
            has_default = (
                node_field.default is not dataclasses.MISSING
                or node_field.default_factory is not dataclasses.MISSING
            )
            if has_default:
                continue

            raise TemplarError(
                message=f"Malformed {node_type} node: missing field '{node_field.name}'",
                received=", ".join(sorted(data))
            )

        kwargs[node_field.name] = _load_field(node_field.name, data[node_field.name])

    return node_class(**kwargs)


def loads_ast(text: str) -> TemplarASTNode:
    """Parse a JSON document and convert it into AST nodes."""
    return load_ast(json.loads(text))


def _load_field(name: str, value: Any) -> Any:
    if name == "operator":
        # Parsers may pass the operator token rather than its text.
        return value["value"] if isinstance(value, dict) else value

    if isinstance(value, dict):
        return load_ast(value)

    if isinstance(value, list):
        return tuple(load_ast(item) for item in value)

    return value
