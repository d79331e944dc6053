"""Tests for building AST nodes from dict and JSON documents."""

import pytest

from templar import (
    load_ast, loads_ast, TemplarError, TemplarUnknownNodeError, TemplarProgram, TemplarFor,
    TemplarIdentifier, TemplarBinaryExpression, TemplarNumericLiteral, TemplarIf
)


class TestTemplarASTLoader:
    """Test conversion of parser output into node objects."""

    def test_load_program(self):
        """Test loading a small program with nested nodes."""
        node = load_ast({
            "type": "Program",
            "body": [
                {"type": "For",
                 "loopvar": {"type": "Identifier", "value": "x"},
                 "iterable": {"type": "Identifier", "value": "items"},
                 "body": [{"type": "Identifier", "value": "x"}]},
            ],
        })

        assert node == TemplarProgram((
            TemplarFor(TemplarIdentifier("x"), TemplarIdentifier("items"), (TemplarIdentifier("x"),)),
        ))

    def test_operator_token(self):
        """Test that operator tokens are reduced to their text."""
        node = load_ast({
            "type": "BinaryExpression",
            "operator": {"type": "AdditiveBinaryOperator", "value": "+"},
            "left": {"type": "NumericLiteral", "value": 1},
            "right": {"type": "NumericLiteral", "value": "2"},
        })

        assert node == TemplarBinaryExpression("+", TemplarNumericLiteral(1), TemplarNumericLiteral("2"))

    def test_plain_operator(self):
        """Test that plain string operators are accepted too."""
        node = load_ast({
            "type": "UnaryExpression",
            "operator": "not",
            "argument": {"type": "BooleanLiteral", "value": True},
        })
        assert node.operator == "not"

    def test_optional_fields_default(self):
        """Test that an if node without an alternate gets an empty one."""
        node = load_ast({
            "type": "If",
            "test": {"type": "BooleanLiteral", "value": True},
            "body": [{"type": "StringLiteral", "value": "yes"}],
        })

        assert isinstance(node, TemplarIf)
        assert node.alternate == ()

    def test_unknown_type(self):
        """Test that unknown node types are rejected."""
        with pytest.raises(TemplarUnknownNodeError, match="Unknown node type: Macro"):
            load_ast({"type": "Macro", "name": "m"})

    def test_missing_type(self):
        """Test that a node without a type tag is rejected."""
        with pytest.raises(TemplarUnknownNodeError):
            load_ast({"value": "x"})

    def test_missing_required_field(self):
        """Test that a node missing a required field is rejected."""
        with pytest.raises(TemplarError, match="missing field 'right'"):
            load_ast({"type": "BinaryExpression", "operator": "+", "left": {"type": "NumericLiteral", "value": 1}})

    def test_loads_json(self):
        """Test loading from JSON text."""
        node = loads_ast('{"type": "Program", "body": [{"type": "StringLiteral", "value": "hi"}]}')
        assert isinstance(node, TemplarProgram)
        assert node.body[0].value == "hi"

    def test_render_dict_ast(self, templar):
        """Test that the renderer accepts dict-shaped ASTs directly."""
        output = templar.render({
            "type": "Program",
            "body": [
                {"type": "StringLiteral", "value": "Hello "},
                {"type": "MemberExpression",
                 "object": {"type": "Identifier", "value": "user"},
                 "property": {"type": "Identifier", "value": "name"},
                 "computed": False},
            ],
        }, {"user": {"name": "Ann"}})

        assert output == "Hello Ann"

    @pytest.mark.parametrize("document", [
        "Program",
        ["not", "a", "node"],
        {"type": "Program", "body": ["text"]},
        {"type": "Program", "body": [{"type": "StringLiteral", "value": "a"}, 3]},
    ])
    def test_non_mapping_nodes_rejected(self, document):
        """Test that nodes which are not mappings are rejected."""
        with pytest.raises(TemplarError, match="Malformed node"):
            load_ast(document)
