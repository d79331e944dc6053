"""Tests for call expressions and host helper functions."""

import pytest

from templar import (
    TemplarEnvironment, TemplarEvaluator, TemplarFunction, TemplarString, TemplarNumber,
    TemplarFor, TemplarIdentifier, TemplarCallExpression,
    TemplarNotCallableError, TEMPLAR_NULL
)


class TestCallExpressions:
    """Test invoking functions from templates."""

    def test_call_host_helper(self, helpers):
        """Test calling a Python function injected as data."""
        node = helpers.call(helpers.ident("add"), helpers.num(1), helpers.num(2))
        assert helpers.render(node, data={"add": lambda a, b: a + b}) == "3"

    def test_helper_receives_python_values(self, helpers):
        """Test that helpers see plain Python data for their arguments."""
        received = []

        def inspect(value):
            received.append(value)
            return len(value)

        node = helpers.call(helpers.ident("inspect"), helpers.ident("items"))
        output = helpers.render(node, data={"inspect": inspect, "items": ["a", {"b": True}]})

        assert output == "2"
        assert received == [["a", {"b": True}]]

    def test_helper_returning_none_renders_nothing(self, helpers):
        """Test that a helper with no result produces no output."""
        node = helpers.call(helpers.ident("noop"))
        assert helpers.render(helpers.string("["), node, helpers.string("]"), data={"noop": lambda: None}) == "[]"

    def test_helper_result_can_be_used_as_data(self, helpers):
        """Test member access on a helper's returned mapping."""
        node = helpers.member(helpers.call(helpers.ident("lookup"), helpers.string("ann")), "email")
        output = helpers.render(node, data={"lookup": lambda name: {"email": f"{name}@example.com"}})
        assert output == "ann@example.com"

    def test_arguments_evaluated_left_to_right_before_callee(self, helpers):
        """Test the evaluation order of arguments and callee."""
        order = []

        def tick(label):
            order.append(label)
            return label

        def make():
            order.append("callee")
            return lambda *args: "-".join(args)

        node = helpers.call(
            helpers.call(helpers.ident("make")),
            helpers.call(helpers.ident("tick"), helpers.string("a")),
            helpers.call(helpers.ident("tick"), helpers.string("b"))
        )
        output = helpers.render(node, data={"tick": tick, "make": make})

        assert output == "a-b"
        assert order == ["a", "b", "callee"]

    def test_function_receives_calling_environment(self):
        """Test that runtime functions are invoked with the caller's environment."""
        def current_item(_args, env):
            return env.lookup_variable("item")

        env = TemplarEnvironment(name="global")
        env.declare("current", TemplarFunction(current_item, name="current"))
        env.set("items", ["x", "y"])

        node = TemplarFor(TemplarIdentifier("item"), TemplarIdentifier("items"), (
            TemplarCallExpression(TemplarIdentifier("current"), ()),
        ))

        assert TemplarEvaluator().evaluate(node, env) == TemplarString("xy")

    def test_result_returned_verbatim(self, evaluator, env, helpers):
        """Test that a function's result is not converted or copied."""
        result_value = TemplarNumber(9.0)
        env.declare("nine", TemplarFunction(lambda args, e: result_value, name="nine"))

        assert evaluator.evaluate(helpers.call(helpers.ident("nine")), env) is result_value

    @pytest.mark.parametrize("value", [1, "text", {"a": 1}, [1], True])
    def test_calling_non_function_fails(self, helpers, value):
        """Test that only functions can be called."""
        with pytest.raises(TemplarNotCallableError, match="Cannot call something that is not a function"):
            helpers.render(helpers.call(helpers.ident("value")), data={"value": value})

    def test_calling_undefined_fails(self, helpers):
        """Test that calling an undefined name fails rather than returning null."""
        with pytest.raises(TemplarNotCallableError, match="null"):
            helpers.render(helpers.call(helpers.ident("missing")))

    def test_helper_exception_propagates(self, helpers):
        """Test that errors raised inside helpers reach the caller unchanged."""
        def explode():
            raise RuntimeError("helper failed")

        with pytest.raises(RuntimeError, match="helper failed"):
            helpers.render(helpers.call(helpers.ident("explode")), data={"explode": explode})

    def test_null_result_from_runtime_function(self, evaluator, env, helpers):
        """Test a runtime function returning null."""
        env.declare("nothing", TemplarFunction(lambda args, e: TEMPLAR_NULL))
        assert evaluator.evaluate(helpers.call(helpers.ident("nothing")), env) == TEMPLAR_NULL
