"""Conversion between native Python values and Templar runtime values."""

from collections.abc import Mapping, Sequence
from typing import Any, Callable, List

from templar.templar_error import TemplarConversionError
from templar.templar_value import (
    TemplarValue, TemplarNumber, TemplarString, TemplarBoolean, TemplarObject,
    TemplarArray, TemplarFunction, TEMPLAR_NULL
)


def to_runtime_value(value: Any) -> TemplarValue:
    """
    Convert a native Python value into a runtime value, recursively.

    Args:
        value: Python value to convert

    Returns:
        Equivalent runtime value

    Raises:
        TemplarConversionError: If the value's type has no runtime equivalent
    """
    if value is None:
        return TEMPLAR_NULL

    if isinstance(value, TemplarValue):
        return value

    # bool must be checked before int: bool is an int subclass.
    if isinstance(value, bool):
        return TemplarBoolean(value)

    if isinstance(value, (int, float)):
        try:
            return TemplarNumber(float(value))

        except OverflowError as e:
            raise TemplarConversionError(
                message=f"Integer too large to convert to a number: {value}",
                received=type(value).__name__,
                expected="an integer within float range"
            ) from e

    if isinstance(value, str):
        return TemplarString(value)

    if isinstance(value, Mapping):
        return TemplarObject({key: to_runtime_value(item) for key, item in value.items()})

    # str was handled above; bytes are not treated as sequences of numbers.
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return TemplarArray(tuple(to_runtime_value(item) for item in value))

    if callable(value):
        return _wrap_callable(value)

    raise TemplarConversionError(
        message=f"Cannot convert to runtime value: {value!r}",
        received=type(value).__name__,
        expected="None, bool, int, float, str, mapping, sequence or callable"
    )


def to_host_value(value: TemplarValue) -> Any:
    """Convert a runtime value back into a native Python value."""
    return value.to_python()


def _wrap_callable(func: Callable[..., Any]) -> TemplarFunction:
    """Wrap a Python callable so the evaluator can call it."""
    def call(args: List[TemplarValue], _env: Any) -> TemplarValue:
        # Host callables run against the global data they closed over, not the caller's scope.
        result = func(*(to_host_value(arg) for arg in args))
        return to_runtime_value(result)

    return TemplarFunction(call, name=getattr(func, "__name__", "anonymous"))
