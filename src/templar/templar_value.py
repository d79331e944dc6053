"""Templar Value hierarchy - immutable runtime value types.

Every value the evaluator produces or consumes is one of a closed set of
variants.  Each variant is a frozen dataclass carrying a single payload.
Operators and built-ins never mutate a value; they always build a new one.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple


@dataclass(frozen=True)
class TemplarValue(ABC):
    """
    Abstract base class for all Templar runtime values.

    All runtime values are immutable.
    """

    @abstractmethod
    def to_python(self) -> Any:
        """Convert to a native Python value."""

    @abstractmethod
    def type_name(self) -> str:
        """Return the type tag used for dispatch and error messages."""

    @abstractmethod
    def to_text(self) -> str:
        """Return the printed form written to template output."""

    def describe(self) -> str:
        """Describe the value for error messages."""
        return f"{self.type_name()} {self.to_text()!r}"


def format_number(value: float) -> str:
    """Format a float the way template output shows numbers."""
    if math.isnan(value):
        return "NaN"

    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    if value.is_integer():
        return str(int(value))

    return repr(value)


@dataclass(frozen=True)
class TemplarNumber(TemplarValue):
    """Represents numeric values, always held as a 64-bit float."""
    value: float

    def to_python(self) -> float:
        return self.value

    def type_name(self) -> str:
        return "number"

    def to_text(self) -> str:
        return format_number(self.value)

    def describe(self) -> str:
        return f"number {self.to_text()}"


@dataclass(frozen=True)
class TemplarString(TemplarValue):
    """Represents string values."""
    value: str

    def to_python(self) -> str:
        return self.value

    def type_name(self) -> str:
        return "string"

    def to_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class TemplarBoolean(TemplarValue):
    """Represents boolean values."""
    value: bool

    def to_python(self) -> bool:
        return self.value

    def type_name(self) -> str:
        return "boolean"

    def to_text(self) -> str:
        return "true" if self.value else "false"

    def describe(self) -> str:
        return f"boolean {self.to_text()}"


@dataclass(frozen=True)
class TemplarObject(TemplarValue):
    """
    Represents a string-keyed mapping of runtime values.

    The full mapping is supplied at construction time; nothing adds keys later.
    """
    value: Dict[str, TemplarValue] = field(default_factory=dict)

    # The payload is a dict, so objects compare by content but cannot be hashed.
    __hash__ = None  # type: ignore[assignment]

    def to_python(self) -> Dict[str, Any]:
        """Convert to a Python dict with Python values."""
        return {key: item.to_python() for key, item in self.value.items()}

    def type_name(self) -> str:
        return "object"

    def to_text(self) -> str:
        return "[object Object]"

    def describe(self) -> str:
        keys = ", ".join(repr(key) for key in self.value)
        return f"object with keys [{keys}]"

    def get(self, key: str) -> TemplarValue | None:
        """Get the user data stored under key, or None if there is none."""
        return self.value.get(key)


@dataclass(frozen=True)
class TemplarArray(TemplarValue):
    """Represents an ordered sequence of runtime values."""
    value: Tuple[TemplarValue, ...] = ()

    def to_python(self) -> List[Any]:
        """Convert to a Python list with Python values."""
        return [elem.to_python() for elem in self.value]

    def type_name(self) -> str:
        return "array"

    def to_text(self) -> str:
        return ",".join(elem.to_text() for elem in self.value)

    def describe(self) -> str:
        return f"array of length {self.length()}"

    def length(self) -> int:
        """Return the number of elements."""
        return len(self.value)


@dataclass(frozen=True)
class TemplarFunction(TemplarValue):
    """
    Represents a callable value.

    The payload takes the evaluated arguments and the calling environment
    and returns a runtime value.  The environment is typed loosely to avoid
    a circular import with the environment module.
    """
    value: Callable[[List[TemplarValue], Any], TemplarValue]
    name: str = "anonymous"

    def to_python(self) -> Callable[[List[TemplarValue], Any], TemplarValue]:
        return self.value

    def type_name(self) -> str:
        return "function"

    def to_text(self) -> str:
        return f"[function {self.name}]"

    def describe(self) -> str:
        return f"function '{self.name}'"

    def call(self, args: List[TemplarValue], env: Any) -> TemplarValue:
        """Invoke the function with evaluated arguments and the caller's environment."""
        return self.value(args, env)


@dataclass(frozen=True)
class TemplarNull(TemplarValue):
    """Represents the absence of a value."""

    def to_python(self) -> None:
        return None

    def type_name(self) -> str:
        return "null"

    def to_text(self) -> str:
        return ""

    def describe(self) -> str:
        return "null"


# Module-level singleton; all TemplarNull instances compare equal anyway.
TEMPLAR_NULL = TemplarNull()
