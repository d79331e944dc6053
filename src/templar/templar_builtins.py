"""
Built-in member table for Templar values.

Built-ins are looked up by (type tag, member name).  Each entry is a plain
function that receives the receiver value explicitly and returns the member's
value, so no value carries its own method table.
"""

from typing import Any, Callable, Dict, List

from templar.templar_value import (
    TemplarValue, TemplarNumber, TemplarString, TemplarObject, TemplarFunction
)


MemberFactory = Callable[[Any], TemplarValue]


def _string_method(name: str, transform: Callable[[str], str]) -> MemberFactory:
    """Build a member factory for a zero-argument string method."""
    def member(receiver: TemplarString) -> TemplarFunction:
        def method(_args: List[TemplarValue], _env: Any) -> TemplarValue:
            return TemplarString(transform(receiver.value))

        return TemplarFunction(method, name=name)

    return member


def _string_length(receiver: TemplarString) -> TemplarNumber:
    return TemplarNumber(float(len(receiver.value)))


BUILTIN_MEMBERS: Dict[str, Dict[str, MemberFactory]] = {
    "string": {
        "upper": _string_method("upper", str.upper),
        "lower": _string_method("lower", str.lower),
        "strip": _string_method("strip", str.strip),
        "length": _string_length,
    },
    # Objects have no built-ins yet; user data always wins over this table.
    "object": {},
}


def builtin_names(type_name: str) -> List[str]:
    """Return the built-in member names available for a type tag."""
    return sorted(BUILTIN_MEMBERS.get(type_name, {}))


def lookup_builtin(receiver: TemplarValue, name: str) -> TemplarValue | None:
    """
    Look up a built-in member of a value.

    Args:
        receiver: Value whose member is requested
        name: Member name

    Returns:
        The member value, or None if the receiver's type has no such built-in
    """
    factory = BUILTIN_MEMBERS.get(receiver.type_name(), {}).get(name)
    if factory is None:
        return None

    return factory(receiver)


def lookup_member(receiver: TemplarValue, name: str) -> TemplarValue | None:
    """
    Look up a member of a value.

    Objects consult their own data first and fall back to the built-in table.
    Every other type only has built-ins.
    """
    if isinstance(receiver, TemplarObject):
        value = receiver.get(name)
        if value is not None:
            return value

    return lookup_builtin(receiver, name)
