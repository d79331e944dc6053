"""Environment management for Templar variable scoping."""

from typing import Any, Dict, List

from templar.templar_error import TemplarDuplicateDeclarationError
from templar.templar_host import to_runtime_value
from templar.templar_value import TemplarValue, TEMPLAR_NULL


class TemplarEnvironment:
    """
    Mutable scope frame for variable bindings with lexical scoping.

    Each environment owns its own bindings and keeps a reference to an
    optional parent.  Lookups walk outward through the parents; the parent
    never sees the child's bindings.
    """

    def __init__(self, parent: 'TemplarEnvironment | None' = None, name: str = "anonymous") -> None:
        """
        Initialize an environment.

        Args:
            parent: Enclosing environment, or None for a global scope
            name: Name used in debugging output
        """
        self.bindings: Dict[str, TemplarValue] = {}
        self.parent = parent
        self.name = name

    def set(self, name: str, value: Any) -> TemplarValue:
        """
        Convert a host value and declare it in this environment.

        This is how template data and helper callables are injected.

        Args:
            name: Variable name
            value: Native Python value

        Returns:
            The converted runtime value

        Raises:
            TemplarConversionError: If the value cannot be converted
            TemplarDuplicateDeclarationError: If the name is already declared here
        """
        return self.declare(name, to_runtime_value(value))

    def declare(self, name: str, value: TemplarValue) -> TemplarValue:
        """
        Declare a new variable in this environment.

        Raises:
            TemplarDuplicateDeclarationError: If the name is already declared in this scope
        """
        if name in self.bindings:
            raise TemplarDuplicateDeclarationError(
                message=f"Variable already declared: '{name}'",
                context=f"Scope '{self.name}' already binds '{name}' to {self.bindings[name].describe()}",
                suggestion="Use a different name, or assign with a set statement instead"
            )

        self.bindings[name] = value
        return value

    def set_variable(self, name: str, value: TemplarValue) -> TemplarValue:
        """
        Assign to a variable, declaring it here if it does not exist yet.

        If the name resolves anywhere in the scope chain the binding is
        overwritten in the scope that holds it.
        """
        env = self.resolve(name)
        (env if env is not None else self).bindings[name] = value
        return value

    def resolve(self, name: str) -> 'TemplarEnvironment | None':
        """
        Find the nearest environment in the chain that binds name.

        Returns:
            The environment holding the binding, or None if no scope has it
        """
        env: TemplarEnvironment | None = self
        while env is not None:
            if name in env.bindings:
                return env

            env = env.parent

        return None

    def lookup_variable(self, name: str) -> TemplarValue:
        """
        Look up a variable in this environment or its parents.

        Unknown names yield null rather than raising.
        """
        env = self.resolve(name)
        if env is None:
            return TEMPLAR_NULL

        return env.bindings[name]

    def has_binding(self, name: str) -> bool:
        """Check if a variable is bound in this environment or any parent."""
        return self.resolve(name) is not None

    def get_local_bindings(self) -> Dict[str, TemplarValue]:
        """Get bindings defined in this environment only (not parents)."""
        return self.bindings.copy()

    def get_available_bindings(self) -> List[str]:
        """Get all available binding names in this environment chain."""
        available = list(self.bindings.keys())

        if self.parent is not None:
            available.extend(self.parent.get_available_bindings())

        return available

    def __repr__(self) -> str:
        """String representation for debugging."""
        local_bindings = list(self.bindings.keys())
        parent_info = f" (parent: {self.parent.name})" if self.parent else ""
        return f"TemplarEnvironment({self.name}: {local_bindings}{parent_info})"
