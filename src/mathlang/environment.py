"""Variable store shared by the statements of one session."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import UndefinedVariable
from .values import Value


@dataclass
class Environment:
    """Holds every variable bound during a session."""

    variables: dict[str, Value] = field(default_factory=dict)

    def assign(self, name: str, value: Value) -> None:
        self.variables[name] = value

    def lookup(self, name: str) -> Value:
        try:
            return self.variables[name]
        except KeyError:
            raise UndefinedVariable(name) from None

    def __contains__(self, name: str) -> bool:
        return name in self.variables

    def names(self) -> list[str]:
        return list(self.variables)

    def clear(self) -> None:
        self.variables.clear()
