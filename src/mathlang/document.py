"""Document — the transcript of a MathLang session."""

from __future__ import annotations

from dataclasses import dataclass, field

from .environment import Environment
from .evaluator import evaluate
from .nodes import Statement
from .values import Value


@dataclass
class Document:
    """Holds the variables and results accumulated by a session."""

    environment: Environment = field(default_factory=Environment)
    results: list[Value] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Not a dataclass field; tracks last result from the most recent merge()
        self._last_result: Value | None = None

    # -- Convenience accessors ------------------------------------------

    @property
    def variables(self) -> dict[str, Value]:
        return self.environment.variables

    @property
    def last_result(self) -> Value | None:
        """The last value produced by the most recent merge()."""
        return self._last_result

    # -- Incremental evaluation -----------------------------------------

    def merge(self, statements: list[Statement]) -> None:
        """Evaluate *statements* in order against this Document.

        Each successful statement appends its value to ``results`` and becomes
        ``last_result``.  The first failing statement raises; statements before
        it stay applied.  An empty *statements* list resets ``last_result`` to
        ``None``.
        """
        if not statements:
            self._last_result = None
        for stmt in statements:
            value = evaluate(stmt, self.environment)
            self.results.append(value)
            self._last_result = value
