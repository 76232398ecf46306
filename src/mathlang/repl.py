"""MathRepl — incremental session for notebook / interactive use.

Also provides the ``mathlang-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import sys
from typing import IO

from . import nodes
from .document import Document
from .environment import Environment
from .errors import MathLangError
from .evaluator import evaluate
from .parser import parse, parse_program
from .values import Value, VList, VMatrix, VScalar, VText


# ---------------------------------------------------------------------------
# MathRepl class (notebook / programmatic use)
# ---------------------------------------------------------------------------

class MathRepl:
    """Stateful session that keeps variables across calls.

    Usage::

        repl = MathRepl()
        repl.eval("m = [[1, 2], [3, 4]]")
        repl.eval("det(m)")          # → VText("-2.0000000000000004")
        repl.value_of("m - m")       # → VMatrix(...)

        repl.doc.variables   # all defined variables
        repl.reset()         # clear state
    """

    def __init__(self, env: Environment | None = None) -> None:
        self.doc = Document(environment=env if env is not None else Environment())

    def eval(self, text: str) -> Value | None:
        """Evaluate every statement in *text*.

        Returns the value of the last statement, or ``None`` if *text*
        holds no statements.
        """
        self.doc.merge(parse_program(text))
        return self.doc.last_result

    def run(self, stmt: nodes.Statement) -> Value:
        """Evaluate an already parsed statement."""
        self.doc.merge([stmt])
        return self.doc.last_result

    def value_of(self, text: str) -> Value:
        """Value of a single expression, without rendering it to text.

        Assignments are executed normally and return the assigned value.
        """
        stmt = parse(text)
        if isinstance(stmt, nodes.Print):
            return evaluate(stmt.expr, self.doc.environment)
        return self.run(stmt)

    def reset(self) -> None:
        """Clear all accumulated state (variables, results).

        The environment object is kept, so a store passed to the constructor
        keeps receiving assignments.
        """
        env = self.doc.environment
        env.clear()
        self.doc = Document(environment=env)


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, VText):
        return f'"{value.value}"'
    return str(value)


def _fmt_inspect(value: Value) -> str:
    """Pretty-print a value for inspect() / i()."""
    if isinstance(value, VMatrix):
        m = value.matrix
        header = f"matrix {m.rows}x{m.cols}"
        if m.rows == 0 or m.cols == 0:
            return f"{header} []"
        lines = [f"{header} ["]
        for row in m.tolist():
            lines.append("  [" + ", ".join(repr(x) for x in row) + "]")
        lines.append("]")
        return "\n".join(lines)

    if isinstance(value, VList):
        lines = [f"list ({len(value)}) ["]
        for i, x in enumerate(value.items, 1):
            lines.append(f"  {i}: {x!r}")
        lines.append("]")
        return "\n".join(lines)

    if isinstance(value, VScalar):
        return f"scalar {value}"

    return f"{value.kind.value} {_fmt_inline(value)}"


def _run_statements(repl: MathRepl, text: str, dest: IO[str]) -> None:
    """Evaluate *text*; print statements write their rendering to *dest*."""
    for stmt in parse_program(text):
        value = repl.run(stmt)
        if isinstance(stmt, nodes.Print):
            print(str(value), file=dest)


def _eval_expr(repl: MathRepl, expr: str, dest: IO[str]) -> None:
    """Evaluate *expr* and print its value inline to *dest*."""
    print(_fmt_inline(repl.value_of(expr)), file=dest)


def _inspect_expr(repl: MathRepl, expr: str, dest: IO[str]) -> None:
    """Evaluate *expr* and pretty-print to *dest*."""
    print(_fmt_inspect(repl.value_of(expr)), file=dest)


def _show_vars(repl: MathRepl, dest: IO[str]) -> None:
    """Print all variables with their kinds."""
    entries = repl.doc.variables
    if not entries:
        print("  (no variables defined)", file=dest)
        return
    width = max(len(k) for k in entries)
    for name, value in entries.items():
        print(f"  {name:<{width}} : {value.kind.value:<6} = {value}", file=dest)


def _run_file(repl: MathRepl, filepath: str, dest: IO[str]) -> None:
    try:
        with open(filepath, encoding="utf-8") as fh:
            for file_line in fh:
                _process_line(repl, file_line.rstrip("\n"), dest)
    except OSError as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)


def _process_line(repl: MathRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line or line.startswith("#"):
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":vars":
        _show_vars(repl, dest)
        return True

    if line == ":reset":
        repl.reset()
        return True

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        _run_file(repl, line[4:].strip(), dest)
        return True

    try:
        # ── inspect() / i() ───────────────────────────────────────────────
        for prefix in ("inspect(", "i("):
            if line.startswith(prefix) and line.endswith(")"):
                _inspect_expr(repl, line[len(prefix):-1].strip(), dest)
                return True

        # ── ? expression ──────────────────────────────────────────────────
        if line.startswith("? "):
            _eval_expr(repl, line[2:].strip(), dest)
            return True

        # ── Regular MathLang input ────────────────────────────────────────
        _run_statements(repl, line, dest)
    except MathLangError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _redirect(filepath: str) -> IO[str] | None:
    """Open *filepath* for ``?>>`` output, or report why it cannot be opened."""
    try:
        return open(filepath, "w", encoding="utf-8")
    except OSError as exc:
        print(f"Error opening '{filepath}': {exc}", file=sys.stderr)
        return None


def main(out: IO[str] | None = None, repl: MathRepl | None = None) -> None:
    """Interactive MathLang shell (``mathlang-repl`` / ``python -m mathlang.repl``).

    Lines are read with ``input()``.  The banner and results go to *out*
    (``sys.stdout`` by default) until a ``?>> path`` redirect.
    """
    out = out if out is not None else sys.stdout
    repl = repl if repl is not None else MathRepl()
    dest: IO[str] = out
    _file: IO[str] | None = None

    print("MathLang REPL  (:q to quit  |  :vars  :reset  |  ? <expr>  inspect(<expr>))", file=out)

    while True:
        try:
            line = input("MATH> ").strip()
        except EOFError:
            print(file=out)
            break
        except KeyboardInterrupt:
            print(file=out)
            continue

        if not line:
            continue

        # ── Output redirect: ?>> filepath  /  ?>> ─────────────────────────
        if line.startswith("?>> ") or line == "?>>":
            if _file:
                _file.close()
                _file = None
            dest = out
            filepath = line[4:].strip()
            if filepath:
                _file = _redirect(filepath)
                if _file:
                    dest = _file
            continue

        if not _process_line(repl, line, dest):
            break

    if _file:
        _file.close()


if __name__ == "__main__":
    main()
