"""Rendering of path conditions and local bindings into node label text.

Labels are consumed by DOT tooling, so line breaks are written as the
two-character ``\\n`` escape and the block is closed with a carriage return.
The path condition is handled as opaque text: clauses are found by splitting
on the ``&&`` token, never by parsing the constraint language.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import z3

AND_TOKEN = "&&"
LINE_BREAK = "\\n"
BLOCK_END = "\r"

# separator after a local binding, and between path-condition clauses
BINDING_SEPARATOR = AND_TOKEN + LINE_BREAK
CLAUSE_SEPARATOR = " " + AND_TOKEN + LINE_BREAK

PathCondition = Union[None, str, Sequence[str], z3.BoolRef]
LocalBindings = Union[None, Mapping[str, Any], Iterable[Tuple[str, Any]]]


def _conjuncts(expr: z3.ExprRef) -> List[z3.ExprRef]:
    if z3.is_and(expr):
        flat: List[z3.ExprRef] = []
        for child in expr.children():
            flat.extend(_conjuncts(child))
        return flat
    return [expr]


def path_condition_text(path_condition: PathCondition) -> Optional[str]:
    """Return the ``&&``-joined text of a path condition snapshot.

    Strings are returned unchanged, clause sequences are joined with ``&&``
    and z3 expressions contribute one clause per top-level conjunct. ``None``
    means no path condition has been collected yet.
    """
    if path_condition is None:
        return None
    if isinstance(path_condition, str):
        return path_condition
    if z3.is_expr(path_condition):
        # z3's printer wraps long terms; keep each clause on one line
        return AND_TOKEN.join(" ".join(str(c).split()) for c in _conjuncts(path_condition))
    return AND_TOKEN.join(str(clause) for clause in path_condition)


def split_clauses(text: str) -> List[str]:
    """Split on ``&&``, dropping empty trailing pieces like a dangling ``a>0&&``."""
    clauses = text.split(AND_TOKEN)
    while len(clauses) > 1 and not clauses[-1]:
        clauses.pop()
    return clauses


def _iter_bindings(local_bindings: LocalBindings) -> Iterable[Tuple[str, Any]]:
    if local_bindings is None:
        return ()
    if isinstance(local_bindings, Mapping):
        return local_bindings.items()
    return local_bindings


def render_bindings(local_bindings: LocalBindings) -> str:
    entries = [
        f"{name}={value}"
        for name, value in _iter_bindings(local_bindings)
        if value is not None
    ]
    if not entries:
        return ""
    return BINDING_SEPARATOR.join(entries) + BINDING_SEPARATOR


def render_path_condition(local_bindings: LocalBindings, path_condition: PathCondition) -> str:
    """Render bound locals followed by the path condition clauses.

    Bound locals come out as ``name=value`` joined by ``&&\\n``, with one more
    ``&&\\n`` after the last of them. Path condition clauses are joined by
    ``" &&\\n"``. The result always ends with ``\\r``.
    """
    parts = [render_bindings(local_bindings)]
    text = path_condition_text(path_condition)
    if text is not None:
        parts.append(CLAUSE_SEPARATOR.join(split_clauses(text)))
    parts.append(BLOCK_END)
    return "".join(parts)
