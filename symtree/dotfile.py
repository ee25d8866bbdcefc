"""Graphviz DOT export for materialized execution trees."""
from __future__ import annotations

import re
from pathlib import Path
from typing import List

import networkx as nx

DEFAULT_GRAPH_NAME = "SymbolicExecutionTree"
NODE_ATTRS = ("label", "color", "shape")


def _quote(value: object) -> str:
    # labels already carry DOT escapes (\n); only quotes and the backslashes
    # right before them need escaping
    text = re.sub(r'\\*"', lambda m: m.group(0)[:-1] * 2 + '\\"', str(value))
    return '"' + text + '"'


def to_dot(graph: nx.DiGraph, name: str = DEFAULT_GRAPH_NAME) -> str:
    lines: List[str] = [f"digraph {_quote(name)} {{"]
    for node_id, data in graph.nodes(data=True):
        attrs = ", ".join(
            f"{key}={_quote(data[key])}" for key in NODE_ATTRS if data.get(key) is not None
        )
        lines.append(f"  {_quote(node_id)} [{attrs}];" if attrs else f"  {_quote(node_id)};")
    for source, target in graph.edges():
        lines.append(f"  {_quote(source)} -> {_quote(target)};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(graph: nx.DiGraph, output_path: Path, name: str = DEFAULT_GRAPH_NAME) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps the label's trailing \r as written
    with open(output_path, "w", newline="") as f:
        f.write(to_dot(graph, name))
    return output_path
