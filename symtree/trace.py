"""Loading of JSONL step traces and replay into a materializer."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .materializer import TreeMaterializer
from .steps import ExecutionStep

LOGGER = logging.getLogger(__name__)


class TraceFormatError(ValueError):
    """Raised when a trace record cannot be decoded."""


def _decode_path_condition(value: Any) -> Union[None, str, List[str]]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(clause, str) for clause in value):
        return value
    raise TraceFormatError(f"'path_condition' must be a string or a list of strings, got {value!r}")


def _decode_locals(value: Any) -> List[Tuple[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TraceFormatError(f"'locals' must be a list, got {type(value).__name__}")
    bindings: List[Tuple[str, Any]] = []
    for item in value:
        if isinstance(item, dict) and "name" in item:
            bindings.append((str(item["name"]), item.get("value")))
        elif isinstance(item, list) and len(item) == 2:
            bindings.append((str(item[0]), item[1]))
        else:
            raise TraceFormatError(f"local binding must be [name, value] or {{name, value}}, got {item!r}")
    return bindings


@dataclass
class TraceRecord:
    record_id: str
    step: ExecutionStep
    parent: Optional[str] = None
    path_condition: Union[None, str, List[str]] = None
    local_bindings: List[Tuple[str, Any]] = field(default_factory=list)

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "TraceRecord":
        if "id" not in payload:
            raise TraceFormatError("Trace record is missing 'id'")
        parent = payload.get("parent")
        return cls(
            record_id=str(payload["id"]),
            step=ExecutionStep.from_json(payload),
            parent=str(parent) if parent is not None else None,
            path_condition=_decode_path_condition(payload.get("path_condition")),
            local_bindings=_decode_locals(payload.get("locals")),
        )


def parse_trace(lines: Iterable[str]) -> List[TraceRecord]:
    records: List[TraceRecord] = []
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        try:
            records.append(TraceRecord.from_json(json.loads(line)))
        except (ValueError, KeyError, TypeError) as exc:
            raise TraceFormatError(f"line {lineno}: {exc}") from exc
    return records


def load_trace(path: Path) -> List[TraceRecord]:
    with open(path) as f:
        return parse_trace(f)


def replay(
    records: Iterable[TraceRecord],
    materializer: Optional[TreeMaterializer] = None,
) -> Tuple[TreeMaterializer, Dict[str, str]]:
    """Feed ``records`` in order to a materializer.

    Returns the materializer and the mapping from record id to node id.
    Parents must appear before their children.
    """
    if materializer is None:
        materializer = TreeMaterializer()
    nodes: Dict[str, str] = {}
    for record in records:
        parent_node = None
        if record.parent is not None:
            try:
                parent_node = nodes[record.parent]
            except KeyError as exc:
                raise TraceFormatError(
                    f"Record {record.record_id!r} refers to unknown parent {record.parent!r}"
                ) from exc
        if record.record_id in nodes:
            raise TraceFormatError(f"Duplicate record id {record.record_id!r}")
        nodes[record.record_id] = materializer.add_step(
            parent_node, record.step, record.path_condition, record.local_bindings
        )
    LOGGER.info("materialized %d nodes, %d edges",
                materializer.node_count, materializer.graph.number_of_edges())
    return materializer, nodes
