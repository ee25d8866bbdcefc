"""Incremental construction of the explored execution tree."""
from __future__ import annotations

import logging
from typing import Optional

import networkx as nx

from .classifier import classify
from .pathcond import LocalBindings, PathCondition
from .steps import ExecutionStep

LOGGER = logging.getLogger(__name__)


class GraphConsistencyError(RuntimeError):
    """Raised when the destination graph cannot take a node or edge."""


class TreeMaterializer:
    """Turns execution steps into nodes and edges of a directed graph.

    One instance is one visualization session: it owns the destination graph
    and the identifier counter. Instances are not thread safe; parallel
    explorations each need their own materializer.
    """

    def __init__(self, graph: Optional[nx.DiGraph] = None) -> None:
        self._graph = graph if graph is not None else nx.DiGraph()
        self._next_id = 0

    @property
    def graph(self) -> nx.DiGraph:
        return self._graph

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def add_step(
        self,
        parent: Optional[str],
        step: ExecutionStep,
        path_condition: PathCondition = None,
        local_bindings: LocalBindings = None,
    ) -> str:
        """Materialize ``step`` as a child of ``parent`` and return its node id.

        Pass ``None`` as parent for the root of the session. Passing the same
        parent several times fans out branches.
        """
        attrs = dict(classify(step, path_condition, local_bindings))

        node_id = str(self._next_id)
        if node_id in self._graph:
            raise GraphConsistencyError(f"Node {node_id} already exists in the destination graph")
        if parent is not None and parent not in self._graph:
            raise GraphConsistencyError(f"Parent node {parent!r} is not part of the destination graph")
        self._next_id += 1

        self._graph.add_node(node_id, **attrs)
        if parent is not None:
            self._graph.add_edge(parent, node_id)
        LOGGER.debug("node %s (%s %s) parent=%s", node_id, step.category.value, step.mnemonic, parent)
        return node_id
