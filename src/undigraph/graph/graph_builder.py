from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from undigraph.graph.graph_schema import NodeValue
from undigraph.graph.graph_store import GraphStore


class GraphBuilder:
    """
    Constructs a graph from node lists and edge pairs.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store

    def add_nodes(self, nodes: Iterable[NodeValue]) -> List[int]:
        handles = self.store.insert_nodes(nodes)
        logging.getLogger("undigraph.builder").info(
            "inserted nodes=%s live=%s", len(handles), self.store.node_count()
        )
        return handles

    def add_edges(self, edges: Iterable[Tuple[NodeValue, NodeValue]]) -> None:
        count = 0
        for a, b in edges:
            self.store.add_edge(a, b)
            count += 1
        logging.getLogger("undigraph.builder").info(
            "added edge pairs=%s edges=%s", count, self.store.edge_count()
        )

    def build(
        self,
        nodes: Iterable[NodeValue] = (),
        edges: Iterable[Tuple[NodeValue, NodeValue]] = (),
    ) -> GraphStore:
        self.add_nodes(nodes)
        self.add_edges(edges)
        return self.store
