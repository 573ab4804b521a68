from __future__ import annotations

from typing import Any, Dict, List, Tuple

import networkx as nx
import numpy as np

from undigraph.graph.errors import InvariantViolation
from undigraph.graph.graph_store import GraphStore


class GraphInspector:
    """
    Read-only views over a GraphStore.

    Provides the bookkeeping scan used to detect internal defects, plain-data
    snapshots for before/after comparisons, the text rendering, and export to
    networkx and numpy.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store

    # ------------------------------------------------------------------
    # Consistency
    # ------------------------------------------------------------------

    def check_invariants(self) -> None:
        """
        Scan every table and raise InvariantViolation on the first defect.
        """
        s = self.store
        live = {h for h, node in enumerate(s._nodes) if node is not None}

        if set(s._adjacency) != live:
            raise InvariantViolation(
                f"adjacency keys {sorted(s._adjacency)} != live handles {sorted(live)}"
            )
        if set(s._attributes) != live:
            raise InvariantViolation(
                f"attribute keys {sorted(s._attributes)} != live handles {sorted(live)}"
            )

        if len(s._index) != len(live):
            raise InvariantViolation("value index size differs from live node count")
        for node, handle in s._index.items():
            if handle not in live or s._nodes[handle] != node:
                raise InvariantViolation(f"value index maps {node!r} to stale handle {handle}")

        if s.config.removal_strategy == "compact" and len(live) != len(s._nodes):
            raise InvariantViolation("compacted node table contains empty slots")

        for handle, neighbors in s._adjacency.items():
            for other in neighbors:
                if other not in live:
                    raise InvariantViolation(
                        f"handle {handle} references dead handle {other}"
                    )
                if handle not in s._adjacency[other]:
                    raise InvariantViolation(
                        f"edge {handle}--{other} is not symmetric"
                    )

    def snapshot(self) -> Dict[str, Any]:
        s = self.store
        return {
            "name": s.name,
            "nodes": list(s._nodes),
            "index": dict(s._index),
            "attributes": {h: dict(a) for h, a in s._attributes.items()},
            "adjacency": {h: set(n) for h, n in s._adjacency.items()},
        }

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        lines = [f"Graph {self.store.name}".rstrip()]
        lines.append("Nodes:")
        lines.extend(f"  {node}" for node in self.store.nodes())
        lines.append("Edges:")
        lines.extend(f"  {a}--{b}" for a, b in self.store.edge_values())
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_networkx(self) -> nx.Graph:
        s = self.store
        g = nx.Graph(name=s.name)
        for handle, node in enumerate(s._nodes):
            if node is None:
                continue
            g.add_node(handle, value=node, attributes=dict(s._attributes[handle]))
        g.add_edges_from(tuple(e) for e in s.edges())
        return g

    def adjacency_matrix(self) -> Tuple[np.ndarray, List[int]]:
        """
        Dense 0/1 adjacency matrix over live nodes in handle order.

        Returns the matrix and the handle of each row/column.
        """
        order = self.store._live_handles()
        position = {h: i for i, h in enumerate(order)}
        matrix = np.zeros((len(order), len(order)), dtype=np.int8)
        for u, v in self.store.edges():
            i, j = position[u], position[v]
            matrix[i, j] = 1
            matrix[j, i] = 1
        return matrix, order
