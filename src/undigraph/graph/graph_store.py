from __future__ import annotations

import copy
import logging
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from undigraph.config.settings import StoreConfig
from undigraph.graph.errors import InvariantViolation, NodeNotFound
from undigraph.graph.graph_schema import Edge, Node, NodeValue

logger = logging.getLogger("undigraph.store")


class GraphStore:
    """
    Authoritative in-memory undirected graph.

    Nodes are addressed internally by integer handles. The node table maps
    handle -> node, the value index maps node -> handle, and both the
    attribute and adjacency tables are keyed by handle. Removal either
    compacts the node table or retires the handle, depending on the
    configured strategy.
    """

    def __init__(self, config: Optional[StoreConfig] = None) -> None:
        self.config = config or StoreConfig()
        self._nodes: List[Optional[Node]] = []
        self._index: Dict[Node, int] = {}
        self._attributes: Dict[int, Dict[str, str]] = {}
        self._adjacency: Dict[int, Set[int]] = {}
        self._name: str = self.config.default_name

    # -------------------- Name --------------------

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    # -------------------- Nodes --------------------

    def insert_node(self, value: NodeValue) -> int:
        node = Node.of(value)
        handle = self._index.get(node)
        if handle is not None:
            return handle

        handle = len(self._nodes)
        self._nodes.append(node)
        self._index[node] = handle
        self._attributes[handle] = {}
        self._adjacency[handle] = set()
        self._verify()
        return handle

    def insert_nodes(self, values: Iterable[NodeValue]) -> List[int]:
        return [self.insert_node(value) for value in values]

    def has_node(self, value: NodeValue) -> bool:
        return Node.of(value) in self._index

    def get_handle(self, value: NodeValue) -> Optional[int]:
        return self._index.get(Node.of(value))

    def get_node(self, handle: int) -> Node:
        if 0 <= handle < len(self._nodes):
            node = self._nodes[handle]
            if node is not None:
                return node
        raise NodeNotFound(handle)

    def nodes(self) -> List[Node]:
        return [node for node in self._nodes if node is not None]

    def node_count(self) -> int:
        return len(self._index)

    def neighbors(self, value: NodeValue) -> List[Node]:
        handle = self._require(value)
        return [self._nodes[h] for h in sorted(self._adjacency[handle])]

    # -------------------- Attributes --------------------

    def set_attributes(self, value: NodeValue, attributes: Mapping[str, str]) -> None:
        handle = self._require(value)
        self._attributes[handle] = dict(attributes)
        self._verify()

    def get_attributes(self, value: NodeValue) -> Dict[str, str]:
        handle = self._require(value)
        return dict(self._attributes[handle])

    # -------------------- Edges --------------------

    def add_edge(self, a: NodeValue, b: NodeValue) -> None:
        ha = self.insert_node(a)
        hb = self.insert_node(b)
        # self-loops are kept once in their own neighbor set
        self._adjacency[ha].add(hb)
        self._adjacency[hb].add(ha)
        self._verify()

    def remove_edge(self, a: NodeValue, b: NodeValue) -> bool:
        ha = self.get_handle(a)
        hb = self.get_handle(b)
        if ha is None or hb is None or hb not in self._adjacency[ha]:
            return False
        self._adjacency[ha].discard(hb)
        self._adjacency[hb].discard(ha)
        self._verify()
        return True

    def has_edge(self, a: NodeValue, b: NodeValue) -> bool:
        ha = self.get_handle(a)
        hb = self.get_handle(b)
        if ha is None or hb is None:
            return False
        return hb in self._adjacency[ha]

    def edges(self) -> List[Edge]:
        emitted: Set[int] = set()
        result: List[Edge] = []
        for handle in self._live_handles():
            for other in sorted(self._adjacency[handle]):
                if other in emitted:
                    continue
                result.append(Edge(handle, other))
            emitted.add(handle)
        return result

    def edge_values(self) -> List[Tuple[Node, Node]]:
        return [(self._nodes[u], self._nodes[v]) for u, v in self.edges()]

    def edge_count(self) -> int:
        return len(self.edges())

    # -------------------- Removal --------------------

    def remove_node(self, value: NodeValue) -> Node:
        handle = self._require(value)
        node = self._nodes[handle]

        for other in self._adjacency[handle]:
            if other != handle:
                self._adjacency[other].discard(handle)
        del self._adjacency[handle]
        del self._attributes[handle]
        del self._index[node]

        if self.config.removal_strategy == "tombstone":
            self._nodes[handle] = None
            logger.debug("retired handle %s for %r", handle, node)
        else:
            self._compact(handle)

        self._verify()
        return node

    def _compact(self, vacated: int) -> None:
        """
        Move the last node into the vacated slot and rewrite its handle.

        The mover's old handle is replaced in every neighbor's adjacency set,
        in its own adjacency set (self-loop), in the attribute table and in
        the value index.
        """
        last = len(self._nodes) - 1
        if vacated == last:
            self._nodes.pop()
            logger.debug("dropped trailing handle %s", vacated)
            return

        mover = self._nodes[last]
        if mover is None:
            raise InvariantViolation(f"compacted store has an empty slot at {last}")

        mover_neighbors = self._adjacency.pop(last)
        for other in mover_neighbors:
            if other == last:
                continue
            self._adjacency[other].discard(last)
            self._adjacency[other].add(vacated)
        self._adjacency[vacated] = {
            vacated if other == last else other for other in mover_neighbors
        }
        self._attributes[vacated] = self._attributes.pop(last)
        self._index[mover] = vacated
        self._nodes[vacated] = mover
        self._nodes.pop()
        logger.debug("moved %r from handle %s to %s", mover, last, vacated)

    # -------------------- Cloning --------------------

    def clone(self) -> "GraphStore":
        g = GraphStore(self.config)
        g._nodes = list(self._nodes)
        g._index = dict(self._index)
        g._attributes = copy.deepcopy(self._attributes)
        g._adjacency = {h: set(nbrs) for h, nbrs in self._adjacency.items()}
        g._name = self._name
        return g

    # -------------------- Internals --------------------

    def _require(self, value: NodeValue) -> int:
        node = Node.of(value)
        handle = self._index.get(node)
        if handle is None:
            raise NodeNotFound(node)
        return handle

    def _live_handles(self) -> List[int]:
        return [h for h, node in enumerate(self._nodes) if node is not None]

    def _verify(self) -> None:
        if self.config.verify_invariants:
            # imported lazily; graph_query depends on this module
            from undigraph.graph.graph_query import GraphInspector

            GraphInspector(self).check_invariants()

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, value: object) -> bool:
        try:
            return self.has_node(value)  # type: ignore[arg-type]
        except TypeError:
            return False

    def __str__(self) -> str:
        from undigraph.graph.graph_query import GraphInspector

        return GraphInspector(self).render()
