"""
Graph subsystem for undigraph.

Defines the undirected graph container and its derived views:
- tagged node values and handle-pair edges
- the handle-based store with compacting or tombstoning removal
- consistency checks, rendering and export
"""

from undigraph.graph.graph_schema import Node, Edge
from undigraph.graph.errors import NodeNotFound, InvariantViolation
from undigraph.graph.graph_store import GraphStore
from undigraph.graph.graph_builder import GraphBuilder
from undigraph.graph.graph_query import GraphInspector

__all__ = [
    "Node",
    "Edge",
    "NodeNotFound",
    "InvariantViolation",
    "GraphStore",
    "GraphBuilder",
    "GraphInspector",
]
