"""
undigraph
=========

An in-memory undirected graph container with text or integer node labels,
per-node string attributes, and handle-based adjacency that stays consistent
across node removal.

Public API:
- GraphStore
- GraphBuilder
- GraphInspector
- Node
- NodeNotFound
"""

from undigraph.graph.graph_schema import Node, Edge
from undigraph.graph.errors import NodeNotFound, InvariantViolation
from undigraph.graph.graph_store import GraphStore
from undigraph.graph.graph_builder import GraphBuilder
from undigraph.graph.graph_query import GraphInspector

__all__ = [
    "GraphStore",
    "GraphBuilder",
    "GraphInspector",
    "Node",
    "Edge",
    "NodeNotFound",
    "InvariantViolation",
]

__version__ = "0.1.0"
