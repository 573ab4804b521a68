import networkx as nx
import numpy as np
import pytest

from undigraph.graph.errors import InvariantViolation
from undigraph.graph.graph_builder import GraphBuilder
from undigraph.graph.graph_query import GraphInspector
from undigraph.graph.graph_schema import Node
from undigraph.graph.graph_store import GraphStore


def test_render_lists_nodes_then_edges(science):
    science.name = "subjects"
    lines = GraphInspector(science).render().splitlines()

    assert lines[0] == "Graph subjects"
    assert lines[1] == "Nodes:"
    assert sorted(lines[2:5]) == ["  Chemistry", "  Maths", "  Physics"]
    assert lines[5] == "Edges:"
    assert set(lines[6:]) == {"  Maths--Physics", "  Physics--Chemistry"}
    assert str(science) == GraphInspector(science).render()


def test_to_networkx_matches_store(science):
    science.set_attributes("Maths", {"dept": "science"})
    g = GraphInspector(science).to_networkx()

    assert g.number_of_nodes() == science.node_count()
    assert g.number_of_edges() == science.edge_count()
    maths = science.get_handle("Maths")
    assert g.nodes[maths]["value"] == Node.text("Maths")
    assert g.nodes[maths]["attributes"] == {"dept": "science"}
    assert nx.is_isomorphic(g, nx.path_graph(3))


def test_adjacency_matrix_is_symmetric(science):
    science.remove_node("Maths")
    science.add_edge("Chemistry", "Biology")
    matrix, order = GraphInspector(science).adjacency_matrix()

    assert matrix.shape == (3, 3)
    assert order == sorted(order)
    assert np.array_equal(matrix, matrix.T)
    assert int(matrix.sum()) == 2 * science.edge_count()


def test_check_invariants_detects_stale_back_reference():
    store = GraphStore()
    store.add_edge("a", "b")
    store._adjacency[0].add(7)

    with pytest.raises(InvariantViolation):
        GraphInspector(store).check_invariants()


def test_check_invariants_detects_asymmetry():
    store = GraphStore()
    store.add_edge("a", "b")
    store._adjacency[1].discard(0)

    with pytest.raises(InvariantViolation):
        GraphInspector(store).check_invariants()


def test_check_invariants_detects_orphan_attribute_entry():
    store = GraphStore()
    store.insert_node("a")
    store._attributes[3] = {}

    with pytest.raises(InvariantViolation):
        GraphInspector(store).check_invariants()


def test_builder_constructs_graph(store):
    built = GraphBuilder(store).build(
        nodes=["Maths", "Physics", 42],
        edges=[("Maths", "Physics"), (42, "Maths"), ("Physics", "Maths")],
    )

    assert built is store
    assert store.node_count() == 3
    assert store.edge_count() == 2
    assert store.has_edge("Maths", 42)
