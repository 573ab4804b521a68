from __future__ import annotations

import pytest

from undigraph.config.settings import StoreConfig
from undigraph.graph.graph_store import GraphStore


@pytest.fixture(params=["compact", "tombstone"])
def strategy(request) -> str:
    return request.param


@pytest.fixture()
def store(strategy: str) -> GraphStore:
    return GraphStore(StoreConfig(removal_strategy=strategy, verify_invariants=True))


@pytest.fixture()
def science(store: GraphStore) -> GraphStore:
    store.insert_nodes(["Maths", "Physics", "Chemistry"])
    store.add_edge("Maths", "Physics")
    store.add_edge("Physics", "Chemistry")
    return store
