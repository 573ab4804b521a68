import pytest
from dynaconf import Dynaconf

from undigraph.config.app_config import AppConfig, build_store_config
from undigraph.config.settings import StoreConfig
from undigraph.graph.graph_store import GraphStore


def test_store_config_defaults():
    config = StoreConfig()
    assert config.removal_strategy == "compact"
    assert config.verify_invariants is False
    assert config.default_name == ""


def test_store_config_rejects_unknown_strategy():
    with pytest.raises(ValueError):
        StoreConfig(removal_strategy="swap")


def test_build_store_config_reads_environment(monkeypatch):
    monkeypatch.setenv("UNDIGRAPH_REMOVAL_STRATEGY", "tombstone")
    monkeypatch.setenv("UNDIGRAPH_VERIFY_INVARIANTS", "true")
    monkeypatch.setenv("UNDIGRAPH_GRAPH_NAME", "campus")

    config = build_store_config(Dynaconf(envvar_prefix="UNDIGRAPH"))

    assert config.removal_strategy == "tombstone"
    assert config.verify_invariants is True
    assert config.default_name == "campus"


def test_default_name_applies_to_new_store():
    store = GraphStore(StoreConfig(default_name="campus"))
    assert store.name == "campus"


def test_app_config_carries_store_policy():
    config = AppConfig()
    assert isinstance(config.undigraph.store, StoreConfig)
    assert config.undigraph.log_level == config.log_level
