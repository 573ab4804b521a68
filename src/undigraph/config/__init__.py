"""
Configuration layer for undigraph.

Typed, immutable policy objects for the graph store, plus a Dynaconf-backed
loader that resolves them from UNDIGRAPH_* environment variables.
"""

from undigraph.config.settings import StoreConfig, UndigraphConfig
from undigraph.config.app_config import AppConfig, build_store_config

__all__ = [
    "StoreConfig",
    "UndigraphConfig",
    "AppConfig",
    "build_store_config",
]
