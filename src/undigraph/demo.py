import logging

from undigraph.config.app_config import AppConfig
from undigraph.graph.graph_builder import GraphBuilder
from undigraph.graph.graph_schema import Node
from undigraph.graph.graph_store import GraphStore

SUBJECTS = ["Maths", "Physics", "Chemistry"]
LINKS = [("Maths", "Physics"), ("Physics", "Chemistry")]


def build_sample_graph(config: AppConfig) -> GraphStore:
    store = GraphStore(config.undigraph.store)
    if not store.name:
        store.name = "subjects"
    GraphBuilder(store).build(
        nodes=[Node.text(s) for s in SUBJECTS],
        edges=LINKS,
    )
    return store


def main() -> None:
    config = AppConfig()
    logging.basicConfig(
        level=str(config.log_level).upper(),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    logger = logging.getLogger("undigraph.demo")

    store = build_sample_graph(config)
    logger.info("\n%s", store)

    removed = store.remove_node("Physics")
    logger.info("removed %s; edges left=%s", removed, store.edge_count())
    logger.info("\n%s", store)


if __name__ == "__main__":
    main()
