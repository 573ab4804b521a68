DEFAULTS = {
    # Handle reuse after removal: "compact" or "tombstone"
    "REMOVAL_STRATEGY": "compact",
    # Scan all tables after every mutation (slow, for debugging)
    "VERIFY_INVARIANTS": False,
    # Name given to newly created graphs
    "GRAPH_NAME": "",
    # Root log level for the demo entry point
    "LOG_LEVEL": "INFO",
}
