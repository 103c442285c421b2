"""Core engine: dependency DAG, unit declarations and resolver."""
