"""Containers, sorting helpers and graph algorithms built on three-way comparators."""

__version__ = "0.1.0"

__all__ = [
    "sorting",
    "linked_list",
    "vector",
    "hashmap",
    "entity",
    "rb_tree",
    "maps",
    "queues",
    "graph",
    "ud_graph",
    "graph_search",
]