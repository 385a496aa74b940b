"""Undirected weighted graph kept as separate vertex and edge lists."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from .linked_list import LinkedList
from .sorting import Compare


def match_uvertex_id(vertex: "UVertex", vertex_id: Any) -> int:
    """Return 0 when ``vertex`` carries ``vertex_id``, 1 otherwise."""
    if vertex.vertex_id == vertex_id:
        return 0
    return 1


def match_edge_ends(edge: "UEdge", ends: tuple) -> int:
    """Return 0 when ``edge`` joins the two vertex ids in ``ends``, either way round."""
    pair = (edge.first.vertex_id, edge.second.vertex_id)
    return 0 if pair == tuple(ends) or pair[::-1] == tuple(ends) else 1


def match_edge_touches(edge: "UEdge", vertex_id: Any) -> int:
    """Return 0 when ``edge`` has an end carrying ``vertex_id``, 1 otherwise."""
    ends = (edge.first.vertex_id, edge.second.vertex_id)
    if vertex_id in ends:
        return 0
    return 1


@dataclass(eq=False)
class UVertex:
    """A vertex of an undirected graph with per-algorithm exploring data."""

    vertex_id: Any
    exploring: Any = field(default=None, repr=False)
    index: int = -1


@dataclass(eq=False)
class UEdge:
    """An undirected weighted edge between ``first`` and ``second``."""

    first: UVertex
    second: UVertex
    weight: float


class UDGraph:
    """Undirected graph: a list of vertices and a list of edges.

    ``match_vertex(vertex, vertex_id)`` finds vertices and
    ``match_edge(edge, (id1, id2))`` finds the edge removed by ``del_edge``;
    both return 0 for a match.
    """

    def __init__(
        self,
        match_vertex: Optional[Compare] = None,
        match_edge: Optional[Compare] = None,
    ) -> None:
        self.match_vertex = match_vertex if match_vertex is not None else match_uvertex_id
        self.match_edge = match_edge if match_edge is not None else match_edge_ends
        self.vertices = LinkedList()
        self.edges = LinkedList()

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[UVertex]:
        return iter(self.vertices)

    def __repr__(self) -> str:
        ids = [vertex.vertex_id for vertex in self.vertices]
        return f"{type(self).__name__}({ids!r}, edges={len(self.edges)})"

    def get_vertex(self, vertex_id: Any) -> Optional[UVertex]:
        """Return the vertex matching ``vertex_id``, or None."""
        node = self.vertices.search(vertex_id, self.match_vertex)
        return None if node is None else node.value

    def add_vertex(self, vertex_id: Any) -> UVertex:
        """Append a new vertex carrying ``vertex_id`` and return it."""
        vertex = UVertex(vertex_id)
        self.vertices.append(vertex)
        return vertex

    def add_edge(self, first_id: Any, second_id: Any, weight: float) -> UEdge:
        """Join the vertices matching the two ids with an edge and return it."""
        first = self.get_vertex(first_id)
        second = self.get_vertex(second_id)
        if first is None:
            raise KeyError(first_id)
        if second is None:
            raise KeyError(second_id)
        edge = UEdge(first, second, float(weight))
        self.edges.append(edge)
        return edge

    def del_vertex(
        self, vertex_id: Any, match_edge: Optional[Compare] = None
    ) -> Optional[UVertex]:
        """Remove the vertex matching ``vertex_id`` and its edges.

        Edges for which ``match_edge(edge, vertex_id)`` is 0 are dropped; by
        default those touching the vertex. Returns the vertex, or None if no
        vertex matched.
        """
        node = self.vertices.search(vertex_id, self.match_vertex)
        if node is None:
            return None
        vertex = self.vertices.remove(node)
        matcher = match_edge if match_edge is not None else match_edge_touches
        for edge_node in self.edges.nodes():
            if matcher(edge_node.value, vertex_id) == 0:
                self.edges.remove(edge_node)
        return vertex

    def del_edge(self, first_id: Any, second_id: Any) -> Optional[UEdge]:
        """Remove the first edge matching the two ids; return it or None."""
        node = self.edges.search((first_id, second_id), self.match_edge)
        return None if node is None else self.edges.remove(node)

    def index_vertices(self) -> None:
        """Number the vertices 0, 1, ... in their current order."""
        for index, vertex in enumerate(self.vertices):
            vertex.index = index