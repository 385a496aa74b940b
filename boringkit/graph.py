"""Directed weighted graph kept as adjacency lists."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from .linked_list import LinkedList
from .sorting import Compare

PathMatrix = dict[tuple[int, int], float]
"""Sparse adjacency matrix: ``(row, column)`` vertex indices mapped to weights."""


def match_vertex_id(vertex: "Vertex", vertex_id: Any) -> int:
    """Return 0 when ``vertex`` carries ``vertex_id``, 1 otherwise."""
    if vertex.vertex_id == vertex_id:
        return 0
    return 1


def match_path_target(path: "Path", target_id: Any) -> int:
    """Return 0 when ``path`` leads to the vertex with ``target_id``, 1 otherwise."""
    target = path.to
    if target.vertex_id == target_id:
        return 0
    return 1


@dataclass(eq=False)
class Vertex:
    """A vertex with its outgoing paths and per-algorithm exploring data."""

    vertex_id: Any
    paths: LinkedList = field(default_factory=LinkedList, repr=False)
    exploring: Any = field(default=None, repr=False)
    index: int = -1


@dataclass(eq=False)
class Path:
    """A directed, weighted edge leading to ``to``."""

    to: Vertex
    weight: float


class Graph:
    """Directed graph whose vertices keep lists of outgoing paths.

    ``match_vertex(vertex, vertex_id)`` and ``match_path(path, target_id)``
    return 0 for a match and are used by the lookup methods.
    """

    def __init__(
        self,
        match_vertex: Optional[Compare] = None,
        match_path: Optional[Compare] = None,
    ) -> None:
        self.match_vertex = match_vertex if match_vertex is not None else match_vertex_id
        self.match_path = match_path if match_path is not None else match_path_target
        self.vertices = LinkedList()

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __repr__(self) -> str:
        ids = [vertex.vertex_id for vertex in self.vertices]
        return f"{type(self).__name__}({ids!r})"

    def add_vertex(self, vertex_id: Any) -> Vertex:
        """Append a new vertex carrying ``vertex_id`` and return it."""
        vertex = Vertex(vertex_id)
        self.vertices.append(vertex)
        return vertex

    def add_path(self, source: Vertex, target: Vertex, weight: float) -> Path:
        """Add a path from ``source`` to ``target`` and return it."""
        path = Path(target, float(weight))
        source.paths.append(path)
        return path

    def del_vertex(self, vertex: Vertex) -> None:
        """Remove ``vertex``, its outgoing paths and every path leading to it."""
        for node in self.vertices.nodes():
            if node.value is vertex:
                self.vertices.remove(node)
                break
        else:
            raise ValueError("vertex is not in this graph")
        while vertex.paths:
            vertex.paths.pop()
        for other in self.vertices:
            for node in other.paths.nodes():
                if node.value.to is vertex:
                    other.paths.remove(node)

    def del_path(self, source: Vertex, target: Vertex) -> Optional[Path]:
        """Remove the first path of ``source`` matching ``target``; return it or None."""
        node = source.paths.search(target.vertex_id, self.match_path)
        if node is None:
            return None
        return source.paths.remove(node)

    def get_vertex(self, vertex_id: Any) -> Optional[Vertex]:
        """Return the vertex matching ``vertex_id``, or None."""
        node = self.vertices.search(vertex_id, self.match_vertex)
        return None if node is None else node.value

    def get_path(self, source: Vertex, target_id: Any) -> Optional[Path]:
        """Return the first path of ``source`` matching ``target_id``, or None."""
        node = source.paths.search(target_id, self.match_path)
        return None if node is None else node.value

    def paths_matrix(self) -> PathMatrix:
        """Index the vertices and return the sparse matrix of path weights.

        A later path between the same two vertices overwrites an earlier one.
        """
        self.index_vertices()
        matrix: PathMatrix = {}
        for vertex in self.vertices:
            for path in vertex.paths:
                matrix[(vertex.index, path.to.index)] = path.weight
        return matrix

    def connect_vertexes(self, matrix: Mapping[tuple[int, int], float]) -> None:
        """Add a path for every entry of ``matrix``, in row-then-column order.

        Indices refer to the current order of the vertices.
        """
        ordered = list(self.vertices)
        size = len(ordered)
        entries = sorted(matrix.items())
        for (row, col), _ in entries:
            if not (0 <= row < size and 0 <= col < size):
                raise IndexError(
                    f"matrix entry ({row}, {col}) outside a {size}x{size} graph"
                )
        for (row, col), weight in entries:
            self.add_path(ordered[row], ordered[col], weight)

    def reverse(self) -> "Graph":
        """Return a new graph with the same vertices and every path reversed."""
        reversed_graph = Graph(self.match_vertex, self.match_path)
        for vertex in self.vertices:
            reversed_graph.add_vertex(vertex.vertex_id)
        transposed = {(col, row): w for (row, col), w in self.paths_matrix().items()}
        reversed_graph.connect_vertexes(transposed)
        return reversed_graph

    def initialize_exploring(self, factory: Callable[[], Any]) -> None:
        """Give every vertex fresh exploring data made by ``factory()``."""
        for vertex in self.vertices:
            vertex.exploring = factory()

    def index_vertices(self) -> None:
        """Number the vertices 0, 1, ... in their current order."""
        for index, vertex in enumerate(self.vertices):
            vertex.index = index