"""Traversals, orderings, spanning trees and shortest paths over graphs.

Every search stores its per-vertex results in ``vertex.exploring``; the
functions that read them back raise ValueError when the matching search has
not been run first.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

from .graph import Graph, Vertex
from .queues import MaxQueue, Queue
from .sorting import three_way
from .ud_graph import UDGraph, UEdge, UVertex

DISTANCE_MAX = 9999999.99
"""Distance and key given to vertices not reached yet."""


class Color(enum.IntEnum):
    """Visiting state of a vertex during a traversal."""

    WHITE = 0
    GRAY = 1
    BLACK = 2


@dataclass
class BfsInfo:
    """Breadth-first search results for one vertex."""

    distance: int = -1
    color: Color = Color.WHITE
    pi: Optional[Vertex] = field(default=None, repr=False)


@dataclass
class DfsInfo:
    """Depth-first search results for one vertex."""

    d_time: int = -1
    f_time: int = -1
    component_id: int = -1
    color: Color = Color.WHITE
    pi: Optional[Vertex] = field(default=None, repr=False)


@dataclass
class PrimInfo:
    """Prim's algorithm state for one vertex."""

    pi: Optional[Vertex] = field(default=None, repr=False)
    key: float = DISTANCE_MAX
    in_queue: bool = True


@dataclass
class RelaxInfo:
    """Shortest-path estimate for one vertex."""

    pi: Optional[Vertex] = field(default=None, repr=False)
    distance: float = DISTANCE_MAX


def _require_member(graph: Graph, vertex: Vertex) -> None:
    if not any(candidate is vertex for candidate in graph):
        raise ValueError(f"vertex {vertex.vertex_id!r} is not in this graph")


def _info(vertex: Vertex, kind: type) -> Any:
    info = vertex.exploring
    if not isinstance(info, kind):
        raise ValueError(
            f"vertex {vertex.vertex_id!r} has no {kind.__name__}; "
            "run the matching search first"
        )
    return info


def bfs(graph: Graph, start: Vertex) -> None:
    """Breadth-first search from ``start``, filling each vertex's BfsInfo."""
    _require_member(graph, start)
    graph.initialize_exploring(BfsInfo)
    info = start.exploring
    info.color = Color.GRAY
    info.distance = 0
    info.pi = None

    queue = Queue([start])
    while queue:
        u = queue.poll()
        u_info = u.exploring
        for path in u.paths:
            v_info = _info(path.to, BfsInfo)
            if v_info.color is Color.WHITE:
                v_info.color = Color.GRAY
                v_info.distance = u_info.distance + 1
                v_info.pi = u
                queue.offer(path.to)
        u_info.color = Color.BLACK


def _dfs_visit(root: Vertex, clock: int) -> int:
    info = root.exploring
    info.color = Color.GRAY
    clock += 1
    info.d_time = clock
    stack = [(root, iter(root.paths))]
    while stack:
        u, pending = stack[-1]
        for path in pending:
            v = path.to
            v_info = _info(v, DfsInfo)
            if v_info.color is Color.WHITE:
                v_info.pi = u
                v_info.color = Color.GRAY
                clock += 1
                v_info.d_time = clock
                stack.append((v, iter(v.paths)))
                break
        else:
            stack.pop()
            u_info = u.exploring
            u_info.color = Color.BLACK
            clock += 1
            u_info.f_time = clock
    return clock


def dfs(graph: Graph) -> None:
    """Depth-first search over the whole graph in vertex order.

    Discovery and finishing times run from 0 to ``2 * len(graph) - 1``.
    """
    graph.initialize_exploring(DfsInfo)
    clock = -1
    for vertex in graph:
        if vertex.exploring.color is Color.WHITE:
            clock = _dfs_visit(vertex, clock)


def bfs_path(start: Vertex, dest: Vertex) -> list:
    """Return the vertices from ``start`` to ``dest`` along the BFS tree.

    Raises ValueError if ``dest`` was not reached from ``start``.
    """
    path = [dest]
    node = dest
    while node is not start:
        parent = _info(node, BfsInfo).pi
        if parent is None:
            raise ValueError(
                f"no path from {start.vertex_id!r} to {dest.vertex_id!r}"
            )
        path.append(parent)
        node = parent
    path.reverse()
    return path


def topological_sort(graph: Graph) -> None:
    """Order the vertices by decreasing DFS finishing time; run ``dfs`` first."""
    for vertex in graph:
        _info(vertex, DfsInfo)
    graph.vertices.sort(lambda a, b: three_way(b.exploring.f_time, a.exploring.f_time))


def strongly_connected_component_graph(graph: Graph) -> Graph:
    """Return the reversed graph explored so its DFS trees are the SCCs.

    ``graph`` itself is explored and reordered topologically on the way;
    pass the result to :func:`components` to read the components.
    """
    dfs(graph)
    topological_sort(graph)
    reversed_graph = graph.reverse()
    dfs(reversed_graph)
    return reversed_graph


def components(graph: Graph) -> list:
    """Group the vertices by the DFS tree they belong to.

    Each group lists its vertices in discovery order; run ``dfs`` first.
    """
    vertices = list(graph)
    if not vertices:
        return []
    events: list = [None] * (2 * len(vertices))
    for vertex in vertices:
        info = _info(vertex, DfsInfo)
        for moment in (info.d_time, info.f_time):
            if not 0 <= moment < len(events):
                raise ValueError("vertex times are not those of a full dfs")
            events[moment] = vertex
    if any(event is None for event in events):
        raise ValueError("vertex times are not those of a full dfs")

    groups: list = []
    root: Optional[Vertex] = None
    current: list = []
    seen: set = set()
    for vertex in events:
        if root is None:
            root = vertex
            current = [vertex]
            seen = {vertex}
        elif vertex is root:
            groups.append(current)
            root = None
        elif vertex not in seen:
            seen.add(vertex)
            current.append(vertex)
    return groups


def mst_kruskal(graph: UDGraph) -> list:
    """Return the edges of a minimum spanning forest in the order chosen.

    The graph's edge list is left sorted by increasing weight.
    """
    groups: dict = {vertex: [vertex] for vertex in graph.vertices}
    graph.edges.sort(lambda a, b: three_way(a.weight, b.weight))
    tree: list = []
    for edge in graph.edges:
        first_group = groups.setdefault(edge.first, [edge.first])
        second_group = groups.setdefault(edge.second, [edge.second])
        if first_group is second_group:
            continue
        for vertex in second_group:
            groups[vertex] = first_group
        first_group.extend(second_group)
        tree.append(edge)
    return tree


def mst_prim(graph: Graph, start: Vertex) -> list:
    """Grow a minimum spanning tree from ``start`` with Prim's algorithm.

    Each vertex's PrimInfo holds its tree parent and connecting weight.
    Returns the vertices in the order they were taken from the queue.
    """
    _require_member(graph, start)
    graph.initialize_exploring(PrimInfo)
    start.exploring.key = 0.0
    queue = MaxQueue(
        lambda a, b: three_way(b.exploring.key, a.exploring.key), graph.vertices
    )
    order = []
    while queue:
        u = queue.extract()
        u.exploring.in_queue = False
        order.append(u)
        for path in u.paths:
            v_info = _info(path.to, PrimInfo)
            if v_info.in_queue and path.weight < v_info.key:
                v_info.pi = u
                v_info.key = path.weight
    return order


def relax(u: Vertex, v: Vertex, weight: float) -> bool:
    """Shorten ``v``'s distance through ``u`` if that is better; return True if so."""
    u_info = _info(u, RelaxInfo)
    v_info = _info(v, RelaxInfo)
    candidate = u_info.distance + weight
    if v_info.distance > candidate:
        v_info.distance = candidate
        v_info.pi = u
        return True
    return False


def bellman_ford(graph: Graph, start: Vertex) -> bool:
    """Single-source shortest paths allowing negative weights.

    Returns False if a negative cycle is reachable, True otherwise.
    """
    _require_member(graph, start)
    graph.initialize_exploring(RelaxInfo)
    start.exploring.distance = 0.0
    for _ in range(max(len(graph) - 1, 0)):
        for u in graph:
            for path in u.paths:
                relax(u, path.to, path.weight)
    for u in graph:
        for path in u.paths:
            if path.to.exploring.distance > u.exploring.distance + path.weight:
                return False
    return True


def dijkstra(graph: Graph, start: Vertex) -> list:
    """Single-source shortest paths for non-negative weights.

    Returns the vertices in the order their distances were settled.
    """
    _require_member(graph, start)
    graph.initialize_exploring(RelaxInfo)
    start.exploring.distance = 0.0
    queue = MaxQueue(
        lambda a, b: three_way(b.exploring.distance, a.exploring.distance),
        graph.vertices,
    )
    order = []
    while queue:
        u = queue.extract()
        order.append(u)
        for path in u.paths:
            relax(u, path.to, path.weight)
    return order