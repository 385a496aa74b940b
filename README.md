# boringkit

Plain data structures and graph algorithms with no dependencies, written to be easy to read.

Comparison functions throughout the package are three-way. They return `1` when the first argument is greater, `-1` when it is smaller, and `0` when the two are equal. The matching functions used by lists and graphs return `0` when they find a match.

## What is inside

- `boringkit.sorting` provides the following, all working in place on mutable sequences:
  - `three_way`
  - `quick_sort`
  - `heap_sort`
  - `build_max_heap`
  - `max_heapify`
  - `wring`, which removes runs of adjacent equal items and returns how many it removed.
- `boringkit.linked_list` provides `LinkedList`, a doubly linked list built around a sentinel node. Its nodes are `ListNode` objects. It supports:
  - node-level `insert_before`, `remove`, `successor` and `predecessor`
  - `append`, `appendleft`, `pop` and `popleft`
  - `search`, `sort` (quick sort) and `wring`
- `boringkit.vector` provides `Vector`, a mutable sequence.
  - Its `capacity` grows in chunks of 128.
  - `search` returns an index or `None`.
  - `sort` uses heap sort.
  - It also has `wring`.
- `boringkit.hashmap` provides `HashMap`, a chained hash map.
  - Entries that share a slot sit next to each other in one linked list.
  - It has `set` (with optional `setup` and `conflict_fix` callbacks), `search`, `remove`, `pop`, `first` and `last`.
- `boringkit.rb_tree` provides `RBTree`, a red-black tree.
  - It tracks its first and last nodes, so `first()` and `last()` need no walk.
  - It also has `set`, `search`, `remove`, `successor` and `predecessor`.
  - `black_height()` checks the tree's invariants.
- `boringkit.entity` provides:
  - `Entity`, a list of values split at `value_index` into key fields and value fields
  - the comparators `cmp_int` and `cmp_float`
- `boringkit.maps` provides maps and sets. Keys made of a single part are used bare; keys with several parts are used as tuples.
  - `TreeMap` and `HashedMap` map keys of one or more parts to a value, through `set`, `get`, `has` and `delete`.
  - `TreeSet` and `HashedSet` are the matching sets, with `add`, `has`, `get`, `delete`, `union` and `intersects`.
- `boringkit.queues` provides:
  - `Queue`, a FIFO queue with `offer` and `poll`
  - `MaxQueue`, a priority queue with `push` and `extract`
  - `EntityList`, a linked list of entities with `add`, `find` and `remove`
- `boringkit.graph` provides `Graph`, a directed weighted graph stored as adjacency lists of `Vertex` and `Path`.
  - `paths_matrix()` returns a sparse `{(row, col): weight}` dictionary.
  - `connect_vertexes(matrix)` adds a path for each entry of such a dictionary.
  - `reverse()` returns a new graph with every path turned round.
- `boringkit.ud_graph` provides `UDGraph`, an undirected graph of `UVertex` and `UEdge`.
- `boringkit.graph_search` provides the following graph algorithms. Results are stored on each vertex's `exploring` attribute, using `BfsInfo`, `DfsInfo`, `PrimInfo` or `RelaxInfo`.
  - `bfs`
  - `dfs`
  - `bfs_path`
  - `topological_sort`
  - `strongly_connected_component_graph`
  - `components`
  - `mst_kruskal`
  - `mst_prim`
  - `relax`
  - `bellman_ford`
  - `dijkstra`

Errors are raised as exceptions:

- a missing key raises `KeyError`
- popping from an empty container raises `IndexError`
- a node from a different container raises `ValueError`
- reading search results before the search has run raises `ValueError`

## Installing

```
pip install .
```

## Examples

Sorting with a three-way comparison:

```python
from boringkit.sorting import heap_sort, three_way

items = [5, 1, 4, 2]
heap_sort(items, three_way)
assert items == [1, 2, 4, 5]
```

A map whose key has two parts:

```python
from boringkit.maps import TreeMap

m = TreeMap()
m.set(1, 2, "value")        # key (1, 2) -> "value"
assert m.get(1, 2) == "value"
assert m.has(1, 2)
assert m.delete(1, 2) == "value"
assert len(m) == 0
```

A priority queue:

```python
from boringkit.queues import MaxQueue
from boringkit.sorting import three_way

q = MaxQueue(three_way, [3, 9, 1])
assert q.extract() == 9
```

Shortest paths:

```python
from boringkit.graph import Graph
from boringkit.graph_search import dijkstra

g = Graph()
a, b, c = g.add_vertex("a"), g.add_vertex("b"), g.add_vertex("c")
g.add_path(a, b, 1.0)
g.add_path(b, c, 2.0)
dijkstra(g, a)
assert c.exploring.distance == 3.0
```

## What it does not do

Everything in this package lives in memory. It has no command-line tool. Nothing is saved to disk. There is no separate matrix type: a graph's adjacency matrix is a plain dictionary.

## Running the tests

```
pip install .[test]
pytest
```