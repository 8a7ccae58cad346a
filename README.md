# algolab

A small collection of classic data structures and graph algorithms in plain
Python, with no third-party dependencies.

## What is inside

| Module               | Contents                                                                       |
|----------------------|--------------------------------------------------------------------------------|
| `algolab.maxheap`    | `MaxPriorityQueue`, an array-backed binary max-heap of `HeapItem`s             |
| `algolab.minheap`    | `MinPriorityQueue`, an array-backed binary min-heap of `HeapItem`s             |
| `algolab.huffman`    | Huffman coding: `compute_freqs`, `make_tree`, `make_codes`, `compress`, `decompress`, plus `HuffmanNode` and `NodeHeap` |
| `algolab.traversal`  | `UndirectedGraph` with depth-first and breadth-first traversal                 |
| `algolab.weighted`   | `WeightedGraph` with Dijkstra's shortest paths and Prim's spanning tree        |
| `algolab.containers` | `Stack` and `Queue`                                                            |
| `algolab.digraph`    | `Graph` (directed or undirected, weighted) with Graphviz DOT output            |
| `algolab.paths`      | `topological_sort`, `bellman_ford`, `floyd_warshall`                           |
| `algolab.words`      | A chained `HashTable`, the `hash1` hash function and `count_common`            |

Operations on an empty heap, stack or queue raise `IndexError`; vertices out of
range raise `IndexError` in the graph classes.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library usage

### Priority queues

```python
from algolab.maxheap import HeapItem, MaxPriorityQueue

queue = MaxPriorityQueue(2)
for priority in (4, 2, 8, 7):
    queue.insert(HeapItem(priority, priority))
queue.peek_max().priority     # 8
queue.remove_max().priority   # 8
len(queue)                    # 3
```

`algolab.minheap.MinPriorityQueue` works the same way with `peek_min` and
`remove_min`; its `HeapItem` takes `content` first and `priority` second.
Both queues double their `capacity` when an insertion finds them full.

### Huffman coding

```python
from algolab.huffman import compute_freqs, make_tree, make_codes, compress, decompress

freqs = compute_freqs("ana are mere")   # 256 counts, one per byte value
root = make_tree(freqs)
codes = make_codes(root)                # {byte value: "0101..."}

bits = compress("rea", codes)           # a string of '0' and '1' characters
assert decompress(bits, root) == "rea"
```

Text must consist of characters in the byte range 0–255. Characters that do not
occur in the text the tree was built from have no code and are left out when
compressing.

### Graph traversal

```python
from algolab.traversal import UndirectedGraph

graph = UndirectedGraph(6)
for v1, v2 in [(0, 1), (0, 4), (1, 2), (1, 3), (1, 5)]:
    graph.add_edge(v1, v2)

print(graph.dfs(0))   # vertices in depth-first visiting order
print(graph.bfs(0))   # vertices in breadth-first visiting order
print(graph.format())
```

New edges go to the front of each adjacency list, so neighbours are visited
most-recently-added first. `UndirectedGraph.from_text` reads
`"<nodes> <edges>"` followed by that many vertex pairs.

### Shortest paths and sorting

```python
from algolab.digraph import Graph
from algolab.paths import topological_sort, bellman_ford, floyd_warshall

graph = Graph(4, directed=True)
graph.insert_edge(0, 1, 2)
graph.insert_edge(1, 2, 3)
graph.insert_edge(0, 3, 7)

topological_sort(graph)   # every arc u -> v has u before v
bellman_ford(graph, 0)    # distances from vertex 0
floyd_warshall(graph)     # all-pairs distance matrix
print(graph.to_dot())     # Graphviz description
```

Missing arcs count as a cost of `INFINITY` (999999). `Graph.draw(name)` writes
the DOT text to `name` and renders a PNG next to it by piping `dot` into
`neato`; it needs the Graphviz tools installed and returns `None` if they
cannot be run.

### Word hash table

```python
from algolab.words import HashTable, hash1, count_common

table = HashTable(11, hash1)
table.put("apple", 2)
table.exists("apple")   # True
table.get("pear")       # 0 for a missing key
table.delete("apple")

count_common(["a", "b", "a"], ["a", "a", "a", "c"], 11)   # 2
```

## Command-line tools

### `algolab-weighted`

Reads a weighted undirected graph and prints its adjacency lists, the
distances from vertex 0 found by Dijkstra's algorithm and the edges of the
spanning tree found by Prim's algorithm. Without an argument it reads
`../data/graph.in`.

```
algolab-weighted graph.in
```

The input starts with the number of vertices and edges, followed by one
`v1 v2 cost` line per edge:

```
4 5
0 1 4
0 2 1
2 1 2
1 3 1
2 3 5
```

### `algolab-paths`

Runs a fixed check on two bundled test cases. For each case it reads
`test0.in` / `test1.in` from the data directory (`../data` by default), prints
the graph, writes `graph0.dot` / `graph1.dot` in the current directory and
renders them with Graphviz, then prints the topological order, the
Bellman-Ford distances from vertex 0 and the Floyd-Warshall matrix. The first
two are compared with built-in expected values and the matrix with
`test0.ref` / `test1.ref`; each match adds 1.5 to the printed total score.

```
algolab-paths --data-dir path/to/data
algolab-paths --no-draw
```

An input file starts with the vertex count and the graph type (`0`
undirected, anything else directed), then the number of edges and one
`u v cost` line per edge.

### `algolab-words`

Counts the words of the second file that also appear in the first, each
occurrence in the first file matching at most one in the second. The hash
table's contents after reading the first file are printed first.

```
algolab-words 31 first.txt second.txt
```

## What it does not do

`algolab-paths` only runs its two fixed test cases; it does not take an
arbitrary graph file. To run the algorithms on your own graph, build a
`Graph` (for example with `Graph.from_text`) and call the functions in
`algolab.paths` directly.