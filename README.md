# algolab

A collection of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `algolab.binheap` | `BinomialHeap`: a binomial min-heap with `decrease_key` and `erase`; `HeapError` |
| `algolab.fibheap` | `FibonacciHeap`: a Fibonacci min-heap with `merge`, `decrease_key` and `erase` |
| `algolab.dsu` | `DisjointSet`: union–find with path compression and union by rank |
| `algolab.graph` | `Graph`: a directed graph with values on nodes and edges; `Node`, `Edge`, `GraphError` |
| `algolab.traversal` | `dfs`, `bfs` and `pseudo_dfs` generators over a `Graph`, and the `Color` enum |
| `algolab.algorithms` | `tarjan` (strongly connected components), `prim` and `kruskal` (minimum spanning forests) |
| `algolab.treap` | `Treap`: a Cartesian tree with `build`, `split`, `merge`, `insert` and `erase` |
| `algolab.prefix` | `prefix_function`: the border lengths of every prefix of a sequence |
| `algolab.aho` | `AhoCorasick`: searching for many patterns in one pass |
| `algolab.ukkonen` | `SuffixTree`: Ukkonen's online suffix-tree construction; `read_text` |
| `algolab.puzzle` | `Puzzle`, `parse_board` and the `algolab-puzzle` command: an iterative-deepening solver for the 15-puzzle |

Both heaps order keys with `<` unless another `less(a, b)` function is
given, and `insert` returns a node handle that `decrease_key` and `erase`
accept. Taking the minimum of an empty heap raises `HeapError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Heaps:

```python
from algolab.fibheap import FibonacciHeap

heap = FibonacciHeap()
for key in (4, 5, 3, 7, 1):
    heap.insert(key)
print(heap.extract_minimum().key)   # 1
```

Graphs, traversals and spanning trees:

```python
from algolab.graph import Graph
from algolab.traversal import dfs
from algolab.algorithms import kruskal, tarjan

graph = Graph()
for node_id in range(1, 5):
    graph.insert_node(node_id)
graph.insert_bi_edge(1, 2, 7)
graph.insert_bi_edge(1, 3, 5)
graph.insert_bi_edge(3, 4, 6)
graph.insert_bi_edge(2, 4, 9)

print([node.id for node in dfs(graph, 1)])
tree = kruskal(graph)        # chosen edges appear in both directions
components = tarjan(graph)   # lists of node ids
```

`prim` returns a tree with one edge per chosen pair, directed from parent to
child. Missing nodes or duplicate nodes and edges raise `GraphError`.

Treaps:

```python
from algolab.treap import Treap

treap = Treap()
treap.build([20, 4, 2, 8, 6, 0])   # keys are positions, priorities the values
print(treap.root().priority)       # 0
print(treap.dump())
```

String search:

```python
from algolab.prefix import prefix_function
from algolab.aho import AhoCorasick
from algolab.ukkonen import SuffixTree

print(prefix_function("abacaba"))   # [0, 0, 1, 0, 1, 2, 3]

automaton = AhoCorasick()
automaton.add_string("ear")
automaton.add_string("Lear")
print(automaton.find_all_patterns("King Lear"))   # {'ear': [6], 'Lear': [5]}

tree = SuffixTree("abracadabra")
print(tree.count("abra"))   # 2
print(tree.find("abra"))    # [0, 7]
```

`SuffixTree.from_file(path)` builds the tree of a file's whole content.

## The 15-puzzle solver

The `algolab-puzzle` command reads a 4×4 board from a file or from standard
input: sixteen numbers, with `0` for the empty cell. It prints `YES` and then
the moves of the empty cell (`l`, `d`, `r`, `u`) when the board can be
solved, or `NO` when it cannot.

```
echo "1 2 3 4 5 6 7 8 9 10 11 12 13 14 0 15" | algolab-puzzle
```

From Python:

```python
from algolab.puzzle import parse_board

puzzle = parse_board("1 2 3 4 5 6 7 8 9 10 11 12 13 14 0 15")
if puzzle.has_solution():
    print(puzzle.solve())   # r
```

`solve` returns `None` for an unsolvable board or when no solution is found
within 50 moves.