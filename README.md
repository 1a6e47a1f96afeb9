# puzzlekit

Small implementations of classic graph, grid and sequence puzzles, using only
the Python standard library (Python 3.10 or later).

## Installation

    pip install puzzlekit

To run the test suite:

    pip install "puzzlekit[test]"
    pytest

## Modules

### `puzzlekit.grids`

Grids are sequences of rows. None of these functions modify their input.

- `capture_surrounded(board)` — returns a new board (list of lists) in which
  only the `'O'` cells orthogonally connected to an `'O'` on the border stay
  `'O'`; every other cell becomes `'X'`.
- `count_enclaves(grid)` — counts land cells (`1`) that have no orthogonal
  path of land to the border.
- `rotting_time(grid)` — minutes until no fresh orange (`1`) is left, where
  rotten oranges (`2`) spread to orthogonal fresh neighbours each minute;
  `-1` if some fresh orange can never rot.
- `shortest_clear_path(grid)` — number of cells on the shortest 8-directional
  path of zero cells from the top-left to the bottom-right corner, or `-1`.
  Raises `ValueError` for an empty grid.
- `minimum_effort_path(heights)` — the smallest possible largest absolute
  height difference between neighbouring cells on a 4-directional path from
  the top-left to the bottom-right corner. Raises `ValueError` for an empty
  grid.

### `puzzlekit.graphs`

- `ladder_length(begin_word, end_word, word_list)` — number of words in the
  shortest ladder from `begin_word` to `end_word`, changing one letter per
  step and using only words from `word_list`; `0` if there is none.
- `find_redundant_connection(edges)` — the first edge `(a, b)` that joins two
  nodes already connected, or `None` if no edge closes a cycle.
- `is_bipartite(graph)` — whether an undirected graph, given as adjacency
  lists indexed by node, can be two-coloured.
- `WeightedGraph(n, edges=())` — a directed graph on nodes `0..n-1` with
  non-negative costs. Edges are `(from, to, cost)`.
  - `add_edge(edge)` adds one directed edge.
  - `shortest_path(node1, node2)` returns the cheapest total cost, or `-1`
    when `node2` is unreachable; raises `IndexError` for a node outside the
    graph.

### `puzzlekit.sequences`

- `next_greater_elements(nums1, nums2)` — for each value of `nums1`, the first
  larger value after its occurrence in `nums2`, else `-1`.
- `count_matching_subarrays(nums, pattern)` — number of windows of
  `len(pattern) + 1` elements whose successive comparisons follow `pattern`
  (`1` rise, `0` equal, `-1` fall).
- `is_prime(n)` — primality test by trial division.
- `most_frequent_prime(mat)` — the most frequent prime greater than 10 among
  the numbers read from each cell along the eight straight directions of a
  digit grid; ties go to the larger prime, `-1` if there is none.
- `min_operations(nums, k)` — number of merges (remove the two smallest values
  `x <= y`, insert `2 * x + y`) until every value is at least `k`. Raises
  `ValueError` when a single value below `k` is left.

## Example

```python
from puzzlekit.graphs import WeightedGraph, ladder_length

graph = WeightedGraph(4, [[0, 2, 5], [0, 1, 2], [1, 2, 1], [3, 0, 3]])
graph.shortest_path(3, 2)    # 6
graph.shortest_path(0, 3)    # -1
graph.add_edge([1, 3, 4])
graph.shortest_path(0, 3)    # 6

ladder_length("hit", "cog", ["hot", "dot", "dog", "lot", "log", "cog"])  # 5
```

## What it does not do

puzzlekit is a library only: it has no command-line program, and it does not
read puzzles from files or print results. Call the functions from your own
code.