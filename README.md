# algonotes

Classic algorithms as plain, importable Python functions: graph traversal
and shortest paths, tree queries, grid searches, binary search, array
techniques, number theory, bit tricks and backtracking. It has no runtime
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algonotes.graphs`

Vertices are numbered `1..n`; edges are `(u, v)` pairs, or `(u, v, weight)`
triples for the shortest-path functions.

- `adjacency_list(n, edges)`: undirected adjacency lists as a dict, in edge order.
- `adjacency_matrix(n, edges)`: an `(n+1) x (n+1)` 0/1 matrix; row and
  column 0 are included, so vertex 0 is accepted here.
- `bfs(adjacency, source)`: visiting order and a dict of levels of the reached vertices.
- `dfs_order(adjacency, source)`: the order a depth-first search enters vertices.
- `count_connected_components(n, edges)`
- `count_cyclic_components(n, edges)`: components that contain a cycle;
  self-loops and parallel edges count as cycles.
- `bipartition(n, edges)`: two lists of vertices, the lowest vertex of each
  component on the first side; raises `NotBipartiteError` (a `ValueError`)
  on an odd cycle.
- `dijkstra(n, edges, source)`: distances along directed edges; unreachable
  vertices map to `None`; negative weights raise `ValueError`.
- `floyd_warshall(n, edges)`: all-pairs distances along directed edges as a
  nested dict, `None` where unreachable; a later edge between the same pair
  replaces an earlier one.

### `algonotes.trees`

- `depths_and_heights(n, edges, root=1)`
- `tree_diameter(n, edges)`: edges on the longest path.
- `max_split_product(n, edges, values)`: the best product of the two part
  sums after removing one edge, each product taken modulo `10**9 + 7`.
- `lowest_common_ancestor(n, edges, x, y, root=1)`
- `subtree_stats(n, edges, root=1)`: for each vertex, the sum of the labels
  in its subtree and how many of them are even.

### `algonotes.grids`

- `flood_fill(image, sr, sc, new_color)`: returns a recoloured copy (4-way).
- `spread_time(grid)`: steps for the largest value to reach every cell, moving 8-way.
- `parse_square(square)`: `"e4"` to zero-based `(4, 3)`.
- `knight_distance(source, dest)`: fewest knight moves on an 8x8 board.

### `algonotes.searching`

- `lower_bound(values, x)`, `upper_bound(values, x)` on sorted sequences.
- `find_position(values, target)`: index of the first `target` in
  `sorted(values)`, or `None`.
- `pair_with_sum(values, target)`: two-pointer search on sorted values;
  an index pair or `None`.

### `algonotes.arrays`

- `max_window_sum(values, k)`
- `max_later_window_sum(values, k)`: as above but skipping the window that
  starts at index 0; needs more than `k` values.
- `prefix_sums(values)` (with a leading 0) and `range_sum(prefix, left, right)`
  (1-based, inclusive).
- `next_greater_elements(values)`: the next strictly greater value, or `None`.
- `longest_common_prefix(strings)`

### `algonotes.number_theory`

- `gcd(a, b)`, `lcm(a, b)` (both zero raises `ValueError`).
- `mod_pow(base, exponent, modulus=10**9 + 7)`
- `tower_mod_pow(a, b, c)`: `a ** (b ** c) % (10**9 + 7)` with the exponent
  reduced modulo `10**9 + 6`; exact when `a` is not a multiple of the modulus.
- `sieve(limit)`: a list of booleans for `0..limit`.
- `primes_up_to(n)`

### `algonotes.bits`

`is_odd`, `is_power_of_two`, `is_bit_set`, `set_bit`, `clear_bit`,
`divide_by_power_of_two`, `multiply_by_power_of_two`, `mod_power_of_two`,
`to_binary(n, width=11)`, `xor_swap`, and `to_lower` / `to_upper`, which flip
the case bit of ASCII letters and pass other characters through. Negative bit
positions or widths raise `ValueError`.

### `algonotes.backtracking`

- `balanced_parentheses(n)`: every balanced string of `n` pairs.
- `subsets(values)`: all subsets, each element first left out, then taken.

## Example

```python
from algonotes.graphs import adjacency_list, bfs, dijkstra
from algonotes.grids import knight_distance
from algonotes.number_theory import primes_up_to, mod_pow
from algonotes.backtracking import balanced_parentheses

graph = adjacency_list(4, [(1, 2), (1, 3), (2, 4)])
order, levels = bfs(graph, 1)          # [1, 2, 3, 4], {1: 0, 2: 1, 3: 1, 4: 2}

dijkstra(3, [(1, 2, 5), (2, 3, 1), (1, 3, 10)], 1)   # {1: 0, 2: 5, 3: 6}

knight_distance("a1", "h8")
primes_up_to(20)
mod_pow(2, 10, 1_000_000_007)
balanced_parentheses(3)
```

## What it does not do

The package is a library only. It installs no command and reads no input
from standard input or files; build the vertex counts, edge lists, grids and
sequences in Python and pass them to the functions.