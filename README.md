# algolab

A collection of classic algorithms for coursework and self-study. Each module can be
imported as a library, and each one also comes with a small command-line program.
The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algolab.subset_sum` | Backtracking sum-of-subsets search: `subsets_with_sum(values, target)` yields each subset as a list; `format_subset` renders it as `{ a b c }`, leaving out zeros |
| `algolab.vertex_cover` | `approximate_vertex_cover(num_vertices, edges)`: greedy matching-based 2-approximation, returns the sorted cover vertices |
| `algolab.growth` | Growth-rate functions (`n_cubed`, `log2_n`, `n_times_2_pow_n`, `ln_n`, `two_pow_log2_n`, `identity`, `two_pow_n`, `n_log2_n`, `sqrt_log2_n`, `factorial`) and a table of their values (`growth_row`, `growth_table`, `write_csv`) |
| `algolab.bellman_ford` | `bellman_ford(num_vertices, edges, source)` over directed `Edge`s; unreachable vertices get `None`; a reachable negative cycle raises `NegativeCycleError` |
| `algolab.fifteen_puzzle` | Best-first branch-and-bound 15-puzzle solver with the Manhattan-distance heuristic: `solve(initial, max_nodes=10000)`, `manhattan_cost`, `is_goal`, `format_board`, `SearchLimitExceeded` |
| `algolab.dijkstra` | An undirected weighted adjacency-list `Graph` (`add_edge`, `neighbours`) and `dijkstra(graph, source)`; unreachable vertices get `None` |
| `algolab.sorting` | `merge_sort`, `quick_sort`, `insertion_sort`, `selection_sort` (each returns a new list), plus `generate_numbers`, `write_numbers`, `read_numbers`, `time_sort` and `benchmark` for timing sorts over growing block sizes |
| `algolab.max_flow` | `ford_fulkerson(capacity, source, sink)`: maximum flow on a capacity matrix with breadth-first augmenting paths |
| `algolab.matrix_chain` | `matrix_chain_order(dims)` returns cost and split tables; `optimal_parenthesization`, `multiply`, `strassen`, `multiply_strassen` (pads to a power of two), `chain_multiply`, `random_dimensions`, `random_binary_matrix`, `save_matrix_csv` |
| `algolab.mst` | `kruskal_mst`, `prim_mst`, `prim_total_weight`, `kruskal_total_weight`, `random_complete_graph`, with `Edge` and a `DisjointSet` (union by rank, path compression) |
| `algolab.rabin_karp` | `rabin_karp(text, pattern, modulus=101)` returns every match position in `str` or `bytes`; `create_hash` and `roll_hash` expose the rolling hash |

Invalid input is reported with exceptions: vertices outside the graph raise
`ValueError`, a negative-weight cycle raises `NegativeCycleError`, a disconnected graph
given to `prim_mst` raises `ValueError`, and a 15-puzzle search whose queue would grow
past `max_nodes` raises `SearchLimitExceeded`.

## Using the library

```python
from algolab.max_flow import ford_fulkerson

capacity = [[0] * 5 for _ in range(5)]
capacity[0][1] = 16
capacity[0][2] = 13
capacity[1][2] = 10
capacity[1][3] = 12
capacity[2][1] = 4
capacity[2][4] = 14

print(ford_fulkerson(capacity, 0, 4))  # 14
```

```python
from algolab.subset_sum import subsets_with_sum, format_subset

for subset in subsets_with_sum([1, 2, 3, 4, 5], 6):
    print(format_subset(subset))
# { 1 2 3 }
# { 1 5 }
# { 2 4 }
```

```python
from algolab.bellman_ford import Edge, NegativeCycleError, bellman_ford

edges = [Edge(0, 1, 4), Edge(1, 2, -2), Edge(0, 2, 5)]
try:
    print(bellman_ford(3, edges, 0))  # [0, 4, 2]
except NegativeCycleError:
    print("Graph contains negative weight cycle")
```

```python
from algolab.mst import Edge, kruskal_mst

edges = [Edge(0, 1, 2), Edge(1, 2, 3), Edge(0, 2, 4)]
print(kruskal_mst(3, edges))  # [Edge(src=0, dest=1, weight=2), Edge(src=1, dest=2, weight=3)]
```

## Command-line programs

Every module has a program of its own:

```
algolab-subset-sum        # prompts for a target, a size and the elements
algolab-vertex-cover      # prompts for vertices and edges
algolab-growth            # prints the growth table for n = 0..100 and writes function_values.csv
algolab-bellman-ford      # menu: single pair, single destination, all pairs
algolab-fifteen-puzzle    # solves the built-in 15-puzzle and prints the path
algolab-dijkstra          # menu: single source, single destination, all pairs
algolab-sorting           # times two sorts over growing blocks and writes sorting_times.csv
algolab-max-flow          # maximum flow on the built-in example network
algolab-matrix-chain      # random chain: costs, splits, parenthesization, timing
algolab-mst               # MST of the built-in graph, or timings on random graphs
algolab-rabin-karp        # times searches over text files and writes results.csv
```

The interactive programs (`subset-sum`, `vertex-cover`, `bellman-ford`, `dijkstra`)
read whitespace-separated integers from standard input, so input can also be piped in
from a file.

Options of the other programs:

- `algolab-growth --output FILE`
- `algolab-sorting --algorithms {merge-quick,insertion-selection} --total N --step N
  --numbers-file FILE --output FILE --seed N`. The random numbers are first written to
  `--numbers-file` (default `random_numbers.txt`) and read back before timing.
- `algolab-matrix-chain --method {regular,strassen} --count N --seed N --output-dir DIR`.
  Each generated matrix is saved as `matrix_<i>.csv` in the output directory.
- `algolab-mst [kruskal|prim|compare] --graphs N --size N --output FILE --seed N`.
  `kruskal` (the default) and `prim` print the tree of the built-in five-vertex graph;
  `compare` times both algorithms on random complete graphs and writes `output.csv`.
- `algolab-rabin-karp --text-dir DIR --pattern-dir DIR --output FILE`.

## Limitations

`algolab-rabin-karp` does not create its input. It expects `text1.txt` to `text10.txt`
in the text directory (default `text_files`) and `pattern10.txt`, `pattern20.txt`, ...
`pattern100.txt` in the pattern directory (default `patterns`), and stops with an error
if any of them is missing.