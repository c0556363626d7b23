# algokit

Plain-Python implementations of a few classic algorithms:

- **0/1 knapsack** by dynamic programming: `algokit.knapsack.knapsack`
- **Breadth-first and depth-first traversal** of an undirected graph. Each traversal returns the
  visit order and the traversal tree: `algokit.traversal.Graph`, `algokit.traversal.TraversalResult`
- **Strassen matrix multiplication** for square integer matrices whose size is a power of two:
  `algokit.matrix.Matrix`, `algokit.matrix.strassen_multiply`
- **Insertion, merge, heap and quick sort** that count element comparisons: `algokit.sorting`.
  A benchmark in `algokit.benchmark` averages those counts over random inputs and writes them
  as CSV.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Library use

```python
from algokit.knapsack import knapsack
from algokit.traversal import Graph
from algokit.matrix import Matrix, strassen_multiply
from algokit.sorting import merge_sort

knapsack(6, [3, 2, 5], [30, 40, 60])        # 100

g = Graph(6)
for u, v in [(0, 1), (0, 2), (1, 3), (1, 4), (2, 4), (3, 5), (4, 5)]:
    g.add_edge(u, v)
result = g.bfs(0)
result.order                                 # visit order as a tuple
result.children(0)                           # children of vertex 0 in the BFS tree
print(result.format_tree("BFS"))

a = Matrix.from_rows([[1, 2], [3, 4]])
b = Matrix.from_rows([[5, 6], [7, 8]])
print(strassen_multiply(a, b))

sorted_result = merge_sort([5, 3, 1, 4])
sorted_result.values                         # [1, 3, 4, 5]
sorted_result.comparisons
```

Notes on behaviour:

- `knapsack(capacity, weights, values)` raises `ValueError` for a negative capacity, a negative
  weight, or weights and values of different lengths.
- `Graph.add_edge` puts each new neighbour at the front of a vertex's list, so
  `Graph.neighbors` reports the most recent neighbour first. `Graph.dfs` uses an explicit stack.
  A vertex's parent in the DFS tree is the first visited vertex that discovered it.
  Vertices out of range raise `ValueError`.
- `TraversalResult.children` lists children highest vertex first. In `parents`, `None` marks
  the start vertex and vertices that were not reached.
- `Matrix(size)` makes a zero matrix and raises `ValueError` unless `size` is a positive power
  of two. Matrices support `+`, `-`, `==`, row indexing (`m[i][j]`), `submatrix` and
  `set_submatrix`. `str()` gives tab-separated rows.
- Each sorting function leaves its input alone. It returns a `SortResult` that holds the sorted
  values and the number of comparisons counted. `random_array(size, rng, upper)` returns random
  integers in `0 .. upper - 1`.
- `run_benchmark(sizes, trials, rng, upper)` yields one `BenchmarkRow` per size, with mean
  comparison counts rounded down. `write_csv(rows, stream)` writes them under the header
  `Size,Insertion,Merge,Heap,Quick`.

## Commands

```
algokit-knapsack
```
Asks on standard input for the number of items, each item's value and weight, and the capacity.
It then prints the best total value. Bad input is reported on standard error with exit status 1.

```
algokit-traversal [bfs|dfs] [--start VERTEX]
```
Runs one traversal (BFS by default) from the given vertex (default 0) on a built-in six-vertex
sample graph. It prints the visit order and the traversal tree as an adjacency list.

```
algokit-strassen [--size N]
```
Builds two sample N×N matrices (default 4; N must be a power of two). A holds 1, 2, 3, …
row by row and B holds the same numbers in reverse. The command prints both matrices and their
product.

```
algokit-sort-benchmark [--output FILE] [--min-size N] [--max-size N] [--step N]
                       [--random-sizes COUNT] [--trials N] [--upper N] [--seed N]
```
Uses sizes from 30 to 1000 in steps of 10 by default, or COUNT random sizes within that range
when `--random-sizes` is given. For each size it averages comparison counts over `--trials`
random arrays (default 10) with values below `--upper` (default 10000). The results go to
`sorting_results.csv` unless `--output` names another file, and the command prints a progress
line per size.

## Running the tests

```
pip install .[test]
pytest
```