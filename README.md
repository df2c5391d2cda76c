# contestlib

Classic algorithms and data structures written in plain Python, with no
third-party dependencies. It covers integer computational geometry, graph
algorithms, number theory, polynomial multiplication, linear algebra,
string processing and a few general-purpose search helpers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `contestlib.geometry` | integer point arithmetic (`dot`, `cross`, `sign`, `dist2`, `signed_area`, `ccw`), `convex_hull`, `calipers` (farthest pair), `point_in_polygon`, `point_in_convex_polygon`, `quadrant_id`, `polar_sort`, `polygon_area2`, `segments_intersect`, `segment_intersection` with `IntersectionKind` |
| `contestlib.convex_hull_trick` | `MonotoneCHT` for monotone slopes and queries, `LineContainer` for lines and queries in any order (both answer maximum queries) |
| `contestlib.segment_tree` | `SegmentTree` (point set, range sum) and `LazySegmentTree` (range add, range sum) |
| `contestlib.persistent_segment_tree` | `PersistentSegmentTree`: versioned multiset with k-th smallest queries between two versions |
| `contestlib.strings` | `PolynomialHash`, `failure_function`, `kmp_search`, `manacher`, `suffix_array`, `z_function` |
| `contestlib.number_theory` | `floor_div`, `ceil_div`, `gcd`, `lcm`, `ext_gcd`, `crt_pair`, `crt`, `pow_mod`, `is_prime_trial`, `factorize_trial`, `SmallestPrimeFactorSieve`, `linear_sieve` returning `SieveTables`, `Lucas` |
| `contestlib.primality` | `miller_rabin`, `is_prime`, `pollard_rho`, `factorize` |
| `contestlib.convolution` | `fft`, `multiply`, `multiply_mod` |
| `contestlib.matrix` | `gauss` returning a `GaussResult` (reduced row echelon form, rank, determinant, inverse) |
| `contestlib.search` | `last_true`, `first_true`, `ternary_search_min`, `longest_increasing_subsequence`, `compress_coordinates`, `next_bit_permutation`, `count_digit` |
| `contestlib.shortest_paths` | `bellman_ford` (raises `NegativeCycleError`), `dijkstra`, `dijkstra_path`, `floyd_warshall` |
| `contestlib.graph_basics` | `dfs_order`, `bfs_order`, `DisjointSet`, `kruskal`, `topological_sort`, `strongly_connected_components` |
| `contestlib.biconnected` | `BiconnectedComponents`: cut vertices, bridges, vertex-biconnected components |
| `contestlib.flow` | `Dinic` (maximum flow, minimum cut) and `MinCostFlow` |
| `contestlib.matching` | `HopcroftKarp`: maximum bipartite matching and minimum vertex cover |
| `contestlib.trees` | `LowestCommonAncestor` (binary lifting) and `HeavyLightDecomposition` (point set, path sum) |

## Examples

String matching and palindromes:

```python
from contestlib.strings import kmp_search, manacher

kmp_search("ABABCAB", "AB")   # [0, 2, 5]
kmp_search("AAAA", "AA")      # [0, 1, 2]
manacher("abaaba")            # [0, 1, 0, 3, 0, 1, 6, 1, 0, 3, 0, 1, 0]
```

Number theory:

```python
from contestlib.number_theory import ext_gcd, factorize_trial, is_prime_trial

is_prime_trial(2)     # True
is_prime_trial(4)     # False
factorize_trial(72)   # [(2, 3), (3, 2)]
g, x, y = ext_gcd(30, 18)   # 30*x + 18*y == g == 6
```

Large numbers go through Miller–Rabin (deterministic below 2**64) and
Pollard's rho:

```python
from contestlib.primality import is_prime, factorize

is_prime(1_000_000_007)          # True
factorize(600851475143)          # (prime, exponent) pairs, not sorted
```

Geometry works on integer points given as `(x, y)` tuples:

```python
from contestlib.geometry import convex_hull, polygon_area2

square = [(0, 0), (2, 0), (2, 2), (0, 2), (1, 1)]
hull = convex_hull(square)       # [(0, 0), (2, 0), (2, 2), (0, 2)]
polygon_area2(hull)              # twice the area: 8
```

Graphs:

```python
from contestlib.shortest_paths import dijkstra_path
from contestlib.flow import Dinic

edges = [(0, 1, 4), (0, 2, 1), (2, 1, 1)]
dijkstra_path(3, edges, 0, 1)    # [0, 2, 1]

net = Dinic(3)
net.add_edge(0, 1, 3)
net.add_edge(1, 2, 2)
net.maximum_flow(0, 2)           # 2
```

General helpers:

```python
from contestlib.search import compress_coordinates, longest_increasing_subsequence

compress_coordinates([50, 31, 24, 10, 46, 10])            # [4, 2, 1, 0, 3, 0]
longest_increasing_subsequence([10, 20, 10, 30, 20, 50])  # [10, 20, 30, 50]
```

## Notes

- Geometry predicates use exact integer arithmetic; only
  `segment_intersection` returns floating-point coordinates, together with
  an `IntersectionKind` (`NONE`, `POINT` or `OVERLAP`).
- Every graph and tree helper numbers vertices from 0 to n-1.
- Shortest-path functions report unreachable vertices as `math.inf`.
  `bellman_ford` raises `NegativeCycleError` (a `ValueError`) when a
  negative cycle is reachable from the source; `dijkstra` rejects negative
  weights with `ValueError`.
- `gauss` works on integer matrices with exact `Fraction` arithmetic and on
  floats with a small tolerance; the inverse is `None` for a singular matrix.
- `MonotoneCHT` expects slopes added in non-decreasing order and queries in
  non-decreasing x; `LineContainer` has no such restriction.

## What it does not do

This is a library only: it installs no command-line program, reads no
input files and keeps no state beyond the objects you create.