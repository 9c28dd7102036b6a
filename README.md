# cpsolve

Solvers for five competitive-programming problems. Each command reads the
problem's input from a file named on the command line, or from standard input
when no file is given, and writes the answers to standard output. The package
also has a few reusable helpers: modular and exact integer powers, a modular
inverse, a prime sieve, a disjoint-set union structure and graph reachability.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command             | Function                           | What it answers |
|---------------------|------------------------------------|-----------------|
| `cpsolve-a`         | `problem_a.max_purchases`          | Most purchases from a budget `k` with two item types: a purchase of the first type needs at least `a` left and spends `x`, the second needs `b` and spends `y`. The better of "first type first" and "second type first" is taken. |
| `cpsolve-b`         | `problem_b.can_reach`              | Whether `(x2, y2)` can be reached from `(x1, y1)` with jumps of `a` horizontally and `b` vertically (prints `YES` or `NO`; the board size `w`, `h` is read but does not change the answer). |
| `cpsolve-c`         | `problem_c.max_gold`               | Most gold (`g`) collected on a grid when one square blast, centred on an empty cell (`.`), destroys the gold within distance `k - 1` of it. |
| `cpsolve-d`         | `problem_d.best_length`            | Largest length between 0 and `n` that passes the `feasible` check, found by binary search. |
| `cpsolve-omg-graph` | `omg_graph.group_sizes`            | For each user, the size of the connected group that user belongs to. |

`cpsolve-a` to `cpsolve-d` first read the number of test cases, then each case:

- `cpsolve-a`: `k a b x y`
- `cpsolve-b`: `w h a b` then `x1 y1 x2 y2`
- `cpsolve-c`: `n m k`, then `n` grid rows of `m` characters
- `cpsolve-d`: `n`, then `n` values of `a`, then `n` values of `b`

`cpsolve-omg-graph` reads a single case: `n m`, then `m` groups, each given as a
count followed by that many 1-based user numbers. It prints all sizes on one line.

```
cpsolve-a input.txt
cpsolve-omg-graph < input.txt
```

Input that ends early, and out-of-range values where the functions check them,
raise `ValueError`.

## Library use

```python
from cpsolve.problem_a import max_purchases
from cpsolve.problem_b import can_reach
from cpsolve.problem_c import max_gold
from cpsolve.problem_d import best_length, feasible
from cpsolve.omg_graph import group_sizes
from cpsolve.dsu import DisjointSet
from cpsolve.graph import reachable
from cpsolve.numtheory import powermod, power, modinv, primes_below

max_purchases(10, 3, 4, 2, 1)               # 8
max_gold(["g.g", "...", "g.g"], 1)          # 4
group_sizes(5, [[2, 5, 4], [], [1, 2]])     # [4, 4, 1, 4, 4]

ds = DisjointSet(4)
ds.union(0, 1)              # True
ds.find(1) == ds.find(0)    # True
ds.component_size(1)        # 2

reachable([[1], [2], [], [0]], 0)   # {0, 1, 2}

powermod(2, 10)             # 1024 (modulo 1_000_000_007)
power(3, 4)                 # 81
modinv(3, 7)                # 5
primes_below(20)            # [2, 3, 5, 7, 11, 13, 17, 19]
```

Each command's `main(argv=None)` can also be called straight from Python, with
an optional list holding the input file name.