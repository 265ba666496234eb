# drillbook

This is a collection of small exercises. Each exercise is a module with its own
tests. The topics are number theory, sorting, geometry, exact and
arbitrary-precision arithmetic, and a few classic design patterns. The package
uses only the standard library and needs Python 3.10 or later.

## Installing

```
pip install .
pip install ".[test]"   # adds pytest for running the test suite
```

## Library modules

| Module | Contents |
| --- | --- |
| `drillbook.numtheory` | `remainder` (always non-negative), `gcd_iterative`, `gcd_recursive`, `lcm_iterative`, `lcm_recursive` |
| `drillbook.quicksort` | `quicksort(items, threshold=16)` sorts a mutable sequence in place. It uses median-of-three quicksort and switches to insertion sort for ranges of `threshold` or fewer items. A threshold below 1 raises `ValueError`. |
| `drillbook.rectangle` | `Point`, `Rectangle` (with `from_coords`, `width`, `height`, `is_degenerate`, `square`), `intersect`, `intersection`, `bounding_box` |
| `drillbook.linked_list` | `LinkedList`, a singly linked list with `push_front`, `push_back`, `pop_front`, `pop_back`, `middle`, `clear` and `show` |
| `drillbook.rational` | `Rational`, an immutable fraction kept in lowest terms, and `Rational.parse("1/2")`. `RationalError` is raised for a zero denominator or text that is not a fraction. `equal(x, y, epsilon=1e-6)` compares two floats within a tolerance. |
| `drillbook.mixins` | Operator mixins (`Addable`, `Subtractable`, `Multipliable`, `Dividable`, `Incrementable`, `Decrementable`) that derive operators from in-place ones, and `MixinRational`, a mutable fraction built from them |
| `drillbook.bigint` | `Integer`, an arbitrary-precision signed integer. It accepts an `int` or a decimal string, and `//` and `%` truncate toward zero. Also `isqrt`, `power` and `karatsuba`. |
| `drillbook.ilog2` | `ilog2_int` and `ilog2_float`, the floor of log2 taken from the bits of a 32-bit integer or a single-precision float |
| `drillbook.vector` | `Vector`, a growable array whose capacity doubles as it fills. `clear` keeps the capacity. |
| `drillbook.variadic` | `maximum`, `minimum`, `total` and `average` over any number of floats, and `insert_ints`, which appends only the plain `int` arguments |
| `drillbook.series` | `fibonacci` (limited to signed 32-bit results), and `compute_exp` / `compute_pi`, which sum a series until a term is smaller than epsilon |
| `drillbook.ratio` | `Ratio` arithmetic and `Duration` values measured in units of a ratio |
| `drillbook.quadratic` | `solve(a, b, c)` returns `None`, `AnyNumber()`, a single root, or a pair of roots. Also `is_zero`. |
| `drillbook.charclass` | `classify(ch)` returns a `CharClass` for one character with a code from 32 to 127 |
| `drillbook.stats` | `summarize(numbers, limit=None)` returns a `Summary` of min, max, mean and population standard deviation |
| `drillbook.collatz` | `Collatz` with `seq_len` and `max_len`. Results are remembered in a table of fixed size. |
| `drillbook.shapes` | The `Shape` base class and the `Triangle`, `Square` and `Circle` shapes, each with `perimeter` and `area` |
| `drillbook.ipv4` | `IPv4` with `parse`, `from_int`, `int()`, `next` and `previous`. Stepping wraps around at both ends. |
| `drillbook.game` | `PersonBuilder` and `UnitBuilder`, the `GameObject` composite (`UnitLeaf`, `Squad`), and battle rules (`StandardBattle`, `CriticalBattle`) |
| `drillbook.weasel` | `distance` and `evolve(target, copies=100, mutation=0.05, rng=None)`, a generator that yields each generation until it reaches the target |
| `drillbook.timer` | `Timer`, a stopwatch and context manager with `start`, `stop`, `elapsed` and `average`, plus `calculate` |

A short session:

```python
from drillbook.numtheory import gcd_iterative, lcm_recursive
from drillbook.rational import Rational
from drillbook.bigint import Integer, power
from drillbook.quicksort import quicksort

gcd_iterative(48, 18)          # 6
lcm_recursive(-4, 6)           # 12

half = Rational.parse("1/2")
print(half + half)             # 1/1

print(power(Integer(2), 64))   # 18446744073709551616

data = [5, 3, 9, 1]
quicksort(data)
data                           # [1, 3, 5, 9]
```

## Commands

| Command | What it does |
| --- | --- |
| `drillbook-quadratic [a b c]` | Prints the real roots of a·x² + b·x + c = 0. It prompts for any coefficients not given on the command line. |
| `drillbook-charclass [text]` | Classifies the first non-blank character as a letter, a digit, punctuation or other |
| `drillbook-stats [n x1 ... xn]` | Prints min, max, mean and standard deviation. Without arguments it reads the count and the numbers from standard input. |
| `drillbook-collatz` | Prints the Collatz sequence lengths for 1 to 99 and the longest of them |
| `drillbook-shapes` | Prints the perimeter and area of a sample triangle, square and circle |
| `drillbook-ipv4 [address]` | Reads an IPv4 address and steps it up and back down |
| `drillbook-game` | Builds units, forms them into squads and runs two battles |
| `drillbook-weasel [target]` | Evolves random lower-case text towards the target. The default target is `methinksitislikeaweasel`. |
| `drillbook-timer` | Times a numeric workload once, then five more times, and prints the average of those five runs |

## Limits

These are teaching exercises, and they are kept small on purpose:

- Nothing is saved between runs.
- The commands read only from arguments and standard input.
- The package does not load or call external libraries at run time.

## Running the tests

```
pytest
```