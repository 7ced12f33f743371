# freelie

Building blocks for exact computations in the free Lie algebra, in plain
Python with no dependencies.

## Modules

- `freelie.commutator`: commutator terms as immutable trees. `Atom` is a
  generator with a coefficient, `Expression` is a bracket `[left, right]`
  with a coefficient; both derive from `CommutatorTerm`. Build them with
  `atom(symbol, coefficient=1)` and `commutator(a, b)`. Terms support
  `degree()`, `is_zero()`, `unit()`, `with_coefficient(c)`, scaling by a
  scalar from either side, negation, and a structural ordering that ignores
  coefficients (`compare` returns -1, 0 or 1; `<`, `>` and friends use it).
  `commutator(a, b)` on values that are not terms computes `a * b - b * a`.
- `freelie.formal`: `FormalIndeterminate(symbols, coefficient=1)`, an ordered
  product of symbols with a coefficient. Multiplying two of them concatenates
  the symbols and multiplies the coefficients; multiplying by a scalar scales.
  `expand(term)` turns a commutator term into its monomials using
  `[X, Y] = XY - YX`; coefficients of nested brackets are applied, while the
  top-level coefficient of a bracket is left to the caller.
- `freelie.bch`: helpers for Baker-Campbell-Hausdorff coefficients:
  `p_adic_expansion(n, p)` (base-`p` digits, least significant first),
  `s_p(n, p)` (their sum), `bch_denominator(n)`,
  `goldberg_coeff_numerator(q, a_first)` (divide by
  `n! * bch_denominator(n)` to get the Goldberg coefficient) and
  `binomial(n, k)`.
- `freelie.rooted_tree`: `RootedTree`, a coloured rooted tree kept in a
  canonical child order, with `graft`, `factorize`, `get_node`, `letters`,
  `degree`, structural equality and hashing; and `GraphPartitionTable`, which
  lists for each tree the pairs of tree indices obtained by cutting one edge,
  appending any auxiliary trees it needs.

Coefficients may be any number type with the usual arithmetic, such as `int`
or `fractions.Fraction`.

## Installation

```
pip install .
```

## Example

```python
from fractions import Fraction
from math import factorial

from freelie.commutator import atom, commutator
from freelie.formal import FormalIndeterminate, expand
from freelie.bch import bch_denominator, binomial, goldberg_coeff_numerator
from freelie.rooted_tree import GraphPartitionTable, RootedTree

a, b = atom("A"), atom("B")
print(commutator(b, a))                 # [B, A]
print(commutator(a, a).is_zero())       # True
print(a.compare(b))                     # -1

for monomial in expand(commutator(a, b)):
    print(monomial)                     # 1 * AB, then -1 * BA

x = FormalIndeterminate(["x"], 2)
y = FormalIndeterminate(["y"], 3)
print(x * y)                            # 6 * xy

print(binomial(30, 15))                 # 155117520
print(bch_denominator(5))               # 6
print(Fraction(goldberg_coeff_numerator([1, 1], True),
               factorial(2) * bch_denominator(2)))   # 1/2

ab = RootedTree("A")
ab.graft(RootedTree("B"))
print(ab.letters())                     # ['A', 'B']
table = GraphPartitionTable([RootedTree("A"), RootedTree("B"), ab])
print(table.partitions(2))              # [(0, 1)]
```

## What the package does not do

It has no routine that brings a commutator term into canonical order by
antisymmetry, none that applies the Jacobi identity, none that writes a
term as a combination of Lyndon basis elements, and no Lie series type with
addition or a bracket. It does not generate Lyndon words or a Lyndon basis,
and it does not assemble a full BCH series: `freelie.bch` supplies the
per-word coefficient pieces only. There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```