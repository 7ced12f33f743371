"""Formal indeterminates: scalar multiples of non-commutative monomials."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from .commutator import Atom, CommutatorTerm, Expression


@dataclass(frozen=True)
class FormalIndeterminate:
    """A product `coefficient * s1 s2 ... sn` of symbols in order."""

    symbols: tuple
    coefficient: Any = 1

    def __init__(self, symbols: Iterable[Any], coefficient: Any = 1) -> None:
        object.__setattr__(self, "symbols", tuple(symbols))
        object.__setattr__(self, "coefficient", coefficient)

    def __mul__(self, other: Any) -> FormalIndeterminate:
        """Concatenate with another indeterminate, or scale by a scalar."""
        if isinstance(other, FormalIndeterminate):
            return FormalIndeterminate(
                self.symbols + other.symbols, self.coefficient * other.coefficient
            )
        return FormalIndeterminate(self.symbols, self.coefficient * other)

    def __rmul__(self, other: Any) -> FormalIndeterminate:
        if isinstance(other, FormalIndeterminate):
            return other.__mul__(self)
        return FormalIndeterminate(self.symbols, other * self.coefficient)

    def __neg__(self) -> FormalIndeterminate:
        return FormalIndeterminate(self.symbols, -self.coefficient)

    def __str__(self) -> str:
        if not self.symbols:
            return f"{self.coefficient}"
        return f"{self.coefficient} * " + "".join(str(s) for s in self.symbols)


def expand(term: CommutatorTerm) -> list[FormalIndeterminate]:
    """Expand a commutator term into monomials, `[X, Y] = XY - YX`.

    Coefficients of nested brackets are applied; the top-level coefficient
    of a bracket is left to the caller, as for an atom it is kept.
    """
    if isinstance(term, Atom):
        return [FormalIndeterminate((term.symbol,), term.coefficient)]
    assert isinstance(term, Expression)
    left = _expand_operand(term.left)
    right = _expand_operand(term.right)
    forward = [l * r for l in left for r in right]
    backward = [-(r * l) for r in right for l in left]
    return forward + backward


def _expand_operand(operand: CommutatorTerm) -> list[FormalIndeterminate]:
    terms = expand(operand)
    if isinstance(operand, Expression):
        return [t * operand.coefficient for t in terms]
    return terms