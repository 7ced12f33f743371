"""Commutator terms: atoms and nested brackets with scalar coefficients."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


class CommutatorTerm:
    """Base class of an atom or a bracket expression `[left, right]`."""

    coefficient: Any

    def degree(self) -> int:
        """Number of atoms in the term."""
        raise NotImplementedError

    def is_zero(self) -> bool:
        """True when the coefficient is zero."""
        return self.coefficient == 0

    def unit(self) -> CommutatorTerm:
        """The same structure with its top-level coefficient set to one."""
        return self.with_coefficient(1)

    def with_coefficient(self, coefficient: Any) -> CommutatorTerm:
        """A copy of the term carrying the given top-level coefficient."""
        return replace(self, coefficient=coefficient)

    def commutator(self, other: CommutatorTerm) -> Expression:
        """The bracket `[self, other]`.

        Operand coefficients move to the result; the result is zero when
        both operands are equal.
        """
        product = self.coefficient * other.coefficient
        coefficient = product * 0 if self == other else product
        return Expression(self.unit(), other.unit(), coefficient)

    def compare(self, other: CommutatorTerm) -> int:
        """Structural ordering, ignoring coefficients: -1, 0 or 1."""
        if isinstance(self, Atom):
            if isinstance(other, Atom):
                return _cmp(self.symbol, other.symbol)
            result = self.compare(other.left)
            return -1 if result == 0 else result
        if isinstance(other, Atom):
            result = self.left.compare(other)
            return 1 if result == 0 else result
        result = self.left.compare(other.left)
        return self.right.compare(other.right) if result == 0 else result

    def __lt__(self, other: CommutatorTerm) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: CommutatorTerm) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: CommutatorTerm) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: CommutatorTerm) -> bool:
        return self.compare(other) >= 0

    def __mul__(self, scalar: Any) -> CommutatorTerm:
        if isinstance(scalar, CommutatorTerm):
            return NotImplemented
        return self.with_coefficient(self.coefficient * scalar)

    def __rmul__(self, scalar: Any) -> CommutatorTerm:
        if isinstance(scalar, CommutatorTerm):
            return NotImplemented
        return self.with_coefficient(scalar * self.coefficient)

    def __neg__(self) -> CommutatorTerm:
        return self.with_coefficient(-self.coefficient)


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _coefficient_prefix(coefficient: Any) -> str:
    return "" if coefficient == 1 else f"{coefficient} * "


@dataclass(frozen=True)
class Atom(CommutatorTerm):
    """A single generator with a coefficient."""

    symbol: Any
    coefficient: Any = 1

    def degree(self) -> int:
        return 1

    def __str__(self) -> str:
        return f"{_coefficient_prefix(self.coefficient)}{self.symbol}"


@dataclass(frozen=True)
class Expression(CommutatorTerm):
    """A bracket `[left, right]` with a coefficient."""

    left: CommutatorTerm
    right: CommutatorTerm
    coefficient: Any = 1

    def degree(self) -> int:
        return self.left.degree() + self.right.degree()

    def __str__(self) -> str:
        return f"{_coefficient_prefix(self.coefficient)}[{self.left}, {self.right}]"


def atom(symbol: Any, coefficient: Any = 1) -> Atom:
    """An atom for `symbol`, with coefficient one unless given."""
    return Atom(symbol, coefficient)


def commutator(a: Any, b: Any) -> Any:
    """The commutator `[a, b]`.

    For commutator terms this builds a bracket; for any other values it is
    `a * b - b * a`.
    """
    if isinstance(a, CommutatorTerm):
        return a.commutator(b)
    return a * b - b * a