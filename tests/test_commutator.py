from fractions import Fraction

import pytest

from freelie.commutator import Atom, Expression, atom, commutator

A, B, C, D = atom("A"), atom("B"), atom("C"), atom("D")


def test_commutators_int():
    assert commutator(1, 2) == 0


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (A, B, Expression(A, B, 1)),
        (B, A, Expression(B, A, 1)),
        (
            Expression(A, B, 2),
            Expression(B, A, 3),
            Expression(Expression(A, B, 1), Expression(B, A, 1), 6),
        ),
    ],
)
def test_commutator_terms(a, b, expected):
    assert commutator(a, b) == expected


def test_commutator_of_equal_terms_is_zero():
    assert commutator(A, A).is_zero()
    ab = commutator(A, B)
    assert commutator(ab, ab).is_zero()


def test_commutator_atom_and_expression_moves_coefficients():
    result = commutator(atom("A", 2), Expression(B, C, 5))
    assert result == Expression(A, Expression(B, C, 1), 10)
    result = commutator(Expression(B, C, 3), atom("A", 4))
    assert result == Expression(Expression(B, C, 1), A, 12)


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (A, B, -1),
        (B, A, 1),
        (A, A, 0),
        (A, Expression(A, B), -1),
        (B, Expression(A, B), 1),
        (Expression(A, B), A, 1),
        (Expression(A, B), B, -1),
    ],
)
def test_commutator_term_ordering(left, right, expected):
    assert left.compare(right) == expected


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (commutator(A, B), commutator(commutator(A, B), B), -1),
        (commutator(commutator(A, B), B), commutator(A, B), 1),
        (commutator(A, B), commutator(A, B), 0),
        (commutator(A, C), commutator(commutator(A, B), B), -1),
    ],
)
def test_commutator_expression_ordering(left, right, expected):
    assert left.compare(right) == expected


def test_ordering_ignores_coefficients_and_supports_sorting():
    assert atom("A", 5).compare(atom("A", -2)) == 0
    terms = [Expression(A, B), B, A]
    assert sorted(terms) == [A, Expression(A, B), B]
    assert A < B and B > A and A <= atom("A", 3)


def test_degree():
    ab = commutator(A, B)
    assert ab.degree() == 2
    assert commutator(ab, C).degree() == 3
    complex_term = commutator(commutator(A, commutator(B, C)), commutator(B, A))
    assert complex_term.degree() == 5


def test_scalar_multiplication_and_negation():
    ab = commutator(A, B)
    assert ab * 3 == Expression(A, B, 3)
    assert 3 * ab == Expression(A, B, 3)
    assert -ab == Expression(A, B, -1)
    assert -atom("A", 2) == atom("A", -2)
    assert 0 * ab == Expression(A, B, 0)


def test_anticommutativity_of_coefficients():
    assert commutator(A, B) == -(-commutator(A, B))
    assert (-commutator(B, A)).coefficient == -1


def test_unit_and_with_coefficient():
    term = Expression(Expression(A, B, 4), C, Fraction(1, 3))
    assert term.unit() == Expression(Expression(A, B, 4), C, 1)
    assert term.with_coefficient(7).coefficient == 7
    assert atom("x", 9).unit() == Atom("x")


def test_is_zero():
    assert Atom("A", 0).is_zero()
    assert not Atom("A", 1).is_zero()
    assert Expression(A, B, 0.0).is_zero()


def test_display():
    assert str(A) == "A"
    assert str(atom("A", 2)) == "2 * A"
    assert str(commutator(A, B)) == "[A, B]"
    assert str(Expression(commutator(A, B), C, -1)) == "-1 * [[A, B], C]"


def test_hashable_and_equality_includes_coefficient():
    assert len({commutator(A, B), Expression(A, B, 1), Expression(A, B, 2)}) == 2
    assert Atom("A") != Expression(A, B)
    assert commutator(C, D) == Expression(C, D)