"""Commutator terms, formal indeterminates, BCH coefficient helpers and coloured rooted trees."""

__version__ = "0.1.0"

__all__ = [
    "commutator",
    "formal",
    "bch",
    "rooted_tree",
]