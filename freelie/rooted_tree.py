"""Coloured rooted trees and the edge-partition table built from them."""

from __future__ import annotations

from typing import Any, Iterable, Sequence


class RootedTree:
    """A rooted tree whose nodes carry a colour.

    Children are kept in canonical order, sorted by degree and then by
    colour. Equality and hashing are structural. Do not graft onto a tree
    while it is a key in a dict or a member of a set.
    """

    __slots__ = ("_color", "_children", "_degree")

    def __init__(self, color: Any) -> None:
        self._color = color
        self._children: list[RootedTree] = []
        self._degree = 1

    @property
    def color(self) -> Any:
        """The colour of the root node."""
        return self._color

    @property
    def children(self) -> tuple[RootedTree, ...]:
        """The subtrees below the root, in canonical order."""
        return tuple(self._children)

    @property
    def degree(self) -> int:
        """The number of nodes in the tree."""
        return self._degree

    def copy(self) -> RootedTree:
        """A deep copy of the tree."""
        clone = RootedTree(self._color)
        clone._children = [child.copy() for child in self._children]
        clone._degree = self._degree
        return clone

    def get_node(self, path: Sequence[int]) -> RootedTree:
        """The subtree reached by following child indices from the root."""
        node = self
        for index in path:
            node = node._children[index]
        return node

    def graft(self, tree: RootedTree) -> None:
        """Attach a copy of `tree` as a new child of the root."""
        self._degree += tree._degree
        self._children.append(tree.copy())
        self._canonicalize()

    def factorize(self) -> tuple[RootedTree, RootedTree] | None:
        """Split off the last child of the root.

        Returns `(v, w)` where `w` is the last subtree and `v` is the root
        with the remaining subtrees; None for a single node.
        """
        if self._degree == 1:
            return None
        *rest, last = self._children
        v = RootedTree(self._color)
        for child in rest:
            v.graft(child)
        return v, last.copy()

    def letters(self) -> list[Any]:
        """The colours of all nodes in pre-order."""
        result = [self._color]
        for child in self._children:
            result.extend(child.letters())
        return result

    def _canonicalize(self) -> None:
        for child in self._children:
            child._canonicalize()
        self._children.sort(key=lambda t: (t._degree, t._color))

    def _key(self) -> tuple:
        return (self._color, self._degree, tuple(child._key() for child in self._children))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RootedTree):
            return NotImplemented
        return (
            self._color == other._color
            and self._degree == other._degree
            and self._children == other._children
        )

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"RootedTree(color={self._color!r}, degree={self._degree}, "
            f"children={self._children!r})"
        )


class GraphPartitionTable:
    """Edge partitions of a family of rooted trees.

    For each tree the table lists pairs `(root_part, other_part)` of tree
    indices obtained by cutting one edge. Trees needed for the partitions
    but not in the input are appended after the input trees.
    """

    def __init__(self, trees: Iterable[RootedTree]) -> None:
        self._trees: list[RootedTree] = [tree.copy() for tree in trees]
        self._degree: list[int] = [tree.degree for tree in self._trees]
        index: dict[RootedTree, int] = {}
        for i, tree in enumerate(self._trees):
            index[tree] = i
        self._partitions: list[list[tuple[int, int]]] = [[] for _ in self._trees]

        i = 0
        while i < len(self._trees):
            factors = self._trees[i].factorize()
            if factors is None:
                i += 1
                continue
            v, w = factors
            v_idx = self._lookup(index, v)
            w_idx = self._lookup(index, w)
            parts = self._partitions[i]
            parts.append((v_idx, w_idx))

            for p in range(v.degree - 1):
                root_idx, comp_idx = self._partitions[v_idx][p]
                candidate = self._trees[root_idx].copy()
                candidate.graft(w)
                self._register(index, candidate)
                parts.append((index[candidate], index[self._trees[comp_idx]]))

            for q in range(w.degree - 1):
                root_idx, comp_idx = self._partitions[w_idx][q]
                candidate = v.copy()
                candidate.graft(self._trees[root_idx])
                self._register(index, candidate)
                parts.append((index[candidate], index[self._trees[comp_idx]]))
            i += 1

    @staticmethod
    def _lookup(index: dict[RootedTree, int], tree: RootedTree) -> int:
        try:
            return index[tree]
        except KeyError:
            raise ValueError(f"factor {tree.letters()} is missing from the trees") from None

    def _register(self, index: dict[RootedTree, int], tree: RootedTree) -> None:
        if tree in index:
            return
        self._trees.append(tree)
        self._degree.append(tree.degree)
        index[tree] = len(self._trees) - 1
        self._partitions.append([])

    def partitions(self, i: int) -> list[tuple[int, int]]:
        """The edge partitions of tree `i`."""
        return list(self._partitions[i])

    def degree(self, i: int) -> int:
        """The number of nodes of tree `i`."""
        return self._degree[i]

    def tree(self, i: int) -> RootedTree:
        """Tree number `i`."""
        return self._trees[i]

    def tm_n(self) -> int:
        """The number of trees in the table, auxiliary ones included."""
        return len(self._trees)

    def __repr__(self) -> str:
        return f"GraphPartitionTable(trees={len(self._trees)})"