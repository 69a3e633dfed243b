"""
The interactive proof tableau: an immutable, path-addressed binary tree.

Each node holds an ordered tuple of formulas, the formula indices already
expanded on its branch, a closed flag, and optionally two children. Nodes
are addressed by paths over {"L", "R"} from the root ("" is the root); a
single formula slot is addressed by a FormulaIndex (path, position).

Every command returns a new Tableau. Only the spine from the root to the
changed node is rebuilt; all other subtrees are shared with the previous
value, which remains valid. That is what lets a UI keep the tableau for a
formula and the tableau for its negation side by side.

Closure bookkeeping:
    - closing a node closes its whole subtree
    - a parent closes automatically once both its children are closed
    - nothing ever reopens a closed node
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .errors import (
    IndexOutOfBoundsError, InvalidPathError, TargetNotLeafError,
    AlreadyAppliedError, NotBotError, NotContradictionError,
    NotSameBranchError,
)
from .formula import Formula, Bot, reduce, is_contradiction_pair


BRANCH_MARKERS = ("L", "R")


def check_path(path: str) -> str:
    """Raise InvalidPathError unless path is a string over {L, R}."""
    for ch in path:
        if ch not in BRANCH_MARKERS:
            raise InvalidPathError(f"invalid tableau index {path!r}")
    return path


def ancestors(path: str) -> list:
    """All proper prefixes of path, nearest first: "LR" -> ["L", ""]."""
    check_path(path)
    return [path[:i] for i in range(len(path) - 1, -1, -1)]


def on_same_branch(path1: str, path2: str) -> bool:
    """Two nodes share a branch when one path is a prefix of the other."""
    return path1.startswith(path2) or path2.startswith(path1)


@dataclass(frozen=True)
class Tableau:
    """
    One node of the tableau, and through its children the whole subtree.

    formulas:  formula slots in insertion order
    applied:   FormulaIndex tuples already reduced on this branch
    is_closed: True once the branch has been shown contradictory
    children:  (left, right) or None for a leaf
    """
    formulas: tuple = ()
    applied: tuple = ()
    is_closed: bool = False
    children: Optional[tuple] = None

    @classmethod
    def initial(cls, formula: Formula) -> "Tableau":
        """A single open root holding one formula."""
        return cls(formulas=(formula,))

    # ── Reads ────────────────────────────────────────────────────────────────

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    @property
    def is_proved(self) -> bool:
        """The root is closed: every branch is contradictory."""
        return self.is_closed

    @property
    def left(self) -> "Tableau":
        return self.children[0]

    @property
    def right(self) -> "Tableau":
        return self.children[1]

    def tableau_at(self, path: str) -> "Tableau":
        check_path(path)
        node = self
        for depth, ch in enumerate(path):
            if node.children is None:
                raise IndexOutOfBoundsError(
                    f"tableau index {path!r} runs past a leaf at {path[:depth]!r}"
                )
            node = node.children[BRANCH_MARKERS.index(ch)]
        return node

    def formula_at(self, index: tuple) -> Formula:
        path, position = index
        node = self.tableau_at(path)
        if not 0 <= position < len(node.formulas):
            raise IndexOutOfBoundsError(
                f"no formula at position {position} of node {path!r}"
            )
        return node.formulas[position]

    def leaves(self, prefix: str = "") -> list:
        """(path, node) for every leaf below this node, left to right."""
        if self.children is None:
            return [(prefix, self)]
        return (self.left.leaves(prefix + "L") +
                self.right.leaves(prefix + "R"))

    def open_leaves(self) -> list:
        return [path for path, node in self.leaves() if not node.is_closed]

    def iter_formulas(self, prefix: str = ""):
        """Yield ((path, position), formula) for every slot, pre-order."""
        for i, f in enumerate(self.formulas):
            yield (prefix, i), f
        if self.children is not None:
            yield from self.left.iter_formulas(prefix + "L")
            yield from self.right.iter_formulas(prefix + "R")

    def branch(self, path: str) -> list:
        """
        Every formula on the branch from the root down to path, root first,
        as ((path, position), formula) pairs.
        """
        self.tableau_at(path)
        out = []
        for p in reversed(ancestors(path)):
            out.extend(((p, i), f) for i, f in enumerate(self.tableau_at(p).formulas))
        out.extend(((path, i), f) for i, f in enumerate(self.tableau_at(path).formulas))
        return out

    def applicable_branches(self, index: tuple) -> list:
        """
        Paths of the open leaves the formula at index may still be reduced
        on: at or below the formula's own node, and not yet applied there.
        """
        index = tuple(index)
        self.formula_at(index)
        path = index[0]
        return [
            leaf_path for leaf_path, leaf in self.leaves()
            if not leaf.is_closed
            and leaf_path.startswith(path)
            and index not in leaf.applied
        ]

    def is_formula_fully_applied(self, index: tuple) -> bool:
        return not self.applicable_branches(index)

    def ancestors(self, path: str) -> list:
        return ancestors(path)

    def descendants(self, path: str) -> list:
        """Paths of every node strictly below path, pre-order, left first."""
        out = []

        def walk(node, current):
            if node.children is None:
                return
            for marker, child in zip(BRANCH_MARKERS, node.children):
                out.append(current + marker)
                walk(child, current + marker)

        walk(self.tableau_at(path), path)
        return out

    # ── Copy-on-write ────────────────────────────────────────────────────────

    def _update(self, path: str, updater: Callable) -> "Tableau":
        """Rebuild the spine down to path, replacing that node by updater(node)."""
        if path == "":
            return updater(self)
        if self.children is None:
            raise IndexOutOfBoundsError(f"tableau index {path!r} runs past a leaf")
        ch, rest = path[0], path[1:]
        if ch == "L":
            children = (self.left._update(rest, updater), self.right)
        elif ch == "R":
            children = (self.left, self.right._update(rest, updater))
        else:
            raise InvalidPathError(f"invalid tableau index {path!r}")
        return Tableau(self.formulas, self.applied, self.is_closed, children)

    # ── Commands ─────────────────────────────────────────────────────────────

    def reduce_formula(self, index: tuple, target: str) -> "Tableau":
        """
        Expand the formula at index onto the leaf at target.

        Conjunctive results are appended to the leaf. Disjunctive results
        give the leaf two children holding one result each. Either way the
        index is recorded as applied on the resulting branch(es).
        """
        index = tuple(index)
        formula = self.formula_at(index)
        check_path(target)
        if not target.startswith(index[0]):
            raise NotSameBranchError(
                f"target {target!r} is not on the branch of {index[0]!r}"
            )

        def expand(leaf):
            if leaf.children is not None:
                raise TargetNotLeafError(
                    f"tableau index {target!r} must refer to a leaf"
                )
            if index in leaf.applied:
                raise AlreadyAppliedError(
                    f"formula {index} has already been applied on branch {target!r}"
                )
            result = reduce(formula)
            applied = leaf.applied + (index,)
            if result.is_conjunctive:
                return Tableau(leaf.formulas + result.formulas, applied,
                               leaf.is_closed)
            left, right = (Tableau((f,), applied, leaf.is_closed)
                           for f in result.formulas)
            return Tableau(leaf.formulas, leaf.applied, leaf.is_closed,
                           (left, right))

        return self._update(target, expand)

    def close_branch_with_bot(self, index: tuple) -> "Tableau":
        index = tuple(index)
        if not isinstance(self.formula_at(index), Bot):
            raise NotBotError(f"formula at {index} is not bot")
        return self._close_branch(index[0])

    def close_branch_with_contradiction(self, index1: tuple, index2: tuple) -> "Tableau":
        """
        Close the branch shared by two contradictory formulas. The branch
        closed is the one of the deeper index, since only from there down
        are both formulas in force.
        """
        index1, index2 = tuple(index1), tuple(index2)
        path1, path2 = check_path(index1[0]), check_path(index2[0])
        if not on_same_branch(path1, path2):
            raise NotSameBranchError(
                f"indices {index1} and {index2} are not within the same branch"
            )
        f1 = self.formula_at(index1)
        f2 = self.formula_at(index2)
        if not is_contradiction_pair(f1, f2):
            raise NotContradictionError(f"{f1} and {f2} are not a contradiction")
        deeper = path1 if len(path1) >= len(path2) else path2
        return self._close_branch(deeper)

    def _close_branch(self, path: str) -> "Tableau":
        t = self._update(path, _closed_subtree)
        for p in ancestors(path):
            node = t.tableau_at(p)
            if not (node.left.is_closed and node.right.is_closed):
                break
            t = t._update(p, lambda n: Tableau(n.formulas, n.applied, True, n.children))
        return t


def _closed_subtree(node: Tableau) -> Tableau:
    """node and everything below it, closed."""
    if node.is_closed:
        return node
    children = None
    if node.children is not None:
        children = tuple(_closed_subtree(c) for c in node.children)
    return Tableau(node.formulas, node.applied, True, children)


def initial_tableau(formula: Formula) -> Tableau:
    return Tableau.initial(formula)
