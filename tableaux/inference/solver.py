"""
Deciding tautologies by exhaustive tableau expansion.

No tree, no paths, no applied-formula bookkeeping: a branch is just a
list of formulas, and a reduced formula is replaced by its expansion so it
is never looked at again. A stack of branches drives a depth-first search:

    pop a branch
    contradictory (A and ~A, or bot)     -> closed, drop it
    no reducible formula left            -> open and saturated: a model
    otherwise reduce the first reducible formula in slot order
        alpha: splice the results in place, push the branch back
        beta:  two copies, one per disjunct in the reduced slot, push both

The order matters for reproducibility: always the first reducible slot,
and the first disjunct's branch is explored first.
"""

from typing import Optional

from ..core.formula import (
    Formula, Bot, Not, Var, reducible, reduce,
    is_contradiction_pair, variables,
)


def has_contradiction(branch: list) -> bool:
    """Does the branch carry bot, or some formula together with its negation?"""
    if any(isinstance(f, Bot) for f in branch):
        return True
    for i in range(len(branch) - 1):
        for j in range(i + 1, len(branch)):
            if is_contradiction_pair(branch[i], branch[j]):
                return True
    return False


def first_reducible(branch: list) -> Optional[int]:
    """Slot of the first reducible formula, or None if the branch is all literals."""
    for i, f in enumerate(branch):
        if reducible(f):
            return i
    return None


def find_open_branch(formulas: list) -> Optional[list]:
    """
    Expand the conjunction of formulas fully. Returns the first open,
    saturated branch found (a list of literals), or None if every branch
    closes.
    """
    stack = [list(formulas)]
    while stack:
        branch = stack.pop()
        if has_contradiction(branch):
            continue
        i = first_reducible(branch)
        if i is None:
            return branch
        result = reduce(branch[i])
        if result.is_conjunctive:
            branch[i:i + 1] = result.formulas
            stack.append(branch)
        else:
            other = list(branch)
            branch[i] = result.formulas[0]
            other[i] = result.formulas[1]
            stack.append(other)
            stack.append(branch)
    return None


def is_tautology(f: Formula) -> bool:
    """Every branch of the tableau for ~f closes."""
    return find_open_branch([Not(f)]) is None


def is_satisfiable(f: Formula) -> bool:
    return find_open_branch([f]) is not None


def countermodel(f: Formula) -> Optional[dict]:
    """
    An assignment making f false, read off an open branch of ~f, or None
    if f is a tautology. Variables the branch leaves unconstrained are
    set to False.
    """
    branch = find_open_branch([Not(f)])
    if branch is None:
        return None
    model = {name: False for name in variables(f)}
    for lit in branch:
        if isinstance(lit, Var):
            model[lit.name] = True
    return model
