"""
Automatic driver for the interactive tableau.

The same pick-one-thing-and-act loop as a saturation prover, but every
move goes through the public Tableau commands, so the result is an
ordinary tableau a UI can display or keep editing. Moves on the leftmost
open leaf that can still progress, in this order:

    1. close the branch if it carries bot
    2. close the branch on the first contradictory pair
    3. reduce the first formula on the branch (root first, slot order)
       that is reducible and not yet applied on this leaf

When no open leaf can progress the tableau is saturated: any remaining
open branch describes a model of the root formula.
"""

from typing import Callable, Optional

from .formula import Bot, reducible, is_contradiction_pair
from .tableau import Tableau


def _close_move(tableau: Tableau, path: str):
    branch = tableau.branch(path)
    for idx, f in branch:
        if isinstance(f, Bot):
            return tableau.close_branch_with_bot(idx), {
                "action": "close", "path": path, "indices": (idx,),
            }
    for i, (idx1, f1) in enumerate(branch):
        for idx2, f2 in branch[i + 1:]:
            if is_contradiction_pair(f1, f2):
                return tableau.close_branch_with_contradiction(idx1, idx2), {
                    "action": "close", "path": path, "indices": (idx1, idx2),
                }
    return None


def _reduce_move(tableau: Tableau, path: str):
    leaf = tableau.tableau_at(path)
    for idx, f in tableau.branch(path):
        if reducible(f) and idx not in leaf.applied:
            return tableau.reduce_formula(idx, path), {
                "action": "reduce", "path": path, "indices": (idx,),
            }
    return None


def tableau_step(tableau: Tableau, verbose: bool = False):
    """
    Make one move. Returns (new_tableau, move) where move is a dict
    describing what happened, or (tableau, None) if saturated or closed.
    """
    for path in tableau.open_leaves():
        move = _close_move(tableau, path) or _reduce_move(tableau, path)
        if move is None:
            continue
        new_tableau, info = move
        if verbose:
            formulas = ", ".join(str(tableau.formula_at(i)) for i in info["indices"])
            print(f"  [{info['action']}] {formulas} on branch {path or 'root'!r}")
        return new_tableau, info
    return tableau, None


def run_tableau(
    tableau: Tableau,
    max_steps: int = 1000,
    stop_fn: Optional[Callable] = None,
    verbose: bool = False,
) -> Tableau:
    """
    Step until the tableau closes, saturates, stop_fn(tableau) is true,
    or max_steps moves have been made.

    Run on the tableau for ~A, the root closes exactly when A is a
    tautology (given enough steps).
    """
    for step in range(1, max_steps + 1):
        if tableau.is_closed:
            break
        if stop_fn and stop_fn(tableau):
            break
        if verbose:
            print(f"--- Step {step} ---")
        tableau, move = tableau_step(tableau, verbose=verbose)
        if move is None:
            if verbose:
                print(f"  Saturated with {len(tableau.open_leaves())} open branch(es)")
            break
    if verbose and tableau.is_closed:
        print("  Closed: every branch is contradictory")
    return tableau
