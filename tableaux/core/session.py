"""
An interactive proof session.

Holds two independent tableaus: one for the formula itself and one for
its negation. swap() exchanges them, so the user can switch between
refuting ~A (to prove A) and refuting A (to prove ~A) without losing the
work done on either. Each command returns a new session; the history
records what was done, in the order it was done.
"""

from dataclasses import dataclass, field, replace

from .formula import Formula, Not
from .tableau import Tableau
from .engine import tableau_step


@dataclass(frozen=True)
class ProofSession:
    formula: Formula
    tableau: Tableau
    swap_tableau: Tableau
    is_negated: bool = False
    history: tuple = field(default=())

    @property
    def step(self) -> int:
        return len(self.history)

    @property
    def current_formula(self) -> Formula:
        """The formula at the root of the tableau being worked on."""
        return self.tableau.formulas[0]

    def swap(self) -> "ProofSession":
        return self._record(
            "swap", str(self.swap_tableau.formulas[0]),
            tableau=self.swap_tableau,
            swap_tableau=self.tableau,
            is_negated=not self.is_negated,
        )

    def reduce_formula(self, index: tuple, target: str) -> "ProofSession":
        t = self.tableau.reduce_formula(index, target)
        detail = f"{self.tableau.formula_at(index)} at {index} onto {target!r}"
        return self._record("reduce", detail, tableau=t)

    def close_branch_with_bot(self, index: tuple) -> "ProofSession":
        t = self.tableau.close_branch_with_bot(index)
        return self._record("close", f"bot at {index}", tableau=t)

    def close_branch_with_contradiction(self, index1: tuple, index2: tuple) -> "ProofSession":
        t = self.tableau.close_branch_with_contradiction(index1, index2)
        detail = (f"{self.tableau.formula_at(index1)} at {index1} against "
                  f"{self.tableau.formula_at(index2)} at {index2}")
        return self._record("close", detail, tableau=t)

    def auto_step(self, verbose: bool = False) -> "ProofSession":
        """Let the engine make one move. Returns self unchanged when saturated."""
        t, move = tableau_step(self.tableau, verbose=verbose)
        if move is None:
            return self
        formulas = ", ".join(str(self.tableau.formula_at(i)) for i in move["indices"])
        detail = f"{formulas} on branch {move['path']!r}"
        return self._record(move["action"], detail, tableau=t)

    def _record(self, action: str, detail: str, **changes) -> "ProofSession":
        updated = replace(self, **changes)
        entry = {
            "step": self.step + 1,
            "action": action,
            "detail": detail,
            "closed": updated.tableau.is_closed,
        }
        return replace(updated, history=self.history + (entry,))


def start_proof(formula: Formula) -> ProofSession:
    """A session working on formula, with the tableau for ~formula in reserve."""
    return ProofSession(
        formula=formula,
        tableau=Tableau.initial(formula),
        swap_tableau=Tableau.initial(Not(formula)),
    )
