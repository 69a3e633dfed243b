"""
Tableaux: semantic tableaux for propositional logic.

Two ways to use the same rules:
    - interactively, through the immutable Tableau: reduce one formula
      onto one branch at a time, close branches by pointing at bot or at
      a contradictory pair, and keep every earlier state around;
    - automatically, through is_tautology: a flat depth-first search that
      expands ~A completely and checks that every branch closes.

Usage:
    python -m tableaux --formula "(p -> q) -> (q -> r) -> p -> r"
    python -m tableaux --random --vars 3 --depth 3 --seed 7
    python -m tableaux --formula "p | ~p" --negate --dot proof.dot
"""

from .core.errors import (
    TableauError, IndexOutOfBoundsError, InvalidPathError,
    TargetNotLeafError, AlreadyAppliedError, NotReducibleError,
    NotBotError, NotContradictionError, NotSameBranchError,
)
from .core.formula import (
    Formula, Var, Not, And, Or, Implies, Bot, Top,
    eq_formula, reducible, reduce, is_contradiction_pair, pretty_string,
)
from .core.tableau import Tableau, initial_tableau
from .core.engine import tableau_step, run_tableau
from .core.session import ProofSession, start_proof
from .core.parser import FormulaSyntaxError, parse_formula
from .inference.solver import is_tautology, is_satisfiable, countermodel
from .inference.sampling import random_formula, random_tautology

__all__ = [
    "TableauError", "IndexOutOfBoundsError", "InvalidPathError",
    "TargetNotLeafError", "AlreadyAppliedError", "NotReducibleError",
    "NotBotError", "NotContradictionError", "NotSameBranchError",
    "Formula", "Var", "Not", "And", "Or", "Implies", "Bot", "Top",
    "eq_formula", "reducible", "reduce", "is_contradiction_pair", "pretty_string",
    "Tableau", "initial_tableau",
    "tableau_step", "run_tableau",
    "ProofSession", "start_proof",
    "FormulaSyntaxError", "parse_formula",
    "is_tautology", "is_satisfiable", "countermodel",
    "random_formula", "random_tautology",
]
