from .errors import (
    TableauError, IndexOutOfBoundsError, InvalidPathError,
    TargetNotLeafError, AlreadyAppliedError, NotReducibleError,
    NotBotError, NotContradictionError, NotSameBranchError,
)
from .formula import (
    Formula, Var, Not, And, Or, Implies, Bot, Top,
    v, neg, conj, disj, implies, bot, top,
    eq_formula, variables, depth, evaluate,
    Reduction, CONJUNCTIVE, DISJUNCTIVE,
    reducible, reduce, is_contradiction_pair, pretty_string,
)
from .tableau import Tableau, initial_tableau, ancestors, on_same_branch
from .engine import tableau_step, run_tableau
from .session import ProofSession, start_proof
from .parser import FormulaSyntaxError, parse_formula

__all__ = [
    "TableauError", "IndexOutOfBoundsError", "InvalidPathError",
    "TargetNotLeafError", "AlreadyAppliedError", "NotReducibleError",
    "NotBotError", "NotContradictionError", "NotSameBranchError",
    "Formula", "Var", "Not", "And", "Or", "Implies", "Bot", "Top",
    "v", "neg", "conj", "disj", "implies", "bot", "top",
    "eq_formula", "variables", "depth", "evaluate",
    "Reduction", "CONJUNCTIVE", "DISJUNCTIVE",
    "reducible", "reduce", "is_contradiction_pair", "pretty_string",
    "Tableau", "initial_tableau", "ancestors", "on_same_branch",
    "tableau_step", "run_tableau",
    "ProofSession", "start_proof",
    "FormulaSyntaxError", "parse_formula",
]
