"""
Random formulas and random tautologies.

random_formula builds a tree of exactly the requested depth: every
internal node is And, Or, Implies or Not with equal probability, and every
leaf sits at depth 0. Leaves are drawn uniformly from bot, top and the
variable indices 0..var_bound-1 (or from the variables alone with
no_constants). The indices actually used are then renamed densely
starting from "p": p, q, r, ..., z, a, ..., o, p', q', ...

Pass rng (a random.Random) for reproducible output.
"""

import random
import string
from typing import Optional

from ..core.formula import Formula, Var, Not, And, Or, Implies, Bot, Top, BINARY
from .solver import is_tautology


ALPHABET = string.ascii_lowercase


def variable_name(k: int, start: str = "p") -> str:
    """
    The k-th canonical variable name. Cycles through the alphabet from
    start, adding one tick mark per full cycle.
    """
    offset = ALPHABET.index(start)
    return ALPHABET[(offset + k) % len(ALPHABET)] + "'" * (k // len(ALPHABET))


def rename_variables(f: Formula, mapping: dict) -> Formula:
    if isinstance(f, Var):
        return Var(mapping.get(f.name, f.name))
    if isinstance(f, Not):
        return Not(rename_variables(f.arg, mapping))
    if isinstance(f, BINARY):
        return type(f)(rename_variables(f.left, mapping),
                       rename_variables(f.right, mapping))
    return f


def _sample(rng, var_bound, depth, no_constants, used):
    if depth == 0:
        if no_constants:
            k = rng.randrange(var_bound)
        else:
            r = rng.randrange(var_bound + 2)
            if r == 0:
                return Bot()
            if r == 1:
                return Top()
            k = r - 2
        used.add(k)
        return Var(str(k))
    r = rng.randrange(4)
    if r == 3:
        return Not(_sample(rng, var_bound, depth - 1, no_constants, used))
    left = _sample(rng, var_bound, depth - 1, no_constants, used)
    right = _sample(rng, var_bound, depth - 1, no_constants, used)
    return (And, Or, Implies)[r](left, right)


def random_formula(
    var_bound: int,
    depth: int,
    no_constants: bool = False,
    rng: Optional[random.Random] = None,
    start: str = "p",
) -> Formula:
    """
    A random formula of exactly the given depth over at most var_bound
    variables. Raises ValueError if no_constants is set and var_bound is 0.
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    if var_bound < 0:
        raise ValueError(f"var_bound must be non-negative, got {var_bound}")
    if no_constants and var_bound == 0:
        raise ValueError("no_constants requires at least one variable (var_bound >= 1)")
    rng = rng or random
    used = set()
    f = _sample(rng, var_bound, depth, no_constants, used)
    mapping = {str(k): variable_name(i, start) for i, k in enumerate(sorted(used))}
    return rename_variables(f, mapping)


def random_tautology(
    var_bound: int,
    depth: int,
    no_constants: bool = False,
    max_attempts: int = 1000,
    rng: Optional[random.Random] = None,
    verbose: bool = False,
) -> Optional[Formula]:
    """
    Sample up to max_attempts formulas and return the first tautology,
    or None if none turned up. None is an ordinary outcome, not an error.
    """
    for attempt in range(1, max_attempts + 1):
        f = random_formula(var_bound, depth, no_constants, rng)
        if is_tautology(f):
            if verbose:
                print(f"  Tautology found after {attempt} attempt(s): {f}")
            return f
    if verbose:
        print(f"  No tautology in {max_attempts} attempt(s)")
    return None
