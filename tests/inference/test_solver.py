"""
Property-based and unit tests for the tautology decider.

Core claims:
    - is_tautology(f) agrees with the truth table of f
    - Countermodels really falsify f
    - The search expands the first reducible slot and the first disjunct first
"""

import random
from itertools import product

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tableaux.core.formula import Var, Not, And, Or, Implies, Bot, Top, evaluate, variables
from tableaux.inference.solver import (
    has_contradiction, first_reducible, find_open_branch,
    is_tautology, is_satisfiable, countermodel,
)
from tableaux.inference.sampling import random_formula


p, q, r = Var("p"), Var("q"), Var("r")

TRANSITIVITY = Implies(Implies(p, q), Implies(Implies(q, r), Implies(p, r)))


def truth_table_tautology(f) -> bool:
    names = sorted(variables(f))
    return all(
        evaluate(f, dict(zip(names, values)))
        for values in product([False, True], repeat=len(names))
    )


# ── Generators ───────────────────────────────────────────────────────────────

atoms = st.sampled_from(["p", "q", "r", "s", "t", "u"]).map(Var)

formulas = st.recursive(
    st.one_of(atoms, st.just(Bot()), st.just(Top())),
    lambda children: st.one_of(
        children.map(Not),
        st.tuples(children, children).map(lambda t: And(*t)),
        st.tuples(children, children).map(lambda t: Or(*t)),
        st.tuples(children, children).map(lambda t: Implies(*t)),
    ),
    max_leaves=14,
)


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestHasContradiction:
    def test_bot_anywhere(self):
        assert has_contradiction([p, q, Bot()])

    def test_complementary_pair(self):
        assert has_contradiction([q, Not(p), r, p])

    def test_consistent_literals(self):
        assert not has_contradiction([p, Not(q), Top()])

    def test_empty_branch(self):
        assert not has_contradiction([])

    def test_non_literal_pair(self):
        assert has_contradiction([And(p, q), Not(And(p, q))])


class TestFirstReducible:
    def test_finds_first_slot(self):
        assert first_reducible([p, Not(q), Or(p, q), And(p, q)]) == 2

    def test_all_literals(self):
        assert first_reducible([p, Not(q), Bot(), Top()]) is None


class TestIsTautology:
    @pytest.mark.parametrize("f", [
        TRANSITIVITY,
        Or(p, Not(p)),
        Implies(p, p),
        Top(),
        Not(Bot()),
        Implies(Bot(), p),
        Implies(And(p, q), p),
        Implies(p, Or(p, q)),
        Implies(Not(Not(p)), p),
        Or(Implies(p, q), Implies(q, p)),
        Implies(Implies(Implies(p, q), p), p),
    ])
    def test_tautologies(self, f):
        assert is_tautology(f)

    @pytest.mark.parametrize("f", [
        p,
        Bot(),
        Not(Top()),
        Implies(p, q),
        And(p, Not(p)),
        Implies(Or(p, q), p),
        Implies(Implies(p, q), Implies(q, p)),
    ])
    def test_non_tautologies(self, f):
        assert not is_tautology(f)


class TestSatisfiability:
    def test_satisfiable(self):
        assert is_satisfiable(p)
        assert is_satisfiable(Implies(p, q))
        assert is_satisfiable(Top())

    def test_unsatisfiable(self):
        assert not is_satisfiable(And(p, Not(p)))
        assert not is_satisfiable(Bot())
        assert not is_satisfiable(Not(TRANSITIVITY))


class TestFindOpenBranch:
    def test_first_disjunct_explored_first(self):
        assert find_open_branch([Or(p, q)]) == [p]

    def test_closed_first_disjunct_falls_through(self):
        assert find_open_branch([Not(p), Or(p, q)]) == [Not(p), q]

    def test_conjuncts_spliced_in_place(self):
        assert find_open_branch([r, And(p, q), Not(r)]) is None
        assert find_open_branch([Top(), And(p, q), Not(r)]) == [Top(), p, q, Not(r)]

    def test_does_not_mutate_input(self):
        start = [And(p, q)]
        find_open_branch(start)
        assert start == [And(p, q)]

    def test_all_closed(self):
        assert find_open_branch([And(Or(p, q), And(Not(p), Not(q)))]) is None


class TestCountermodel:
    def test_tautology_has_none(self):
        assert countermodel(TRANSITIVITY) is None

    def test_implication(self):
        assert countermodel(Implies(p, q)) == {"p": True, "q": False}

    def test_unconstrained_variables_default_false(self):
        model = countermodel(Or(p, And(q, Not(q))))
        assert model == {"p": False, "q": False}

    def test_constant_formula(self):
        assert countermodel(Bot()) == {}


# ── Property-based tests ─────────────────────────────────────────────────────

class TestSolverProperties:

    @given(formulas)
    @settings(max_examples=200, deadline=None)
    def test_agrees_with_truth_table(self, f):
        assert is_tautology(f) == truth_table_tautology(f)

    @given(formulas)
    @settings(max_examples=100, deadline=None)
    def test_countermodel_falsifies(self, f):
        model = countermodel(f)
        if model is None:
            assert truth_table_tautology(f)
        else:
            assert not evaluate(f, model)

    @given(formulas)
    @settings(max_examples=100, deadline=None)
    def test_satisfiable_iff_negation_not_tautology(self, f):
        assert is_satisfiable(f) == (not is_tautology(Not(f)))

    @given(st.integers(min_value=0, max_value=2**32 - 1),
           st.integers(min_value=0, max_value=4))
    @settings(max_examples=100, deadline=None)
    def test_agrees_on_generated_formulas(self, seed, d):
        f = random_formula(4, d, rng=random.Random(seed))
        assert is_tautology(f) == truth_table_tautology(f)
